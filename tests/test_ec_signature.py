import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature

from eid_integrity import MalformedRawSignature, MissingSignature, to_der_signature

from conftest import raw_ec_signature


MESSAGE = b"challenge from the relying party"


def raw_signature(key, message=MESSAGE):
    der = key.sign(message, ec.ECDSA(hashes.SHA256()))
    return raw_ec_signature(der)


def test_matches_cryptography_encoding():
    r = int.from_bytes(bytes(range(1, 33)), "big")
    s = int.from_bytes(bytes(range(33, 65)), "big")
    raw = r.to_bytes(32, "big") + s.to_bytes(32, "big")
    assert to_der_signature(raw) == encode_dss_signature(r, s)


def test_top_bit_gets_leading_zero():
    raw = b"\x80" + b"\x11" * 31 + b"\xff" * 32
    der = to_der_signature(raw)
    r, s = decode_dss_signature(der)
    assert r == int.from_bytes(raw[:32], "big")
    assert s == int.from_bytes(raw[32:], "big")
    # SEQUENCE { INTEGER 00 80.., INTEGER 00 ff.. }
    assert der[2:5] == b"\x02\x21\x00"
    assert der == encode_dss_signature(r, s)


def test_leading_zero_bytes_are_dropped():
    raw = b"\x00\x00\x01" + b"\x00" * 29 + b"\x00" * 31 + b"\x05"
    r, s = decode_dss_signature(to_der_signature(raw))
    assert r == int.from_bytes(raw[:32], "big")
    assert s == 5


def test_round_trip_verifies_including_high_bits(ec_key):
    public_key = ec_key.public_key()
    seen_high_r = seen_low_r = False
    for _ in range(64):
        raw = raw_signature(ec_key)
        assert len(raw) == 64
        public_key.verify(to_der_signature(raw), MESSAGE, ec.ECDSA(hashes.SHA256()))
        if raw[0] & 0x80:
            seen_high_r = True
        else:
            seen_low_r = True
        if seen_high_r and seen_low_r:
            break
    assert seen_high_r and seen_low_r


@pytest.mark.parametrize("raw", [b"\x01", b"\x01" * 63, b"\x02" * 65])
def test_odd_length_rejected(raw):
    with pytest.raises(MalformedRawSignature):
        to_der_signature(raw)


def test_empty_and_missing():
    with pytest.raises(MalformedRawSignature):
        to_der_signature(b"")
    with pytest.raises(MissingSignature):
        to_der_signature(None)
