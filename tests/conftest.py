import datetime
import hashlib

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature
from cryptography.x509.oid import NameOID

from eid_integrity import CertificateContext, CryptographyProvider


PHOTO = b"\xff\xd8\xff\xe0" + bytes(range(256)) * 8 + b"\xff\xd9"


def encode_field(tag, value):
    """One card-file TLV field: tag, 7-bit grouped length, value."""
    length = len(value)
    groups = [length & 0x7F]
    length >>= 7
    while length:
        groups.append((length & 0x7F) | 0x80)
        length >>= 7
    return bytes([tag]) + bytes(reversed(groups)) + bytes(value)


def raw_ec_signature(der_signature, width=32):
    """DER ECDSA signature -> fixed-width ``R || S``, as the card returns it."""
    r, s = decode_dss_signature(der_signature)
    return r.to_bytes(width, "big") + s.to_bytes(width, "big")


def make_certificate(private_key, hash_algo=None, common_name="Test RRN"):
    """Self-signed DER certificate for ``private_key``."""
    name = x509.Name([
        x509.NameAttribute(NameOID.COUNTRY_NAME, "BE"),
        x509.NameAttribute(NameOID.COMMON_NAME, common_name),
    ])
    now = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(1000)
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=3650))
        .sign(private_key, hash_algo or hashes.SHA256())
    )
    return certificate.public_bytes(serialization.Encoding.DER)


def make_identity(photo=PHOTO, digest=hashlib.sha256):
    fields = [
        (1, b"B123456789"),
        (3, b"01.01.2024"),
        (4, b"01.01.2034"),
        (5, b"Brussel"),
        (6, b"85010112345"),
        (7, b"Peeters"),
        (8, b"Jan Maria"),
        (10, b"Antwerpen"),
        (12, b"01 JAN 1985"),
        (13, b"M"),
        (17, digest(photo).digest()),
    ]
    return b"".join(encode_field(tag, value) for tag, value in fields)


def make_address(size=None):
    content = b"".join([
        encode_field(1, b"Wetstraat 16 bus 301"),
        encode_field(2, b"1000"),
        encode_field(3, b"Brussel"),
    ])
    if size is None:
        return content
    return content + b"\x00" * (size - len(content))


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def other_rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def provider():
    return CryptographyProvider()


@pytest.fixture
def certificates():
    return CertificateContext()


@pytest.fixture
def rsa_certificate(rsa_key, certificates):
    return certificates.load_certificate(make_certificate(rsa_key))


@pytest.fixture
def ec_certificate(ec_key, certificates):
    return certificates.load_certificate(make_certificate(ec_key))


@pytest.fixture
def identity():
    return make_identity()


@pytest.fixture
def photo():
    return PHOTO
