"""Conversion of raw ``R || S`` EC signatures to their DER form."""

from asn1crypto import core

from .errors import MalformedRawSignature, MissingSignature


# Ecdsa-Sig-Value ::= SEQUENCE { r INTEGER, s INTEGER }
class EcdsaSigValue(core.Sequence):
    _fields = [
        ('r', core.Integer),
        ('s', core.Integer),
    ]


def to_der_signature(raw_signature):
    """Convert a fixed-width raw EC signature into a DER Ecdsa-Sig-Value.

    The card emits ``R`` and ``S`` as two unsigned big-endian integers of
    equal width, back to back. The DER INTEGER encoding is signed, so a
    half whose top bit is set gets a leading zero byte.
    """
    if raw_signature is None:
        raise MissingSignature("missing raw EC signature")
    if not raw_signature or len(raw_signature) % 2:
        raise MalformedRawSignature(
            f"raw EC signature length must be even and non-zero, got {len(raw_signature)}")

    half = len(raw_signature) // 2
    r = int.from_bytes(raw_signature[:half], "big")
    s = int.from_bytes(raw_signature[half:], "big")
    return EcdsaSigValue({'r': r, 's': s}).dump()
