"""Signature-chain verification for electronic identity card files."""

from .certificate import CertificateContext, IssuerCertificate, KeyType
from .digests import digest, resolve_digest_algorithm
from .ec_signature import to_der_signature
from .errors import (
    CryptoEngineUnavailable,
    IntegrityError,
    MalformedCertificate,
    MalformedRawSignature,
    MissingSignature,
    PhotoIntegrityError,
    RecordParseError,
    SignatureMismatch,
    UnknownDigestSize,
)
from .integrity import RecordIntegrityChecker, trim_right
from .nonrep import NonRepudiationVerifier
from .provider import CryptographyProvider, CryptoProvider
from .signature import SignatureVerifier
from .tlv import TlvRecord, parse_record, read_photo_digest

__version__ = "0.1.0"

__all__ = [
    "CertificateContext",
    "CryptoEngineUnavailable",
    "CryptoProvider",
    "CryptographyProvider",
    "IntegrityError",
    "IssuerCertificate",
    "KeyType",
    "MalformedCertificate",
    "MalformedRawSignature",
    "MissingSignature",
    "NonRepudiationVerifier",
    "PhotoIntegrityError",
    "RecordIntegrityChecker",
    "RecordParseError",
    "SignatureMismatch",
    "SignatureVerifier",
    "TlvRecord",
    "UnknownDigestSize",
    "digest",
    "parse_record",
    "read_photo_digest",
    "resolve_digest_algorithm",
    "to_der_signature",
    "trim_right",
]
