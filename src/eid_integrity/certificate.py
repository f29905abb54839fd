"""Issuer certificate decoding."""

import enum
import logging

from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.x509 import load_der_x509_certificate, load_pem_x509_certificate

from .config import SIGNATURE_ALGORITHM_NAMES
from .errors import MalformedCertificate

logger = logging.getLogger(__name__)


class KeyType(enum.Enum):
    RSA = "RSA"
    EC = "EC"


def key_type_of(public_key):
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        return KeyType.EC
    if isinstance(public_key, rsa.RSAPublicKey):
        return KeyType.RSA
    raise MalformedCertificate(f"unsupported public key type: {type(public_key).__name__}")


class IssuerCertificate:
    """Read-only view of a trusted issuer certificate."""

    def __init__(self, certificate):
        self.certificate = certificate
        self.public_key = certificate.public_key()
        self.key_type = key_type_of(self.public_key)

        oid = certificate.signature_algorithm_oid
        self.signature_algorithm = SIGNATURE_ALGORITHM_NAMES.get(oid, oid.dotted_string)

    @property
    def subject(self):
        return self.certificate.subject

    def __repr__(self):
        return (f"IssuerCertificate(subject={self.subject.rfc4514_string()!r}, "
                f"key_type={self.key_type.value}, "
                f"signature_algorithm={self.signature_algorithm!r})")


class CertificateContext:
    """Decodes issuer certificates. Build one and reuse it across calls."""

    def load_certificate(self, encoded):
        """Decode a DER (or PEM) X.509 certificate into an :class:`IssuerCertificate`."""
        if not encoded:
            raise MalformedCertificate("empty certificate buffer")
        try:
            if b"-----BEGIN CERTIFICATE-----" in encoded:
                certificate = load_pem_x509_certificate(encoded)
            else:
                certificate = load_der_x509_certificate(encoded)
        except ValueError as exc:
            raise MalformedCertificate(f"X.509 decoding error: {exc}") from exc

        issuer = IssuerCertificate(certificate)
        logger.debug("loaded %r", issuer)
        return issuer
