"""Non-repudiation signature check by raw RSA recovery of the DigestInfo."""

import logging

from asn1crypto import algos, core

from .provider import default_provider

logger = logging.getLogger(__name__)


# DigestInfo ::= SEQUENCE { digestAlgorithm AlgorithmIdentifier, digest OCTET STRING }
class DigestInfo(core.Sequence):
    _fields = [
        ('digest_algorithm', algos.DigestAlgorithm),
        ('digest', core.OctetString),
    ]


class NonRepudiationVerifier:
    """Checks a signature made with the card's non-repudiation key.

    The caller supplies the digest it expects. The digest algorithm named
    inside the recovered DigestInfo is ignored. Never raises: any failure is
    logged and reported as False.
    """

    def __init__(self, provider=None):
        self.provider = provider or default_provider()

    def recover_digest(self, signature_value, certificate):
        block = self.provider.raw_rsa_transform(certificate.public_key, signature_value)
        digest_info = DigestInfo.load(block, strict=True)
        return digest_info['digest'].native

    def verify(self, expected_digest, signature_value, certificate):
        try:
            if not expected_digest or not signature_value:
                raise ValueError("missing digest or signature value")
            actual_digest = self.recover_digest(signature_value, certificate)
        except Exception as exc:
            logger.warning("non-repudiation signature not verifiable: %s", exc)
            return False
        # TODO: switch to hmac.compare_digest if the digest is ever treated as secret
        return actual_digest == expected_digest
