"""Integrity checks for identity, address and photo files read from the card.

Every file is checked against the issuer certificate before any of its
bytes reach a parser. The address signature covers the address content
followed by the identity signature, which ties an address to one identity
signing event.
"""

import logging

from .certificate import CertificateContext, KeyType
from .digests import resolve_digest_algorithm
from .ec_signature import to_der_signature
from .errors import IntegrityError, PhotoIntegrityError, SignatureMismatch
from .nonrep import NonRepudiationVerifier
from .provider import default_provider
from .signature import SignatureVerifier
from .tlv import parse_record, read_photo_digest

logger = logging.getLogger(__name__)


def trim_right(address_data):
    """Cut the address file at its first zero byte (start of the fill area)."""
    data = bytes(address_data)
    end = data.find(b"\x00")
    if end < 0:
        return data
    return data[:end]


class RecordIntegrityChecker:

    def __init__(self, provider=None, identity_parser=parse_record,
                 address_parser=parse_record, photo_digest_reader=read_photo_digest):
        self.provider = provider or default_provider()
        self.signatures = SignatureVerifier(self.provider)
        self.non_repudiation = NonRepudiationVerifier(self.provider)
        self.certificates = CertificateContext()
        self.identity_parser = identity_parser
        self.address_parser = address_parser
        self.photo_digest_reader = photo_digest_reader

    def load_certificate(self, encoded):
        return self.certificates.load_certificate(encoded)

    def verify_identity(self, identity_data, identity_signature, certificate):
        """Return ``identity_data`` once its signature checks out.

        Raises :class:`SignatureMismatch` if the signature does not match.
        """
        result = self.signatures.verify(
            identity_signature, certificate.public_key, identity_data,
            algorithm=certificate.signature_algorithm)
        if not result:
            raise SignatureMismatch("identity signature integrity error")
        logger.debug("identity signature verified")
        return identity_data

    def verify_identity_with_photo(self, identity_data, identity_signature, photo, certificate):
        """As :meth:`verify_identity`, then check ``photo`` against the embedded digest.

        The digest algorithm is implied by the length of the embedded digest.
        """
        if not photo:
            raise PhotoIntegrityError("missing photo")
        self.verify_identity(identity_data, identity_signature, certificate)

        expected = self.photo_digest_reader(identity_data)
        algorithm = resolve_digest_algorithm(len(expected))
        actual = self.provider.digest(algorithm, [photo])
        if actual != expected:
            raise PhotoIntegrityError(f"photo digest mismatch ({algorithm})")
        logger.debug("photo %s digest verified", algorithm)
        return identity_data

    def verify_address(self, address_data, identity_signature, address_signature, certificate):
        """Return the untrimmed ``address_data`` once its chained signature checks out."""
        trimmed = trim_right(address_data)
        result = self.signatures.verify(
            address_signature, certificate.public_key, trimmed, identity_signature,
            algorithm=certificate.signature_algorithm)
        if not result:
            raise SignatureMismatch("address signature integrity error")
        logger.debug("address signature verified (%d of %d bytes signed)",
                     len(trimmed), len(address_data))
        return address_data

    def get_verified_identity(self, identity_data, identity_signature, certificate, photo=None):
        if photo is None:
            verified = self.verify_identity(identity_data, identity_signature, certificate)
        else:
            verified = self.verify_identity_with_photo(
                identity_data, identity_signature, photo, certificate)
        return self.identity_parser(verified)

    def get_verified_address(self, address_data, identity_signature, address_signature, certificate):
        verified = self.verify_address(
            address_data, identity_signature, address_signature, certificate)
        return self.address_parser(verified)

    def verify_authn_signature(self, to_be_signed, signature_value, certificate):
        """Check a signature made with the card's authentication key.

        EC cards return a raw ``R || S`` signature, converted to DER here.
        Never raises; problems are logged and reported as False.
        """
        try:
            if certificate.key_type is KeyType.EC:
                signature_value = to_der_signature(signature_value)
            return self.signatures.verify(signature_value, certificate.public_key, to_be_signed)
        except (IntegrityError, ValueError) as exc:
            logger.warning("authentication signature not verifiable: %s", exc)
            return False

    def verify_non_repudiation_signature(self, expected_digest, signature_value, certificate):
        return self.non_repudiation.verify(expected_digest, signature_value, certificate)
