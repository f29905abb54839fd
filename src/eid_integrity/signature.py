"""Signature verification over one or more chained buffers."""

import logging

from cryptography.hazmat.primitives.asymmetric import ec

from .config import DEFAULT_EC_SIGNATURE_ALGORITHM, DEFAULT_RSA_SIGNATURE_ALGORITHM
from .errors import MissingSignature
from .provider import default_provider

logger = logging.getLogger(__name__)


class SignatureVerifier:

    def __init__(self, provider=None):
        self.provider = provider or default_provider()

    def default_algorithm(self, public_key):
        logger.debug("public key algorithm: %s", type(public_key).__name__)
        if isinstance(public_key, ec.EllipticCurvePublicKey):
            return DEFAULT_EC_SIGNATURE_ALGORITHM
        return DEFAULT_RSA_SIGNATURE_ALGORITHM

    def verify(self, signature, public_key, *data, algorithm=None):
        """Check ``signature`` over the ordered concatenation of ``data``.

        ``algorithm`` overrides the choice made from the key type (ECDSA with
        SHA-256 for EC keys, SHA-1 with RSA otherwise). Returns False for a
        signature that does not match; raises :class:`MissingSignature` when
        there is nothing to check and :class:`CryptoEngineUnavailable` when
        the algorithm cannot be used with this key.
        """
        if not signature:
            raise MissingSignature("missing signature data")
        if algorithm is None:
            algorithm = self.default_algorithm(public_key)
        return self.provider.verify(algorithm, signature, public_key, data)
