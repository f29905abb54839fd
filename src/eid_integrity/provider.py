"""Cryptographic engine used by the verifiers.

Verification logic never touches the ``cryptography`` primitives directly:
it goes through a :class:`CryptoProvider`, so alternative engines (or test
fakes) can be injected. Engines are created per call and never shared.
"""

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa, utils

from .errors import CryptoEngineUnavailable

logger = logging.getLogger(__name__)

HASH_ALGORITHMS = {
    "SHA-1": hashes.SHA1,
    "SHA-224": hashes.SHA224,
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
}

RSA = "RSA"
RSA_PSS = "RSA-PSS"
ECDSA = "ECDSA"

# Signature algorithm name (upper-cased) -> (digest name, scheme)
SIGNATURE_ALGORITHMS = {
    "SHA1WITHRSA": ("SHA-1", RSA),
    "SHA224WITHRSA": ("SHA-224", RSA),
    "SHA256WITHRSA": ("SHA-256", RSA),
    "SHA384WITHRSA": ("SHA-384", RSA),
    "SHA512WITHRSA": ("SHA-512", RSA),
    "SHA256WITHRSAANDMGF1": ("SHA-256", RSA_PSS),
    "SHA384WITHRSAANDMGF1": ("SHA-384", RSA_PSS),
    "SHA512WITHRSAANDMGF1": ("SHA-512", RSA_PSS),
    "SHA1WITHECDSA": ("SHA-1", ECDSA),
    "SHA224WITHECDSA": ("SHA-224", ECDSA),
    "SHA256WITHECDSA": ("SHA-256", ECDSA),
    "SHA384WITHECDSA": ("SHA-384", ECDSA),
    "SHA512WITHECDSA": ("SHA-512", ECDSA),
}


def hash_algorithm(name):
    """Return a fresh ``cryptography`` hash instance for a digest name.

    Names are matched loosely: ``sha256``, ``SHA256`` and ``SHA-256`` are
    the same algorithm.
    """
    key = name.upper().replace("-", "")
    for known, algo_class in HASH_ALGORITHMS.items():
        if known.replace("-", "") == key:
            return algo_class()
    raise CryptoEngineUnavailable(f"unknown digest algorithm: {name}")


class CryptoProvider:
    """Capability set needed by the verifiers."""

    def sign(self, algorithm, private_key, chunks):
        raise NotImplementedError

    def verify(self, algorithm, signature, public_key, chunks):
        """Return True if ``signature`` matches, False if it does not."""
        raise NotImplementedError

    def digest(self, algorithm, chunks):
        raise NotImplementedError

    def raw_rsa_transform(self, public_key, signature):
        """Apply the RSA public exponent and strip PKCS#1 type 1 padding."""
        raise NotImplementedError


class CryptographyProvider(CryptoProvider):
    """:class:`CryptoProvider` backed by the ``cryptography`` package."""

    def _engine(self, algorithm, key, signing=False):
        try:
            digest_name, scheme = SIGNATURE_ALGORITHMS[algorithm.upper()]
        except (KeyError, AttributeError):
            raise CryptoEngineUnavailable(f"unsupported signature algorithm: {algorithm}") from None

        hash_algo = hash_algorithm(digest_name)
        if scheme == ECDSA:
            if not isinstance(key, (ec.EllipticCurvePublicKey, ec.EllipticCurvePrivateKey)):
                raise CryptoEngineUnavailable(f"{algorithm} needs an EC key")
            return hash_algo, None
        if not isinstance(key, (rsa.RSAPublicKey, rsa.RSAPrivateKey)):
            raise CryptoEngineUnavailable(f"{algorithm} needs an RSA key")
        if scheme == RSA_PSS:
            salt = hash_algo.digest_size if signing else padding.PSS.AUTO
            pad = padding.PSS(mgf=padding.MGF1(hash_algo), salt_length=salt)
        else:
            pad = padding.PKCS1v15()
        return hash_algo, pad

    def _hash_chunks(self, hash_algo, chunks):
        hasher = hashes.Hash(hash_algo)
        for chunk in chunks:
            hasher.update(chunk)
        return hasher.finalize()

    def sign(self, algorithm, private_key, chunks):
        hash_algo, pad = self._engine(algorithm, private_key, signing=True)
        prehashed = self._hash_chunks(hash_algo, chunks)
        if pad is None:
            return private_key.sign(prehashed, ec.ECDSA(utils.Prehashed(hash_algo)))
        return private_key.sign(prehashed, pad, utils.Prehashed(hash_algo))

    def verify(self, algorithm, signature, public_key, chunks):
        hash_algo, pad = self._engine(algorithm, public_key)
        logger.debug("verifying %s signature with %s key", algorithm, type(public_key).__name__)
        prehashed = self._hash_chunks(hash_algo, chunks)
        try:
            if pad is None:
                public_key.verify(signature, prehashed, ec.ECDSA(utils.Prehashed(hash_algo)))
            else:
                public_key.verify(signature, prehashed, pad, utils.Prehashed(hash_algo))
        except InvalidSignature:
            return False
        except UnsupportedAlgorithm as exc:
            raise CryptoEngineUnavailable(str(exc)) from exc
        return True

    def digest(self, algorithm, chunks):
        return self._hash_chunks(hash_algorithm(algorithm), chunks)

    def raw_rsa_transform(self, public_key, signature):
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise TypeError(f"raw RSA transform needs an RSA key, got {type(public_key).__name__}")

        numbers = public_key.public_numbers()
        size = (public_key.key_size + 7) // 8
        if len(signature) != size:
            raise ValueError(f"signature is {len(signature)} bytes, modulus is {size}")
        value = int.from_bytes(signature, "big")
        if value >= numbers.n:
            raise ValueError("signature representative out of range")
        block = pow(value, numbers.e, numbers.n).to_bytes(size, "big")

        # EB = 00 || 01 || FF .. FF || 00 || D, at least 8 bytes of FF
        if block[0] != 0x00 or block[1] != 0x01:
            raise ValueError("bad padding: block type is not 01")
        separator = block.find(b"\x00", 2)
        if separator < 10:
            raise ValueError("bad padding: padding string too short")
        if block[2:separator] != b"\xff" * (separator - 2):
            raise ValueError("bad padding: padding string is not all FF")
        return block[separator + 1:]


def default_provider():
    return CryptographyProvider()
