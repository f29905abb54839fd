"""Digest algorithm lookup by output length."""

from .config import DIGEST_SIZES
from .errors import UnknownDigestSize
from .provider import default_provider


def resolve_digest_algorithm(size):
    """Return the digest name whose output is ``size`` bytes long."""
    try:
        return DIGEST_SIZES[size]
    except KeyError:
        raise UnknownDigestSize(size) from None


def digest(algorithm, *chunks, provider=None):
    """Digest the concatenation of ``chunks``."""
    provider = provider or default_provider()
    return provider.digest(algorithm, chunks)
