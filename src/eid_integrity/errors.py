"""Errors raised by the integrity checks."""


class IntegrityError(Exception):
    """Base class for every loud verification failure."""


class MissingSignature(IntegrityError):
    pass


class SignatureMismatch(IntegrityError):
    pass


class MalformedRawSignature(IntegrityError):
    pass


class UnknownDigestSize(IntegrityError):
    def __init__(self, size):
        super().__init__(f"no digest algorithm produces {size} bytes")
        self.size = size


class PhotoIntegrityError(IntegrityError):
    pass


class MalformedCertificate(IntegrityError):
    pass


class CryptoEngineUnavailable(IntegrityError):
    pass


class RecordParseError(IntegrityError):
    pass
