"""Fixed tables and defaults."""

from cryptography.x509.oid import SignatureAlgorithmOID

# Digest size (bytes) -> digest name
DIGEST_SIZES = {
    20: "SHA-1",
    28: "SHA-224",
    32: "SHA-256",
    48: "SHA-384",
    64: "SHA-512",
}

DEFAULT_EC_SIGNATURE_ALGORITHM = "SHA256withECDSA"
DEFAULT_RSA_SIGNATURE_ALGORITHM = "SHA1withRSA"

# Signature algorithm names by certificate signature OID
SIGNATURE_ALGORITHM_NAMES = {
    SignatureAlgorithmOID.RSA_WITH_SHA1: "SHA1withRSA",
    SignatureAlgorithmOID.RSA_WITH_SHA224: "SHA224withRSA",
    SignatureAlgorithmOID.RSA_WITH_SHA256: "SHA256withRSA",
    SignatureAlgorithmOID.RSA_WITH_SHA384: "SHA384withRSA",
    SignatureAlgorithmOID.RSA_WITH_SHA512: "SHA512withRSA",
    SignatureAlgorithmOID.ECDSA_WITH_SHA1: "SHA1withECDSA",
    SignatureAlgorithmOID.ECDSA_WITH_SHA224: "SHA224withECDSA",
    SignatureAlgorithmOID.ECDSA_WITH_SHA256: "SHA256withECDSA",
    SignatureAlgorithmOID.ECDSA_WITH_SHA384: "SHA384withECDSA",
    SignatureAlgorithmOID.ECDSA_WITH_SHA512: "SHA512withECDSA",
}

# Identity file TLV tag holding the photo digest
PHOTO_DIGEST_TAG = 17

# Default dump file names, as written by the card reader tools
IDENTITY_FILE = "identity.bin"
IDENTITY_SIGNATURE_FILE = "identity_sig.bin"
ADDRESS_FILE = "address.bin"
ADDRESS_SIGNATURE_FILE = "address_sig.bin"
PHOTO_FILE = "photo.jpg"
