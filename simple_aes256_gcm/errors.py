"""
Error Types

Every failure raised by the package derives from AesGcmError. Failures
that can come out of decryption share the DecryptionError base so callers
can treat them as a single opaque outcome.
"""


class AesGcmError(Exception):
    """Base class for all errors raised by simple_aes256_gcm."""


class InvalidKeyLength(AesGcmError, ValueError):
    """Raised when key material is not exactly 32 bytes."""


class KeyNotConfigured(AesGcmError, LookupError):
    """Raised when no key is present in the configured environment variable."""


class DecryptionError(AesGcmError, ValueError):
    """Raised when an envelope cannot be turned back into trusted plaintext."""


class InvalidEncoding(DecryptionError):
    """Raised when text is not valid canonical base64 or not an envelope."""


class InvalidNonceLength(DecryptionError):
    """Raised when a nonce does not decode to exactly 12 bytes."""


class AuthenticationFailed(DecryptionError):
    """Raised when the GCM authentication tag does not verify."""

    def __init__(self, message: str = "Decryption error"):
        super().__init__(message)


class InvalidUtf8(AesGcmError, ValueError):
    """Raised when decrypted bytes are requested as text but are not UTF-8."""


class RandomnessSourceFailure(AesGcmError, RuntimeError):
    """Raised when the secure random source fails. Never recovered from."""


class EncryptionFailed(AesGcmError, RuntimeError):
    """Raised when the AEAD engine fails during encryption."""
