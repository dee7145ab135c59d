"""
AES-256-GCM Encryption Service

This module implements the encrypt/decrypt protocol on top of the AEAD
engine. Each encryption draws its own random nonce and returns it bound
to the ciphertext in an EncryptedEnvelope, so callers never choose,
store separately, or reuse nonces.

Associated data is never used: every call authenticates with empty AAD.
"""

import logging
from typing import Optional, Union

from ..cipher_core import aead_decrypt, aead_encrypt
from ..config import ASSOCIATED_DATA, NONCE_SIZE
from ..encoding import decode, encode
from ..errors import (
    AuthenticationFailed,
    EncryptionFailed,
    InvalidNonceLength,
)
from ..key_schedule import Key
from ..nonce import NonceGenerator
from .envelope import EncryptedEnvelope, Plaintext, PlaintextInput

logger = logging.getLogger(__name__)


class AES256GCM:
    """
    Stateless AES-256-GCM encryption service.

    Instances hold only their nonce generator and can be shared freely
    between threads.
    """

    def __init__(self, nonce_generator: Optional[NonceGenerator] = None):
        """
        Args:
            nonce_generator: Source of nonces (default: secure random)
        """
        self.nonce_generator = nonce_generator or NonceGenerator()

    def encrypt(self,
                key: Key,
                plaintext: Union[Plaintext, PlaintextInput]) -> EncryptedEnvelope:
        """
        Encrypt a message under a fresh random nonce.
        
        Args:
            key: The encryption key
            plaintext: Plaintext, text or bytes to encrypt
            
        Returns:
            Envelope holding the base64 nonce and ciphertext-with-tag
            
        Raises:
            RandomnessSourceFailure: If no nonce could be generated
            EncryptionFailed: If the AEAD engine fails
        """
        if not isinstance(plaintext, Plaintext):
            plaintext = Plaintext(plaintext)

        material = key.as_bytes()
        nonce = self.nonce_generator.generate()
        try:
            ciphertext = aead_encrypt(material, nonce, plaintext.data, ASSOCIATED_DATA)
        except Exception as e:
            logger.error("AEAD engine failed during encryption: %s", type(e).__name__)
            raise EncryptionFailed("encryption failure!") from e

        logger.debug("Encrypted %d bytes", len(plaintext))
        return EncryptedEnvelope(iv=encode(nonce), encrypted=encode(ciphertext))

    def decrypt(self, key: Key, envelope: EncryptedEnvelope) -> Plaintext:
        """
        Verify and decrypt an envelope.
        
        Args:
            key: The key the envelope was encrypted under
            envelope: Envelope returned by encrypt()
            
        Returns:
            The recovered plaintext
            
        Raises:
            InvalidEncoding: If either field is not valid base64
            InvalidNonceLength: If the iv does not decode to 12 bytes
            AuthenticationFailed: If the tag does not verify
        """
        nonce = decode(envelope.iv)
        ciphertext = decode(envelope.encrypted)
        if len(nonce) != NONCE_SIZE:
            raise InvalidNonceLength(f"Please provide a {NONCE_SIZE}-bytes iv")

        try:
            data = aead_decrypt(key.as_bytes(), nonce, ciphertext, ASSOCIATED_DATA)
        except AuthenticationFailed:
            logger.warning("Envelope failed authentication")
            raise

        logger.debug("Decrypted %d bytes", len(data))
        return Plaintext(data)

    def decrypt_text(self, key: Key, envelope: EncryptedEnvelope) -> str:
        """
        Decrypt an envelope and decode the result as UTF-8.
        
        Raises:
            DecryptionError: As for decrypt()
            InvalidUtf8: If the plaintext is not valid UTF-8
        """
        return self.decrypt(key, envelope).text()


_default_service = AES256GCM()


def encrypt(key: Key, plaintext: Union[Plaintext, PlaintextInput]) -> EncryptedEnvelope:
    """Encrypt with the default service. See AES256GCM.encrypt()."""
    return _default_service.encrypt(key, plaintext)


def decrypt(key: Key, envelope: EncryptedEnvelope) -> Plaintext:
    """Decrypt with the default service. See AES256GCM.decrypt()."""
    return _default_service.decrypt(key, envelope)


def decrypt_text(key: Key, envelope: EncryptedEnvelope) -> str:
    """Decrypt with the default service. See AES256GCM.decrypt_text()."""
    return _default_service.decrypt_text(key, envelope)


LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Curabitur sodales "
    "diam sagittis, dignissim est at, vehicula mi. Sed placerat sollicitudin "
    "sollicitudin. Donec et cursus sapien. Morbi bibendum, dui non fringilla "
    "mattis, nisi libero iaculis lectus, eget tincidunt est dui eu lorem. "
    "Praesent vitae enim nec sapien maximus porttitor non in risus."
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    key = Key("12345678901234567890123456789012")
    plaintext = Plaintext(LOREM_IPSUM)

    envelope = encrypt(key, plaintext)

    print(f"PLAIN TEXT: {plaintext}\n")
    print(f"IV: {envelope.iv}\n")
    print(f"ENCRYPTED: {envelope.encrypted}\n")

    decrypted = decrypt(key, envelope)
    print(f"DECRYPTED: {decrypted}\n")
    assert decrypted == plaintext

    # Tampered ciphertext must be rejected
    tampered = bytearray(decode(envelope.encrypted))
    tampered[0] ^= 0x01
    try:
        decrypt(key, EncryptedEnvelope(iv=envelope.iv, encrypted=encode(bytes(tampered))))
        print("ERROR: Tampered ciphertext not detected!")
    except AuthenticationFailed as e:
        print(f"Correctly detected tampered ciphertext: {e}")
