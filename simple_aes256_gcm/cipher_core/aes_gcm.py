"""
AES-256-GCM Engine

This module wraps Cryptodome's AES in GCM mode. Encryption returns the
ciphertext with the 16-byte authentication tag appended; decryption
splits them again and refuses to return anything unless the tag verifies.
"""

from Cryptodome.Cipher import AES

from ..config import ASSOCIATED_DATA, KEY_SIZE, NONCE_SIZE, TAG_SIZE
from ..errors import AuthenticationFailed, InvalidKeyLength, InvalidNonceLength


def _new_cipher(key: bytes, nonce: bytes, aad: bytes):
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(f"Key must be exactly {KEY_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise InvalidNonceLength(f"Nonce must be exactly {NONCE_SIZE} bytes")

    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
    if aad:
        cipher.update(aad)
    return cipher


def aead_encrypt(key: bytes,
                 nonce: bytes,
                 plaintext: bytes,
                 aad: bytes = ASSOCIATED_DATA) -> bytes:
    """
    Encrypt and authenticate a message.
    
    Args:
        key: The 32-byte key
        nonce: The 12-byte nonce, never reused under the same key
        plaintext: The data to encrypt
        aad: Additional authenticated data
        
    Returns:
        Ciphertext followed by the authentication tag
    """
    cipher = _new_cipher(key, nonce, aad)
    ciphertext, tag = cipher.encrypt_and_digest(plaintext)
    return ciphertext + tag


def aead_decrypt(key: bytes,
                 nonce: bytes,
                 ciphertext_with_tag: bytes,
                 aad: bytes = ASSOCIATED_DATA) -> bytes:
    """
    Verify and decrypt a message produced by aead_encrypt().
    
    Args:
        key: The 32-byte key
        nonce: The nonce used during encryption
        ciphertext_with_tag: Ciphertext followed by the authentication tag
        aad: Additional authenticated data
        
    Returns:
        The plaintext, only if the tag verifies
        
    Raises:
        AuthenticationFailed: If the input is truncated or the tag does
            not match (tampering, wrong key or wrong nonce)
    """
    if len(ciphertext_with_tag) < TAG_SIZE:
        raise AuthenticationFailed()

    cipher = _new_cipher(key, nonce, aad)
    ciphertext = ciphertext_with_tag[:-TAG_SIZE]
    tag = ciphertext_with_tag[-TAG_SIZE:]
    try:
        return cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError:
        # MAC check failed
        raise AuthenticationFailed() from None
