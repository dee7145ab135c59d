"""
Cipher Core Package

This package adapts the AES-256-GCM primitive from pycryptodomex to the
AEAD engine contract used by the encryption service: ciphertext and tag
travel as one byte string.
"""

from .aes_gcm import aead_encrypt, aead_decrypt

__all__ = ['aead_encrypt', 'aead_decrypt']
