"""
Authenticated Encryption Package

This package implements the AES-256-GCM encryption service and the
plaintext and envelope values it consumes and produces.
"""

from .envelope import EncryptedEnvelope, Plaintext
from .gcm_mode import AES256GCM, encrypt, decrypt, decrypt_text

__all__ = ['AES256GCM', 'EncryptedEnvelope', 'Plaintext', 'encrypt', 'decrypt', 'decrypt_text']
