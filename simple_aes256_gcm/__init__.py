"""
simple_aes256_gcm - Misuse-Resistant AES-256-GCM Encryption

This library wraps AES-256 in Galois/Counter Mode behind a small
interface: build a Key, encrypt text or bytes, and get back an
EncryptedEnvelope of two base64 strings that is safe to store or
transmit. Decrypting the envelope either returns the original plaintext
or raises AuthenticationFailed.

Key Features:
- 256-bit keys validated at construction
- Fresh random 96-bit nonce for every encryption
- Nonce and ciphertext bound together in one envelope
- Standard base64 text encoding with strict decoding
- Uniform, typed errors for every failed decryption
"""

import logging

from .aead_mode import AES256GCM, EncryptedEnvelope, Plaintext, decrypt, decrypt_text, encrypt
from .errors import (
    AesGcmError,
    AuthenticationFailed,
    DecryptionError,
    EncryptionFailed,
    InvalidEncoding,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidUtf8,
    KeyNotConfigured,
    RandomnessSourceFailure,
)
from .key_schedule import Key
from .nonce import NonceGenerator

__version__ = '0.1.0'
__author__ = 'simple_aes256_gcm Team'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AES256GCM', 'EncryptedEnvelope', 'Plaintext', 'Key', 'NonceGenerator',
    'encrypt', 'decrypt', 'decrypt_text',
    'AesGcmError', 'AuthenticationFailed', 'DecryptionError', 'EncryptionFailed',
    'InvalidEncoding', 'InvalidKeyLength', 'InvalidNonceLength', 'InvalidUtf8',
    'KeyNotConfigured', 'RandomnessSourceFailure',
]
