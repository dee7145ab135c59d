"""
AES-256 Key

This module implements the Key value type. A Key always holds exactly
32 bytes; there is no way to build one that doesn't.

Text passed to Key() is taken as its UTF-8 bytes, so the 32-character
string "12345678901234567890123456789012" is a valid key. Keys stored as
base64 text go through Key.from_base64() or Key.from_env() instead.
"""

import hashlib
import hmac
import logging
import os
import secrets
from typing import Optional, Union

from ..config import KEY_ENV_VAR, KEY_SIZE
from ..encoding import decode, encode
from ..errors import InvalidKeyLength, KeyNotConfigured

logger = logging.getLogger(__name__)

KeyInput = Union[str, bytes, bytearray, memoryview]


def generate_key(key_size: int = KEY_SIZE) -> bytes:
    """
    Generate a cryptographically secure random key.
    
    Args:
        key_size: Size of the key in bytes (default: 32)
        
    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


class Key:
    """
    Immutable 256-bit secret key.

    The material is only handed to the AEAD engine; it never appears in
    repr() or in log output.
    """

    __slots__ = ('_material',)

    def __init__(self, raw: KeyInput):
        """
        Args:
            raw: 32 raw bytes, or a string whose UTF-8 encoding is 32 bytes
            
        Raises:
            InvalidKeyLength: If the material is not exactly 32 bytes
            TypeError: If raw is neither text nor bytes-like
        """
        if isinstance(raw, str):
            material = raw.encode('utf-8')
        elif isinstance(raw, (bytes, bytearray, memoryview)):
            material = bytes(raw)
        else:
            raise TypeError(f"Key must be str or bytes, not {type(raw).__name__}")

        if len(material) != KEY_SIZE:
            raise InvalidKeyLength(f"Please provide a {KEY_SIZE}-bytes key")

        object.__setattr__(self, '_material', material)

    def __setattr__(self, name, value):
        raise AttributeError("Key is immutable")

    def __delattr__(self, name):
        raise AttributeError("Key is immutable")

    @classmethod
    def generate(cls) -> 'Key':
        """Create a Key from fresh random bytes."""
        return cls(generate_key())

    @classmethod
    def from_base64(cls, text: str) -> 'Key':
        """
        Load a key from its base64 text form.
        
        Args:
            text: Standard padded base64 of 32 bytes
            
        Returns:
            The decoded Key
            
        Raises:
            InvalidEncoding: If text is not valid base64
            InvalidKeyLength: If it does not decode to 32 bytes
        """
        return cls(decode(text))

    @classmethod
    def from_env(cls, var: Optional[str] = None) -> 'Key':
        """
        Load a base64 key from an environment variable.
        
        Args:
            var: Variable name (default: SIMPLE_AES256_GCM_KEY)
            
        Returns:
            The decoded Key
            
        Raises:
            KeyNotConfigured: If the variable is unset or empty
            InvalidEncoding: If its value is not valid base64
            InvalidKeyLength: If it does not decode to 32 bytes
        """
        var = var or KEY_ENV_VAR
        value = os.environ.get(var)
        if not value:
            raise KeyNotConfigured(f"Key not found in environment variable {var}")

        logger.debug("Loading key from environment variable %s", var)
        return cls.from_base64(value.strip())

    def as_bytes(self) -> bytes:
        """Return the raw key material."""
        return self._material

    def to_base64(self) -> str:
        """Return the key as base64 text accepted by from_base64()."""
        return encode(self._material)

    def __bytes__(self) -> bytes:
        return self._material

    def __len__(self) -> int:
        return len(self._material)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return hmac.compare_digest(self._material, other._material)

    def __hash__(self) -> int:
        return hash(hashlib.sha256(self._material).digest())

    def __repr__(self) -> str:
        return '<Key AES-256 (redacted)>'
