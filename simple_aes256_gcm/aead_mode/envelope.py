"""
Plaintext and Envelope Value Types

This module defines the values passed into and out of the encryption
service: Plaintext wraps the bytes to encrypt (and the bytes recovered
by decryption), EncryptedEnvelope pairs a nonce with the ciphertext it
produced, both as base64 text.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from ..errors import InvalidEncoding, InvalidUtf8

PlaintextInput = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Plaintext:
    """Owned, immutable byte string to be encrypted or just decrypted."""

    data: bytes

    def __init__(self, value: PlaintextInput = b''):
        """
        Args:
            value: Text (stored as UTF-8) or any bytes-like value
        """
        if isinstance(value, Plaintext):
            data = value.data
        elif isinstance(value, str):
            data = value.encode('utf-8')
        elif isinstance(value, (bytes, bytearray, memoryview)):
            data = bytes(value)
        else:
            raise TypeError(f"Plaintext must be str or bytes, not {type(value).__name__}")
        object.__setattr__(self, 'data', data)

    def text(self) -> str:
        """
        Decode the bytes as UTF-8.
        
        Raises:
            InvalidUtf8: If the bytes are not valid UTF-8
        """
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError:
            raise InvalidUtf8("Invalid UTF-8") from None

    def __str__(self) -> str:
        return self.text()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f'Plaintext(<{len(self.data)} bytes>)'


@dataclass(frozen=True)
class EncryptedEnvelope:
    """
    A nonce and the ciphertext-with-tag it produced, both base64 text.

    The two fields must be stored and transmitted together, verbatim.
    Pairing an iv with any other ciphertext fails authentication.
    """

    iv: str
    encrypted: str

    def to_dict(self) -> Dict[str, str]:
        return {'iv': self.iv, 'encrypted': self.encrypted}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EncryptedEnvelope':
        """
        Build an envelope from a mapping with 'iv' and 'encrypted' keys.
        
        Raises:
            InvalidEncoding: If data is not a mapping, or either field is
                missing or not a string
        """
        if not isinstance(data, Mapping):
            raise InvalidEncoding("Envelope must be an object with 'iv' and 'encrypted'")

        fields = {}
        for name in ('iv', 'encrypted'):
            value = data.get(name)
            if not isinstance(value, str):
                raise InvalidEncoding(f"Envelope field '{name}' must be a string")
            fields[name] = value
        return cls(**fields)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> 'EncryptedEnvelope':
        """
        Parse the JSON form produced by to_json().
        
        Raises:
            InvalidEncoding: If text is not JSON or not a valid envelope
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError, RecursionError) as e:
            raise InvalidEncoding(f"Envelope is not valid JSON: {e}") from None
        return cls.from_dict(data)

    def __str__(self) -> str:
        return f"IV: {self.iv}\nENCRYPTED: {self.encrypted}"
