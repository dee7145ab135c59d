"""
Base64 Text Encoding

This module implements the encoding layer using the RFC 4648 standard
base64 alphabet with '=' padding. Decoding is strict: anything that
encode() could not have produced is rejected.
"""

import base64
import binascii

from ..errors import InvalidEncoding

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'


def encode(data: bytes) -> str:
    """
    Encode bytes as standard padded base64 text.
    
    Args:
        data: The bytes to encode
        
    Returns:
        ASCII base64 string
    """
    return base64.b64encode(bytes(data)).decode('ascii')


def decode(text: str) -> bytes:
    """
    Decode standard padded base64 text.
    
    Args:
        text: The base64 string to decode
        
    Returns:
        The decoded bytes
        
    Raises:
        InvalidEncoding: If the input is not a string, uses characters
            outside the alphabet, is wrongly padded, or is not in the
            canonical form encode() produces
    """
    if not isinstance(text, str):
        raise InvalidEncoding(f"Expected base64 text, got {type(text).__name__}")

    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"Invalid Base64 string: {e}") from None

    # Unused trailing bits must be zero, otherwise two strings share a value
    if encode(data) != text:
        raise InvalidEncoding("Invalid Base64 string: non-canonical encoding")

    return data
