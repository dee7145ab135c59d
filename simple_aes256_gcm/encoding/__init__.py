"""
Text Encoding Package

This package maps raw bytes to a text-safe representation and back, so
nonces and ciphertexts can be stored in JSON, logs or database columns.
"""

from .base64_codec import encode, decode, ALPHABET

__all__ = ['encode', 'decode', 'ALPHABET']
