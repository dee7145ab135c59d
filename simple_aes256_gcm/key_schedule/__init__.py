"""
Key Package

This package validates and loads the 256-bit secret key used for
AES-256-GCM encryption.
"""

from .key import Key, generate_key

__all__ = ['Key', 'generate_key']
