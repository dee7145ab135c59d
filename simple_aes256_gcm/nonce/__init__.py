"""
Nonce Generation Package

This package produces the fresh 96-bit nonce bound into every envelope.
"""

from .generator import NonceGenerator, generate_nonce

__all__ = ['NonceGenerator', 'generate_nonce']
