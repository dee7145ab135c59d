"""
Configuration Constants

Sizes and policies shared by every component of the package. The values
are fixed by AES-256-GCM and are not meant to be tuned.
"""

# AES-256 key size in bytes
KEY_SIZE = 32

# 96-bit nonce, the size GCM is specified around
NONCE_SIZE = 12

# Full-length GCM authentication tag
TAG_SIZE = 16

# Envelopes never carry associated data
ASSOCIATED_DATA = b''

# Environment variable read by Key.from_env (base64 of KEY_SIZE bytes)
KEY_ENV_VAR = 'SIMPLE_AES256_GCM_KEY'
