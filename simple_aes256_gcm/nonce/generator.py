"""
Random Nonce Generator

This module draws a new 12-byte nonce from a cryptographically secure
random source for every encryption. Nonces are never derived from
counters or timestamps and are never accepted from callers, so a key can
be shared across processes and restarts without risking reuse.
"""

import logging
import secrets
from typing import Callable, Optional

from ..config import NONCE_SIZE
from ..errors import RandomnessSourceFailure

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


class NonceGenerator:
    """
    Produces nonces from an injectable random source.

    The default source is secrets.token_bytes, which is safe to call from
    several threads at once. Substituting a source is only meant for tests.
    """

    def __init__(self, source: Optional[RandomSource] = None):
        """
        Args:
            source: Callable returning n random bytes (default: secrets.token_bytes)
        """
        self.source = source if source is not None else secrets.token_bytes

    def generate(self) -> bytes:
        """
        Draw a fresh nonce.
        
        Returns:
            NONCE_SIZE random bytes
            
        Raises:
            RandomnessSourceFailure: If the source raises or returns
                anything other than NONCE_SIZE bytes
        """
        try:
            nonce = self.source(NONCE_SIZE)
        except Exception as e:
            logger.warning("Random source failed while generating a nonce")
            raise RandomnessSourceFailure(f"Random source failed: {e}") from e

        if not isinstance(nonce, (bytes, bytearray)) or len(nonce) != NONCE_SIZE:
            logger.warning("Random source returned malformed nonce")
            raise RandomnessSourceFailure(
                f"Random source must return exactly {NONCE_SIZE} bytes"
            )

        return bytes(nonce)


def generate_nonce() -> bytes:
    """Generate a nonce from the default secure source."""
    return NonceGenerator().generate()
