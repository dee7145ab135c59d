"""
tests/test_nonce.py

Nonce generation: 12 fresh bytes per call, and a failing source is fatal.
"""

import pytest

from simple_aes256_gcm.errors import RandomnessSourceFailure
from simple_aes256_gcm.nonce import NonceGenerator, generate_nonce


def test_default_generator_yields_12_bytes():
    nonce = NonceGenerator().generate()
    assert isinstance(nonce, bytes)
    assert len(nonce) == 12
    assert len(generate_nonce()) == 12


def test_nonces_do_not_repeat():
    gen = NonceGenerator()
    nonces = {gen.generate() for _ in range(1000)}
    assert len(nonces) == 1000


def test_injected_source_is_used():
    calls = []

    def source(n):
        calls.append(n)
        return b'\x07' * n

    assert NonceGenerator(source).generate() == b'\x07' * 12
    assert calls == [12]


def test_raising_source_is_fatal():
    def source(n):
        raise OSError("entropy pool unavailable")

    with pytest.raises(RandomnessSourceFailure) as e:
        NonceGenerator(source).generate()
    assert isinstance(e.value.__cause__, OSError)


@pytest.mark.parametrize('result', [b'', b'\x00' * 11, b'\x00' * 13, None, 'x' * 12])
def test_malformed_source_output_is_fatal(result):
    with pytest.raises(RandomnessSourceFailure):
        NonceGenerator(lambda n: result).generate()
