"""
tests/test_key.py

Key construction: exactly 32 bytes, from bytes, text, base64 or the environment.
"""

import pytest

from simple_aes256_gcm import Key
from simple_aes256_gcm.config import KEY_ENV_VAR
from simple_aes256_gcm.errors import InvalidEncoding, InvalidKeyLength, KeyNotConfigured
from simple_aes256_gcm.key_schedule import generate_key

TEXT_KEY = "12345678901234567890123456789012"


def test_text_key_uses_utf8_bytes():
    key = Key(TEXT_KEY)
    assert key.as_bytes() == TEXT_KEY.encode('ascii')
    assert len(key) == 32


@pytest.mark.parametrize('raw', [b'\x01' * 32, bytearray(32), memoryview(b'k' * 32)])
def test_bytes_like_keys_accepted(raw):
    assert bytes(Key(raw)) == bytes(raw)


@pytest.mark.parametrize('size', [0, 16, 31, 33, 64])
def test_wrong_length_rejected(size):
    with pytest.raises(InvalidKeyLength):
        Key(b'\x00' * size)


def test_text_length_is_measured_in_bytes():
    # 32 characters, but 'é' takes two bytes in UTF-8
    with pytest.raises(InvalidKeyLength):
        Key('é' + '1' * 31)


def test_non_text_non_bytes_rejected():
    with pytest.raises(TypeError):
        Key(12345)


def test_key_is_immutable():
    key = Key(TEXT_KEY)
    with pytest.raises(AttributeError):
        key._material = b'\x00' * 32


def test_repr_hides_material():
    key = Key(TEXT_KEY)
    assert TEXT_KEY not in repr(key)
    assert key.to_base64() not in repr(key)


def test_equality():
    assert Key(TEXT_KEY) == Key(TEXT_KEY.encode('ascii'))
    assert Key(TEXT_KEY) != Key(b'\x00' * 32)


def test_generate_produces_distinct_keys():
    assert len(generate_key()) == 32
    assert Key.generate() != Key.generate()


def test_base64_round_trip():
    key = Key.generate()
    assert Key.from_base64(key.to_base64()) == key


def test_from_base64_errors():
    with pytest.raises(InvalidEncoding):
        Key.from_base64('not base64!')
    with pytest.raises(InvalidKeyLength):
        Key.from_base64('AAAA')


def test_from_env(monkeypatch):
    key = Key.generate()
    monkeypatch.setenv(KEY_ENV_VAR, key.to_base64())
    assert Key.from_env() == key


def test_from_env_custom_variable(monkeypatch):
    key = Key.generate()
    monkeypatch.setenv('APP_SECRET_KEY', key.to_base64() + '\n')
    assert Key.from_env('APP_SECRET_KEY') == key


def test_from_env_missing(monkeypatch):
    monkeypatch.delenv(KEY_ENV_VAR, raising=False)
    with pytest.raises(KeyNotConfigured):
        Key.from_env()


def test_from_env_wrong_length(monkeypatch):
    monkeypatch.setenv(KEY_ENV_VAR, 'AAAA')
    with pytest.raises(InvalidKeyLength):
        Key.from_env()


def test_equal_keys_hash_alike():
    same = Key(TEXT_KEY.encode('ascii'))
    assert hash(Key(TEXT_KEY)) == hash(same)
    assert len({Key(TEXT_KEY), same, Key(b'\x00' * 32)}) == 2
    assert {Key(TEXT_KEY): 'primary'}[same] == 'primary'
