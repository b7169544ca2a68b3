"""Unit tests for the Key Derivation Function (KDF) module."""

import hashlib

import pytest
from filecrypt.security.kdf import (
    ITERATIONS,
    DerivedKey,
    derive_key,
    generate_salt,
    kdf_params_to_dict,
)


def test_generate_salt_defaults():
    """Ensure salt generation returns bytes of the default length (16)."""
    salt = generate_salt()
    assert isinstance(salt, bytes)
    assert len(salt) == 16


def test_generate_salt_is_fresh():
    """Two salts in a row should never collide."""
    assert generate_salt() != generate_salt()


def test_derive_key_sizes():
    """Key is 32 bytes (AES-256) and IV one block (16 bytes)."""
    key, iv = derive_key("abc123", generate_salt())
    assert len(key) == 32
    assert len(iv) == 16


def test_derive_key_is_deterministic():
    """Same passphrase and salt always give the same key and IV."""
    salt = generate_salt()
    first = derive_key("password123", salt)
    second = derive_key("password123", salt)

    assert isinstance(first, DerivedKey)
    assert first == second


def test_derive_key_string_and_bytes_agree():
    """Ensure passing the same passphrase as string or bytes yields the same key."""
    salt = generate_salt()
    assert derive_key("pässwörd", salt) == derive_key("pässwörd".encode("utf-8"), salt)


def test_derive_key_matches_single_pbkdf2_stream():
    """Key then IV are the first 48 bytes of one PBKDF2-HMAC-SHA256 run."""
    salt = bytes(range(16))
    expected = hashlib.pbkdf2_hmac("sha256", b"abc123", salt, ITERATIONS, 48)

    key, iv = derive_key("abc123", salt)

    assert key == expected[:32]
    assert iv == expected[32:48]


def test_derive_key_depends_on_salt_and_passphrase():
    salt = generate_salt()
    other_salt = bytes(b ^ 0xFF for b in salt)
    base = derive_key("correct", salt)

    assert derive_key("correct", other_salt) != base
    assert derive_key("wrong", salt) != base


@pytest.mark.parametrize("bad_salt", [b"", b"\x00" * 15, b"\x00" * 17, b"\x00" * 32])
def test_derive_key_rejects_bad_salt_length(bad_salt):
    with pytest.raises(ValueError, match="salt"):
        derive_key("abc123", bad_salt)


def test_derive_key_rejects_empty_passphrase():
    with pytest.raises(ValueError, match="passphrase"):
        derive_key("", generate_salt())


def test_kdf_params_to_dict():
    """Validate the helper function serialization."""
    salt = b"\xaa" * 16
    result = kdf_params_to_dict(salt)

    expected = {
        "algo": "pbkdf2",
        "hash": "sha256",
        "iterations": 10000,
        "salt_size": 16,
        "salt": "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa",  # hex representation
        "key_size": 32,
        "iv_size": 16,
    }

    assert result == expected


def test_kdf_params_to_dict_without_salt():
    """The info screen asks for the parameters without a per-file salt."""
    result = kdf_params_to_dict()

    assert "salt" not in result
    assert result["iterations"] == ITERATIONS
    assert result["salt_size"] == 16
