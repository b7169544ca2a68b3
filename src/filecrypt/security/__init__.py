"""Security helpers: key derivation and streaming AES-CBC for FileCrypt.

This package provides:
- PBKDF2-HMAC-SHA256 derivation of an AES-256 key and IV from a passphrase
- AES-256-CBC/PKCS#7 stream transforms that never hold a whole file in memory
- the salt-prefixed container format, at stream and at path level
"""

from .kdf import generate_salt, derive_key, DerivedKey
from .crypto import (
    Outcome,
    encrypt_transform,
    decrypt_transform,
    encrypt_stream,
    decrypt_stream,
    encrypt_file,
    decrypt_file,
)

__all__ = [
    "generate_salt",
    "derive_key",
    "DerivedKey",
    "Outcome",
    "encrypt_transform",
    "decrypt_transform",
    "encrypt_stream",
    "decrypt_stream",
    "encrypt_file",
    "decrypt_file",
]
