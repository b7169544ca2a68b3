"""Passphrase-based key derivation for FileCrypt."""
import os
from typing import Dict, NamedTuple, Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


SALT_SIZE = 16
KEY_SIZE = 32  # AES-256
IV_SIZE = 16  # one AES block
ITERATIONS = 10_000


class DerivedKey(NamedTuple):
    key: bytes
    iv: bytes


def generate_salt(length: int = SALT_SIZE) -> bytes:
    """Return a cryptographically secure random salt."""
    return os.urandom(length)


def derive_key(passphrase: Union[str, bytes], salt: bytes) -> DerivedKey:
    """
    Derive the AES key and IV for one container from a passphrase.

    A single PBKDF2-HMAC-SHA256 run produces 48 bytes: the first 32 are the
    key and the next 16 the IV. Existing containers depend on this layout.
    """
    if not isinstance(salt, (bytes, bytearray)) or len(salt) != SALT_SIZE:
        raise ValueError(f"salt must be exactly {SALT_SIZE} bytes")
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")
    if not passphrase:
        raise ValueError("passphrase must not be empty")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE + IV_SIZE,
        salt=bytes(salt),
        iterations=ITERATIONS,
    )
    material = kdf.derive(bytes(passphrase))
    return DerivedKey(key=material[:KEY_SIZE], iv=material[KEY_SIZE:])


def kdf_params_to_dict(salt: Optional[bytes] = None) -> Dict:
    """Describe the fixed derivation parameters; ``salt`` is included when given."""
    params = {
        "algo": "pbkdf2",
        "hash": "sha256",
        "iterations": ITERATIONS,
        "salt_size": SALT_SIZE,
        "key_size": KEY_SIZE,
        "iv_size": IV_SIZE,
    }
    if salt is not None:
        params["salt"] = salt.hex()
    return params
