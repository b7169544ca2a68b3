"""Streaming AES-256-CBC file encryption with a salt-prefixed container.

Container layout (binary):
- 16 bytes: PBKDF2 salt, random per file
- N bytes: AES-256-CBC ciphertext, PKCS#7 padded, N % 16 == 0 and N >= 16

Key and IV both come from the passphrase and the salt (see ``kdf.derive_key``),
so nothing else is stored. There is no authentication tag: a wrong passphrase
is only noticed when the final block does not unpad cleanly, and roughly one
wrong passphrase in 256 gets past that check and yields garbage output.
"""
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from filecrypt.core.exceptions import (
    CorruptContainerError,
    DecryptionError,
    SourceNotFoundError,
    ValidationError,
)
from .kdf import IV_SIZE, KEY_SIZE, SALT_SIZE, derive_key, generate_salt


BLOCK_SIZE = 16
CHUNK_SIZE = 64 * 1024
ENCRYPTED_SUFFIX = ".aes"

DECRYPTION_FAILED_MESSAGE = "Incorrect password, corrupted file, or invalid format."


class Outcome(Enum):
    OK = "ok"
    BAD_PADDING = "bad_padding"
    SHORT_CONTAINER = "short_container"


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes")
    if len(iv) != IV_SIZE:
        raise ValueError(f"iv must be {IV_SIZE} bytes")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt_transform(
    source: BinaryIO,
    destination: BinaryIO,
    key: bytes,
    iv: bytes,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Encrypt ``source`` into ``destination`` chunk by chunk.

    Returns the number of ciphertext bytes written, always a multiple of the
    block size and strictly larger than the plaintext.
    """
    encryptor = _cipher(key, iv).encryptor()
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        ct = encryptor.update(padder.update(chunk))
        destination.write(ct)
        written += len(ct)

    tail = encryptor.update(padder.finalize()) + encryptor.finalize()
    destination.write(tail)
    return written + len(tail)


def decrypt_transform(
    source: BinaryIO,
    destination: BinaryIO,
    key: bytes,
    iv: bytes,
    chunk_size: int = CHUNK_SIZE,
) -> Outcome:
    """Decrypt ``source`` into ``destination`` chunk by chunk.

    The unpadder holds back the last block, so bytes already written are
    never padding. On ``Outcome.BAD_PADDING`` the destination holds a
    partial plaintext that the caller must discard.
    """
    decryptor = _cipher(key, iv).decryptor()
    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        destination.write(unpadder.update(decryptor.update(chunk)))

    try:
        # a truncated ciphertext fails here, before unpadding
        last = decryptor.finalize()
        tail = unpadder.update(last) + unpadder.finalize()
    except ValueError:
        return Outcome.BAD_PADDING
    destination.write(tail)
    return Outcome.OK


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, looping over short reads until EOF."""
    buf = bytearray()
    while len(buf) < size:
        chunk = stream.read(size - len(buf))
        if not chunk:
            break
        buf += chunk
    return bytes(buf)


def _require_passphrase(passphrase) -> None:
    if not passphrase:
        raise ValidationError("Passphrase must not be empty.")


def encrypt_stream(source: BinaryIO, destination: BinaryIO, passphrase: Union[str, bytes]) -> int:
    """Write ``salt || ciphertext`` for ``source`` to ``destination``.

    Returns the total container size in bytes.
    """
    _require_passphrase(passphrase)
    salt = generate_salt(SALT_SIZE)
    key, iv = derive_key(passphrase, salt)
    destination.write(salt)
    return SALT_SIZE + encrypt_transform(source, destination, key, iv)


def decrypt_stream(source: BinaryIO, destination: BinaryIO, passphrase: Union[str, bytes]) -> Outcome:
    _require_passphrase(passphrase)
    salt = read_exact(source, SALT_SIZE)
    if len(salt) < SALT_SIZE:
        return Outcome.SHORT_CONTAINER
    key, iv = derive_key(passphrase, salt)
    return decrypt_transform(source, destination, key, iv)


def _validate(in_path: Union[str, Path], out_path: Union[str, Path], passphrase) -> tuple:
    # Reject unusable input before touching the filesystem.
    _require_passphrase(passphrase)
    src = Path(in_path)
    dst = Path(out_path)
    if not src.is_file():
        raise SourceNotFoundError(f"File not found: {src}")
    if dst.exists() and dst.resolve() == src.resolve():
        raise ValidationError("Source and destination must be different files.")
    return src, dst


def encrypt_file(in_path: Union[str, Path], out_path: Union[str, Path], passphrase: Union[str, bytes]) -> int:
    src, dst = _validate(in_path, out_path, passphrase)
    with open(src, "rb") as inf, open(dst, "wb") as outf:
        return encrypt_stream(inf, outf, passphrase)


def decrypt_file(in_path: Union[str, Path], out_path: Union[str, Path], passphrase: Union[str, bytes]) -> None:
    src, dst = _validate(in_path, out_path, passphrase)
    with open(src, "rb") as inf:
        with open(dst, "wb") as outf:
            outcome = decrypt_stream(inf, outf, passphrase)

    if outcome is Outcome.OK:
        return
    # destination is closed at this point; drop whatever was written
    dst.unlink(missing_ok=True)
    if outcome is Outcome.SHORT_CONTAINER:
        raise CorruptContainerError(
            "The encrypted file is corrupted or too short (missing the required salt header)."
        )
    raise DecryptionError(DECRYPTION_FAILED_MESSAGE)
