"""
File-level encrypt/decrypt workflow for FileCrypt frontends.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..security.crypto import ENCRYPTED_SUFFIX, decrypt_file, encrypt_file
from .exceptions import InvalidExtensionError, SourceNotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class WorkflowResult:
    """What a frontend needs to report after a successful run."""

    source: Path
    output: Path
    deleted_source: bool = False
    bytes_written: Optional[int] = None


def encrypted_path_for(path: Union[str, Path], suffix: str = ENCRYPTED_SUFFIX) -> Path:
    """Return the container path for ``path`` by appending ``suffix``."""
    path = Path(path)
    return path.with_name(path.name + suffix)


def decrypted_path_for(path: Union[str, Path], suffix: str = ENCRYPTED_SUFFIX) -> Path:
    """Return the restored path for a container by stripping ``suffix``.

    The suffix is matched case-insensitively.
    """
    path = Path(path)
    name = path.name
    if not suffix or not name.lower().endswith(suffix.lower()) or len(name) == len(suffix):
        raise InvalidExtensionError(
            f"The file does not appear to be an encrypted file ({suffix})."
        )
    return path.with_name(name[: -len(suffix)])


def _check_inputs(path: Path, passphrase: str) -> None:
    # Mirrors the prompt-level check: both must be usable before anything runs.
    if not path.is_file():
        raise SourceNotFoundError(f"File not found: {path}")
    if not passphrase:
        raise ValidationError("Passphrase must not be empty.")


def encrypt_path(
    path: Union[str, Path],
    passphrase: str,
    suffix: str = ENCRYPTED_SUFFIX,
    delete_original: bool = True,
) -> WorkflowResult:
    """
    Encrypt ``path`` into ``path + suffix``.

    The original is removed only after the container has been written
    completely, and only when ``delete_original`` is set.
    """
    src = Path(path)
    _check_inputs(src, passphrase)
    out = encrypted_path_for(src, suffix)

    logger.info("Encrypting %s -> %s", src, out)
    written = encrypt_file(src, out, passphrase)
    logger.debug("Wrote %d bytes to %s", written, out)

    deleted = False
    if delete_original:
        src.unlink()
        deleted = True
        logger.info("Deleted original %s", src)
    return WorkflowResult(source=src, output=out, deleted_source=deleted, bytes_written=written)


def decrypt_path(
    path: Union[str, Path],
    passphrase: str,
    suffix: str = ENCRYPTED_SUFFIX,
) -> WorkflowResult:
    """Decrypt a ``*.aes`` container next to itself, dropping the suffix.

    The container is kept. If decryption fails no output file is left behind.
    """
    src = Path(path)
    out = decrypted_path_for(src, suffix)
    _check_inputs(src, passphrase)

    logger.info("Decrypting %s -> %s", src, out)
    decrypt_file(src, out, passphrase)
    return WorkflowResult(source=src, output=out)
