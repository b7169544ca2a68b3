"""Runtime configuration shared by the FileCrypt frontends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

from filecrypt.frontend.cli.logging_config import parse_level
from filecrypt.security.crypto import ENCRYPTED_SUFFIX


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """Caller-side policy: naming convention, cleanup and verbosity."""

    suffix: str = ENCRYPTED_SUFFIX
    delete_original: bool = True
    log_level: int = logging.WARNING


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from environment variables.

    - ``FILECRYPT_SUFFIX``: extension marking encrypted files (default ``.aes``)
    - ``FILECRYPT_DELETE_ORIGINAL``: remove the plaintext after a successful
      encryption (default true)
    - ``FILECRYPT_LOG_LEVEL``: logging level name or number (default WARNING)

    Command-line flags are applied on top of this by ``main``.
    """
    env = os.environ if env is None else env
    config = AppConfig()

    suffix = env.get("FILECRYPT_SUFFIX")
    if suffix:
        config.suffix = suffix if suffix.startswith(".") else f".{suffix}"

    delete_original = env.get("FILECRYPT_DELETE_ORIGINAL")
    if delete_original:
        config.delete_original = _parse_bool("FILECRYPT_DELETE_ORIGINAL", delete_original)

    log_level = env.get("FILECRYPT_LOG_LEVEL")
    if log_level:
        config.log_level = parse_level(log_level)

    return config
