"""Lightweight logging setup for the console and TUI frontends."""

import logging
import sys


def configure_logging(level: int = logging.WARNING) -> None:
    # Configure root logger once; keep output simple for terminals.
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def parse_level(name: str | int) -> int:
    """Turn ``"info"``/``"DEBUG"``/``20`` into a logging level number."""
    if isinstance(name, int):
        return name
    value = str(name).strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
