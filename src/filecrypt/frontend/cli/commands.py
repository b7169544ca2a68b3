"""Command-line entry point for FileCrypt.

Without a subcommand the interactive console menu runs; ``--tui`` starts the
Textual frontend; ``encrypt PATH`` and ``decrypt PATH`` run once and exit.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import os
import sys
from typing import Callable, Optional, Sequence

from filecrypt import __version__
from filecrypt.core.exceptions import FileCryptError, ValidationError
from filecrypt.core.workflow import decrypt_path, encrypt_path
from filecrypt.frontend.cli.context import AppConfig, load_config
from filecrypt.frontend.cli.logging_config import configure_logging, parse_level
from filecrypt.frontend.cli.menu import ConsoleMenu

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filecrypt",
        description="Encrypt and decrypt files with a passphrase (AES-256-CBC, PBKDF2).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--tui", action="store_true", help="start the Textual interface")
    parser.add_argument(
        "--keep-original",
        action="store_true",
        help="do not delete the plaintext after encrypting",
    )
    parser.add_argument("--suffix", default=None, help="extension for encrypted files (default .aes)")
    parser.add_argument("--log-level", default=None, help="logging level, e.g. INFO or DEBUG")

    sub = parser.add_subparsers(dest="command")
    for name, help_text in (("encrypt", "encrypt a file"), ("decrypt", "decrypt a .aes file")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path")
        cmd.add_argument(
            "--passphrase-env",
            metavar="VAR",
            default=None,
            help="read the passphrase from this environment variable instead of prompting",
        )
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.keep_original:
        config.delete_original = False
    if args.suffix:
        config.suffix = args.suffix if args.suffix.startswith(".") else f".{args.suffix}"
    if args.log_level:
        config.log_level = parse_level(args.log_level)
    return config


def _read_passphrase(
    args: argparse.Namespace,
    confirm: bool,
    prompt: Callable[[str], str] = getpass.getpass,
) -> str:
    if args.passphrase_env:
        value = os.environ.get(args.passphrase_env, "")
        if not value:
            raise ValidationError(f"Environment variable {args.passphrase_env} is empty or unset.")
        return value

    passphrase = prompt("Enter the encryption passphrase: ")
    if confirm and prompt("Confirm passphrase: ") != passphrase:
        raise ValidationError("Passphrases do not match.")
    return passphrase


def run_command(
    args: argparse.Namespace,
    config: AppConfig,
    prompt: Callable[[str], str] = getpass.getpass,
) -> int:
    """Run a one-shot ``encrypt``/``decrypt`` and return the exit code."""
    try:
        if args.command == "encrypt":
            passphrase = _read_passphrase(args, confirm=True, prompt=prompt)
            result = encrypt_path(
                args.path,
                passphrase,
                suffix=config.suffix,
                delete_original=config.delete_original,
            )
            print(f"Encryption Complete. File saved at: {result.output}")
            if result.deleted_source:
                print(f"   (Original file deleted: {result.source})")
        else:
            passphrase = _read_passphrase(args, confirm=False, prompt=prompt)
            result = decrypt_path(args.path, passphrase, suffix=config.suffix)
            print(f"Decryption Complete. File restored at: {result.output}")
    except (FileCryptError, OSError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _apply_overrides(load_config(), args)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config.log_level)

    if args.command:
        return run_command(args, config)

    if args.tui:
        from filecrypt.frontend.cli.app import FileCryptApp

        FileCryptApp(config=config).run()
        return 0

    try:
        ConsoleMenu(config).run()
    except KeyboardInterrupt:
        print("\nProgram terminated. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
