"""Interactive console menu for FileCrypt.

Each menu entry maps to a handler that returns ``True`` to keep the loop
going or ``False`` to stop it; there is no shared run flag.
"""

from __future__ import annotations

import getpass
from pathlib import Path
from typing import Callable, Optional

from filecrypt.core.exceptions import FileCryptError, InvalidExtensionError
from filecrypt.core.workflow import decrypt_path, decrypted_path_for, encrypt_path
from filecrypt.frontend.cli.context import AppConfig
from filecrypt.security.kdf import kdf_params_to_dict


BANNER = "AES File Encryption Tool"

MENU = "\n".join(
    [
        "Select an option:",
        "1. Encrypt File",
        "2. Decrypt File",
        "3. Algorithm Information",
        "4. Exit",
    ]
)


def describe_parameters(params: Optional[dict] = None) -> str:
    """Render the derivation parameters as one line for the info screen."""
    params = params or kdf_params_to_dict()
    return (
        f"Parameters: AES-{params['key_size'] * 8}-CBC, PKCS#7 padding, "
        f"{params['algo'].upper()}-HMAC-{params['hash'].upper()} with "
        f"{params['iterations']:,} iterations and a random {params['salt_size']}-byte "
        f"salt per file; the {params['iv_size']}-byte IV is derived, not stored. "
        "Files are not authenticated: a wrong password and a corrupted file "
        "produce the same error."
    )


ALGORITHM_INFO = (
    "Algorithm Information: AES (Advanced Encryption Standard) is the most widely "
    "used symmetric encryption standard globally. It is combined with PBKDF2 "
    "(Password-Based Key Derivation Function 2) to ensure the user's passphrase is "
    "transformed into a strong cryptographic key.\n" + describe_parameters()
)

INVALID_INPUT_MESSAGE = "Error: File not found or invalid password."


class ConsoleMenu:
    """Menu loop over injectable prompt/print callables."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        input_fn: Callable[[str], str] = input,
        password_fn: Callable[[str], str] = getpass.getpass,
        output_fn: Callable[[str], None] = print,
    ):
        self.config = config or AppConfig()
        self.input = input_fn
        self.password = password_fn
        self.output = output_fn
        self.actions: dict[str, Callable[[], bool]] = {
            "1": self.action_encrypt,
            "2": self.action_decrypt,
            "3": self.action_info,
            "4": self.action_exit,
        }

    def run(self) -> None:
        self.output(BANNER)
        while self.step():
            pass
        self.output("Program terminated. Goodbye!")

    def step(self) -> bool:
        """Show the menu, dispatch one choice and report whether to continue."""
        self.output(MENU)
        try:
            choice = self.input("> ").strip().lower()
        except EOFError:
            return False
        if not choice:
            return False

        handler = self.actions.get(choice, self.action_invalid)
        try:
            if not handler():
                return False
        except EOFError:
            # Ctrl-D at the path or passphrase prompt ends the session
            self.output("")
            return False

        try:
            self.input("\n--- Press ENTER to continue ---")
        except EOFError:
            return False
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _prompt_target(self) -> tuple[Path, str] | None:
        raw = self.input("Enter the full file path: ").strip().strip('"')
        passphrase = self.password("Enter the encryption passphrase: ")
        path = Path(raw).expanduser() if raw else None
        if path is None or not path.is_file() or not passphrase:
            self.output(f"\n {INVALID_INPUT_MESSAGE}")
            return None
        return path, passphrase

    def action_encrypt(self) -> bool:
        target = self._prompt_target()
        if target is None:
            return True
        path, passphrase = target

        self.output("\nStarting Encryption...")
        try:
            result = encrypt_path(
                path,
                passphrase,
                suffix=self.config.suffix,
                delete_original=self.config.delete_original,
            )
        except (FileCryptError, OSError) as exc:
            self.output(f"\nFATAL ERROR: {exc}")
            return True

        self.output(f"Encryption Complete. File saved at: {result.output}")
        if result.deleted_source:
            self.output(f"   (Original file deleted: {result.source})")
        return True

    def action_decrypt(self) -> bool:
        target = self._prompt_target()
        if target is None:
            return True
        path, passphrase = target

        try:
            decrypted_path_for(path, self.config.suffix)
        except InvalidExtensionError as exc:
            self.output(f"Error: {exc}")
            return True

        self.output("\nStarting Decryption...")
        try:
            result = decrypt_path(path, passphrase, suffix=self.config.suffix)
        except (FileCryptError, OSError) as exc:
            self.output(f"\nFATAL ERROR: {exc}")
            return True

        self.output(f"Decryption Complete. File restored at: {result.output}")
        return True

    def action_info(self) -> bool:
        self.output(f"\n{ALGORITHM_INFO}")
        return True

    def action_exit(self) -> bool:
        return False

    def action_invalid(self) -> bool:
        self.output("\nInvalid option. Please try again.")
        return True
