"""Textual frontend for FileCrypt.

Start here with `python -m filecrypt.frontend.cli.app`
"""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Input, Label, Static

from filecrypt.core.exceptions import FileCryptError
from filecrypt.core.workflow import decrypt_path, encrypt_path
from filecrypt.frontend.cli.context import AppConfig, load_config
from filecrypt.frontend.cli.menu import ALGORITHM_INFO, INVALID_INPUT_MESSAGE


# === Modal definitions ===


class MessageModal(ModalScreen[None]):
    """One dialog for both outcomes: ``kind`` is ``"error"`` or ``"info"``."""

    def __init__(self, title: str, message: str, kind: str = "info"):
        super().__init__()
        self.kind = kind
        self.message_title = title
        self.body_text = message

    def compose(self) -> ComposeResult:  # pragma: no cover
        with Vertical(classes=f"dialog {self.kind}"):
            yield Static(self.message_title, classes="title")
            yield Static(self.body_text)
            yield Button("OK", id="ok", variant="error" if self.kind == "error" else "primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:  # pragma: no cover
        self.dismiss(None)

    def on_key(self, event) -> None:  # pragma: no cover
        if event.key in ("escape", "enter"):
            self.dismiss(None)


class FileCryptApp(App):
    """Single-screen form: pick a file, type a passphrase, encrypt or decrypt."""

    TITLE = "FileCrypt"

    CSS = """
    #form { padding: 1 2; border: heavy $surface; }
    .title { padding: 1 1; text-style: bold; }
    #actions { height: auto; padding: 1 0; }
    #status { padding: 0 1; height: 3; color: $text-muted; }
    ModalScreen { align: center middle; background: rgba(0,0,0,0.45); }
    .dialog { width: 75%; height: auto; padding: 1; border: heavy $surface; background: $boost; }
    .dialog.error { border: heavy $error; }
    """

    BINDINGS = [
        ("f2", "encrypt", "Encrypt"),
        ("f3", "decrypt", "Decrypt"),
        ("f1", "info", "Info"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: AppConfig | None = None):
        self.config = config or load_config()
        super().__init__()

        self.path_input: Input | None = None
        self.passphrase_input: Input | None = None
        self.status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="form"):
            yield Static("AES File Encryption Tool", classes="title")
            yield Label("File path")
            self.path_input = Input(placeholder="/path/to/file", id="path")
            yield self.path_input
            yield Label("Passphrase")
            self.passphrase_input = Input(password=True, id="passphrase")
            yield self.passphrase_input
            with Horizontal(id="actions"):
                yield Button("Encrypt", id="encrypt", variant="primary")
                yield Button("Decrypt", id="decrypt")
                yield Button("Info", id="info")
            self.status = Static("", id="status")
            yield self.status
        yield Footer()

    def on_mount(self) -> None:
        if self.path_input is not None:
            self.set_focus(self.path_input)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "encrypt":
            self.action_encrypt()
        elif event.button.id == "decrypt":
            self.action_decrypt()
        elif event.button.id == "info":
            self.action_info()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_status(self, text: str) -> None:
        if self.status is not None:
            self.status.update(text)

    def _read_form(self) -> tuple[Path, str] | None:
        raw = self.path_input.value.strip().strip('"') if self.path_input else ""
        passphrase = self.passphrase_input.value if self.passphrase_input else ""
        path = Path(raw).expanduser() if raw else None
        if path is None or not path.is_file() or not passphrase:
            self.push_screen(MessageModal("Error", INVALID_INPUT_MESSAGE, kind="error"))
            return None
        return path, passphrase

    def _clear_passphrase(self) -> None:
        if self.passphrase_input is not None:
            self.passphrase_input.value = ""

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_encrypt(self) -> None:
        form = self._read_form()
        if form is None:
            return
        path, passphrase = form
        try:
            result = encrypt_path(
                path,
                passphrase,
                suffix=self.config.suffix,
                delete_original=self.config.delete_original,
            )
        except (FileCryptError, OSError) as exc:
            self.push_screen(MessageModal("Encryption failed", str(exc), kind="error"))
            return
        finally:
            self._clear_passphrase()

        status = f"Encryption complete: {result.output}"
        if result.deleted_source:
            status += f"\nOriginal file deleted: {result.source}"
        self._set_status(status)
        if self.path_input is not None:
            self.path_input.value = str(result.output)

    def action_decrypt(self) -> None:
        form = self._read_form()
        if form is None:
            return
        path, passphrase = form
        try:
            result = decrypt_path(path, passphrase, suffix=self.config.suffix)
        except (FileCryptError, OSError) as exc:
            self.push_screen(MessageModal("Decryption failed", str(exc), kind="error"))
            return
        finally:
            self._clear_passphrase()

        self._set_status(f"Decryption complete: {result.output}")
        if self.path_input is not None:
            self.path_input.value = str(result.output)

    def action_info(self) -> None:
        self.push_screen(MessageModal("Algorithm Information", ALGORITHM_INFO))


if __name__ == "__main__":  # pragma: no cover
    FileCryptApp().run()
