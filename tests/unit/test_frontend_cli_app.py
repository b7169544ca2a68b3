"""Unit tests for the FileCrypt Textual App (Frontend)."""

import pytest

from filecrypt.frontend.cli.app import FileCryptApp, MessageModal
from filecrypt.frontend.cli.context import AppConfig


@pytest.fixture
def config():
    return AppConfig(delete_original=True)


@pytest.mark.asyncio
async def test_encrypt_and_decrypt_via_form(tmp_path, config):
    src = tmp_path / "doc.txt"
    src.write_bytes(b"form data")
    app = FileCryptApp(config=config)

    async with app.run_test(size=(100, 40)) as pilot:
        app.path_input.value = str(src)
        app.passphrase_input.value = "pw"
        app.action_encrypt()
        await pilot.pause()

        enc = tmp_path / "doc.txt.aes"
        assert enc.exists()
        assert not src.exists()
        # passphrase is cleared and the path points at the new container
        assert app.passphrase_input.value == ""
        assert app.path_input.value == str(enc)

        app.passphrase_input.value = "pw"
        app.action_decrypt()
        await pilot.pause()

        assert src.read_bytes() == b"form data"
        assert app.path_input.value == str(src)


@pytest.mark.asyncio
async def test_missing_input_shows_error(tmp_path, config):
    app = FileCryptApp(config=config)

    async with app.run_test(size=(100, 40)) as pilot:
        app.path_input.value = str(tmp_path / "missing.txt")
        app.passphrase_input.value = "pw"
        app.action_encrypt()
        await pilot.pause()

        assert isinstance(app.screen, MessageModal)
        assert app.screen.kind == "error"
        assert "File not found" in app.screen.body_text


@pytest.mark.asyncio
async def test_decrypt_failure_shows_error(tmp_path, config):
    enc = tmp_path / "bad.txt.aes"
    enc.write_bytes(b"\x00" * 32)
    app = FileCryptApp(config=config)

    async with app.run_test(size=(100, 40)) as pilot:
        app.path_input.value = str(enc)
        app.passphrase_input.value = "pw"
        app.action_decrypt()
        await pilot.pause()

        assert isinstance(app.screen, MessageModal)
        assert app.screen.kind == "error"
        assert app.screen.message_title == "Decryption failed"
        assert not (tmp_path / "bad.txt").exists()


@pytest.mark.asyncio
async def test_info_button(config):
    app = FileCryptApp(config=config)

    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.click("#info")
        await pilot.pause()

        assert isinstance(app.screen, MessageModal)
        assert app.screen.kind == "info"
        assert app.screen.message_title == "Algorithm Information"
