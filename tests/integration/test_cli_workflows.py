"""End-to-end checks of the container format against the plain console menu."""

import os

from filecrypt.frontend.cli.context import AppConfig
from filecrypt.frontend.cli.menu import ConsoleMenu
from filecrypt.security.kdf import derive_key

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes


def _run_menu(answers, passwords):
    answers = iter(answers)
    passwords = iter(passwords)
    lines = []
    ConsoleMenu(
        AppConfig(),
        input_fn=lambda _="": next(answers),
        password_fn=lambda _="": next(passwords),
        output_fn=lines.append,
    ).run()
    return "\n".join(lines)


def test_container_is_salt_then_cbc_ciphertext(tmp_path):
    """The file on disk decrypts with nothing but the salt header and the passphrase."""
    data = os.urandom(100_003)
    src = tmp_path / "archive.tar"
    src.write_bytes(data)

    _run_menu(["1", str(src), "", "4"], ["abc123"])

    blob = (tmp_path / "archive.tar.aes").read_bytes()
    assert len(blob) == 16 + (len(data) // 16 + 1) * 16

    key, iv = derive_key("abc123", blob[:16])
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(blob[16:]) + decryptor.finalize()
    unpadder = padding.PKCS7(128).unpadder()
    assert unpadder.update(padded) + unpadder.finalize() == data


def test_wrong_password_then_right_password(tmp_path):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")

    _run_menu(["1", str(src), "", "4"], ["abc123"])
    enc = tmp_path / "empty.txt.aes"
    assert enc.stat().st_size == 32
    assert not src.exists()

    # ~1/256 of wrong passphrases pass the padding check; try a few
    wrong = [f"wrong-{i}" for i in range(5)]
    answers = []
    for _ in wrong:
        answers += ["2", str(enc), ""]
    output = _run_menu(answers + ["4"], wrong)
    assert "FATAL ERROR: Incorrect password, corrupted file, or invalid format." in output

    if src.exists():
        src.unlink()
    _run_menu(["2", str(enc), "", "4"], ["abc123"])
    assert src.read_bytes() == b""
