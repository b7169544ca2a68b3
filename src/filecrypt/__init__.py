"""FileCrypt: passphrase-based AES-256-CBC file encryption."""

__version__ = "1.0.0"
