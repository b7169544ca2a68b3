"""
Exceptions for FileCrypt
Everything the core raises on purpose derives from FileCryptError
"""


class FileCryptError(Exception):
    # general container for errors
    pass


class ValidationError(FileCryptError):
    # raised before any I/O when the caller's input is unusable
    pass


class SourceNotFoundError(ValidationError):
    # raised when the source file DNE or is not a regular file
    pass


class InvalidExtensionError(ValidationError):
    # raised when decrypting a file without the encrypted suffix
    pass


class CorruptContainerError(FileCryptError):
    # raised when the container is too short to hold the salt header
    pass


class DecryptionError(FileCryptError):
    # raised on a padding failure: wrong passphrase or corrupted ciphertext
    pass
