"""Streams, binary reading, file helpers, INI parsing, configuration, randomness and encryption."""

__version__ = "1.0.0"

__all__ = [
    "binary_reader",
    "configuration",
    "encryptor",
    "file",
    "ini",
    "random",
    "stream",
]