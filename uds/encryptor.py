"""Symmetric stream encryption keyed from a password."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Callable, Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes


@dataclass(frozen=True)
class _CipherSpec:
    key_length: int
    iv_length: int
    mode: Optional[Callable[[bytes], modes.Mode]]
    padded: bool


def _build_specs() -> dict[str, _CipherSpec]:
    specs: dict[str, _CipherSpec] = {}
    for bits in (128, 192, 256):
        key_length = bits // 8
        specs[f"aes-{bits}-cfb"] = _CipherSpec(key_length, 16, modes.CFB, False)
        specs[f"aes-{bits}-cfb8"] = _CipherSpec(key_length, 16, modes.CFB8, False)
        specs[f"aes-{bits}-ofb"] = _CipherSpec(key_length, 16, modes.OFB, False)
        specs[f"aes-{bits}-ctr"] = _CipherSpec(key_length, 16, modes.CTR, False)
        specs[f"aes-{bits}-cbc"] = _CipherSpec(key_length, 16, modes.CBC, True)
        specs[f"aes-{bits}-ecb"] = _CipherSpec(key_length, 0, None, True)
        specs[f"aes{bits}"] = specs[f"aes-{bits}-cbc"]
    return specs


_SPECS = _build_specs()
_BLOCK_SIZE = 16
_TEXT_ENCODING = "utf-8"


def _to_bytes(value) -> bytes:
    if isinstance(value, str):
        return value.encode(_TEXT_ENCODING)
    return bytes(value)


def evp_bytes_to_key(password, key_length: int, iv_length: int) -> tuple[bytes, bytes]:
    """Derive a key and IV from a password with MD5, no salt and one round."""
    material = _to_bytes(password)
    derived = b""
    block = b""
    while len(derived) < key_length + iv_length:
        block = hashlib.md5(block + material).digest()
        derived += block
    return derived[:key_length], derived[key_length:key_length + iv_length]


class Encryptor:
    """Encrypts and decrypts buffers with a fixed key and IV.

    Each call starts the cipher afresh, so every buffer is processed
    independently. Only whole cipher output is returned; no final padding
    block is produced or consumed.
    """

    def __init__(self, method: str, password) -> None:
        spec = _SPECS.get(method.lower()) if method else None
        if spec is None:
            raise ValueError(f"unsupported cipher method: {method!r}")
        self._method = method
        self._spec = spec
        self._key, self._iv = evp_bytes_to_key(password, spec.key_length, spec.iv_length)

    @property
    def method(self) -> str:
        return self._method

    @staticmethod
    def support(method: str) -> bool:
        """Whether ``method`` names a supported cipher."""
        if not method:
            return False
        return method.lower() in _SPECS

    def _cipher(self) -> Cipher:
        mode = self._spec.mode(self._iv) if self._spec.mode else modes.ECB()
        return Cipher(algorithms.AES(self._key), mode)

    def encrypt(self, data) -> bytes:
        """Encrypt ``data``; block modes return only complete blocks."""
        payload = bytes(data)
        if not payload:
            return b""
        encryptor = self._cipher().encryptor()
        return encryptor.update(payload)

    def decrypt(self, data) -> bytes:
        """Decrypt ``data``; block modes hold back the final block."""
        payload = bytes(data)
        if not payload:
            return b""
        if self._spec.padded:
            usable = len(payload) // _BLOCK_SIZE * _BLOCK_SIZE
            if usable == len(payload):
                usable -= _BLOCK_SIZE
            payload = payload[:usable]
            if not payload:
                return b""
        decryptor = self._cipher().decryptor()
        return decryptor.update(payload)