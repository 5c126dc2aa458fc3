"""Vault entries: password generation and symmetric encryption of the code."""

from __future__ import annotations

import base64
import binascii
import os
import secrets
from dataclasses import dataclass
from random import SystemRandom
from typing import Any, Mapping

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBER = "0123456789"
SYMBOL = "!#$%&()-@_<>"

TOKEN_LENGTH = 12
BLOCK_SIZE = 16

# Fixed 32-byte AES-256 key shared by every vault file.
_KEY = b"12345678901234567890123456789012"

_FIELDS = ("title", "url", "code", "iv")


class DecryptError(ValueError):
    """Raised when a stored code cannot be decrypted."""


def pkcs7_pad(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` to a multiple of ``block_size`` using PKCS#7."""
    pad_len = block_size - len(data) % block_size
    return data + bytes([pad_len]) * pad_len


def pkcs7_unpad(data: bytes) -> bytes:
    """Strip PKCS#7 padding; an impossible pad length yields empty bytes."""
    if not data:
        return b""
    pad_len = data[-1]
    if pad_len > len(data):
        return b""
    return data[: len(data) - pad_len]


def _cipher(iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(_KEY), modes.CBC(iv))


@dataclass
class Vault:
    """A stored credential: title, URL, encrypted code and its IV."""

    title: str = ""
    url: str = ""
    code: str = ""
    iv: str = ""

    def generate_code(self) -> None:
        """Fill ``code`` with a random token holding every character class."""
        charsets = (UPPERCASE, LOWERCASE, NUMBER, SYMBOL)
        token = [secrets.choice(charset) for charset in charsets]
        alphabet = "".join(charsets)
        token.extend(secrets.choice(alphabet) for _ in range(TOKEN_LENGTH - len(charsets)))
        SystemRandom().shuffle(token)
        self.code = "".join(token)

    def encrypt(self) -> None:
        """Encrypt ``code`` in place with AES-CBC and a fresh random IV."""
        iv = os.urandom(BLOCK_SIZE)
        encryptor = _cipher(iv).encryptor()
        padded = pkcs7_pad(self.code.encode("utf-8"), BLOCK_SIZE)
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        self.iv = iv.hex()
        self.code = base64.b64encode(ciphertext).decode("ascii")

    def decrypt(self) -> str:
        """Return the plain code; the vault itself is left unchanged."""
        try:
            ciphertext = base64.b64decode(self.code, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecryptError(f"invalid code: {exc}") from exc
        try:
            iv = binascii.unhexlify(self.iv)
        except (binascii.Error, ValueError) as exc:
            raise DecryptError(f"invalid iv: {exc}") from exc
        if len(iv) != BLOCK_SIZE or len(ciphertext) % BLOCK_SIZE:
            raise DecryptError("failed decrypt")
        decryptor = _cipher(iv).decryptor()
        decrypted = decryptor.update(ciphertext) + decryptor.finalize()
        return pkcs7_unpad(decrypted).decode("utf-8", errors="replace")

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object form of the vault."""
        return {name: getattr(self, name) for name in _FIELDS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Vault:
        """Build a vault from its JSON object form; missing fields are empty."""
        if not isinstance(data, Mapping):
            raise ValueError(f"vault entry must be an object, not {type(data).__name__}")
        values: dict[str, str] = {}
        for name in _FIELDS:
            value = data.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"vault field {name!r} must be a string")
            values[name] = value
        return cls(**values)