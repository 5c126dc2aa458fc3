"""JSON file storage for vault entries."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Iterable, Union

from .vault import Vault

# Escapes applied by the original file format to keep it HTML-safe.
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _escape(text: str) -> str:
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


@dataclass
class Store:
    """Reads and writes the list of vaults kept in one JSON file."""

    file_path: Union[str, os.PathLike]

    def read(self) -> list[Vault]:
        """Load every vault from the file; the file must exist."""
        with open(self.file_path, encoding="utf-8") as handle:
            data = json.load(handle)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("vault file must hold a JSON array")
        return [Vault() if item is None else Vault.from_dict(item) for item in data]

    def write(self, vaults: Iterable[Vault]) -> None:
        """Replace the file's contents with ``vaults``."""
        text = json.dumps([vault.to_dict() for vault in vaults], indent=1, ensure_ascii=False)
        with open(self.file_path, "w", encoding="utf-8") as handle:
            handle.write(_escape(text))