"""Carrying out a parsed sub-command against a vault store."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from .action import Action, help_text
from .store import Store
from .vault import Vault


class NotFoundError(LookupError):
    """Raised when no vault has the requested ID."""


def copy_to_clipboard(text: str) -> None:
    """Place ``text`` on the system clipboard."""
    try:
        import tkinter
    except ImportError as exc:
        raise OSError("clipboard is not available") from exc
    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        raise OSError(f"clipboard is not available: {exc}") from exc
    try:
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
    finally:
        root.destroy()


def generate(title: str, url: str, store: Store) -> Vault:
    """Create a vault with a fresh encrypted code and append it to the store."""
    vault = Vault(title=title, url=url)
    vault.generate_code()
    vault.encrypt()
    vaults = store.read()
    vaults.append(vault)
    store.write(vaults)
    return vault


def list_vaults(store: Store, out: TextIO) -> None:
    """Write one numbered line per stored vault."""
    for number, vault in enumerate(store.read(), start=1):
        out.write(f"{number} - Title: {vault.title}, URL: {vault.url}\n")


def get(vault_id: int, store: Store, copy: Callable[[str], None]) -> str:
    """Decrypt the vault numbered ``vault_id``, hand it to ``copy`` and return it."""
    vaults = store.read()
    index = vault_id - 1
    vault = vaults[index] if 0 <= index < len(vaults) else None
    if vault is None or not vault.code:
        raise NotFoundError("not found ID")
    code = vault.decrypt()
    copy(code)
    return code


def execute(
    sub,
    store: Store,
    out: Optional[TextIO] = None,
    copy: Optional[Callable[[str], None]] = None,
) -> None:
    """Run the sub-command described by ``sub``."""
    if out is None:
        out = sys.stdout
    if sub.action is None:
        return
    if sub.action is Action.HELP or sub.help:
        out.write(help_text(sub.action))
        return
    if sub.action is Action.GENERATE:
        generate(sub.title, sub.url, store)
    elif sub.action is Action.LIST:
        list_vaults(store, out)
    elif sub.action is Action.GET:
        get(sub.vault_id, store, copy_to_clipboard if copy is None else copy)