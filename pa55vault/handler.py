"""Validating command-line arguments and dispatching the sub-command."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .action import Action
from .executor import execute
from .store import Store

_NUMBER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class UsageError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass
class Sub:
    """A parsed sub-command."""

    action: Optional[Action] = None
    help: bool = False
    title: str = ""
    url: str = ""
    vault_id: int = 0


def default_vault_path() -> Path:
    """Return the vault file in the user's home directory."""
    return Path.home() / "vault.json"


def _is_help(arg: str) -> bool:
    return arg.upper() == Action.HELP.value


def _parse_id(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


@dataclass
class Handler:
    """Turns raw arguments into a sub-command and runs it."""

    args: list[str]
    sub: Sub = field(default_factory=Sub)

    def __post_init__(self) -> None:
        self.args = list(self.args)

    def validate(self) -> None:
        """Raise UsageError unless the arguments form a valid sub-command."""
        args = self.args
        if not args:
            raise UsageError("not enough args")
        try:
            action = Action(args[0].upper())
        except ValueError:
            raise UsageError("invalid args") from None

        if action is Action.GENERATE:
            if len(args) > 3:
                raise UsageError("require: generate Title URL")
            if len(args) >= 2 and _is_help(args[1]):
                return
            if len(args) != 3:
                raise UsageError("require: generate Title URL")
        elif action is Action.LIST:
            if len(args) == 2 and _is_help(args[1]):
                return
            if len(args) != 1:
                raise UsageError("require: list")
        elif action is Action.GET:
            if len(args) != 2:
                raise UsageError("require: get ID")
            if _is_help(args[1]):
                return
            try:
                vault_id = _parse_id(args[1])
            except ValueError:
                raise UsageError("require: get ID, ID should be a number") from None
            if vault_id == 0:
                raise UsageError("require: get ID, ID more than 1")

    def mapper(self) -> None:
        """Fill ``sub`` from already validated arguments."""
        args = self.args
        action = Action(args[0].upper())
        if action is Action.GENERATE:
            if _is_help(args[1]):
                self.sub = Sub(action=action, help=True)
            else:
                self.sub = Sub(action=action, title=args[1], url=args[2])
        elif action is Action.LIST:
            self.sub = Sub(action=action, help=len(args) == 2)
        elif action is Action.GET:
            if _is_help(args[1]):
                self.sub = Sub(action=action, help=True)
            else:
                self.sub = Sub(action=action, vault_id=_parse_id(args[1]))
        else:
            self.sub = Sub(action=action)

    def run(self, file_path: Union[str, Path, None] = None) -> None:
        """Validate, map and execute against the vault file."""
        self.validate()
        self.mapper()
        path = default_vault_path() if file_path is None else file_path
        execute(self.sub, Store(path))