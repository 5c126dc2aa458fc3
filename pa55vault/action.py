"""Sub-commands and their help texts."""

from __future__ import annotations

from enum import Enum

HELP_TEXT = """generate password cli

Available Commands:
  generate: generate_command generates a password
  list:     list_command gets generated list
  get:      get_command get a generated password
"""

GENERATE_HELP = """generate password

Usage:
  generate [title] [url]
"""

GET_HELP = """get a generated password
The retrieved password is saved to the clipboard.

Usage:
  get [ID]
"""


class Action(Enum):
    """A sub-command, valued by its upper-case name."""

    GENERATE = "GENERATE"
    LIST = "LIST"
    GET = "GET"
    HELP = "HELP"


_HELP_BY_ACTION = {
    Action.GENERATE: GENERATE_HELP,
    Action.LIST: HELP_TEXT,
    Action.GET: GET_HELP,
    Action.HELP: HELP_TEXT,
}


def help_text(action: Action) -> str:
    """Return the help text shown for ``action``."""
    return _HELP_BY_ACTION[action]