import pytest

from pa55vault.action import GENERATE_HELP, GET_HELP, HELP_TEXT, Action, help_text


@pytest.mark.parametrize(
    "action, want",
    [
        (Action.GENERATE, "GENERATE"),
        (Action.LIST, "LIST"),
        (Action.GET, "GET"),
        (Action.HELP, "HELP"),
    ],
)
def test_action_string(action, want):
    assert action.value == want
    assert Action(want) is action


def test_action_from_lowercase_name():
    assert Action("generate".upper()) is Action.GENERATE


def test_action_rejects_unknown():
    with pytest.raises(ValueError):
        Action("INVALID")


@pytest.mark.parametrize(
    "action, want",
    [
        (Action.GENERATE, GENERATE_HELP),
        (Action.LIST, HELP_TEXT),
        (Action.GET, GET_HELP),
        (Action.HELP, HELP_TEXT),
    ],
)
def test_help_text(action, want):
    assert help_text(action) == want


def test_help_texts_describe_usage():
    assert "generate [title] [url]" in help_text(Action.GENERATE)
    assert "get [ID]" in help_text(Action.GET)