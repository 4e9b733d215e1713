"""Tests for the Questionary-backed prompter."""

from unittest.mock import MagicMock, patch

import pytest

from ecs_session.cli.prompts import (
    PromptCancelledError,
    QuestionaryPrompter,
    menu_choice_validator,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0", True),
        ("2", True),
        (" 3 ", True),
        ("4", "Enter a number between 0 and 3."),
        ("-1", "Enter a number."),
        ("two", "Enter a number."),
        ("", "Enter a number."),
    ],
)
def test_menu_validator_with_back(value: str, expected: bool | str) -> None:
    """Test that out-of-range and non-numeric answers are rejected."""
    assert menu_choice_validator(3, allow_back=True)(value) == expected


def test_menu_validator_without_back_rejects_zero() -> None:
    """Test that 0 is rejected when there is no back option."""
    validate = menu_choice_validator(5, allow_back=False)

    assert validate("0") == "Enter a number between 1 and 5."
    assert validate("5") is True


def test_menu_validator_empty_list_allows_only_back() -> None:
    """Test that an empty menu accepts only 0."""
    validate = menu_choice_validator(0, allow_back=True)

    assert validate("0") is True
    assert validate("1") == "Nothing to choose. Enter 0 to go back."


def _answer(value: object) -> MagicMock:
    question = MagicMock()
    question.ask.return_value = value
    return question


@patch("ecs_session.cli.prompts.questionary.text")
def test_choose_returns_zero_based_index(mock_text: MagicMock) -> None:
    """Test that the typed number maps to a 0-based index."""
    mock_text.return_value = _answer("2")

    assert QuestionaryPrompter().choose("cluster", ["prod", "staging"]) == 1


@patch("ecs_session.cli.prompts.questionary.text")
def test_choose_zero_means_back(mock_text: MagicMock) -> None:
    """Test that 0 is reported as going back."""
    mock_text.return_value = _answer("0")

    assert QuestionaryPrompter().choose("cluster", ["prod"]) is None


@patch("ecs_session.cli.prompts.questionary.text")
def test_cancelled_prompt_raises(mock_text: MagicMock) -> None:
    """Test that an aborted prompt raises PromptCancelledError."""
    mock_text.return_value = _answer(None)

    with pytest.raises(PromptCancelledError):
        QuestionaryPrompter().choose("cluster", ["prod"])


@patch("ecs_session.cli.prompts.questionary.text")
def test_ask_number_returns_none_for_text(mock_text: MagicMock) -> None:
    """Test that non-numeric input is reported as None."""
    mock_text.return_value = _answer("bash")

    assert QuestionaryPrompter().ask_number("Enter the number of your choice:") is None


@patch("ecs_session.cli.prompts.questionary.confirm")
def test_confirm(mock_confirm: MagicMock) -> None:
    """Test that confirm returns the operator's answer."""
    mock_confirm.return_value = _answer(True)

    assert QuestionaryPrompter().confirm("Use it?") is True
    mock_confirm.assert_called_once_with("Use it?", default=False)
