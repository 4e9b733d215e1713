"""Operator prompts used by the selection navigator."""

from collections.abc import Callable, Sequence
from typing import Any, Protocol

import questionary

from ecs_session.cli.ui import print_menu

CHOICE_PROMPT = "Enter the number of your choice:"


class PromptCancelledError(Exception):
    """Signal that the operator aborted a prompt."""


class Prompter(Protocol):
    """Interaction surface the navigator needs from the operator."""

    def choose(self, entity: str, options: Sequence[str], allow_back: bool = True) -> int | None:
        """Return the 0-based index of the chosen option, or None for back."""

    def ask_number(self, message: str) -> int | None:
        """Return the number entered, or None when the input is not a number."""

    def confirm(self, message: str) -> bool:
        """Return the answer to a yes/no question."""

    def text(self, message: str) -> str:
        """Return a non-empty line of free text."""


def menu_choice_validator(count: int, allow_back: bool) -> Callable[[str], bool | str]:
    """Build a validator for a numbered menu answer.

    Args:
        count: Number of options, numbered from 1.
        allow_back: Whether 0 is accepted as "go back".

    Returns:
        A Questionary validator returning True or an error message.
    """
    lowest = 0 if allow_back else 1

    def validate(value: str) -> bool | str:
        text = value.strip()
        if not text.isdigit():
            return "Enter a number."
        if not lowest <= int(text) <= count:
            if allow_back and not count:
                return "Nothing to choose. Enter 0 to go back."
            return f"Enter a number between {lowest} and {count}."
        return True

    return validate


def _required(value: str) -> bool | str:
    """Reject blank answers."""
    return True if value.strip() else "A value is required."


class QuestionaryPrompter:
    """Prompter backed by Questionary."""

    def choose(self, entity: str, options: Sequence[str], allow_back: bool = True) -> int | None:
        """Show a numbered menu and ask until a valid number is entered.

        Args:
            entity: Kind of thing being chosen, e.g. ``cluster``.
            options: Options to show.
            allow_back: Whether to offer option 0 to go back.

        Returns:
            The 0-based index of the option, or None when 0 was chosen.
        """
        if allow_back:
            print_menu(f"Choose a {entity} (or type '0' to go back):", options, "Go back")
        else:
            print_menu(f"Choose a {entity}:", options)

        answer = _ask(
            questionary.text(
                CHOICE_PROMPT,
                validate=menu_choice_validator(len(options), allow_back),
            )
        )
        choice = int(answer.strip())
        if choice == 0:
            return None
        return choice - 1

    def ask_number(self, message: str) -> int | None:
        answer = _ask(questionary.text(message)).strip()
        try:
            return int(answer)
        except ValueError:
            return None

    def confirm(self, message: str) -> bool:
        return bool(_ask(questionary.confirm(message, default=False)))

    def text(self, message: str) -> str:
        return str(_ask(questionary.text(message, validate=_required))).strip()


def _ask(question: questionary.Question) -> Any:
    """Ask a question, turning Ctrl-C into PromptCancelledError."""
    answer = question.ask()
    if answer is None:
        raise PromptCancelledError()
    return answer
