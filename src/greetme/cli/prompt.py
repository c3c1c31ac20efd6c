"""Interactive operator prompts for the CLI layer.

:class:`QuestionaryPrompter` satisfies
:class:`~greetme.core.protocols.PromptProvider`; the session blocks on
it whenever a name or color is neither on the command line nor stored.
"""

from __future__ import annotations

from typing import Any

from greetme.exceptions import EnvironmentError, PromptCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _not_blank(text: str) -> bool | str:
    """questionary validator: reject empty or whitespace-only answers."""
    return bool(text.strip()) or "Please enter a value."


class QuestionaryPrompter:
    """Blocking text prompt backed by questionary."""

    def prompt(self, message: str) -> str:
        """Ask *message* and return the stripped answer.

        Raises
        ------
        PromptCancelledError
            If the operator presses Ctrl+C or Esc (questionary returns
            ``None``).
        """
        questionary = _import_questionary()

        answer: str | None = questionary.text(message, validate=_not_blank).ask()
        if answer is None:
            raise PromptCancelledError(
                "No answer given.",
                hint="Pass --name and --color to skip the prompts.",
            )
        return answer.strip()
