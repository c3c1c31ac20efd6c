"""Greeting corpus and styled rendering.

Picks a random greeting and writes ``"<greeting>, <name>!"`` to stdout
in bold, tinted with the operator's color.
"""

from __future__ import annotations

import random
import sys
from typing import Any

from greetme.cli.console import get_rich_console
from greetme.core.models import Greeting
from greetme.exceptions import EnvironmentError

GREETINGS: tuple[str, ...] = (
    "Hello",
    "Hi",
    "Hey",
    "Howdy",
    "Greetings",
    "Good to see you",
    "Welcome back",
    "Hola",
    "Bonjour",
    "Ciao",
    "Hallo",
    "Namaste",
    "Salaam",
    "Konnichiwa",
    "Ahoy",
)


def pick_greeting(rng: random.Random | None = None) -> str:
    """Return one greeting chosen uniformly at random."""
    chooser = rng if rng is not None else random
    return chooser.choice(GREETINGS)


def build_greeting(name: str, color: str, rng: random.Random | None = None) -> Greeting:
    return Greeting(text=pick_greeting(rng), name=name, color=color)


def _style_for(color: str) -> Any:
    """Bold + *color*, or plain bold when Rich does not know the color."""
    from rich.errors import StyleSyntaxError
    from rich.style import Style

    try:
        return Style.parse(f"bold {color}")
    except StyleSyntaxError:
        return Style(bold=True)


class RichGreetingRenderer:
    """Renders greetings on stdout; falls back to plain text without Rich."""

    def render(self, greeting: Greeting) -> None:
        line = f"{greeting.text}, {greeting.name}!"
        try:
            rich_console = get_rich_console(stderr=False)
        except EnvironmentError:
            print(line, file=sys.stdout)
            return
        rich_console.print(line, style=_style_for(greeting.color), markup=False, highlight=False)
