"""Command-line token resolution.

Turns raw tokens into an :class:`~greetme.core.models.OptionSet`.
Parsing is deliberately non-strict: tokens that match none of the four
known options, or that argparse cannot make sense of, are ignored
rather than rejected.

Guarantees
----------
* No I/O, no ``print()``, never exits the process.
* Never raises for any token sequence.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from greetme.core.models import OptionSet

_BOOLEAN_LONG_FLAGS: tuple[str, ...] = ("--help", "--save")
_FALSE_WORDS: frozenset[str] = frozenset({"", "false", "0", "no", "off"})


def build_parser() -> argparse.ArgumentParser:
    """Construct the option table shared by :func:`resolve` and ``--help``.

    ``add_help`` is disabled so that ``--help`` is reported as a flag
    instead of making argparse print and exit on its own.  A string
    option given without a value resolves to ``""``.
    """
    parser = argparse.ArgumentParser(
        prog="greetme",
        description="Print a randomized greeting in your favorite color.",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Display this help and exit",
    )
    parser.add_argument(
        "-s",
        "--save",
        action="store_true",
        help="Save settings for future greetings",
    )
    parser.add_argument(
        "-n",
        "--name",
        metavar="<name>",
        nargs="?",
        const="",
        default=None,
        help="Set your name for the greeting",
    )
    parser.add_argument(
        "-c",
        "--color",
        metavar="<color>",
        nargs="?",
        const="",
        default=None,
        help="Set the color of the greeting",
    )
    return parser


# ---------------------------------------------------------------------------
# Token clean-up (pure)
# ---------------------------------------------------------------------------

def _normalize_boolean_values(tokens: Sequence[str]) -> list[str]:
    """Rewrite ``--save=true`` as ``--save``; drop ``--save=false``."""
    normalized: list[str] = []
    for token in tokens:
        flag, sep, value = token.partition("=")
        if sep and flag in _BOOLEAN_LONG_FLAGS:
            if value.strip().lower() not in _FALSE_WORDS:
                normalized.append(flag)
            continue
        normalized.append(token)
    return normalized


def _offending_index(tokens: Sequence[str], exc: argparse.ArgumentError) -> int | None:
    """Locate the token argparse choked on, or ``None`` if it cannot be told."""
    names = [name for name in (exc.argument_name or "").split("/") if name]
    for index, token in enumerate(tokens):
        if token in names:
            continue
        if any(token.startswith(name) for name in names):
            return index
    # Clustered short flags such as ``-shx`` report the inner flag.
    for index, token in enumerate(tokens):
        if token.startswith("-") and not token.startswith("--") and len(token) > 2:
            return index
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve(tokens: Sequence[str]) -> OptionSet:
    """Resolve *tokens* into an :class:`OptionSet`.

    Both ``--name John`` and ``--name=John`` are accepted, as are the
    one-letter aliases.  Unknown tokens are dropped silently; a token
    argparse rejects is dropped and the rest re-parsed.
    """
    parser = build_parser()
    remaining = _normalize_boolean_values(tokens)

    while True:
        try:
            namespace, _unknown = parser.parse_known_args(remaining)
            break
        except argparse.ArgumentError as exc:
            index = _offending_index(remaining, exc)
            if index is None:
                namespace, _unknown = parser.parse_known_args([])
                break
            del remaining[index]

    return OptionSet(
        help=bool(namespace.help),
        save=bool(namespace.save),
        name=namespace.name,
        color=namespace.color,
    )
