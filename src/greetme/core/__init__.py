"""Core / service layer — pure option resolution and session logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli`` or ``infra``.
"""

from greetme.core.models import (
    BackendProbe,
    BackendSelection,
    Greeting,
    HelpRequested,
    OptionSet,
    ResolvedSession,
    SessionOutcome,
    SettingsMap,
)
from greetme.core.options import build_parser, resolve
from greetme.core.protocols import GreetingRenderer, PromptProvider, SettingsBackend
from greetme.core.session import GreetingSession

__all__: list[str] = [
    "BackendProbe",
    "BackendSelection",
    "Greeting",
    "GreetingRenderer",
    "GreetingSession",
    "HelpRequested",
    "OptionSet",
    "PromptProvider",
    "ResolvedSession",
    "SessionOutcome",
    "SettingsBackend",
    "SettingsMap",
    "build_parser",
    "resolve",
]
