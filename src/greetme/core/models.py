"""Domain models for greetme.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from greetme.core.protocols import SettingsBackend


SettingsMap = dict[str, str]
"""User name → preferred color.  A per-run snapshot, never cached."""


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSet:
    """Typed view of one invocation's command-line tokens."""

    help: bool = False
    save: bool = False
    name: str | None = None
    color: str | None = None


# ---------------------------------------------------------------------------
# Backend probing and selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BackendProbe:
    """Result of a storage capability probe.

    Either *ok* — :attr:`backend` is usable and :attr:`settings` holds
    what it loaded — or *err*, with :attr:`reason` explaining why the
    backend cannot be used in this run.  Build instances through
    :meth:`ok` and :meth:`err`.
    """

    available: bool
    backend: SettingsBackend | None
    settings: SettingsMap
    reason: str | None

    @classmethod
    def ok(cls, backend: SettingsBackend, settings: SettingsMap) -> BackendProbe:
        return cls(available=True, backend=backend, settings=settings, reason=None)

    @classmethod
    def err(cls, reason: str) -> BackendProbe:
        return cls(available=False, backend=None, settings={}, reason=reason)


@dataclass(frozen=True, slots=True)
class BackendSelection:
    """The backend chosen for this run and the settings it loaded."""

    backend: SettingsBackend
    settings: SettingsMap
    fallback_reason: str | None = None
    """Why the key-value backend was skipped, or ``None`` if it is active."""


# ---------------------------------------------------------------------------
# Session outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HelpRequested:
    """The invocation asked for usage text; nothing was resolved."""


@dataclass(frozen=True, slots=True)
class ResolvedSession:
    """A completed session: the name and color were resolved and saved."""

    name: str
    color: str
    backend_name: str


SessionOutcome = HelpRequested | ResolvedSession
"""What the CLI layer should do after a session has run."""


@dataclass(frozen=True, slots=True)
class Greeting:
    """A fully resolved greeting ready for rendering."""

    text: str
    name: str
    color: str
