"""Custom exception hierarchy for greetme.

All exceptions that cross layer boundaries must inherit from
:class:`GreetmeError`.  Raw storage exceptions (``sqlite3.Error``,
``OSError``, ``json.JSONDecodeError``) must NEVER propagate beyond the
infrastructure layer — they must be caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
GreetmeError
├── UsageError
├── PromptCancelledError
├── ConfigError
├── EnvironmentError
└── StorageError
    ├── BackendUnavailableError
    └── StorageIOError
"""

from __future__ import annotations


class GreetmeError(Exception):
    """Base exception for all greetme errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(GreetmeError):
    """Raised when the command line cannot be acted upon."""


class PromptCancelledError(GreetmeError):
    """Raised when the operator aborts an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class ConfigError(GreetmeError):
    """Raised when a ``GREETME_*`` setting has an invalid value."""


class EnvironmentError(GreetmeError):
    """Raised when a required runtime dependency is not available."""


# --- Storage ---------------------------------------------------------------

class StorageError(GreetmeError):
    """Base class for settings-store failures."""


class BackendUnavailableError(StorageError):
    """Raised when a storage backend cannot be opened or enumerated.

    The backend selector recovers from this by falling back to the
    document backend; it never reaches the operator.
    """


class StorageIOError(StorageError):
    """Raised when the active backend fails to read, parse or write."""


def usage_examples() -> str:
    """Return the example invocations shown when ``--save`` is missing."""
    return "\n".join(
        (
            "Please use one of the following examples:",
            "    greetme --save",
            "    greetme --name=John --save",
            "    greetme -n John -c green -s",
        )
    )
