"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from greetme.core.models import Greeting, SettingsMap


class SettingsBackend(Protocol):
    """Contract for settings-store backends.

    Both the key-value and the document backend satisfy this protocol
    structurally (no explicit inheritance required), so the session
    never needs to know which one is active.
    """

    name: str
    """Short identifier used in logs (``"kv"`` or ``"document"``)."""

    def load_all(self) -> SettingsMap:
        """Return every stored name → color association.

        A store with no records yet yields an empty mapping.

        Raises
        ------
        StorageIOError
            When stored data cannot be read or parsed.
        """
        ...  # pragma: no cover

    def save(self, name: str, color: str) -> None:
        """Insert or overwrite the color stored for *name*.

        Raises
        ------
        StorageIOError
            When the write does not reach durable storage.
        """
        ...  # pragma: no cover


class PromptProvider(Protocol):
    """Blocking source of operator input."""

    def prompt(self, message: str) -> str:
        """Show *message* and block until the operator answers.

        Raises
        ------
        PromptCancelledError
            If the operator aborts the prompt.
        """
        ...  # pragma: no cover


class GreetingRenderer(Protocol):
    """Writes a styled greeting to standard output."""

    def render(self, greeting: Greeting) -> None:
        ...  # pragma: no cover
