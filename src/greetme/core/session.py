"""Core session service — decides the final name and color for a run.

The session combines the resolved command line, the settings loaded by
whichever backend the selector picks, and interactive prompting.  It
depends on a backend-selection callable and a
:class:`~greetme.core.protocols.PromptProvider` injected at construction
time, keeping the core free of any storage or terminal imports.

Flow (linear, no branching back)
--------------------------------
1. ``help`` set → :class:`HelpRequested`; nothing else happens.
2. ``save`` missing → :class:`~greetme.exceptions.UsageError`.
3. Select backend, load settings.
4. Name: CLI value, else prompt.
5. Color: CLI value, else stored color for the name, else prompt.
6. Persist through the backend that loaded the settings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from greetme.core.models import (
    BackendSelection,
    HelpRequested,
    OptionSet,
    ResolvedSession,
    SessionOutcome,
)
from greetme.core.protocols import PromptProvider
from greetme.exceptions import UsageError, usage_examples

logger = logging.getLogger(__name__)

NAME_PROMPT = "Enter your name:"
COLOR_PROMPT = "Enter your favorite color:"


class GreetingSession:
    """Runs one greeting session.

    Parameters
    ----------
    select_backend:
        Zero-argument callable returning the :class:`BackendSelection`
        for this run.  It is only invoked once ``--save`` has been
        confirmed, so a rejected invocation never touches storage.
    prompter:
        Any object satisfying the :class:`PromptProvider` protocol.
    """

    def __init__(
        self,
        select_backend: Callable[[], BackendSelection],
        prompter: PromptProvider,
    ) -> None:
        self._select_backend = select_backend
        self._prompter: PromptProvider = prompter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, options: OptionSet) -> SessionOutcome:
        """Drive the session for an already resolved :class:`OptionSet`.

        Raises
        ------
        UsageError
            If ``--save`` was not given on a non-help invocation.
        StorageIOError
            If the active backend fails to load or save.
        PromptCancelledError
            If the operator aborts a prompt.
        """
        if options.help:
            return HelpRequested()

        if not options.save:
            raise UsageError("Missing required --save flag.", hint=usage_examples())

        selection = self._select_backend()
        backend = selection.backend

        name = options.name or self._prompter.prompt(NAME_PROMPT)
        color = (
            options.color
            or selection.settings.get(name)
            or self._prompter.prompt(COLOR_PROMPT)
        )

        backend.save(name, color)
        logger.debug("saved color for %r via %s backend", name, backend.name)

        return ResolvedSession(
            name=name,
            color=color,
            backend_name=backend.name,
        )
