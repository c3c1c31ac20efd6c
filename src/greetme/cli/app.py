"""CLI application entry point for greetme.

This module is the **sole error boundary** for the entire application.
It catches :class:`~greetme.exceptions.GreetmeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — option resolution and the session
  state machine live in the core layer, storage in the infra layer.
* Greetings go to stdout; errors, hints and logs go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from greetme.cli import exit_codes
from greetme.cli.console import console
from greetme.config import AppConfig, get_config
from greetme.core.models import HelpRequested
from greetme.core.options import build_parser, resolve
from greetme.core.protocols import GreetingRenderer, PromptProvider
from greetme.core.session import GreetingSession
from greetme.exceptions import GreetmeError
from greetme.logging import configure_logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------

def _print_help() -> None:
    """Write the usage text for the option table to stdout."""
    build_parser().print_help(file=sys.stdout)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    config: AppConfig | None = None,
    prompter: PromptProvider | None = None,
    renderer: GreetingRenderer | None = None,
) -> int:
    """Run the greetme CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    config, prompter, renderer:
        Collaborators to use instead of the environment configuration,
        the questionary prompter and the Rich renderer.  Tests pass
        scripted doubles here.

    Returns
    -------
    int
        OS process exit code.
    """
    from greetme.cli.greeting import RichGreetingRenderer, build_greeting
    from greetme.cli.prompt import QuestionaryPrompter
    from greetme.infra.backend_selector import BackendSelector

    config = config if config is not None else get_config()
    configure_logging(config.log_level, config.log_format)

    tokens = list(sys.argv[1:] if argv is None else argv)
    options = resolve(tokens)

    selector = BackendSelector(config)
    session = GreetingSession(
        selector.select,
        prompter if prompter is not None else QuestionaryPrompter(),
    )
    outcome = session.run(options)

    if isinstance(outcome, HelpRequested):
        _print_help()
        return exit_codes.SUCCESS

    renderer = renderer if renderer is not None else RichGreetingRenderer()
    renderer.render(build_greeting(outcome.name, outcome.color))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GreetmeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
