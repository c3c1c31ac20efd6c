"""Allow ``python -m greetme`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m greetme`` behaves identically to the ``greetme``
console script.
"""

from __future__ import annotations

from greetme.cli.app import cli

if __name__ == "__main__":
    cli()
