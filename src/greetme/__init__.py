"""greetme — randomized command-line greetings with remembered colors.

Built around a small settings store with a key-value backend and a JSON
document fallback.
"""

from greetme.version import __version__

__all__: list[str] = ["__version__"]
