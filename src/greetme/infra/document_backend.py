"""JSON-document implementation of :class:`~greetme.core.protocols.SettingsBackend`.

The whole settings map lives in a single pretty-printed JSON object.
Every save is a full read-modify-write of that file.

Rules
-----
* A missing file is the normal first-run state and reads as ``{}``.
* Every other ``OSError`` or parse failure is re-raised as
  :class:`~greetme.exceptions.StorageIOError`.
* Read and write are not atomic together; a concurrent external writer
  may be lost (last writer wins).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from greetme.core.models import SettingsMap
from greetme.exceptions import StorageIOError

logger = logging.getLogger(__name__)


class DocumentBackend:
    """Settings store backed by one JSON document.

    Usage::

        backend = DocumentBackend(Path("settings.json"))
        backend.save("Sam", "red")
        backend.load_all()  # {"Sam": "red"}
    """

    name: str = "document"

    def __init__(self, path: Path) -> None:
        self.path: Path = Path(path)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load_all(self) -> SettingsMap:
        """Read and parse the document.

        Raises
        ------
        StorageIOError
            When the file exists but cannot be read, is not valid JSON,
            or does not hold an object of string values.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("no settings document at %s yet", self.path)
            return {}
        except OSError as exc:
            raise StorageIOError(
                f"Cannot read settings file {self.path}: {exc}",
            ) from exc

        try:
            data: Any = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageIOError(
                f"Settings file {self.path} is not valid JSON: {exc}",
                hint="Fix or remove the file; it will be recreated on the next save.",
            ) from exc

        return self._validate(data)

    def save(self, name: str, color: str) -> None:
        """Set *name* → *color* and rewrite the whole document."""
        settings = self.load_all()
        settings[name] = color
        document = json.dumps(settings, indent=2, ensure_ascii=False) + "\n"

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(
                f"Cannot write settings file {self.path}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate(self, data: Any) -> SettingsMap:
        """Ensure the parsed document is a ``{str: str}`` object."""
        if not isinstance(data, dict):
            raise StorageIOError(
                f"Settings file {self.path} must contain a JSON object, "
                f"found {type(data).__name__}.",
            )
        bad = [key for key, value in data.items() if not isinstance(value, str)]
        if bad:
            raise StorageIOError(
                f"Settings file {self.path} has non-string colors for: "
                + ", ".join(sorted(bad)),
            )
        return dict(data)
