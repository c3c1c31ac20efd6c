"""Infrastructure: storage capability probe and backend selection.

The key-value backend is always tried first.  Any failure to open or
enumerate it turns into a :class:`~greetme.core.models.BackendProbe`
error result and the document backend is used instead.  There is no
retry: a failed probe is assumed to stay failed for the whole run.

Rules
-----
* The probe returns a result instead of raising for storage failures.
* Selection happens at most once per :class:`BackendSelector`.
* The backend that loaded the settings is the one that saves them.
* No user-facing output; the fallback is only logged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from greetme.config import AppConfig
from greetme.core.models import BackendProbe, BackendSelection
from greetme.exceptions import StorageError
from greetme.infra.document_backend import DocumentBackend
from greetme.infra.kv_backend import KeyValueBackend

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Capability probe
# ---------------------------------------------------------------------------

def probe_key_value_backend(path: Path, *, enabled: bool = True) -> BackendProbe:
    """Try to open and enumerate the key-value store at *path*.

    Returns a :class:`BackendProbe` regardless of the outcome — the
    caller decides what to fall back to.
    """
    try:
        backend = KeyValueBackend.open(path, enabled=enabled)
        settings = backend.load_all()
    except StorageError as exc:
        return BackendProbe.err(str(exc))
    return BackendProbe.ok(backend, settings)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class BackendSelector:
    """Chooses the settings backend for one process run.

    Parameters
    ----------
    config:
        Supplies the key-value path, the document path and the
        key-value capability flag.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._selection: BackendSelection | None = None

    def select(self) -> BackendSelection:
        """Return the cached selection, probing on first call.

        Raises
        ------
        StorageIOError
            When the fallback document cannot be read or parsed.
        """
        if self._selection is None:
            self._selection = self._select()
        return self._selection

    def _select(self) -> BackendSelection:
        probe = probe_key_value_backend(
            self._config.kv_path,
            enabled=self._config.kv_enabled,
        )
        if probe.available and probe.backend is not None:
            logger.debug("using key-value backend at %s", self._config.kv_path)
            return BackendSelection(backend=probe.backend, settings=probe.settings)

        logger.info(
            "key-value backend unavailable (%s); using settings document %s",
            probe.reason,
            self._config.settings_file,
        )
        document = DocumentBackend(self._config.settings_file)
        return BackendSelection(
            backend=document,
            settings=document.load_all(),
            fallback_reason=probe.reason,
        )
