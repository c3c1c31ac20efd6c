"""Infrastructure layer — settings storage on the local filesystem.

This layer wraps all interaction with SQLite and the JSON settings
document.  Every raw storage exception must be caught here and
re-raised as a :class:`~greetme.exceptions.GreetmeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from greetme.infra.backend_selector import BackendSelector, probe_key_value_backend
from greetme.infra.document_backend import DocumentBackend
from greetme.infra.kv_backend import KeyValueBackend

__all__: list[str] = [
    "BackendSelector",
    "DocumentBackend",
    "KeyValueBackend",
    "probe_key_value_backend",
]
