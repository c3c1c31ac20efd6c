"""Shared pytest fixtures and configuration for the greetme test suite.

Guidelines
----------
* Storage paths always live under ``tmp_path`` — never the real CWD.
* Prompts are scripted; no test blocks on a terminal.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from greetme.config import AppConfig

from tests.fakes import RecordingRenderer


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` calls made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def kv_path(tmp_path: Path) -> Path:
    return tmp_path / "kv.db"


@pytest.fixture
def kv_config(settings_file: Path, kv_path: Path) -> AppConfig:
    """Configuration with the key-value backend enabled."""
    return AppConfig(settings_file=settings_file, kv_path=kv_path, kv_enabled=True)


@pytest.fixture
def document_config(settings_file: Path, kv_path: Path) -> AppConfig:
    """Configuration with the key-value capability switched off."""
    return AppConfig(settings_file=settings_file, kv_path=kv_path, kv_enabled=False)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
