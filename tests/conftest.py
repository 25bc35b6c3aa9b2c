"""Shared pytest fixtures for create-component tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_component.observability import clear_context, configure_logging


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project root used as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_logging() -> None:
    """Point log output at this test's stderr and drop context from earlier CLI runs."""
    configure_logging(force=True)
    clear_context()
