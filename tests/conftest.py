"""Pytest configuration for test isolation.

The CLI loads ``.env`` from the working directory and reads
``SPEND_SUMMARY_DATA`` / ``SPEND_SUMMARY_LOG_LEVEL`` from the environment, and
``configure_logging`` installs a handler only once per process. To keep tests
hermetic each test runs in its own temporary working directory with those
variables cleared, and logging is reset afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from spend_summary.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test from an empty working directory with a clean environment."""

    work = tmp_path / "cwd"
    work.mkdir(parents=True, exist_ok=True)
    monkeypatch.chdir(work)
    for var in ("SPEND_SUMMARY_DATA", "SPEND_SUMMARY_LOG_LEVEL"):
        # setenv first so monkeypatch also undoes values loaded from a .env file.
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    yield
    reset_logging()
