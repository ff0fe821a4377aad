# tests/conftest.py

from __future__ import annotations

import logging
import os

import pytest
from click.testing import CliRunner

# colors off before theme is imported, so rendered output is plain text
os.environ.setdefault("NO_COLOR", "1")
os.environ.pop("FORCE_COLOR", None)

import logging_setup  # noqa: E402
from store import TaskStore  # noqa: E402


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("TODO_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    while logging_setup._installed:
        h = logging_setup._installed.pop()
        root.removeHandler(h)
        h.close()
