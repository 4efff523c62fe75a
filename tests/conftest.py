"""
Pytest configuration and shared fixtures for culprit tests.
"""

import logging
import os
import shutil
from typing import Callable, List

import pytest

from culprit.status import Status


class ScriptedProbe:
    """Monotonic status function that records every index it is asked about."""

    def __init__(self, flip: int, below: Status = Status.GOOD):
        self.flip = flip
        self.below = below
        self.calls: List[int] = []
        self.phases: List[str] = []

    def status(self, index: int) -> Status:
        return self.below if index < self.flip else self.below.inverse

    def __call__(self, index: int, phase: str = "search") -> Status:
        self.calls.append(index)
        self.phases.append(phase)
        return self.status(index)


@pytest.fixture
def scripted_probe() -> Callable[..., ScriptedProbe]:
    """Returns a factory for scripted monotonic probes."""

    def _make(flip: int, below: Status = Status.GOOD) -> ScriptedProbe:
        return ScriptedProbe(flip, below)

    return _make


@pytest.fixture
def shell_path() -> str:
    """Returns a POSIX shell, skipping when none is available."""
    path = shutil.which("sh") or "/bin/sh"
    if not os.path.exists(path):
        pytest.skip("no POSIX shell available")
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CULPRIT_* settings from the developer's shell out of the tests."""
    monkeypatch.delenv("CULPRIT_SHELL", raising=False)
    monkeypatch.delenv("CULPRIT_DEBUG", raising=False)
    # Pin argparse's help wrapping width so help-text checks don't depend on the terminal.
    monkeypatch.setenv("COLUMNS", "120")
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs on the package logger."""
    yield
    logger = logging.getLogger("culprit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
