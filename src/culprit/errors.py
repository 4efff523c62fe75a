"""
Exception hierarchy for culprit.

Every failure that ends a search derives from CulpritError. A BAD probe
status is ordinary data and never raises.
"""

from __future__ import annotations

from typing import Any


class CulpritError(Exception):
    """Base exception for all culprit errors."""


class InputError(CulpritError):
    """Raised when endpoints or options are malformed, before any probe runs."""


class VerificationError(CulpritError):
    """Raised when an endpoint probes to the opposite of its assumed status."""

    def __init__(self, value: int, expected: Any, actual: Any):
        self.value = value
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Value {value} reports as {actual}, but is expected to be {expected}"
        )


class BracketError(CulpritError):
    """Raised when bracketing overflows or passes the maximum without a flip."""


class ProbeError(CulpritError):
    """Raised when the probe mechanism itself could not be executed."""


class InvalidProbeIndex(ProbeError):
    """Raised when an index has no entry in the probe mapping."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"invalid probe index {index} (mapping has {size} entries)")
