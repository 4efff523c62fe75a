"""
Defines the two-valued probe outcome used throughout culprit.
"""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    """Outcome of a single probe: GOOD when the script exits zero, BAD otherwise."""

    GOOD = True
    BAD = False

    @classmethod
    def from_success(cls, succeeded: bool) -> "Status":
        return cls.GOOD if succeeded else cls.BAD

    @property
    def inverse(self) -> "Status":
        return Status.BAD if self is Status.GOOD else Status.GOOD

    @property
    def mark(self) -> str:
        """Single-character marker used in progress lines."""
        return "✓" if self is Status.GOOD else "✗"

    def __str__(self) -> str:
        return self.name
