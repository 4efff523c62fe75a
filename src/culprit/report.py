"""
Defines the data structures for culprit search results.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Optional, Tuple

from .status import Status

__all__ = ["ProbeRecord", "SearchReport"]


@dataclass
class ProbeRecord:
    """
    One probe observed during a search.

    Attributes:
        index: Index that was probed
        value: Probe value handed to the probe mechanism
        status: Outcome of the probe
        elapsed: Wall-clock seconds spent in the probe
        phase: "verify", "bracket" or "search"
    """

    index: int
    value: str
    status: Status
    elapsed: float
    phase: str = "search"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "index": self.index,
            "value": self.value,
            "status": str(self.status),
            "elapsed": self.elapsed,
            "phase": self.phase,
        }


@dataclass
class SearchReport:
    """Outcome of one culprit search."""

    good: int
    bad: int
    lo: int
    lo_status: Status
    hi: int
    hi_status: Status
    probes: int
    runtime: float
    verify_probes: int = 0
    bracketed: bool = False
    search_path: List[ProbeRecord] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """True when an adjacent pair with differing status was isolated."""
        return self.lo < self.hi

    @property
    def before(self) -> Tuple[int, Status]:
        return self.lo, self.lo_status

    @property
    def after(self) -> Tuple[int, Status]:
        return self.hi, self.hi_status

    @property
    def summary(self) -> Dict[str, Any]:
        """
        Key facts of the search.

        Returns:
            Dictionary with the culprit pair, probe counts and runtime
        """
        return {
            "found": self.found,
            "before": {"index": self.lo, "status": str(self.lo_status)},
            "after": {"index": self.hi, "status": str(self.hi_status)},
            "probes": self.probes,
            "verify_probes": self.verify_probes,
            "bracketed": self.bracketed,
            "runtime_sec": self.runtime,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = {"good": self.good, "bad": self.bad}
        data.update(self.summary)
        data["search_path"] = [record.to_dict() for record in self.search_path]
        return data

    def to_json(self) -> str:
        """Serializes the report to a JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def show(self, stream: Optional[IO] = None) -> None:
        """Print the culprit pair, or a note that none was found."""
        out = stream if stream is not None else sys.stdout
        if not self.found:
            print("No culprit found", file=out)
            return
        print("▷ Culprit found:", file=out)
        print(f"  Before: {self.lo} [{self.lo_status}]", file=out)
        print(f"  After:  {self.hi} [{self.hi_status}]", file=out)

    def __repr__(self) -> str:
        return (
            f"SearchReport(lo={self.lo} [{self.lo_status}], hi={self.hi} [{self.hi_status}], "
            f"probes={self.probes})"
        )
