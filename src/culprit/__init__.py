"""
culprit: find where a linear history flips from GOOD to BAD.

Quick Start:
    >>> from culprit import find_culprit
    >>> report = find_culprit("make test", good=120, bad=180)
    >>> report.show()

The probe script sees the current index in $PROBE and is GOOD when it exits 0.
"""

__version__ = "0.1.0"

# Primary API
from .search import find_culprit
from .report import ProbeRecord, SearchReport
from .status import Status
from .core.search_engine import SearchEngine, SearchState, bisect, bracket, clog2
from .errors import (
    BracketError,
    CulpritError,
    InputError,
    InvalidProbeIndex,
    ProbeError,
    VerificationError,
)

# Modules
from . import probes

__all__ = [
    # Primary API
    "find_culprit",
    "SearchEngine",
    "SearchReport",
    "SearchState",
    "ProbeRecord",
    "Status",
    # Phases
    "bisect",
    "bracket",
    "clog2",
    # Errors
    "CulpritError",
    "InputError",
    "VerificationError",
    "BracketError",
    "ProbeError",
    "InvalidProbeIndex",
    # Modules
    "probes",
]
