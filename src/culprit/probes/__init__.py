"""
The `culprit.probes` module turns a search index into a GOOD/BAD status by
running an external check.
"""

from .base import CallableProbe, ExecutionFailed, Exited, Probe
from .invoker import ProbeInvoker
from .mapping import DecimalMapping, ProbeMapping
from .shell import ShellProbe, expand_probe_template

__all__ = [
    # Base class and outcomes
    "Probe",
    "Exited",
    "ExecutionFailed",
    # Probe mechanisms
    "CallableProbe",
    "ShellProbe",
    "expand_probe_template",
    # Index resolution
    "ProbeMapping",
    "DecimalMapping",
    "ProbeInvoker",
]
