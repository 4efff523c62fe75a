"""
Turns a search index into a GOOD/BAD status by running the configured probe.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Union

from ..errors import ProbeError
from ..report import ProbeRecord
from ..status import Status
from .base import ExecutionFailed, Exited, Probe
from .mapping import DecimalMapping, ProbeMapping

logger = logging.getLogger(__name__)


class ProbeInvoker:
    """
    Runs one probe per call and maps its exit to a Status.

    Exit code 0 is GOOD and any other exit is BAD. A probe that could not
    be run at all raises ProbeError instead of reporting BAD.

    Args:
        probe: Anything Probe.resolve accepts
        mapping: Optional ProbeMapping; defaults to the decimal index
    """

    def __init__(
        self,
        probe: Any,
        mapping: Optional[Union[ProbeMapping, DecimalMapping]] = None,
    ):
        self.probe = Probe.resolve(probe)
        self.mapping = mapping if mapping is not None else DecimalMapping()
        self.calls = 0

    def invoke(self, index: int, phase: str = "search") -> ProbeRecord:
        """
        Probe a single index.

        Args:
            index: Index to probe
            phase: Search phase this probe belongs to, recorded for reporting

        Returns:
            ProbeRecord with the observed status and elapsed time

        Raises:
            ProbeError: If the index has no probe value or the probe could not run
        """
        value = self.mapping.resolve(index)
        self.calls += 1

        start = time.perf_counter()
        outcome = self.probe.run(value)
        elapsed = time.perf_counter() - start

        if isinstance(outcome, ExecutionFailed):
            raise ProbeError(f"Subprocess failed: {outcome.cause}")
        if not isinstance(outcome, Exited):
            raise ProbeError(f"Probe returned unexpected outcome {outcome!r}")

        status = Status.from_success(outcome.succeeded)
        logger.info(f" {status.mark} {index} is {status}\t[{elapsed:.3f}s elapsed]")
        return ProbeRecord(index=index, value=value, status=status, elapsed=elapsed, phase=phase)

    def __call__(self, index: int, phase: str = "search") -> Status:
        return self.invoke(index, phase).status
