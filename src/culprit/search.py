"""
One-call culprit search.

Provides the `find_culprit()` function for locating the index where a
probe's status flips between GOOD and BAD.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from tqdm import tqdm

from .core.search_engine import SearchEngine
from .probes.invoker import ProbeInvoker
from .probes.mapping import DecimalMapping, ProbeMapping
from .report import SearchReport


def find_culprit(
    probe: Any,
    good: int = 0,
    bad: int = 0,
    *,
    verify: bool = True,
    bracket: bool = False,
    max_bracket: int = 0,
    mapping: Optional[Union[ProbeMapping, DecimalMapping]] = None,
    verbose: bool = False,
) -> SearchReport:
    """
    Find the adjacent pair of indices where the probe status changes.

    Args:
        probe: Probe to run - can be:
            - Shell command: "make test" or ["pytest", "-x"]
            - Function of the probe value: lambda value: int(value) < 42
            - Probe instance, e.g. ShellProbe(...)
        good: Index known to be GOOD (0 to bracket)
        bad: Index known to be BAD (0 to bracket)
        verify: Check the starting endpoints before searching
        bracket: Search above the known endpoint when the other is 0
        max_bracket: Maximum bracketing index (0 = unbounded)
        mapping: Optional ProbeMapping turning indices into probe values
        verbose: Show a progress bar

    Returns:
        SearchReport with the culprit pair, probe count and search path

    Example:
        >>> from culprit import find_culprit
        >>> report = find_culprit(lambda v: int(v) < 42, good=1, bad=100)
        >>> report.before, report.after
        ((41, <Status.GOOD: True>), (42, <Status.BAD: False>))
    """
    invoker = ProbeInvoker(probe, mapping=mapping)
    engine = SearchEngine(
        invoker,
        good=good,
        bad=bad,
        verify=verify,
        bracket=bracket,
        max_bracket=max_bracket,
    )

    if verbose:
        with tqdm(desc="Probing", unit="probe", leave=False) as pbar:
            return engine.run(progress_bar=pbar)
    return engine.run()
