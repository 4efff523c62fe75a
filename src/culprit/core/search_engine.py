"""
Core search engine for locating a GOOD/BAD transition.

The phases are plain functions over an explicit SearchState and an injected
probe callable, so each can be exercised with a scripted status function.
SearchEngine wires them to a ProbeInvoker for real runs.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from tqdm import tqdm

from ..config import DEFAULT_MAX_INDEX, SearchConfig
from ..errors import BracketError, VerificationError
from ..probes.invoker import ProbeInvoker
from ..report import ProbeRecord, SearchReport
from ..status import Status

logger = logging.getLogger(__name__)

# probe(index, phase) -> Status, or a full ProbeRecord when timing is known
ProbeFn = Callable[[int, str], Union[Status, ProbeRecord]]


@dataclass
class SearchState:
    """Mutable working set of one search run."""

    lo: int
    hi: int
    lo_status: Status
    hi_status: Status
    probes: int = 0
    path: List[ProbeRecord] = field(default_factory=list)

    @property
    def gap(self) -> int:
        return self.hi - self.lo


def clog2(z: int) -> int:
    """Returns the least k >= 1 such that 2**k >= z."""
    k, n = 1, 2
    while n < z:
        k += 1
        n *= 2
    return k


def validate_endpoints(good: int, bad: int) -> None:
    """Raises InputError unless good and bad are distinct non-negative ints."""
    SearchConfig(good=good, bad=bad).validate()


def order_endpoints(good: int, bad: int) -> SearchState:
    """
    Build the initial state with lo <= hi.

    The smaller endpoint takes whichever status its source value implies,
    so a search may run from BAD up to GOOD as well as from GOOD up to BAD.
    """
    validate_endpoints(good, bad)
    if good > bad:
        return SearchState(lo=bad, hi=good, lo_status=Status.BAD, hi_status=Status.GOOD)
    return SearchState(lo=good, hi=bad, lo_status=Status.GOOD, hi_status=Status.BAD)


def _observe(state: SearchState, probe: ProbeFn, index: int, phase: str) -> Status:
    result = probe(index, phase)
    if isinstance(result, ProbeRecord):
        record = result
    else:
        record = ProbeRecord(index=index, value=str(index), status=result, elapsed=0.0, phase=phase)
    state.path.append(record)
    return record.status


def verify_endpoints(state: SearchState, probe: ProbeFn) -> int:
    """
    Check that each positive endpoint has its assumed status.

    Endpoint 0 means "to be discovered" and is never probed. Verification
    probes are recorded in the path but not counted in state.probes.

    Returns:
        Number of verification probes run

    Raises:
        VerificationError: On the first endpoint whose status disagrees
    """
    checked = 0
    for value, expected in ((state.lo, state.lo_status), (state.hi, state.hi_status)):
        if value <= 0:
            continue
        logger.info(f"▷ Verifying that {value} is {expected}...")
        actual = _observe(state, probe, value, "verify")
        checked += 1
        if actual != expected:
            raise VerificationError(value, expected, actual)
    return checked


def bracket(
    state: SearchState,
    probe: ProbeFn,
    max_bracket: int = 0,
    max_index: int = DEFAULT_MAX_INDEX,
) -> SearchState:
    """
    Discover an unknown upper endpoint by exponential search above hi.

    The known endpoint becomes the baseline. Steps of clog2(baseline),
    doubling each time, are added to that fixed baseline until a probe
    reports the opposite status. lo is then moved up to the last probe that
    still matched the baseline, so hi - lo never exceeds the final step.

    Args:
        state: State whose lo is 0 (unknown)
        probe: Probe callable
        max_bracket: Largest index to try; 0 means unbounded
        max_index: Indices above this count as an overflow

    Raises:
        BracketError: If no flip is found before overflow or max_bracket
    """
    state.lo, state.lo_status = state.hi, state.hi_status
    baseline, baseline_status = state.lo, state.lo_status

    logger.info(f"Searching for a bracketing value above {baseline} [{baseline_status}]...")
    delta = clog2(baseline)
    base = baseline
    while True:
        next_index = baseline + delta
        if next_index > max_index:
            raise BracketError(
                f"No bracketing value found above lo={baseline} [{baseline_status}]"
            )
        if max_bracket > 0 and next_index > max_bracket:
            raise BracketError(
                f"No bracketing value found between lo={baseline} [{baseline_status}] "
                f"and {max_bracket}"
            )

        state.probes += 1
        logger.info(
            f"Bracketing search: base={base} [{baseline_status}]; next={next_index} Δ={delta}"
        )
        if _observe(state, probe, next_index, "bracket") != baseline_status:
            state.hi = next_index
            state.hi_status = baseline_status.inverse
            state.lo = base
            break
        delta *= 2
        base = next_index

    logger.info(
        f"Found bracketing value: hi={state.hi} [{state.hi_status}], adjusted lo to {state.lo}"
    )
    return state


def bisect(state: SearchState, probe: ProbeFn) -> SearchState:
    """
    Binary search between lo and hi until they are adjacent.

    Requires lo < hi with differing statuses. Known endpoints are never
    probed again; each probe replaces whichever endpoint shares its status.
    """
    while state.lo + 1 < state.hi:
        next_index = (state.lo + state.hi) // 2
        state.probes += 1
        logger.info(
            f"Current state: lo={state.lo} [{state.lo_status}] hi={state.hi} [{state.hi_status}]; "
            f"next={next_index} Δ={state.gap}"
        )
        if _observe(state, probe, next_index, "search") == state.lo_status:
            state.lo = next_index
        else:
            state.hi = next_index
    return state


class SearchEngine:
    """
    Finds the adjacent pair of indices where the probe status flips.

    Args:
        invoker: ProbeInvoker (or any probe callable) used for every probe
        good: Index known to be GOOD (0 = discover by bracketing)
        bad: Index known to be BAD (0 = discover by bracketing)
        verify: Probe positive endpoints first and require the assumed status
        bracket: Search above the known endpoint when the other one is 0
        max_bracket: Largest index bracketing may try (0 = unbounded)
        max_index: Overflow ceiling for bracketing
    """

    def __init__(
        self,
        invoker: Union[ProbeInvoker, ProbeFn],
        good: int = 0,
        bad: int = 0,
        verify: bool = True,
        bracket: bool = False,
        max_bracket: int = 0,
        max_index: int = DEFAULT_MAX_INDEX,
    ):
        self.config = SearchConfig(
            good=good, bad=bad, verify=verify, bracket=bracket, max_bracket=max_bracket
        )
        self.config.validate()
        self.probe: ProbeFn = invoker.invoke if isinstance(invoker, ProbeInvoker) else invoker
        self.max_index = max_index

    def run(self, progress_bar: Optional[tqdm] = None) -> SearchReport:
        """
        Run all phases and report the culprit pair.

        The reported runtime starts after endpoint verification, so it
        covers bracketing and binary-search probes only.

        Args:
            progress_bar: Optional tqdm progress bar, updated once per probe

        Returns:
            SearchReport with the final lo/hi pair, probe count and timing

        Raises:
            CulpritError: Any verification, bracketing or probe failure
        """
        cfg = self.config
        logger.info(f"Using {cfg.good} as GOOD, using {cfg.bad} as BAD")
        state = order_endpoints(cfg.good, cfg.bad)
        probe = self._tracked(state, progress_bar)

        verify_probes = 0
        if cfg.verify:
            verify_probes = verify_endpoints(state, probe)

        start_time = time.time()
        bracketed = cfg.bracket and state.lo == 0
        if bracketed:
            bracket(state, probe, max_bracket=cfg.max_bracket, max_index=self.max_index)

        bisect(state, probe)
        runtime = time.time() - start_time

        logger.info(f"{state.probes} probes; total time elapsed: {runtime:.3f}s")
        return SearchReport(
            good=cfg.good,
            bad=cfg.bad,
            lo=state.lo,
            lo_status=state.lo_status,
            hi=state.hi,
            hi_status=state.hi_status,
            probes=state.probes,
            runtime=runtime,
            verify_probes=verify_probes,
            bracketed=bracketed,
            search_path=state.path,
        )

    def _tracked(self, state: SearchState, progress_bar: Optional[tqdm]) -> ProbeFn:
        if progress_bar is None:
            return self.probe

        def probe(index: int, phase: str) -> Union[Status, ProbeRecord]:
            result = self.probe(index, phase)
            progress_bar.update(1)
            progress_bar.set_postfix({
                "phase": phase,
                "lo": state.lo,
                "hi": state.hi,
            })
            return result

        return probe
