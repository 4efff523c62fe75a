"""
This module defines the base Probe class and the tagged outcome of running one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union


@dataclass(frozen=True)
class Exited:
    """The probe ran to completion with the given exit code."""

    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ExecutionFailed:
    """The probe mechanism itself could not be run."""

    cause: str


RunOutcome = Union[Exited, ExecutionFailed]


class Probe:
    """
    Base class for all probe mechanisms in culprit.

    A probe takes the string value for one index and reports how the
    external check finished. It says nothing about GOOD or BAD; that mapping
    belongs to the invoker.
    """

    @classmethod
    def resolve(cls, probe_spec: Any, **shell_options: Any) -> "Probe":
        """
        Resolves a probe specification into a Probe instance.

        Accepted forms:
        - Probe instance (or any object with a `run(value)` method)
        - Shell command, as a string or a sequence of strings
        - Callable fn(value) -> bool | int | Exited | ExecutionFailed

        Keyword options are forwarded to ShellProbe for command specs.
        """
        # 1) Already a Probe-like object
        if isinstance(probe_spec, cls) or callable(getattr(probe_spec, "run", None)):
            return probe_spec

        # 2) Shell command
        if isinstance(probe_spec, str) or (
            isinstance(probe_spec, (list, tuple))
            and probe_spec
            and all(isinstance(word, str) for word in probe_spec)
        ):
            from .shell import ShellProbe

            return ShellProbe(probe_spec, **shell_options)

        # 3) Ad-hoc callable
        if callable(probe_spec):
            return CallableProbe(probe_spec)

        raise ValueError(f"Unknown probe specification: {probe_spec!r}.")

    def run(self, value: str) -> RunOutcome:
        """Runs the probe once for the given probe value."""
        raise NotImplementedError


class CallableProbe(Probe):
    """Adapter for user-provided functions: fn(value) -> bool | int | outcome."""

    def __init__(self, fn: Callable[[str], Any]):
        self._fn = fn

    def run(self, value: str) -> RunOutcome:
        try:
            result = self._fn(value)
        except Exception as e:
            return ExecutionFailed(f"{type(e).__name__}: {e}")

        if isinstance(result, (Exited, ExecutionFailed)):
            return result
        # bool first: it is also an int
        if isinstance(result, bool):
            return Exited(0 if result else 1)
        if isinstance(result, int):
            return Exited(result)
        return ExecutionFailed(
            f"probe function returned {type(result).__name__}, expected bool or int"
        )


def join_command(command: Union[str, Sequence[str]]) -> str:
    """Joins command words into the script text fed to the shell."""
    if isinstance(command, str):
        return command
    return " ".join(command)
