"""
Centralized configuration for culprit.
"""

import logging
import os
import sys
from dataclasses import dataclass

from .errors import InputError

logger = logging.getLogger(__name__)

# Defaults for the shell probe
DEFAULT_SHELL = "/bin/sh"
DEFAULT_ENV_VAR = "PROBE"
PROBE_PLACEHOLDER = "PROBE"

# Largest index a bracketing step may reach before it counts as an overflow
DEFAULT_MAX_INDEX = sys.maxsize

_TRUTHY = ("1", "true", "yes")


def get_default_shell() -> str:
    """
    Shell used to run probe scripts.

    Priority:
    1. CULPRIT_SHELL environment variable
    2. DEFAULT_SHELL (/bin/sh)
    """
    env_shell = os.environ.get("CULPRIT_SHELL", "").strip()
    if env_shell:
        if is_debug():
            logger.debug(f"Using shell from CULPRIT_SHELL: {env_shell}")
        return env_shell
    return DEFAULT_SHELL


def is_debug() -> bool:
    """True when CULPRIT_DEBUG is set to 1, true or yes."""
    return os.environ.get("CULPRIT_DEBUG", "").lower() in _TRUTHY


@dataclass
class SearchConfig:
    """Endpoint values and switches consumed by the search engine."""

    good: int = 0
    bad: int = 0
    verify: bool = True
    bracket: bool = False
    max_bracket: int = 0

    def validate(self) -> None:
        """
        Check the endpoint contract.

        Raises:
            InputError: If an endpoint is negative or both are equal, or if
                max_bracket is negative.
        """
        for name in ("good", "bad", "max_bracket"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InputError(f"{name} must be an integer, got {value!r}")
        if self.good < 0 or self.bad < 0:
            raise InputError(
                f"The values of GOOD ({self.good}) and BAD ({self.bad}) must be non-negative"
            )
        if self.good == self.bad:
            raise InputError(f"The values of GOOD and BAD must be distinct (got {self.good})")
        if self.max_bracket < 0:
            raise InputError(f"max_bracket must be >= 0, got {self.max_bracket}")
