"""
Resolution of search indices to the values handed to a probe.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..errors import InputError, InvalidProbeIndex

logger = logging.getLogger(__name__)


class DecimalMapping:
    """Default mapping: the probe value is the index itself."""

    def resolve(self, index: int) -> str:
        return str(index)

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "DecimalMapping()"


class ProbeMapping:
    """
    Ordered list of probe values addressed by 1-based index.

    Index 1 is the first entry. Index 0 and indices past the end have no
    value and raise InvalidProbeIndex.
    """

    def __init__(self, values: Sequence[str]):
        self.values: List[str] = list(values)

    @classmethod
    def from_file(cls, path: str) -> "ProbeMapping":
        """
        Load a mapping with one probe value per line.

        Args:
            path: Text file to read

        Returns:
            ProbeMapping with one entry per line

        Raises:
            InputError: If the file cannot be read or is not valid UTF-8
        """
        try:
            with open(path, encoding="utf-8") as f:
                values = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Could not read mapping file '{path}': {e}") from e
        logger.debug(f"Loaded {len(values)} probe values from {path}")
        return cls(values)

    def resolve(self, index: int) -> str:
        if index < 1 or index > len(self.values):
            raise InvalidProbeIndex(index, len(self.values))
        return self.values[index - 1]

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"ProbeMapping(entries={len(self.values)})"
