#!/usr/bin/env python3
"""
Process-wide allocation of container numbers.
"""

import itertools
import logging

logger = logging.getLogger(__name__)


class ContainerNumberAllocator:
    """Hands out container numbers of the form 'KON-<initial>-<n>'."""

    PREFIX = "KON"

    def __init__(self, start: int = 1):
        self._start = start
        self._counter = itertools.count(start)

    def next_number(self, initial: str) -> str:
        """Return the next number for a container of the given kind initial."""
        return f"{self.PREFIX}-{initial}-{next(self._counter)}"

    def reset(self) -> None:
        """Restart numbering; numbers issued before the reset may repeat."""
        logger.debug(f"Resetting container numbering to {self._start}")
        self._counter = itertools.count(self._start)


# Shared by every container created in this process
default_allocator = ContainerNumberAllocator()
