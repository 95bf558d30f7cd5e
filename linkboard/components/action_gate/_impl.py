from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class ActionGate:
    """Binary flag with states Idle and Held."""

    def __init__(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def try_acquire(self) -> bool:
        if self._held:
            return False
        self._held = True
        return True

    def release(self) -> None:
        self._held = False

    @contextmanager
    def guard(self) -> Iterator[bool]:
        """
        Try to acquire for the duration of the block.

        Yields whether the gate was acquired. When it was, release() runs on
        every exit path, exceptions included.
        """
        acquired = self.try_acquire()
        if not acquired:
            logger.warning("Action dropped: another action is in progress")
        try:
            yield acquired
        finally:
            if acquired:
                self.release()
