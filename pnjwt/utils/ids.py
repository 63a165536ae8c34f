from __future__ import annotations

import itertools
import threading
from typing import Protocol


class IdGenerator(Protocol):
    """Source of fallback values for generated token ids."""

    def next(self) -> int: ...


class CounterIdGenerator:
    """Process-local monotonic counter starting at 1.

    Values are unique within the process only; callers needing ids that are
    unique across processes must supply their own ``jwt_id`` or generator.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


DEFAULT_ID_GENERATOR = CounterIdGenerator()
