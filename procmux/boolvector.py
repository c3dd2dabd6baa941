"""A set of growing boolean series combined by a running OR."""

from __future__ import annotations

import threading
from typing import Iterable


class GrowingBooleanVector:
    """Holds boolean series and keeps their element-wise OR and its true count."""

    def __init__(self) -> None:
        self._true_count = 0
        self._max_size = 0
        self._result: list[bool] = []
        self._vectors: list[list[bool]] = []
        self._lock = threading.Lock()

    def add_vector(self, vector: Iterable[bool]) -> None:
        """Add a new series, folding it into the combined result."""
        values = [bool(v) for v in vector]
        with self._lock:
            self._vectors.append(values)

            if len(values) > self._max_size:
                offset = len(values) - len(self._result)
                self._result = [False] * offset + self._result
                self._max_size = len(values)
                self._true_count = sum(self._result)

            offset = self._max_size - len(values)
            for i, value in enumerate(values):
                if value and not self._result[i]:
                    self._result[i + offset] = True
                    self._true_count += 1

    def append_element(self, index: int, value: bool) -> None:
        """Append a value to series ``index``; unknown indices are ignored."""
        with self._lock:
            if not 0 <= index < len(self._vectors):
                return

            series = self._vectors[index]
            series.append(bool(value))
            position = len(series) - 1

            if position >= len(self._result):
                self._result.extend([False] * (len(series) - len(self._result)))
                self._max_size = len(self._result)

            if value and not self._result[position]:
                self._result[position] = True
                self._true_count += 1

    def query(self) -> tuple[int, int]:
        """Return (number of true positions, overall length)."""
        with self._lock:
            return self._true_count, self._max_size