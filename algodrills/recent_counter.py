"""Counting requests within a sliding time window."""

from __future__ import annotations

from collections import deque

_WINDOW = 3000


class RecentCounter:
    """Counts pings within the last 3000 milliseconds, inclusive."""

    def __init__(self) -> None:
        self._requests: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time t and return how many fall in [t - 3000, t]."""
        self._requests.append(t)
        while self._requests and self._requests[0] < t - _WINDOW:
            self._requests.popleft()
        return len(self._requests)