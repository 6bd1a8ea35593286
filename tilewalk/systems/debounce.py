from __future__ import annotations

from typing import Optional


class DebounceGate:
    """
    Rate limiter for grid steps driven off the frame clock.

    The first ``try_fire`` always passes and becomes the baseline; after
    that a call passes only once more than ``interval_ms`` has gone by
    since the last pass. Timestamps are expected to be non-decreasing.
    """

    def __init__(self, interval_ms: float) -> None:
        self.interval_ms = interval_ms
        self.last_fire: Optional[float] = None

    def try_fire(self, now: float) -> bool:
        if self.last_fire is None or now - self.last_fire > self.interval_ms:
            self.last_fire = now
            return True
        return False
