from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from app.core.config import Settings, settings as default_settings


@dataclass(frozen=True, slots=True)
class PollPolicy:
    """Bounded status-poll budget.

    - max_attempts: number of status fetches before giving up
    - interval: delay in seconds before the first fetch
    - backoff_factor: multiplier applied to the delay after each fetch
      (1.0 keeps the delay fixed)
    - max_interval: upper bound for a grown delay
    """

    max_attempts: int = 15
    interval: float = 2.0
    backoff_factor: float = 1.0
    max_interval: float = 10.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.interval < 0:
            raise ValueError("interval must be non-negative")
        if self.backoff_factor < 1.0:
            raise ValueError("backoff_factor must be >= 1.0")

    @classmethod
    def from_settings(cls, s: Settings | None = None) -> "PollPolicy":
        s = s or default_settings
        return cls(
            max_attempts=s.video_poll_max_attempts,
            interval=s.video_poll_interval,
            backoff_factor=s.video_poll_backoff_factor,
            max_interval=s.video_poll_max_interval,
        )

    def delays(self) -> Iterator[float]:
        """Delay before each fetch, grown by backoff_factor until capped."""
        # A fixed interval above max_interval is kept as configured.
        cap = max(self.max_interval, self.interval)
        delay = self.interval
        for _ in range(self.max_attempts):
            yield delay
            if delay < cap:
                delay = min(cap, delay * self.backoff_factor)

    @property
    def budget(self) -> float:
        """Total seconds spent sleeping if no terminal state is reached."""
        return sum(self.delays())
