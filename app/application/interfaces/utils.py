from __future__ import annotations
from typing import Protocol


class IClock(Protocol):
    """Time source and delay primitive, swappable for deterministic testing."""

    def monotonic(self) -> float:
        ...

    async def sleep(self, seconds: float) -> None:
        ...
