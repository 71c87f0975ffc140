from __future__ import annotations

import asyncio
import time

from app.application.interfaces import IClock


class SystemClock(IClock):
    """IClock using the event loop's sleep and a monotonic timer."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
