"""Fixed delay between per-company calls so third-party endpoints see no bursts."""

import asyncio


class Pacer:
    """Sleeps a fixed interval each time an item has been processed.

    A delay of zero disables pacing.
    """

    def __init__(self, delay_ms: int, name: str = "pacer"):
        self.delay_seconds = max(delay_ms, 0) / 1000
        self.name = name

    @property
    def enabled(self) -> bool:
        return self.delay_seconds > 0

    async def wait(self):
        if not self.enabled:
            return
        await asyncio.sleep(self.delay_seconds)
