"""Weekly allowance of AI extractions."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_WEEKLY_LIMIT = 5


class UsageLimiter(ABC):
    """Tracks how many AI extractions are still allowed."""

    @abstractmethod
    async def remaining(self) -> int:
        ...

    @abstractmethod
    async def consume_one(self) -> None:
        ...

    @abstractmethod
    async def try_consume(self) -> bool:
        """Take one unit if any is left; False when the limit is reached."""
        ...

    @abstractmethod
    async def refund(self) -> None:
        """Give back a unit taken by :meth:`try_consume`."""
        ...


class UnlimitedUsage(UsageLimiter):
    """Never runs out."""

    async def remaining(self) -> int:
        return 1

    async def consume_one(self) -> None:
        return None

    async def try_consume(self) -> bool:
        return True

    async def refund(self) -> None:
        return None


def week_start(now: datetime) -> datetime:
    """Midnight of the Monday on or before *now*."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=now.weekday())


class WeeklyUsageLimiter(UsageLimiter):
    """In-memory counter that resets every Monday at midnight.

    Calls are serialized with an :class:`asyncio.Lock` so concurrent scans
    cannot push usage past the limit.
    """

    def __init__(
        self,
        weekly_limit: int = DEFAULT_WEEKLY_LIMIT,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.weekly_limit = weekly_limit
        self._clock = clock or datetime.now
        self._lock = asyncio.Lock()
        self._used = 0
        self._week = week_start(self._clock())

    def _roll_week(self) -> None:
        current = week_start(self._clock())
        if current != self._week:
            logger.info("New usage week starting %s", current.date())
            self._week = current
            self._used = 0

    async def remaining(self) -> int:
        async with self._lock:
            self._roll_week()
            return max(0, self.weekly_limit - self._used)

    async def consume_one(self) -> None:
        async with self._lock:
            self._roll_week()
            if self._used < self.weekly_limit:
                self._used += 1
            logger.debug("AI usage %d/%d this week", self._used, self.weekly_limit)

    async def try_consume(self) -> bool:
        async with self._lock:
            self._roll_week()
            if self._used >= self.weekly_limit:
                return False
            self._used += 1
            logger.debug("Reserved AI usage %d/%d", self._used, self.weekly_limit)
            return True

    async def refund(self) -> None:
        async with self._lock:
            self._roll_week()
            if self._used > 0:
                self._used -= 1

    async def reset(self) -> None:
        async with self._lock:
            self._used = 0
