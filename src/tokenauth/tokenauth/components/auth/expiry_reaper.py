# ABOUTME: Daily background task that deletes expired refresh tokens
# ABOUTME: Owned by the application lifecycle: started at startup and stopped at shutdown

import asyncio
from datetime import datetime, time, timedelta, UTC
from typing import Any, Dict, Optional, TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

from tokenauth.components.auth.refresh_token_manager import RefreshTokenManager
from tokenauth.exceptions import ConfigurationException

if TYPE_CHECKING:
    from tokenauth.config.settings import AuthSettings


class ExpiryReaper:
    """
    Periodic reclamation of expired refresh tokens.

    Runs once per day at ``run_at`` in ``timezone``. A failed run is logged
    and skipped; the next scheduled run retries naturally. The reaper takes no
    lock of its own: each run is a single predicate-scoped store call, so it
    can overlap freely with logins and rotations.

    Example:
        reaper = ExpiryReaper(manager, run_at=time(3, 0), timezone="Europe/Berlin")
        reaper.start()
        ...
        await reaper.stop()
    """

    def __init__(self, manager: RefreshTokenManager, run_at: time = time(0, 0), timezone: str = "UTC"):
        """
        Initialize the reaper.

        Args:
            manager: Manager whose ``reap_expired`` is called on each run.
            run_at: Local time of day of each run.
            timezone: IANA timezone ``run_at`` is interpreted in.

        Raises:
            ConfigurationException: If ``timezone`` is not a known IANA name.
        """
        self._manager = manager
        self.run_at = run_at
        self.timezone = timezone
        try:
            self._zone = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationException(
                f"Unknown reaper timezone: {timezone}",
                code="INVALID_TIMEZONE",
                details={"timezone": timezone},
            ) from e
        self._task: Optional[asyncio.Task] = None
        self._logger = logger.bind(name=__name__)

        self._runs = 0
        self._failures = 0
        self._total_deleted = 0
        self._last_run_at: Optional[datetime] = None
        self._last_deleted: Optional[int] = None

    @classmethod
    def from_settings(cls, manager: RefreshTokenManager, settings: "AuthSettings") -> "ExpiryReaper":
        return cls(manager, run_at=settings.REAPER_RUN_AT, timezone=settings.TIMEZONE)

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def next_run_at(self, now: Optional[datetime] = None) -> datetime:
        """
        The next scheduled run strictly after ``now``, as an aware UTC datetime.

        A run scheduled exactly at ``now`` counts as already done.
        """
        current = (now or datetime.now(UTC)).astimezone(self._zone)
        candidate = datetime.combine(current.date(), self.run_at, tzinfo=self._zone)
        if candidate <= current:
            candidate = datetime.combine(current.date() + timedelta(days=1), self.run_at, tzinfo=self._zone)
        # Convert through UTC so DST transitions are accounted for.
        return candidate.astimezone(UTC)

    def seconds_until_next_run(self, now: Optional[datetime] = None) -> float:
        """Seconds from ``now`` until the next scheduled run, always strictly positive."""
        current = now or datetime.now(UTC)
        return (self.next_run_at(current) - current.astimezone(UTC)).total_seconds()

    def start(self) -> None:
        """
        Schedule the reaper on the running event loop.

        Raises:
            RuntimeError: If called without a running event loop.
        """
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run_loop(), name="tokenauth-expiry-reaper")
        self._logger.info(f"Expiry reaper scheduled daily at {self.run_at.isoformat()} {self.timezone}")

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self._logger.info("Expiry reaper stopped")

    async def close(self) -> None:
        await self.stop()

    async def run_once(self) -> Optional[int]:
        """
        Perform one reaping run now.

        Returns:
            The number of deleted records, or None if the run failed.
        """
        now = datetime.now(UTC)
        self._runs += 1
        self._last_run_at = now
        try:
            deleted = await self._manager.reap_expired(now)
        except Exception as e:
            self._failures += 1
            self._last_deleted = None
            self._logger.opt(exception=e).error("Expiry reaper run failed, skipping until next schedule")
            return None

        self._total_deleted += deleted
        self._last_deleted = deleted
        self._logger.info(f"Expiry reaper deleted {deleted} expired refresh tokens")
        return deleted

    async def _run_loop(self) -> None:
        target = self.next_run_at()
        while True:
            await asyncio.sleep(max(0.0, (target - datetime.now(UTC)).total_seconds()))
            await self.run_once()
            # The next run follows this target even if the sleep woke early.
            target = self.next_run_at(max(target, datetime.now(UTC)))

    def get_stats(self) -> Dict[str, Any]:
        """Return counters describing past runs."""
        return {
            "is_running": self.is_running,
            "runs": self._runs,
            "failures": self._failures,
            "total_deleted": self._total_deleted,
            "last_run_at": self._last_run_at,
            "last_deleted": self._last_deleted,
            "run_at": self.run_at.isoformat(),
            "timezone": self.timezone,
        }
