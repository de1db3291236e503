"""
Time sources for lifecycle timestamps.

Records read "now" through a clock so tests can pin time instead of sleeping.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any

# Zero value for created_at before insert metadata is applied.
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def is_zero_time(value: datetime) -> bool:
    """Check whether a timestamp is the zero time."""
    if value.tzinfo is None:
        return value == datetime.min
    return value == ZERO_TIME


class BaseClock(ABC):
    """
    Abstract time source.

    Clocks are shared references: copying a record (model_copy, copy.deepcopy)
    keeps it bound to the same clock instance.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware time."""
        pass

    def __copy__(self) -> "BaseClock":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "BaseClock":
        return self


class SystemClock(BaseClock):
    """Wall-clock time from the host system."""

    def __init__(self, use_utc: bool = True) -> None:
        self.use_utc = use_utc

    def now(self) -> datetime:
        if self.use_utc:
            return datetime.now(timezone.utc)
        return datetime.now().astimezone()

    def __repr__(self) -> str:
        return f"SystemClock(use_utc={self.use_utc})"


class FrozenClock(BaseClock):
    """
    Manually driven clock.

    Usage:
        ```python
        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
        meta = LifecycleMetadata(clock=clock)
        meta.apply_insert_metadata()
        clock.advance(milliseconds=10)
        meta.apply_update_metadata()
        ```
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._current = self._ensure_aware(start or datetime.now(timezone.utc))

    @staticmethod
    def _ensure_aware(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def now(self) -> datetime:
        return self._current

    def advance(self, delta: timedelta | None = None, **kwargs: float) -> datetime:
        """
        Move the clock forward.

        Args:
            delta: Amount to advance
            **kwargs: timedelta keyword arguments, used when delta is omitted

        Returns:
            The new current time
        """
        step = delta if delta is not None else timedelta(**kwargs)
        if step < timedelta(0):
            raise ValueError("FrozenClock cannot move backwards")
        self._current = self._current + step
        return self._current

    def set(self, value: datetime) -> None:
        """Jump to an absolute time."""
        self._current = self._ensure_aware(value)

    def __repr__(self) -> str:
        return f"FrozenClock({self._current.isoformat()})"


def get_default_clock() -> BaseClock:
    """Create the system clock configured by settings."""
    from recordmeta.config.settings import get_settings

    return SystemClock(use_utc=get_settings().lifecycle.use_utc)
