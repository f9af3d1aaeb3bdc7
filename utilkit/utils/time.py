"""
Clock abstraction for the time-dependent timestamp helpers.

`utilkit.timestamps.now()` and `utilkit.timestamps.from_now()` read the current
time through a Clock object instead of calling datetime.now() directly. Passing
a FrozenClock makes those calls deterministic in tests, and lets callers render
markup "as of" any chosen instant.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Anything that can answer "what time is it right now?".

    **Usage**: Functions that need the current time accept an optional Clock and
    call clock.now(). In production they fall back to RealClock; tests pass a
    FrozenClock.

    **Example**:
        from utilkit import timestamps

        timestamps.now("RELATIVE")                          # real wall clock
        timestamps.now("RELATIVE", clock=FrozenClock(
            datetime(2021, 5, 3, tzinfo=timezone.utc)))     # fixed instant
    """

    def now(self) -> datetime:
        """
        Return the current time according to this clock.

        Returns:
            Timezone-aware datetime (UTC preferred).
        """
        ...


class RealClock:
    """Clock backed by the system wall clock, in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that always returns the same instant.

    **Usage**:
        clock = FrozenClock(datetime(2021, 5, 3, 0, 0, tzinfo=timezone.utc))
        clock.now()  # always 2021-05-03T00:00:00+00:00
    """

    def __init__(self, fixed_now: datetime):
        """
        Args:
            fixed_now: The datetime to return on every call to now(). Should be
                       timezone-aware; naive datetimes are read as local time
                       when converted to epoch milliseconds.
        """
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        return self._fixed_now


def get_real_clock() -> Clock:
    """Factory for the default wall clock."""
    return RealClock()


def get_frozen_clock(fixed_now: datetime) -> Clock:
    """Factory for a clock pinned to fixed_now."""
    return FrozenClock(fixed_now)


def epoch_millis(clock: Clock | None = None) -> float:
    """
    Milliseconds since 1970-01-01T00:00:00Z according to clock.

    **Functionally**:
    - clock defaults to a RealClock.
    - Sub-millisecond precision is kept (the result is a float), so callers
      decide how to round.

    Args:
        clock: Time source; None means the system wall clock.

    Returns:
        Epoch milliseconds as a float.
    """
    if clock is None:
        clock = get_real_clock()
    return clock.now().timestamp() * 1000
