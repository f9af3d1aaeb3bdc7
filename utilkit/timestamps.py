"""
Chat timestamp markup.

Chat clients render a token of the form

    <t:{unix_seconds}:{code}>

as a localized date/time in each reader's own timezone. The single-character
code picks the style:

    RELATIVE    R   "in 5 minutes", "2 days ago"
    DATE        D   "May 3, 2021"
    TIME        T   "12:00:00 AM"
    SHORT_TIME  t   "12:00 AM"
    FULL        F   "Monday, May 3, 2021 12:00 AM"

All helpers take millisecond inputs (epoch milliseconds or a millisecond offset)
and floor them to whole seconds.
"""

from enum import Enum

from utilkit.config.settings import get_settings
from utilkit.utils.ieee import divide, floor, format_number
from utilkit.utils.time import Clock, epoch_millis
from utilkit.utils.validation import InvalidArgumentError, require_numeric


class TimestampFormat(Enum):
    """Display styles understood by the chat client, valued by their code."""
    RELATIVE = "R"
    DATE = "D"
    TIME = "T"
    SHORT_TIME = "t"
    FULL = "F"


def resolve_format(format=None) -> TimestampFormat:
    """
    Turn a format argument into a TimestampFormat member.

    **Functionally**:
    - None -> the configured default (UTILKIT_DEFAULT_TIMESTAMP_FORMAT, "FULL"
      unless overridden).
    - A TimestampFormat member is returned as-is.
    - A string must be a member *name* ("FULL", "SHORT_TIME"); codes such as
      "F" are not names and are rejected.

    Raises:
        InvalidArgumentError: For any other value.
    """
    if format is None:
        format = get_settings().default_timestamp_format
    if isinstance(format, TimestampFormat):
        return format
    if isinstance(format, str) and format in TimestampFormat.__members__:
        return TimestampFormat[format]
    raise InvalidArgumentError(
        f"Expected a valid format {', '.join(TimestampFormat.__members__)} "
        f"but got {format}"
    )


def _render(millis, format) -> str:
    # floor(millis / 1000); nan/inf pass through and print as NaN/Infinity
    seconds = floor(divide(millis, 1000))
    return f"<t:{format_number(seconds)}:{format.value}>"


def from_date(date, format=None) -> str:
    """
    Convert epoch milliseconds to timestamp markup.

    Args:
        date: Milliseconds since 1970-01-01T00:00:00Z (int or float).
        format: TimestampFormat member or name; defaults to FULL.

    Returns:
        Markup string, e.g. "<t:1620000000:F>".

    Raises:
        InvalidArgumentError: If date is not numeric or format is unknown.

    Example:
        >>> from_date(1620000000000, "FULL")
        '<t:1620000000:F>'
        >>> from_date(1620000000999, TimestampFormat.RELATIVE)
        '<t:1620000000:R>'
    """
    require_numeric(date=date)
    resolved = resolve_format(format)
    return _render(date, resolved)


def now(format=None, *, clock: Clock | None = None) -> str:
    """
    Timestamp markup for the current instant.

    Args:
        format: TimestampFormat member or name; defaults to FULL.
        clock: Time source; defaults to the system wall clock.

    Raises:
        InvalidArgumentError: If format is unknown.
    """
    resolved = resolve_format(format)
    return _render(epoch_millis(clock), resolved)


def from_now(ms, format=None, *, clock: Clock | None = None) -> str:
    """
    Timestamp markup for an instant ms milliseconds away from now.

    Negative offsets point into the past.

    Args:
        ms: Signed millisecond offset.
        format: TimestampFormat member or name; defaults to FULL.
        clock: Time source; defaults to the system wall clock.

    Raises:
        InvalidArgumentError: If ms is not numeric or format is unknown.

    Example:
        from_now(60_000, "RELATIVE")   # renders as "in a minute"
    """
    require_numeric(ms=ms)
    resolved = resolve_format(format)
    return _render(epoch_millis(clock) + ms, resolved)
