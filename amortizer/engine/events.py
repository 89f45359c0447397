"""Event list operations for callers that build a schedule interactively.

Lists are treated as immutable: every operation returns a new tuple.
"""

import logging
from typing import Sequence

from amortizer.models.errors import ScheduleInputError
from amortizer.models.events import LumpSumPayment, RateChange, ScheduleEvent

logger = logging.getLogger(__name__)


def validate_event(event: ScheduleEvent, term_years: int) -> None:
    """Reject events the schedule cannot use."""
    if not 1 <= event.year <= term_years:
        raise ScheduleInputError(f"event year {event.year} is outside the 1-{term_years} year term")
    if isinstance(event, LumpSumPayment):
        if event.amount <= 0:
            raise ScheduleInputError(f"lump sum must be positive, got {event.amount}")
    elif isinstance(event, RateChange):
        if event.new_rate_percent < 0:
            raise ScheduleInputError(f"rate must not be negative, got {event.new_rate_percent}")
    else:
        raise TypeError(f"Unknown schedule event: {event!r}")


def add_event(
    events: Sequence[ScheduleEvent],
    event: ScheduleEvent,
    term_years: int,
) -> tuple[ScheduleEvent, ...]:
    validate_event(event, term_years)
    logger.debug("Adding %r", event)
    return (*events, event)


def remove_event(events: Sequence[ScheduleEvent], index: int) -> tuple[ScheduleEvent, ...]:
    """Drop the event at `index` (caller order)."""
    if not 0 <= index < len(events):
        raise IndexError(f"no event at index {index}")
    return tuple(e for i, e in enumerate(events) if i != index)


def events_in_year(events: Sequence[ScheduleEvent], year: int) -> list[ScheduleEvent]:
    return [e for e in events if e.year == year]


def describe_event(event: ScheduleEvent) -> str:
    """Short human-readable description, e.g. "Rate change to 4.25%"."""
    if isinstance(event, RateChange):
        return f"Rate change to {event.new_rate_percent:.2f}%"
    if isinstance(event, LumpSumPayment):
        return f"Lump sum payment of {event.amount}"
    raise TypeError(f"Unknown schedule event: {event!r}")
