"""Calendar labels for schedule years."""

from typing import Sequence

from amortizer.models.events import ScheduleEvent
from amortizer.models.loan import LoanTerms
from amortizer.models.schedule import PeriodRecord


def calendar_year(loan: LoanTerms, year: int) -> int:
    return loan.start_year + year - 1


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def year_label(loan: LoanTerms, year: int) -> str:
    """e.g. "3rd year (2026)" for a loan starting in 2024."""
    return f"{ordinal(year)} year ({calendar_year(loan, year)})"


def event_markers(schedule: Sequence[PeriodRecord], events: Sequence[ScheduleEvent]) -> list[int]:
    """Schedule years that carry at least one event."""
    event_years = {e.year for e in events}
    return [p.year for p in schedule if p.year in event_years]
