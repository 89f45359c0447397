"""Mid-life loan events.

Every event targets a 1-based loan year and takes effect at the start of it.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RateChange:
    year: int
    new_rate_percent: Decimal


@dataclass(frozen=True)
class LumpSumPayment:
    year: int
    amount: Decimal  # Applied to principal only


ScheduleEvent = RateChange | LumpSumPayment
