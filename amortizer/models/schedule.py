from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ScheduleState:
    """Values carried from one loan year into the next."""
    principal: Decimal
    rate_percent: Decimal
    monthly_payment: Decimal


@dataclass(frozen=True)
class PeriodRecord:
    year: int

    # Post-event values for the year
    principal_balance: Decimal
    rate_percent: Decimal
    monthly_payment: Decimal

    # Monthly add-ons (constant across the schedule)
    monthly_property_tax: Decimal = Decimal("0")
    monthly_insurance: Decimal = Decimal("0")

    # Roll-forward into next year
    yearly_interest: Decimal = Decimal("0")
    yearly_principal_paid: Decimal = Decimal("0")
    ending_balance: Decimal = Decimal("0")

    @property
    def total_monthly_cost(self) -> Decimal:
        return self.monthly_payment + self.monthly_property_tax + self.monthly_insurance
