"""Payment formula and loan input checks.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from amortizer.models.errors import ScheduleInputError
from amortizer.models.loan import LoanTerms, ExpenseProfile

TWO_PLACES = Decimal("0.01")


def monthly_payment(principal: Decimal, annual_rate_percent: Decimal, remaining_years: int) -> Decimal:
    """Calculate the level monthly payment that retires `principal` over `remaining_years`.

    Rates are percentages (4.75 for 4.75%). The result is not rounded; a
    negative principal yields a negative payment.
    """
    if remaining_years <= 0:
        raise ScheduleInputError(f"remaining_years must be positive, got {remaining_years}")

    r = Decimal(annual_rate_percent) / 100 / 12
    n = remaining_years * 12
    if r == 0:
        return Decimal(principal) / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return Decimal(principal) * (r * factor) / (factor - 1)


def to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def validate_loan(loan: LoanTerms, expenses: ExpenseProfile) -> None:
    """Reject inputs the schedule cannot be built from."""
    if loan.principal <= 0:
        raise ScheduleInputError(f"principal must be positive, got {loan.principal}")
    if loan.annual_rate_percent < 0:
        raise ScheduleInputError(f"annual rate must not be negative, got {loan.annual_rate_percent}")
    if loan.term_years < 1:
        raise ScheduleInputError(f"term_years must be at least 1, got {loan.term_years}")
    if expenses.annual_property_tax < 0 or expenses.annual_insurance < 0:
        raise ScheduleInputError("property tax and insurance must not be negative")
