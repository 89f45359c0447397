"""Year-by-year amortization schedule with rate changes and lump-sum payments.

The schedule is a fold over loan years. Each year starts from the previous
`ScheduleState`, applies that year's events in order (re-deriving the payment
after every one of them over the full remaining term), emits a `PeriodRecord`,
then rolls the balance forward one year with simple annual interest.
"""

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from amortizer.engine.debt import monthly_payment, validate_loan
from amortizer.models.events import LumpSumPayment, RateChange, ScheduleEvent
from amortizer.models.loan import ExpenseProfile, LoanTerms
from amortizer.models.schedule import PeriodRecord, ScheduleState

logger = logging.getLogger(__name__)


def sort_events(events: Iterable[ScheduleEvent]) -> list[ScheduleEvent]:
    """Order events by year; same-year events keep the caller's order."""
    return sorted(events, key=lambda e: e.year)


def initial_state(loan: LoanTerms) -> ScheduleState:
    return ScheduleState(
        principal=Decimal(loan.principal),
        rate_percent=Decimal(loan.annual_rate_percent),
        monthly_payment=monthly_payment(
            Decimal(loan.principal), Decimal(loan.annual_rate_percent), loan.term_years
        ),
    )


def apply_event(state: ScheduleState, event: ScheduleEvent, remaining_years: int) -> ScheduleState:
    """Apply one event and re-derive the payment over `remaining_years`."""
    if isinstance(event, RateChange):
        principal = state.principal
        rate = Decimal(event.new_rate_percent)
    elif isinstance(event, LumpSumPayment):
        principal = state.principal - Decimal(event.amount)
        rate = state.rate_percent
        if principal < 0:
            logger.warning(
                "Lump sum of %s in year %s exceeds balance; balance is now %s",
                event.amount, event.year, principal,
            )
    else:
        raise TypeError(f"Unknown schedule event: {event!r}")

    return ScheduleState(
        principal=principal,
        rate_percent=rate,
        monthly_payment=monthly_payment(principal, rate, remaining_years),
    )


def apply_year_events(
    state: ScheduleState,
    events: Sequence[ScheduleEvent],
    year: int,
    term_years: int,
) -> ScheduleState:
    """Apply every event that falls in `year`, each on top of the last."""
    remaining_years = term_years - year + 1
    for event in events:
        if event.year != year:
            continue
        logger.debug("Year %s: applying %r over %s remaining years", year, event, remaining_years)
        state = apply_event(state, event, remaining_years)
    return state


def advance_year(state: ScheduleState) -> tuple[ScheduleState, Decimal, Decimal]:
    """Roll the balance forward one year at the state's payment and rate.

    Returns (next_state, yearly_interest, yearly_principal_paid).
    """
    yearly_interest = state.principal * (state.rate_percent / 100)
    yearly_principal_paid = state.monthly_payment * 12 - yearly_interest
    next_state = ScheduleState(
        principal=state.principal - yearly_principal_paid,
        rate_percent=state.rate_percent,
        monthly_payment=state.monthly_payment,
    )
    return next_state, yearly_interest, yearly_principal_paid


def compute_schedule(
    loan: LoanTerms,
    expenses: ExpenseProfile,
    events: Iterable[ScheduleEvent] = (),
) -> list[PeriodRecord]:
    """Build one `PeriodRecord` per loan year, 1..term_years.

    Events outside the loan term are never selected. Inputs are not mutated.
    """
    validate_loan(loan, expenses)
    ordered = sort_events(events)

    monthly_tax = expenses.monthly_property_tax
    monthly_insurance = expenses.monthly_insurance

    state = initial_state(loan)
    records: list[PeriodRecord] = []

    for year in range(1, loan.term_years + 1):
        state = apply_year_events(state, ordered, year, loan.term_years)
        next_state, yearly_interest, yearly_principal_paid = advance_year(state)

        records.append(PeriodRecord(
            year=year,
            principal_balance=state.principal,
            rate_percent=state.rate_percent,
            monthly_payment=state.monthly_payment,
            monthly_property_tax=monthly_tax,
            monthly_insurance=monthly_insurance,
            yearly_interest=yearly_interest,
            yearly_principal_paid=yearly_principal_paid,
            ending_balance=next_state.principal,
        ))
        state = next_state

    logger.debug(
        "Computed %s-year schedule with %s events; final balance %s",
        loan.term_years, len(ordered), state.principal,
    )
    return records
