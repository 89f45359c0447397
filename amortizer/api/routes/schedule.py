"""Schedule routes: loan terms + events in, year-by-year schedule out."""

import logging

from fastapi import APIRouter, HTTPException

from amortizer.api.schemas import (
    PaymentRequest,
    PaymentResponse,
    PeriodResponse,
    RateChangeRequest,
    ScheduleRequest,
    ScheduleResponse,
)
from amortizer.engine.debt import monthly_payment, to_cents
from amortizer.engine.events import add_event, describe_event, events_in_year
from amortizer.engine.labels import calendar_year, event_markers, year_label
from amortizer.engine.schedule import compute_schedule
from amortizer.models.errors import ScheduleInputError
from amortizer.models.events import LumpSumPayment, RateChange, ScheduleEvent
from amortizer.models.loan import ExpenseProfile, LoanTerms

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["schedule"])


def _build_events(req: ScheduleRequest, term_years: int) -> tuple[ScheduleEvent, ...]:
    """Convert request events to domain events, validating each against the term."""
    events: tuple[ScheduleEvent, ...] = ()
    for e in req.events:
        if isinstance(e, RateChangeRequest):
            event = RateChange(year=e.year, new_rate_percent=e.new_rate_percent)
        else:
            event = LumpSumPayment(year=e.year, amount=e.amount)
        events = add_event(events, event, term_years)
    return events


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(req: ScheduleRequest):
    """Compute the amortization schedule for a loan and its events."""
    loan = LoanTerms(
        principal=req.loan.principal,
        annual_rate_percent=req.loan.annual_rate_percent,
        term_years=req.loan.term_years,
        start_year=req.loan.start_year,
    )
    expenses = ExpenseProfile(
        annual_property_tax=req.expenses.annual_property_tax,
        annual_insurance=req.expenses.annual_insurance,
    )

    try:
        events = _build_events(req, loan.term_years)
        periods = compute_schedule(loan, expenses, events)
    except ScheduleInputError as e:
        logger.info("Rejected schedule request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return ScheduleResponse(
        periods=[
            PeriodResponse(
                year=p.year,
                calendar_year=calendar_year(loan, p.year),
                label=year_label(loan, p.year),
                principal_balance=to_cents(p.principal_balance),
                rate_percent=p.rate_percent,
                monthly_payment=to_cents(p.monthly_payment),
                monthly_property_tax=to_cents(p.monthly_property_tax),
                monthly_insurance=to_cents(p.monthly_insurance),
                total_monthly_cost=to_cents(p.total_monthly_cost),
                yearly_interest=to_cents(p.yearly_interest),
                yearly_principal_paid=to_cents(p.yearly_principal_paid),
                ending_balance=to_cents(p.ending_balance),
                events=[describe_event(e) for e in events_in_year(events, p.year)],
            )
            for p in periods
        ],
        event_years=event_markers(periods, events),
    )


@router.post("/payment", response_model=PaymentResponse)
async def payment(req: PaymentRequest):
    """Level monthly payment for a principal, rate and remaining term."""
    pmt = monthly_payment(req.principal, req.annual_rate_percent, req.remaining_years)
    return PaymentResponse(monthly_payment=to_cents(pmt))
