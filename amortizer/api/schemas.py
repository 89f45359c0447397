"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from amortizer.config import settings


# ---- Request schemas ----

class LoanRequest(BaseModel):
    principal: Decimal = Field(..., gt=0, description="Original loan amount")
    annual_rate_percent: Decimal = Field(..., ge=0, description="4.75 means 4.75%")
    term_years: int = Field(30, ge=1, le=settings.max_term_years)
    start_year: int = 2024


class ExpensesRequest(BaseModel):
    annual_property_tax: Decimal = Field(Decimal("0"), ge=0)
    annual_insurance: Decimal = Field(Decimal("0"), ge=0)


class RateChangeRequest(BaseModel):
    type: Literal["rate"] = "rate"
    year: int = Field(..., ge=1)
    new_rate_percent: Decimal = Field(..., ge=0)


class LumpSumRequest(BaseModel):
    type: Literal["lump_sum"] = "lump_sum"
    year: int = Field(..., ge=1)
    amount: Decimal = Field(..., gt=0)


EventRequest = Annotated[Union[RateChangeRequest, LumpSumRequest], Field(discriminator="type")]


class ScheduleRequest(BaseModel):
    loan: LoanRequest
    expenses: ExpensesRequest = Field(default_factory=ExpensesRequest)
    events: list[EventRequest] = Field(default_factory=list)


class PaymentRequest(BaseModel):
    principal: Decimal = Field(..., gt=0)
    annual_rate_percent: Decimal = Field(..., ge=0)
    remaining_years: int = Field(..., ge=1, le=settings.max_term_years)


# ---- Response schemas ----

class PeriodResponse(BaseModel):
    year: int
    calendar_year: int
    label: str
    principal_balance: Decimal
    rate_percent: Decimal
    monthly_payment: Decimal
    monthly_property_tax: Decimal
    monthly_insurance: Decimal
    total_monthly_cost: Decimal
    yearly_interest: Decimal
    yearly_principal_paid: Decimal
    ending_balance: Decimal
    events: list[str] = []


class ScheduleResponse(BaseModel):
    periods: list[PeriodResponse]
    event_years: list[int] = []


class PaymentResponse(BaseModel):
    monthly_payment: Decimal
