"""Canonical test fixtures used across engine and API tests.

Fixture: $1.3M loan at 4.75%, 30yr, starting 2024, $15K tax / $3K insurance.
Small fixture: $100K loan at 5%, 10yr.
"""

import pytest
from decimal import Decimal

from amortizer.models.loan import LoanTerms, ExpenseProfile


@pytest.fixture
def canonical_loan() -> LoanTerms:
    return LoanTerms(
        principal=Decimal("1300000"),
        annual_rate_percent=Decimal("4.75"),
        term_years=30,
        start_year=2024,
    )


@pytest.fixture
def canonical_expenses() -> ExpenseProfile:
    return ExpenseProfile(
        annual_property_tax=Decimal("15000"),
        annual_insurance=Decimal("3000"),
    )


@pytest.fixture
def small_loan() -> LoanTerms:
    return LoanTerms(
        principal=Decimal("100000"),
        annual_rate_percent=Decimal("5"),
        term_years=10,
        start_year=2024,
    )


@pytest.fixture
def no_expenses() -> ExpenseProfile:
    return ExpenseProfile()
