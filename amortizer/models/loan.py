from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal
    annual_rate_percent: Decimal  # 4.75 means 4.75%
    term_years: int = 30
    start_year: int = 2024  # Display only, never used in computation


@dataclass(frozen=True)
class ExpenseProfile:
    annual_property_tax: Decimal = Decimal("0")
    annual_insurance: Decimal = Decimal("0")

    @property
    def monthly_property_tax(self) -> Decimal:
        return Decimal(self.annual_property_tax) / 12

    @property
    def monthly_insurance(self) -> Decimal:
        return Decimal(self.annual_insurance) / 12
