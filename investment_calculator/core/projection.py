from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt

# Oldest verified human lifespan is 122 years 164 days, so nobody needs a row past 123.
MAX_AGE = 123

INVALID_AGE_MESSAGE = f"Invalid age provided. Age should be between 1 and {MAX_AGE}."
AGE_ORDER_MESSAGE = "Retirement age must be greater than current age."
OVERFLOW_MESSAGE = "Calculation error: result is too large or invalid."
MAX_AGE_NOTE = (
    f"Savings are still left at age {MAX_AGE}. The projection stops here because no "
    "human life has been documented past 122 years."
)


class ProjectionValidationError(ValueError):
    """Bad ages or age ordering, raised before any year is simulated."""


class ProjectionOverflowError(OverflowError):
    """The balance stopped being a finite number mid-simulation."""


class ProjectionErrorKind(str, Enum):
    VALIDATION = "validation"
    OVERFLOW = "overflow"


class ProjectionInput(BaseModel):
    """Everything one projection needs. Rates are annual percentages (5 means 5%)."""

    model_config = ConfigDict(frozen=True)

    currency: str
    initialAmount: float
    monthlyContribution: float
    interestRate: float
    inflationRate: float
    # strict: booleans and numeric strings are rejected; range and integrality are checked by validate_ages
    currentAge: Union[StrictInt, StrictFloat]
    retirementAge: Union[StrictInt, StrictFloat]
    monthlyWithdrawal: float
    percentageIncreaseMonthlyContribution: float


class YearRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: Optional[int]
    totalInvested: str
    totalSavings: str
    withdrawal: str
    currency: str
    note: Optional[str] = None


class ProjectionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ProjectionErrorKind
    message: str


class ProjectionResult(BaseModel):
    """Either the yearly records or the reason there are none."""

    model_config = ConfigDict(frozen=True)

    records: List[YearRecord] = []
    error: Optional[ProjectionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[YearRecord]:
        if self.error is None:
            return list(self.records)
        if self.error.kind == ProjectionErrorKind.OVERFLOW:
            raise ProjectionOverflowError(self.error.message)
        raise ProjectionValidationError(self.error.message)


def format_money(value: float) -> str:
    # "+ 0.0" turns -0.0 into 0.0
    return f"{value + 0.0:.2f}"


def _valid_age(value: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value) or not float(value).is_integer():
        return False
    return 0 < value <= MAX_AGE


def validate_ages(current_age: float, retirement_age: float) -> Optional[str]:
    """Return the first problem with the two ages, or None when both are usable."""
    if not (_valid_age(current_age) and _valid_age(retirement_age)):
        return INVALID_AGE_MESSAGE
    if retirement_age <= current_age:
        return AGE_ORDER_MESSAGE
    return None


def _failure(kind: ProjectionErrorKind, message: str) -> ProjectionResult:
    return ProjectionResult(error=ProjectionError(kind=kind, message=message))


def project(params: ProjectionInput) -> ProjectionResult:
    """
    Project the balance year by year from currentAge + 1.

    Accumulation (age < retirementAge), per year:
      1) grow the balance by interestRate
      2) add twelve months of contributions
      3) add interest on six months of contributions
         (contributions land throughout the year, not on Jan 1st)
      4) shrink everything by inflationRate
      5) raise next year's monthly contribution by its own growth rate

    Decumulation, per year, while money is left:
      1) withdraw twelve months, never more than the balance
      2) if anything is left: grow it, add the same half-year correction on the
         withdrawal, then apply inflation

    Both phases stop at MAX_AGE. If money is still left there, an advisory
    record with a note and no numbers closes the sequence.
    """
    problem = validate_ages(params.currentAge, params.retirementAge)
    if problem is not None:
        return _failure(ProjectionErrorKind.VALIDATION, problem)

    rate = params.interestRate / 100
    inflation = params.inflationRate / 100
    contribution_growth = params.percentageIncreaseMonthlyContribution / 100
    retirement_age = int(params.retirementAge)

    age = int(params.currentAge)
    balance = float(params.initialAmount)
    total_invested = float(params.initialAmount)
    monthly_contribution = float(params.monthlyContribution)

    records: List[YearRecord] = []

    # ---------- Accumulation ----------
    while age < retirement_age and age < MAX_AGE:
        yearly_contribution = monthly_contribution * 12
        balance *= 1 + rate
        balance += yearly_contribution
        balance += monthly_contribution * 6 * rate
        balance *= 1 - inflation
        total_invested += yearly_contribution
        monthly_contribution *= 1 + contribution_growth

        age += 1
        records.append(
            YearRecord(
                age=age,
                totalInvested=format_money(total_invested),
                # a negative starting amount is carried, but never shown
                totalSavings=format_money(balance if balance > 0 else 0.0),
                withdrawal=format_money(0.0),
                currency=params.currency,
            )
        )

        if not math.isfinite(balance):
            return _failure(ProjectionErrorKind.OVERFLOW, OVERFLOW_MESSAGE)

    # ---------- Decumulation ----------
    yearly_withdrawal = params.monthlyWithdrawal * 12
    while balance > 0 and age < MAX_AGE:
        actual_withdrawal = min(yearly_withdrawal, balance)
        balance -= actual_withdrawal

        if balance > 0:
            balance *= 1 + rate
            balance += actual_withdrawal / 12 * 6 * rate
            balance *= 1 - inflation
        balance = max(balance, 0.0)

        age += 1
        records.append(
            YearRecord(
                age=age,
                totalInvested=format_money(total_invested),
                totalSavings=format_money(balance),
                withdrawal=format_money(actual_withdrawal),
                currency=params.currency,
            )
        )

        if not math.isfinite(balance):
            return _failure(ProjectionErrorKind.OVERFLOW, OVERFLOW_MESSAGE)

    if balance > 0 and age >= MAX_AGE:
        records.append(
            YearRecord(
                age=None,
                totalInvested="",
                totalSavings="",
                withdrawal="",
                currency=params.currency,
                note=MAX_AGE_NOTE,
            )
        )

    return ProjectionResult(records=records)


def chart_series(records: Sequence[YearRecord]) -> Dict[str, list]:
    """Parallel series for the results chart; the advisory record has no numbers to plot."""
    yearly = [record for record in records if record.age is not None]
    return {
        "labels": [record.age for record in yearly],
        "totalSavings": [record.totalSavings for record in yearly],
        "withdrawals": [record.withdrawal for record in yearly],
    }


__all__ = [
    "MAX_AGE",
    "ProjectionInput",
    "YearRecord",
    "ProjectionErrorKind",
    "ProjectionError",
    "ProjectionResult",
    "ProjectionValidationError",
    "ProjectionOverflowError",
    "format_money",
    "validate_ages",
    "project",
    "chart_series",
]
