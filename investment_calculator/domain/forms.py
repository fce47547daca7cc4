from __future__ import annotations

import math
from typing import List, Mapping, Optional

from investment_calculator.core.projection import (
    ProjectionInput,
    ProjectionValidationError,
)

NUMERIC_FIELDS = (
    "initialAmount",
    "monthlyContribution",
    "interestRate",
    "inflationRate",
    "currentAge",
    "retirementAge",
    "monthlyWithdrawal",
    "percentageIncreaseMonthlyContribution",
)

FIELD_LABELS = {
    "initialAmount": "Initial amount",
    "monthlyContribution": "Monthly contribution",
    "interestRate": "Interest rate",
    "inflationRate": "Inflation rate",
    "currentAge": "Current age",
    "retirementAge": "Retirement age",
    "monthlyWithdrawal": "Monthly withdrawal",
    "percentageIncreaseMonthlyContribution": "Yearly contribution increase",
}


class FormValidationError(ProjectionValidationError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def parse_number(raw: Optional[str]) -> Optional[float]:
    """Read one form value as a finite float; None when it is blank or not a number."""
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_projection_form(
    form: Mapping[str, str], default_currency: str = "USD"
) -> ProjectionInput:
    """
    Turn the untyped calculator form into a ProjectionInput.

    All numeric fields are required. Ages are only checked for being numbers
    here; their range and ordering are left to the projection itself.
    """
    values: dict = {}
    errors: List[str] = []

    for name in NUMERIC_FIELDS:
        raw = form.get(name)
        value = parse_number(raw)
        if value is None:
            label = FIELD_LABELS[name]
            if raw is None or not raw.strip():
                errors.append(f"{label} is required")
            else:
                errors.append(f"{label} must be a number, got {raw.strip()!r}")
            continue
        values[name] = value

    if errors:
        raise FormValidationError(errors)

    # an empty box means "not given"; anything else is kept as typed
    currency = form.get("currency") or default_currency
    return ProjectionInput(currency=currency, **values)
