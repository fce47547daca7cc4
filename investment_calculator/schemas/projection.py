"""Data contracts for the JSON projection endpoint."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from investment_calculator.core.projection import (
    ProjectionErrorKind,
    ProjectionInput,
    YearRecord,
)


class ProjectionRequest(BaseModel):
    """JSON body accepted by POST /api/projection."""

    model_config = ConfigDict(extra="forbid")

    currency: Optional[str] = Field(
        None,
        description="Label shown next to every amount; never converted. Defaults to the configured currency.",
    )
    initialAmount: float = Field(..., description="Balance at currentAge.")
    monthlyContribution: float = Field(..., description="First year's monthly contribution.")
    interestRate: float = Field(..., description="Annual return in percent (5 means 5%).")
    inflationRate: float = Field(..., description="Annual inflation in percent.")
    currentAge: Union[StrictInt, StrictFloat]
    retirementAge: Union[StrictInt, StrictFloat]
    monthlyWithdrawal: float = Field(..., description="Monthly withdrawal once retired.")
    percentageIncreaseMonthlyContribution: float = Field(
        ..., description="Yearly growth of the monthly contribution itself, in percent."
    )

    def to_input(self, default_currency: str) -> ProjectionInput:
        values = self.model_dump()
        values["currency"] = default_currency if self.currency is None else self.currency
        return ProjectionInput(**values)


class ChartSeries(BaseModel):
    labels: List[int]
    totalSavings: List[str]
    withdrawals: List[str]


class ProjectionResponse(BaseModel):
    records: List[YearRecord]
    chart: ChartSeries


class ProjectionErrorResponse(BaseModel):
    kind: ProjectionErrorKind
    detail: str
