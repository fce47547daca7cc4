from __future__ import annotations

from investment_calculator.core.projection import ProjectionInput, project


def test_zero_growth_accumulates_contributions_then_drains():
    """
    With zero interest and inflation, savings are the starting balance plus contributions,
    and retirement withdrawals take them down linearly until the last partial year.
    """
    params = ProjectionInput(
        currency="USD",
        initialAmount=1000.0,
        monthlyContribution=100.0,
        interestRate=0.0,
        inflationRate=0.0,
        currentAge=25,
        retirementAge=27,
        monthlyWithdrawal=100.0,
        percentageIncreaseMonthlyContribution=0.0,
    )

    records = project(params).unwrap()

    rows = [(r.age, r.totalInvested, r.totalSavings, r.withdrawal) for r in records]
    assert rows == [
        (26, "2200.00", "2200.00", "0.00"),
        (27, "3400.00", "3400.00", "0.00"),
        (28, "3400.00", "2200.00", "1200.00"),
        (29, "3400.00", "1000.00", "1200.00"),
        # only what is left can be withdrawn
        (30, "3400.00", "0.00", "1000.00"),
    ]


def test_contribution_increase_compounds_yearly():
    params = ProjectionInput(
        currency="USD",
        initialAmount=0.0,
        monthlyContribution=100.0,
        interestRate=0.0,
        inflationRate=0.0,
        currentAge=30,
        retirementAge=32,
        monthlyWithdrawal=2000.0,
        percentageIncreaseMonthlyContribution=10.0,
    )

    records = project(params).unwrap()

    assert records[0].totalInvested == "1200.00"
    assert records[1].totalInvested == "2520.00"
    assert records[1].totalSavings == "2520.00"
