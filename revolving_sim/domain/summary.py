"""Headline figures derived from a simulation run"""

from typing import Optional

from revolving_sim.domain.exceptions import InterestOverflowError
from revolving_sim.domain.models import SimulationParams, SimulationResult, SimulationSummary
from revolving_sim.domain.projection import monthly_interest
from revolving_sim.utils.formatting import format_currency, format_duration

NOT_MEASURABLE_LABEL = "Not measurable"
INFINITE_INTEREST_LABEL = "∞"
INFINITE_DURATION_LABEL = "50+ years"


def first_month_interest(params: SimulationParams) -> Optional[int]:
    """Interest on the initial balance, None when it cannot be computed"""
    try:
        return monthly_interest(params.initial_balance, params.annual_interest_rate)
    except InterestOverflowError:
        return None


def is_repayment_insufficient(params: SimulationParams) -> bool:
    """Repayment does not even cover the first month's interest"""
    if params.initial_balance <= 0:
        return False

    first_interest = first_month_interest(params)
    if first_interest is None:
        # Interest beyond float range dwarfs any repayment
        return params.annual_interest_rate > 0

    return params.monthly_repayment <= first_interest


def summarize(
    params: SimulationParams,
    result: SimulationResult,
    currency_symbol: str = "¥",
) -> SimulationSummary:
    """
    Build the summary shown alongside the charts.

    Total borrowed is the initial balance plus every month's new charges,
    the amount total paid is compared against. When the run is infinite the
    totals are not final values, so the labels say so instead of showing
    truncated amounts. The interest ratio is relative to the initial balance
    and is None when there is none.
    """
    interest_ratio = None
    if params.initial_balance > 0:
        interest_ratio = round(result.total_interest / params.initial_balance * 100)

    total_borrowed = params.initial_balance + params.monthly_new_charge * result.months

    if result.is_infinite:
        total_borrowed_label = NOT_MEASURABLE_LABEL
        total_paid_label = NOT_MEASURABLE_LABEL
        total_interest_label = INFINITE_INTEREST_LABEL
        duration_label = INFINITE_DURATION_LABEL
    else:
        total_borrowed_label = format_currency(total_borrowed, currency_symbol)
        total_paid_label = format_currency(result.total_paid, currency_symbol)
        total_interest_label = format_currency(result.total_interest, currency_symbol)
        duration_label = format_duration(result.months)

    return SimulationSummary(
        first_month_interest=first_month_interest(params),
        repayment_insufficient=is_repayment_insufficient(params),
        interest_ratio_percent=interest_ratio,
        total_borrowed=total_borrowed,
        payoff_years=result.months // 12,
        payoff_remaining_months=result.months % 12,
        total_borrowed_label=total_borrowed_label,
        total_paid_label=total_paid_label,
        total_interest_label=total_interest_label,
        duration_label=duration_label,
    )
