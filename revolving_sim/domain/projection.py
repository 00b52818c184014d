"""Projected interest for retiring a balance with no further charges"""

import math

from revolving_sim.domain.exceptions import InterestOverflowError

# 50 years
MAX_PROJECTION_MONTHS = 600


def monthly_interest(balance: int, annual_interest_rate: float) -> int:
    """
    Interest charged on a balance for one month, truncated to whole units.

    Raises InterestOverflowError when the balance or the product no longer
    fits in a float.
    """
    monthly_rate = annual_interest_rate / 100 / 12
    try:
        interest = balance * monthly_rate
    except OverflowError as e:
        raise InterestOverflowError(f"Balance too large for interest calculation: {e}") from e

    if not math.isfinite(interest):
        raise InterestOverflowError("Monthly interest is not finite")

    return math.floor(interest)


def estimate_projected_interest(
    balance: int,
    monthly_repayment: int,
    annual_interest_rate: float,
) -> int:
    """
    Estimate total interest paid to clear `balance` at a fixed repayment.

    Each month interest is taken first and the rest of the payment goes to
    principal. The final payment shrinks to balance + interest so the balance
    never goes negative.

    If the balance is not cleared within MAX_PROJECTION_MONTHS, or grows
    beyond what interest can be computed on, the interest accumulated up to
    that point is returned as-is.
    """
    if balance <= 0:
        return 0

    current_balance = balance
    total_interest = 0

    for _ in range(MAX_PROJECTION_MONTHS):
        try:
            interest = monthly_interest(current_balance, annual_interest_rate)
        except InterestOverflowError:
            break

        payment = monthly_repayment
        if current_balance + interest <= payment:
            payment = current_balance + interest

        current_balance -= payment - interest
        total_interest += interest

        if current_balance <= 0:
            break

    return total_interest
