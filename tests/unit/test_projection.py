"""Unit tests for projected remaining interest"""

import pytest
from revolving_sim.domain.exceptions import InterestOverflowError
from revolving_sim.domain.projection import estimate_projected_interest, monthly_interest


@pytest.mark.parametrize("balance", [0, -1, -50_000])
def test_estimate_non_positive_balance(balance):
    """No balance means no future interest"""
    assert estimate_projected_interest(balance, 5000, 18.0) == 0


def test_monthly_interest_truncates():
    """Interest is floored, never rounded"""
    assert monthly_interest(300_000, 18.0) == 4500
    assert monthly_interest(999, 12.0) == 9  # 9.99


def test_estimate_single_month_payoff():
    """Payment shrinks to balance + interest in the payoff month"""
    # 1,000 @ 1%/month: 10 interest, paid off with 1,010
    assert estimate_projected_interest(1000, 5000, 12.0) == 10


def test_estimate_two_month_payoff():
    """Interest accumulates across months until the balance clears"""
    # Month 1: 100 interest, 5,000 principal -> 5,000 left
    # Month 2: 50 interest, final payment 5,050
    assert estimate_projected_interest(10_000, 5100, 12.0) == 150


def test_estimate_zero_rate():
    """Zero rate never accrues interest"""
    assert estimate_projected_interest(300_000, 5000, 0.0) == 0


def test_estimate_zero_repayment_zero_rate_hits_cap():
    """Balance that never moves still terminates at the cap"""
    assert estimate_projected_interest(10_000, 0, 0.0) == 0


def test_estimate_returns_partial_interest_at_cap():
    """Unpayable balance returns interest accumulated over 600 months"""
    # Repayment below the 15,000 monthly interest: balance only grows,
    # so every one of the 600 months charges at least 15,000.
    total = estimate_projected_interest(1_000_000, 1000, 18.0)
    assert total >= 600 * 15_000


def test_estimate_is_deterministic():
    """Pure function of its inputs"""
    first = estimate_projected_interest(300_000, 5000, 18.0)
    second = estimate_projected_interest(300_000, 5000, 18.0)
    assert first == second
    assert first > 0


def test_monthly_interest_beyond_float_range_raises():
    """Overflow is reported as a domain error, not a crash"""
    with pytest.raises(InterestOverflowError):
        monthly_interest(10**400, 18.0)
    with pytest.raises(InterestOverflowError):
        monthly_interest(10**308, 3000.0)  # product is inf


def test_estimate_huge_balance_returns_zero_interest():
    """Nothing accumulates when the first month already overflows"""
    assert estimate_projected_interest(10**400, 1000, 18.0) == 0


def test_estimate_stops_accumulating_on_overflow():
    """250%/month compounds past float range before the 600-month cap"""
    total = estimate_projected_interest(1_000_000, 1000, 3000.0)
    assert total > 0
