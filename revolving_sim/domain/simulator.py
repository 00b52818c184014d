"""Month-by-month revolving balance simulation - core business logic"""

from fractions import Fraction
from typing import List
from revolving_sim.domain.exceptions import InterestOverflowError
from revolving_sim.domain.models import SimulationParams, MonthRecord, SimulationResult
from revolving_sim.domain.projection import estimate_projected_interest, monthly_interest

# 50 years
MAX_SIMULATION_MONTHS = 600

# Runaway guard: balance has grown past both limits
RUNAWAY_BALANCE_MULTIPLIER = 5
RUNAWAY_BALANCE_FLOOR = 1_000_000

# Stabilization heuristic
STABLE_BALANCE_TOLERANCE = 10
STEADY_STATE_CHARGE_FACTOR = Fraction(3, 2)  # 1.5 as an exact ratio


def simulate(params: SimulationParams) -> SimulationResult:
    """
    Simulate a revolving balance under a fixed monthly repayment.

    Each month:
    - Interest is charged on the opening balance (truncated)
    - Repayment covers interest first, the rest reduces principal
    - New charges are added after the repayment

    Termination, checked after each month in this order:
    1. Balance reaches zero (paid off)
    2. Balance drops below the monthly repayment (effectively cleared)
    3. Balance stops moving while new charges continue:
       - low steady state (within 1.5x the new charge) is a success
       - a stuck balance above the repayment is a debt trap

    A run is classified infinite when it is a debt trap, when the balance
    runs away (over 5x the initial balance and over 1,000,000, or too large
    to compute interest on), or when it hits MAX_SIMULATION_MONTHS.
    """
    initial_balance = params.initial_balance
    new_charge = params.monthly_new_charge
    repayment = params.monthly_repayment
    rate = params.annual_interest_rate

    balance = initial_balance
    total_interest = 0
    total_paid = 0
    cumulative_principal = 0
    is_infinite = False
    month = 0

    trajectory: List[MonthRecord] = [
        MonthRecord(
            month=0,
            balance=balance,
            principal_paid=0,
            interest_paid=0,
            total_paid=0,
            cumulative_interest=0,
            cumulative_principal=0,
            remaining_interest=estimate_projected_interest(balance, repayment, rate),
        )
    ]

    while balance > 0 and month < MAX_SIMULATION_MONTHS:
        month += 1

        try:
            interest = monthly_interest(balance, rate)
        except InterestOverflowError:
            # Balance past float range is runaway growth as well
            is_infinite = True
            break

        # Final payment never exceeds what is owed
        payment = repayment
        if balance + interest <= payment:
            payment = balance + interest

        principal = payment - interest

        # Checked before the update so the runaway month is not recorded
        if balance > initial_balance * RUNAWAY_BALANCE_MULTIPLIER and balance > RUNAWAY_BALANCE_FLOOR:
            is_infinite = True
            break

        previous_balance = balance
        balance = max(balance - principal + new_charge, 0)

        total_interest += interest
        total_paid += payment
        cumulative_principal += principal

        trajectory.append(
            MonthRecord(
                month=month,
                balance=balance,
                principal_paid=principal,
                interest_paid=interest,
                total_paid=payment,
                cumulative_interest=total_interest,
                cumulative_principal=cumulative_principal,
                remaining_interest=estimate_projected_interest(balance, repayment, rate),
            )
        )

        if balance <= 0:
            break

        if balance < repayment:
            break

        if new_charge > 0 and abs(balance - previous_balance) <= STABLE_BALANCE_TOLERANCE:
            if balance <= new_charge * STEADY_STATE_CHARGE_FACTOR:
                break
            if balance > repayment:
                is_infinite = True
                break
    else:
        # Loop ran out without a termination check firing
        if month >= MAX_SIMULATION_MONTHS:
            is_infinite = True

    return SimulationResult(
        trajectory=tuple(trajectory),
        total_interest=total_interest,
        total_paid=total_paid,
        months=month,
        is_infinite=is_infinite,
    )
