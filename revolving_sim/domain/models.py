"""Domain models - immutable dataclasses describing a simulation run"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SimulationParams:
    """Inputs for one simulation run (amounts in the smallest currency unit)"""

    initial_balance: int
    monthly_new_charge: int
    monthly_repayment: int
    annual_interest_rate: float  # percent, e.g. 18.0


@dataclass(frozen=True)
class MonthRecord:
    """Balance and payment breakdown after one simulated month"""

    month: int
    balance: int
    principal_paid: int
    interest_paid: int
    total_paid: int  # paid this month
    cumulative_interest: int
    cumulative_principal: int
    remaining_interest: int  # interest still due if charging stopped now


@dataclass(frozen=True)
class SimulationResult:
    """Trajectory plus aggregate totals for a run"""

    trajectory: Tuple[MonthRecord, ...]
    total_interest: int
    total_paid: int
    months: int
    is_infinite: bool


@dataclass(frozen=True)
class SimulationSummary:
    """Figures shown next to the charts"""

    first_month_interest: Optional[int]  # None when too large to compute
    repayment_insufficient: bool
    interest_ratio_percent: Optional[int]
    total_borrowed: int  # initial balance plus new charges over the run
    payoff_years: int
    payoff_remaining_months: int
    total_borrowed_label: str
    total_paid_label: str
    total_interest_label: str
    duration_label: str
