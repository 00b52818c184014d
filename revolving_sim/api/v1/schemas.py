"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from revolving_sim.domain.models import SimulationParams

# Upper input bounds
MAX_AMOUNT = 10**15
MAX_ANNUAL_RATE = 1000.0


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either naming on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SimulationRequest(CamelModel):
    """Request body for POST /v1/simulate"""

    initial_balance: int = Field(..., ge=0, le=MAX_AMOUNT, description="Balance at month 0")
    monthly_new_charge: int = Field(0, ge=0, le=MAX_AMOUNT, description="New charges added each month")
    monthly_repayment: int = Field(..., ge=0, le=MAX_AMOUNT, description="Fixed repayment (principal + interest)")
    annual_interest_rate: float = Field(
        ..., ge=0, le=MAX_ANNUAL_RATE, allow_inf_nan=False, description="Annual rate in percent, e.g. 18.0"
    )

    def to_domain(self) -> SimulationParams:
        return SimulationParams(
            initial_balance=self.initial_balance,
            monthly_new_charge=self.monthly_new_charge,
            monthly_repayment=self.monthly_repayment,
            annual_interest_rate=self.annual_interest_rate,
        )


class MonthRecordSchema(CamelModel):
    """Single month in the trajectory"""

    month: int
    balance: int
    principal_paid: int
    interest_paid: int
    total_paid: int
    cumulative_interest: int
    cumulative_principal: int
    remaining_interest: int


class SimulationResultSchema(CamelModel):
    """Trajectory and totals"""

    trajectory: List[MonthRecordSchema]
    total_interest: int
    total_paid: int
    months: int
    is_infinite: bool


class SimulationSummarySchema(CamelModel):
    """Headline figures for the summary cards"""

    first_month_interest: Optional[int] = None
    repayment_insufficient: bool
    interest_ratio_percent: Optional[int] = None
    total_borrowed: int
    payoff_years: int
    payoff_remaining_months: int
    total_borrowed_label: str
    total_paid_label: str
    total_interest_label: str
    duration_label: str


class SimulationResponse(CamelModel):
    """Response for POST /v1/simulate"""

    params: SimulationRequest
    result: SimulationResultSchema
    summary: SimulationSummarySchema
