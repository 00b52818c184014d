"""POST /v1/simulate and GET /v1/defaults - revolving balance projection"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from revolving_sim.api.v1.schemas import (
    SimulationRequest,
    SimulationResponse,
    SimulationResultSchema,
    SimulationSummarySchema,
)
from revolving_sim.api.dependencies import get_request_id, get_settings
from revolving_sim.config import Settings
from revolving_sim.domain.simulator import simulate
from revolving_sim.domain.summary import summarize
from revolving_sim.infrastructure.observability.metrics import record_simulation
from revolving_sim.infrastructure.observability.logging import log_simulation

router = APIRouter()


@router.post("/simulate", response_model=SimulationResponse)
def run_simulation(
    request_body: SimulationRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Project a revolving balance month by month.

    Flow:
    1. Simulate the balance trajectory
    2. Derive summary figures and labels
    3. Record metrics and logs
    4. Return params, trajectory and summary
    """
    start_time = time.time()
    request_id = get_request_id(request)
    params = request_body.to_domain()

    try:
        result = simulate(params)
        summary = summarize(params, result, app_settings.currency_symbol)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_simulation(result.is_infinite, result.months)
    log_simulation(request_id, result.months, result.is_infinite, result.total_interest, duration_ms)

    return SimulationResponse(
        params=request_body,
        result=SimulationResultSchema.model_validate(asdict(result)),
        summary=SimulationSummarySchema.model_validate(asdict(summary)),
    )


@router.get("/defaults", response_model=SimulationRequest)
def get_defaults(app_settings: Settings = Depends(get_settings)):
    """Scenario the calculator starts with"""
    return SimulationRequest(
        initial_balance=app_settings.default_initial_balance,
        monthly_new_charge=app_settings.default_monthly_new_charge,
        monthly_repayment=app_settings.default_monthly_repayment,
        annual_interest_rate=app_settings.default_annual_interest_rate,
    )
