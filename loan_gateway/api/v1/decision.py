"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import ConstraintsResponse, LoanDecisionRequest, LoanDecisionResponse
from loan_gateway.api.dependencies import get_decision_engine, get_request_id
from loan_gateway.domain.identity import mask_code
from loan_gateway.domain.scoring import LoanDecisionEngine
from loan_gateway.infrastructure.observability.metrics import record_decision, decision_errors_counter
from loan_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


@router.post(
    "/loan/decision",
    response_model=LoanDecisionResponse,
    responses={
        400: {"model": LoanDecisionResponse, "description": "Invalid application input"},
        404: {"model": LoanDecisionResponse, "description": "No valid loan found"},
        500: {"model": LoanDecisionResponse, "description": "Internal error"},
    },
)
def create_loan_decision(
    request_body: LoanDecisionRequest,
    request: Request,
    engine: LoanDecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the loan amount and period we are willing to grant.

    Flow:
    1. Validate personal code, age, amount and period
    2. Derive credit modifier from the personal code
    3. Offer the largest amount for the requested period, or the minimum
       amount over a longer period
    4. Return the decision (400 on invalid input, 404 when no loan fits)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.evaluate(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        decision_errors_counter.inc()
        logging.exception(f"Unexpected error: {e}", extra={"request_id": request_id})
        response = LoanDecisionResponse(
            personal_code=request_body.personal_code,
            error_message="An unexpected error occurred",
        )
        return JSONResponse(status_code=500, content=response.model_dump())

    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision)
    log_decision(
        request_id,
        mask_code(request_body.personal_code),
        decision.loan_amount,
        decision.loan_period,
        decision.denial_reason.value if decision.denial_reason else None,
        duration_ms,
    )

    response = LoanDecisionResponse(
        personal_code=request_body.personal_code,
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )

    if decision.approved:
        return response

    status_code = 400 if decision.denial_reason.is_input_error else 404
    return JSONResponse(status_code=status_code, content=response.model_dump())


@router.get("/loan/constraints", response_model=ConstraintsResponse)
def get_loan_constraints(engine: LoanDecisionEngine = Depends(get_decision_engine)):
    """Loan bounds and age window the engine currently enforces"""
    constraints = engine.constraints
    return ConstraintsResponse(
        min_loan_amount=constraints.min_loan_amount,
        max_loan_amount=constraints.max_loan_amount,
        min_loan_period=constraints.min_loan_period,
        max_loan_period=constraints.max_loan_period,
        min_loaner_age=constraints.min_loaner_age,
        expected_lifetime=constraints.expected_lifetime,
        min_credit_score=constraints.min_credit_score,
    )
