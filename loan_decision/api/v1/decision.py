"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from loan_decision.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_decision.api.dependencies import get_decision_calculator, get_request_id
from loan_decision.domain.decision_engine import LoanDecisionCalculator
from loan_decision.domain.models import RejectionReason
from loan_decision.infrastructure.observability.metrics import record_decision
from loan_decision.infrastructure.observability.logging import log_decision

router = APIRouter()

# Invalid input is the client's fault; a valid request without an offer is "not found"
STATUS_BY_REJECTION = {
    RejectionReason.INVALID_PERSONAL_CODE: 400,
    RejectionReason.INVALID_LOAN_AMOUNT: 400,
    RejectionReason.INVALID_LOAN_PERIOD: 400,
    RejectionReason.DEBT: 404,
    RejectionReason.NO_VALID_LOAN: 404,
}


@router.post(
    "/loan/decision",
    response_model=DecisionResponse,
    responses={400: {"model": DecisionResponse}, 404: {"model": DecisionResponse}},
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    calculator: LoanDecisionCalculator = Depends(get_decision_calculator),
):
    """
    Calculate the loan offer for a customer.

    Flow:
    1. Validate personal code, amount and period
    2. Check the personal code segment for debt
    3. Score the request and search for a feasible amount/period
    4. Return the offer, or the rejection message with a 400/404 status
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = calculator.compute_decision(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    rejection = decision.rejection.value if decision.rejection else None

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.loan_amount, decision.loan_period, rejection)
    log_decision(
        request_id,
        request_body.personal_code,
        decision.loan_amount,
        decision.loan_period,
        rejection,
        duration_ms,
    )

    response = DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )

    if decision.approved:
        return response

    return JSONResponse(
        status_code=STATUS_BY_REJECTION[decision.rejection],
        content=response.model_dump(),
    )
