"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from decision_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_gateway.api.dependencies import get_decision_engine, get_request_id
from decision_gateway.domain.decision_engine import DecisionEngine
from decision_gateway.domain.exceptions import (
    InvalidAgeError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from decision_gateway.domain.models import LoanRequest
from decision_gateway.infrastructure.observability.metrics import record_decision
from decision_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = DecisionResponse(error_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the maximum loan amount and period for the customer.

    Status codes:
    - 200: Loan approved (period may be longer than requested)
    - 400: Invalid personal code, amount, period or age
    - 404: No valid loan for the customer's credit segment
    - 500: Unexpected error
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.calculate_approved_loan(
            LoanRequest(
                personal_code=request_body.personal_code,
                loan_amount=request_body.loan_amount,
                loan_period=request_body.loan_period,
            )
        )

    except (InvalidAgeError, InvalidPersonalCodeError) as e:
        outcome = "invalid_age" if isinstance(e, InvalidAgeError) else "rejected"
        record_decision(outcome)
        log_decision(request_id, outcome, (time.time() - start_time) * 1000, error_message=e.message)
        return _error_response(400, e.message)

    except NoValidLoanError as e:
        record_decision("no_valid_loan")
        log_decision(request_id, "no_valid_loan", (time.time() - start_time) * 1000, error_message=e.message)
        return _error_response(404, e.message)

    except Exception as e:
        record_decision("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return _error_response(500, "An unexpected error occurred")

    duration_ms = (time.time() - start_time) * 1000

    if not decision.approved:
        record_decision("rejected")
        log_decision(request_id, "rejected", duration_ms, error_message=decision.error_message)
        return _error_response(400, decision.error_message)

    record_decision(
        "approved",
        loan_amount=decision.loan_amount,
        extended=decision.loan_period > request_body.loan_period,
    )
    log_decision(
        request_id,
        "approved",
        duration_ms,
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
    )

    return DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
    )
