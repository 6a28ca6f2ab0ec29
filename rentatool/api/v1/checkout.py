"""POST /v1/checkout - Price a tool rental and check the tool out"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from rentatool.api.v1.schemas import CheckoutRequest, RentalAgreementResponse
from rentatool.api.dependencies import get_request_id
from rentatool.infrastructure.database.session import get_db
from rentatool.infrastructure.database.repositories import ToolRepository
from rentatool.domain.agreement import create_rental_agreement, format_rental_agreement
from rentatool.domain.exceptions import CheckoutValidationError, ToolNotFoundError, ToolUnavailableError
from rentatool.infrastructure.observability.metrics import record_checkout, checkout_rejected_counter
from rentatool.infrastructure.observability.logging import log_checkout
from rentatool.utils.date_utils import parse_checkout_date

router = APIRouter()


@router.post("/checkout", response_model=RentalAgreementResponse)
def checkout(
    request_body: CheckoutRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Generate a rental agreement for a tool and mark it checked out.

    Flow:
    1. Parse the clerk-entered checkout date
    2. Load a snapshot of the tool
    3. Build the rental agreement (validates days/discount, prices the rental)
    4. Claim the tool with a conditional update (409 if already checked out) and commit
    5. Return every agreement field plus the printed report
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        # 1. Parse checkout date
        checkout_date = None
        if request_body.checkout_date is not None:
            try:
                checkout_date = parse_checkout_date(request_body.checkout_date)
            except ValueError as e:
                raise CheckoutValidationError(
                    f"Invalid checkout date {request_body.checkout_date!r}, expected M/d/yy"
                ) from e

        # 2. Snapshot the tool
        repo = ToolRepository(db)
        tool = repo.get_tool(request_body.tool_code)

        # 3. Price the rental
        agreement = create_rental_agreement(
            tool,
            request_body.rental_days,
            request_body.discount_percent,
            checkout_date,
        )

        # 4. Claim the tool; fails if another checkout got there first
        repo.check_out_tool(tool.code)
        db.commit()

    except CheckoutValidationError as e:
        db.rollback()
        checkout_rejected_counter.labels(reason="invalid_argument").inc()
        logging.warning(f"Checkout rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except ToolNotFoundError as e:
        db.rollback()
        checkout_rejected_counter.labels(reason="not_found").inc()
        logging.warning(f"Checkout rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except ToolUnavailableError as e:
        db.rollback()
        checkout_rejected_counter.labels(reason="unavailable").inc()
        logging.warning(f"Checkout rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_checkout(agreement)
    log_checkout(request_id, agreement, duration_ms)

    return RentalAgreementResponse.from_domain(agreement, format_rental_agreement(agreement))
