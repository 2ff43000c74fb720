"""POST /balances/deposit/{user_id} - Deposit into a client balance"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from billing_gateway.api.v1.schemas import DepositRequest, MessageResponse
from billing_gateway.api.dependencies import get_profile, get_request_id
from billing_gateway.config import settings
from billing_gateway.infrastructure.database.session import get_db
from billing_gateway.infrastructure.database.repositories import JobRepository, ProfileRepository
from billing_gateway.infrastructure.database.models import Profile
from billing_gateway.domain.billing import deposit_ceiling_cents, ensure_within_deposit_limit
from billing_gateway.domain.exceptions import DepositLimitExceededError, NotFoundError, ValidationError
from billing_gateway.infrastructure.observability.metrics import record_deposit
from billing_gateway.infrastructure.observability.logging import log_deposit

router = APIRouter()


@router.post(
    "/balances/deposit/{user_id}",
    response_model=MessageResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": DepositRequest.model_json_schema()}},
        }
    },
)
async def deposit_balance(
    user_id: int,
    request: Request,
    profile: Profile = Depends(get_profile),
    db: Session = Depends(get_db),
):
    """
    Deposit into a client's balance.

    A single deposit may not exceed the configured share (25% by default)
    of the client's unpaid jobs under in-progress contracts. Validation and
    limit errors are returned as plain text.

    The body is `{"amount_cents": <int>}`: a whole number of cents, not a
    decimal `amount` in dollars.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    caller_id = profile.id

    try:
        try:
            # Malformed JSON raises the same ValidationError as a bad amount
            amount_cents = DepositRequest.model_validate_json(await request.body()).amount_cents
        except SchemaValidationError as e:
            raise ValidationError("Deposit amount must be a positive number of cents") from e

        # Lock the client row so concurrent deposits see a consistent outstanding total
        client = ProfileRepository(db).get_client(user_id, for_update=True)
        if client is None:
            raise NotFoundError(f"Client {user_id} not found")

        outstanding_cents = JobRepository(db).get_outstanding_cents_for_client(client.id)
        ceiling_cents = deposit_ceiling_cents(outstanding_cents, settings.deposit_limit_percent)
        ensure_within_deposit_limit(amount_cents, ceiling_cents)

        ProfileRepository(db).credit(client.id, amount_cents)
        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_deposit("deposited", amount_cents)
        log_deposit(request_id, caller_id, user_id, amount_cents, ceiling_cents, duration_ms)

        return MessageResponse(message="Deposit successful")

    except NotFoundError as e:
        db.rollback()
        record_deposit("not_found")
        raise HTTPException(status_code=404, detail=str(e))

    except ValidationError as e:
        db.rollback()
        record_deposit("invalid")
        return PlainTextResponse(str(e), status_code=400)

    except DepositLimitExceededError as e:
        db.rollback()
        record_deposit("limit_exceeded")
        logging.warning(f"Deposit refused: {e}", extra={"request_id": request_id, "client_id": user_id})
        return PlainTextResponse(str(e), status_code=400)

    except Exception as e:
        db.rollback()
        record_deposit("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
