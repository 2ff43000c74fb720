"""GET /jobs/unpaid, POST /jobs/{job_id}/pay - Job listing and payment"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from billing_gateway.api.v1.schemas import JobSchema, MessageResponse
from billing_gateway.api.dependencies import get_profile, get_request_id
from billing_gateway.infrastructure.database.session import get_db
from billing_gateway.infrastructure.database.repositories import JobRepository, ProfileRepository
from billing_gateway.infrastructure.database.models import Profile
from billing_gateway.domain.billing import ensure_contract_client, ensure_sufficient_funds
from billing_gateway.domain.exceptions import (
    ForbiddenError,
    InsufficientFundsError,
    JobAlreadyPaidError,
    NotFoundError,
)
from billing_gateway.infrastructure.observability.metrics import record_payment
from billing_gateway.infrastructure.observability.logging import log_payment
from billing_gateway.utils.date_utils import utcnow

router = APIRouter()


@router.get("/jobs/unpaid", response_model=List[JobSchema])
def list_unpaid_jobs(
    profile: Profile = Depends(get_profile),
    db: Session = Depends(get_db),
):
    """List unpaid jobs of the caller's in-progress contracts"""
    jobs = JobRepository(db).get_unpaid_jobs_for_profile(profile.id)
    return [JobSchema.model_validate(job) for job in jobs]


@router.post("/jobs/{job_id}/pay", response_model=MessageResponse)
def pay_job(
    job_id: int,
    request: Request,
    profile: Profile = Depends(get_profile),
    db: Session = Depends(get_db),
):
    """
    Pay for a job by moving its price from the client to the contractor.

    Flow:
    1. Lock the job and check the caller is the contract's client
    2. Refuse jobs that are already paid
    3. Lock both profiles and check the client can cover the price
    4. Mark paid, debit client, credit contractor in one transaction
    """
    start_time = time.time()
    request_id = get_request_id(request)
    job_repo = JobRepository(db)
    profile_repo = ProfileRepository(db)

    try:
        # 1. Ownership
        job = job_repo.get_job_for_update(job_id)
        if job is None:
            raise NotFoundError(f"Job {job_id} not found")

        client_id = job.contract.client_id
        contractor_id = job.contract.contractor_id
        ensure_contract_client(client_id, profile.id)

        # 2. At most one payment per job
        if job.paid:
            raise JobAlreadyPaidError("Job already paid")

        # 3. Funds, read under lock
        parties = profile_repo.lock_profiles([client_id, contractor_id])
        ensure_sufficient_funds(parties[client_id].balance_cents, job.price_cents)

        # 4. Transfer; the guarded updates catch anything that changed since the reads
        price_cents = job.price_cents
        if not job_repo.mark_paid(job.id, utcnow()):
            raise JobAlreadyPaidError("Job already paid")
        if not profile_repo.debit(client_id, price_cents):
            raise InsufficientFundsError("Insufficient balance")
        profile_repo.credit(contractor_id, price_cents)

        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_payment("paid", price_cents)
        log_payment(request_id, job_id, client_id, contractor_id, price_cents, duration_ms)

        return MessageResponse(message="Payment successful")

    except JobAlreadyPaidError as e:
        db.rollback()
        record_payment("already_paid")
        logging.warning(f"Payment refused: {e}", extra={"request_id": request_id, "job_id": job_id})
        raise HTTPException(status_code=404, detail=str(e))

    except NotFoundError as e:
        db.rollback()
        record_payment("not_found")
        raise HTTPException(status_code=404, detail=str(e))

    except ForbiddenError as e:
        db.rollback()
        record_payment("forbidden")
        logging.warning(f"Payment refused: {e}", extra={"request_id": request_id, "job_id": job_id})
        raise HTTPException(status_code=403, detail=str(e))

    except InsufficientFundsError as e:
        db.rollback()
        record_payment("insufficient_funds")
        logging.warning(f"Payment refused: {e}", extra={"request_id": request_id, "job_id": job_id})
        return PlainTextResponse(str(e), status_code=400)

    except Exception as e:
        db.rollback()
        record_payment("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
