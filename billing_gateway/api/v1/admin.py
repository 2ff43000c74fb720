"""GET /admin/best-profession, GET /admin/best-clients - Earnings reports"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from billing_gateway.api.v1.schemas import BestClientItem, BestProfessionResponse
from billing_gateway.api.dependencies import get_profile
from billing_gateway.config import settings
from billing_gateway.infrastructure.database.session import get_db
from billing_gateway.infrastructure.database.repositories import ReportRepository
from billing_gateway.domain.exceptions import ValidationError
from billing_gateway.utils.date_utils import parse_date_range

router = APIRouter()


def _parse_limit(limit: Optional[str]) -> int:
    if limit is None or limit == "":
        return settings.best_clients_default_limit
    try:
        value = int(limit)
    except ValueError as e:
        raise ValidationError("Limit must be a positive integer.") from e
    if value <= 0:
        raise ValidationError("Limit must be a positive integer.")
    return min(value, settings.best_clients_max_limit)


@router.get("/admin/best-profession", response_model=BestProfessionResponse, dependencies=[Depends(get_profile)])
def best_profession(
    start: Optional[str] = Query(None, description="Start date (ISO 8601), inclusive"),
    end: Optional[str] = Query(None, description="End date (ISO 8601), inclusive"),
    db: Session = Depends(get_db),
):
    """
    Profession that earned the most from jobs paid within the date range.

    Equal totals resolve to the alphabetically first profession.
    """
    try:
        start_at, end_at = parse_date_range(start, end)
    except ValidationError as e:
        return PlainTextResponse(str(e), status_code=400)

    result = ReportRepository(db).get_best_profession(start_at, end_at)
    if result is None:
        return PlainTextResponse("No profession found in the given date range.", status_code=404)

    return BestProfessionResponse(profession=result.profession, total_earned_cents=result.total_earned_cents)


@router.get("/admin/best-clients", response_model=List[BestClientItem], dependencies=[Depends(get_profile)])
def best_clients(
    start: Optional[str] = Query(None, description="Start date (ISO 8601), inclusive"),
    end: Optional[str] = Query(None, description="End date (ISO 8601), inclusive"),
    limit: Optional[str] = Query(None, description="Number of clients to return (default 2)"),
    db: Session = Depends(get_db),
):
    """Clients who paid the most for jobs within the date range, highest first"""
    try:
        start_at, end_at = parse_date_range(start, end)
        max_clients = _parse_limit(limit)
    except ValidationError as e:
        return PlainTextResponse(str(e), status_code=400)

    clients = ReportRepository(db).get_best_clients(start_at, end_at, max_clients)
    if not clients:
        return PlainTextResponse("No clients found in the given date range.", status_code=404)

    return [BestClientItem(id=c.client_id, full_name=c.full_name, paid_cents=c.paid_cents) for c in clients]
