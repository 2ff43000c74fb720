"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class ContractSchema(BaseModel):
    """Contract between a client and a contractor"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    terms: str
    status: str
    client_id: int
    contractor_id: int
    created_at: datetime
    updated_at: datetime


class JobSchema(BaseModel):
    """Billable job under a contract"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    price_cents: int
    paid: bool
    payment_date: Optional[datetime] = None
    contract_id: int
    created_at: datetime
    updated_at: datetime


class DepositRequest(BaseModel):
    """Request body for POST /balances/deposit/{user_id}"""

    amount_cents: int = Field(..., gt=0, description="Amount to deposit in cents")


class MessageResponse(BaseModel):
    """Confirmation for payments and deposits"""

    message: str


class BestProfessionResponse(BaseModel):
    """Response for GET /admin/best-profession"""

    profession: str
    total_earned_cents: int


class BestClientItem(BaseModel):
    """Single client in GET /admin/best-clients"""

    id: int
    full_name: str
    paid_cents: int
