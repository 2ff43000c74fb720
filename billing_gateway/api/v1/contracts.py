"""GET /contracts, GET /contracts/{id} - Contract lookups for the calling profile"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from billing_gateway.api.v1.schemas import ContractSchema
from billing_gateway.api.dependencies import get_profile
from billing_gateway.infrastructure.database.session import get_db
from billing_gateway.infrastructure.database.repositories import ContractRepository
from billing_gateway.infrastructure.database.models import Profile
from billing_gateway.domain.billing import ensure_contract_party
from billing_gateway.domain.exceptions import ForbiddenError

router = APIRouter()


@router.get("/contracts/{contract_id}", response_model=ContractSchema)
def get_contract(
    contract_id: int,
    profile: Profile = Depends(get_profile),
    db: Session = Depends(get_db),
):
    """Return a contract the caller is client or contractor of"""
    contract = ContractRepository(db).get_contract(contract_id)
    if contract is None:
        raise HTTPException(status_code=404, detail="Contract not found")

    try:
        ensure_contract_party(contract.client_id, contract.contractor_id, profile.id)
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return ContractSchema.model_validate(contract)


@router.get("/contracts", response_model=List[ContractSchema])
def list_contracts(
    profile: Profile = Depends(get_profile),
    db: Session = Depends(get_db),
):
    """List the caller's contracts that are not terminated"""
    contracts = ContractRepository(db).get_active_contracts_for_profile(profile.id)
    return [ContractSchema.model_validate(c) for c in contracts]
