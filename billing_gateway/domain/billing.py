"""Billing rules - ownership, funds and deposit ceiling checks"""

from billing_gateway.domain.exceptions import (
    DepositLimitExceededError,
    ForbiddenError,
    InsufficientFundsError,
    ValidationError,
)


def ensure_contract_party(client_id: int, contractor_id: int, caller_id: int) -> None:
    """Only the client or the contractor of a contract may read it"""
    if caller_id not in (client_id, contractor_id):
        raise ForbiddenError("Caller is not a party to this contract")


def ensure_contract_client(client_id: int, caller_id: int) -> None:
    """Only the contract's client may pay for its jobs"""
    if caller_id != client_id:
        raise ForbiddenError("Only the contract client can pay for this job")


def ensure_sufficient_funds(balance_cents: int, price_cents: int) -> None:
    """A balance equal to the price is enough; anything lower is not"""
    if balance_cents < price_cents:
        raise InsufficientFundsError("Insufficient balance")


def deposit_ceiling_cents(outstanding_cents: int, limit_percent: int = 25) -> int:
    """
    Maximum single deposit for a client.

    The ceiling is `limit_percent` of the client's outstanding job value,
    floored to whole cents. Deposits are whole cents too, so flooring never
    rejects an amount the exact ceiling would allow.

    Example:
        outstanding 40000 cents ($400) at 25% → 10000 cents ($100)
        outstanding 40100 cents ($401) at 25% → 10025 cents ($100.25)
    """
    if outstanding_cents <= 0:
        return 0
    return outstanding_cents * limit_percent // 100


def ensure_within_deposit_limit(amount_cents: int, ceiling_cents: int) -> None:
    if amount_cents <= 0:
        raise ValidationError("Deposit amount must be a positive number of cents")
    if amount_cents > ceiling_cents:
        raise DepositLimitExceededError(ceiling_cents)
