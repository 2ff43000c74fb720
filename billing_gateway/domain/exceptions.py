"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class NotFoundError(DomainException):
    """Referenced profile, contract or job does not exist"""

    pass


class JobAlreadyPaidError(NotFoundError):
    """Job has been paid already and cannot be paid again"""

    pass


class ForbiddenError(DomainException):
    """Caller is not a party allowed to access the entity"""

    pass


class ValidationError(DomainException):
    """Request parameters are missing or malformed"""

    pass


class InsufficientFundsError(DomainException):
    """Payer balance is lower than the job price"""

    pass


class DepositLimitExceededError(DomainException):
    """Deposit is above the ceiling derived from outstanding jobs"""

    def __init__(self, ceiling_cents: int):
        self.ceiling_cents = ceiling_cents
        super().__init__(
            f"Cannot deposit more than ${ceiling_cents // 100}.{ceiling_cents % 100:02d} ({ceiling_cents} cents)"
        )
