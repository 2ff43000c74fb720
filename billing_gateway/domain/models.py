"""Domain models - pure Python dataclasses for report results"""

from dataclasses import dataclass


@dataclass
class ProfessionEarnings:
    """Total paid to contractors of one profession within a date range"""

    profession: str
    total_earned_cents: int


@dataclass
class ClientPayments:
    """Total paid by one client within a date range"""

    client_id: int
    full_name: str
    paid_cents: int
