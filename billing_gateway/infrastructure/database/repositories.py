"""Data access layer for billing entities"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional
from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session, joinedload
from billing_gateway.infrastructure.database.models import (
    CONTRACT_IN_PROGRESS,
    CONTRACT_TERMINATED,
    PROFILE_CLIENT,
    MAX_ROW_ID,
    Contract,
    Job,
    Profile,
)
from billing_gateway.domain.models import ClientPayments, ProfessionEarnings


def _is_row_id(value: int) -> bool:
    """Ids outside the primary key range cannot match a row"""
    return 0 < value <= MAX_ROW_ID


class ProfileRepository:
    """Repository for profiles and their balances"""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        if not _is_row_id(profile_id):
            return None
        return self.db.get(Profile, profile_id)

    def get_client(self, client_id: int, for_update: bool = False) -> Optional[Profile]:
        """Fetch a profile only if it is a client, optionally locking its row"""
        if not _is_row_id(client_id):
            return None
        query = select(Profile).where(Profile.id == client_id, Profile.kind == PROFILE_CLIENT)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)
        return self.db.execute(query).scalar_one_or_none()

    def lock_profiles(self, profile_ids: Iterable[int]) -> Dict[int, Profile]:
        """Lock profile rows in ascending id order so concurrent transfers cannot deadlock"""
        query = (
            select(Profile)
            .where(Profile.id.in_(sorted(set(profile_ids))))
            .order_by(Profile.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return {profile.id: profile for profile in self.db.execute(query).scalars()}

    def debit(self, profile_id: int, amount_cents: int) -> bool:
        """Subtract from a balance only if it covers the amount; False when it does not"""
        result = self.db.execute(
            update(Profile)
            .where(Profile.id == profile_id, Profile.balance_cents >= amount_cents)
            .values(balance_cents=Profile.balance_cents - amount_cents)
        )
        return result.rowcount == 1

    def credit(self, profile_id: int, amount_cents: int) -> None:
        self.db.execute(
            update(Profile)
            .where(Profile.id == profile_id)
            .values(balance_cents=Profile.balance_cents + amount_cents)
        )


class ContractRepository:
    """Repository for contracts"""

    def __init__(self, db: Session):
        self.db = db

    def get_contract(self, contract_id: int) -> Optional[Contract]:
        if not _is_row_id(contract_id):
            return None
        return self.db.get(Contract, contract_id)

    def get_active_contracts_for_profile(self, profile_id: int) -> List[Contract]:
        """Non-terminated contracts where the profile is client or contractor"""
        query = (
            select(Contract)
            .where(
                or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id),
                Contract.status != CONTRACT_TERMINATED,
            )
            .order_by(Contract.id)
        )
        return list(self.db.execute(query).scalars())


class JobRepository:
    """Repository for jobs and job payments"""

    def __init__(self, db: Session):
        self.db = db

    def get_job_for_update(self, job_id: int) -> Optional[Job]:
        """Fetch a job with its contract, locking the job row"""
        if not _is_row_id(job_id):
            return None
        query = (
            select(Job)
            .options(joinedload(Job.contract))
            .where(Job.id == job_id)
            .with_for_update(of=Job)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(query).scalar_one_or_none()

    def get_unpaid_jobs_for_profile(self, profile_id: int) -> List[Job]:
        """Unpaid jobs under in-progress contracts involving the profile"""
        query = (
            select(Job)
            .join(Job.contract)
            .where(
                Job.paid.is_(False),
                Contract.status == CONTRACT_IN_PROGRESS,
                or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id),
            )
            .order_by(Job.id)
        )
        return list(self.db.execute(query).scalars())

    def get_outstanding_cents_for_client(self, client_id: int) -> int:
        """Sum of unpaid job prices under the client's in-progress contracts"""
        query = (
            select(func.coalesce(func.sum(Job.price_cents), 0))
            .join(Job.contract)
            .where(
                Job.paid.is_(False),
                Contract.status == CONTRACT_IN_PROGRESS,
                Contract.client_id == client_id,
            )
        )
        return int(self.db.execute(query).scalar_one())

    def mark_paid(self, job_id: int, paid_at: datetime) -> bool:
        """Flip the paid flag only if the job is still unpaid; False when it was already paid"""
        result = self.db.execute(
            update(Job)
            .where(Job.id == job_id, Job.paid.is_(False))
            .values(paid=True, payment_date=paid_at)
        )
        return result.rowcount == 1


class ReportRepository:
    """Aggregations over paid jobs for admin reports"""

    def __init__(self, db: Session):
        self.db = db

    def get_best_profession(self, start: datetime, end: datetime) -> Optional[ProfessionEarnings]:
        """
        Profession whose contractors earned the most from jobs paid in [start, end].

        Ties resolve alphabetically by profession name.
        """
        total = func.sum(Job.price_cents).label("total_earned_cents")
        query = (
            select(Profile.profession, total)
            .select_from(Job)
            .join(Contract, Job.contract_id == Contract.id)
            .join(Profile, Contract.contractor_id == Profile.id)
            .where(Job.paid.is_(True), Job.payment_date.between(start, end))
            .group_by(Profile.profession)
            .order_by(total.desc(), Profile.profession.asc())
            .limit(1)
        )
        row = self.db.execute(query).first()
        if row is None:
            return None
        return ProfessionEarnings(profession=row.profession, total_earned_cents=int(row.total_earned_cents))

    def get_best_clients(self, start: datetime, end: datetime, limit: int) -> List[ClientPayments]:
        """Clients who paid the most for jobs paid in [start, end], highest first, ties by id"""
        total = func.sum(Job.price_cents).label("paid_cents")
        query = (
            select(Profile.id, Profile.first_name, Profile.last_name, total)
            .select_from(Job)
            .join(Contract, Job.contract_id == Contract.id)
            .join(Profile, Contract.client_id == Profile.id)
            .where(Job.paid.is_(True), Job.payment_date.between(start, end))
            .group_by(Profile.id, Profile.first_name, Profile.last_name)
            .order_by(total.desc(), Profile.id.asc())
            .limit(limit)
        )
        return [
            ClientPayments(
                client_id=row.id,
                full_name=f"{row.first_name} {row.last_name}",
                paid_cents=int(row.paid_cents),
            )
            for row in self.db.execute(query)
        ]
