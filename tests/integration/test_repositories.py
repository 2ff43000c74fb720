"""Integration tests for repository queries and guarded updates"""

from datetime import datetime
from sqlalchemy.orm import Session
from billing_gateway.infrastructure.database.models import Job, Profile
from billing_gateway.infrastructure.database.repositories import (
    ContractRepository,
    JobRepository,
    ProfileRepository,
    ReportRepository,
)


def test_outstanding_cents_per_client(seeded_db: Session):
    jobs = JobRepository(seeded_db)

    assert jobs.get_outstanding_cents_for_client(1) == 20100  # Job 1 is under a terminated contract
    assert jobs.get_outstanding_cents_for_client(2) == 40200
    assert jobs.get_outstanding_cents_for_client(3) == 0
    assert jobs.get_outstanding_cents_for_client(4) == 20000


def test_get_client_ignores_contractors(seeded_db: Session):
    profiles = ProfileRepository(seeded_db)

    assert profiles.get_client(1).full_name == "Harry Potter"
    assert profiles.get_client(6) is None
    assert profiles.get_client(9999, for_update=True) is None


def test_lock_profiles_returns_requested_rows(seeded_db: Session):
    locked = ProfileRepository(seeded_db).lock_profiles([6, 1, 6])
    assert sorted(locked) == [1, 6]


def test_debit_refuses_overdraft(seeded_db: Session):
    profiles = ProfileRepository(seeded_db)

    assert profiles.debit(4, 131) is False
    assert profiles.debit(4, 130) is True
    seeded_db.commit()

    assert seeded_db.get(Profile, 4).balance_cents == 0


def test_mark_paid_only_once(seeded_db: Session):
    jobs = JobRepository(seeded_db)
    paid_at = datetime(2021, 1, 1, 12, 0)

    assert jobs.mark_paid(2, paid_at) is True
    assert jobs.mark_paid(2, paid_at) is False
    seeded_db.commit()

    job = seeded_db.get(Job, 2)
    assert job.paid is True
    assert job.payment_date == paid_at


def test_job_for_update_loads_contract(seeded_db: Session):
    job = JobRepository(seeded_db).get_job_for_update(3)

    assert job.contract.client_id == 2
    assert job.contract.contractor_id == 6


def test_active_contracts_ordered(seeded_db: Session):
    contracts = ContractRepository(seeded_db).get_active_contracts_for_profile(4)
    assert [c.id for c in contracts] == [7, 8, 9]


def test_best_profession_report(seeded_db: Session):
    result = ReportRepository(seeded_db).get_best_profession(datetime(2020, 8, 15), datetime(2020, 8, 15, 23, 59))

    assert result.profession == "Programmer"
    assert result.total_earned_cents == 202000 + 20000 + 20000 + 2100 + 12100


def test_best_clients_report_limit(seeded_db: Session):
    results = ReportRepository(seeded_db).get_best_clients(datetime(2020, 8, 1), datetime(2020, 8, 31), limit=3)

    assert [(r.client_id, r.paid_cents) for r in results] == [(4, 202000), (1, 44200), (2, 44200)]
    assert results[2].full_name == "Mr Robot"


def test_lookups_outside_id_range_find_nothing(seeded_db: Session):
    huge = 99999999999999999999

    assert ProfileRepository(seeded_db).get_profile(huge) is None
    assert ProfileRepository(seeded_db).get_client(huge, for_update=True) is None
    assert ContractRepository(seeded_db).get_contract(huge) is None
    assert JobRepository(seeded_db).get_job_for_update(huge) is None
    assert ProfileRepository(seeded_db).get_profile(0) is None
