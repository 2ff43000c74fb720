"""Demo data for local development

Run `python -m billing_gateway.infrastructure.database.seed` to create the
tables and load a small marketplace of profiles, contracts and jobs.
"""

from datetime import datetime
from sqlalchemy.orm import Session
from billing_gateway.infrastructure.database.models import (
    Base,
    Contract,
    Job,
    Profile,
    PROFILE_CLIENT,
    PROFILE_CONTRACTOR,
    CONTRACT_NEW,
    CONTRACT_IN_PROGRESS,
    CONTRACT_TERMINATED,
)

PROFILES = [
    # id, first_name, last_name, profession, balance_cents, kind
    (1, "Harry", "Potter", "Wizard", 115000, PROFILE_CLIENT),
    (2, "Mr", "Robot", "Hacker", 23111, PROFILE_CLIENT),
    (3, "John", "Snow", "Knows nothing", 45130, PROFILE_CLIENT),
    (4, "Ash", "Kethcum", "Pokemon master", 130, PROFILE_CLIENT),
    (5, "John", "Lenon", "Musician", 6400, PROFILE_CONTRACTOR),
    (6, "Linus", "Torvalds", "Programmer", 121400, PROFILE_CONTRACTOR),
    (7, "Alan", "Turing", "Programmer", 2200, PROFILE_CONTRACTOR),
    (8, "Aragorn", "II Elessar Telcontarar", "Fighter", 31400, PROFILE_CONTRACTOR),
]

CONTRACTS = [
    # id, status, client_id, contractor_id
    (1, CONTRACT_TERMINATED, 1, 5),
    (2, CONTRACT_IN_PROGRESS, 1, 6),
    (3, CONTRACT_IN_PROGRESS, 2, 6),
    (4, CONTRACT_IN_PROGRESS, 2, 7),
    (5, CONTRACT_NEW, 3, 8),
    (6, CONTRACT_IN_PROGRESS, 3, 7),
    (7, CONTRACT_IN_PROGRESS, 4, 7),
    (8, CONTRACT_IN_PROGRESS, 4, 6),
    (9, CONTRACT_IN_PROGRESS, 4, 8),
]

JOBS = [
    # id, price_cents, contract_id, payment_date (None = unpaid)
    (1, 20000, 1, None),
    (2, 20100, 2, None),
    (3, 20200, 3, None),
    (4, 20000, 4, None),
    (5, 20000, 7, None),
    (6, 202000, 7, datetime(2020, 8, 15, 19, 11, 26)),
    (7, 20000, 2, datetime(2020, 8, 15, 19, 11, 26)),
    (8, 20000, 3, datetime(2020, 8, 15, 19, 11, 26)),
    (9, 20000, 1, datetime(2020, 8, 17, 19, 11, 26)),
    (10, 20000, 5, datetime(2020, 8, 17, 19, 11, 26)),
    (11, 2100, 1, datetime(2020, 8, 10, 19, 11, 26)),
    (12, 2100, 2, datetime(2020, 8, 15, 19, 11, 26)),
    (13, 12100, 3, datetime(2020, 8, 15, 19, 11, 26)),
    (14, 12100, 3, datetime(2020, 8, 14, 23, 11, 26)),
]


def seed_database(db: Session) -> None:
    """Insert the demo profiles, contracts and jobs and commit"""
    for profile_id, first_name, last_name, profession, balance_cents, kind in PROFILES:
        db.add(
            Profile(
                id=profile_id,
                first_name=first_name,
                last_name=last_name,
                profession=profession,
                balance_cents=balance_cents,
                kind=kind,
            )
        )

    for contract_id, status, client_id, contractor_id in CONTRACTS:
        db.add(
            Contract(
                id=contract_id,
                terms="bla bla bla",
                status=status,
                client_id=client_id,
                contractor_id=contractor_id,
            )
        )

    for job_id, price_cents, contract_id, payment_date in JOBS:
        db.add(
            Job(
                id=job_id,
                description="work",
                price_cents=price_cents,
                paid=payment_date is not None,
                payment_date=payment_date,
                contract_id=contract_id,
            )
        )

    db.commit()


if __name__ == "__main__":
    from billing_gateway.infrastructure.database.session import SessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_database(session)
    finally:
        session.close()
