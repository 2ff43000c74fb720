"""Pytest fixtures for testing"""

import pytest
from datetime import datetime
from typing import Dict, Generator, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from billing_gateway.api.main import create_app
from billing_gateway.infrastructure.database.models import (
    Base,
    Contract,
    Job,
    Profile,
    PROFILE_CLIENT,
    PROFILE_CONTRACTOR,
    CONTRACT_IN_PROGRESS,
)
from billing_gateway.infrastructure.database.session import get_db
from billing_gateway.infrastructure.database.seed import seed_database


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Factory:
    """Builds committed profiles, contracts and jobs for a test scenario"""

    def __init__(self, db: Session):
        self.db = db

    def profile(
        self,
        kind: str = PROFILE_CLIENT,
        balance_cents: int = 0,
        profession: str = "Programmer",
        first_name: str = "Test",
        last_name: str = "User",
    ) -> Profile:
        profile = Profile(
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            balance_cents=balance_cents,
            kind=kind,
        )
        self.db.add(profile)
        self.db.commit()
        return profile

    def client(self, balance_cents: int = 0, **kwargs) -> Profile:
        return self.profile(kind=PROFILE_CLIENT, balance_cents=balance_cents, **kwargs)

    def contractor(self, balance_cents: int = 0, **kwargs) -> Profile:
        return self.profile(kind=PROFILE_CONTRACTOR, balance_cents=balance_cents, **kwargs)

    def contract(self, client: Profile, contractor: Profile, status: str = CONTRACT_IN_PROGRESS) -> Contract:
        contract = Contract(terms="terms", status=status, client_id=client.id, contractor_id=contractor.id)
        self.db.add(contract)
        self.db.commit()
        return contract

    def job(self, contract: Contract, price_cents: int, paid_at: Optional[datetime] = None) -> Job:
        job = Job(
            description="work",
            price_cents=price_cents,
            paid=paid_at is not None,
            payment_date=paid_at,
            contract_id=contract.id,
        )
        self.db.add(job)
        self.db.commit()
        return job


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def seeded_db(db: Session) -> Session:
    """Test database loaded with the demo marketplace"""
    seed_database(db)
    return db


@pytest.fixture
def factory(db: Session) -> Factory:
    return Factory(db)


@pytest.fixture
def as_profile():
    """Identity header for requests made on behalf of a profile"""

    def headers(profile_id: int) -> Dict[str, str]:
        return {"profile_id": str(profile_id)}

    return headers
