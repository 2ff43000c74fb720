"""SQLAlchemy ORM models for profiles, contracts and jobs"""

from sqlalchemy import (
    Column,
    String,
    BigInteger,
    Boolean,
    DateTime,
    Integer,
    ForeignKey,
    Text,
    CheckConstraint,
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

PROFILE_CLIENT = "client"
PROFILE_CONTRACTOR = "contractor"

CONTRACT_NEW = "new"
CONTRACT_IN_PROGRESS = "in_progress"
CONTRACT_TERMINATED = "terminated"

# Largest value an Integer primary key column holds on every supported backend
MAX_ROW_ID = 2**31 - 1


class Profile(Base):
    """Marketplace account, either a paying client or a paid contractor"""

    __tablename__ = "profile"
    __table_args__ = (
        CheckConstraint("balance_cents >= 0", name="ck_profile_balance_non_negative"),
        CheckConstraint("kind IN ('client', 'contractor')", name="ck_profile_kind"),
    )

    id = Column(Integer, primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    profession = Column(String(100), nullable=False)
    balance_cents = Column(BigInteger, nullable=False, default=0)
    kind = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    client_contracts = relationship("Contract", foreign_keys="Contract.client_id", back_populates="client")
    contractor_contracts = relationship(
        "Contract", foreign_keys="Contract.contractor_id", back_populates="contractor"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Contract(Base):
    """Agreement between one client and one contractor"""

    __tablename__ = "contract"
    __table_args__ = (CheckConstraint("client_id <> contractor_id", name="ck_contract_distinct_parties"),)

    id = Column(Integer, primary_key=True)
    terms = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=CONTRACT_NEW, index=True)
    client_id = Column(Integer, ForeignKey("profile.id"), nullable=False, index=True)
    contractor_id = Column(Integer, ForeignKey("profile.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    client = relationship("Profile", foreign_keys=[client_id], back_populates="client_contracts")
    contractor = relationship("Profile", foreign_keys=[contractor_id], back_populates="contractor_contracts")
    jobs = relationship("Job", back_populates="contract")


class Job(Base):
    """Billable unit of work under a contract, paid at most once"""

    __tablename__ = "job"
    __table_args__ = (CheckConstraint("price_cents > 0", name="ck_job_price_positive"),)

    id = Column(Integer, primary_key=True)
    description = Column(Text, nullable=False)
    price_cents = Column(BigInteger, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(DateTime, nullable=True, index=True)  # Naive UTC, set only when paid
    contract_id = Column(Integer, ForeignKey("contract.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    contract = relationship("Contract", back_populates="jobs")
