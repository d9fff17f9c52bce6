# This project was developed with assistance from AI tools.
"""
Rate Compare -- catalog models

Lenders and the rate sheets they publish, plus the log of borrower
quote submissions. Computed quotes are never stored.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import LoanTerm, LoanType, OccupancyType, PropertyType


def _enum_column(enum_cls, name: str) -> Enum:
    # Persist enum values ("30", "single_family"), not member names.
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        values_callable=lambda members: [m.value for m in members],
        length=20,
    )


class Lender(Base):
    """Lender identity and status."""

    __tablename__ = "lenders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    logo_url = Column(Text, nullable=True)
    website_url = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    rates = relationship("MortgageRate", back_populates="lender", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Lender(id={self.id}, name='{self.name}')>"


class MortgageRate(Base):
    """One priced product on a lender's rate sheet, with its eligibility bounds."""

    __tablename__ = "mortgage_rates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    lender_id = Column(
        Integer, ForeignKey("lenders.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    loan_type = Column(_enum_column(LoanType, "loan_type"), nullable=False)
    loan_term = Column(_enum_column(LoanTerm, "loan_term"), nullable=False)
    interest_rate = Column(Numeric(5, 3), nullable=False)
    apr = Column(Numeric(5, 3), nullable=False)
    points = Column(Numeric(5, 2), nullable=False, default=0)
    min_credit_score = Column(Integer, nullable=False)
    max_loan_amount = Column(Numeric(12, 2), nullable=False)
    min_down_payment_percent = Column(Numeric(5, 2), nullable=False)
    closing_costs = Column(Numeric(10, 2), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    lender = relationship("Lender", back_populates="rates")

    def __repr__(self):
        return (
            f"<MortgageRate(id={self.id}, lender_id={self.lender_id}, "
            f"{self.loan_type} {self.loan_term}y @ {self.interest_rate})>"
        )


class MortgageQuoteRequest(Base):
    """A borrower's submitted profile, kept for reporting."""

    __tablename__ = "mortgage_quote_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    loan_amount = Column(Numeric(12, 2), nullable=False)
    property_value = Column(Numeric(12, 2), nullable=False)
    down_payment = Column(Numeric(12, 2), nullable=False)
    credit_score = Column(Integer, nullable=False)
    loan_type = Column(_enum_column(LoanType, "loan_type"), nullable=False)
    loan_term = Column(_enum_column(LoanTerm, "loan_term"), nullable=False)
    property_type = Column(
        _enum_column(PropertyType, "property_type"), nullable=False,
    )
    occupancy_type = Column(
        _enum_column(OccupancyType, "occupancy_type"), nullable=False,
    )
    zip_code = Column(String(10), nullable=False)
    debt_to_income_ratio = Column(Numeric(5, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<MortgageQuoteRequest(id={self.id}, loan_amount={self.loan_amount})>"


class DemoDataManifest(Base):
    """Tracks demo data seeding for idempotency."""

    __tablename__ = "demo_data_manifest"

    id = Column(Integer, primary_key=True, autoincrement=True)
    seeded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    config_hash = Column(String(64), nullable=False)
    summary = Column(Text, nullable=True)

    def __repr__(self):
        return f"<DemoDataManifest(id={self.id}, seeded_at='{self.seeded_at}')>"
