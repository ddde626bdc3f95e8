"""SQLAlchemy ORM models for the collection service"""

from decimal import Decimal

from sqlalchemy import Boolean, Column, Date, DateTime, Float, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Decimal stored as text so no precision is lost on any backend"""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return str(value) if value is not None else None

    def process_result_value(self, value, dialect):
        return Decimal(value) if value is not None else None


class StudentRecord(Base):
    __tablename__ = "student"

    # Surrogate key keeps insertion order; `id` is the public identifier
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)
    age = Column(Integer, nullable=False)
    sex = Column(Boolean, nullable=False)
    fear_factor = Column(Float, nullable=False)


class DebtRecord(Base):
    """Student debt; student_id is a plain reference, not a cascade owner"""

    __tablename__ = "debt"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    amount = Column(DecimalString, nullable=False)
    total_amount = Column(DecimalString, nullable=True)
    monthly_percent = Column(DecimalString, nullable=False)
    creation_date = Column(DateTime(timezone=True), nullable=False)
    last_update_date = Column(DateTime(timezone=True), nullable=True)


class CollectorRecord(Base):
    __tablename__ = "collector"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)
    seniority = Column(Integer, nullable=False)


class AppointmentRecord(Base):
    """Collector visit; referenced rows may later change or disappear"""

    __tablename__ = "appointment"
    # One visit per collector per day
    __table_args__ = (UniqueConstraint("collector_id", "date", name="uq_appointment_collector_date"),)

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    date = Column(Date, nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    collector_id = Column(String(36), nullable=False, index=True)
    debt_id = Column(String(36), nullable=True)
