"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from collection_gateway.domain.models import Appointment, Collector, Debt, Student

CENTS = Decimal("0.01")


def to_money(value: Optional[Decimal]) -> Optional[float]:
    """Round a full-precision amount to 2 decimal places for the wire"""
    if value is None:
        return None
    return float(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StudentRequest(CamelModel):
    """Request body for POST /api/student and PUT /api/student/{id}"""

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    sex: bool = Field(..., description="true or 'female' for female students")
    fear_factor: float = Field(..., ge=0)

    @field_validator("sex", mode="before")
    @classmethod
    def parse_sex(cls, value: Union[bool, str]) -> bool:
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("female", "true"):
                return True
            if normalized in ("male", "false"):
                return False
            raise ValueError("sex must be a boolean, 'female' or 'male'")
        return value


class StudentResponse(CamelModel):
    id: str
    name: str
    age: int
    sex: bool
    fear_factor: float

    @classmethod
    def from_domain(cls, student: Student) -> "StudentResponse":
        return cls(
            id=student.id,
            name=student.name,
            age=student.age,
            sex=student.sex,
            fear_factor=student.fear_factor,
        )


class CollectorRequest(CamelModel):
    """Request body for POST /api/collector and PUT /api/collector/{id}"""

    name: str = Field(..., min_length=1)
    seniority: int = Field(
        ...,
        ge=2,
        le=10,
        description="seniority of collector must be an integer between 2 and 10",
    )


class CollectorResponse(CamelModel):
    id: str
    name: str
    seniority: int

    @classmethod
    def from_domain(cls, collector: Collector) -> "CollectorResponse":
        return cls(id=collector.id, name=collector.name, seniority=collector.seniority)


class DebtRequest(CamelModel):
    """Request body for POST /api/debt"""

    student_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, description="Principal")
    last_update_date: Optional[str] = Field(
        None,
        description="ISO date/datetime; if in the future, interest up to it is applied at creation",
    )


class DebtResponse(CamelModel):
    id: str
    student_id: str
    amount: float
    total_amount: Optional[float]
    monthly_percent: float
    creation_date: datetime
    last_update_date: Optional[datetime]

    @classmethod
    def from_domain(cls, debt: Debt) -> "DebtResponse":
        return cls(
            id=debt.id,
            student_id=debt.student_id,
            amount=to_money(debt.amount),
            total_amount=to_money(debt.total_amount),
            monthly_percent=float(debt.monthly_percent),
            creation_date=debt.creation_date,
            last_update_date=debt.last_update_date,
        )


class AppointmentRequest(CamelModel):
    """Request body for POST /api/appointment"""

    date: str = Field(..., description="YYYY-MM-DD, today or later")
    student_id: str = Field(..., min_length=1)


class AppointmentResponse(CamelModel):
    id: str
    date: str
    student_id: str
    collector_id: str
    debt_id: Optional[str] = None

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            date=appointment.date.isoformat(),
            student_id=appointment.student_id,
            collector_id=appointment.collector_id,
            debt_id=appointment.debt_id,
        )
