"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Student:
    """Debtor tracked by the service"""

    id: str
    name: str
    age: int
    sex: bool  # True = female
    fear_factor: float


@dataclass
class Debt:
    """Debt owed by a student, accruing daily compounded interest"""

    id: str
    student_id: str
    amount: Decimal  # principal
    total_amount: Optional[Decimal]
    monthly_percent: Decimal  # fixed at creation
    creation_date: datetime
    last_update_date: Optional[datetime] = None


@dataclass
class Collector:
    """Debt collector; seniority gates which students they can visit"""

    id: str
    name: str
    seniority: int


@dataclass
class Appointment:
    """Collector visit to a student on a given day"""

    id: str
    date: date
    student_id: str
    collector_id: str
    debt_id: Optional[str] = None
