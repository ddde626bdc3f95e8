"""Sample records loaded at startup when SEED_SAMPLE_DATA is on"""

from datetime import date, datetime, timezone
from decimal import Decimal

from collection_gateway.domain.models import Appointment, Collector, Debt, Student
from collection_gateway.domain.repositories import Repositories


def sample_data() -> dict:
    return {
        "collectors": [
            Collector(id="c1", name="Sam Kushi", seniority=2),
            Collector(id="c2", name="Emi Bykon", seniority=2),
            Collector(id="c3", name="Andrew Macks", seniority=4),
            Collector(id="c4", name="Alan Dok", seniority=4),
            Collector(id="c5", name="Peter Sdoa", seniority=10),
            Collector(id="c6", name="Michael Kon", seniority=10),
        ],
        "students": [
            Student(id="s1", name="John", age=18, sex=False, fear_factor=2),
            Student(id="s2", name="Alice", age=22, sex=True, fear_factor=1),
        ],
        "debts": [
            Debt(
                id="debt1",
                student_id="s1",
                amount=Decimal("1000"),
                total_amount=Decimal("1040.67"),
                monthly_percent=Decimal("20"),
                creation_date=datetime(2024, 4, 20, tzinfo=timezone.utc),
            ),
            Debt(
                id="debt2",
                student_id="s2",
                amount=Decimal("2000"),
                total_amount=Decimal("2081.21"),
                monthly_percent=Decimal("30"),
                creation_date=datetime(2024, 4, 22, tzinfo=timezone.utc),
            ),
        ],
        "appointments": [
            Appointment(id="ap1", date=date(2025, 3, 3), student_id="s1", collector_id="c3", debt_id="debt1"),
        ],
    }


def seed_repositories(repositories: Repositories) -> None:
    """Insert the sample records into empty repositories"""
    data = sample_data()
    for name in ("collectors", "students", "debts", "appointments"):
        repository = getattr(repositories, name)
        for entity in data[name]:
            repository.insert(entity)
