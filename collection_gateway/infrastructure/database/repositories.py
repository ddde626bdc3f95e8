"""Data access layer backed by SQLAlchemy"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from collection_gateway.domain.exceptions import ConflictError
from collection_gateway.domain.models import Appointment, Collector, Debt, Student
from collection_gateway.domain.repositories import Repositories
from collection_gateway.infrastructure.database.models import (
    AppointmentRecord,
    Base,
    CollectorRecord,
    DebtRecord,
    StudentRecord,
)
from collection_gateway.utils.date_utils import ensure_utc

T = TypeVar("T")


class SqlAlchemyRepository(Generic[T]):
    """
    Maps a domain dataclass onto an ORM model with the same column names.

    Changes are flushed, not committed; the request's session owner commits.
    """

    model: Type[Base]
    entity_type: Type[T]

    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, record: Base) -> T:
        values = {}
        for field in fields(self.entity_type):
            value = getattr(record, field.name)
            # SQLite drops tzinfo on the way back
            if isinstance(value, datetime):
                value = ensure_utc(value)
            values[field.name] = value
        return self.entity_type(**values)

    def _copy_onto(self, record: Base, entity: T) -> None:
        for field in fields(self.entity_type):
            setattr(record, field.name, getattr(entity, field.name))

    def _record(self, entity_id: str) -> Optional[Base]:
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def get(self, entity_id: str) -> Optional[T]:
        record = self._record(entity_id)
        return self._to_domain(record) if record is not None else None

    def find(self, **criteria: Any) -> List[T]:
        records = self.db.query(self.model).filter_by(**criteria).order_by(self.model.pk).all()
        return [self._to_domain(r) for r in records]

    def list(self) -> List[T]:
        return [self._to_domain(r) for r in self.db.query(self.model).order_by(self.model.pk).all()]

    def insert(self, entity: T) -> T:
        record = self.model()
        self._copy_onto(record, entity)
        self.db.add(record)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"{self.entity_type.__name__} {entity.id} conflicts with a stored record") from e
        return self._to_domain(record)

    def update(self, entity: T) -> Optional[T]:
        record = self._record(entity.id)
        if record is None:
            return None
        self._copy_onto(record, entity)
        self.db.flush()
        return self._to_domain(record)

    def delete(self, entity_id: str) -> bool:
        record = self._record(entity_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True


class StudentRepository(SqlAlchemyRepository[Student]):
    model = StudentRecord
    entity_type = Student


class DebtRepository(SqlAlchemyRepository[Debt]):
    model = DebtRecord
    entity_type = Debt


class CollectorRepository(SqlAlchemyRepository[Collector]):
    model = CollectorRecord
    entity_type = Collector


class AppointmentRepository(SqlAlchemyRepository[Appointment]):
    model = AppointmentRecord
    entity_type = Appointment


@dataclass
class SqlRepositories(Repositories):
    """Repositories sharing one session; commit() ends its transaction"""

    db: Session

    def commit(self) -> None:
        self.db.commit()


def build_sql_repositories(db: Session) -> SqlRepositories:
    return SqlRepositories(
        db=db,
        students=StudentRepository(db),
        debts=DebtRepository(db),
        collectors=CollectorRepository(db),
        appointments=AppointmentRepository(db),
    )
