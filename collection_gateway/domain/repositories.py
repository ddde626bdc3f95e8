"""Storage-agnostic repository interface used by the HTTP layer"""

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, TypeVar

from collection_gateway.domain.models import Appointment, Collector, Debt, Student

T = TypeVar("T")


class Repository(Protocol[T]):
    """
    Collection of entities keyed by string id.

    list() and find() return entities in insertion order; collector
    selection relies on that order.
    """

    def get(self, entity_id: str) -> Optional[T]: ...

    def find(self, **criteria: Any) -> List[T]: ...

    def list(self) -> List[T]: ...

    def insert(self, entity: T) -> T: ...

    def update(self, entity: T) -> Optional[T]: ...

    def delete(self, entity_id: str) -> bool: ...


@dataclass
class Repositories:
    """The four collections the service works with"""

    students: Repository[Student]
    debts: Repository[Debt]
    collectors: Repository[Collector]
    appointments: Repository[Appointment]

    def commit(self) -> None:
        """
        Make pending writes visible to other requests.

        In-memory writes are visible immediately, so this is a no-op here.
        """
