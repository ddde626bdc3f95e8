"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class EntityNotFoundError(DomainException):
    """Referenced record does not exist"""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class StudentNotFoundError(EntityNotFoundError):
    """Student referenced by a debt or appointment does not exist"""

    def __init__(self, student_id: str):
        super().__init__("Student", student_id)


class NoEligibleCollectorError(DomainException):
    """No collector can take the appointment (no capacity)"""

    pass


class InvalidDateError(DomainException):
    """Date is malformed or outside the accepted range"""

    pass


class ConflictError(DomainException):
    """Write collides with a record already stored (duplicate id or booking)"""

    pass
