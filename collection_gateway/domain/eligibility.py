"""Collector eligibility - who may be sent to which student on which day"""

from datetime import date
from typing import Iterable, Optional

from collection_gateway.domain.exceptions import NoEligibleCollectorError
from collection_gateway.domain.models import Appointment, Collector

SENIORITY_PER_FEAR = 2


def has_appointment_on(collector: Collector, target_date: date, appointments: Iterable[Appointment]) -> bool:
    """Exact date match only; appointments have no duration"""
    return any(a.collector_id == collector.id and a.date == target_date for a in appointments)


def is_collector_eligible(
    collector: Collector,
    target_date: date,
    student_fear_factor: float,
    existing_appointments: Iterable[Appointment],
) -> bool:
    """
    A collector is eligible when:
    - seniority >= 2 * student fear factor
    - they have no appointment already booked on target_date
    """
    if collector.seniority < SENIORITY_PER_FEAR * student_fear_factor:
        return False
    return not has_appointment_on(collector, target_date, existing_appointments)


def select_collector(
    collectors: Iterable[Collector],
    target_date: date,
    student_fear_factor: float,
    existing_appointments: Iterable[Appointment],
) -> Collector:
    """
    First-fit, not best-fit: return the first eligible collector in
    iteration order. No ranking by seniority and no load balancing.

    Raises:
        NoEligibleCollectorError: nobody qualifies
    """
    appointments = list(existing_appointments)
    chosen: Optional[Collector] = next(
        (c for c in collectors if is_collector_eligible(c, target_date, student_fear_factor, appointments)),
        None,
    )
    if chosen is None:
        raise NoEligibleCollectorError("No available collectors for the appointment")
    return chosen
