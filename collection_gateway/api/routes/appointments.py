"""/api/appointment - schedule collector visits"""

import logging
import threading
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from collection_gateway.api.dependencies import get_clock, get_repositories, get_request_id
from collection_gateway.api.routes.schemas import AppointmentRequest, AppointmentResponse
from collection_gateway.domain.eligibility import select_collector
from collection_gateway.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidDateError,
    NoEligibleCollectorError,
    StudentNotFoundError,
)
from collection_gateway.domain.models import Appointment
from collection_gateway.domain.repositories import Repositories
from collection_gateway.infrastructure.observability.logging import log_appointment
from collection_gateway.infrastructure.observability.metrics import record_appointment
from collection_gateway.utils.clock import Clock
from collection_gateway.utils.date_utils import parse_iso_date

router = APIRouter()

# Selection and insert happen together so one collector is never double-booked
_scheduling_lock = threading.Lock()

NO_CAPACITY_DETAIL = "No available collectors for the appointment"


@router.get("/appointment", response_model=List[AppointmentResponse])
def list_appointments(repositories: Repositories = Depends(get_repositories)):
    return [AppointmentResponse.from_domain(a) for a in repositories.appointments.list()]


@router.post("/appointment", response_model=AppointmentResponse, status_code=201)
def schedule_appointment(
    request_body: AppointmentRequest,
    request: Request,
    repositories: Repositories = Depends(get_repositories),
    clock: Clock = Depends(get_clock),
):
    """
    Book the first eligible collector for a student on a date.

    Flow:
    1. Validate the date (YYYY-MM-DD, not in the past)
    2. Load the student for their fear factor
    3. Pick the first collector with seniority >= 2 * fear factor and no
       appointment that day
    4. Link the student's first debt, if any
    """
    request_id = get_request_id(request)

    try:
        target_date = parse_iso_date(request_body.date)
        if target_date < clock.today():
            raise InvalidDateError("Appointment date cannot be in the past")

        student = repositories.students.get(request_body.student_id)
        if not student:
            raise StudentNotFoundError(request_body.student_id)

        with _scheduling_lock:
            collector = select_collector(
                repositories.collectors.list(),
                target_date,
                student.fear_factor,
                repositories.appointments.find(date=target_date),
            )
            student_debts = repositories.debts.find(student_id=student.id)
            appointment = repositories.appointments.insert(
                Appointment(
                    id=str(uuid.uuid4()),
                    date=target_date,
                    student_id=student.id,
                    collector_id=collector.id,
                    debt_id=student_debts[0].id if student_debts else None,
                )
            )
            repositories.commit()

    except InvalidDateError as e:
        logging.warning(f"Invalid appointment date: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except ConflictError as e:
        # Another process booked the same collector for that day first
        logging.warning(f"Appointment conflict: {e}", extra={"request_id": request_id})
        record_appointment(scheduled=False)
        log_appointment(request_id, student.id, target_date, None)
        raise HTTPException(status_code=400, detail=NO_CAPACITY_DETAIL)

    except NoEligibleCollectorError as e:
        record_appointment(scheduled=False)
        log_appointment(request_id, student.id, target_date, None)
        raise HTTPException(status_code=400, detail=str(e))

    record_appointment(scheduled=True)
    log_appointment(request_id, student.id, target_date, collector.id)

    return AppointmentResponse.from_domain(appointment)


@router.get("/appointment/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(appointment_id: str, repositories: Repositories = Depends(get_repositories)):
    appointment = repositories.appointments.get(appointment_id)
    if not appointment:
        raise EntityNotFoundError("Appointment", appointment_id)
    return AppointmentResponse.from_domain(appointment)


@router.delete("/appointment/{appointment_id}", status_code=204)
def cancel_appointment(appointment_id: str, repositories: Repositories = Depends(get_repositories)):
    if not repositories.appointments.delete(appointment_id):
        raise EntityNotFoundError("Appointment", appointment_id)
    return Response(status_code=204)
