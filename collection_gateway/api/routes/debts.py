"""/api/debt - debt creation, lookup and the periodic interest accrual pass"""

import logging
import threading
import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from collection_gateway.api.dependencies import get_clock, get_repositories, get_request_id
from collection_gateway.api.routes.schemas import DebtRequest, DebtResponse
from collection_gateway.domain.exceptions import EntityNotFoundError, InvalidDateError, StudentNotFoundError
from collection_gateway.domain.interest import accrue_debt, create_debt
from collection_gateway.domain.repositories import Repositories
from collection_gateway.infrastructure.observability.logging import log_accrual_pass, log_debt_created
from collection_gateway.infrastructure.observability.metrics import record_accrual_pass, record_debt_created
from collection_gateway.utils.clock import Clock
from collection_gateway.utils.date_utils import elapsed_days, parse_iso_datetime

router = APIRouter()

# Overlapping passes must not compound the same debt twice
_accrual_lock = threading.Lock()


@router.get("/debt", response_model=List[DebtResponse])
def list_debts(repositories: Repositories = Depends(get_repositories)):
    return [DebtResponse.from_domain(d) for d in repositories.debts.list()]


@router.post("/debt", response_model=DebtResponse, status_code=201)
def open_debt(
    request_body: DebtRequest,
    request: Request,
    repositories: Repositories = Depends(get_repositories),
    clock: Clock = Depends(get_clock),
):
    """
    Open a debt for an existing student.

    Flow:
    1. Look up the student (404 if unknown)
    2. Derive the monthly percent from the student's age and sex
    3. If lastUpdateDate is in the future, apply interest up to that date
    4. Persist and return the debt
    """
    request_id = get_request_id(request)

    try:
        student = repositories.students.get(request_body.student_id)
        if not student:
            raise StudentNotFoundError(request_body.student_id)

        now = clock.now()
        accrue_until = parse_iso_datetime(request_body.last_update_date)
        debt = repositories.debts.insert(create_debt(student, request_body.amount, now, accrue_until))

    except InvalidDateError as e:
        logging.warning(f"Debt rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    accrued_days = elapsed_days(now, accrue_until) if accrue_until else 0
    record_debt_created(float(debt.monthly_percent))
    log_debt_created(request_id, debt.id, student.id, float(debt.monthly_percent), accrued_days)

    return DebtResponse.from_domain(debt)


@router.put("/debt", response_model=List[DebtResponse])
def accrue_all_debts(
    request: Request,
    repositories: Repositories = Depends(get_repositories),
    clock: Clock = Depends(get_clock),
):
    """
    Apply interest accumulated since each debt's last update.

    Debts already updated today are left alone, so calling this more than
    once a day is harmless. Returns every debt after the pass.
    """
    start_time = time.time()

    with _accrual_lock:
        now = clock.now()
        debts = repositories.debts.list()
        updated = 0
        for debt in debts:
            if accrue_debt(debt, now):
                repositories.debts.update(debt)
                updated += 1
        repositories.commit()

    skipped = len(debts) - updated
    duration_ms = (time.time() - start_time) * 1000
    record_accrual_pass(updated, skipped)
    log_accrual_pass(get_request_id(request), updated, skipped, duration_ms)

    return [DebtResponse.from_domain(d) for d in debts]


@router.get("/debt/{debt_id}", response_model=DebtResponse)
def get_debt(debt_id: str, repositories: Repositories = Depends(get_repositories)):
    debt = repositories.debts.get(debt_id)
    if not debt:
        raise EntityNotFoundError("Debt", debt_id)
    return DebtResponse.from_domain(debt)


@router.delete("/debt/{debt_id}", status_code=204)
def delete_debt(debt_id: str, repositories: Repositories = Depends(get_repositories)):
    if not repositories.debts.delete(debt_id):
        raise EntityNotFoundError("Debt", debt_id)
    return Response(status_code=204)
