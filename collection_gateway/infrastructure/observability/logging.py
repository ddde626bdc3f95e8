"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import date, datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "collection-gateway"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_debt_created(request_id: str, debt_id: str, student_id: str, monthly_percent: float, accrued_days: int) -> None:
    logging.info(
        "Debt created",
        extra={
            "request_id": request_id,
            "debt_id": debt_id,
            "student_id": student_id,
            "step": "debt_created",
            "monthly_percent": monthly_percent,
            "accrued_days": accrued_days,
        },
    )


def log_accrual_pass(request_id: str, updated: int, skipped: int, duration_ms: float) -> None:
    """Log outcome of a periodic accrual pass over all debts"""
    logging.info(
        "Accrual pass completed",
        extra={
            "request_id": request_id,
            "step": "accrual_pass",
            "debts_updated": updated,
            "debts_skipped": skipped,
            "duration_ms": duration_ms,
        },
    )


def log_appointment(
    request_id: str,
    student_id: str,
    appointment_date: date,
    collector_id: str | None,
) -> None:
    """Log scheduling outcome; collector_id is None when nobody was eligible"""
    logging.info(
        "Appointment scheduled" if collector_id else "No eligible collector",
        extra={
            "request_id": request_id,
            "student_id": student_id,
            "step": "appointment_scheduling",
            "appointment_date": appointment_date.isoformat(),
            "outcome": "scheduled" if collector_id else "no_capacity",
            "collector_id": collector_id,
        },
    )
