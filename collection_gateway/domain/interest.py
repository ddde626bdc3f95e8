"""Interest engine - rate derivation and daily compounding for student debts"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional, Tuple

from collection_gateway.domain.models import Debt, Student
from collection_gateway.utils.date_utils import elapsed_days, ensure_utc, is_same_calendar_day

DAYS_PER_MONTH = Decimal(30)
HUNDRED = Decimal(100)


class AccrualMode(str, Enum):
    """Call site of an accrual: debt creation or the periodic update pass"""

    CREATION = "creation"
    PERIODIC = "periodic"


@dataclass(frozen=True)
class RateRule:
    """One row of the interest rate decision table"""

    name: str
    applies: Callable[[int, bool], bool]
    apply: Callable[[Decimal], Decimal]


# Evaluated top to bottom; later rows see the rate produced by earlier ones.
# "under_18" replaces the "under_21" rate instead of adding to it.
INTEREST_RATE_RULES: Tuple[RateRule, ...] = (
    RateRule("under_21", lambda age, is_female: age < 21, lambda rate: Decimal("0.1")),
    RateRule("under_18", lambda age, is_female: age < 18, lambda rate: Decimal("0.2")),
    RateRule("female", lambda age, is_female: is_female, lambda rate: rate + Decimal("0.1")),
)


def derive_interest_rate(age: int, is_female: bool) -> Decimal:
    """
    Monthly interest rate for a student as a fraction.

    Examples:
        age 25, male   -> 0
        age 19, male   -> 0.1
        age 17, female -> 0.3 (0.2 + 0.1)
    """
    rate = Decimal(0)
    for rule in INTEREST_RATE_RULES:
        if rule.applies(age, is_female):
            rate = rule.apply(rate)
    return rate


def monthly_percent_for(student: Student) -> Decimal:
    return derive_interest_rate(student.age, student.sex) * HUNDRED


def daily_rate(monthly_percent: Decimal) -> Decimal:
    return Decimal(monthly_percent) / DAYS_PER_MONTH / HUNDRED


def accrue_interest(
    principal: Decimal,
    monthly_percent: Decimal,
    days_elapsed: int,
    mode: AccrualMode = AccrualMode.PERIODIC,
) -> Decimal:
    """
    Compound a balance daily over the elapsed days.

    total = principal * (1 + monthly_percent / 30 / 100) ** days

    Both creation and periodic accrual use this formula; mode only records
    which call site asked. The result is not rounded.

    Raises:
        ValueError: days_elapsed is negative
    """
    if days_elapsed < 0:
        raise ValueError(f"days_elapsed must be non-negative for {mode.value} accrual, got {days_elapsed}")

    balance = Decimal(principal)
    if days_elapsed == 0:
        return balance

    return balance * (1 + daily_rate(monthly_percent)) ** days_elapsed


def create_debt(
    student: Student,
    amount: Decimal,
    now: datetime,
    accrue_until: Optional[datetime] = None,
) -> Debt:
    """
    Open a new debt for a student.

    monthly_percent is derived from the student once, here. When
    accrue_until lies in the future, interest for the days until then is
    applied up front.
    """
    monthly_percent = monthly_percent_for(student)

    days = 0
    if accrue_until is not None and ensure_utc(accrue_until) > now:
        days = elapsed_days(now, accrue_until)

    return Debt(
        id=str(uuid.uuid4()),
        student_id=student.id,
        amount=Decimal(amount),
        total_amount=accrue_interest(amount, monthly_percent, days, AccrualMode.CREATION),
        monthly_percent=monthly_percent,
        creation_date=now,
        last_update_date=now,
    )


def accrual_anchor(debt: Debt) -> datetime:
    """Instant interest was last applied to the debt"""
    return ensure_utc(debt.last_update_date or debt.creation_date)


def accrue_debt(debt: Debt, now: datetime) -> bool:
    """
    Apply interest accumulated since the last update, in place.

    Skipped when the debt was already updated on now's calendar day (or
    carries a later anchor), so repeated passes on one day are no-ops.

    Returns:
        True if the debt was updated
    """
    anchor = accrual_anchor(debt)
    if is_same_calendar_day(anchor, now) or anchor > ensure_utc(now):
        return False

    balance = debt.total_amount if debt.total_amount else debt.amount
    debt.total_amount = accrue_interest(
        balance,
        debt.monthly_percent,
        elapsed_days(anchor, now),
        AccrualMode.PERIODIC,
    )
    debt.last_update_date = now
    return True
