from __future__ import annotations

import logging
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.constants import DEFAULT_OVERTIME_THRESHOLD_HOURS
from ..core.exceptions import ValidationError
from ..sessions.model import WorkSessionSnapshot
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayInput, PayRate, PayStub

logger = logging.getLogger(__name__)

HOURS_PRECISION = Decimal("0.01")


def duration_to_hours(duration: timedelta) -> Decimal:
    """Decimal hours rounded to 1/100, never below 0."""
    seconds = max(int(duration.total_seconds()), 0)
    return (Decimal(seconds) / Decimal(3600)).quantize(HOURS_PRECISION, rounding=ROUND_HALF_UP)


class PayrollService:
    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        overtime_threshold_hours=DEFAULT_OVERTIME_THRESHOLD_HOURS,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._threshold = Decimal(str(overtime_threshold_hours))

    def split_hours(self, hours: Decimal) -> tuple[Decimal, Decimal]:
        """(regular, overtime) for one session's net hours."""
        if hours <= self._threshold:
            return hours, Decimal("0.00")
        return self._threshold, hours - self._threshold

    def build_pay_stub(
        self,
        snapshot: WorkSessionSnapshot,
        rate: PayRate,
        *,
        total_sales: Optional[Decimal] = None,
    ) -> PayStub:
        if snapshot.total_work_duration is None:
            raise ValidationError("Session has no worked time yet; clock out first")

        hours = duration_to_hours(snapshot.total_work_duration)
        regular, overtime = self.split_hours(hours)
        gross = self._calculator.calculate_pay(
            PayInput(hours_worked=regular, overtime_hours=overtime, total_sales=total_sales),
            rate,
        )
        logger.debug("Pay stub for %s: %s regular, %s overtime, gross %s", snapshot.worker_id, regular, overtime, gross)

        return PayStub(
            worker_id=snapshot.worker_id,
            work_date=snapshot.clock_in_time.astimezone().date() if snapshot.clock_in_time else None,
            regular_hours=regular,
            overtime_hours=overtime,
            hourly_rate=rate.hourly_rate,
            total_sales=total_sales or Decimal("0"),
            gross_pay=gross,
        )
