from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import OVERTIME_MULTIPLIER
from ..model import PayInput, PayRate
from .base import PayrollCalculator

CENTS = Decimal("0.01")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base + overtime at 1.5x + commission on sales."""

    def calculate_pay(self, pay_input: PayInput, rate: PayRate) -> Decimal:
        base = rate.hourly_rate * pay_input.hours_worked
        overtime = (pay_input.overtime_hours or 0) * rate.hourly_rate * Decimal(OVERTIME_MULTIPLIER)
        commission = (pay_input.total_sales or 0) * (rate.commission_rate or 0)
        return (base + overtime + commission).quantize(CENTS, rounding=ROUND_HALF_UP)
