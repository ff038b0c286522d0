from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayRate:
    hourly_rate: Decimal
    commission_rate: Optional[Decimal] = None


@dataclass(frozen=True)
class PayInput:
    """Hours are decimal hours (7.5 == 7h30m)."""

    hours_worked: Decimal
    overtime_hours: Optional[Decimal] = None
    total_sales: Optional[Decimal] = None


@dataclass(frozen=True)
class PayStub:
    worker_id: str
    work_date: Optional[date]
    regular_hours: Decimal
    overtime_hours: Decimal
    hourly_rate: Decimal
    total_sales: Decimal
    gross_pay: Decimal

    def as_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "work_date": self.work_date.strftime("%Y-%m-%d") if self.work_date else None,
            "regular_hours": str(self.regular_hours),
            "overtime_hours": str(self.overtime_hours),
            "hourly_rate": str(self.hourly_rate),
            "total_sales": str(self.total_sales),
            "gross_pay": str(self.gross_pay),
        }
