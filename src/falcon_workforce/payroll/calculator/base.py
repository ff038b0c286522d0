from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import PayInput, PayRate


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate_pay(self, pay_input: PayInput, rate: PayRate) -> Decimal:
        raise NotImplementedError
