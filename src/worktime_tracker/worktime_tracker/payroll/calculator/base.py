from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import WeeklyPay


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def weekly_pay(self, weekly_hours: float, hourly_wage: float) -> WeeklyPay:
        raise NotImplementedError
