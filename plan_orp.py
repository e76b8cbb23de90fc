from __future__ import annotations
import logging
from typing import Sequence
from params import Params
from plan_base import Plan

logger = logging.getLogger(__name__)


def accumulate_contributions(
    salaries: Sequence[float],
    employee_rate: float,
    employer_rate: float,
    return_rate: float,
    balance: float = 0.0,
) -> float:
    """
    Grow the ORP account over the working years.

    Each year the contribution is added first, then the whole balance earns
    one year of return. Years are folded in chronological order.
    """
    contribution_rate = employee_rate + employer_rate
    for salary in salaries:
        balance = (balance + salary * contribution_rate) * (1 + return_rate)
    return balance


class PlanORP(Plan):
    """Defined contribution: an invested account drawn down by a fixed amount."""

    name = "ORP"

    def __init__(self, p: Params, withdrawal_amount: float):
        super().__init__(p)
        self.withdrawal_amount = withdrawal_amount
        self.liquidated = 0.0
        self._balance = 0.0

    @property
    def balance(self) -> float:
        return self._balance

    def working_year(self, salary: float) -> float:
        p = self.params
        self._balance = accumulate_contributions(
            [salary],
            p.orp_employee_contribution,
            p.orp_employer_contribution,
            p.orp_return_rate,
            balance=self._balance,
        )
        return salary * (1 - p.orp_employee_contribution)

    def retirement_year(self, final: bool) -> float:
        if final:
            return self.liquidate()
        # Never withdraw more than the account holds
        withdrawn = min(self.withdrawal_amount, self._balance)
        self._balance = (self._balance - withdrawn) * (1 + self.params.orp_return_rate)
        return withdrawn

    def liquidate(self) -> float:
        paid_out = self._balance
        self.liquidated = paid_out
        self._balance = 0.0
        logger.debug("ORP liquidated %.2f", paid_out)
        return paid_out
