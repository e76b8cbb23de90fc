from __future__ import annotations
import logging
from typing import Sequence
import numpy as np
from params import Params
from plan_base import Plan

logger = logging.getLogger(__name__)


def final_average_salary(salaries: Sequence[float], top_years: int) -> float:
    """
    Average of the last `top_years` salaries.

    A career shorter than the window is averaged over the years actually
    worked; no working years gives 0.
    """
    if top_years < 1:
        raise ValueError(f"top_years must be positive, got {top_years}")
    window = np.asarray(salaries, dtype=float)[-int(top_years):]
    if window.size == 0:
        return 0.0
    return float(np.mean(window))


def trs_annuity(salaries: Sequence[float], percentage_per_year: float, top_years: int) -> float:
    """Fixed yearly TRS payout: final average salary x years of service x accrual rate."""
    years_of_service = len(salaries)
    return final_average_salary(salaries, top_years) * years_of_service * percentage_per_year


class PlanTRS(Plan):
    """Defined benefit: contributions are withheld from salary, then a fixed annuity."""

    name = "TRS"

    def __init__(self, p: Params, salaries: np.ndarray):
        super().__init__(p)
        self.annuity = trs_annuity(salaries, p.trs_percentage_per_year, p.trs_top_salary_years)
        logger.debug("TRS annuity %.2f from %d years of service", self.annuity, len(salaries))

    def working_year(self, salary: float) -> float:
        return salary * (1 - self.params.trs_employee_contribution)

    def retirement_year(self, final: bool) -> float:
        return self.annuity
