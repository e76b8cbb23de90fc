from __future__ import annotations
from typing import Sequence
import numpy as np


def project_salaries(current_salary: float, growth_rate: float, years: int) -> np.ndarray:
    """
    Project the salary for each working year.

    Args:
        current_salary: Salary in year zero
        growth_rate: Annual growth, applied geometrically
        years: Number of working years

    Returns:
        numpy.ndarray: salary[t] = current_salary * (1 + growth_rate) ** t
    """
    if years < 0:
        raise ValueError(f"years must be non-negative, got {years}")
    return current_salary * (1 + growth_rate) ** np.arange(years, dtype=float)


def average_lifetime_salary(salaries: Sequence[float], fallback: float) -> float:
    """Mean salary over the working years, or `fallback` when there are none."""
    if len(salaries) == 0:
        return float(fallback)
    return float(np.mean(salaries))
