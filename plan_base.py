from __future__ import annotations
from typing import Sequence
import numpy as np
from params import Params


def present_value(cf, year, discount_rate):
    return cf / ((1 + discount_rate) ** year)


def net_present_value(cash_flows: Sequence[float], discount_rate: float) -> float:
    """Discount a yearly cash-flow series to today; year 0 is undiscounted."""
    flows = np.asarray(cash_flows, dtype=float)
    if flows.size == 0:
        return 0.0
    years = np.arange(flows.size)
    return float(np.sum(present_value(flows, years, discount_rate)))


class Plan:
    """
    One retirement plan stepped through a lifetime, one year at a time.

    Subclasses return the worker's cash flow for each year; the simulator
    decides which phase a year belongs to.
    """

    name = ""

    def __init__(self, p: Params):
        self.params = p

    @property
    def balance(self) -> float:
        return 0.0

    def working_year(self, salary: float) -> float:
        raise NotImplementedError

    def retirement_year(self, final: bool) -> float:
        raise NotImplementedError

    def liquidate(self) -> float:
        """Pay out whatever the plan still holds; used when no retirement year is simulated."""
        return 0.0
