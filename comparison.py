"""
TRS vs. ORP comparison: runs one full simulation and packages the result.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple
import pandas as pd
from params import Params
from plan_base import net_present_value
from salary import average_lifetime_salary, project_salaries
from simulation import orp_balance_at_retirement, simulate_cash_flows
from withdrawal import solve_withdrawal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Snapshot of one simulation run; replaced as a whole by the next run."""

    trs_npv: float
    orp_npv: float
    ages: Tuple[int, ...]
    trs_cash_flows: Tuple[float, ...]
    orp_cash_flows: Tuple[float, ...]
    orp_balances: Tuple[float, ...]
    final_orp_balance: float
    average_lifetime_salary: float
    optimal_orp_withdrawal: float
    orp_withdrawal_amount: float
    trs_annuity: float
    orp_balance_at_retirement: float

    @property
    def trs_favorable(self) -> bool:
        # Strict comparison: equal NPVs report ORP as favorable
        return self.trs_npv > self.orp_npv

    @property
    def favorable_plan(self) -> str:
        return "TRS" if self.trs_favorable else "ORP"

    @property
    def favorability_margin(self) -> float:
        return abs(self.trs_npv - self.orp_npv)

    def cash_flow_rows(self) -> List[Dict[str, float]]:
        return [
            {"age": age, "TRS": trs, "ORP": orp}
            for age, trs, orp in zip(self.ages, self.trs_cash_flows, self.orp_cash_flows)
        ]

    def balance_rows(self) -> List[Dict[str, float]]:
        return [{"age": age, "ORP Balance": bal} for age, bal in zip(self.ages, self.orp_balances)]

    def to_frame(self) -> pd.DataFrame:
        """Yearly table indexed by age."""
        return pd.DataFrame(
            {
                "TRS": self.trs_cash_flows,
                "ORP": self.orp_cash_flows,
                "ORP Balance": self.orp_balances,
            },
            index=pd.Index(self.ages, name="age"),
        )


def compare_plans(p: Params) -> ComparisonResult:
    """
    Run the full TRS/ORP comparison for one parameter set.

    Raises InvalidAgeError / InvalidParameterError before any computation
    when the parameters cannot be simulated.
    """
    p.validate()

    salaries = project_salaries(p.current_salary, p.salary_growth_rate, p.working_years)
    avg_salary = average_lifetime_salary(salaries, fallback=p.current_salary)
    balance_at_retirement = orp_balance_at_retirement(p, salaries)
    optimal = solve_withdrawal(balance_at_retirement, p.orp_return_rate, p.retirement_years)
    withdrawal_amount = p.orp_withdrawal_amount or optimal

    series = simulate_cash_flows(p, withdrawal_amount, salaries)

    trs_npv = net_present_value(series.trs_cash_flows, p.discount_rate)
    orp_npv = net_present_value(series.orp_cash_flows, p.discount_rate)
    # What the account paid out when it was closed in the last year
    final_balance = float(series.orp_liquidation)

    logger.info(
        "TRS NPV %.2f, ORP NPV %.2f, withdrawal %.2f", trs_npv, orp_npv, withdrawal_amount
    )

    return ComparisonResult(
        trs_npv=trs_npv,
        orp_npv=orp_npv,
        ages=tuple(int(a) for a in series.ages),
        trs_cash_flows=tuple(float(x) for x in series.trs_cash_flows),
        orp_cash_flows=tuple(float(x) for x in series.orp_cash_flows),
        orp_balances=tuple(float(x) for x in series.orp_balances),
        final_orp_balance=final_balance,
        average_lifetime_salary=avg_salary,
        optimal_orp_withdrawal=optimal,
        orp_withdrawal_amount=float(withdrawal_amount),
        trs_annuity=series.trs_annuity,
        orp_balance_at_retirement=float(balance_at_retirement),
    )
