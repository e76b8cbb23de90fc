from __future__ import annotations
import logging
from dataclasses import dataclass
import numpy as np
from params import Params
from plan_orp import PlanORP, accumulate_contributions
from plan_trs import PlanTRS

logger = logging.getLogger(__name__)


@dataclass
class CashFlowSeries:
    """Yearly series for one run, indexed by years since current_age."""

    ages: np.ndarray
    trs_cash_flows: np.ndarray
    orp_cash_flows: np.ndarray
    orp_balances: np.ndarray
    trs_annuity: float
    orp_liquidation: float


def orp_balance_at_retirement(p: Params, salaries: np.ndarray) -> float:
    return accumulate_contributions(
        salaries,
        p.orp_employee_contribution,
        p.orp_employer_contribution,
        p.orp_return_rate,
    )


def simulate_cash_flows(p: Params, withdrawal_amount: float, salaries: np.ndarray) -> CashFlowSeries:
    """
    Step both plans from current_age up to (not including) life_expectancy.

    Working years pay take-home salary and fund the ORP account. Retirement
    years pay the TRS annuity and the ORP withdrawal, capped at the balance.
    The last simulated year pays out the whole ORP balance, so the balance
    series always ends at zero.
    """
    total_years = p.total_years
    trs = PlanTRS(p, salaries)
    orp = PlanORP(p, withdrawal_amount)

    trs_cf = np.zeros(total_years)
    orp_cf = np.zeros(total_years)
    orp_balances = np.zeros(total_years)

    for year in range(total_years):
        age = p.current_age + year
        final = year == total_years - 1

        if age < p.retirement_age:
            salary = salaries[year]
            trs_cf[year] = trs.working_year(salary)
            orp_cf[year] = orp.working_year(salary)
            if final:
                # Retiring at life expectancy: no drawdown years are left
                trs_cf[year] += trs.liquidate()
                orp_cf[year] += orp.liquidate()
        else:
            trs_cf[year] = trs.retirement_year(final)
            orp_cf[year] = orp.retirement_year(final)

        orp_balances[year] = orp.balance

    logger.debug("Simulated %d years, %d of them working", total_years, p.working_years)

    return CashFlowSeries(
        ages=p.current_age + np.arange(total_years),
        trs_cash_flows=trs_cf,
        orp_cash_flows=orp_cf,
        orp_balances=orp_balances,
        trs_annuity=trs.annuity,
        orp_liquidation=orp.liquidated,
    )
