from __future__ import annotations
import logging

logger = logging.getLogger(__name__)

# Search stops once the bracket is narrower than one cent
PRECISION = 0.01


def simulate_drawdown(balance: float, withdrawal: float, return_rate: float, years: int) -> float:
    """Balance left after `years` rounds of withdraw-then-grow."""
    for _ in range(years):
        balance = (balance - withdrawal) * (1 + return_rate)
    return balance


def solve_withdrawal(
    balance: float, return_rate: float, years: int, precision: float = PRECISION
) -> float:
    """
    Find the largest constant annual withdrawal that does not exhaust the
    account before the end of `years` retirement years.

    Binary search over [0, balance]. A candidate is feasible when the
    simulated final balance stays strictly positive.

    Args:
        balance: Account balance at retirement
        return_rate: Annual return earned on the remaining balance
        years: Number of retirement years
        precision: Width of the bracket at which the search stops

    Returns:
        float: Best feasible withdrawal found
    """
    if years <= 0:
        # Nothing to spread over: the whole balance is paid out at once
        return float(balance)
    if balance <= 0:
        return 0.0

    low, high = 0.0, float(balance)
    best = 0.0
    iterations = 0
    while high - low > precision:
        mid = (low + high) / 2
        if simulate_drawdown(balance, mid, return_rate, years) > 0:
            low = mid
            best = mid
        else:
            high = mid
        iterations += 1

    logger.debug(
        "Solved withdrawal %.2f for balance %.2f over %d years in %d iterations",
        best, balance, years, iterations,
    )
    return best
