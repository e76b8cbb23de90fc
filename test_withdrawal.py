import unittest
from withdrawal import PRECISION, simulate_drawdown, solve_withdrawal


class TestWithdrawalSolver(unittest.TestCase):
    def setUp(self):
        self.balance = 1_000_000.0
        self.rate = 0.07
        self.years = 20

    def test_zero_return_splits_evenly(self):
        """Without growth the answer is balance / years, approached from below."""
        w = solve_withdrawal(1000.0, 0.0, 4)
        self.assertLess(w, 250.0)
        self.assertGreaterEqual(w, 250.0 - PRECISION)

    def test_solution_is_feasible(self):
        w = solve_withdrawal(self.balance, self.rate, self.years)
        self.assertGreater(simulate_drawdown(self.balance, w, self.rate, self.years), 0)

    def test_solution_is_tight(self):
        """Leftover is within one precision step of zero, scaled by compounding."""
        w = solve_withdrawal(self.balance, self.rate, self.years)
        leftover = simulate_drawdown(self.balance, w, self.rate, self.years)
        sensitivity = sum((1 + self.rate) ** k for k in range(1, self.years + 1))
        self.assertLess(leftover, PRECISION * sensitivity)

    def test_larger_withdrawal_overdraws(self):
        w = solve_withdrawal(self.balance, self.rate, self.years)
        self.assertLess(simulate_drawdown(self.balance, w + PRECISION * 1.1, self.rate, self.years), 0)

    def test_negative_return(self):
        w = solve_withdrawal(10000.0, -0.02, 5)
        self.assertGreater(simulate_drawdown(10000.0, w, -0.02, 5), 0)
        self.assertLess(simulate_drawdown(10000.0, w + PRECISION * 1.1, -0.02, 5), 0)
        self.assertLess(w, 2000.0)

    def test_no_retirement_years_pays_everything(self):
        self.assertEqual(solve_withdrawal(12345.0, self.rate, 0), 12345.0)

    def test_empty_balance(self):
        self.assertEqual(solve_withdrawal(0.0, self.rate, self.years), 0.0)

    def test_coarser_precision(self):
        w = solve_withdrawal(1000.0, 0.0, 4, precision=1.0)
        self.assertGreater(w, 249.0)
        self.assertLess(w, 250.0)

    def test_drawdown_decreases_with_withdrawal(self):
        low = simulate_drawdown(self.balance, 50000, self.rate, self.years)
        high = simulate_drawdown(self.balance, 60000, self.rate, self.years)
        self.assertGreater(low, high)


if __name__ == '__main__':
    unittest.main()
