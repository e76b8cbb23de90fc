import unittest
from params import Params
from plan_base import net_present_value, present_value
from comparison import compare_plans


class TestPresentValue(unittest.TestCase):
    def test_single_cash_flow(self):
        self.assertAlmostEqual(present_value(1100, 1, 0.1), 1000.0)
        self.assertEqual(present_value(1000, 0, 0.05), 1000)

    def test_first_year_undiscounted(self):
        self.assertAlmostEqual(net_present_value([500.0], 0.25), 500.0)

    def test_discounting(self):
        # 0 + 110 / 1.1 + 121 / 1.21
        self.assertAlmostEqual(net_present_value([0.0, 110.0, 121.0], 0.1), 200.0)

    def test_zero_rate_is_plain_sum(self):
        self.assertAlmostEqual(net_present_value([100.0, 250.0, 50.0], 0.0), 400.0)

    def test_zero_rate_on_simulated_flows(self):
        result = compare_plans(Params().with_overrides(discount_rate=0.0))
        self.assertAlmostEqual(result.trs_npv, sum(result.trs_cash_flows), delta=1e-6)
        self.assertAlmostEqual(result.orp_npv, sum(result.orp_cash_flows), delta=1e-6)

    def test_empty_series(self):
        self.assertEqual(net_present_value([], 0.05), 0.0)


if __name__ == '__main__':
    unittest.main()
