import unittest
from dataclasses import FrozenInstanceError
from params import Params, InvalidAgeError, InvalidParameterError


class TestParams(unittest.TestCase):
    def setUp(self):
        self.params = Params()

    def test_defaults_are_valid(self):
        self.assertIs(self.params.validate(), self.params)
        self.assertEqual(self.params.working_years, 35)
        self.assertEqual(self.params.retirement_years, 20)
        self.assertEqual(self.params.total_years, 55)

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            self.params.current_age = 40

    def test_with_overrides_returns_copy(self):
        older = self.params.with_overrides(current_age=40)
        self.assertEqual(older.current_age, 40)
        self.assertEqual(self.params.current_age, 30)

    def test_bad_age_ordering(self):
        with self.assertRaises(InvalidAgeError):
            self.params.with_overrides(current_age=70)
        with self.assertRaises(InvalidAgeError):
            self.params.with_overrides(life_expectancy=60)

    def test_age_error_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidAgeError, ValueError))

    def test_equal_ages_allowed(self):
        Params(current_age=65, retirement_age=65, life_expectancy=65).validate()

    def test_non_finite_rejected(self):
        with self.assertRaises(InvalidParameterError):
            self.params.with_overrides(discount_rate=float('nan'))
        with self.assertRaises(InvalidParameterError):
            self.params.with_overrides(current_salary=float('inf'))

    def test_fractional_age_rejected(self):
        with self.assertRaises(InvalidParameterError):
            self.params.with_overrides(retirement_age=65.5)

    def test_negative_withdrawal_rejected(self):
        with self.assertRaises(InvalidParameterError):
            self.params.with_overrides(orp_withdrawal_amount=-0.01)
        self.assertEqual(self.params.with_overrides(orp_withdrawal_amount=0.0).orp_withdrawal_amount, 0.0)

    def test_top_salary_years_positive(self):
        with self.assertRaises(InvalidParameterError):
            self.params.with_overrides(trs_top_salary_years=0)

    def test_negative_rates_accepted(self):
        p = self.params.with_overrides(orp_return_rate=-0.2, salary_growth_rate=-0.01, discount_rate=-0.01)
        self.assertEqual(p.orp_return_rate, -0.2)

    def test_final_salary_variant(self):
        p = Params.final_salary_variant(current_age=40)
        self.assertEqual(p.trs_top_salary_years, 1)
        self.assertEqual(p.trs_percentage_per_year, 0.023)
        self.assertEqual(p.current_age, 40)


if __name__ == '__main__':
    unittest.main()
