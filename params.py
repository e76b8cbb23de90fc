from __future__ import annotations
import math
from dataclasses import dataclass, fields, replace


class InvalidParameterError(ValueError):
    """Raised when a parameter set cannot be simulated."""


class InvalidAgeError(InvalidParameterError):
    """Raised when current_age <= retirement_age <= life_expectancy does not hold."""


AGE_ORDER_MESSAGE = (
    "Retirement age must be greater than current age, and life expectancy "
    "must be greater than retirement age."
)


@dataclass(frozen=True)
class Params:
    # Ages
    current_age: int = 30
    retirement_age: int = 65
    life_expectancy: int = 85

    # Salary
    current_salary: float = 50000.0
    salary_growth_rate: float = 0.03

    # Discount rate for net present value
    discount_rate: float = 0.05

    # ORP (defined contribution)
    orp_return_rate: float = 0.07
    orp_employee_contribution: float = 0.0665
    orp_employer_contribution: float = 0.085
    orp_withdrawal_amount: float = 0.0  # 0 => solve for the depleting withdrawal

    # TRS (defined benefit)
    trs_employee_contribution: float = 0.0825
    trs_percentage_per_year: float = 0.023
    trs_top_salary_years: int = 5

    @property
    def working_years(self) -> int:
        return int(self.retirement_age - self.current_age)

    @property
    def retirement_years(self) -> int:
        return int(self.life_expectancy - self.retirement_age)

    @property
    def total_years(self) -> int:
        return int(self.life_expectancy - self.current_age)

    @property
    def ages_valid(self) -> bool:
        return self.current_age <= self.retirement_age <= self.life_expectancy

    def validate(self) -> Params:
        """Check the parameter set and return it unchanged.

        Raises InvalidAgeError for a bad age ordering and InvalidParameterError
        for non-finite values, a negative ORP withdrawal or a non-positive
        top-salary window. Negative rates are accepted.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise InvalidParameterError(f"{f.name} must be a finite number, got {value!r}")

        for name in ("current_age", "retirement_age", "life_expectancy"):
            if int(getattr(self, name)) != getattr(self, name):
                raise InvalidParameterError(f"{name} must be a whole number of years")

        if not self.ages_valid:
            raise InvalidAgeError(AGE_ORDER_MESSAGE)

        if self.orp_withdrawal_amount < 0:
            raise InvalidParameterError(
                f"orp_withdrawal_amount must not be negative, got {self.orp_withdrawal_amount!r}"
            )

        if int(self.trs_top_salary_years) != self.trs_top_salary_years or self.trs_top_salary_years < 1:
            raise InvalidParameterError(
                f"trs_top_salary_years must be a positive integer, got {self.trs_top_salary_years!r}"
            )
        return self

    def with_overrides(self, **changes) -> Params:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes).validate()

    @classmethod
    def final_salary_variant(cls, **overrides) -> Params:
        """TRS annuity of 2.3% per year of service on the final salary only."""
        base = dict(trs_top_salary_years=1, trs_percentage_per_year=0.023)
        base.update(overrides)
        return cls(**base).validate()
