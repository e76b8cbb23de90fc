#!/usr/bin/env python3
"""
TRS vs. ORP Retirement Plan Comparison - Main Entry Point

This script runs the complete comparison workflow:
1. Load parameters from params.py
2. Project salary, ORP growth and the TRS annuity over the lifetime
3. Display the NPV comparison and which plan is favorable
4. Save charts as PNG files and the yearly table as CSV

Usage: python main.py
"""

from __future__ import annotations
import sys
import logging
from datetime import datetime
from typing import Optional
import matplotlib.pyplot as plt

from params import Params, InvalidParameterError
from comparison import ComparisonResult, compare_plans
from visualizations import VisualizationData, RetirementVisualizer

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler('retirement_comparison.log'),
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

TABLE_FILE = "yearly_cash_flows.csv"


class RetirementAnalyzer:
    """Runs one TRS/ORP comparison and reports it"""

    def __init__(self, params: Optional[Params] = None) -> None:
        self.params: Optional[Params] = params
        self.result: Optional[ComparisonResult] = None

    def load_parameters(self) -> bool:
        """Load and validate parameters from params.py"""
        try:
            print("🔧 Loading parameters from params.py...")
            if self.params is None:
                self.params = Params()
            self.params.validate()

            print(f"   📊 Current age: {self.params.current_age}")
            print(f"   📊 Retirement age: {self.params.retirement_age}")
            print(f"   📊 Life expectancy: {self.params.life_expectancy}")
            print(f"   📊 Current salary: ${self.params.current_salary:,.2f}")
            print(f"   📊 Salary growth: {self.params.salary_growth_rate:.2%}")
            print(f"   📊 Discount rate: {self.params.discount_rate:.2%}")
            print(f"   📊 ORP return: {self.params.orp_return_rate:.2%}")
            return True

        except InvalidParameterError as e:
            # Never show a stale or partial result for invalid input
            self.result = None
            print(f"❌ {e}")
            logger.error(f"Parameter validation failed: {e}")
            return False

    def run_comparison(self) -> bool:
        """Run the simulation for both plans"""
        assert self.params is not None
        print("\n🎲 Simulating TRS and ORP cash flows...")
        try:
            self.result = compare_plans(self.params)
        except InvalidParameterError as e:
            self.result = None
            print(f"❌ {e}")
            logger.error(f"Comparison rejected: {e}")
            return False

        print(f"   ✅ {len(self.result.ages)} years simulated")
        return True

    def generate_visualizations(self) -> bool:
        """Save the cash flow, balance and summary charts"""
        assert self.params is not None and self.result is not None
        print("\n📊 Creating charts...")

        visualizer = RetirementVisualizer(self.params)
        data = VisualizationData(result=self.result, params=self.params)
        charts = [
            ("Cash flow comparison", "graph1_cash_flows.png", visualizer.create_cash_flow_chart),
            ("ORP balance", "graph2_orp_balance.png", visualizer.create_balance_chart),
            ("Summary", "graph3_summary.png", visualizer.create_summary_table_chart),
        ]

        ok = True
        for chart_name, filename, chart_function in charts:
            try:
                print(f"   📈 Creating {chart_name}...")
                fig = chart_function(data)
                fig.savefig(filename, dpi=300, bbox_inches='tight', facecolor='white')
                print(f"      ✅ Saved as {filename}")
                plt.close(fig)
            except (OSError, ValueError) as e:
                print(f"      ❌ Failed to create {chart_name}: {e}")
                logger.error(f"Chart generation failed for {chart_name}: {e}")
                ok = False
        return ok

    def export_table(self, path: str = TABLE_FILE) -> bool:
        """Write the yearly cash flows and balances to CSV"""
        assert self.result is not None
        try:
            self.result.to_frame().to_csv(path, float_format="%.2f")
        except OSError as e:
            print(f"❌ Could not write {path}: {e}")
            logger.error(f"Table export failed: {e}")
            return False
        print(f"   📄 Yearly table saved as {path}")
        return True

    def display_summary(self) -> None:
        """Print the comparison results"""
        res = self.result
        if res is None:
            print("❌ No results available")
            return

        print("\n" + "=" * 60)
        print("📋 TRS vs. ORP - RESULTS")
        print("=" * 60)
        print(f"🕐 Created: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"   Average Lifetime Salary: ${res.average_lifetime_salary:,.2f}")
        print(f"   Optimal ORP Withdrawal (to deplete at life expectancy): ${res.optimal_orp_withdrawal:,.2f}")
        if res.orp_withdrawal_amount != res.optimal_orp_withdrawal:
            print(f"   ORP Withdrawal Used: ${res.orp_withdrawal_amount:,.2f}")
        print(f"   TRS Annuity: ${res.trs_annuity:,.2f}")
        print(f"   TRS NPV: ${res.trs_npv:,.2f}")
        print(f"   ORP NPV: ${res.orp_npv:,.2f}")
        print(f"   Final ORP Balance: ${res.final_orp_balance:,.2f}")
        print(f"\n🏆 {res.favorable_plan} is favorable by ${res.favorability_margin:,.2f}")
        if res.trs_npv == res.orp_npv:
            logger.warning("TRS and ORP NPVs are equal; reported as ORP favorable")
        print("=" * 60)

    def run_complete_analysis(self) -> bool:
        """Run the complete comparison"""
        print("🚀 TRS vs. ORP RETIREMENT PLAN COMPARISON")
        print("=" * 60)

        if not self.load_parameters():
            return False
        if not self.run_comparison():
            return False

        self.display_summary()
        charts_ok = self.generate_visualizations()
        table_ok = self.export_table()
        return charts_ok and table_ok


def main():
    """Main entry point for the comparison"""
    try:
        analyzer = RetirementAnalyzer()
        success = analyzer.run_complete_analysis()
        sys.exit(0 if success else 1)

    except KeyboardInterrupt:
        print("\n\n⏹️  Analysis cancelled by user.")
        sys.exit(1)

    except Exception as e:
        print(f"\n❌ Unexpected error: {e}")
        logger.error(f"Unexpected error in main: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
