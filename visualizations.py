"""
Charts for the TRS vs. ORP comparison.
Renders the yearly cash flows of both plans, the ORP balance, and a summary table.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Tuple
import matplotlib.pyplot as plt
from comparison import ComparisonResult
from params import Params

COLORS = {
    'trs': '#8884d8',        # Purple - TRS annuity plan
    'orp': '#82ca9d',        # Green - ORP account
    'retire': '#d62728',     # Red - retirement marker
    'header': '#17becf',     # Cyan - table header
    'favorable': '#90EE90',  # Light green - winning plan
}

plt.style.use('default')
plt.rcParams.update({
    'font.size': 10,
    'font.family': 'sans-serif',
    'axes.labelsize': 11,
    'axes.titlesize': 12,
    'legend.fontsize': 9,
    'axes.grid': True,
    'grid.alpha': 0.3,
    'grid.linestyle': '--',
    'axes.axisbelow': True
})


@dataclass
class VisualizationData:
    """Container for visualization data"""
    result: ComparisonResult
    params: Params


class RetirementVisualizer:
    """Charts and summary table for one comparison run"""

    def __init__(self, params: Params) -> None:
        self.params = params
        self.fig_size: Tuple[int, int] = (12, 6)
        self.dpi: int = 100

    def format_currency(self, amount: float, symbol: str = "$") -> str:
        """Dollar amount with two decimals; NaN/Inf shown as N/A"""
        if not math.isfinite(amount):
            return "N/A"
        sign = "-" if amount < 0 else ""
        return f"{sign}{symbol}{abs(amount):,.2f}"

    def format_axis_currency(self, amount: float) -> str:
        """Compact dollar label for chart axes"""
        if not math.isfinite(amount):
            return "N/A"
        if abs(amount) >= 1_000_000:
            return f"${amount/1_000_000:.1f}M"
        elif abs(amount) >= 1_000:
            return f"${amount/1_000:.0f}K"
        return f"${amount:,.0f}"

    def _mark_retirement(self, ax: plt.Axes) -> None:
        ax.axvline(x=self.params.retirement_age, color=COLORS['retire'], linestyle='--', alpha=0.7,
                   label=f'Retirement ({self.params.retirement_age})')

    def create_cash_flow_chart(self, data: VisualizationData) -> plt.Figure:
        """Yearly cash flow of each plan by age."""
        res = data.result
        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)

        ax.plot(res.ages, res.trs_cash_flows, color=COLORS['trs'], linewidth=2.0, label='TRS')
        ax.plot(res.ages, res.orp_cash_flows, color=COLORS['orp'], linewidth=2.0, label='ORP')
        if res.ages:
            self._mark_retirement(ax)

        ax.set_xlabel("Age (years)")
        ax.set_ylabel("Annual cash flow")
        ax.set_title("Cash Flow Comparison", fontweight='bold', pad=20)
        ax.legend(loc='upper left')
        ax.yaxis.set_major_formatter(plt.FuncFormatter(lambda x, p: self.format_axis_currency(x)))

        plt.tight_layout()
        return fig

    def create_balance_chart(self, data: VisualizationData) -> plt.Figure:
        """ORP account balance at the end of each year."""
        res = data.result
        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)

        ax.plot(res.ages, res.orp_balances, color=COLORS['orp'], linewidth=2.0, label='ORP Balance')
        if res.ages:
            self._mark_retirement(ax)
            peak_idx = max(range(len(res.orp_balances)), key=lambda i: res.orp_balances[i])
            ax.scatter(res.ages[peak_idx], res.orp_balances[peak_idx],
                       color=COLORS['orp'], s=50, edgecolors='black', zorder=5)

        ax.set_xlabel("Age (years)")
        ax.set_ylabel("Balance")
        ax.set_title("ORP Balance Over Time", fontweight='bold', pad=20)
        ax.legend(loc='upper left')
        ax.yaxis.set_major_formatter(plt.FuncFormatter(lambda x, p: self.format_axis_currency(x)))

        plt.tight_layout()
        return fig

    def summary_rows(self, result: ComparisonResult) -> List[List[str]]:
        rows = [
            ["Average Lifetime Salary", self.format_currency(result.average_lifetime_salary)],
            ["Optimal ORP Withdrawal", self.format_currency(result.optimal_orp_withdrawal)],
            ["ORP Withdrawal Used", self.format_currency(result.orp_withdrawal_amount)],
            ["TRS Annuity", self.format_currency(result.trs_annuity)],
            ["TRS NPV", self.format_currency(result.trs_npv)],
            ["ORP NPV", self.format_currency(result.orp_npv)],
            ["Final ORP Balance", self.format_currency(result.final_orp_balance)],
            [f"{result.favorable_plan} favorable by", self.format_currency(result.favorability_margin)],
        ]
        return rows

    def create_summary_table_chart(self, data: VisualizationData) -> plt.Figure:
        """Key figures of the comparison as a two-column table."""
        table_data = self.summary_rows(data.result)
        headers = ['Metric', 'Value']

        fig, ax = plt.subplots(figsize=(8, 1 + 0.5 * len(table_data)), dpi=self.dpi)
        ax.axis('off')

        table = ax.table(cellText=table_data, colLabels=headers,
                         cellLoc='center', loc='center',
                         bbox=[0.05, 0.05, 0.9, 0.85])
        table.auto_set_font_size(False)
        table.set_fontsize(11)

        for i in range(len(headers)):
            cell = table[(0, i)]
            cell.set_facecolor(COLORS['header'])
            cell.set_text_props(weight='bold', color='white')

        for i in range(len(table_data)):
            row_color = '#f0f0f0' if i % 2 == 0 else 'white'
            for j in range(len(headers)):
                table[(i + 1, j)].set_facecolor(row_color)
        # Verdict row
        for j in range(len(headers)):
            table[(len(table_data), j)].set_facecolor(COLORS['favorable'])

        ax.set_title("TRS vs. ORP: Summary", fontsize=14, fontweight='bold', pad=20)
        return fig
