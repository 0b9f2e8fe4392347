"""Plotly charts for the period comparison."""

import plotly.graph_objects as go
from config.settings import CHART_HEIGHT, CHART_METRIC, PERIOD_LABELS, OLD_PERIOD, NEW_PERIOD


class ComparisonVisualizer:
    """Generate Plotly charts from comparison entries."""

    def __init__(self, entries: list):
        self.entries = list(entries)

    def metric_chart(self, metric: str = CHART_METRIC) -> go.Figure:
        """Grouped bar chart of one metric, old vs new period, per agent."""
        if not self.entries:
            return None

        names = [e.name for e in self.entries]
        old_values = [(e.old_data or {}).get(metric) for e in self.entries]
        new_values = [(e.new_data or {}).get(metric) for e in self.entries]

        fig = go.Figure()
        fig.add_trace(go.Bar(
            name=PERIOD_LABELS[OLD_PERIOD],
            x=names,
            y=old_values,
            marker_color="#64748B",
        ))
        fig.add_trace(go.Bar(
            name=PERIOD_LABELS[NEW_PERIOD],
            x=names,
            y=new_values,
            marker_color="#6366F1",
        ))
        fig.update_layout(
            title=f"{metric}: {PERIOD_LABELS[OLD_PERIOD]} vs {PERIOD_LABELS[NEW_PERIOD]}",
            barmode="group",
            height=CHART_HEIGHT,
            template="plotly_white",
        )
        return fig
