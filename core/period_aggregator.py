"""
Period Aggregator — reduces one period's records to a metric bundle per agent.

Sum metrics add up every numeric cell, the unique-customer column counts
distinct raw values (an empty cell is one value too), and mean metrics take
the plain average of the rows that carry a number (an average of per-row
averages, not a weighted recompute).
Agents below MIN_MESSAGES_SENT are dropped.
"""

import numpy as np
import pandas as pd
from config.settings import (
    NAME_COLUMN,
    MESSAGES_SENT,
    UNIQUE_CUSTOMERS,
    SUM_METRICS,
    MEAN_METRICS,
    METRIC_ORDER,
    MIN_MESSAGES_SENT,
)
from core.csv_parser import CellKind, cell_kind


def _plain_number(value):
    """numpy scalar → int when integral, float otherwise."""
    value = float(value)
    if value.is_integer():
        return int(value)
    return value


class PeriodAggregator:
    """
    Group-and-reduce a period's records per agent.

    Usage:
        bundles = PeriodAggregator().aggregate(records, selection)
    """

    def __init__(self, min_messages_sent: int = MIN_MESSAGES_SENT):
        self.min_messages_sent = min_messages_sent

    def aggregate(self, records: pd.DataFrame, selection) -> dict:
        """
        Build {agent name: metric bundle} for the selected agents.

        Args:
            records: DataFrame from CSVParser
            selection: Collection of agent names to include

        Returns:
            Dict in first-appearance order; bundle keys follow METRIC_ORDER
        """
        if records is None or records.empty or NAME_COLUMN not in records.columns:
            return {}

        selection = set(selection)
        names = records[NAME_COLUMN]
        rows = records.loc[names.notna() & names.isin(selection)]
        if rows.empty:
            return {}

        frame = pd.DataFrame({NAME_COLUMN: rows[NAME_COLUMN].astype(str)}, index=rows.index)
        for metric in SUM_METRICS + MEAN_METRICS:
            frame[metric] = self._numeric_column(rows, metric)
        # Absent customer cells count as one distinct value, like any other raw value
        if UNIQUE_CUSTOMERS in rows.columns:
            frame[UNIQUE_CUSTOMERS] = rows[UNIQUE_CUSTOMERS].map(
                lambda v: np.nan if cell_kind(v) is CellKind.ABSENT else v
            ).astype(object)
        else:
            frame[UNIQUE_CUSTOMERS] = np.nan

        grouped = frame.groupby(NAME_COLUMN, sort=False)
        sums = grouped[SUM_METRICS].sum()
        means = grouped[MEAN_METRICS].mean().fillna(0.0)
        uniques = grouped[UNIQUE_CUSTOMERS].nunique(dropna=False)

        bundles = {}
        for name in sums.index:
            bundle = {}
            for metric in METRIC_ORDER:
                if metric in SUM_METRICS:
                    bundle[metric] = _plain_number(sums.at[name, metric])
                elif metric in MEAN_METRICS:
                    bundle[metric] = float(means.at[name, metric])
                else:
                    bundle[metric] = int(uniques.at[name])
            bundles[name] = bundle

        return {
            name: bundle
            for name, bundle in bundles.items()
            if bundle[MESSAGES_SENT] >= self.min_messages_sent
        }

    @staticmethod
    def _numeric_column(rows: pd.DataFrame, column: str) -> pd.Series:
        """Numeric cells as floats; text and absent cells become NaN."""
        if column not in rows.columns:
            return pd.Series(np.nan, index=rows.index, dtype=float)
        return rows[column].map(
            lambda v: float(v) if cell_kind(v) is CellKind.NUMBER else np.nan
        ).astype(float)
