"""Comparison Assembler — merges two periods' aggregates by agent name."""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd
from config.settings import (
    METRIC_ORDER,
    COMPARISON_NAME_KEY,
    COMPARISON_OLD_KEY,
    COMPARISON_NEW_KEY,
)


@dataclass(frozen=True)
class ComparisonEntry:
    """One agent's bundles for the old and the new period (either may be None)."""
    name: str
    old_data: Optional[Dict[str, float]] = None
    new_data: Optional[Dict[str, float]] = None

    def to_dict(self) -> dict:
        return {
            COMPARISON_NAME_KEY: self.name,
            COMPARISON_OLD_KEY: self.old_data,
            COMPARISON_NEW_KEY: self.new_data,
        }


def assemble(old_agg: dict, new_agg: dict) -> List[ComparisonEntry]:
    """Union of both aggregates: old keys first, then names only in the new period."""
    names = list(old_agg)
    names += [n for n in new_agg if n not in old_agg]
    return [
        ComparisonEntry(name=n, old_data=old_agg.get(n), new_data=new_agg.get(n))
        for n in names
    ]


def comparison_frame(entries: List[ComparisonEntry]) -> pd.DataFrame:
    """Long table (Name, Metric, Old, New, Change) for display and export."""
    rows = []
    for entry in entries:
        old = entry.old_data or {}
        new = entry.new_data or {}
        for metric in METRIC_ORDER:
            old_val = old.get(metric)
            new_val = new.get(metric)
            change = (
                new_val - old_val
                if old_val is not None and new_val is not None
                else None
            )
            rows.append({
                "Name": entry.name,
                "Metric": metric,
                "Old": old_val,
                "New": new_val,
                "Change": change,
            })
    return pd.DataFrame(rows, columns=["Name", "Metric", "Old", "New", "Change"])
