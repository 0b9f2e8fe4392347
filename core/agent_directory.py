"""Agent Directory — the agent names seen in the uploads and the user's selection."""

from dataclasses import dataclass, field

import pandas as pd
from config.settings import NAME_COLUMN


def collect_agent_names(old_records: pd.DataFrame = None, new_records: pd.DataFrame = None) -> list:
    """
    Union of the non-empty Name values of both datasets, sorted.

    Either dataset may be None or lack a Name column.
    """
    names = set()
    for records in (old_records, new_records):
        if records is None or NAME_COLUMN not in records.columns:
            continue
        for value in records[NAME_COLUMN].dropna():
            if value != "":
                names.add(str(value))
    return sorted(names)


@dataclass(frozen=True)
class AgentDirectory:
    """Known agent names plus the subset currently selected for analysis."""
    names: tuple = ()
    selection: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_names(cls, names) -> "AgentDirectory":
        names = tuple(names)
        return cls(names=names, selection=frozenset(names))

    @property
    def all_selected(self) -> bool:
        return bool(self.names) and self.selection >= set(self.names)

    def is_selected(self, name: str) -> bool:
        return name in self.selection

    def refresh(self, names, reset: bool = False) -> "AgentDirectory":
        """
        Recompute the directory after an upload.

        Previously selected names that are still present stay selected and
        names never seen before are added. A name the user deselected stays
        deselected. With reset=True every name is selected again.
        """
        names = tuple(names)
        if reset:
            return AgentDirectory.from_names(names)

        known = set(self.names)
        selection = {
            n for n in names
            if n in self.selection or n not in known
        }
        return AgentDirectory(names=names, selection=frozenset(selection))

    def toggle(self, name: str) -> "AgentDirectory":
        if name not in self.names:
            return self
        if name in self.selection:
            return AgentDirectory(self.names, self.selection - {name})
        return AgentDirectory(self.names, self.selection | {name})

    def toggle_all(self) -> "AgentDirectory":
        """Clear the selection when everything is selected, otherwise select all."""
        if self.all_selected:
            return AgentDirectory(self.names, frozenset())
        return AgentDirectory.from_names(self.names)
