"""
Analysis state — everything the UI shows, as one immutable value.

Transitions are plain functions returning a new AnalysisState:

    IDLE ──start──► LOADING ──finish──► DONE
                       └────fail─────► FAILED

start_analysis refuses an empty selection (ValidationError) and a request
that is already loading.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import pandas as pd
from config.settings import OLD_PERIOD, NEW_PERIOD, RESET_SELECTION_ON_UPLOAD
from core.agent_directory import AgentDirectory, collect_agent_names
from core.insight_requester import require_selection


class Phase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class AnalysisState:
    old_records: Optional[pd.DataFrame] = field(default=None, compare=False, repr=False)
    new_records: Optional[pd.DataFrame] = field(default=None, compare=False, repr=False)
    old_filename: str = ""
    new_filename: str = ""
    directory: AgentDirectory = field(default_factory=AgentDirectory)
    phase: Phase = Phase.IDLE
    analysis: Optional[str] = None
    comparison: tuple = ()
    error: Optional[str] = None
    warning: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def has_data(self) -> bool:
        return bool(self.directory.names)

    @property
    def can_analyze(self) -> bool:
        return not self.loading and bool(self.directory.selection)

    def records_for(self, period: str) -> Optional[pd.DataFrame]:
        return self.old_records if period == OLD_PERIOD else self.new_records


def load_period(
    state: AnalysisState,
    period: str,
    records: pd.DataFrame,
    filename: str = "",
    reset_selection: bool = RESET_SELECTION_ON_UPLOAD,
) -> AnalysisState:
    """Replace one period's dataset and refresh the agent directory."""
    if period == OLD_PERIOD:
        state = replace(state, old_records=records, old_filename=filename)
    elif period == NEW_PERIOD:
        state = replace(state, new_records=records, new_filename=filename)
    else:
        raise ValueError(f"Unknown period: {period!r}")

    names = collect_agent_names(state.old_records, state.new_records)
    return replace(
        state,
        directory=state.directory.refresh(names, reset=reset_selection),
        warning=None,
    )


def clear_period(
    state: AnalysisState,
    period: str,
    reset_selection: bool = RESET_SELECTION_ON_UPLOAD,
) -> AnalysisState:
    """Forget one period's dataset (the uploader was emptied)."""
    return load_period(state, period, None, "", reset_selection)


def toggle_agent(state: AnalysisState, name: str) -> AnalysisState:
    return replace(state, directory=state.directory.toggle(name), warning=None)


def toggle_all_agents(state: AnalysisState) -> AnalysisState:
    return replace(state, directory=state.directory.toggle_all(), warning=None)


def start_analysis(state: AnalysisState) -> AnalysisState:
    require_selection(state.directory.selection)
    if state.loading:
        raise RuntimeError("An analysis is already running.")
    return replace(
        state,
        phase=Phase.LOADING,
        analysis=None,
        comparison=(),
        error=None,
        warning=None,
    )


def finish_analysis(state: AnalysisState, text: str, entries=()) -> AnalysisState:
    return replace(
        state, phase=Phase.DONE, analysis=text, comparison=tuple(entries), error=None
    )


def fail_analysis(state: AnalysisState, message: str, entries=()) -> AnalysisState:
    return replace(
        state, phase=Phase.FAILED, analysis=None, comparison=tuple(entries), error=message
    )


def warn(state: AnalysisState, message: str) -> AnalysisState:
    return replace(state, warning=message)
