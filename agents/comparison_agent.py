"""
Comparison Agent — Orchestrates one analysis request.

Aggregates both periods for the selected agents, merges them into a
comparison and asks the text-completion service for an interpretation,
moving the AnalysisState through LOADING to DONE or FAILED.
"""

import logging
from typing import Callable, Optional

from config.settings import OLD_PERIOD, NEW_PERIOD
from core.analysis_state import (
    AnalysisState,
    start_analysis,
    finish_analysis,
    fail_analysis,
    warn,
)
from core.comparison import assemble
from core.errors import RequestError, ValidationError
from core.insight_requester import InsightRequester
from core.period_aggregator import PeriodAggregator

logger = logging.getLogger(__name__)


class ComparisonAgent:
    """
    Aggregate → Assemble → Request.

    Usage:
        agent = ComparisonAgent()
        state = agent.run(state, on_change=publish)
    """

    def __init__(self, aggregator: PeriodAggregator = None, requester: InsightRequester = None):
        self.aggregator = aggregator or PeriodAggregator()
        self.requester = requester or InsightRequester()

    def compare(self, state: AnalysisState) -> list:
        """Comparison entries for the current datasets and selection."""
        selection = state.directory.selection
        old_agg = self.aggregator.aggregate(state.records_for(OLD_PERIOD), selection)
        new_agg = self.aggregator.aggregate(state.records_for(NEW_PERIOD), selection)
        return assemble(old_agg, new_agg)

    def run(
        self,
        state: AnalysisState,
        on_change: Optional[Callable[[AnalysisState], None]] = None,
    ) -> AnalysisState:
        """
        Run one analysis.

        Args:
            state: Current AnalysisState
            on_change: Called with every state the run passes through

        Returns:
            The final state: DONE, FAILED, or unchanged with a warning when
            no agent is selected
        """
        publish = on_change or (lambda s: None)

        try:
            loading = start_analysis(state)
        except ValidationError as e:
            logger.warning("Analysis refused: %s", e)
            final = warn(state, str(e))
            publish(final)
            return final

        publish(loading)
        final = fail_analysis(loading, "Analyse afgebroken.")
        entries = []
        try:
            entries = self.compare(loading)
            text = self.requester.request(entries, loading.directory.selection)
            final = finish_analysis(loading, text, entries)
        except RequestError as e:
            logger.error("Analysis failed: %s", e)
            final = fail_analysis(loading, str(e), entries)
        finally:
            publish(final)
        return final
