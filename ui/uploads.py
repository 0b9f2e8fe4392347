"""Applies the sidebar's uploads to the AnalysisState."""

import logging

from core.analysis_state import AnalysisState, load_period, clear_period
from core.csv_parser import CSVParser
from core.errors import ParseError

logger = logging.getLogger(__name__)


def apply_uploads(
    state: AnalysisState,
    uploads: dict,
    file_ids: dict,
    reset_selection: bool,
    parser: CSVParser = None,
) -> tuple:
    """
    Load new uploads and forget removed ones.

    Args:
        state: Current AnalysisState
        uploads: {period: UploadedFile or None} from the sidebar
        file_ids: {period: file_id} of uploads already applied; updated in place
        reset_selection: Select every agent again after a change
        parser: CSVParser to use

    Returns:
        Tuple of (new state, {period: ParseError} for rejected files)
    """
    parser = parser or CSVParser()
    errors = {}

    for period, uploaded in uploads.items():
        if uploaded is None:
            if period in file_ids:
                del file_ids[period]
                logger.info("Upload for %s period removed", period)
                state = clear_period(state, period, reset_selection)
            continue

        if file_ids.get(period) == uploaded.file_id:
            continue
        file_ids[period] = uploaded.file_id

        try:
            records = parser.parse(uploaded)
        except ParseError as e:
            logger.warning("Upload for %s period rejected: %s", period, e)
            errors[period] = e
            state = clear_period(state, period, reset_selection)
            continue

        logger.info("Loaded %d rows for %s period from %s", len(records), period, uploaded.name)
        state = load_period(state, period, records, uploaded.name, reset_selection)

    return state, errors
