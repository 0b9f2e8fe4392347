"""Access to the AnalysisState kept in st.session_state."""

import streamlit as st
from core.analysis_state import AnalysisState

STATE_KEY = "analysis_state"


def get_state() -> AnalysisState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AnalysisState()
    return st.session_state[STATE_KEY]


def set_state(state: AnalysisState) -> None:
    st.session_state[STATE_KEY] = state
