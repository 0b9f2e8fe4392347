"""Agent selection: one checkbox per agent plus a select-all toggle."""

import streamlit as st
from core.analysis_state import AnalysisState, toggle_agent, toggle_all_agents
from ui.session import get_state, set_state
from ui.styles import section_header

CHECKBOX_COLUMNS = 4


def _checkbox_key(name: str) -> str:
    return f"agent_{name}"


def _on_toggle(name: str):
    set_state(toggle_agent(get_state(), name))


def _on_toggle_all():
    set_state(toggle_all_agents(get_state()))


def render_agent_selection(state: AnalysisState):
    """Render the checkboxes for every agent found in the uploads."""
    directory = state.directory
    st.markdown(section_header("👥", "Selecteer Medewerkers"), unsafe_allow_html=True)

    st.markdown(
        f'<div class="agent-count">{len(directory.selection)} / {len(directory.names)} geselecteerd</div>',
        unsafe_allow_html=True,
    )
    st.button(
        "Deselecteer Alles" if directory.all_selected else "Selecteer Alles",
        key="toggle_all_agents",
        on_click=_on_toggle_all,
        disabled=state.loading,
    )

    cols = st.columns(CHECKBOX_COLUMNS)
    for i, name in enumerate(directory.names):
        key = _checkbox_key(name)
        # Widget value follows the state, which callbacks already updated
        st.session_state[key] = directory.is_selected(name)
        with cols[i % CHECKBOX_COLUMNS]:
            st.checkbox(
                name,
                key=key,
                on_change=_on_toggle,
                args=(name,),
                disabled=state.loading,
            )
