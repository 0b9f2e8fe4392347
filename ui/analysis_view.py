"""Comparison table, chart, insight panel and downloads."""

import streamlit as st
from config.settings import REQUEST_FAILED_MESSAGE, MESSAGES_SENT, PERIOD_LABELS, OLD_PERIOD, NEW_PERIOD
from core.analysis_state import AnalysisState, Phase
from core.comparison import comparison_frame
from core.comparison_visualizer import ComparisonVisualizer
from utils.helpers import analysis_to_markdown, dataframe_to_excel_bytes, format_number
from ui.styles import section_header


def render_comparison(state: AnalysisState):
    """Per-agent metric table and the old-vs-new chart."""
    if not state.comparison:
        return

    st.markdown(section_header("📋", "Vergelijking"), unsafe_allow_html=True)
    table = comparison_frame(state.comparison)

    old_total = sum((e.old_data or {}).get(MESSAGES_SENT, 0) for e in state.comparison)
    new_total = sum((e.new_data or {}).get(MESSAGES_SENT, 0) for e in state.comparison)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Medewerkers", format_number(len(state.comparison)))
    with col2:
        st.metric(f"{MESSAGES_SENT} · {PERIOD_LABELS[OLD_PERIOD]}", format_number(old_total))
    with col3:
        st.metric(
            f"{MESSAGES_SENT} · {PERIOD_LABELS[NEW_PERIOD]}",
            format_number(new_total),
            delta=format_number(new_total - old_total),
        )

    tab_table, tab_chart = st.tabs(["📋 Tabel", "📈 Grafiek"])
    with tab_table:
        st.dataframe(table, use_container_width=True, hide_index=True)
    with tab_chart:
        fig = ComparisonVisualizer(state.comparison).metric_chart()
        if fig is not None:
            st.plotly_chart(fig, use_container_width=True)

    st.download_button(
        label="⬇ Download Excel",
        data=dataframe_to_excel_bytes(table),
        file_name="vergelijking.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )


def render_analysis(state: AnalysisState):
    """The model's markdown answer, or the failure message."""
    if state.phase is Phase.FAILED:
        st.error(f"❌ {REQUEST_FAILED_MESSAGE}")
        st.caption(state.error)
        return
    if state.phase is not Phase.DONE or not state.analysis:
        return

    st.markdown(section_header("💡", "Prestaties Inzichten"), unsafe_allow_html=True)
    with st.container(border=True):
        st.markdown(state.analysis)

    st.download_button(
        label="⬇ Download Rapport (.md)",
        data=analysis_to_markdown(
            state.analysis, state.old_filename, state.new_filename
        ).encode("utf-8"),
        file_name="prestaties_inzichten.md",
        mime="text/markdown",
        use_container_width=True,
    )
