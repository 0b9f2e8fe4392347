"""Sidebar UI: the two period uploads and upload settings."""

import streamlit as st
from config.settings import (
    SUPPORTED_FILE_TYPES,
    OLD_PERIOD,
    NEW_PERIOD,
    PERIOD_LABELS,
    RESET_SELECTION_ON_UPLOAD,
)
from core.csv_parser import CSVParser
from ui.styles import file_card


def render_sidebar() -> tuple:
    """
    Render the sidebar with one upload widget per period.

    Returns:
        Tuple of ({period: uploaded_file or None}, reset_selection)
    """
    uploads = {}
    with st.sidebar:
        st.markdown(
            """
            <div style="text-align:center; padding: 0.5rem 0 1rem 0;">
                <div style="font-size: 1.4rem; font-weight: 800; color: #f1f5f9;">
                    ✦ Prestaties
                </div>
                <div style="font-size: 0.72rem; color: #64748b; text-transform: uppercase;
                            letter-spacing: 0.1em; margin-top: 4px;">
                    Periodes vergelijken
                </div>
            </div>
            """,
            unsafe_allow_html=True,
        )

        for period in (OLD_PERIOD, NEW_PERIOD):
            st.markdown(
                f'<div class="sidebar-label">📂 {PERIOD_LABELS[period]}</div>',
                unsafe_allow_html=True,
            )
            uploaded = st.file_uploader(
                PERIOD_LABELS[period],
                type=SUPPORTED_FILE_TYPES,
                key=f"upload_{period}",
                label_visibility="collapsed",
            )
            if uploaded is not None:
                st.markdown(file_card(CSVParser.get_file_info(uploaded)), unsafe_allow_html=True)
            uploads[period] = uploaded

        st.markdown('<hr style="margin: 1rem 0; opacity: 0.15;">', unsafe_allow_html=True)
        st.markdown('<div class="sidebar-label">⚙️ Instellingen</div>', unsafe_allow_html=True)

        reset_selection = st.checkbox(
            "Selectie resetten bij upload",
            value=RESET_SELECTION_ON_UPLOAD,
            help="Selecteer na elke upload weer alle medewerkers.",
        )

    return uploads, reset_selection
