"""
Agent Performance Comparison — Main Application
Upload two periods → Select agents → Aggregate → LLM comparison
"""

import logging

import streamlit as st
from dotenv import load_dotenv
from config.settings import APP_TITLE, APP_ICON, APP_LAYOUT, PERIOD_LABELS
from agents.comparison_agent import ComparisonAgent
from ui.styles import CUSTOM_CSS
from ui.sidebar import render_sidebar
from ui.session import get_state, set_state
from ui.uploads import apply_uploads
from ui.agent_selection_view import render_agent_selection
from ui.analysis_view import render_comparison, render_analysis
from utils.helpers import configure_logging

load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)

# Page config
st.set_page_config(
    page_title=APP_TITLE,
    page_icon=APP_ICON,
    layout=APP_LAYOUT,
)

# Inject custom CSS
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

# Sidebar
uploads, reset_selection = render_sidebar()

# ── Apply new uploads ──
if "upload_file_ids" not in st.session_state:
    st.session_state["upload_file_ids"] = {}
state, upload_errors = apply_uploads(
    get_state(), uploads, st.session_state["upload_file_ids"], reset_selection
)
set_state(state)
for period, error in upload_errors.items():
    st.error(f"❌ {PERIOD_LABELS[period]}: {error}")

# ── Welcome Screen ──
if not state.has_data:
    st.markdown(
        """
        <div style="padding: 2rem 0;">
            <div class="hero-badge">Support · Prestaties</div>
            <h1 style="margin-bottom: 0.3rem;">Prestaties Vergelijken</h1>
            <p class="hero-subtitle">
                Upload in de zijbalk de CSV files van de periodes die je wil vergelijken.
                Kies daarna de medewerkers en laat de AI de trends samenvatten.
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.stop()

st.markdown(
    f"""
    <div style="margin-bottom: 1rem;">
        <h1 style="font-size: 1.8rem !important; margin-bottom: 0;">Prestaties Vergelijken</h1>
        <span style="font-family: 'JetBrains Mono', monospace; font-size: 0.78rem; color: #475569;">
            {state.old_filename or '–'} → {state.new_filename or '–'}
        </span>
    </div>
    """,
    unsafe_allow_html=True,
)

render_agent_selection(state)
st.markdown("<br>", unsafe_allow_html=True)

# ── Analyze ──
analyze_clicked = st.button(
    "Analyseren..." if state.loading else "⚡ Prestaties Analyseren",
    type="primary",
    use_container_width=True,
    disabled=not state.can_analyze,
)

if analyze_clicked:
    with st.spinner("🔍 Prestaties analyseren..."):
        try:
            state = ComparisonAgent().run(state, on_change=set_state)
        except Exception as e:
            logger.exception("Analysis crashed")
            st.error(f"❌ Fout tijdens de analyse: {str(e)}")
            state = get_state()

    if state.warning:
        st.warning(state.warning)

st.markdown("<br>", unsafe_allow_html=True)
render_comparison(state)
st.markdown("<br>", unsafe_allow_html=True)
render_analysis(state)
