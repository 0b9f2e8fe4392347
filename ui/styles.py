"""Custom CSS styling for the app — injected via st.markdown."""

CUSTOM_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@300;500;700&family=JetBrains+Mono:wght@400;500&display=swap');

/* ── Global ── */
.stApp {
    background: #0a0e1a;
    color: #c9d1d9;
    font-family: 'DM Sans', sans-serif;
}

.main .block-container {
    padding-top: 2rem;
    padding-bottom: 4rem;
    max-width: 1100px;
}

h1 {
    font-family: 'DM Sans', sans-serif !important;
    color: #f1f5f9 !important;
    font-weight: 700 !important;
    letter-spacing: -0.03em !important;
}

/* ── Sidebar ── */
[data-testid="stSidebar"] {
    background: linear-gradient(180deg, #0d1225 0%, #111832 50%, #0d1225 100%);
    border-right: 1px solid rgba(99, 102, 241, 0.15);
}

[data-testid="stSidebar"] [data-testid="stFileUploader"] {
    border: 1.5px dashed rgba(99, 102, 241, 0.35);
    border-radius: 12px;
    padding: 0.5rem;
    background: rgba(99, 102, 241, 0.04);
}

.sidebar-label {
    font-size: 0.75rem;
    color: #64748b;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    font-weight: 600;
    margin: 12px 0 8px 0;
}

.file-card {
    background: rgba(99, 102, 241, 0.08);
    border: 1px solid rgba(99, 102, 241, 0.2);
    border-radius: 10px;
    padding: 10px 14px;
    margin: 8px 0;
}

.file-card .file-name {
    font-weight: 600;
    color: #e2e8f0;
    font-size: 0.85rem;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
}

.file-card .file-meta {
    font-family: 'JetBrains Mono', monospace;
    color: #64748b;
    font-size: 0.72rem;
    margin-top: 4px;
}

/* ── Buttons ── */
.stButton > button {
    border-radius: 10px;
    font-weight: 600;
}

.stButton > button[kind="primary"] {
    background: linear-gradient(135deg, #6366f1 0%, #8b5cf6 100%);
    color: white;
    border: none;
    box-shadow: 0 4px 15px rgba(99, 102, 241, 0.3);
}

.stDownloadButton > button {
    background: rgba(34, 197, 94, 0.1);
    border: 1px solid rgba(34, 197, 94, 0.3);
    color: #4ade80;
    border-radius: 10px;
    font-weight: 600;
}

/* ── Welcome hero ── */
.hero-badge {
    display: inline-block;
    background: rgba(99, 102, 241, 0.15);
    border: 1px solid rgba(99, 102, 241, 0.25);
    border-radius: 20px;
    padding: 6px 16px;
    font-size: 0.8rem;
    color: #a5b4fc;
    text-transform: uppercase;
    font-weight: 600;
    margin-bottom: 1rem;
}

.hero-subtitle {
    color: #64748b;
    font-size: 1.1rem;
    line-height: 1.7;
    max-width: 700px;
}

/* ── Agent checkboxes ── */
.agent-count {
    font-family: 'JetBrains Mono', monospace;
    font-size: 0.78rem;
    color: #64748b;
    margin-bottom: 8px;
}

/* ── Section headers with accent ── */
.section-header {
    display: flex;
    align-items: center;
    gap: 10px;
    margin-bottom: 1rem;
    margin-top: 0.5rem;
}

.section-header .accent-bar {
    width: 4px;
    height: 24px;
    background: linear-gradient(180deg, #6366f1, #8b5cf6);
    border-radius: 2px;
}

.section-header .title {
    font-weight: 700;
    color: #e2e8f0;
    font-size: 1.15rem;
}
</style>
"""


def section_header(icon: str, title: str) -> str:
    """Generate an HTML section header with accent bar."""
    return f"""
    <div class="section-header">
        <div class="accent-bar"></div>
        <div class="title">{icon} {title}</div>
    </div>
    """


def file_card(info: dict) -> str:
    """Small card with the uploaded file's name and size."""
    return f"""
    <div class="file-card">
        <div class="file-name">📄 {info['filename']}</div>
        <div class="file-meta">{info['type'].upper()} · {info['size_readable']}</div>
    </div>
    """
