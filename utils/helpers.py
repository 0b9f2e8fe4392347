"""Utility functions used across modules."""

import logging
from datetime import datetime
from io import BytesIO

import pandas as pd
from config.settings import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging once for the Streamlit process."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_number(n) -> str:
    """Format numbers with thousands separators; floats to two decimals."""
    if n is None:
        return "–"
    if isinstance(n, float) and not n.is_integer():
        return f"{n:,.2f}"
    return f"{int(n):,}"


def dataframe_to_excel_bytes(df: pd.DataFrame, sheet_name: str = "Vergelijking") -> bytes:
    """Convert DataFrame to Excel bytes for download."""
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return buffer.getvalue()


def analysis_to_markdown(analysis: str, old_filename: str = "", new_filename: str = "") -> str:
    """Wrap the model's answer in a small downloadable markdown report."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    lines = [
        "# Prestaties Inzichten",
        f"*Gegenereerd op {now}*\n",
    ]
    if old_filename or new_filename:
        lines.append(f"- Oude Data: {old_filename or '–'}")
        lines.append(f"- Nieuwe Data: {new_filename or '–'}\n")
    lines.append(analysis)
    return "\n".join(lines)
