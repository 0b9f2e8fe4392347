"""Parses uploaded CSV exports into per-row records with typed cells."""

import io
import logging
import re
import warnings
from dataclasses import dataclass
from enum import Enum
from numbers import Number

import pandas as pd
from config.settings import TEXT_COLUMNS
from core.errors import ParseError

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"^\s*-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$")
INTEGER_PATTERN = re.compile(r"^-?\d+$")


class CellKind(Enum):
    NUMBER = "number"
    TEXT = "text"
    ABSENT = "absent"


def cell_kind(value) -> CellKind:
    """Classify a parsed cell as number, text or absent."""
    if value is None:
        return CellKind.ABSENT
    if isinstance(value, bool):
        return CellKind.TEXT
    if isinstance(value, Number):
        return CellKind.ABSENT if pd.isna(value) else CellKind.NUMBER
    return CellKind.TEXT


def coerce_cell(value):
    """Turn a raw CSV cell into an int, a float, a string, or None when empty."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    text = str(value)
    if not text.strip():
        return None
    if NUMBER_PATTERN.match(text):
        stripped = text.strip()
        if INTEGER_PATTERN.match(stripped):
            return int(stripped)
        return float(stripped)
    return text


def _text_cell(value):
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    return value if value != "" else None


@dataclass
class ParseReport:
    """What the parser had to tolerate while reading a file."""
    rows: int = 0
    columns: int = 0
    truncated_rows: int = 0
    padded_rows: int = 0

    @property
    def has_anomalies(self) -> bool:
        return bool(self.truncated_rows or self.padded_rows)


class CSVParser:
    """
    Read CSV text into a DataFrame, one row per record.

    The first line is the header. Rows with too many cells are truncated to
    the header width and rows with too few are padded with absent cells;
    neither aborts the parse.
    """

    ENCODINGS = ("utf-8-sig", "latin-1")

    def __init__(self, text_columns: list = None):
        self.text_columns = set(TEXT_COLUMNS if text_columns is None else text_columns)

    def parse(self, source) -> pd.DataFrame:
        """
        Parse CSV content into records.

        Args:
            source: bytes, str, or a file-like object (e.g. Streamlit UploadedFile)

        Returns:
            pd.DataFrame whose cells are int, float, str or None

        Raises:
            ParseError: If the content has no header or cannot be read
        """
        df, _ = self.parse_with_report(source)
        return df

    def parse_with_report(self, source) -> tuple:
        """Parse and also return the ParseReport describing tolerated rows."""
        text = self._read_text(source)
        if not text.strip():
            raise ParseError("Het bestand is leeg.")

        report = ParseReport()

        def _truncate(bad_line: list) -> list:
            report.truncated_rows += 1
            return bad_line[:width]

        try:
            header = pd.read_csv(io.StringIO(text), nrows=0, dtype=str)
            width = len(header.columns)
            # Long rows are truncated by _truncate; pandas still warns about each one
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", pd.errors.ParserWarning)
                raw = pd.read_csv(
                    io.StringIO(text),
                    dtype=str,
                    keep_default_na=False,
                    index_col=False,
                    engine="python",
                    on_bad_lines=_truncate,
                )
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise ParseError(f"CSV kon niet worden gelezen: {e}") from e

        # With keep_default_na=False only padded cells are NaN
        report.padded_rows = int(raw.isna().any(axis=1).sum())

        df = pd.DataFrame(index=raw.index)
        for col in raw.columns:
            if col in self.text_columns:
                df[col] = raw[col].map(_text_cell).astype(object)
            else:
                df[col] = raw[col].map(coerce_cell).astype(object)

        report.rows, report.columns = df.shape
        if report.has_anomalies:
            logger.info(
                "Tolerated ragged CSV rows: %d truncated, %d padded (of %d)",
                report.truncated_rows, report.padded_rows, report.rows,
            )
        return df, report

    def _read_text(self, source) -> str:
        """Decode the upload, trying UTF-8 first and latin-1 as fallback."""
        if hasattr(source, "read"):
            if hasattr(source, "seek"):
                source.seek(0)
            source = source.read()

        if isinstance(source, str):
            return source
        if not isinstance(source, (bytes, bytearray)):
            raise ParseError(f"Niet ondersteunde CSV-bron: {type(source).__name__}")

        for encoding in self.ENCODINGS:
            try:
                return bytes(source).decode(encoding)
            except UnicodeDecodeError:
                continue
        raise ParseError("Het bestand kon niet worden gedecodeerd.")

    @staticmethod
    def get_file_info(uploaded_file) -> dict:
        """Extract metadata about the uploaded file."""
        return {
            "filename": uploaded_file.name,
            "size_bytes": uploaded_file.size,
            "size_readable": (
                f"{uploaded_file.size / 1024:.1f} KB"
                if uploaded_file.size < 1024 ** 2
                else f"{uploaded_file.size / (1024 ** 2):.1f} MB"
            ),
            "type": uploaded_file.name.split(".")[-1].lower(),
        }
