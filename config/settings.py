# config/settings.py
"""All application constants and thresholds."""

import os

# ─── App ───────────────────────────────────────────────
APP_TITLE = "📊 Prestaties Vergelijken"
APP_ICON = "📊"
APP_LAYOUT = "wide"
SUPPORTED_FILE_TYPES = ["csv"]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# ─── Periods ───────────────────────────────────────────
OLD_PERIOD = "old"
NEW_PERIOD = "new"
PERIOD_LABELS = {
    OLD_PERIOD: "Oude Data",
    NEW_PERIOD: "Nieuwe Data",
}

# ─── CSV columns ───────────────────────────────────────
NAME_COLUMN = "Name"
MESSAGES_SENT = "Messages Sent"
UNIQUE_CUSTOMERS = "Unique Customers Messaged"

# Columns kept verbatim (never coerced to numbers)
TEXT_COLUMNS = [NAME_COLUMN]

# Summed across rows
SUM_METRICS = [
    MESSAGES_SENT,
    "Unique Conversations Messaged",
    "Conversations Marked Done",
    "Total Time Logged In (ms)",
    "Messages Sent With Shortcuts",
]

# Arithmetic mean of the rows that carry a value
MEAN_METRICS = [
    "Avg Conversation Handle Time (s)",
    "Avg Sent Messages Per Conversation",
    "Avg Sent Messages Per Customer",
    "First Contact Resolution Rate",
    "Avg Message Response Times (ms)",
    "Avg First Response Time (ms)",
    "Median First Response Time (ms)",
    "Avg Time to First Resolution (ms)",
    "Median Time to First Resolution (ms)",
    "Percent of Messages Sent With Shortcuts",
]

# Key order of a finished metric bundle
METRIC_ORDER = [
    MESSAGES_SENT,
    "Unique Conversations Messaged",
    "Conversations Marked Done",
    UNIQUE_CUSTOMERS,
    "Avg Conversation Handle Time (s)",
    "Avg Sent Messages Per Conversation",
    "Avg Sent Messages Per Customer",
    "First Contact Resolution Rate",
    "Avg Message Response Times (ms)",
    "Avg First Response Time (ms)",
    "Median First Response Time (ms)",
    "Avg Time to First Resolution (ms)",
    "Median Time to First Resolution (ms)",
    "Total Time Logged In (ms)",
    "Messages Sent With Shortcuts",
    "Percent of Messages Sent With Shortcuts",
]

# ─── Aggregation ───────────────────────────────────────
MIN_MESSAGES_SENT = 10
RESET_SELECTION_ON_UPLOAD = False

# ─── Comparison ────────────────────────────────────────
COMPARISON_NAME_KEY = "Name"
COMPARISON_OLD_KEY = "Oude Data"
COMPARISON_NEW_KEY = "Nieuwe Data"
CHART_METRIC = MESSAGES_SENT
CHART_HEIGHT = 400

# ─── LLM ───────────────────────────────────────────────
OPENAI_API_URL = os.environ.get(
    "OPENAI_API_URL", "https://api.openai.com/v1/chat/completions"
)
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_MAX_TOKENS = int(os.environ.get("OPENAI_MAX_TOKENS", "2000"))
OPENAI_TIMEOUT_SECONDS = float(os.environ.get("OPENAI_TIMEOUT_SECONDS", "60"))

# Checked in order at request time
API_TOKEN_ENV_VARS = ["OPENAI_API_TOKEN", "OPENAI_API_KEY"]

PROMPT_TEMPLATE = """Vergelijk de medewerker prestaties voor de volgende periodes:
{comparison}
Identificeer prestatietrends, verbeteringen en gebieden die verbetering behoeven."""

# ─── Messages (user facing) ────────────────────────────
EMPTY_SELECTION_MESSAGE = "Selecteer tenminste één medewerker voor analyse."
REQUEST_FAILED_MESSAGE = "De analyse kon niet worden opgehaald."
