# app/utils.py
import os
from datetime import datetime, timezone
from dateutil import parser
from loguru import logger

EMPTY_INPUT_MESSAGE = "Please enter a comment to analyze"
NO_SIGNAL_MESSAGE = (
    "Couldn't detect sentiment. Try a longer comment or add some context/emojis."
)

# label -> (icon, accent color, css class)
SENTIMENT_STYLES = {
    "positive": ("😃", "#22c55e", "positive"),
    "neutral": ("😐", "#eab308", "neutral"),
    "negative": ("😞", "#ef4444", "negative"),
}


def sentiment_style(label):
    return SENTIMENT_STYLES.get(label, SENTIMENT_STYLES["neutral"])


def format_confidence(confidence):
    """0.8734 -> '87.3%'"""
    return f"{confidence * 100:.1f}%"


def parse_non_negative_int(raw, default):
    """Parse an int setting from env. Returns None on bad input so the caller can warn."""
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def pretty_time_ago(ts, now=None):
    if not ts:
        return ""
    if isinstance(ts, str):
        try:
            dt = parser.isoparse(ts)
        except ValueError:
            return ts
    else:
        dt = ts
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    now = now or datetime.now(tz=timezone.utc)
    seconds = (now - dt).total_seconds()
    if seconds < 60:
        return f"{int(seconds)}s ago"
    if seconds < 3600:
        return f"{int(seconds//60)}m ago"
    if seconds < 86400:
        return f"{int(seconds//3600)}h ago"
    return dt.strftime("%Y-%m-%d %H:%M UTC")


def env_int(name, default):
    """Read a non-negative int setting from env, warning and falling back on bad values."""
    raw = os.getenv(name)
    value = parse_non_negative_int(raw, default)
    if value is None:
        logger.warning("Invalid {}={!r}, using {}", name, raw, default)
        return default
    return value
