# app/streamlit_app.py


import os
import sys
import time
from dotenv import load_dotenv

# Load .env file at the very beginning
load_dotenv()

from datetime import datetime, timezone
import pandas as pd
import streamlit as st
import plotly.express as px
from loguru import logger

# local utils
from utils import (
    EMPTY_INPUT_MESSAGE,
    NO_SIGNAL_MESSAGE,
    env_int,
    format_confidence,
    pretty_time_ago,
    sentiment_style,
)

# Allow importing project modules (nlp) when running via Streamlit
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from nlp.sentiment import classify

# ---- configure ----
st.set_page_config(page_title="Comment Sentiment", layout="centered")

logger.remove()
logger.add(sys.stderr, level=os.getenv("LOG_LEVEL", "INFO").upper())

ANALYSIS_DELAY_MS = env_int("ANALYSIS_DELAY_MS", 600)
HISTORY_LIMIT = env_int("HISTORY_LIMIT", 20)

if "result" not in st.session_state:
    st.session_state.result = None
    st.session_state.history = []


def analyze_comment(comment: str):
    """Run the classifier behind a short artificial delay and record the outcome."""
    if not comment.strip():
        st.toast(EMPTY_INPUT_MESSAGE, icon="❌")
        return

    with st.spinner("Analyzing..."):
        time.sleep(ANALYSIS_DELAY_MS / 1000)
        detected = classify(comment)

    if detected is None:
        logger.info("No sentiment signal in {} chars of input", len(comment))
        st.toast(NO_SIGNAL_MESSAGE, icon="❌")
        return

    logger.info(
        "Classified comment as {} ({:.3f})", detected.sentiment, detected.confidence
    )
    st.session_state.result = detected
    st.session_state.history.insert(
        0,
        {
            "comment": comment.strip(),
            "sentiment": detected.sentiment,
            "confidence": detected.confidence,
            "analyzed_at": datetime.now(timezone.utc),
        },
    )
    del st.session_state.history[HISTORY_LIMIT:]


# ---- UI ----
st.markdown(
    """
    <style>
        .cs-result-card{
            border-radius: 14px;
            padding: 24px;
            margin-top: 12px;
            text-align: center;
            border: 1px solid var(--cs-border);
            background: var(--cs-bg);
        }
        .cs-result-card.positive{ --cs-bg: rgba(34,197,94,.12); --cs-border: rgba(34,197,94,.35); }
        .cs-result-card.neutral{ --cs-bg: rgba(234,179,8,.12); --cs-border: rgba(234,179,8,.35); }
        .cs-result-card.negative{ --cs-bg: rgba(239,68,68,.12); --cs-border: rgba(239,68,68,.35); }
        .cs-result-icon{ font-size: 4rem; line-height: 1.1; }
        .cs-result-label{
            font-size: 1.6rem;
            font-weight: 700;
            text-transform: capitalize;
            margin: 8px 0 4px;
        }
        .cs-result-confidence{ color: #6b7280; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.title("Comment Sentiment")
st.caption("Emoji and keyword heuristics, no model and no network calls")

comment = st.text_area(
    "Comment",
    key="comment",
    height=140,
    placeholder="Enter a YouTube comment here to analyze its sentiment...",
    label_visibility="collapsed",
)

if st.button("Analyze Sentiment", type="primary", use_container_width=True):
    analyze_comment(comment)

result = st.session_state.result
if result is not None:
    icon, color, css_class = sentiment_style(result.sentiment)
    st.markdown(
        f"""
        <div class="cs-result-card {css_class}">
            <div class="cs-result-icon">{icon}</div>
            <div class="cs-result-label" style="color:{color}">{result.sentiment}</div>
            <div class="cs-result-confidence">Confidence: {format_confidence(result.confidence)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

# ---- session history ----
if st.session_state.history:
    st.markdown("### This session")
    df = pd.DataFrame(st.session_state.history)
    df["when"] = df["analyzed_at"].apply(pretty_time_ago)
    df["confidence"] = df["confidence"].apply(format_confidence)
    st.dataframe(
        df[["when", "sentiment", "confidence", "comment"]],
        hide_index=True,
        use_container_width=True,
    )

    counts = (
        df["sentiment"]
        .value_counts()
        .reindex(["positive", "neutral", "negative"], fill_value=0)
        .reset_index()
    )
    counts.columns = ["sentiment", "count"]
    fig = px.bar(
        counts,
        x="sentiment",
        y="count",
        color="sentiment",
        color_discrete_map={
            label: sentiment_style(label)[1] for label in counts["sentiment"]
        },
    )
    fig.update_layout(showlegend=False, height=260, margin=dict(l=10, r=10, t=10, b=10))
    st.plotly_chart(fig, use_container_width=True)

    if st.button("Clear history"):
        st.session_state.history = []
        st.session_state.result = None
        st.rerun()
