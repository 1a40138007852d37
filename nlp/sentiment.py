# nlp/sentiment.py
"""
Heuristic comment sentiment: emoji tally + word lexicon, no model.

classify(text) returns ClassificationResult(sentiment, confidence) or None
sentiment: 'positive'|'neutral'|'negative'
confidence: in [0, 0.99]

None means either empty/whitespace input or no emoji and no words at all.
"""
from typing import NamedTuple, Optional

from loguru import logger

from nlp.emoji_signal import EmojiTally, tally_emoji
from nlp.lexical import LexicalResult, score_text

# emoji signal is weighted 3:1 over words
EMOJI_WEIGHT = 0.75
WORD_WEIGHT = 0.25
AGREEMENT_BONUS = 0.03


class ClassificationResult(NamedTuple):
    sentiment: str
    confidence: float


def dominant_emoji_label(tally: EmojiTally) -> str:
    """Strictly highest count wins; any tie resolves to neutral."""
    if tally.positive > tally.negative and tally.positive > tally.neutral:
        return "positive"
    if tally.negative > tally.positive and tally.negative > tally.neutral:
        return "negative"
    return "neutral"


def emoji_confidence(tally: EmojiTally) -> float:
    return 0.75 + min(0.2, tally.total / 10)


def combine(tally: EmojiTally, lexical: LexicalResult) -> Optional[ClassificationResult]:
    if tally.total == 0:
        if lexical.token_count == 0:
            return None
        return ClassificationResult(lexical.label, lexical.confidence)

    emoji_label = dominant_emoji_label(tally)
    combined = min(
        0.98, emoji_confidence(tally) * EMOJI_WEIGHT + lexical.confidence * WORD_WEIGHT
    )

    if lexical.label != "neutral" and lexical.label == emoji_label:
        return ClassificationResult(emoji_label, min(0.99, combined + AGREEMENT_BONUS))
    # emoji wins a disagreement unless positive and negative emoji are level
    if abs(tally.positive - tally.negative) >= 1:
        return ClassificationResult(emoji_label, combined)
    return ClassificationResult(lexical.label, lexical.confidence)


def classify(text: str) -> Optional[ClassificationResult]:
    if not text or not text.strip():
        return None

    tally = tally_emoji(text)
    lexical = score_text(text)
    result = combine(tally, lexical)
    logger.debug(
        "classify: emoji={} lexical=({:.2f}, {}, n={}) -> {}",
        tuple(tally),
        lexical.score,
        lexical.label,
        lexical.token_count,
        result,
    )
    return result
