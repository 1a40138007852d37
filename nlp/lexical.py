# nlp/lexical.py
"""
Word-level sentiment scoring over a small fixed lexicon.

Returns a LexicalResult:
score: signed sum of word weights
label: 'positive'|'neutral'|'negative'
confidence: in [0.6, 0.95]
token_count: number of tokens after normalization (0 means no signal)
"""
import math
import re
from typing import List, NamedTuple

from nlp.lexicon import INTENSIFIERS, NEGATIONS, NEGATIVE_WORDS, POSITIVE_WORDS

_NON_WORD = re.compile(r"[^a-z0-9'_\s]")

INTENSIFIER_WEIGHT = 1.6
LABEL_THRESHOLD = 0.5


class LexicalResult(NamedTuple):
    score: float
    label: str
    confidence: float
    token_count: int


def normalize(text: str) -> str:
    """Lower-case and blank out punctuation, emoji and other symbols."""
    return _NON_WORD.sub(" ", (text or "").lower())


def tokenize(text: str) -> List[str]:
    return normalize(text).split()


def score_tokens(tokens: List[str]) -> float:
    """
    Sum +1/-1 per lexicon hit. Only the immediately preceding token is
    looked at: an intensifier scales by 1.6, a negation flips the sign.
    """
    score = 0.0
    for i, w in enumerate(tokens):
        if w in POSITIVE_WORDS:
            weight = 1.0
        elif w in NEGATIVE_WORDS:
            weight = -1.0
        else:
            continue
        prev = tokens[i - 1] if i > 0 else None
        if prev in INTENSIFIERS:
            weight *= INTENSIFIER_WEIGHT
        if prev in NEGATIONS:
            weight *= -1
        score += weight
    return score


def label_for(score: float) -> str:
    if score > LABEL_THRESHOLD:
        return "positive"
    if score < -LABEL_THRESHOLD:
        return "negative"
    return "neutral"


def confidence_for(score: float, token_count: int) -> float:
    # long comments need proportionally more signal
    magnitude = min(1.0, abs(score) / max(1.0, math.sqrt(token_count)))
    return min(0.95, 0.6 + magnitude * 0.35)


def score_text(text: str) -> LexicalResult:
    tokens = tokenize(text)
    score = score_tokens(tokens)
    return LexicalResult(
        score=score,
        label=label_for(score),
        confidence=confidence_for(score, len(tokens)),
        token_count=len(tokens),
    )
