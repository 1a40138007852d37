# nlp/emoji_signal.py
"""
Emoji tally: counts positive / negative / neutral emoji in a text.

Iterates by code point (Python str iteration), so astral-plane emoji
count once each.
"""
from typing import NamedTuple

from nlp.lexicon import NEGATIVE_EMOJI, NEUTRAL_EMOJI, POSITIVE_EMOJI


class EmojiTally(NamedTuple):
    positive: int = 0
    negative: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral


def tally_emoji(text: str) -> EmojiTally:
    pos = neg = neu = 0
    for ch in text or "":
        if ch in POSITIVE_EMOJI:
            pos += 1
        elif ch in NEGATIVE_EMOJI:
            neg += 1
        elif ch in NEUTRAL_EMOJI:
            neu += 1
    return EmojiTally(pos, neg, neu)
