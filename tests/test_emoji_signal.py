from nlp.emoji_signal import EmojiTally, tally_emoji
from nlp.lexicon import NEGATIVE_EMOJI, NEUTRAL_EMOJI, POSITIVE_EMOJI


def test_emoji_sets_are_disjoint_single_code_points():
    assert not (POSITIVE_EMOJI & NEGATIVE_EMOJI)
    assert not (POSITIVE_EMOJI & NEUTRAL_EMOJI)
    assert not (NEGATIVE_EMOJI & NEUTRAL_EMOJI)
    for ch in POSITIVE_EMOJI | NEGATIVE_EMOJI | NEUTRAL_EMOJI:
        assert len(ch) == 1


def test_tally_counts_each_set():
    tally = tally_emoji("😊😊 meh 😢 🤔🤷 👍")
    assert tally == EmojiTally(positive=3, negative=1, neutral=2)
    assert tally.total == 6


def test_astral_emoji_count_once():
    # 🥰 lives outside the BMP; it must not be split or double counted
    assert tally_emoji("🥰").positive == 1
    assert tally_emoji("🥰").total == 1


def test_heart_with_variation_selector_counts():
    assert tally_emoji("❤️").positive == 1
    assert tally_emoji("☹️").negative == 1


def test_no_emoji():
    assert tally_emoji("plain text, no emoji!").total == 0
    assert tally_emoji("").total == 0
