# nlp/lexicon.py
"""
Fixed emoji and word sets used by the heuristic sentiment classifier.

All sets are frozensets built once at import and shared read-only.
Emoji entries are single code points; a text is scanned character by
character, so multi-code-point sequences cannot match as a whole.
"""

POSITIVE_EMOJI = frozenset(
    [
        "\U0001F60A",  # smiling face with smiling eyes
        "\U0001F603",
        "\U0001F604",
        "\U0001F601",
        "\U0001F642",
        "\U0001F600",
        "\U0001F60D",
        "\U0001F970",
        "\U0001F618",
        "\U0001F917",
        "\U0001F389",  # party popper
        "\U0001F44D",  # thumbs up
        "\u2764",  # heart, without the variation selector
        "\U0001F496",
        "\u2728",
        "\U0001F31F",
        "\U0001F4AF",
    ]
)

NEGATIVE_EMOJI = frozenset(
    [
        "\U0001F622",  # crying face
        "\U0001F62D",
        "\U0001F61E",
        "\U0001F614",
        "\u2639",  # frowning face, without the variation selector
        "\U0001F641",
        "\U0001F623",
        "\U0001F616",
        "\U0001F62B",
        "\U0001F629",
        "\U0001F624",
        "\U0001F620",
        "\U0001F621",
        "\U0001F494",  # broken heart
        "\U0001F44E",  # thumbs down
    ]
)

NEUTRAL_EMOJI = frozenset(
    [
        "\U0001F610",  # neutral face
        "\U0001F611",
        "\U0001F914",  # thinking face
        "\U0001F636",
        "\U0001F644",
        "\U0001F937",  # shrug
    ]
)

POSITIVE_WORDS = frozenset(
    [
        "good", "great", "awesome", "amazing", "love", "loved", "like", "liked",
        "fantastic", "excellent", "best", "nice", "happy", "joy", "glad",
        "wonderful", "helpful", "brilliant", "recommend", "cool",
    ]
)

NEGATIVE_WORDS = frozenset(
    [
        "bad", "terrible", "awful", "hate", "hated", "dislike", "disliked",
        "worst", "poor", "sad", "angry", "disappointed", "disappointing",
        "broken", "bug", "spam", "boring", "annoying", "trash", "waste",
    ]
)

NEGATIONS = frozenset(
    [
        "not", "never", "no", "dont", "doesnt", "didnt", "isnt", "wasnt",
        "cant", "cannot", "wont", "won't",
    ]
)

INTENSIFIERS = frozenset(
    ["very", "really", "extremely", "super", "totally", "completely", "absolutely", "so"]
)
