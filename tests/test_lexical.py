import pytest

from nlp.lexical import (
    confidence_for,
    label_for,
    normalize,
    score_text,
    score_tokens,
    tokenize,
)


def test_normalize_and_tokenize():
    assert tokenize("This is GREAT!!! 😊 won't_stop") == ["this", "is", "great", "won't_stop"]
    assert normalize("A-b") == "a b"
    assert tokenize("!!! ??? ---") == []
    assert tokenize("   ") == []


def test_plain_positive_and_negative():
    assert score_tokens(["good"]) == 1.0
    assert score_tokens(["bad"]) == -1.0
    assert score_tokens(["hello", "world"]) == 0.0


def test_negation_flips():
    assert score_tokens(tokenize("not good")) == -1.0
    assert score_tokens(tokenize("not bad")) == 1.0
    assert score_text("not good").label == "negative"
    assert score_text("not bad").label == "positive"


def test_intensifier_amplifies_without_sign_change():
    assert score_tokens(tokenize("very good")) == pytest.approx(1.6)
    assert score_tokens(tokenize("very good")) > score_tokens(tokenize("good"))
    assert score_tokens(tokenize("so bad")) == pytest.approx(-1.6)


def test_only_immediate_predecessor_is_checked():
    # "very" sits between "not" and "good", so the negation is lost
    assert score_tokens(tokenize("not very good")) == pytest.approx(1.6)
    assert score_tokens(tokenize("not really bad")) == pytest.approx(-1.6)


def test_apostrophe_forms():
    assert score_tokens(tokenize("won't like")) == -1.0
    # "don't" keeps its apostrophe and is not in the negation set
    assert score_tokens(tokenize("don't like")) == 1.0
    assert score_tokens(tokenize("dont like")) == -1.0


@pytest.mark.parametrize(
    "score, label",
    [(0.0, "neutral"), (0.5, "neutral"), (-0.5, "neutral"), (0.6, "positive"), (-1.0, "negative")],
)
def test_label_thresholds(score, label):
    assert label_for(score) == label


def test_confidence_scaling():
    assert confidence_for(0.0, 0) == pytest.approx(0.6)
    assert confidence_for(1.0, 1) == pytest.approx(0.95)
    # 4 tokens -> sqrt 2 -> half magnitude
    assert confidence_for(1.0, 4) == pytest.approx(0.775)
    assert confidence_for(50.0, 3) == pytest.approx(0.95)


def test_score_text_fields():
    res = score_text("this video is good")
    assert res.token_count == 4
    assert res.score == 1.0
    assert res.label == "positive"
    assert res.confidence == pytest.approx(0.775)


def test_monotonic_in_positive_words():
    words = ["good", "great", "awesome", "amazing", "nice", "cool"]
    previous = None
    for n in range(len(words) + 1):
        score = score_tokens(["the", "video"] + words[:n])
        if previous is not None:
            assert score >= previous
        previous = score
