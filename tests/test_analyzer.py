from __future__ import annotations

import pytest

from lexilens import AnalysisResult, FrequencyEntry, Sentiment, TextAnalyzer, analyze

EMPTY_RESULT = {
    "cleanedText": "",
    "totalWordCount": 0,
    "uniqueWordCount": 0,
    "wordFrequency": [],
    "topKeywords": [],
    "sentiment": "Neutral",
    "sentimentScore": 0,
}

SAMPLES = [
    "",
    "   \n\t ",
    "the a an is",
    "!!! ??? 123",
    "bad bad good",
    "Cat cat CAT 2 dogs",
    "This is a great and wonderful day, truly amazing",
    "It was the best of times, it was the worst of times, it was the age of wisdom, "
    "it was the age of foolishness, it was the epoch of belief, it was the epoch of "
    "incredulity, it was the season of Light, it was the season of Darkness.",
    "one two three four five six seven eight nine ten eleven twelve one two three",
]


@pytest.mark.parametrize("text", ["", "the a an is", "   ", "?!.,;:", "42 7 x y z"])
def test_degenerate_input_gives_empty_neutral_result(text):
    assert analyze(text).to_dict() == EMPTY_RESULT


def test_positive_sentence():
    result = analyze("This is a great and wonderful day, truly amazing")
    assert result.cleaned_text == "great wonderful day truly amazing"
    assert result.sentiment is Sentiment.POSITIVE
    assert result.sentiment_score == 3


def test_mixed_sentence_is_negative():
    result = analyze("bad bad good")
    assert result.word_frequency == (FrequencyEntry("bad", 2), FrequencyEntry("good", 1))
    assert result.sentiment_score == -1
    assert result.sentiment is Sentiment.NEGATIVE


def test_case_and_numbers_are_normalized():
    result = analyze("Cat cat CAT 2 dogs")
    assert result.cleaned_text == "cat cat cat dogs"
    assert result.word_frequency[0] == FrequencyEntry("cat", 3)
    assert result.total_word_count == 4
    assert result.unique_word_count == 2


def test_punctuation_and_digits_do_not_change_counts():
    noisy = analyze("Good!!! good good 123")
    plain = analyze("good good good")
    assert noisy.word_frequency == plain.word_frequency == (FrequencyEntry("good", 3),)


def test_top_keywords_capped_at_ten():
    text = " ".join(f"word{chr(97 + i)}" for i in range(12))
    result = analyze(text)
    assert result.unique_word_count == 12
    assert len(result.top_keywords) == 10
    assert result.top_keywords[0] == "worda"


@pytest.mark.parametrize("text", SAMPLES)
def test_result_invariants(text):
    result = analyze(text)
    words = result.cleaned_text.split(" ") if result.cleaned_text else []
    counts = [e.count for e in result.word_frequency]
    freq_words = [e.word for e in result.word_frequency]

    assert result.total_word_count == len(words)
    assert result.unique_word_count == len(result.word_frequency)
    assert len(set(freq_words)) == len(freq_words)
    assert counts == sorted(counts, reverse=True)
    assert sum(counts) == result.total_word_count
    assert list(result.top_keywords) == freq_words[:10]
    assert len(result.top_keywords) <= 10


@pytest.mark.parametrize("text", SAMPLES)
def test_ties_follow_first_appearance(text):
    result = analyze(text)
    words = result.cleaned_text.split()
    first_seen = {w: words.index(w) for w in set(words)}
    entries = result.word_frequency
    for prev, nxt in zip(entries, entries[1:]):
        if prev.count == nxt.count:
            assert first_seen[prev.word] < first_seen[nxt.word]


@pytest.mark.parametrize("text", SAMPLES)
def test_analyze_is_idempotent(text):
    assert analyze(text) == analyze(text)


def test_input_is_not_mutated():
    text = "Hello HELLO World"
    analyze(text)
    assert text == "Hello HELLO World"


def test_result_is_immutable():
    result = analyze("good day")
    with pytest.raises(AttributeError):
        result.sentiment_score = 99


def test_analyzer_with_custom_lexicons(tiny_lexicons):
    result = TextAnalyzer(tiny_lexicons).analyze_text("The sunny day is good and the night is rainy")
    assert isinstance(result, AnalysisResult)
    assert result.cleaned_text == "sunny day good night rainy"
    assert result.sentiment_score == 1
    assert result.sentiment is Sentiment.POSITIVE


def test_to_dict_shape():
    d = analyze("bad bad good").to_dict()
    assert d == {
        "cleanedText": "bad bad good",
        "totalWordCount": 3,
        "uniqueWordCount": 2,
        "wordFrequency": [{"word": "bad", "count": 2}, {"word": "good", "count": 1}],
        "topKeywords": ["bad", "good"],
        "sentiment": "Negative",
        "sentimentScore": -1,
    }
