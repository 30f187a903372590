# lexilens/domain/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


@dataclass(frozen=True)
class FrequencyEntry:
    """단어 하나의 출현 빈도 (word, count)."""

    word: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "count": self.count}


@dataclass(frozen=True)
class SentimentScore:
    """감성 점수 계산 결과.

    - label: Positive / Neutral / Negative
    - score: 긍정 적중 수 - 부정 적중 수
    - positive_hits / negative_hits: 각 사전 적중 수
    """

    label: Sentiment
    score: int
    positive_hits: int = 0
    negative_hits: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    """텍스트 한 건의 분석 결과 (호출자에게 넘기는 최종 값).

    - cleaned_text: 불용어 제거 후 토큰을 공백 하나로 이은 문자열
    - total_word_count: 불용어 제거 후 토큰 수
    - unique_word_count: 서로 다른 단어 수
    - word_frequency: 빈도 내림차순 (동률은 처음 등장한 순서)
    - top_keywords: word_frequency 상위 10개 단어
    - sentiment / sentiment_score: 감성 라벨과 점수
    """

    cleaned_text: str
    total_word_count: int
    unique_word_count: int
    word_frequency: Tuple[FrequencyEntry, ...]
    top_keywords: Tuple[str, ...]
    sentiment: Sentiment
    sentiment_score: int

    def to_dict(self) -> Dict[str, Any]:
        """프론트에서 쓰는 camelCase 레코드로 변환."""
        return {
            "cleanedText": self.cleaned_text,
            "totalWordCount": self.total_word_count,
            "uniqueWordCount": self.unique_word_count,
            "wordFrequency": [e.to_dict() for e in self.word_frequency],
            "topKeywords": list(self.top_keywords),
            "sentiment": self.sentiment.value,
            "sentimentScore": self.sentiment_score,
        }
