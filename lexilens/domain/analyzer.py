# lexilens/domain/analyzer.py
from __future__ import annotations

from typing import Optional

from lexilens.domain.frequency import count_frequency, rank_frequency, top_keywords
from lexilens.domain.lexicons import Lexicons, get_default_lexicons
from lexilens.domain.models import AnalysisResult
from lexilens.domain.sentiment import score_sentiment
from lexilens.domain.text import clean_text, remove_stopwords, tokenize


class TextAnalyzer:
    def __init__(self, lexicons: Optional[Lexicons] = None):
        """
        영어 텍스트 분석기 초기화

        Args:
            lexicons: 불용어/감성 사전 (None 이면 프로세스 기본 사전)
        """
        self.lexicons = lexicons if lexicons is not None else get_default_lexicons()

    def analyze_text(self, text: str) -> AnalysisResult:
        """
        정제 → 토큰화 → 불용어 제거 → 빈도 집계 → 정렬 → 감성 점수

        빈 입력이나 불용어/구두점만 있는 입력도 오류가 아니라
        모든 값이 0/빈 값인 Neutral 결과로 돌려준다.
        """
        cleaned = clean_text(text)
        tokens = tokenize(cleaned)
        words = remove_stopwords(tokens, self.lexicons.stopwords)

        frequency = count_frequency(words)
        ranked = rank_frequency(frequency)

        sentiment = score_sentiment(
            words,
            positive=self.lexicons.positive,
            negative=self.lexicons.negative,
        )

        return AnalysisResult(
            cleaned_text=" ".join(words),  # 표시용 텍스트는 불용어 제거 후 토큰 기준
            total_word_count=len(words),
            unique_word_count=len(frequency),
            word_frequency=tuple(ranked),
            top_keywords=tuple(top_keywords(ranked)),
            sentiment=sentiment.label,
            sentiment_score=sentiment.score,
        )


def analyze(text: str) -> AnalysisResult:
    """기본 사전으로 텍스트 한 건을 분석한다."""
    return TextAnalyzer().analyze_text(text)
