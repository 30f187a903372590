# lexilens/domain/sentiment.py
from __future__ import annotations
from typing import AbstractSet, Iterable, Optional

from lexilens.domain.lexicons import get_default_lexicons
from lexilens.domain.models import Sentiment, SentimentScore


def label_for_score(score: int) -> Sentiment:
    if score > 0:
        return Sentiment.POSITIVE
    if score < 0:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def score_sentiment(
    tokens: Iterable[str],
    positive: Optional[AbstractSet[str]] = None,
    negative: Optional[AbstractSet[str]] = None,
) -> SentimentScore:
    """
    사전 기반 감성 점수 계산

    Args:
        tokens: 불용어 제거가 끝난 토큰 목록
        positive / negative: 감성 사전 (None 이면 기본 사전)

    Returns:
        SentimentScore (score = 긍정 적중 수 - 부정 적중 수, 길이 정규화 없음)
    """
    if positive is None or negative is None:
        lexicons = get_default_lexicons()
        positive = lexicons.positive if positive is None else positive
        negative = lexicons.negative if negative is None else negative

    positive_hits = 0
    negative_hits = 0
    for token in tokens:
        # 두 사전은 서로 독립적으로 확인 (양쪽에 다 있으면 양쪽 다 증가)
        if token in positive:
            positive_hits += 1
        if token in negative:
            negative_hits += 1

    score = positive_hits - negative_hits
    return SentimentScore(
        label=label_for_score(score),
        score=score,
        positive_hits=positive_hits,
        negative_hits=negative_hits,
    )
