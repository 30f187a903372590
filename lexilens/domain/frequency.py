# lexilens/domain/frequency.py
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Sequence

from lexilens.domain.models import FrequencyEntry

TOP_KEYWORD_LIMIT = 10


def count_frequency(tokens: Iterable[str]) -> Dict[str, int]:
    """토큰별 출현 횟수. dict 삽입 순서 = 처음 등장한 순서."""
    frequency: Dict[str, int] = {}
    for token in tokens:
        frequency[token] = frequency.get(token, 0) + 1
    return frequency


def rank_frequency(frequency: Mapping[str, int]) -> List[FrequencyEntry]:
    """빈도 내림차순 정렬.

    sorted() 는 안정 정렬이므로 같은 빈도끼리는 처음 등장한 순서가 유지된다.
    (가나다/알파벳 순 보조 키는 쓰지 않음)
    """
    items = sorted(frequency.items(), key=lambda kv: -kv[1])
    return [FrequencyEntry(word=word, count=count) for word, count in items]


def top_keywords(
    ranked: Sequence[FrequencyEntry],
    limit: int = TOP_KEYWORD_LIMIT,
) -> List[str]:
    """정렬된 빈도 목록에서 상위 N개 단어만 추출한다."""
    return [entry.word for entry in ranked[:limit]]
