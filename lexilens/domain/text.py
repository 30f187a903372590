# lexilens/domain/text.py
from __future__ import annotations

import re
from typing import AbstractSet, Iterable, List, Optional

from lexilens.domain.lexicons import get_default_lexicons

# 브라우저(JS) 정규식 \s 와 같은 공백 집합
# - U+FEFF(BOM) 는 공백으로 취급
# - U+001C~U+001F, U+0085 는 공백이 아님 (파이썬 isspace 와 다름)
_SPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# 단어 문자(영문/숫자/_)와 공백을 제외한 모든 문자 = 구두점
_PUNCTUATION = re.compile(f"[^A-Za-z0-9_{_SPACE_CHARS}]")
_DIGITS = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(f"[{_SPACE_CHARS}]+")


def clean_text(text: str) -> str:
    """
    소문자화 → 구두점 제거 → 숫자 제거 → 공백 정규화.

    빈 문자열이나 구두점만 있는 입력은 "" 를 반환한다.
    """
    text = text.lower()
    text = _PUNCTUATION.sub("", text)
    text = _DIGITS.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip(" ")


def tokenize(text: str) -> List[str]:
    """공백 기준으로 자른다. 빈 조각은 버리고 순서/중복은 유지."""
    return [t for t in _WHITESPACE.split(text) if t]


def remove_stopwords(
    tokens: Iterable[str],
    stopwords: Optional[AbstractSet[str]] = None,
) -> List[str]:
    """불용어와 1글자 토큰 제거 (순서 유지)"""
    if stopwords is None:
        stopwords = get_default_lexicons().stopwords
    return [t for t in tokens if t not in stopwords and len(t) > 1]
