# lexilens/domain/lexicons.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Optional

import yaml

from lexilens.exceptions import LexiconLoadError
from lexilens.infra.paths import get_lexicon_path

logger = logging.getLogger(__name__)

LEXICON_KEYS = ("stopwords", "positive", "negative")


@dataclass(frozen=True)
class Lexicons:
    """분석에 쓰는 읽기 전용 단어 집합 묶음.

    - stopwords: 빈도/감성 분석에서 제외할 기능어
    - positive: 긍정 감성 단어
    - negative: 부정 감성 단어

    한 번 만들어지면 변경되지 않으므로 여러 요청에서 공유해도 안전하다.
    """

    stopwords: FrozenSet[str]
    positive: FrozenSet[str]
    negative: FrozenSet[str]

    def sizes(self) -> dict:
        return {
            "stopwords": len(self.stopwords),
            "positive": len(self.positive),
            "negative": len(self.negative),
        }


def _normalize_words(key: str, words: Any) -> FrozenSet[str]:
    if not isinstance(words, list):
        raise LexiconLoadError(f"'{key}' 항목은 단어 리스트여야 합니다: {type(words).__name__}")

    out = set()
    for w in words:
        if not isinstance(w, str):
            raise LexiconLoadError(f"'{key}' 항목에 문자열이 아닌 값이 있습니다: {w!r}")
        w = w.strip().lower()
        if w:
            out.add(w)
    return frozenset(out)


def build_lexicons(
    stopwords: Iterable[str],
    positive: Iterable[str],
    negative: Iterable[str],
) -> Lexicons:
    """파이썬 iterable 로부터 Lexicons 를 만든다. (테스트/커스텀 사전용)"""
    return Lexicons(
        stopwords=_normalize_words("stopwords", list(stopwords)),
        positive=_normalize_words("positive", list(positive)),
        negative=_normalize_words("negative", list(negative)),
    )


def load_lexicons(path: Optional[Path] = None) -> Lexicons:
    """
    사전 YAML 로드

    Args:
        path: 사전 파일 경로 (None 이면 설정/기본 경로)

    Raises:
        LexiconLoadError: 파일이 없거나 구조가 올바르지 않을 때
    """
    path = Path(path) if path is not None else get_lexicon_path()

    if not path.exists():
        raise LexiconLoadError(f"사전 파일을 찾을 수 없습니다: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LexiconLoadError(f"사전 파일을 읽을 수 없습니다: {path} ({e})") from e

    if not isinstance(data, dict):
        raise LexiconLoadError(f"사전 파일 최상위는 매핑이어야 합니다: {path}")

    missing = [k for k in LEXICON_KEYS if k not in data]
    if missing:
        raise LexiconLoadError(f"사전 파일에 필요한 항목이 없습니다: {', '.join(missing)} ({path})")

    lexicons = Lexicons(
        stopwords=_normalize_words("stopwords", data["stopwords"]),
        positive=_normalize_words("positive", data["positive"]),
        negative=_normalize_words("negative", data["negative"]),
    )
    logger.info("사전 로딩 완료: %s (%s)", path, lexicons.sizes())
    return lexicons


_default_lexicons: Optional[Lexicons] = None


def get_default_lexicons() -> Lexicons:
    """프로세스 전역 기본 사전. 처음 호출될 때 1회만 로드한다."""
    global _default_lexicons
    if _default_lexicons is None:
        _default_lexicons = load_lexicons()
    return _default_lexicons
