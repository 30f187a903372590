from __future__ import annotations

import logging
from typing import Dict, Optional

from lexilens.core.config import MAX_TEXT_LENGTH
from lexilens.domain.analyzer import TextAnalyzer
from lexilens.domain.models import AnalysisResult
from lexilens.exceptions import TextInputError

logger = logging.getLogger(__name__)

# 모듈 전역 analyzer (사전은 프로세스당 1회만 로딩, 요청마다 로드 금지)
_analyzer: Optional[TextAnalyzer] = None


def get_analyzer() -> TextAnalyzer:
    global _analyzer
    if _analyzer is None:
        _analyzer = TextAnalyzer()
    return _analyzer


def _validate_input(text: str) -> None:
    if MAX_TEXT_LENGTH > 0 and len(text) > MAX_TEXT_LENGTH:
        raise TextInputError(
            f"텍스트가 너무 깁니다. ({len(text):,}자 / 최대 {MAX_TEXT_LENGTH:,}자)"
        )


def analyze_submission(text: str) -> AnalysisResult:
    """
    웹에서 제출된 텍스트 한 건 분석 서비스 진입점.
    - 입력 길이 검증
    - 사전 기반 분석 (순수 함수, 공유 상태 없음)
    """
    _validate_input(text)

    result = get_analyzer().analyze_text(text)

    logger.debug(
        "분석 완료: chars=%d words=%d unique=%d sentiment=%s(%d)",
        len(text),
        result.total_word_count,
        result.unique_word_count,
        result.sentiment.value,
        result.sentiment_score,
    )
    return result


def lexicon_summary() -> Dict[str, int]:
    """현재 로딩된 사전 크기 (헬스 체크용)."""
    return get_analyzer().lexicons.sizes()
