# lexilens/app/routes_health.py

from __future__ import annotations
import logging
from fastapi import APIRouter

from lexilens.exceptions import LexiconLoadError
from lexilens.services.analysis_service import lexicon_summary

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/health")
async def health():
    """
    단순 헬스 체크 엔드포인트.

    - 서버가 살아있는지 + 사전이 몇 단어씩 로딩되어 있는지 확인
    - 사전 로딩에 실패했으면 status=error 와 사유를 같이 내려준다
    """
    try:
        sizes = lexicon_summary()
    except LexiconLoadError as e:
        logger.error("헬스 체크: 사전 로딩 실패: %s", e)
        return {
            "status": "error",
            "service": "lexilens",
            "message": str(e),
        }

    return {
        "status": "ok",
        "service": "lexilens",
        "lexicons": sizes,
    }
