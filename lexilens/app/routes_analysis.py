# lexilens/app/routes_analysis.py
from __future__ import annotations
import logging
from typing import List, Literal, Union
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from lexilens.services.analysis_service import analyze_submission
from lexilens.exceptions import LexiconLoadError, TextInputError

logger = logging.getLogger(__name__)
router = APIRouter()

# ---------------------------
# 요청(Request) 스키마
# ---------------------------

class AnalyzeRequest(BaseModel):
    text: str = Field(..., description="분석할 영어 원문")

# ---------------------------
# 응답(Response) 스키마
# ---------------------------

class WordCount(BaseModel):
    word: str
    count: int


class AnalyzeResult(BaseModel):
    """
    AnalysisResult.to_dict() 구조를 타입으로 표현한 모델.
    JSON 으로 나갈 때는 camelCase (cleanedText, topKeywords ...)
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cleaned_text: str
    total_word_count: int
    unique_word_count: int
    word_frequency: List[WordCount]
    top_keywords: List[str]
    sentiment: Literal["Positive", "Neutral", "Negative"]
    sentiment_score: int


class AnalyzeSuccessResponse(BaseModel):
    status: Literal["ok"] = "ok"
    result: AnalyzeResult


class AnalyzeErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error_type: str
    message: str


# ---------------------------
# 라우트
# ---------------------------

@router.post(
    "/analyze",
    response_model=Union[AnalyzeSuccessResponse, AnalyzeErrorResponse],
    response_model_by_alias=True,
)
async def analyze_text_route(req: AnalyzeRequest):
    """
    텍스트 분석 API.

    - 입력: 원문 텍스트
    - 출력: 정제 텍스트, 단어 빈도, 상위 키워드, 감성 라벨/점수
    """
    try:
        result = analyze_submission(req.text)
        return AnalyzeSuccessResponse(
            result=AnalyzeResult.model_validate(result.to_dict()),
        )

    except TextInputError as e:
        logger.warning("입력 텍스트 오류: %s", e)
        return AnalyzeErrorResponse(
            error_type="text_input_error",
            message=str(e),
        )

    except LexiconLoadError as e:
        logger.error("사전 로딩 오류: %s", e)
        return AnalyzeErrorResponse(
            error_type="lexicon_error",
            message=str(e),
        )

    except Exception:
        logger.exception("예상치 못한 내부 오류")
        return AnalyzeErrorResponse(
            error_type="internal_error",
            message="서버 내부 오류가 발생했습니다. 잠시 후 다시 시도해 주세요.",
        )
