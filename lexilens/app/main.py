#lexilens/app/main.py
from __future__ import annotations
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lexilens import __version__
from lexilens.core.config import CORS_ORIGINS, LOG_LEVEL
from lexilens.exceptions import LexiconLoadError
from lexilens.services.analysis_service import lexicon_summary
from lexilens.app.routes_analysis import router as analysis_router
from lexilens.app.routes_health import router as health_router
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    app = FastAPI(
        title="Lexilens Text Analyzer",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(analysis_router)
    app.include_router(health_router)

    # 사전은 서버 뜰 때 미리 1번 로딩 (실패해도 앱은 뜨고, 요청에서 lexicon_error 로 응답)
    try:
        lexicon_summary()
    except LexiconLoadError as e:
        logger.error("사전 로딩 실패: %s", e)

    logger.info("FastAPI 앱이 초기화되었습니다. (log_level=%s)", LOG_LEVEL)
    return app

app = create_app()
