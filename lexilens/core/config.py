# lexilens/core/config.py
from pathlib import Path
import os

from dotenv import load_dotenv

# 프로젝트 루트 디렉토리 (lexilens 패키지의 상위)
BASE_DIR = Path(__file__).resolve().parents[2]

# .env 로딩
ENV_PATH = BASE_DIR / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v.strip())
    except ValueError:
        return default


# 로그 레벨 (.env의 LOG_LEVEL로 조절, 기본 INFO)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS 설정
# - .env 에 CORS_ORIGINS="http://localhost:5173,http://127.0.0.1:8000" 처럼 넣으면 그 값 사용
# - 없으면 기본으로 전부 허용(["*"])
_cors_raw = os.getenv("CORS_ORIGINS", "")
if _cors_raw:
    CORS_ORIGINS = [o.strip() for o in _cors_raw.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["*"]

# 사전 파일 경로 override (없으면 패키지 기본 사전 사용)
LEXICON_PATH_OVERRIDE = os.getenv("LEXILENS_LEXICON_PATH", "").strip() or None

# 한 번에 분석할 최대 글자 수 (0 이하면 제한 없음)
MAX_TEXT_LENGTH = _env_int("LEXILENS_MAX_TEXT_LENGTH", 200_000)
