# lexilens/infra/paths.py
from pathlib import Path
from lexilens.core.config import LEXICON_PATH_OVERRIDE

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR    = PACKAGE_DIR / "data"

DEFAULT_LEXICON_PATH = DATA_DIR / "lexicons.yaml"


def get_lexicon_path() -> Path:
    """LEXILENS_LEXICON_PATH 가 있으면 그 경로, 없으면 기본 사전 경로."""
    if LEXICON_PATH_OVERRIDE:
        return Path(LEXICON_PATH_OVERRIDE)
    return DEFAULT_LEXICON_PATH
