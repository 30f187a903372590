from __future__ import annotations

import pytest

from lexilens.domain.analyzer import TextAnalyzer
from lexilens.domain.lexicons import Lexicons, build_lexicons, get_default_lexicons


@pytest.fixture
def lexicons() -> Lexicons:
    return get_default_lexicons()


@pytest.fixture
def tiny_lexicons() -> Lexicons:
    return build_lexicons(
        stopwords=["the", "a", "is", "and"],
        positive=["good", "sunny"],
        negative=["bad", "rainy"],
    )


@pytest.fixture
def analyzer(lexicons: Lexicons) -> TextAnalyzer:
    return TextAnalyzer(lexicons)
