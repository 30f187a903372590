from lexilens.domain.analyzer import TextAnalyzer, analyze
from lexilens.domain.lexicons import Lexicons, build_lexicons, load_lexicons
from lexilens.domain.models import AnalysisResult, FrequencyEntry, Sentiment

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "FrequencyEntry",
    "Lexicons",
    "Sentiment",
    "TextAnalyzer",
    "analyze",
    "build_lexicons",
    "load_lexicons",
]
