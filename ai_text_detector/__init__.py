"""Detection of AI-written text with linguistic and statistical metrics."""

from loguru import logger

from ai_text_detector.data_models import AnalysisMetrics, DetectionResult
from ai_text_detector.detection.detector import AITextDetector
from ai_text_detector.exceptions import (
    DetectionError,
    EmptyInputError,
    TextTooShortError,
    UnknownStrategyError,
)

__all__ = [
    "AITextDetector",
    "AnalysisMetrics",
    "DetectionError",
    "DetectionResult",
    "EmptyInputError",
    "TextTooShortError",
    "UnknownStrategyError",
    "detect_ai_text",
    "get_burstiness_score",
    "get_confidence_score",
    "get_perplexity_score",
    "is_ai_generated",
]

# Applications opt in to the debug logs with `logger.enable("ai_text_detector")`.
logger.disable(__name__)

_detector = AITextDetector()


def detect_ai_text(text: str) -> DetectionResult:
    """
    Analyse a text and decide whether it was written by AI.

    Args:
        text (str): Text of at least 50 characters after trimming.

    Raises:
        EmptyInputError: Raised if the text is empty or whitespace only.
        TextTooShortError: Raised if the trimmed text is too short.

    Returns:
        DetectionResult: Verdict, confidence, reasons and headline metrics.
    """
    return _detector.detect_ai_text(text)


def is_ai_generated(text: str) -> bool:
    """Check whether a text is judged AI-written."""
    return detect_ai_text(text).is_ai_generated


def get_confidence_score(text: str) -> float:
    """Get the rounded AI-probability score of a text, in the range [0, 1]."""
    return detect_ai_text(text).confidence


def get_perplexity_score(text: str) -> float:
    """Get n-gram perplexity of a text."""
    return detect_ai_text(text).perplexity_score


def get_burstiness_score(text: str) -> float:
    """Get burstiness of sentence lengths of a text."""
    return detect_ai_text(text).burstiness_score
