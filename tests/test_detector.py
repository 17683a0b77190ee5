import pytest
from samples import (
    CHATTY_HUMAN_TEXT,
    EMOTIONAL_HUMAN_TEXT,
    FORMAL_AI_TEXT,
    INFORMAL_HUMAN_TEXT,
    LITERARY_TEXT,
    METHODOLOGY_AI_TEXT,
    TECHNICAL_AI_TEXT,
)

from ai_text_detector.data_models import AnalysisMetrics, DetectionResult
from ai_text_detector.detection.detector import AITextDetector
from ai_text_detector.detection.scoring import NormalisedWeightedScoringStrategy
from ai_text_detector.exceptions import (
    DetectionError,
    EmptyInputError,
    TextTooShortError,
)

HUMAN_TEXTS = [INFORMAL_HUMAN_TEXT, EMOTIONAL_HUMAN_TEXT, CHATTY_HUMAN_TEXT]
AI_TEXTS = [FORMAL_AI_TEXT, TECHNICAL_AI_TEXT, METHODOLOGY_AI_TEXT]


@pytest.fixture
def detector():
    return AITextDetector()


class TestInputValidation:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t  "])
    def test_empty_text(self, detector, text):
        with pytest.raises(EmptyInputError, match="Text cannot be empty"):
            detector.detect_ai_text(text)

    def test_short_text(self, detector):
        with pytest.raises(
            TextTooShortError, match=r"Text too short for reliable analysis"
        ) as error:
            detector.detect_ai_text("Short.")
        assert error.value.min_length == 50

    def test_length_is_measured_after_trimming(self, detector):
        with pytest.raises(TextTooShortError):
            detector.detect_ai_text("   " + "x" * 49 + "   ")

    def test_errors_are_value_errors(self, detector):
        with pytest.raises(ValueError):
            detector.detect_ai_text("")
        assert issubclass(TextTooShortError, DetectionError)

    def test_custom_minimum_length(self):
        detector = AITextDetector(min_text_length=10)
        result = detector.detect_ai_text("Short text here.")
        assert isinstance(result, DetectionResult)


class TestDetectionResult:
    @pytest.mark.parametrize("text", HUMAN_TEXTS + AI_TEXTS + [LITERARY_TEXT])
    def test_bounds(self, detector, text):
        result = detector.detect_ai_text(text)
        assert 0.0 <= result.confidence <= 1.0
        assert 0.0 <= result.score <= 1.0
        assert result.perplexity_score > 0
        assert -1.0 <= result.burstiness_score <= 1.0
        assert all(isinstance(reason, str) for reason in result.reasons)

    def test_deterministic(self, detector):
        assert detector.detect_ai_text(FORMAL_AI_TEXT) == detector.detect_ai_text(
            FORMAL_AI_TEXT
        )

    def test_detect_returns_score(self, detector):
        result = detector.detect_ai_text(FORMAL_AI_TEXT)
        assert detector.detect(FORMAL_AI_TEXT) == result.score

    def test_analyse_text(self, detector):
        metrics = detector.analyse_text(FORMAL_AI_TEXT)
        assert isinstance(metrics, AnalysisMetrics)
        assert metrics.perplexity == detector.detect_ai_text(
            FORMAL_AI_TEXT
        ).perplexity_score

    def test_textual_form(self, detector):
        text = str(detector.detect_ai_text(INFORMAL_HUMAN_TEXT))
        assert "Verdict:     Human-written" in text
        assert "Confidence:" in text


class TestClassification:
    def test_informal_human_text(self, detector):
        result = detector.detect_ai_text(INFORMAL_HUMAN_TEXT)
        assert result.is_ai_generated is False
        assert result.confidence < 0.65

    def test_emotional_human_text(self, detector):
        result = detector.detect_ai_text(EMOTIONAL_HUMAN_TEXT)
        assert result.is_ai_generated is False
        assert result.confidence < 0.4

    def test_formal_ai_text(self, detector):
        result = detector.detect_ai_text(FORMAL_AI_TEXT)
        assert result.is_ai_generated is True
        assert result.confidence > 0.65

    @pytest.mark.parametrize("text", AI_TEXTS)
    def test_ai_texts(self, detector, text):
        assert detector.detect_ai_text(text).is_ai_generated is True

    @pytest.mark.parametrize("text", HUMAN_TEXTS)
    def test_human_texts(self, detector, text):
        assert detector.detect_ai_text(text).is_ai_generated is False

    def test_ai_texts_score_higher_on_average(self, detector):
        human = [detector.detect_ai_text(text) for text in HUMAN_TEXTS]
        ai = [detector.detect_ai_text(text) for text in AI_TEXTS]

        def average(values):
            return sum(values) / len(values)

        assert average([r.confidence for r in ai]) > average(
            [r.confidence for r in human]
        )
        assert average([r.perplexity_score for r in human]) > average(
            [r.perplexity_score for r in ai]
        )


class TestDetectorConfiguration:
    def test_name_includes_strategy(self, detector):
        assert detector.get_name() == "AITextDetector[adaptive]"
        weighted = AITextDetector(strategy=NormalisedWeightedScoringStrategy())
        assert weighted.get_name() == "AITextDetector[normalised-weighted]"

    def test_normalised_weighted_strategy(self):
        detector = AITextDetector(strategy=NormalisedWeightedScoringStrategy())
        result = detector.detect_ai_text(FORMAL_AI_TEXT)
        assert 0.0 <= result.score <= 1.0
        assert result.is_ai_generated is (result.score > 0.65)

    def test_literary_fixtures_can_be_disabled(self, detector):
        plain = AITextDetector(include_literary_fixtures=False)
        assert (
            plain.analyse_text(LITERARY_TEXT).human_likeness_indicators
            < detector.analyse_text(LITERARY_TEXT).human_likeness_indicators
        )
