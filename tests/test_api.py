import pytest
from samples import FORMAL_AI_TEXT, INFORMAL_HUMAN_TEXT

import ai_text_detector
from ai_text_detector import (
    DetectionResult,
    EmptyInputError,
    TextTooShortError,
    detect_ai_text,
    get_burstiness_score,
    get_confidence_score,
    get_perplexity_score,
    is_ai_generated,
)


class TestPublicApi:
    def test_detect_ai_text(self):
        result = detect_ai_text(FORMAL_AI_TEXT)
        assert isinstance(result, DetectionResult)
        assert result.is_ai_generated is True

    def test_helpers_agree_with_result(self):
        result = detect_ai_text(INFORMAL_HUMAN_TEXT)
        assert is_ai_generated(INFORMAL_HUMAN_TEXT) is result.is_ai_generated
        assert get_confidence_score(INFORMAL_HUMAN_TEXT) == result.confidence
        assert get_perplexity_score(INFORMAL_HUMAN_TEXT) == result.perplexity_score
        assert get_burstiness_score(INFORMAL_HUMAN_TEXT) == result.burstiness_score

    def test_helpers_validate_input(self):
        with pytest.raises(EmptyInputError):
            is_ai_generated("  ")
        with pytest.raises(TextTooShortError):
            get_confidence_score("Too short to analyse.")

    def test_exports(self):
        for name in ai_text_detector.__all__:
            assert hasattr(ai_text_detector, name)

    def test_library_calls_do_not_log(self, capfd):
        detect_ai_text(FORMAL_AI_TEXT)
        out, err = capfd.readouterr()
        assert out == ""
        assert err == ""
