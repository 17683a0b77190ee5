import pytest
from samples import FORMAL_AI_TEXT, LITERARY_TEXT, make_metrics

from ai_text_detector.data_models import ThresholdSignals
from ai_text_detector.detection.threshold import ThresholdDecider, round_confidence


def signals(word_count=150, narrative_score=0.0, creativity_score=0.0):
    return ThresholdSignals(
        word_count=word_count,
        narrative_score=narrative_score,
        creativity_score=creativity_score,
    )


@pytest.fixture
def decider():
    return ThresholdDecider()


class TestComputeThreshold:
    def test_base_threshold(self, decider, neutral_metrics):
        assert decider.compute_threshold(neutral_metrics, signals()) == 0.58

    @pytest.mark.parametrize(
        ("word_count", "expected"),
        [(50, 0.62), (99, 0.62), (100, 0.58), (300, 0.58), (301, 0.56)],
    )
    def test_text_length(self, decider, neutral_metrics, word_count, expected):
        threshold = decider.compute_threshold(neutral_metrics, signals(word_count))
        assert threshold == pytest.approx(expected)

    def test_all_raises_add_up(self, decider):
        metrics = make_metrics(
            human_likeness_indicators=0.5,
            informalness_score=0.5,
            emotional_tone_variability=0.45,
        )
        threshold = decider.compute_threshold(
            metrics,
            signals(word_count=50, narrative_score=0.4, creativity_score=0.6),
        )
        assert threshold == pytest.approx(0.58 + 0.04 + 0.12 + 0.08 + 0.12 + 0.08 + 0.2)

    @pytest.mark.parametrize(
        ("narrative_score", "increase"),
        [(0.51, 0.15), (0.5, 0.08), (0.36, 0.08), (0.35, 0.0)],
    )
    def test_narrative_ladder(
        self, decider, neutral_metrics, narrative_score, increase
    ):
        threshold = decider.compute_threshold(
            neutral_metrics, signals(narrative_score=narrative_score)
        )
        assert threshold == pytest.approx(0.58 + increase)

    @pytest.mark.parametrize(
        ("creativity_score", "increase"),
        [(0.51, 0.2), (0.5, 0.1), (0.36, 0.1), (0.35, 0.0)],
    )
    def test_creativity_ladder(
        self, decider, neutral_metrics, creativity_score, increase
    ):
        threshold = decider.compute_threshold(
            neutral_metrics, signals(creativity_score=creativity_score)
        )
        assert threshold == pytest.approx(0.58 + increase)

    @pytest.mark.parametrize(
        ("field", "level", "increase"),
        [
            ("human_likeness_indicators", 0.61, 0.2),
            ("human_likeness_indicators", 0.6, 0.12),
            ("human_likeness_indicators", 0.41, 0.12),
            ("human_likeness_indicators", 0.4, 0.05),
            ("human_likeness_indicators", 0.21, 0.05),
            ("human_likeness_indicators", 0.2, 0.0),
            ("informalness_score", 0.51, 0.15),
            ("informalness_score", 0.5, 0.08),
            ("informalness_score", 0.31, 0.08),
            ("informalness_score", 0.3, 0.03),
            ("informalness_score", 0.16, 0.03),
            ("informalness_score", 0.15, 0.0),
            ("emotional_tone_variability", 0.41, 0.12),
            ("emotional_tone_variability", 0.4, 0.06),
            ("emotional_tone_variability", 0.21, 0.06),
            ("emotional_tone_variability", 0.2, 0.0),
        ],
    )
    def test_metric_ladders(self, decider, field, level, increase):
        metrics = make_metrics(**{field: level})
        threshold = decider.compute_threshold(metrics, signals())
        assert threshold == pytest.approx(0.58 + increase)

    def test_only_the_highest_raise_of_a_category_applies(self, decider):
        metrics = make_metrics(human_likeness_indicators=0.9)
        threshold = decider.compute_threshold(metrics, signals())
        assert threshold == pytest.approx(0.78)

    def test_static_threshold(self):
        decider = ThresholdDecider(0.65, dynamic=False)
        metrics = make_metrics(human_likeness_indicators=0.9)
        assert decider.compute_threshold(metrics, signals(word_count=10)) == 0.65


class TestDecide:
    def test_confidence_is_rounded_score_not_margin(self, decider):
        metrics = make_metrics(human_likeness_indicators=0.7)
        decision = decider.decide(0.6, metrics, FORMAL_AI_TEXT)
        assert decision.threshold > 0.6
        assert decision.is_ai_generated is False
        assert decision.confidence == 0.6

    def test_score_above_threshold(self, decider, neutral_metrics):
        decision = decider.decide(0.95, neutral_metrics, FORMAL_AI_TEXT)
        assert decision.is_ai_generated is True
        assert decision.confidence == 0.95
        assert decision.reasons

    def test_collect_signals(self, decider):
        collected = decider.collect_signals(LITERARY_TEXT)
        assert collected.word_count > 100
        assert 0.0 < collected.narrative_score <= 1.0
        assert 0.0 < collected.creativity_score <= 1.0

    def test_literary_fixtures_lower_creativity(self):
        plain = ThresholdDecider(include_literary_fixtures=False)
        assert (
            plain.collect_signals(LITERARY_TEXT).creativity_score
            < ThresholdDecider().collect_signals(LITERARY_TEXT).creativity_score
        )


class TestRoundConfidence:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [(0.125, 0.13), (0.124, 0.12), (0.004, 0.0), (0.996, 1.0), (1.0, 1.0)],
    )
    def test_halves_round_up(self, score, expected):
        assert round_confidence(score) == expected
