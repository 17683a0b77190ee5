"""Module deciding whether a score means a text is AI-written."""

import math

from loguru import logger

from ai_text_detector.data_models import AnalysisMetrics, Decision, ThresholdSignals
from ai_text_detector.detection.reasons import generate_reasons
from ai_text_detector.metrics.narrative import (
    calculate_creativity_score,
    calculate_narrative_score,
)
from ai_text_detector.nlp.tokeniser import tokenise

# (exclusive lower bound, threshold increase); the first bound below the input wins.
Raises = tuple[tuple[float, float], ...]

SHORT_TEXT_WORDS = 100
SHORT_TEXT_RAISE = 0.04
LONG_TEXT_WORDS = 300
LONG_TEXT_LOWERING = 0.02

NARRATIVE_RAISES: Raises = ((0.5, 0.15), (0.35, 0.08))
HUMAN_LIKENESS_RAISES: Raises = ((0.6, 0.20), (0.4, 0.12), (0.2, 0.05))
INFORMALNESS_RAISES: Raises = ((0.5, 0.15), (0.3, 0.08), (0.15, 0.03))
EMOTIONAL_TONE_RAISES: Raises = ((0.4, 0.12), (0.2, 0.06))
CREATIVITY_RAISES: Raises = ((0.5, 0.20), (0.35, 0.10))


def _raise_for(value: float, raises: Raises) -> float:
    for lower_bound, increase in raises:
        if value > lower_bound:
            return increase
    return 0.0


def round_confidence(score: float) -> float:
    """
    Round a score to two decimals, halves rounded up.

    Args:
        score (float): Score in the range [0, 1].

    Returns:
        float: The rounded score.
    """
    return math.floor(score * 100 + 0.5) / 100


class ThresholdDecider:
    """Compares a score with a threshold adapted to the text."""

    def __init__(
        self,
        base_threshold: float = 0.58,
        *,
        dynamic: bool = True,
        include_literary_fixtures: bool = True,
    ) -> None:
        """
        Configure the threshold.

        Args:
            base_threshold (float, optional): Threshold before adjustments.
                Defaults to 0.58.
            dynamic (bool, optional): Whether the threshold is adjusted to text
                length, narrative style and human signals. Defaults to True.
            include_literary_fixtures (bool, optional): Whether the creativity
                score counts cues tuned on a single literary excerpt.
                Defaults to True.
        """
        self._base_threshold = base_threshold
        self._dynamic = dynamic
        self._include_literary_fixtures = include_literary_fixtures

    def collect_signals(self, text: str) -> ThresholdSignals:
        """
        Measure the text-level signals that move the threshold.

        Args:
            text (str): The analysed text.

        Returns:
            ThresholdSignals: Word count, narrative and creativity scores.
        """
        return ThresholdSignals(
            word_count=len(tokenise(text)),
            narrative_score=calculate_narrative_score(text),
            creativity_score=calculate_creativity_score(
                text, include_literary_fixtures=self._include_literary_fixtures
            ),
        )

    def compute_threshold(
        self, metrics: AnalysisMetrics, signals: ThresholdSignals
    ) -> float:
        """
        Compute the threshold a score has to exceed to be judged AI-written.

        Short, narrative, creative, human-like, informal and emotional texts get
        a higher threshold; long texts a slightly lower one. Each category adds
        at most one of its increases.

        Args:
            metrics (AnalysisMetrics): Metrics of the text.
            signals (ThresholdSignals): Text-level signals of the text.

        Returns:
            float: The decision threshold.
        """
        threshold = self._base_threshold
        if not self._dynamic:
            return threshold

        if signals.word_count < SHORT_TEXT_WORDS:
            threshold += SHORT_TEXT_RAISE
        elif signals.word_count > LONG_TEXT_WORDS:
            threshold -= LONG_TEXT_LOWERING

        threshold += _raise_for(signals.narrative_score, NARRATIVE_RAISES)
        threshold += _raise_for(
            metrics.human_likeness_indicators, HUMAN_LIKENESS_RAISES
        )
        threshold += _raise_for(metrics.informalness_score, INFORMALNESS_RAISES)
        threshold += _raise_for(
            metrics.emotional_tone_variability, EMOTIONAL_TONE_RAISES
        )
        threshold += _raise_for(signals.creativity_score, CREATIVITY_RAISES)
        return threshold

    def decide(self, score: float, metrics: AnalysisMetrics, text: str) -> Decision:
        """
        Decide whether a text is AI-written.

        The confidence is the rounded score, not its margin over the threshold,
        so it can exceed 0.5 for a text judged human-written.

        Args:
            score (float): Score of the text in the range [0, 1].
            metrics (AnalysisMetrics): Metrics of the text.
            text (str): The analysed text.

        Returns:
            Decision: Verdict, confidence, threshold and reasons.
        """
        signals = self.collect_signals(text)
        threshold = self.compute_threshold(metrics, signals)
        logger.debug(
            f"Threshold {threshold:.2f} for {signals.word_count} words "
            f"(narrative={signals.narrative_score:.2f}, "
            f"creativity={signals.creativity_score:.2f}), score {score:.4f}."
        )
        return Decision(
            is_ai_generated=score > threshold,
            confidence=round_confidence(score),
            threshold=threshold,
            reasons=generate_reasons(metrics, score),
        )
