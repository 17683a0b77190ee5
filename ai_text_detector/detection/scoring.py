"""Module with strategies turning a metrics record into an AI-probability score."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from typing_extensions import override

from loguru import logger

from ai_text_detector.data_models import AnalysisMetrics
from ai_text_detector.exceptions import UnknownStrategyError

# (exclusive upper bound, value) pairs; the first bound above the input wins.
Steps = tuple[tuple[float, float], ...]
# (exclusive lower bound, value) pairs; the first bound below the input wins.
Discounts = tuple[tuple[float, float], ...]


def _step(value: float, steps: Steps, default: float) -> float:
    for upper_bound, result in steps:
        if value < upper_bound:
            return result
    return default


def _discount(value: float, discounts: Discounts) -> float:
    for lower_bound, factor in discounts:
        if value > lower_bound:
            return factor
    return 1.0


def _clamp(score: float) -> float:
    return max(0.0, min(1.0, score))


class ScoringStrategy(ABC):
    """An interface for combining metrics into a score of a text being AI-written."""

    name: ClassVar[str]
    # Threshold the score is compared with before any text-specific adjustments.
    base_threshold: ClassVar[float]
    # Whether the decision threshold moves with text length and human signals.
    dynamic_threshold: ClassVar[bool]

    @abstractmethod
    def combine(self, metrics: AnalysisMetrics) -> float:
        """
        Combine metrics into a raw score.

        Args:
            metrics (AnalysisMetrics): Metrics of a text.

        Returns:
            float: Raw score, not necessarily in the range [0, 1].
        """

    def adjust(self, raw_score: float, metrics: AnalysisMetrics) -> float:
        """
        Correct a raw score using combinations of metric values.

        Args:
            raw_score (float): Output of `combine`.
            metrics (AnalysisMetrics): Metrics the raw score was computed from.

        Returns:
            float: Corrected score in the range [0, 1].
        """
        del metrics
        return _clamp(raw_score)

    def score(self, metrics: AnalysisMetrics) -> float:
        """
        Get probability of a text being AI-written.

        Args:
            metrics (AnalysisMetrics): Metrics of a text.

        Returns:
            float: Probability of the text being AI-generated.
                1.0 means certainly AI-written, 0.0 means human-made.
                The value is always in the range [0, 1].
        """
        raw_score = self.combine(metrics)
        score = _clamp(self.adjust(raw_score, metrics))
        logger.debug(f"{self.name} scoring: raw={raw_score:.4f}, adjusted={score:.4f}")
        return score


class AdaptiveScoringStrategy(ScoringStrategy):
    """
    Weighted evidence model followed by multiplicative human-signal discounts.

    A linear model cannot express that a few strong human signals should win
    over a noisy aggregate, so the linear score is discounted multiplicatively
    for each such signal and once more when several of them co-occur. This makes
    the score non-monotonic in combinations of metrics.
    """

    name = "adaptive"
    base_threshold = 0.58
    dynamic_threshold = True

    HUMAN_LIKENESS_WEIGHT = 0.25
    INFORMALNESS_WEIGHT = 0.20
    EMOTIONAL_TONE_WEIGHT = 0.15
    PERPLEXITY_WEIGHT = 0.18
    BURSTINESS_WEIGHT = 0.15
    TRANSITION_WEIGHT = 0.05

    PERPLEXITY_STEPS: ClassVar[Steps] = ((2, 1.0), (4, 0.8), (7, 0.5), (12, 0.2))
    PERPLEXITY_DEFAULT = 0.05
    BURSTINESS_STEPS: ClassVar[Steps] = ((-0.5, 0.9), (0, 0.6), (0.3, 0.3))
    BURSTINESS_DEFAULT = 0.1
    TRANSITION_DENSITY_TRIGGER = 2.0

    HUMAN_LIKENESS_DISCOUNTS: ClassVar[Discounts] = ((0.6, 0.2), (0.4, 0.4), (0.2, 0.7))
    INFORMALNESS_DISCOUNTS: ClassVar[Discounts] = ((0.6, 0.3), (0.4, 0.5), (0.2, 0.8))
    EMOTIONAL_TONE_DISCOUNTS: ClassVar[Discounts] = ((0.5, 0.4), (0.3, 0.6))
    # Discount by the number of co-occurring strong human indicators.
    STRONG_INDICATOR_DISCOUNTS: ClassVar[Discounts] = ((2, 0.1), (1, 0.3))

    @override
    def combine(self, metrics: AnalysisMetrics) -> float:
        score = (1 - metrics.human_likeness_indicators) * self.HUMAN_LIKENESS_WEIGHT
        score += (1 - metrics.informalness_score) * self.INFORMALNESS_WEIGHT
        score += (
            1 - min(metrics.emotional_tone_variability, 1.0)
        ) * self.EMOTIONAL_TONE_WEIGHT
        score += (
            _step(metrics.perplexity, self.PERPLEXITY_STEPS, self.PERPLEXITY_DEFAULT)
            * self.PERPLEXITY_WEIGHT
        )
        score += (
            _step(metrics.burstiness, self.BURSTINESS_STEPS, self.BURSTINESS_DEFAULT)
            * self.BURSTINESS_WEIGHT
        )
        # LLMs overuse transitions.
        if metrics.transition_density > self.TRANSITION_DENSITY_TRIGGER:
            score += min(metrics.transition_density / 10, 0.1) * self.TRANSITION_WEIGHT
        return score

    @staticmethod
    def count_strong_human_indicators(metrics: AnalysisMetrics) -> int:
        """
        Count human signals strong enough to compound with each other.

        Args:
            metrics (AnalysisMetrics): Metrics of a text.

        Returns:
            int: Number of strong indicators, from 0 to 4.
        """
        return sum(
            (
                metrics.human_likeness_indicators > 0.3,
                metrics.informalness_score > 0.3,
                metrics.emotional_tone_variability > 0.2,
                metrics.entropy_score > 0.8,
            )
        )

    @override
    def adjust(self, raw_score: float, metrics: AnalysisMetrics) -> float:
        # The order of discounts is fixed; the compound discount applies last.
        adjusted = raw_score
        adjusted *= _discount(
            metrics.human_likeness_indicators, self.HUMAN_LIKENESS_DISCOUNTS
        )
        adjusted *= _discount(metrics.informalness_score, self.INFORMALNESS_DISCOUNTS)
        adjusted *= _discount(
            metrics.emotional_tone_variability, self.EMOTIONAL_TONE_DISCOUNTS
        )
        adjusted *= _discount(
            self.count_strong_human_indicators(metrics),
            self.STRONG_INDICATOR_DISCOUNTS,
        )
        return _clamp(adjusted)


class NormalisedWeightedScoringStrategy(ScoringStrategy):
    """
    Conditional evidence model normalised by the sum of weights.

    Every check contributes its weight scaled by how strongly the metric points
    to AI writing, or nothing when the metric is outside its AI-typical range.
    There are no adaptive corrections and the decision threshold is fixed.
    """

    name = "normalised-weighted"
    base_threshold = 0.65
    dynamic_threshold = False

    def __init__(self) -> None:
        """Set weights of individual checks."""
        self._perplexity_weight = 0.25
        self._burstiness_weight = 0.2
        self._lexical_diversity_weight = 0.15
        self._semantic_coherence_weight = 0.12
        self._transition_density_weight = 0.1
        self._formality_weight = 0.08
        self._n_gram_repetition_weight = 0.05
        self._punctuation_weight = 0.05

    @override
    def combine(self, metrics: AnalysisMetrics) -> float:
        check_weights: dict[Callable[[AnalysisMetrics], float], float] = {
            self._check_perplexity: self._perplexity_weight,
            self._check_burstiness: self._burstiness_weight,
            self._check_lexical_diversity: self._lexical_diversity_weight,
            self._check_semantic_coherence: self._semantic_coherence_weight,
            self._check_transition_density: self._transition_density_weight,
            self._check_formality: self._formality_weight,
            self._check_n_gram_repetition: self._n_gram_repetition_weight,
            self._check_punctuation: self._punctuation_weight,
        }
        score = 0.0
        total_weight = 0.0
        for check, weight in check_weights.items():
            score += check(metrics) * weight
            total_weight += weight

        return score / total_weight

    def _check_perplexity(self, metrics: AnalysisMetrics) -> float:
        # LLM text is more predictable.
        if metrics.perplexity < 8:
            return (8 - metrics.perplexity) / 8
        return 0.0

    def _check_burstiness(self, metrics: AnalysisMetrics) -> float:
        # LLM sentences have consistent lengths.
        if metrics.burstiness < 0.1:
            return (0.1 - metrics.burstiness) / 0.1
        return 0.0

    def _check_lexical_diversity(self, metrics: AnalysisMetrics) -> float:
        return float(0.4 < metrics.lexical_diversity < 0.7)

    def _check_semantic_coherence(self, metrics: AnalysisMetrics) -> float:
        return float(0.3 < metrics.semantic_coherence < 0.8)

    def _check_transition_density(self, metrics: AnalysisMetrics) -> float:
        if metrics.transition_density > 2:
            return min(metrics.transition_density / 5, 1.0)
        return 0.0

    def _check_formality(self, metrics: AnalysisMetrics) -> float:
        if metrics.formality_index > 0.5:
            return min(metrics.formality_index, 1.0)
        return 0.0

    def _check_n_gram_repetition(self, metrics: AnalysisMetrics) -> float:
        if metrics.n_gram_repetition > 0.1:
            return min(metrics.n_gram_repetition * 2, 1.0)
        return 0.0

    def _check_punctuation(self, metrics: AnalysisMetrics) -> float:
        return metrics.punctuation_patterns


SCORING_STRATEGIES: dict[str, type[ScoringStrategy]] = {
    AdaptiveScoringStrategy.name: AdaptiveScoringStrategy,
    NormalisedWeightedScoringStrategy.name: NormalisedWeightedScoringStrategy,
}


def get_scoring_strategy(name: str) -> ScoringStrategy:
    """
    Create a scoring strategy registered under a name.

    Args:
        name (str): Name of the strategy, e.g. "adaptive".

    Raises:
        UnknownStrategyError: Raised if no strategy is registered under the name.

    Returns:
        ScoringStrategy: A new instance of the strategy.
    """
    if name not in SCORING_STRATEGIES:
        raise UnknownStrategyError(
            f"There is no such scoring strategy `{name}`. "
            f"Available strategies: {', '.join(sorted(SCORING_STRATEGIES))}."
        )
    return SCORING_STRATEGIES[name]()
