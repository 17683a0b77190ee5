"""Module with the AI-written text detection pipeline."""

from loguru import logger

from ai_text_detector.configuration import config
from ai_text_detector.data_models import AnalysisMetrics, DetectionResult
from ai_text_detector.detection.scoring import ScoringStrategy, get_scoring_strategy
from ai_text_detector.detection.threshold import ThresholdDecider
from ai_text_detector.exceptions import EmptyInputError, TextTooShortError
from ai_text_detector.metrics.aggregator import MetricsAggregator


class AITextDetector:
    """Detector of AI-written text based on linguistic and statistical metrics."""

    def __init__(
        self,
        strategy: ScoringStrategy | None = None,
        aggregator: MetricsAggregator | None = None,
        min_text_length: int = config.min_text_length,
        *,
        include_literary_fixtures: bool = config.literary_fixture_patterns,
    ) -> None:
        """
        Set up the metrics, the scoring strategy and the threshold decider.

        Args:
            strategy (ScoringStrategy | None, optional): Strategy combining metrics
                into a score. Defaults to the strategy named in the configuration.
            aggregator (MetricsAggregator | None, optional): Computes the metrics.
                Defaults to an aggregator with the built-in lexicon.
            min_text_length (int, optional): The minimum number of characters of
                a trimmed text. Defaults to the value from the configuration.
            include_literary_fixtures (bool, optional): Whether cues tuned on a
                single literary excerpt are counted. Defaults to the value from
                the configuration.
        """
        self._strategy = strategy or get_scoring_strategy(config.scoring_strategy)
        self._aggregator = aggregator or MetricsAggregator(
            include_literary_fixtures=include_literary_fixtures
        )
        self._decider = ThresholdDecider(
            base_threshold=self._strategy.base_threshold,
            dynamic=self._strategy.dynamic_threshold,
            include_literary_fixtures=include_literary_fixtures,
        )
        self._min_text_length = min_text_length

    def get_name(self) -> str:
        """
        Get name of the detector.

        Returns:
            str: Name of the detector including its scoring strategy.
        """
        return f"{type(self).__name__}[{self._strategy.name}]"

    def _validate(self, text: str) -> None:
        trimmed = text.strip()
        if not trimmed:
            raise EmptyInputError
        if len(trimmed) < self._min_text_length:
            raise TextTooShortError(self._min_text_length)

    def analyse_text(self, text: str) -> AnalysisMetrics:
        """
        Compute all metrics of a text.

        Args:
            text (str): The text to be analysed.

        Raises:
            EmptyInputError: Raised if the text is empty or whitespace only.
            TextTooShortError: Raised if the trimmed text is shorter than
                the minimum length.

        Returns:
            AnalysisMetrics: Metrics of the text.
        """
        self._validate(text)
        return self._aggregator.analyse(text)

    def detect(self, text: str) -> float:
        """
        Get probability of a text being AI-written.

        Args:
            text (str): Text to be evaluated.

        Returns:
            float: Probability of the text being AI-generated.
                1.0 means certainly AI-written, 0.0 means human-made.
                The value is always in the range [0, 1].
        """
        return self._strategy.score(self.analyse_text(text))

    def detect_ai_text(self, text: str) -> DetectionResult:
        """
        Analyse a text and decide whether it was written by AI.

        Args:
            text (str): Text to be evaluated.

        Raises:
            EmptyInputError: Raised if the text is empty or whitespace only.
            TextTooShortError: Raised if the trimmed text is shorter than
                the minimum length.

        Returns:
            DetectionResult: Verdict, confidence, reasons and headline metrics.
        """
        metrics = self.analyse_text(text)
        score = self._strategy.score(metrics)
        decision = self._decider.decide(score, metrics, text)
        logger.debug(
            f"{self.get_name()}: score={score:.4f}, "
            f"threshold={decision.threshold:.2f}, "
            f"ai_generated={decision.is_ai_generated}"
        )
        return DetectionResult(
            is_ai_generated=decision.is_ai_generated,
            confidence=decision.confidence,
            reasons=decision.reasons,
            score=score,
            perplexity_score=metrics.perplexity,
            burstiness_score=metrics.burstiness,
        )
