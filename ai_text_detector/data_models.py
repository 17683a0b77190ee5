"""Module with project-wide data models."""

from pydantic import BaseModel, ConfigDict, Field


class AnalysisMetrics(BaseModel):
    """
    Named linguistic and statistical measurements of a single text.

    Every field is populated for every analysed text. Ratios and scores lie in
    the range [0, 1]; `perplexity`, `readability_score`,
    `average_words_per_sentence`, `sentence_variability`, `formality_index`,
    `syntactic_complexity` and `transition_density` (a percentage) are
    unbounded, and `burstiness` lies in the range [-1, 1].
    """

    perplexity: float
    burstiness: float
    average_words_per_sentence: float
    sentence_variability: float
    lexical_diversity: float
    readability_score: float
    syntactic_complexity: float
    semantic_coherence: float
    n_gram_repetition: float
    punctuation_patterns: float
    word_frequency_distribution: float
    transition_density: float
    formality_index: float
    vocabulary_richness: float
    contextual_consistency: float
    entropy_score: float
    human_likeness_indicators: float
    emotional_tone_variability: float
    discourse_marker_patterns: float
    function_word_analysis: float
    informalness_score: float
    sentence_structure_entropy: float
    topic_coherence_score: float
    bigram_unusualness: float
    stylometric_signature: float

    model_config = ConfigDict(frozen=True)


class ThresholdSignals(BaseModel):
    """Text-level signals, besides the metrics, that move the decision threshold."""

    word_count: int = Field(..., ge=0)
    narrative_score: float = Field(..., ge=0.0, le=1.0)
    creativity_score: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)


class Decision(BaseModel):
    """Verdict of the threshold decider for a single score."""

    is_ai_generated: bool
    confidence: float = Field(..., ge=0.0, le=1.0)
    threshold: float
    reasons: list[str]

    model_config = ConfigDict(frozen=True)


class DetectionResult(BaseModel):
    """
    Result of analysing a text.

    `confidence` is the score rounded to two decimals, not a margin over the
    decision threshold. A text can be reported with `confidence=0.60` and
    `is_ai_generated=False` when its threshold rose above 0.60.
    """

    is_ai_generated: bool
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasons: list[str]
    score: float = Field(..., ge=0.0, le=1.0)
    perplexity_score: float
    burstiness_score: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """
        Convert the result into a textual form.

        Returns:
            str: Pretty textual form of a result.
        """
        verdict = "AI-generated" if self.is_ai_generated else "Human-written"
        lines = [
            f"  Verdict:     {verdict}",
            f"  Confidence:  {self.confidence:.2f}",
            f"  Score:       {self.score:.4f}",
            f"  Perplexity:  {self.perplexity_score:.4f}",
            f"  Burstiness:  {self.burstiness_score:.4f}",
        ]
        if self.reasons:
            lines.append("  Reasons:")
            lines.extend(f"    - {reason}" for reason in self.reasons)
        return "\n".join(lines)
