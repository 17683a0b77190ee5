"""Module explaining a score with human-readable reasons."""

from ai_text_detector.data_models import AnalysisMetrics

# Scores up to this value are accompanied by reasons supporting human authorship.
HUMAN_SCORE_CEILING = 0.4


def generate_reasons(metrics: AnalysisMetrics, score: float) -> list[str]:
    """
    List the metrics that point to AI or human authorship.

    Reasons are advisory and do not take part in the decision.

    Args:
        metrics (AnalysisMetrics): Metrics of a text.
        score (float): Final score of the text.

    Returns:
        list[str]: Reasons in a fixed order, possibly empty.
    """
    m = metrics
    reasons: list[str] = []

    if m.perplexity < 8:
        reasons.append(
            f"Low perplexity ({m.perplexity:.2f}) suggests predictable word "
            "patterns typical of AI"
        )
    if m.burstiness < 0.1:
        reasons.append(
            f"Low burstiness ({m.burstiness:.2f}) indicates consistent sentence "
            "structure characteristic of AI"
        )
    if m.human_likeness_indicators < 0.3:
        reasons.append(
            f"Low human-likeness indicators ({m.human_likeness_indicators:.2f}) "
            "suggest absence of typical human writing patterns"
        )
    if m.entropy_score < 0.7:
        reasons.append(
            f"Low entropy score ({m.entropy_score:.2f}) indicates predictable word "
            "choice patterns typical of AI"
        )
    if m.informalness_score < 0.2:
        reasons.append(
            f"Low informality score ({m.informalness_score:.2f}) suggests formal, "
            "AI-like writing style"
        )
    if 0.4 < m.lexical_diversity < 0.7:
        reasons.append(
            f"Lexical diversity ({m.lexical_diversity:.2f}) falls within "
            "AI-typical range"
        )
    if m.transition_density > 2:
        reasons.append(
            f"High transition word density ({m.transition_density:.1f}%) "
            "characteristic of AI writing"
        )
    if m.discourse_marker_patterns > 0.3:
        reasons.append(
            f"Elevated discourse marker usage ({m.discourse_marker_patterns:.2f}) "
            "typical of AI text structure"
        )
    if m.formality_index > 0.5:
        reasons.append(
            f"Elevated formality index ({m.formality_index:.2f}) suggests "
            "AI-generated content"
        )
    if m.semantic_coherence > 0.6:
        reasons.append(
            f"High semantic coherence ({m.semantic_coherence:.2f}) typical of AI "
            "optimization"
        )
    if m.function_word_analysis > 0.5:
        reasons.append(
            f"Function word distribution ({m.function_word_analysis:.2f}) deviates "
            "from natural human patterns"
        )
    if m.emotional_tone_variability < 0.2:
        reasons.append(
            f"Low emotional tone variability ({m.emotional_tone_variability:.2f}) "
            "suggests limited emotional expression typical of AI"
        )
    if m.stylometric_signature < 0.6:
        reasons.append(
            f"Low stylometric variation ({m.stylometric_signature:.2f}) indicates "
            "consistent AI writing patterns"
        )
    if m.sentence_structure_entropy < 0.8:
        reasons.append(
            f"Low sentence structure entropy ({m.sentence_structure_entropy:.2f}) "
            "suggests uniform AI sentence construction"
        )
    if m.n_gram_repetition > 0.1:
        reasons.append(
            f"Repetitive n-gram patterns ({m.n_gram_repetition * 100:.1f}%) detected"
        )
    if m.bigram_unusualness > 0.2:
        reasons.append(
            f"Unusual bigram patterns ({m.bigram_unusualness * 100:.1f}%) may "
            "indicate AI generation"
        )

    if score <= HUMAN_SCORE_CEILING:
        reasons.append("Natural linguistic variation suggests human authorship")
        reasons.append("Irregular patterns inconsistent with AI generation")
        if m.human_likeness_indicators > 0.5:
            reasons.append("Strong human-like writing patterns detected")
        if m.informalness_score > 0.4:
            reasons.append("Informal language patterns suggest human authorship")
        if m.emotional_tone_variability > 0.3:
            reasons.append("Varied emotional expression typical of human writing")

    if m.entropy_score > 0.8:
        reasons.append(
            "High entropy indicates natural human unpredictability in word choice"
        )
    if m.vocabulary_richness < 0.3:
        reasons.append("Limited vocabulary richness may indicate AI limitations")

    return reasons
