"""Module with syntactic and semantic metrics."""

from collections import Counter
from collections.abc import Sequence

from ai_text_detector.metrics.patterns import COORDINATOR, SUBORDINATOR, count_matches
from ai_text_detector.nlp.tokeniser import tokenise


def calculate_syntactic_complexity(sentences: Sequence[str]) -> float:
    """
    Calculate clause density averaged over sentences.

    Each sentence scores the number of subordinators and coordinators, plus 2
    for more than 30 words and another 3 for more than 40, divided by its length.

    Args:
        sentences (Sequence[str]): Sentences of a text.

    Returns:
        float: Mean per-sentence complexity, 0 for no sentences.
    """
    if not sentences:
        return 0.0

    total_complexity = 0.0
    for sentence in sentences:
        length = len(sentence.split())
        complexity = count_matches(SUBORDINATOR, sentence) + count_matches(
            COORDINATOR, sentence
        )
        if length > 30:
            complexity += 2
        if length > 40:
            complexity += 3
        total_complexity += complexity / max(length, 1)
    return total_complexity / len(sentences)


def calculate_semantic_coherence(sentences: Sequence[str]) -> float:
    """
    Calculate mean Jaccard word overlap of consecutive sentences.

    Args:
        sentences (Sequence[str]): Sentences of a text.

    Returns:
        float: Overlap in the range [0, 1]. 1 if there are fewer than two
            sentences.
    """
    if len(sentences) < 2:
        return 1.0

    word_sets = [set(tokenise(sentence)) for sentence in sentences]
    coherence = 0.0
    for previous, current in zip(word_sets, word_sets[1:], strict=False):
        union = previous | current
        if union:
            coherence += len(previous & current) / len(union)
    return coherence / (len(sentences) - 1)


def calculate_n_gram_repetition(words: Sequence[str]) -> float:
    """Calculate the share of distinct trigrams that occur more than once."""
    trigrams = Counter(zip(words, words[1:], words[2:], strict=False))
    repeated = sum(1 for count in trigrams.values() if count > 1)
    return repeated / max(len(trigrams), 1)


def calculate_bigram_unusualness(words: Sequence[str]) -> float:
    """
    Measure bigrams that co-occur far more often than chance predicts.

    A bigram is unusual when its count exceeds twice the count expected if its
    two words were independent. Each unusual bigram adds its share of all bigrams.

    Args:
        words (Sequence[str]): Tokens of a text.

    Returns:
        float: Summed share of unusual bigrams capped at 1.
    """
    total_bigrams = len(words) - 1
    if total_bigrams < 1:
        return 0.0

    unigrams = Counter(words)
    bigrams = Counter(zip(words, words[1:], strict=False))
    unusualness = 0.0
    for (first, second), count in bigrams.items():
        expected = unigrams[first] * unigrams[second] / len(words)
        if count > expected * 2:
            unusualness += count / total_bigrams
    return min(unusualness, 1.0)
