"""Module with vocabulary-level metrics."""

import math
from collections import Counter
from collections.abc import Sequence

_ZIPF_RANKS = 10


def calculate_lexical_diversity(words: Sequence[str]) -> float:
    """
    Calculate the type-token ratio.

    Args:
        words (Sequence[str]): Tokens of a text.

    Returns:
        float: Distinct words divided by all words, 0 for no words.
    """
    if not words:
        return 0.0
    return len(set(words)) / len(words)


def calculate_vocabulary_richness(words: Sequence[str]) -> float:
    """
    Calculate the share of hapax legomena among distinct words.

    Args:
        words (Sequence[str]): Tokens of a text.

    Returns:
        float: Words occurring exactly once divided by distinct words,
            0 for no words.
    """
    counts = Counter(words)
    if not counts:
        return 0.0
    hapax_legomena = sum(1 for count in counts.values() if count == 1)
    return hapax_legomena / len(counts)


def analyze_word_frequency_distribution(words: Sequence[str]) -> float:
    """
    Measure how closely word frequencies follow Zipf's law.

    The frequency at rank `i` (0-based, top ten ranks) is compared with the
    ideal `f0 / (i + 1)`; each rank contributes `min / max` of the two.

    Args:
        words (Sequence[str]): Tokens of a text.

    Returns:
        float: Average agreement in the range [0, 1]. 0 if there are fewer than
            two distinct words.
    """
    frequencies = sorted(Counter(words).values(), reverse=True)
    compared_ranks = min(len(frequencies), _ZIPF_RANKS) - 1
    if compared_ranks < 1:
        return 0.0

    zipf_score = 0.0
    for rank in range(1, compared_ranks + 1):
        expected = frequencies[0] / (rank + 1)
        actual = frequencies[rank]
        zipf_score += min(actual, expected) / max(actual, expected)
    return zipf_score / compared_ranks


def calculate_entropy_score(words: Sequence[str]) -> float:
    """
    Calculate normalised Shannon entropy of the word distribution.

    Args:
        words (Sequence[str]): Tokens of a text.

    Returns:
        float: Entropy divided by `log2(min(distinct words, words))`, in the
            range [0, 1]. 0 if the text has fewer than two distinct words.
    """
    counts = Counter(words)
    total = len(words)
    normaliser = math.log2(min(len(counts), total)) if total else 0.0
    if normaliser == 0:
        return 0.0

    entropy = 0.0
    for count in counts.values():
        probability = count / total
        entropy -= probability * math.log2(probability)
    return entropy / normaliser
