"""Module with sentence length statistics."""

from collections.abc import Sequence

import numpy as np


def _sentence_lengths(sentences: Sequence[str]) -> np.ndarray:
    return np.array([len(sentence.split()) for sentence in sentences], dtype=float)


def calculate_burstiness(sentences: Sequence[str]) -> float:
    """
    Calculate burstiness of sentence lengths.

    Burstiness is `(std - mean) / (std + mean)` of words per sentence. It tends
    to -1 for uniform sentence lengths and to +1 for highly variable ones.

    Args:
        sentences (Sequence[str]): Sentences of a text.

    Returns:
        float: Burstiness in the range [-1, 1]. 0 if there are fewer than two
            sentences.
    """
    if len(sentences) < 2:
        return 0.0

    lengths = _sentence_lengths(sentences)
    mean = float(np.mean(lengths))
    std = float(np.std(lengths))
    return (std - mean) / (std + mean)


def calculate_average_words_per_sentence(sentences: Sequence[str]) -> float:
    """Calculate the mean number of words per sentence, 0 for no sentences."""
    if not sentences:
        return 0.0
    return float(np.mean(_sentence_lengths(sentences)))


def calculate_sentence_variability(sentences: Sequence[str]) -> float:
    """Calculate the standard deviation of sentence lengths in words."""
    if len(sentences) < 2:
        return 0.0
    return float(np.std(_sentence_lengths(sentences)))
