"""Module estimating how predictable a text is under its own n-gram model."""

import math
from collections import Counter
from collections.abc import Sequence

# Returned for texts too short to contain a single trigram.
SHORT_TEXT_PERPLEXITY = 10.0

_TRIGRAM_WEIGHT = 0.6
_BIGRAM_WEIGHT = 0.3
_UNIGRAM_WEIGHT = 0.1
_SMOOTHING = 0.1
_MIN_PROBABILITY = 0.0001


def calculate_perplexity(words: Sequence[str]) -> float:
    """
    Calculate perplexity of a word sequence under an interpolated trigram model.

    The model is estimated from the sequence itself. Every word from the third
    onwards is scored with a mix of trigram, bigram and unigram probabilities,
    each with add-0.1 smoothing normalised by the size of its frequency table.

    Args:
        words (Sequence[str]): Tokens of a text in order.

    Returns:
        float: Perplexity, always positive. Lower values mean a more predictable
            text. Sequences shorter than three words get a fixed value of 10.
    """
    if len(words) < 3:
        return SHORT_TEXT_PERPLEXITY

    unigrams = Counter(words)
    bigrams = Counter(zip(words, words[1:], strict=False))
    trigrams = Counter(zip(words, words[1:], words[2:], strict=False))

    total_log_probability = 0.0
    predictions = 0
    for i in range(2, len(words)):
        first, previous, current = words[i - 2], words[i - 1], words[i]

        probability = 0.0
        previous_bigram_count = bigrams[(first, previous)]
        if previous_bigram_count > 0:
            probability += (
                _TRIGRAM_WEIGHT
                * (trigrams[(first, previous, current)] + _SMOOTHING)
                / (previous_bigram_count + _SMOOTHING * len(trigrams))
            )

        previous_count = unigrams[previous]
        if previous_count > 0:
            probability += (
                _BIGRAM_WEIGHT
                * (bigrams[(previous, current)] + _SMOOTHING)
                / (previous_count + _SMOOTHING * len(bigrams))
            )

        probability += (
            _UNIGRAM_WEIGHT
            * (unigrams[current] + _SMOOTHING)
            / (len(words) + _SMOOTHING * len(unigrams))
        )

        total_log_probability += math.log2(max(probability, _MIN_PROBABILITY))
        predictions += 1

    average_log_probability = total_log_probability / max(predictions, 1)
    return 2 ** (-average_log_probability)
