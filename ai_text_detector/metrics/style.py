"""Module with readability and writing style metrics."""

from collections.abc import Sequence

import numpy as np

from ai_text_detector.metrics.patterns import (
    COMMA,
    PUNCTUATION_MARK,
    SEMICOLON,
    STYLOMETRIC_PUNCTUATION,
    count_matches,
)
from ai_text_detector.nlp.lexicon import DEFAULT_LEXICON, Lexicon
from ai_text_detector.nlp.tokeniser import tokenise

_COMPLEX_WORD_LENGTH = 6
_PUNCTUATION_KINDS = 8


def calculate_readability_score(
    text: str, sentences: Sequence[str], words: Sequence[str]
) -> float:
    """
    Calculate a simplified Flesch reading ease score.

    `206.835 - 1.015 * words per sentence - 84.6 * complex word ratio`, where a
    complex word is longer than six characters.

    Args:
        text (str): The analysed text.
        sentences (Sequence[str]): Sentences of the text.
        words (Sequence[str]): Tokens of the text.

    Returns:
        float: Readability, unbounded. Higher means easier to read.
    """
    average_words_per_sentence = len(words) / max(len(sentences), 1)
    complex_words = sum(1 for word in words if len(word) > _COMPLEX_WORD_LENGTH)
    complex_word_ratio = complex_words / max(len(words), 1)
    return 206.835 - 1.015 * average_words_per_sentence - 84.6 * complex_word_ratio


def analyze_punctuation_patterns(text: str) -> float:
    """
    Score how closely punctuation density matches the moderate use of LLMs.

    Args:
        text (str): The analysed text.

    Returns:
        float: 0.3 for overall punctuation, 0.3 for commas and 0.2 for semicolons
            falling in their typical generated-text bands. 0 for no words.
    """
    words = tokenise(text)
    if not words:
        return 0.0

    punctuation_ratio = count_matches(PUNCTUATION_MARK, text) / len(words)
    comma_ratio = count_matches(COMMA, text) / len(words)
    semicolon_ratio = count_matches(SEMICOLON, text) / len(words)

    score = 0.0
    if 0.05 < punctuation_ratio < 0.15:
        score += 0.3
    if 0.02 < comma_ratio < 0.08:
        score += 0.3
    if 0.001 < semicolon_ratio < 0.01:
        score += 0.2
    return score


def calculate_transition_density(
    words: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON
) -> float:
    """
    Calculate the percentage of words containing a transition word.

    Args:
        words (Sequence[str]): Tokens of a text.
        lexicon (Lexicon, optional): Word lists. Defaults to the built-in lexicon.

    Returns:
        float: Percentage in the range [0, 100], 0 for no words.
    """
    if not words:
        return 0.0
    transitions = sum(
        1
        for word in words
        if any(transition in word for transition in lexicon.transition_words)
    )
    return transitions / len(words) * 100


def calculate_formality_index(
    words: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON
) -> float:
    """
    Calculate the rate of sophisticated words relative to common words.

    The common word rate is floored at 0.1.

    Args:
        words (Sequence[str]): Tokens of a text.
        lexicon (Lexicon, optional): Word lists. Defaults to the built-in lexicon.

    Returns:
        float: Formality index, 0 for no words.
    """
    if not words:
        return 0.0
    sophisticated = sum(1 for word in words if word in lexicon.sophisticated_words)
    common = sum(1 for word in words if word in lexicon.common_words)
    return sophisticated / len(words) / max(common / len(words), 0.1)


def _coefficient_of_variation(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    array = np.array(values, dtype=float)
    mean = float(np.mean(array))
    if mean == 0:
        return 0.0
    return min(float(np.std(array)) / mean, 1.0)


def calculate_stylometric_signature(
    text: str, sentences: Sequence[str], words: Sequence[str]
) -> float:
    """
    Calculate variability of a writing style across four dimensions.

    The signature averages the coefficient of variation of sentence lengths and
    of word lengths, the variety of punctuation kinds (out of eight) and the
    diversity of sentence-opening words. Each component is capped at 1.

    Args:
        text (str): The analysed text.
        sentences (Sequence[str]): Sentences of the text.
        words (Sequence[str]): Tokens of the text.

    Returns:
        float: Signature in the range [0, 1].
    """
    sentence_lengths = [len(sentence.split()) for sentence in sentences]
    word_lengths = [len(word) for word in words]
    punctuation_kinds = {
        match.group() for match in STYLOMETRIC_PUNCTUATION.finditer(text)
    }
    openers = [sentence.split()[0].lower() for sentence in sentences if sentence.split()]

    components = (
        _coefficient_of_variation(sentence_lengths),
        _coefficient_of_variation(word_lengths),
        min(len(punctuation_kinds) / _PUNCTUATION_KINDS, 1.0),
        min(len(set(openers)) / len(openers), 1.0) if openers else 0.0,
    )
    return sum(components) / len(components)
