"""Module with metrics of topical and structural consistency across sentences."""

import math
from collections import Counter
from collections.abc import Sequence

from ai_text_detector.nlp.lexicon import DEFAULT_LEXICON, Lexicon
from ai_text_detector.nlp.tokeniser import extract_topic_words

# Sentence pairs up to this distance are compared for topic coherence.
_TOPIC_WINDOW = 3


def calculate_contextual_consistency(
    sentences: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON
) -> float:
    """
    Measure how topics carry over within windows of three sentences.

    For every interior sentence, the topic words of it and its two neighbours
    are pooled; the score is the share of pooled words used by at least two of
    the three sentences.

    Args:
        sentences (Sequence[str]): Sentences of a text.
        lexicon (Lexicon, optional): Word lists. Defaults to the built-in lexicon.

    Returns:
        float: Mean share in the range [0, 1]. 1 for fewer than three sentences.
    """
    if len(sentences) < 3:
        return 1.0

    topics = [set(extract_topic_words(sentence, lexicon)) for sentence in sentences]
    consistency = 0.0
    for window in zip(topics, topics[1:], topics[2:], strict=False):
        pooled = set().union(*window)
        shared = [
            topic
            for topic in pooled
            if sum(topic in sentence_topics for sentence_topics in window) >= 2
        ]
        consistency += len(shared) / max(len(pooled), 1)
    return consistency / max(len(sentences) - 2, 1)


def _structure_of(sentence: str) -> str:
    length = len(sentence.split())
    if length <= 5:
        return "short"
    if length <= 15:
        return "medium"
    if length <= 25:
        return "long"
    return "very_long"


def calculate_sentence_structure_entropy(sentences: Sequence[str]) -> float:
    """
    Calculate normalised entropy of sentence length classes.

    Sentences are classed as short (up to 5 words), medium (up to 15), long
    (up to 25) or very long.

    Args:
        sentences (Sequence[str]): Sentences of a text.

    Returns:
        float: Entropy in the range [0, 1]. 0 when all sentences share a class.
    """
    structures = Counter(_structure_of(sentence) for sentence in sentences)
    normaliser = math.log2(min(len(structures), len(sentences))) if sentences else 0.0
    if normaliser == 0:
        return 0.0

    entropy = 0.0
    for count in structures.values():
        probability = count / len(sentences)
        entropy -= probability * math.log2(probability)
    return entropy / normaliser


def calculate_topic_coherence_score(
    sentences: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON
) -> float:
    """
    Calculate mean topic overlap of nearby sentences.

    Every sentence is compared with the next three using Jaccard similarity of
    their topic words.

    Args:
        sentences (Sequence[str]): Sentences of a text.
        lexicon (Lexicon, optional): Word lists. Defaults to the built-in lexicon.

    Returns:
        float: Mean similarity in the range [0, 1]. 1 for fewer than two
            sentences.
    """
    if len(sentences) < 2:
        return 1.0

    topics = [set(extract_topic_words(sentence, lexicon)) for sentence in sentences]
    similarities = [
        len(topics[i] & topics[j]) / max(len(topics[i] | topics[j]), 1)
        for i in range(len(topics) - 1)
        for j in range(i + 1, min(i + 1 + _TOPIC_WINDOW, len(topics)))
    ]
    return sum(similarities) / len(similarities)
