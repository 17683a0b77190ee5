"""
Module with metrics of human, informal and emotional writing.

Each metric averages many sub-indicators, and every sub-indicator is capped on
its own (usually at 1), so a single pattern cannot saturate a metric.
"""

from collections.abc import Sequence

from ai_text_detector.metrics.patterns import (
    AND_CONJUNCTION,
    CAPS_WORD,
    CONTRACTION,
    CONVERSATIONAL_MARKER,
    CONVERSATIONAL_WORD,
    DOUBLE_SPACING,
    EMOTIONAL_MARKER_PATTERNS,
    EMOTIONAL_PUNCTUATION,
    EMOTIONAL_WORD,
    EXCLAMATION_MARK,
    INTERNET_SLANG,
    LITERARY_CHARACTER_CUE,
    LITERARY_PHRASE,
    MULTIPLE_PUNCTUATION,
    PERSONAL_PRONOUN,
    QUESTION_MARK,
    REPEATED_VOWELS,
    SHORT_ANSWER,
    SLANG_PATTERNS,
    THIRD_PERSON_PRONOUN,
    TRIPLED_LETTER,
    count_all_matches,
    count_matches,
)
from ai_text_detector.nlp.lexicon import DEFAULT_LEXICON, Lexicon
from ai_text_detector.nlp.sentence_splitter import split_into_sentences
from ai_text_detector.nlp.tokeniser import tokenise


def _is_fragment(sentence: str) -> bool:
    words = sentence.split()
    return len(words) < 4 and not any(SHORT_ANSWER.match(word) for word in words)


def calculate_human_likeness_indicators(
    text: str, *, include_literary_fixtures: bool = True
) -> float:
    """
    Calculate how many traits of casual human writing a text shows.

    Twelve sub-indicators are averaged: slang, contractions, typo-like spelling,
    first person pronouns, expressive punctuation, capitalised words, internet
    slang, fragments, conversational fillers, literary phrases, character cues
    and third person pronouns.

    Args:
        text (str): The analysed text.
        include_literary_fixtures (bool, optional): Whether the two sub-indicators
            tuned on a single literary excerpt are counted. When disabled they
            contribute 0 but still take part in the average. Defaults to True.

    Returns:
        float: Human-likeness in the range [0, 1].
    """
    words = tokenise(text)
    sentences = split_into_sentences(text)

    typos = (
        count_matches(REPEATED_VOWELS, text)
        + count_matches(TRIPLED_LETTER, text)
        + count_matches(DOUBLE_SPACING, text)
    )
    fragments = sum(1 for sentence in sentences if _is_fragment(sentence))

    indicators = [
        min(count_all_matches(SLANG_PATTERNS, text) / 3, 1.0),
        min(count_matches(CONTRACTION, text) / 5, 1.0),
        min(typos / 5, 1.0),
        min(count_matches(PERSONAL_PRONOUN, text) / max(len(words) * 0.05, 1), 1.0),
        min(count_matches(EMOTIONAL_PUNCTUATION, text) / 3, 1.0),
        min(count_matches(CAPS_WORD, text) / 5, 1.0),
        min(count_matches(INTERNET_SLANG, text) / 2, 1.0),
        min(fragments / max(len(sentences) * 0.3, 1), 0.8),
        min(count_matches(CONVERSATIONAL_MARKER, text) / max(len(words) * 0.1, 1), 1.0),
    ]
    if include_literary_fixtures:
        indicators.append(min(count_matches(LITERARY_PHRASE, text) / 3, 1.0))
        indicators.append(min(count_matches(LITERARY_CHARACTER_CUE, text) / 5, 0.8))
    else:
        indicators.extend((0.0, 0.0))
    indicators.append(
        min(count_matches(THIRD_PERSON_PRONOUN, text) / max(len(words) * 0.08, 1), 0.7)
    )

    return sum(indicators) / len(indicators)


def calculate_emotional_tone_variability(text: str) -> float:
    """
    Calculate density of emotional signals.

    Emotion marker patterns, exclamation and question marks and emotion words are
    counted together and related to a tenth of the word count.

    Args:
        text (str): The analysed text.

    Returns:
        float: Emotional signal density capped at 1.
    """
    words = tokenise(text)
    signals = (
        count_all_matches(EMOTIONAL_MARKER_PATTERNS, text)
        + count_matches(EXCLAMATION_MARK, text)
        + count_matches(QUESTION_MARK, text)
        + count_matches(EMOTIONAL_WORD, text)
    )
    return min(signals / max(len(words) * 0.1, 1), 1.0)


def _starts_lowercase(sentence: str) -> bool:
    return "a" <= sentence[0] <= "z"


def _is_run_on(sentence: str) -> bool:
    return count_matches(AND_CONJUNCTION, sentence) > 2 and len(sentence.split()) > 20


def calculate_informalness_score(text: str) -> float:
    """
    Calculate how informal the register of a text is.

    Seven features are averaged: contractions, slang, fragments, repeated
    terminal punctuation, conversational words, sentences starting in lower case
    and run-on sentences chained with "and".

    Args:
        text (str): The analysed text.

    Returns:
        float: Informality in the range [0, 1].
    """
    words = tokenise(text)
    sentences = split_into_sentences(text)

    fragments = sum(1 for sentence in sentences if len(sentence.split()) < 4)
    lowercase_starts = sum(1 for sentence in sentences if _starts_lowercase(sentence))
    run_ons = sum(1 for sentence in sentences if _is_run_on(sentence))

    features = (
        min(count_matches(CONTRACTION, text) / max(len(words) * 0.1, 1), 1.0),
        min(count_all_matches(SLANG_PATTERNS, text) / 5, 1.0),
        min(fragments / max(len(sentences) * 0.4, 1), 1.0),
        min(count_matches(MULTIPLE_PUNCTUATION, text) / 5, 1.0),
        min(count_matches(CONVERSATIONAL_WORD, text) / max(len(words) * 0.05, 1), 1.0),
        min(lowercase_starts / max(len(sentences) * 0.3, 1), 1.0),
        min(run_ons / max(len(sentences) * 0.5, 1), 0.8),
    )
    return sum(features) / len(features)


def calculate_discourse_marker_patterns(
    words: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON
) -> float:
    """
    Calculate density of discourse marker vocabulary.

    A word counts when it appears inside any discourse marker, so the parts of
    multi-word markers ("other", "hand", "example") count as well.

    Args:
        words (Sequence[str]): Tokens of a text.
        lexicon (Lexicon, optional): Word lists. Defaults to the built-in lexicon.

    Returns:
        float: Fifty times the density, capped at 1. 0 for no words.
    """
    if not words:
        return 0.0
    markers = sum(
        1
        for word in words
        if any(word.lower() in marker.lower() for marker in lexicon.discourse_markers)
    )
    return min(markers / len(words) * 50, 1.0)


def calculate_function_word_analysis(
    words: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON
) -> float:
    """
    Score deviation of the function word ratio from the human range.

    Args:
        words (Sequence[str]): Tokens of a text.
        lexicon (Lexicon, optional): Word lists. Defaults to the built-in lexicon.

    Returns:
        float: 0.2 for a ratio within [0.4, 0.6], otherwise twice the distance
            from 0.5 capped at 1. 0 for no words.
    """
    if not words:
        return 0.0
    function_words = sum(1 for word in words if word.lower() in lexicon.function_words)
    ratio = function_words / len(words)
    if 0.4 <= ratio <= 0.6:
        return 0.2
    return min(abs(ratio - 0.5) * 2, 1.0)
