"""
Module with narrative and creative writing scores.

Both scores raise the decision threshold for fiction, which the other metrics
tend to misjudge. Several creativity cues were tuned on one literary excerpt and
are treated as a narrow heuristic that can be switched off.
"""

from ai_text_detector.metrics.patterns import (
    CHARACTER_FOCUS,
    CONCRETE_NOUN,
    CREATIVE_PHRASE,
    DESCRIPTIVE_ADJECTIVE,
    DIALOGUE_QUOTE,
    IMAGERY_WORD,
    PAST_TENSE_VERB,
    PROPER_NOUN,
    SIMILE_CUE,
    THIRD_PERSON_PRONOUN,
    count_matches,
)
from ai_text_detector.nlp.tokeniser import tokenise


def calculate_narrative_score(text: str) -> float:
    """
    Calculate how much a text reads like storytelling.

    Averages densities of proper nouns, past tense verbs, descriptive adjectives,
    dialogue quotes and third person pronouns.

    Args:
        text (str): The analysed text.

    Returns:
        float: Narrative score in the range [0, 1].
    """
    words = tokenise(text)
    indicators = (
        min(count_matches(PROPER_NOUN, text) / max(len(words) * 0.1, 1), 1.0),
        min(count_matches(PAST_TENSE_VERB, text) / max(len(words) * 0.1, 1), 1.0),
        min(count_matches(DESCRIPTIVE_ADJECTIVE, text) / max(len(words) * 0.08, 1), 1.0),
        min(count_matches(DIALOGUE_QUOTE, text) / 10, 0.8),
        min(count_matches(THIRD_PERSON_PRONOUN, text) / max(len(words) * 0.05, 1), 1.0),
    )
    return sum(indicators) / len(indicators)


def calculate_creativity_score(text: str, *, include_literary_fixtures: bool = True) -> float:
    """
    Calculate how much a text uses figurative and concrete language.

    Averages similes, creative phrases, imagery words, concrete nouns and
    character-focused wording.

    Args:
        text (str): The analysed text.
        include_literary_fixtures (bool, optional): Whether the creative phrase,
            imagery and character sub-indicators tuned on a single literary
            excerpt are counted. When disabled they contribute 0 but still take
            part in the average. Defaults to True.

    Returns:
        float: Creativity score in the range [0, 1].
    """
    words = tokenise(text)
    similes = min(count_matches(SIMILE_CUE, text) / max(len(words) * 0.05, 1), 1.0)
    concrete = min(count_matches(CONCRETE_NOUN, text) / max(len(words) * 0.08, 1), 1.0)

    if include_literary_fixtures:
        creative = min(count_matches(CREATIVE_PHRASE, text) / 5, 1.0)
        imagery = min(count_matches(IMAGERY_WORD, text) / max(len(words) * 0.1, 1), 1.0)
        characters = min(count_matches(CHARACTER_FOCUS, text) / 8, 1.0)
    else:
        creative = imagery = characters = 0.0

    indicators = (similes, creative, imagery, concrete, characters)
    return sum(indicators) / len(indicators)
