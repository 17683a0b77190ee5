"""Module with natural language tokenisers."""

import re
from abc import ABC, abstractmethod
from typing_extensions import override

from nltk.tokenize import RegexpTokenizer

from ai_text_detector.nlp.lexicon import DEFAULT_LEXICON, Lexicon

# Anything that is not an ASCII word character, whitespace, apostrophe or hyphen.
_NON_WORD_CHARACTERS = re.compile(r"[^A-Za-z0-9_\s'-]")


class Tokeniser(ABC):
    """An interface of a natural language tokeniser."""

    @abstractmethod
    def tokenise(self, text: str) -> list[str]:
        """
        Split a text into textual tokens.

        Args:
            text (str): A text to be split.

        Returns:
            list[str]: A list of resulting textual tokens.

        """


class RegexTokeniser(Tokeniser):
    """Lower-casing word tokeniser that keeps contractions and hyphenated words."""

    def __init__(self) -> None:
        """Initialise the whitespace splitter."""
        self._tokeniser = RegexpTokenizer(r"\s+", gaps=True)

    @override
    def tokenise(self, text: str) -> list[str]:
        cleaned = _NON_WORD_CHARACTERS.sub(" ", text.lower())
        return self._tokeniser.tokenize(cleaned)


_default_tokeniser = RegexTokeniser()


def tokenise(text: str) -> list[str]:
    """
    Split a text into lower-cased words with the default tokeniser.

    Args:
        text (str): A text to be split.

    Returns:
        list[str]: Words in the order of appearance, duplicates included.
    """
    return _default_tokeniser.tokenise(text)


def extract_topic_words(sentence: str, lexicon: Lexicon = DEFAULT_LEXICON) -> list[str]:
    """
    Get content-bearing words of a sentence.

    A topic word is longer than four characters and is neither a common word nor
    a transition word.

    Args:
        sentence (str): A single sentence.
        lexicon (Lexicon, optional): Word lists to filter against.
            Defaults to the built-in lexicon.

    Returns:
        list[str]: Topic words in the order of appearance.
    """
    return [
        word
        for word in tokenise(sentence)
        if len(word) > 4
        and word not in lexicon.common_words
        and word not in lexicon.transition_words
    ]
