"""Module for splitting a text into sentences."""

from abc import ABC, abstractmethod
from typing_extensions import override

from nltk.tokenize import RegexpTokenizer


class SentenceSplitter(ABC):
    """Interface for splitting a text into sentences."""

    @abstractmethod
    def split_into_sentences(self, text: str) -> list[str]:
        """
        Split a text into sentences.

        Args:
            text (str): Text to be split.

        Returns:
            list[str]: List of sentences, one items is one sentence.
        """


class RegexSentenceSplitter(SentenceSplitter):
    """
    Naive splitter cutting a text at every run of terminal punctuation.

    Abbreviations ("Mr."), ellipses and decimal numbers are not special-cased, so
    they produce extra sentence boundaries.
    """

    def __init__(self) -> None:
        """Initialise the terminal punctuation splitter."""
        self._tokeniser = RegexpTokenizer(r"[.!?]+", gaps=True)

    @override
    def split_into_sentences(self, text: str) -> list[str]:
        sentences = (chunk.strip() for chunk in self._tokeniser.tokenize(text))
        return [sentence for sentence in sentences if sentence]


_default_splitter = RegexSentenceSplitter()


def split_into_sentences(text: str) -> list[str]:
    """Split a text into trimmed, non-empty sentences with the default splitter."""
    return _default_splitter.split_into_sentences(text)
