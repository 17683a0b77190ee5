"""Module computing the full metrics record of a text."""

from loguru import logger

from ai_text_detector.data_models import AnalysisMetrics
from ai_text_detector.metrics.burstiness import (
    calculate_average_words_per_sentence,
    calculate_burstiness,
    calculate_sentence_variability,
)
from ai_text_detector.metrics.contextual import (
    calculate_contextual_consistency,
    calculate_sentence_structure_entropy,
    calculate_topic_coherence_score,
)
from ai_text_detector.metrics.human import (
    calculate_discourse_marker_patterns,
    calculate_emotional_tone_variability,
    calculate_function_word_analysis,
    calculate_human_likeness_indicators,
    calculate_informalness_score,
)
from ai_text_detector.metrics.lexical import (
    analyze_word_frequency_distribution,
    calculate_entropy_score,
    calculate_lexical_diversity,
    calculate_vocabulary_richness,
)
from ai_text_detector.metrics.perplexity import calculate_perplexity
from ai_text_detector.metrics.style import (
    analyze_punctuation_patterns,
    calculate_formality_index,
    calculate_readability_score,
    calculate_stylometric_signature,
    calculate_transition_density,
)
from ai_text_detector.metrics.syntactic import (
    calculate_bigram_unusualness,
    calculate_n_gram_repetition,
    calculate_semantic_coherence,
    calculate_syntactic_complexity,
)
from ai_text_detector.nlp.lexicon import DEFAULT_LEXICON, Lexicon
from ai_text_detector.nlp.sentence_splitter import RegexSentenceSplitter, SentenceSplitter
from ai_text_detector.nlp.tokeniser import RegexTokeniser, Tokeniser

# Words this short are left out of vocabulary-level metrics.
_MIN_CLEAN_WORD_LENGTH = 3


class MetricsAggregator:
    """Runs every metric over a text and collects the results."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        tokeniser: Tokeniser | None = None,
        sentence_splitter: SentenceSplitter | None = None,
        *,
        include_literary_fixtures: bool = True,
    ) -> None:
        """
        Configure the word lists and text segmentation used by the metrics.

        Args:
            lexicon (Lexicon, optional): Word lists. Defaults to the built-in
                lexicon.
            tokeniser (Tokeniser | None, optional): Word tokeniser. Defaults to
                `RegexTokeniser`.
            sentence_splitter (SentenceSplitter | None, optional): Sentence
                splitter. Defaults to `RegexSentenceSplitter`.
            include_literary_fixtures (bool, optional): Whether sub-indicators
                tuned on a single literary excerpt are counted. Defaults to True.
        """
        self._lexicon = lexicon
        self._tokeniser = tokeniser or RegexTokeniser()
        self._sentence_splitter = sentence_splitter or RegexSentenceSplitter()
        self._include_literary_fixtures = include_literary_fixtures

    def analyse(self, text: str) -> AnalysisMetrics:
        """
        Compute all metrics of a text.

        Args:
            text (str): The text to be analysed.

        Returns:
            AnalysisMetrics: Record with every metric populated.
        """
        sentences = self._sentence_splitter.split_into_sentences(text)
        words = self._tokeniser.tokenise(text)
        clean_words = [word for word in words if len(word) >= _MIN_CLEAN_WORD_LENGTH]
        logger.debug(
            f"Analysing {len(words)} words ({len(clean_words)} clean) "
            f"in {len(sentences)} sentences."
        )

        return AnalysisMetrics(
            perplexity=calculate_perplexity(words),
            burstiness=calculate_burstiness(sentences),
            average_words_per_sentence=calculate_average_words_per_sentence(sentences),
            sentence_variability=calculate_sentence_variability(sentences),
            lexical_diversity=calculate_lexical_diversity(clean_words),
            readability_score=calculate_readability_score(text, sentences, words),
            syntactic_complexity=calculate_syntactic_complexity(sentences),
            semantic_coherence=calculate_semantic_coherence(sentences),
            n_gram_repetition=calculate_n_gram_repetition(words),
            punctuation_patterns=analyze_punctuation_patterns(text),
            word_frequency_distribution=analyze_word_frequency_distribution(
                clean_words
            ),
            transition_density=calculate_transition_density(
                clean_words, self._lexicon
            ),
            formality_index=calculate_formality_index(clean_words, self._lexicon),
            vocabulary_richness=calculate_vocabulary_richness(clean_words),
            contextual_consistency=calculate_contextual_consistency(
                sentences, self._lexicon
            ),
            entropy_score=calculate_entropy_score(words),
            human_likeness_indicators=calculate_human_likeness_indicators(
                text, include_literary_fixtures=self._include_literary_fixtures
            ),
            emotional_tone_variability=calculate_emotional_tone_variability(text),
            discourse_marker_patterns=calculate_discourse_marker_patterns(
                clean_words, self._lexicon
            ),
            function_word_analysis=calculate_function_word_analysis(
                clean_words, self._lexicon
            ),
            informalness_score=calculate_informalness_score(text),
            sentence_structure_entropy=calculate_sentence_structure_entropy(sentences),
            topic_coherence_score=calculate_topic_coherence_score(
                sentences, self._lexicon
            ),
            bigram_unusualness=calculate_bigram_unusualness(words),
            stylometric_signature=calculate_stylometric_signature(
                text, sentences, words
            ),
        )
