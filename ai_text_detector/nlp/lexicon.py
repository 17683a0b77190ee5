"""Module with the word lists shared by the metrics."""

from pydantic import BaseModel, ConfigDict


class Lexicon(BaseModel):
    """Read-only word lists consulted by the metrics."""

    # The most frequent English words, used to tell content words from filler.
    common_words: frozenset[str]
    # Closed-class words for stylometric function word ratios.
    function_words: frozenset[str]
    # Connectives that LLMs tend to overuse. Matched as substrings of words.
    transition_words: tuple[str, ...]
    # Latinate vocabulary typical of formal, generated prose.
    sophisticated_words: frozenset[str]
    # Words and phrases signalling rhetorical structure.
    discourse_markers: tuple[str, ...]

    model_config = ConfigDict(frozen=True)


DEFAULT_LEXICON = Lexicon(
    common_words=frozenset(
        {
            "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
            "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
            "this", "but", "his", "by", "from", "they", "she", "or", "an",
            "will", "my", "one", "all", "would", "there", "their",
        }
    ),
    function_words=frozenset(
        {
            "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
            "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
            "this", "but", "his", "by", "from", "they", "she", "or", "an",
            "will", "my", "one", "all", "would", "there", "their", "what",
            "so", "up", "out", "if", "about", "who", "get", "which", "go",
            "me", "when", "make", "can", "like", "time", "no", "just", "him",
            "know", "take", "people", "into", "year", "your", "good", "some",
            "could", "them", "see", "other", "than", "then", "now", "look",
            "only", "come", "its", "over", "think", "also", "back", "after",
            "use", "two", "how", "our", "work", "first", "well", "way", "even",
            "new", "want", "because", "any", "these", "give", "day", "most",
            "us",
        }
    ),
    transition_words=(
        "however", "furthermore", "moreover", "additionally", "consequently",
        "therefore", "thus", "hence", "nevertheless", "nonetheless",
        "meanwhile", "subsequently", "ultimately", "essentially",
        "specifically", "particularly", "notably", "importantly",
        "significantly", "interestingly", "surprisingly", "accordingly",
        "alternatively", "comparatively", "conversely", "similarly",
        "likewise", "simultaneously",
    ),
    sophisticated_words=frozenset(
        {
            "utilize", "facilitate", "demonstrate", "implement", "establish",
            "maintain", "require", "appropriate", "significant", "considerable",
            "substantial", "comprehensive", "extensive", "innovative",
            "strategic", "optimize", "enhance", "leverage", "paradigm",
            "methodology", "framework", "initiative", "synergy",
        }
    ),
    discourse_markers=(
        "first", "second", "third", "finally", "lastly", "initially",
        "subsequently", "meanwhile", "simultaneously", "on the other hand",
        "in contrast", "however", "nevertheless", "for instance",
        "for example", "such as", "namely", "in fact", "indeed", "actually",
        "certainly", "admittedly", "granted", "of course", "naturally",
    ),
)
