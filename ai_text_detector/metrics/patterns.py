"""
Module with the regular expressions the metrics are built from.

Patterns are ASCII-only so that word boundaries and case folding behave the same
for every input. Counting always uses non-overlapping matches.
"""

import re

_I = re.IGNORECASE | re.ASCII


def count_matches(pattern: re.Pattern[str], text: str) -> int:
    """
    Count non-overlapping matches of a pattern in a text.

    Args:
        pattern (re.Pattern[str]): Compiled pattern.
        text (str): Text to be searched.

    Returns:
        int: Number of matches.
    """
    return sum(1 for _ in pattern.finditer(text))


def count_all_matches(patterns: tuple[re.Pattern[str], ...], text: str) -> int:
    """Count matches of every pattern in a text and sum them up."""
    return sum(count_matches(pattern, text) for pattern in patterns)


# Informal register shared by the human-likeness and informality metrics.
SLANG_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Chat acronyms.
    re.compile(r"\b(?:lol|lmao|omg|wtf|btw|tbh|imho|imo)\b", _I),
    # Phonetic contractions of going to, want to, got to, kind of, sort of.
    re.compile(r"\b(?:gonna|wanna|gotta|kinda|sorta|dunno)\b", _I),
    # Spoken assent, refusal and hesitation.
    re.compile(r"\b(?:yeah|yep|nah|nope|meh|ugh|hmm)\b", _I),
    # Colloquial intensifiers.
    re.compile(r"\b(?:super|really|pretty|kinda|totally|absolutely)\b", _I),
    # Hyperbolic evaluative adjectives.
    re.compile(r"\b(?:awesome|amazing|terrible|awful|weird|crazy)\b", _I),
)

# Affect markers counted by the emotional tone metric.
EMOTIONAL_MARKER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Basic emotion words.
    re.compile(r"\b(?:love|hate|excited|frustrated|angry|happy|sad|worried|anxious)\b", _I),
    # Talking about feelings.
    re.compile(r"\b(?:feel|felt|feeling|emotions|emotional|mood)\b", _I),
    # Doubled exclamation or question marks, ellipses.
    re.compile(r"(?:!{2,}|\?{2,}|\.{3,})", re.ASCII),
    # Capitals used for shouting, also inside words.
    re.compile(r"[A-Z]{2,}", re.ASCII),
)

# Negative and positive contractions: don't, you're, we've, I'll, he'd, it's, I'm.
CONTRACTION = re.compile(r"\b\w+'(?:t|re|ve|ll|d|s|m)\b", _I)

# Three or more vowels in a row, a cheap proxy for misspellings ("soooo", "yeaaa").
REPEATED_VOWELS = re.compile(r"\b[a-z]*[aeiou]{3,}[a-z]*\b", _I)

# A letter repeated three or more times ("nooo", "yesss").
TRIPLED_LETTER = re.compile(r"\b\w*([a-z])\1{2,}\w*\b", _I)

# Sloppy spacing between words or sentences.
DOUBLE_SPACING = re.compile(r"\s{2,}")

# First person singular and plural.
PERSONAL_PRONOUN = re.compile(r"\b(?:I|me|my|mine|myself|we|us|our|ours)\b", _I)

# Expressive punctuation runs.
EMOTIONAL_PUNCTUATION = re.compile(r"!{2,}|\?{2,}|\.{3,}")

# Whole words in capitals used for emphasis.
CAPS_WORD = re.compile(r"\b[A-Z]{2,}\b", re.ASCII)

# Internet slang and chat abbreviations.
INTERNET_SLANG = re.compile(
    r"\b(?:lol|lmao|omg|wtf|btw|tbh|imho|imo|ngl|smh|fml|irl|rn|af|fr|periodt|idk"
    r"|ikr|brb|ttyl|dm|pm|sus|lit|fam|bae|goat|facts|no cap|bet|vibe|mood)\b",
    _I,
)

# One-word answers that are complete utterances rather than fragments.
SHORT_ANSWER = re.compile(
    r"^(?:yes|no|ok|okay|yeah|nah|sure|maybe|absolutely|definitely)$", _I
)

# Fillers and stance adverbs of spoken conversation.
CONVERSATIONAL_MARKER = re.compile(
    r"\b(?:like|you know|I mean|right|so|well|um|uh|actually|basically|literally"
    r"|honestly|seriously|obviously|apparently|supposedly|kinda|sorta|maybe"
    r"|probably|definitely|absolutely|totally|completely|exactly|precisely)\b",
    _I,
)

# Fillers of casual writing, including phonetic contractions.
CONVERSATIONAL_WORD = re.compile(
    r"\b(?:like|you know|I mean|right|so|well|um|uh|actually|basically|literally"
    r"|honestly|seriously|obviously|apparently|kinda|sorta|gonna|wanna|gotta)\b",
    _I,
)

# Phrases of descriptive storytelling, taken from a single literary excerpt.
LITERARY_PHRASE = re.compile(
    r"\b(?:nearly twice|hardly any|very large|came in very useful|no finer"
    r"|big beefy|which made|although he did|spent so much|craning over|spying on)\b",
    _I,
)

# Character introductions, taken from a single literary excerpt.
LITERARY_CHARACTER_CUE = re.compile(
    r"\b(?:Mr\.|Mrs\.|called|named|director|firm|son|opinion|neighbors|mustache"
    r"|blonde)\b",
    _I,
)

# Third person pronouns of narration.
THIRD_PERSON_PRONOUN = re.compile(
    r"\b(?:he|she|they|him|her|them|his|hers|their|theirs)\b", _I
)

# Words naming strong emotions.
EMOTIONAL_WORD = re.compile(
    r"\b(?:love|hate|excited|frustrated|angry|happy|sad|worried|anxious|amazing"
    r"|terrible|awesome|awful|horrible|wonderful|fantastic|disgusting|annoying"
    r"|brilliant|stupid|crazy|insane|wild|mad|furious|thrilled|devastated|shocked"
    r"|surprised|confused|overwhelmed)\b",
    _I,
)

# Exclamations marking excitement or emphasis.
EXCLAMATION_MARK = re.compile(r"!")
# Questions, frequent in conversational writing.
QUESTION_MARK = re.compile(r"\?")

# Runs of terminal punctuation ("?!", "...").
MULTIPLE_PUNCTUATION = re.compile(r"[.!?]{2,}")

# The coordinating "and" that chains run-on sentences.
AND_CONJUNCTION = re.compile(r"\band\b", _I)

# Subordinating conjunctions and relative pronouns opening dependent clauses.
SUBORDINATOR = re.compile(
    r"\b(?:that|which|who|whom|whose|when|where|while|although|because|since|if"
    r"|unless|until)\b",
    _I,
)

# Coordinating conjunctions.
COORDINATOR = re.compile(r"\b(?:and|but|or|yet|so|for|nor)\b", _I)

# Sentence and clause punctuation.
PUNCTUATION_MARK = re.compile(r"[.!?;:,]")
# Commas separating clauses and list items.
COMMA = re.compile(r",")
# Semicolons joining independent clauses, common in formal prose.
SEMICOLON = re.compile(r";")

# Punctuation kinds whose variety forms part of a stylometric signature.
STYLOMETRIC_PUNCTUATION = re.compile(r"[.!?;:,\-()]")

# Capitalised words: names, places and sentence openers.
PROPER_NOUN = re.compile(r"\b[A-Z][a-z]+\b", re.ASCII)

# Regular past tense and frequent irregular narrative verbs.
PAST_TENSE_VERB = re.compile(
    r"\b\w+(?:ed|was|were|had|did|said|went|came|saw|looked|thought|felt|knew|told"
    r"|asked|answered|walked|turned|opened|closed)\b",
    _I,
)

# Concrete descriptive adjectives.
DESCRIPTIVE_ADJECTIVE = re.compile(
    r"\b(?:big|small|large|tiny|huge|enormous|beautiful|ugly|old|young|tall|short"
    r"|fat|thin|thick|wide|narrow|bright|dark|loud|quiet|soft|hard|smooth|rough|hot"
    r"|cold|warm|cool|dry|wet|clean|dirty|new|fresh|stale|sweet|sour|bitter|salty"
    r"|spicy|mild|strong|weak|heavy|light|fast|slow|quick|careful|gentle|kind|mean"
    r"|nice|bad|good|excellent|terrible|wonderful|awful|amazing|boring|interesting"
    r"|exciting|scary|funny|sad|happy|angry|surprised|confused|tired|energetic)\b",
    _I,
)

# Quotation marks opening or closing dialogue.
DIALOGUE_QUOTE = re.compile(r"[\"']")

# Cues of similes and figurative comparison.
SIMILE_CUE = re.compile(
    r"\b(?:like|as|seemed|appeared|looked like|sounded like|felt like|was like"
    r"|were like)\b",
    _I,
)

# Unusual descriptive phrasing, taken from a single literary excerpt.
CREATIVE_PHRASE = re.compile(
    r"\b(?:nearly twice|hardly any|very large|came in very useful|no finer"
    r"|so much of|which made|although he did)\b",
    _I,
)

# Vivid imagery, taken from a single literary excerpt.
IMAGERY_WORD = re.compile(
    r"\b(?:craning|spying|mustache|beefy|blonde|drilling|garden fences|neighbors"
    r"|opinion|director|firm)\b",
    _I,
)

# Tangible everyday nouns as opposed to abstractions.
CONCRETE_NOUN = re.compile(
    r"\b(?:drill|mustache|neck|fence|garden|neighbor|son|boy|director|firm|company"
    r"|house|car|door|window|street|road|tree|flower|table|chair|book|phone"
    r"|computer|cat|dog|bird|food|water|coffee|tea|money|time|day|night|morning"
    r"|evening|sun|moon|star|cloud|rain|snow|wind|fire|ice|rock|sand|grass|leaf"
    r"|branch|root|seed)\b",
    _I,
)

# Named characters, taken from a single literary excerpt.
CHARACTER_FOCUS = re.compile(
    r"\b(?:Mr\.|Mrs\.|Dursley|Dudley|Grunnings|called|named|known as)\b", _I
)
