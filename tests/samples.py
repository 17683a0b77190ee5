from ai_text_detector.data_models import AnalysisMetrics

INFORMAL_HUMAN_TEXT = (
    "lol so i was at the store today and this weird thing happened. my cart had a "
    "wobbly wheel (of course) and i'm trying to navigate around this lady who's "
    "blocking the entire aisle with her cart while she reads every single "
    "ingredient on a cereal box. took FOREVER. then when i finally get to "
    "checkout, my card gets declined even though i literally just checked my "
    "balance. super embarrassing! turns out the chip reader was broken. why is "
    "shopping always such a disaster? anyway got my groceries eventually but what "
    "a mess of a day."
)

EMOTIONAL_HUMAN_TEXT = (
    "I'm SO frustrated right now!!! My boss is being absolutely ridiculous and I "
    "can't handle this anymore. I love my job usually, but today was AWFUL. Had to "
    "deal with three angry customers, my computer crashed twice, and then my lunch "
    "got stolen from the office fridge. I'm feeling pretty defeated tbh. Some days "
    "you just wanna scream, you know? Tomorrow HAS to be better... it just has to be."
)

CHATTY_HUMAN_TEXT = (
    "OMG, so I was at this coffee shop today and the barista was super weird lol. "
    "Like, she kept staring at me while making my latte and I'm thinking \"wtf is "
    "happening here?\" Anyway, turns out she recognized me from high school! Small "
    "world, right? We ended up chatting for like 20 mins about old times. Crazy "
    "how life works sometimes... btw, the coffee was amazing too! 10/10 would "
    "recommend."
)

FORMAL_AI_TEXT = (
    "Artificial intelligence represents a significant technological advancement "
    "that has fundamentally transformed various industries across multiple "
    "sectors. Furthermore, the systematic implementation of sophisticated machine "
    "learning algorithms has considerably enhanced operational efficiency and "
    "strategic decision-making processes. It is important to note that these "
    "comprehensive developments facilitate improved organizational workflows. "
    "Moreover, enterprises can effectively utilize these innovative tools to "
    "optimize their methodologies and establish more robust frameworks for future "
    "growth."
)

TECHNICAL_AI_TEXT = (
    "Artificial intelligence represents a transformative paradigm in modern "
    "computational frameworks. The integration of machine learning algorithms "
    "facilitates enhanced data processing capabilities. These systems demonstrate "
    "remarkable efficiency in pattern recognition tasks across diverse domains. "
    "Furthermore, the implementation of neural networks enables sophisticated "
    "analytical functionalities."
)

METHODOLOGY_AI_TEXT = (
    "The comprehensive methodology utilized in this analysis demonstrates "
    "significant potential for enhancing operational efficiency. Furthermore, the "
    "systematic implementation of these innovative frameworks facilitates improved "
    "organizational workflows and establishes robust foundations for future "
    "development initiatives."
)

LITERARY_TEXT = (
    "Mr. and Mrs. Dursley, of number four, Privet Drive, were proud to say that "
    "they were perfectly normal, thank you very much. They were the last people "
    "you'd expect to be involved in anything strange or mysterious, because they "
    "just didn't hold with such nonsense. Mr. Dursley was the director of a firm "
    "called Grunnings, which made drills. He was a big, beefy man with hardly any "
    "neck, although he did have a very large mustache. Mrs. Dursley was thin and "
    "blonde and had nearly twice the usual amount of neck, which came in very "
    "useful as she spent so much of her time craning over garden fences, spying on "
    "the neighbors. The Dursleys had a small son called Dudley and in their "
    "opinion there was no finer boy anywhere."
)

_NEUTRAL_METRICS = {
    "perplexity": 5.0,
    "burstiness": -0.2,
    "average_words_per_sentence": 15.0,
    "sentence_variability": 3.0,
    "lexical_diversity": 0.8,
    "readability_score": 40.0,
    "syntactic_complexity": 0.1,
    "semantic_coherence": 0.2,
    "n_gram_repetition": 0.0,
    "punctuation_patterns": 0.0,
    "word_frequency_distribution": 0.5,
    "transition_density": 0.0,
    "formality_index": 0.0,
    "vocabulary_richness": 0.8,
    "contextual_consistency": 0.5,
    "entropy_score": 0.75,
    "human_likeness_indicators": 0.0,
    "emotional_tone_variability": 0.0,
    "discourse_marker_patterns": 0.0,
    "function_word_analysis": 0.2,
    "informalness_score": 0.0,
    "sentence_structure_entropy": 0.9,
    "topic_coherence_score": 0.2,
    "bigram_unusualness": 0.0,
    "stylometric_signature": 0.7,
}


def make_metrics(**overrides: float) -> AnalysisMetrics:
    """Build a metrics record that triggers no discount and no threshold raise."""
    return AnalysisMetrics(**{**_NEUTRAL_METRICS, **overrides})
