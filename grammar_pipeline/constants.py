"""Shared constants for the grammar pipeline."""

DEFAULT_SPACY_MODEL = "en_core_web_sm"
SPACY_MODEL_ENV = "GRAMMAR_SPACY_MODEL"

# Penn Treebank tags used by the rules.
VB = "VB"
VBP = "VBP"
VBZ = "VBZ"
VBD = "VBD"
VBG = "VBG"
VBN = "VBN"
MD = "MD"
TO = "TO"

# Universal Dependencies short relation names.
AUX = "aux"
COP = "cop"
NSUBJ = "nsubj"
ROOT = "root"

# spaCy (ClearNLP) labels folded onto their UD short names.
RELATION_SHORT_NAMES = {
    "root": ROOT,
    "auxpass": AUX,
    "nsubjpass": NSUBJ,
    "csubjpass": "csubj",
}

# Tag -> FeatureCounts field.
LEXICAL_FEATURE_TAGS = {
    "JJR": "comparative_adjective",
    "JJS": "superlative_adjective",
    "RBR": "comparative_adverb",
    "RBS": "superlative_adverb",
    "EX": "existential",
    "MD": "modal",
}

QUESTION_SENTINEL = "?/."

PRESENT_SIMPLE = "present_simple"
PRESENT_CONTINUOUS = "present_continuous"
PRESENT_PERFECT = "present_perfect"
PRESENT_PERFECT_CONTINUOUS = "present_perfect_continuous"
PAST_SIMPLE = "past_simple"
PAST_CONTINUOUS = "past_continuous"
PAST_PERFECT = "past_perfect"
FUTURE_SIMPLE = "future_simple"
FUTURE_CONTINUOUS = "future_continuous"
FUTURE_PERFECT = "future_perfect"

TAM_CATEGORIES = (
    PRESENT_SIMPLE,
    PRESENT_CONTINUOUS,
    PRESENT_PERFECT,
    PRESENT_PERFECT_CONTINUOUS,
    PAST_SIMPLE,
    PAST_CONTINUOUS,
    PAST_PERFECT,
    FUTURE_SIMPLE,
    FUTURE_CONTINUOUS,
    FUTURE_PERFECT,
)
