"""Enumerated tag vocabularies for SSML and the Azure ``mstts`` extensions.

Each vocabulary is available both as a ``Literal`` alias (for type hints)
and as a ``frozenset`` (for the checks in :mod:`ssml_builder.validation`
and :mod:`ssml_builder.validator`).  Nodes never enforce them: an
unknown value is rendered as given.
"""

from __future__ import annotations

from typing import Literal, TypeAlias

BreakStrength: TypeAlias = Literal["x-weak", "weak", "medium", "strong", "x-strong"]

SilenceType: TypeAlias = Literal[
    "Leading",
    "Leading-exact",
    "Tailing",
    "Tailing-exact",
    "Sentenceboundary",
    "Sentenceboundary-exact",
    "Comma-exact",
    "Semicolon-exact",
    "Enumerationcomma-exact",
]

EmphasisLevel: TypeAlias = Literal["strong", "moderate", "reduced"]

PhonemeAlphabet: TypeAlias = Literal["ipa", "sapi", "ups"]

VisemeType: TypeAlias = Literal["redlips_front", "redlips_back"]

SayAsInterpretAs: TypeAlias = Literal[
    "address",
    "cardinal",
    "characters",
    "date",
    "digits",
    "fraction",
    "ordinal",
    "spell-out",
    "telephone",
    "time",
    "name",
    "currency",
]

ExpressAsStyle: TypeAlias = Literal[
    "advertisement_upbeat",
    "affectionate",
    "angry",
    "assistant",
    "calm",
    "chat",
    "cheerful",
    "customerservice",
    "depressed",
    "disgruntled",
    "documentary-narration",
    "embarrassed",
    "empathetic",
    "envious",
    "excited",
    "fearful",
    "friendly",
    "gentle",
    "hopeful",
    "lyrical",
    "narration-professional",
    "narration-relaxed",
    "newscast",
    "newscast-casual",
    "newscast-formal",
    "poetry-reading",
    "sad",
    "serious",
    "shouting",
    "sports_commentary",
    "sports_commentary_excited",
    "whispering",
    "terrified",
    "unfriendly",
]

ExpressAsRole: TypeAlias = Literal[
    "Girl",
    "Boy",
    "YoungAdultFemale",
    "YoungAdultMale",
    "OlderAdultFemale",
    "OlderAdultMale",
    "SeniorFemale",
    "SeniorMale",
]

# ---------------------------------------------------------------------------
# Runtime vocabularies
# ---------------------------------------------------------------------------

BREAK_STRENGTHS = frozenset({"x-weak", "weak", "medium", "strong", "x-strong"})

SILENCE_TYPES = frozenset({
    "Leading",
    "Leading-exact",
    "Tailing",
    "Tailing-exact",
    "Sentenceboundary",
    "Sentenceboundary-exact",
    "Comma-exact",
    "Semicolon-exact",
    "Enumerationcomma-exact",
})

EMPHASIS_LEVELS = frozenset({"strong", "moderate", "reduced"})

PHONEME_ALPHABETS = frozenset({"ipa", "sapi", "ups"})

VISEME_TYPES = frozenset({"redlips_front", "redlips_back"})

SAY_AS_INTERPRET_AS = frozenset({
    "address",
    "cardinal",
    "characters",
    "date",
    "digits",
    "fraction",
    "ordinal",
    "spell-out",
    "telephone",
    "time",
    "name",
    "currency",
})

EXPRESS_AS_STYLES = frozenset({
    "advertisement_upbeat",
    "affectionate",
    "angry",
    "assistant",
    "calm",
    "chat",
    "cheerful",
    "customerservice",
    "depressed",
    "disgruntled",
    "documentary-narration",
    "embarrassed",
    "empathetic",
    "envious",
    "excited",
    "fearful",
    "friendly",
    "gentle",
    "hopeful",
    "lyrical",
    "narration-professional",
    "narration-relaxed",
    "newscast",
    "newscast-casual",
    "newscast-formal",
    "poetry-reading",
    "sad",
    "serious",
    "shouting",
    "sports_commentary",
    "sports_commentary_excited",
    "whispering",
    "terrified",
    "unfriendly",
})

EXPRESS_AS_ROLES = frozenset({
    "Girl",
    "Boy",
    "YoungAdultFemale",
    "YoungAdultMale",
    "OlderAdultFemale",
    "OlderAdultMale",
    "SeniorFemale",
    "SeniorMale",
})

# Named prosody values from the W3C SSML 1.1 recommendation.
NAMED_VOLUMES = frozenset({"silent", "x-soft", "soft", "medium", "loud", "x-loud"})
NAMED_RATES = frozenset({"x-slow", "slow", "medium", "fast", "x-fast"})
NAMED_PITCHES = frozenset({"x-low", "low", "medium", "high", "x-high"})
