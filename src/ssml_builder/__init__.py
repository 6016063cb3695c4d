"""ssml_builder -- a fluent builder for SSML speech synthesis documents.

Public API re-exports for convenient access::

    from ssml_builder import SSMLBuilder, SSMLValidator, escape_xml
"""

from ._version import __version__
from .builders import ParagraphBuilder, SentenceBuilder, VoiceBuilder
from .containers import Lang, Paragraph, Sentence
from .document import (
    DEFAULT_VERSION,
    MSTTS_NAMESPACE,
    SYNTHESIS_NAMESPACE,
    SSMLBuilder,
    SSMLOptions,
)
from .elements import (
    MATHML_NAMESPACE,
    Audio,
    AudioDuration,
    BackgroundAudio,
    Bookmark,
    Break,
    Emphasis,
    ExpressAs,
    Lexicon,
    Math,
    Phoneme,
    Prosody,
    SayAs,
    Silence,
    Sub,
    TTSEmbedding,
    Viseme,
    VoiceConversion,
)
from .exceptions import BuilderUsageError, SSMLBuilderError
from .node import ContentNode, SSMLNode, escape_xml, format_attributes
from .validation import (
    is_valid_break_strength,
    is_valid_duration,
    is_valid_emphasis_level,
    is_valid_interpret_as,
    is_valid_phoneme_alphabet,
    is_valid_pitch,
    is_valid_rate,
    is_valid_silence_type,
    is_valid_style_degree,
    is_valid_volume,
)
from .validator import SSMLValidator, ValidationIssue, ValidationResult

__all__ = [
    "__version__",
    # Builders
    "SSMLBuilder",
    "SSMLOptions",
    "VoiceBuilder",
    "ParagraphBuilder",
    "SentenceBuilder",
    # Node contract
    "SSMLNode",
    "ContentNode",
    "escape_xml",
    "format_attributes",
    # Containers
    "Sentence",
    "Paragraph",
    "Lang",
    # Elements
    "Audio",
    "AudioDuration",
    "BackgroundAudio",
    "Bookmark",
    "Break",
    "Emphasis",
    "ExpressAs",
    "Lexicon",
    "Math",
    "Phoneme",
    "Prosody",
    "SayAs",
    "Silence",
    "Sub",
    "TTSEmbedding",
    "Viseme",
    "VoiceConversion",
    # Constants
    "DEFAULT_VERSION",
    "SYNTHESIS_NAMESPACE",
    "MSTTS_NAMESPACE",
    "MATHML_NAMESPACE",
    # Validation
    "SSMLValidator",
    "ValidationIssue",
    "ValidationResult",
    "is_valid_break_strength",
    "is_valid_duration",
    "is_valid_emphasis_level",
    "is_valid_interpret_as",
    "is_valid_phoneme_alphabet",
    "is_valid_pitch",
    "is_valid_rate",
    "is_valid_silence_type",
    "is_valid_style_degree",
    "is_valid_volume",
    # Exceptions
    "SSMLBuilderError",
    "BuilderUsageError",
]
