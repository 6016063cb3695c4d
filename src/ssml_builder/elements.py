"""Leaf SSML elements.

Immutable dataclasses, one per tag.  Leaves own a fixed set of
attributes and at most one text payload; none of them hold child nodes.
``Emphasis`` and ``Prosody`` wrap a single text string rather than a
content list.

Attributes marked optional are only written when set.  An empty string
counts as unset.  Attribute order on output follows field order.
"""

from __future__ import annotations

from dataclasses import dataclass

from .node import SSMLNode, escape_xml, render_tag
from .tags import (
    BreakStrength,
    EmphasisLevel,
    ExpressAsRole,
    ExpressAsStyle,
    PhonemeAlphabet,
    SayAsInterpretAs,
    SilenceType,
    VisemeType,
)

MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"


def _opt(value: str | None) -> str | None:
    return value or None


# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Break(SSMLNode):
    """A ``<break>`` pause.

    With neither option set this renders a bare ``<break/>``.  When both
    are given both are written; engines let ``time`` win.
    """

    strength: BreakStrength | None = None
    time: str | None = None  # e.g. "500ms", "1.5s"

    def render(self) -> str:
        return render_tag("break", {"strength": _opt(self.strength), "time": _opt(self.time)})


@dataclass(frozen=True)
class Silence(SSMLNode):
    """An ``<mstts:silence>`` hint for silence at a given position."""

    type: SilenceType
    value: str

    def render(self) -> str:
        return render_tag("mstts:silence", {"type": self.type, "value": self.value})


@dataclass(frozen=True)
class AudioDuration(SSMLNode):
    """An ``<mstts:audioduration>`` target duration for the enclosing voice."""

    value: str

    def render(self) -> str:
        return render_tag("mstts:audioduration", {"value": self.value})


@dataclass(frozen=True)
class Bookmark(SSMLNode):
    """A ``<bookmark>`` marker.  The mark is a trusted identifier."""

    mark: str

    def render(self) -> str:
        return render_tag("bookmark", {"mark": self.mark})


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Audio(SSMLNode):
    """An ``<audio>`` clip with optional fallback text spoken if it fails."""

    src: str
    fallback_text: str | None = None

    def render(self) -> str:
        body = escape_xml(self.fallback_text) if self.fallback_text else ""
        return render_tag("audio", {"src": self.src}, body)


@dataclass(frozen=True)
class BackgroundAudio(SSMLNode):
    """Document-wide ``<mstts:backgroundaudio>`` directive."""

    src: str
    volume: str | None = None
    fadein: str | None = None
    fadeout: str | None = None

    def render(self) -> str:
        return render_tag(
            "mstts:backgroundaudio",
            {
                "src": self.src,
                "volume": _opt(self.volume),
                "fadein": _opt(self.fadein),
                "fadeout": _opt(self.fadeout),
            },
        )


@dataclass(frozen=True)
class VoiceConversion(SSMLNode):
    """Document-wide ``<mstts:voiceconversion>`` directive."""

    url: str

    def render(self) -> str:
        return render_tag("mstts:voiceconversion", {"url": self.url})


# ---------------------------------------------------------------------------
# Pronunciation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sub(SSMLNode):
    """A ``<sub>`` substitution: *original* is shown, *alias* is spoken."""

    original: str
    alias: str

    def render(self) -> str:
        return render_tag("sub", {"alias": self.alias}, escape_xml(self.original))


@dataclass(frozen=True)
class Phoneme(SSMLNode):
    """A ``<phoneme>`` override with a phonetic transcription in *ph*."""

    text: str
    alphabet: PhonemeAlphabet
    ph: str

    def render(self) -> str:
        return render_tag("phoneme", {"alphabet": self.alphabet, "ph": self.ph}, escape_xml(self.text))


@dataclass(frozen=True)
class SayAs(SSMLNode):
    """A ``<say-as>`` hint telling the engine how to read *text*."""

    text: str
    interpret_as: SayAsInterpretAs
    format: str | None = None
    detail: str | None = None

    def render(self) -> str:
        attrs = {
            "interpret-as": self.interpret_as,
            "format": _opt(self.format),
            "detail": _opt(self.detail),
        }
        return render_tag("say-as", attrs, escape_xml(self.text))


@dataclass(frozen=True)
class Lexicon(SSMLNode):
    """A ``<lexicon>`` reference to an external pronunciation lexicon."""

    uri: str

    def render(self) -> str:
        return render_tag("lexicon", {"uri": self.uri})


@dataclass(frozen=True)
class Math(SSMLNode):
    """A ``<math>`` element carrying pre-formed MathML, embedded verbatim."""

    mathml: str

    def render(self) -> str:
        return render_tag("math", {"xmlns": MATHML_NAMESPACE}, self.mathml)


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Emphasis(SSMLNode):
    """An ``<emphasis>`` span.  Unset *level* leaves the attribute out."""

    text: str
    level: EmphasisLevel | None = None

    def render(self) -> str:
        return render_tag("emphasis", {"level": _opt(self.level)}, escape_xml(self.text))


@dataclass(frozen=True)
class Prosody(SSMLNode):
    """A ``<prosody>`` span adjusting pitch, contour, range, rate, volume."""

    text: str
    pitch: str | None = None
    contour: str | None = None
    range: str | None = None
    rate: str | None = None
    volume: str | None = None

    def render(self) -> str:
        attrs = {
            "pitch": _opt(self.pitch),
            "contour": _opt(self.contour),
            "range": _opt(self.range),
            "rate": _opt(self.rate),
            "volume": _opt(self.volume),
        }
        return render_tag("prosody", attrs, escape_xml(self.text))


@dataclass(frozen=True)
class ExpressAs(SSMLNode):
    """An ``<mstts:express-as>`` speaking style, with optional degree and role.

    *styledegree* is a number between 0.01 and 2 written as a string.
    """

    text: str
    style: ExpressAsStyle
    styledegree: str | None = None
    role: ExpressAsRole | None = None

    def render(self) -> str:
        attrs = {
            "style": self.style,
            "styledegree": _opt(self.styledegree),
            "role": _opt(self.role),
        }
        return render_tag("mstts:express-as", attrs, escape_xml(self.text))


@dataclass(frozen=True)
class TTSEmbedding(SSMLNode):
    """An ``<mstts:ttsembedding>`` span spoken with a personal voice profile."""

    speaker_profile_id: str
    text: str

    def render(self) -> str:
        return render_tag(
            "mstts:ttsembedding",
            {"speakerProfileId": self.speaker_profile_id},
            escape_xml(self.text),
        )


@dataclass(frozen=True)
class Viseme(SSMLNode):
    """An ``<mstts:viseme>`` request for lip-sync events."""

    type: VisemeType

    def render(self) -> str:
        return render_tag("mstts:viseme", {"type": self.type})
