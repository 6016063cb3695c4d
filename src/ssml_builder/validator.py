"""SSML validator -- lints rendered documents against the supported tag set.

Opt-in: builders never call it.  Rules:

  S1  Document is well-formed XML                                   ERROR
  S2  Root element is <speak>                                       ERROR
  S3  <speak> has version and xml:lang                              ERROR
  S4  Every <voice> has a name (ERROR); at least one <voice> is
      present (WARNING)
  S5  At most one backgroundaudio and one voiceconversion           ERROR
  S6  <break> strength is known and time is a duration              WARNING
  S7  <mstts:silence> type is known and value is a duration         WARNING
  S8  <emphasis> level is one of: strong, moderate, reduced         WARNING
  S9  <prosody> pitch, rate and volume match valid formats          WARNING
  S10 <mstts:express-as> styledegree in 0.01-2 (WARNING);
      style and role from the known vocabularies (INFO)
  S11 <say-as> interpret-as is known                                WARNING
  S12 <phoneme> alphabet is one of: ipa, sapi, ups                  WARNING
  S13 No unknown elements present                                   INFO
  S14 <mstts:viseme> type is one of: redlips_front, redlips_back     WARNING
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from lxml import etree

from .tags import EXPRESS_AS_ROLES, EXPRESS_AS_STYLES, VISEME_TYPES
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

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"

_KNOWN_ELEMENTS = frozenset({
    "speak",
    "voice",
    "p",
    "s",
    "lang",
    "break",
    "silence",
    "audioduration",
    "bookmark",
    "audio",
    "backgroundaudio",
    "voiceconversion",
    "sub",
    "phoneme",
    "say-as",
    "lexicon",
    "math",
    "emphasis",
    "prosody",
    "express-as",
    "ttsembedding",
    "viseme",
})

# Document-wide directives allowed at most once.
_SINGLETON_ELEMENTS = ("backgroundaudio", "voiceconversion")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation finding."""

    severity: Literal["error", "warning", "info"]
    rule: str
    message: str
    line: int | None = None


@dataclass
class ValidationResult:
    """Outcome of validating an SSML document."""

    valid: bool = True
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _strip_ns(tag: str) -> str:
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class _Walker:
    """Stateful tree walker that accumulates validation issues."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []
        self.counts: dict[str, int] = {}

    def _add(
        self,
        severity: Literal["error", "warning", "info"],
        rule: str,
        message: str,
        el: etree._Element | None = None,
    ) -> None:
        line = el.sourceline if el is not None else None
        self.issues.append(ValidationIssue(severity=severity, rule=rule, message=message, line=line))

    # -- element visitors ---------------------------------------------------

    def check_voice(self, el: etree._Element) -> None:
        if not el.get("name"):
            self._add("error", "S4", "<voice> is missing required attribute 'name'", el)

    def check_break(self, el: etree._Element) -> None:
        strength = el.get("strength")
        if strength is not None and not is_valid_break_strength(strength):
            self._add("warning", "S6", f'<break> strength="{strength}" is not a known strength', el)
        time = el.get("time")
        if time is not None and not is_valid_duration(time):
            self._add("warning", "S6", f'<break> time="{time}" is not a valid duration (e.g. 500ms, 2s)', el)

    def check_silence(self, el: etree._Element) -> None:
        silence_type = el.get("type")
        if silence_type is None or not is_valid_silence_type(silence_type):
            self._add("warning", "S7", f'<mstts:silence> type="{silence_type}" is not a known silence type', el)
        value = el.get("value")
        if value is None or not is_valid_duration(value):
            self._add("warning", "S7", f'<mstts:silence> value="{value}" is not a valid duration', el)

    def check_emphasis(self, el: etree._Element) -> None:
        level = el.get("level")
        if level is not None and not is_valid_emphasis_level(level):
            self._add("warning", "S8", f'<emphasis> level="{level}" is not one of: strong, moderate, reduced', el)

    def check_prosody(self, el: etree._Element) -> None:
        pitch = el.get("pitch")
        if pitch is not None and not is_valid_pitch(pitch):
            self._add("warning", "S9", f'pitch="{pitch}" does not match a valid format (+N%, NHz, named)', el)
        rate = el.get("rate")
        if rate is not None and not is_valid_rate(rate):
            self._add("warning", "S9", f'rate="{rate}" does not match a valid format (N, N%, named)', el)
        volume = el.get("volume")
        if volume is not None and not is_valid_volume(volume):
            self._add("warning", "S9", f'volume="{volume}" does not match a valid format (+NdB, N, named)', el)

    def check_express_as(self, el: etree._Element) -> None:
        degree = el.get("styledegree")
        if degree is not None and not is_valid_style_degree(degree):
            self._add("warning", "S10", f'styledegree="{degree}" is outside the valid range [0.01, 2]', el)
        style = el.get("style")
        if style is not None and style not in EXPRESS_AS_STYLES:
            self._add("info", "S10", f'style="{style}" is not in the known style vocabulary', el)
        role = el.get("role")
        if role is not None and role not in EXPRESS_AS_ROLES:
            self._add("info", "S10", f'role="{role}" is not in the known role vocabulary', el)

    def check_say_as(self, el: etree._Element) -> None:
        interpret_as = el.get("interpret-as")
        if interpret_as is None or not is_valid_interpret_as(interpret_as):
            self._add("warning", "S11", f'<say-as> interpret-as="{interpret_as}" is not a known kind', el)

    def check_phoneme(self, el: etree._Element) -> None:
        alphabet = el.get("alphabet")
        if alphabet is None or not is_valid_phoneme_alphabet(alphabet):
            self._add("warning", "S12", f'<phoneme> alphabet="{alphabet}" is not one of: ipa, sapi, ups', el)

    def check_viseme(self, el: etree._Element) -> None:
        viseme_type = el.get("type")
        if viseme_type not in VISEME_TYPES:
            self._add("warning", "S14", f'<mstts:viseme> type="{viseme_type}" is not one of: redlips_front, redlips_back', el)

    def walk(self, el: etree._Element) -> None:
        for child in el:
            if not isinstance(child.tag, str):
                # Comments and processing instructions.
                continue
            tag = _strip_ns(child.tag)
            self.counts[tag] = self.counts.get(tag, 0) + 1

            if tag not in _KNOWN_ELEMENTS:
                self._add("info", "S13", f"Unknown element <{tag}>", child)
                continue

            visitor = _VISITORS.get(tag)
            if visitor is not None:
                visitor(self, child)

            # MathML content is opaque.
            if tag != "math":
                self.walk(child)


_VISITORS = {
    "voice": _Walker.check_voice,
    "break": _Walker.check_break,
    "silence": _Walker.check_silence,
    "emphasis": _Walker.check_emphasis,
    "prosody": _Walker.check_prosody,
    "express-as": _Walker.check_express_as,
    "say-as": _Walker.check_say_as,
    "phoneme": _Walker.check_phoneme,
    "viseme": _Walker.check_viseme,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class SSMLValidator:
    """Validate rendered SSML documents."""

    def validate(self, ssml: str) -> ValidationResult:
        """Validate an SSML string.

        Returns a :class:`ValidationResult` with ``valid=True`` when no
        errors are found (warnings and info issues are allowed).
        """
        result = ValidationResult()

        # S1: well-formed XML
        try:
            root = etree.fromstring(ssml.encode("utf-8"))  # noqa: S320
        except etree.XMLSyntaxError as exc:
            result.valid = False
            result.issues.append(
                ValidationIssue(
                    severity="error",
                    rule="S1",
                    message=f"Malformed XML: {exc}",
                    line=getattr(exc, "lineno", None),
                )
            )
            return result

        walker = _Walker()
        root_tag = _strip_ns(root.tag)

        if root_tag != "speak":
            walker._add("error", "S2", f"Expected root element <speak>, got <{root_tag}>", root)
        else:
            # S3: required document attributes
            if not root.get("version"):
                walker._add("error", "S3", "<speak> is missing required attribute 'version'", root)
            if not root.get(_XML_LANG):
                walker._add("error", "S3", "<speak> is missing required attribute 'xml:lang'", root)

            walker.walk(root)

            # S4: an empty document renders, but speaks nothing
            if walker.counts.get("voice", 0) == 0:
                walker._add("warning", "S4", "<speak> contains no <voice> elements", root)

            # S5: singleton directives
            for tag in _SINGLETON_ELEMENTS:
                count = walker.counts.get(tag, 0)
                if count > 1:
                    walker._add("error", "S5", f"<mstts:{tag}> appears {count} times; at most one is allowed", root)

        result.issues = walker.issues
        result.valid = not any(i.severity == "error" for i in result.issues)
        logger.debug("Validated SSML document: %d issue(s), valid=%s", len(result.issues), result.valid)
        return result

    def validate_file(self, path: str | Path) -> ValidationResult:
        """Validate an SSML file from disk."""
        p = Path(path)
        return self.validate(p.read_text(encoding="utf-8"))
