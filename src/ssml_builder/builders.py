"""Scoped fluent builders for voice, paragraph and sentence content.

Every builder method constructs one node, appends it to the builder's
content and returns the builder so calls can be chained::

    voice.text("Hello").pause("300ms").emphasis("world", level="strong")

Sub-scopes (``paragraph``, ``sentence``, ``lang``) take a callback.  The
callback receives a fresh scope object, runs synchronously to completion,
and the scope is appended afterwards; its return value is ignored.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from .containers import Lang, Paragraph, Sentence
from .elements import (
    Audio,
    AudioDuration,
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
)
from .exceptions import BuilderUsageError
from .node import ContentItem, SSMLNode, render_content, render_tag
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

if TYPE_CHECKING:
    from .document import SSMLBuilder


class _InlineBuilder(SSMLNode):
    """Inline convenience methods shared by all scoped builders."""

    @abstractmethod
    def _append(self, item: ContentItem) -> None:
        """Add *item* to the end of this scope's content."""

    def text(self, text: str) -> Self:
        """Append plain text; it is escaped when rendered."""
        self._append(text)
        return self

    def add_element(self, element: SSMLNode) -> Self:
        """Append a prebuilt node, e.g. a `Bookmark` inside a sentence."""
        self._append(element)
        return self

    def pause(self, time: str | None = None, strength: BreakStrength | None = None) -> Self:
        """Append a ``<break>``.  ``pause("500ms")`` is shorthand for a timed break."""
        self._append(Break(strength=strength, time=time))
        return self

    def emphasis(self, text: str, level: EmphasisLevel | None = None) -> Self:
        self._append(Emphasis(text, level=level))
        return self

    def prosody(
        self,
        text: str,
        *,
        pitch: str | None = None,
        contour: str | None = None,
        range: str | None = None,
        rate: str | None = None,
        volume: str | None = None,
    ) -> Self:
        self._append(
            Prosody(text, pitch=pitch, contour=contour, range=range, rate=rate, volume=volume)
        )
        return self

    def say_as(
        self,
        text: str,
        interpret_as: SayAsInterpretAs,
        *,
        format: str | None = None,
        detail: str | None = None,
    ) -> Self:
        self._append(SayAs(text, interpret_as, format=format, detail=detail))
        return self

    def sub(self, original: str, alias: str) -> Self:
        self._append(Sub(original, alias))
        return self

    def phoneme(self, text: str, alphabet: PhonemeAlphabet, ph: str) -> Self:
        self._append(Phoneme(text, alphabet, ph))
        return self


class SentenceBuilder(_InlineBuilder):
    """Build the content of a single ``<s>`` element."""

    def __init__(self) -> None:
        self._sentence = Sentence()

    @property
    def content(self) -> tuple[ContentItem, ...]:
        return tuple(self._sentence.content)

    def _append(self, item: ContentItem) -> None:
        self._sentence.content.append(item)

    def render(self) -> str:
        return self._sentence.render()


class ParagraphBuilder(_InlineBuilder):
    """Build the content of a ``<p>`` element, including nested sentences."""

    def __init__(self) -> None:
        self._paragraph = Paragraph()

    @property
    def content(self) -> tuple[ContentItem, ...]:
        return tuple(self._paragraph.content)

    def _append(self, item: ContentItem) -> None:
        self._paragraph.content.append(item)

    def audio(self, src: str, fallback_text: str | None = None) -> Self:
        self._append(Audio(src, fallback_text))
        return self

    def sentence(self, callback: Callable[[SentenceBuilder], Any]) -> Self:
        """Build a sentence with *callback* and append it."""
        scope = SentenceBuilder()
        callback(scope)
        self._append(scope)
        return self

    def render(self) -> str:
        return self._paragraph.render()


class VoiceBuilder(_InlineBuilder):
    """Build the content spoken by one ``<voice>``.

    Sections created through :meth:`SSMLBuilder.voice` keep a reference
    to their document so a chain can switch voices or finish with
    :meth:`build` without going back to the root object.  A standalone
    ``VoiceBuilder`` can still be rendered on its own, but ``build`` and
    ``voice`` raise :class:`~ssml_builder.exceptions.BuilderUsageError`.
    """

    def __init__(
        self,
        name: str,
        effect: str | None = None,
        parent: SSMLBuilder | None = None,
    ) -> None:
        self.name = name
        self.effect = effect
        self.parent = parent
        self._content: list[ContentItem] = []

    @property
    def content(self) -> tuple[ContentItem, ...]:
        return tuple(self._content)

    def _append(self, item: ContentItem) -> None:
        self._content.append(item)

    # -- structure ----------------------------------------------------------

    def paragraph(self, callback: Callable[[ParagraphBuilder], Any]) -> Self:
        """Build a paragraph with *callback* and append it."""
        scope = ParagraphBuilder()
        callback(scope)
        self._append(scope)
        return self

    def sentence(self, callback: Callable[[SentenceBuilder], Any]) -> Self:
        """Build a sentence with *callback* and append it."""
        scope = SentenceBuilder()
        callback(scope)
        self._append(scope)
        return self

    def lang(self, lang: str, callback: Callable[[Lang], Any]) -> Self:
        """Build a ``<lang>`` span in *lang* with *callback* and append it."""
        scope = Lang(lang)
        callback(scope)
        self._append(scope)
        return self

    # -- leaves -------------------------------------------------------------

    def silence(self, type: SilenceType, value: str) -> Self:
        self._append(Silence(type, value))
        return self

    def express_as(
        self,
        text: str,
        style: ExpressAsStyle,
        *,
        styledegree: str | None = None,
        role: ExpressAsRole | None = None,
    ) -> Self:
        self._append(ExpressAs(text, style, styledegree=styledegree, role=role))
        return self

    def bookmark(self, mark: str) -> Self:
        self._append(Bookmark(mark))
        return self

    def audio(self, src: str, fallback_text: str | None = None) -> Self:
        self._append(Audio(src, fallback_text))
        return self

    def lexicon(self, uri: str) -> Self:
        self._append(Lexicon(uri))
        return self

    def math(self, mathml: str) -> Self:
        """Append pre-formed MathML.  It is embedded without escaping."""
        self._append(Math(mathml))
        return self

    def audio_duration(self, value: str) -> Self:
        self._append(AudioDuration(value))
        return self

    def tts_embedding(self, speaker_profile_id: str, text: str) -> Self:
        self._append(TTSEmbedding(speaker_profile_id, text))
        return self

    def viseme(self, type: VisemeType) -> Self:
        self._append(Viseme(type))
        return self

    # -- document delegation --------------------------------------------------

    def _require_parent(self, action: str) -> SSMLBuilder:
        if self.parent is None:
            raise BuilderUsageError(f"VoiceBuilder must be created from SSMLBuilder to {action}")
        return self.parent

    def build(self) -> str:
        """Render the whole owning document."""
        return self._require_parent("use build()").build()

    def voice(self, name: str, effect: str | None = None) -> VoiceBuilder:
        """Start a new voice section in the owning document and return it."""
        return self._require_parent("chain voices").voice(name, effect)

    def render(self) -> str:
        attrs = {"name": self.name, "effect": self.effect or None}
        return render_tag("voice", attrs, render_content(self._content))
