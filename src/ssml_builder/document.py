"""SSMLBuilder -- the root document builder.

Owns the ordered voice sections plus at most one background-audio and
one voice-conversion directive, and renders everything inside the
``<speak>`` wrapper::

    ssml = (
        SSMLBuilder("en-US")
        .voice("en-US-AvaNeural")
        .text("Hello, world!")
        .build()
    )

``build()`` re-renders the current state on every call; it never
freezes or consumes the builder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .builders import VoiceBuilder
from .elements import BackgroundAudio, VoiceConversion

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_VERSION = "1.0"
SYNTHESIS_NAMESPACE = "http://www.w3.org/2001/10/synthesis"
MSTTS_NAMESPACE = "https://www.w3.org/2001/mstts"

# Separator placed before each top-level child of <speak>.
_CHILD_INDENT = "\n    "


@dataclass(frozen=True)
class SSMLOptions:
    """Document-level attributes written on ``<speak>``.

    *lang* is required; the version and both namespace URIs default to
    the W3C synthesis namespace and the Azure ``mstts`` extension.
    """

    lang: str
    version: str = DEFAULT_VERSION
    xmlns: str = SYNTHESIS_NAMESPACE
    xmlns_mstts: str = MSTTS_NAMESPACE


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class SSMLBuilder:
    """Build a complete SSML document out of voice sections."""

    def __init__(
        self,
        lang: str,
        *,
        version: str = DEFAULT_VERSION,
        xmlns: str = SYNTHESIS_NAMESPACE,
        xmlns_mstts: str = MSTTS_NAMESPACE,
    ) -> None:
        self.options = SSMLOptions(
            lang=lang,
            version=version,
            xmlns=xmlns,
            xmlns_mstts=xmlns_mstts,
        )
        self._voices: list[VoiceBuilder] = []
        self._background_audio: BackgroundAudio | None = None
        self._voice_conversion: VoiceConversion | None = None

    @classmethod
    def from_options(cls, options: SSMLOptions) -> SSMLBuilder:
        return cls(
            options.lang,
            version=options.version,
            xmlns=options.xmlns,
            xmlns_mstts=options.xmlns_mstts,
        )

    @property
    def voices(self) -> tuple[VoiceBuilder, ...]:
        """Registered voice sections, in registration order."""
        return tuple(self._voices)

    @property
    def background_audio_directive(self) -> BackgroundAudio | None:
        return self._background_audio

    @property
    def voice_conversion_directive(self) -> VoiceConversion | None:
        return self._voice_conversion

    def voice(self, name: str, effect: str | None = None) -> VoiceBuilder:
        """Register a new voice section and return its builder."""
        section = VoiceBuilder(name, effect, parent=self)
        self._voices.append(section)
        logger.debug("Registered voice section %d: %s", len(self._voices), name)
        return section

    def background_audio(
        self,
        src: str,
        volume: str | None = None,
        fadein: str | None = None,
        fadeout: str | None = None,
    ) -> SSMLBuilder:
        """Set the background audio track, replacing any earlier one."""
        if self._background_audio is not None:
            logger.debug("Replacing background audio %s with %s", self._background_audio.src, src)
        self._background_audio = BackgroundAudio(src, volume=volume, fadein=fadein, fadeout=fadeout)
        return self

    def voice_conversion(self, url: str) -> SSMLBuilder:
        """Set the voice conversion model, replacing any earlier one."""
        if self._voice_conversion is not None:
            logger.debug("Replacing voice conversion %s with %s", self._voice_conversion.url, url)
        self._voice_conversion = VoiceConversion(url)
        return self

    def build(self) -> str:
        """Render the document.

        Attribute order on ``<speak>`` is version, xmlns, xmlns:mstts,
        xml:lang.  Children are background audio, voice conversion, then
        voice sections, each on its own indented line.
        """
        opts = self.options
        attrs = (
            f'version="{opts.version}" '
            f'xmlns="{opts.xmlns}" '
            f'xmlns:mstts="{opts.xmlns_mstts}" '
            f'xml:lang="{opts.lang}"'
        )

        children: list[str] = []
        if self._background_audio is not None:
            children.append(self._background_audio.render())
        if self._voice_conversion is not None:
            children.append(self._voice_conversion.render())
        children.extend(section.render() for section in self._voices)

        logger.debug("Rendering SSML document with %d voice section(s)", len(self._voices))
        body = "".join(_CHILD_INDENT + child for child in children)
        return f"<speak {attrs}>{body}\n</speak>"
