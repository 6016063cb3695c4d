"""Shared test fixtures for the ssml_builder test suite."""

from __future__ import annotations

import pytest

from ssml_builder import SSMLBuilder


# ---------------------------------------------------------------------------
# Sample SSML strings
# ---------------------------------------------------------------------------

SIMPLE_DOCUMENT = (
    '<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" '
    'xmlns:mstts="https://www.w3.org/2001/mstts" xml:lang="en-US">'
    '\n    <voice name="en-US-AvaNeural">Hello, world!</voice>'
    "\n</speak>"
)

RICH_DOCUMENT = (
    '<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" '
    'xmlns:mstts="https://www.w3.org/2001/mstts" xml:lang="en-US">'
    '<mstts:backgroundaudio src="https://example.com/cafe.mp3" volume="0.5"/>'
    '<voice name="en-US-AvaNeural">'
    '<mstts:express-as style="cheerful" styledegree="1.5">Good morning!</mstts:express-as>'
    '<break time="500ms"/>'
    '<prosody pitch="+10%" rate="slow" volume="+2dB">Take it slow.</prosody>'
    '<say-as interpret-as="date" format="ymd">2025-08-24</say-as>'
    '<phoneme alphabet="ipa" ph="t&#601;&#712;me&#618;to&#650;">tomato</phoneme>'
    '<mstts:silence type="Sentenceboundary" value="200ms"/>'
    "<p><s>One sentence.</s></p>"
    "</voice>"
    "</speak>"
)

MISSING_LANG = (
    '<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis">'
    '<voice name="en-US-AvaNeural">Hi</voice>'
    "</speak>"
)

NO_VOICE = (
    '<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" xml:lang="en-US">'
    "Just text"
    "</speak>"
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def builder() -> SSMLBuilder:
    return SSMLBuilder("en-US")


@pytest.fixture()
def simple_document() -> str:
    return SIMPLE_DOCUMENT


@pytest.fixture()
def rich_document() -> str:
    return RICH_DOCUMENT


@pytest.fixture()
def missing_lang() -> str:
    return MISSING_LANG


@pytest.fixture()
def no_voice() -> str:
    return NO_VOICE
