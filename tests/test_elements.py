"""Tests for ssml_builder.elements.

Exact rendering of every leaf element, optional-attribute ordering,
escaping of text bodies and verbatim structural attributes.
"""

from __future__ import annotations

import dataclasses

import pytest

from ssml_builder.elements import (
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


class TestBreak:
    def test_empty(self) -> None:
        assert Break().render() == "<break/>"

    def test_time_only(self) -> None:
        assert Break(time="500ms").render() == '<break time="500ms"/>'

    def test_strength_only(self) -> None:
        assert Break(strength="medium").render() == '<break strength="medium"/>'

    def test_both_written_strength_first(self) -> None:
        assert Break(time="500ms", strength="medium").render() == '<break strength="medium" time="500ms"/>'

    def test_empty_strings_treated_as_unset(self) -> None:
        assert Break(strength="", time="").render() == "<break/>"

    def test_invalid_values_rendered_verbatim(self) -> None:
        assert Break(strength="loudest", time="forever").render() == '<break strength="loudest" time="forever"/>'

    def test_immutable(self) -> None:
        b = Break(time="1s")
        with pytest.raises(dataclasses.FrozenInstanceError):
            b.time = "2s"  # type: ignore[misc]


class TestSilence:
    def test_render(self) -> None:
        assert (
            Silence("Sentenceboundary", "500ms").render()
            == '<mstts:silence type="Sentenceboundary" value="500ms"/>'
        )


class TestBookmark:
    def test_render(self) -> None:
        assert Bookmark("m1").render() == '<bookmark mark="m1"/>'

    def test_mark_not_escaped(self) -> None:
        assert Bookmark("a&b").render() == '<bookmark mark="a&b"/>'


class TestAudio:
    def test_with_fallback(self) -> None:
        assert (
            Audio("https://example.com/sound.mp3", "Fallback text").render()
            == '<audio src="https://example.com/sound.mp3">Fallback text</audio>'
        )

    def test_without_fallback(self) -> None:
        assert Audio("a.mp3").render() == '<audio src="a.mp3"></audio>'

    def test_fallback_escaped(self) -> None:
        assert Audio("a.mp3", "Rock & roll").render() == '<audio src="a.mp3">Rock &amp; roll</audio>'


class TestSub:
    def test_render(self) -> None:
        assert (
            Sub("W3C", "World Wide Web Consortium").render()
            == '<sub alias="World Wide Web Consortium">W3C</sub>'
        )

    def test_original_escaped_alias_verbatim(self) -> None:
        assert Sub("R&D", "R and D").render() == '<sub alias="R and D">R&amp;D</sub>'


class TestPhoneme:
    def test_render(self) -> None:
        assert (
            Phoneme("tomato", "ipa", "təˈmeɪtoʊ").render()
            == '<phoneme alphabet="ipa" ph="təˈmeɪtoʊ">tomato</phoneme>'
        )


class TestExpressAs:
    def test_style_only(self) -> None:
        assert (
            ExpressAs("I am excited!", "excited").render()
            == '<mstts:express-as style="excited">I am excited!</mstts:express-as>'
        )

    def test_all_attrs_in_order(self) -> None:
        out = ExpressAs("Hi", "cheerful", role="Girl", styledegree="1.5").render()
        assert out == '<mstts:express-as style="cheerful" styledegree="1.5" role="Girl">Hi</mstts:express-as>'

    def test_role_without_degree(self) -> None:
        out = ExpressAs("Hi", "calm", role="SeniorMale").render()
        assert out == '<mstts:express-as style="calm" role="SeniorMale">Hi</mstts:express-as>'

    def test_text_escaped(self) -> None:
        assert "It&apos;s" in ExpressAs("It's", "chat").render()


class TestSayAs:
    def test_with_format(self) -> None:
        assert (
            SayAs("2025-08-24", "date", format="ymd").render()
            == '<say-as interpret-as="date" format="ymd">2025-08-24</say-as>'
        )

    def test_detail_after_format(self) -> None:
        out = SayAs("42", "cardinal", detail="2", format="x").render()
        assert out == '<say-as interpret-as="cardinal" format="x" detail="2">42</say-as>'

    def test_interpret_as_only(self) -> None:
        assert SayAs("abc", "characters").render() == '<say-as interpret-as="characters">abc</say-as>'


class TestMath:
    def test_markup_embedded_verbatim(self) -> None:
        mathml = "<mi>x</mi><mo>+</mo><mn>1</mn>"
        assert (
            Math(mathml).render()
            == f'<math xmlns="http://www.w3.org/1998/Math/MathML">{mathml}</math>'
        )


class TestSimpleMsttsElements:
    def test_audio_duration(self) -> None:
        assert AudioDuration("3s").render() == '<mstts:audioduration value="3s"/>'

    def test_tts_embedding(self) -> None:
        assert (
            TTSEmbedding("profile-1", "Me & you").render()
            == '<mstts:ttsembedding speakerProfileId="profile-1">Me &amp; you</mstts:ttsembedding>'
        )

    def test_viseme(self) -> None:
        assert Viseme("redlips_front").render() == '<mstts:viseme type="redlips_front"/>'

    def test_voice_conversion(self) -> None:
        assert (
            VoiceConversion("https://example.com/model").render()
            == '<mstts:voiceconversion url="https://example.com/model"/>'
        )

    def test_lexicon(self) -> None:
        assert Lexicon("https://example.com/lex.xml").render() == '<lexicon uri="https://example.com/lex.xml"/>'


class TestBackgroundAudio:
    def test_src_only(self) -> None:
        assert BackgroundAudio("a.mp3").render() == '<mstts:backgroundaudio src="a.mp3"/>'

    def test_all_attrs_in_order(self) -> None:
        out = BackgroundAudio("a.mp3", fadeout="1000ms", volume="0.5", fadein="2000ms").render()
        assert out == '<mstts:backgroundaudio src="a.mp3" volume="0.5" fadein="2000ms" fadeout="1000ms"/>'

    def test_partial(self) -> None:
        assert BackgroundAudio("a.mp3", fadein="1s").render() == '<mstts:backgroundaudio src="a.mp3" fadein="1s"/>'


class TestEmphasis:
    def test_with_level(self) -> None:
        assert Emphasis("important", "strong").render() == '<emphasis level="strong">important</emphasis>'

    def test_level_omitted_when_unset(self) -> None:
        assert Emphasis("important").render() == "<emphasis>important</emphasis>"


class TestProsody:
    def test_fixed_attribute_order(self) -> None:
        out = Prosody("x", volume="loud", rate="slow", range="high", contour="(0%,+5%)", pitch="low").render()
        assert out == (
            '<prosody pitch="low" contour="(0%,+5%)" range="high" rate="slow" volume="loud">x</prosody>'
        )

    def test_subset(self) -> None:
        assert Prosody("slow speech", rate="slow", pitch="low").render() == (
            '<prosody pitch="low" rate="slow">slow speech</prosody>'
        )

    def test_no_attrs(self) -> None:
        assert Prosody("plain").render() == "<prosody>plain</prosody>"

    def test_text_escaped(self) -> None:
        assert Prosody("<loud>", volume="+6dB").render() == '<prosody volume="+6dB">&lt;loud&gt;</prosody>'


class TestPurity:
    def test_render_idempotent(self) -> None:
        node = ExpressAs("Hi & bye", "chat", styledegree="2")
        assert node.render() == node.render()
