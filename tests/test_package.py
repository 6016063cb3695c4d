"""Tests for the public package surface and the README quick-start."""

from __future__ import annotations

import ssml_builder


class TestPublicApi:
    def test_all_names_importable(self) -> None:
        for name in ssml_builder.__all__:
            assert getattr(ssml_builder, name) is not None, name

    def test_version(self) -> None:
        assert ssml_builder.__version__ == "0.1.0"

    def test_readme_quick_start(self) -> None:
        from ssml_builder import SSMLBuilder

        ssml = (
            SSMLBuilder("en-US")
            .voice("en-US-AvaNeural")
            .express_as("Oh, hello there!", "cheerful")
            .pause("500ms")
            .text("How are you doing today?")
            .voice("en-US-AndrewNeural")
            .text("I'm doing great, thanks for asking!")
            .build()
        )
        assert '<mstts:express-as style="cheerful">Oh, hello there!</mstts:express-as>' in ssml
        assert '<break time="500ms"/>' in ssml
        assert "I&apos;m doing great, thanks for asking!" in ssml

    def test_every_node_is_an_ssml_node(self) -> None:
        nodes = [
            ssml_builder.Break(),
            ssml_builder.Bookmark("m"),
            ssml_builder.Sentence(),
            ssml_builder.Lang("en-GB"),
            ssml_builder.VoiceBuilder("v"),
            ssml_builder.ParagraphBuilder(),
            ssml_builder.SentenceBuilder(),
        ]
        for node in nodes:
            assert isinstance(node, ssml_builder.SSMLNode)
