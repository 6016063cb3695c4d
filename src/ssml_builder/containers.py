"""Container SSML elements holding mixed text and child nodes.

Content lists are append-only; render order is append order.  No
separators are inserted between entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .node import ContentItem, ContentNode, render_tag


@dataclass
class Sentence(ContentNode):
    """An ``<s>`` element."""

    content: list[ContentItem] = field(default_factory=list)

    def render(self) -> str:
        return f"<s>{self.render_content()}</s>"


@dataclass
class Paragraph(ContentNode):
    """A ``<p>`` element."""

    content: list[ContentItem] = field(default_factory=list)

    def render(self) -> str:
        return f"<p>{self.render_content()}</p>"


@dataclass
class Lang(ContentNode):
    """A ``<lang>`` span switching the spoken language to *lang*."""

    lang: str
    content: list[ContentItem] = field(default_factory=list)

    def render(self) -> str:
        return render_tag("lang", {"xml:lang": self.lang}, self.render_content())
