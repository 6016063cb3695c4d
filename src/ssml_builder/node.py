"""Base node contract and XML helpers shared by every SSML element.

Every node renders itself to a complete, self-contained tag string.
Free-form text passes through :func:`escape_xml` exactly once, at render
time. Structural attribute values (URLs, enumerated tags, durations,
identifiers) are embedded verbatim and never validated here; see
:mod:`ssml_builder.validation` for opt-in format checks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Self, TypeAlias, Union


def escape_xml(text: str) -> str:
    """Escape the five XML special characters in *text*.

    ``&`` is replaced first so entities introduced by the later
    substitutions are not escaped again.  Escaping already-escaped text
    double-escapes it.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def format_attributes(attrs: Mapping[str, str | None]) -> str:
    """Join ``name="value"`` pairs in mapping order, skipping ``None`` values.

    Values are written as given; callers escape them if they need to.
    """
    return " ".join(f'{name}="{value}"' for name, value in attrs.items() if value is not None)


def render_tag(name: str, attrs: Mapping[str, str | None], body: str | None = None) -> str:
    """Render a tag: self-closing when *body* is ``None``, open/close otherwise."""
    formatted = format_attributes(attrs)
    opening = f"<{name} {formatted}" if formatted else f"<{name}"
    if body is None:
        return f"{opening}/>"
    return f"{opening}>{body}</{name}>"


class SSMLNode(ABC):
    """A markup node whose sole contract is producing a serialized tag."""

    escape_xml = staticmethod(escape_xml)

    @abstractmethod
    def render(self) -> str:
        """Return the node serialized as SSML."""

    def __str__(self) -> str:
        return self.render()


# Mixed content: plain text runs interspersed with nodes.
ContentItem: TypeAlias = Union[str, SSMLNode]


def render_content(content: list[ContentItem]) -> str:
    """Concatenate *content* in order, escaping text and rendering nodes."""
    return "".join(
        escape_xml(item) if isinstance(item, str) else item.render()
        for item in content
    )


class ContentNode(SSMLNode):
    """A node holding an append-only, ordered list of text and child nodes."""

    content: list[ContentItem]

    def text(self, text: str) -> Self:
        """Append a text run (escaped when rendered)."""
        self.content.append(text)
        return self

    def add_element(self, element: SSMLNode) -> Self:
        """Append a child node."""
        self.content.append(element)
        return self

    def render_content(self) -> str:
        return render_content(self.content)
