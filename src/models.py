"""
Data models for the Article Notify application.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class Article:
    """A single unread article page from the Notion database."""

    id: str
    url: str
    title: str
    excerpt: str
    published: bool


@dataclass(frozen=True)
class Message:
    """A Teams notification card."""

    title: str
    text: str
    theme_color: str

    def to_card(self) -> Dict[str, Any]:
        """Returns the legacy MessageCard payload for this message."""
        return {
            "@type": "MessageCard",
            "@context": "https://schema.org/extensions",
            "title": self.title,
            "text": self.text,
            "themeColor": self.theme_color,
        }


@dataclass(frozen=True)
class TitleProperty:
    """A Notion title property, as the plain text of each run."""

    texts: Tuple[str, ...] = field(default_factory=tuple)

    def first_text(self) -> str:
        """Returns the first run, or an empty string."""
        return self.texts[0] if self.texts else ""


@dataclass(frozen=True)
class RichTextProperty:
    """A Notion rich text property, as the plain text of each run."""

    texts: Tuple[str, ...] = field(default_factory=tuple)

    def first_text(self) -> str:
        """Returns the first run, or an empty string."""
        return self.texts[0] if self.texts else ""


@dataclass(frozen=True)
class CheckboxProperty:
    """A Notion checkbox property."""

    checked: bool = False


@dataclass(frozen=True)
class UnsupportedProperty:
    """Any Notion property type the mapper does not read."""

    type: str


PropertyValue = Union[TitleProperty, RichTextProperty, CheckboxProperty, UnsupportedProperty]
