"""
Notion query response parser.

This module provides the NotionPageParser class, which maps the pages of a
Notion database query response into Article values.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from src.errors import PropertyDecodeError
from src.models import (
    Article,
    CheckboxProperty,
    PropertyValue,
    RichTextProperty,
    TitleProperty,
    UnsupportedProperty,
)
from src.parsers.base import ResponseParser

T = TypeVar("T", TitleProperty, RichTextProperty, CheckboxProperty)

_TYPE_TAGS = {
    TitleProperty: "title",
    RichTextProperty: "rich_text",
    CheckboxProperty: "checkbox",
}


def _plain_texts(runs: List[Dict[str, Any]]) -> tuple:
    return tuple(run.get("plain_text", "") for run in runs or [])


def decode_property(raw: Dict[str, Any]) -> PropertyValue:
    """Decodes a raw Notion property wrapper into its tagged variant."""
    tag = raw.get("type", "")
    if tag == "title":
        return TitleProperty(_plain_texts(raw.get("title", [])))
    if tag == "rich_text":
        return RichTextProperty(_plain_texts(raw.get("rich_text", [])))
    if tag == "checkbox":
        return CheckboxProperty(bool(raw.get("checkbox", False)))
    return UnsupportedProperty(tag)


class NotionPageParser(ResponseParser):
    """Maps Notion pages to articles."""

    TITLE = "Name"
    EXCERPT = "Excerpt"
    PUBLISHED = "Published"

    def _expect(
        self, properties: Dict[str, Any], name: str, kind: Type[T]
    ) -> Optional[T]:
        """Returns the named property as `kind`, or None when it is absent."""
        raw = properties.get(name)
        if raw is None:
            return None
        value = decode_property(raw)
        if not isinstance(value, kind):
            if isinstance(value, UnsupportedProperty):
                actual = value.type
            else:
                actual = _TYPE_TAGS[type(value)]
            raise PropertyDecodeError(name, _TYPE_TAGS[kind], actual)
        return value

    def parse_page(self, page: Dict[str, Any]) -> Article:
        """Maps a single page to an Article."""
        properties = page.get("properties", {})

        title = self._expect(properties, self.TITLE, TitleProperty)
        excerpt = self._expect(properties, self.EXCERPT, RichTextProperty)
        published = self._expect(properties, self.PUBLISHED, CheckboxProperty)

        return Article(
            id=page["id"],
            url=page["url"],
            title=title.first_text() if title else "",
            excerpt=excerpt.first_text() if excerpt else "",
            published=published.checked if published else False,
        )

    def parse(self, response: Dict[str, Any]) -> List[Article]:
        """Maps every page of a query response, in order."""
        return [self.parse_page(page) for page in response.get("results", [])]


def parse_articles(response: Dict[str, Any]) -> List[Article]:
    """Maps a raw query response to articles with the default parser."""
    return NotionPageParser().parse(response)
