"""
Database service for reading and updating articles.

This module provides the ArticleStore class which interfaces with a Notion
database to fetch unread articles and mark them as published.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from notion_client import Client

from src.models import Article
from src.parsers.base import ResponseParser
from src.parsers.notion import NotionPageParser
from src.services.base import DatabaseQueryClient, PageUpdateClient

logger = logging.getLogger(__name__)

PUBLISHED_PROPERTY = "Published"
READY_PROPERTY = "Ready"


def build_query() -> Dict[str, Any]:
    """Returns the filter and sort for unread, ready articles."""
    return {
        "filter": {
            "and": [
                {"property": PUBLISHED_PROPERTY, "checkbox": {"equals": False}},
                {"property": READY_PROPERTY, "checkbox": {"equals": True}},
            ]
        },
        # Most recently edited first
        "sorts": [{"timestamp": "last_edited_time", "direction": "descending"}],
    }


class ArticleStore:
    """Reads and updates articles in a Notion database."""

    def __init__(
        self,
        database_client: DatabaseQueryClient,
        page_client: PageUpdateClient,
        database_id: str,
        published_checkbox_id: Optional[str] = None,
        parser: Optional[ResponseParser] = None,
        debug: bool = False,
    ):
        self.database_client = database_client
        self.page_client = page_client
        self.database_id = database_id
        self.published_checkbox_id = published_checkbox_id
        self.parser = parser or NotionPageParser()
        self.debug = debug
        self._client: Optional[Client] = None

    @classmethod
    def from_token(
        cls,
        token: str,
        database_id: str,
        published_checkbox_id: Optional[str] = None,
        debug: bool = False,
    ) -> "ArticleStore":
        """Creates a store backed by a real Notion client."""
        client = Client(auth=token)
        store = cls(
            client.databases,
            client.pages,
            database_id,
            published_checkbox_id=published_checkbox_id,
            debug=debug,
        )
        store._client = client
        return store

    def close(self) -> None:
        """Closes the Notion client when this store owns one."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch_articles(self) -> List[Article]:
        """Returns unread articles that are ready to be published."""
        res = self.database_client.query(database_id=self.database_id, **build_query())

        if self.debug:
            logger.debug(
                "Query response:\n%s",
                json.dumps(res, indent=2, ensure_ascii=False, default=str),
            )

        articles = self.parser.parse(res)
        logger.info("Fetched %d unread articles.", len(articles))
        return articles

    def mark_article_read(self, article: Article) -> None:
        """Sets the Published checkbox of the article's page."""
        # Notion accepts either the property id or its name as the key
        key = self.published_checkbox_id or PUBLISHED_PROPERTY
        self.page_client.update(
            page_id=article.id,
            properties={key: {"checkbox": True}},
        )
        logger.info("Marked article %s as published.", article.id)
