"""
Notification service module for composing and sending Teams messages.

This module provides:
- Message constructors for a picked article and for an empty run
- A transparent send helper that delegates to any MessageSender
- The TeamsWebhookClient which posts MessageCards via an incoming webhook
"""

import logging
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from src.errors import WebhookError
from src.models import Article, Message
from src.services.base import MessageSender

logger = logging.getLogger(__name__)

THEME_COLOR = "#34D399"
LINK_TEXT = "もっと見る"

_UNAVAILABLE_TITLE = "今週...ネタ切れです！"
_UNAVAILABLE_TEXT = "申し訳ございません。。🙇🙇🙇"


def get_unavailable_message() -> Message:
    """Returns the apology sent when no article is available."""
    return Message(
        title=_UNAVAILABLE_TITLE,
        text=_UNAVAILABLE_TEXT,
        theme_color=THEME_COLOR,
    )


def setup_message(article: Article) -> Message:
    """Composes the message announcing an article."""
    text = f"<h2>{article.excerpt}</h2>"
    text += f'<a href="{article.url}">{LINK_TEXT}</a>'
    return Message(title=article.title, text=text, theme_color=THEME_COLOR)


def send_message(client: MessageSender, webhook_url: str, message: Message) -> Any:
    """Sends a message through the given client."""
    return client.send(webhook_url, message)


class TeamsWebhookClient:
    """Posts MessageCards to a Microsoft Teams incoming webhook."""

    # Office 365 connectors and Power Automate workflow endpoints
    ALLOWED_HOSTS = ("outlook.office.com", "outlook.office365.com")
    ALLOWED_HOST_SUFFIXES = (
        ".webhook.office.com",
        ".logic.azure.com",
        ".powerautomate.com",
        ".powerplatform.com",
    )

    def __init__(self, timeout: float = 10, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def _validate_url(self, webhook_url: str) -> None:
        parsed = urlparse(webhook_url or "")
        host = (parsed.hostname or "").lower()
        if parsed.scheme != "https" or not (
            host in self.ALLOWED_HOSTS or host.endswith(self.ALLOWED_HOST_SUFFIXES)
        ):
            raise WebhookError(f"Invalid webhook URL: {webhook_url!r}")

    def close(self) -> None:
        """Closes the underlying HTTP session."""
        self.session.close()

    def send(self, webhook_url: str, message: Message) -> None:
        """Posts the message, raising on any rejected delivery."""
        self._validate_url(webhook_url)

        resp = self.session.post(
            webhook_url,
            json=message.to_card(),
            timeout=self.timeout,
            headers={"User-Agent": "ArticleNotifyBot/1.0"},
        )
        resp.raise_for_status()

        # Legacy Office 365 connectors answer "1" on success
        body = resp.text.strip()
        if body and body != "1":
            raise WebhookError(f"Unexpected webhook response: {body[:200]}")
        logger.info("Webhook accepted message '%s'.", message.title)
