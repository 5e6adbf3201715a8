"""
Article Notify
This script fetches unread articles from a Notion database, picks one at
random, announces it on a Teams channel, and marks it as published.
"""

import json
import logging
import random
import sys
from dataclasses import asdict
from typing import Optional

from src.config import Settings, load_settings
from src.errors import ConfigError
from src.selector import pick_random_article
from src.services.base import MessageSender
from src.services.db import ArticleStore
from src.services.notifier import (
    TeamsWebhookClient,
    get_unavailable_message,
    send_message,
    setup_message,
)

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configures the root logger for a run."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def run(
    settings: Settings,
    store: ArticleStore,
    sender: MessageSender,
    rng: Optional[random.Random] = None,
) -> int:
    """Runs the pipeline once and returns the process exit status."""
    logger.info("Fetching articles...")
    try:
        articles = store.fetch_articles()
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("fetch_articles() failed with error: %s", e)
        return 1

    if not articles:
        if not settings.notify_when_empty:
            logger.error("No available articles found.")
            return 1

        logger.info("No available articles found. Sending apology...")
        try:
            send_message(sender, settings.teams_webhook_url, get_unavailable_message())
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("send_message() failed with error: %s", e)
            return 1
        logger.error("Apology sent.")
        return 1

    logger.info("Picking random article...")
    try:
        article = pick_random_article(articles, rng)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("pick_random_article() failed with error: %s", e)
        return 1

    if settings.debug:
        logger.debug(
            "Picked article:\n%s", json.dumps(asdict(article), indent=2, ensure_ascii=False)
        )

    logger.info("Composing webhook message...")
    message = setup_message(article)

    logger.info("Triggering webhook...")
    try:
        send_message(sender, settings.teams_webhook_url, message)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("send_message() failed with error: %s", e)
        return 1

    logger.info("Marking article as read...")
    try:
        store.mark_article_read(article)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("mark_article_read() failed with error: %s", e)
        return 1

    logger.info("Success!")
    return 0


def main():
    """Main execution entry point."""
    configure_logging()
    logger.info("Loading .env...")
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    configure_logging(settings.debug)

    store = ArticleStore.from_token(
        settings.notion_api_token,
        settings.notion_db_id,
        published_checkbox_id=settings.published_checkbox_id,
        debug=settings.debug,
    )
    sender = TeamsWebhookClient()
    try:
        status = run(settings, store, sender)
    finally:
        sender.close()
        store.close()
    sys.exit(status)


if __name__ == "__main__":
    main()
