"""Unit tests for the notifier."""

import unittest
from unittest.mock import MagicMock

import requests

from src.errors import WebhookError
from src.models import Article, Message
from src.services.notifier import (
    TeamsWebhookClient,
    get_unavailable_message,
    send_message,
    setup_message,
)


class TestMessages(unittest.TestCase):
    def test_setup_message(self):
        article = Article(
            id="some_id",
            url="some_url",
            title="some_title",
            excerpt="some_excerpt",
            published=True,
        )

        result = setup_message(article)

        self.assertEqual(
            result,
            Message(
                title="some_title",
                text='<h2>some_excerpt</h2><a href="some_url">もっと見る</a>',
                theme_color="#34D399",
            ),
        )

    def test_unavailable_message(self):
        result = get_unavailable_message()
        self.assertEqual(result.title, "今週...ネタ切れです！")
        self.assertEqual(result.text, "申し訳ございません。。🙇🙇🙇")
        self.assertEqual(result.theme_color, "#34D399")

    def test_to_card(self):
        card = Message("t", "x", "#000000").to_card()
        self.assertEqual(
            card,
            {
                "@type": "MessageCard",
                "@context": "https://schema.org/extensions",
                "title": "t",
                "text": "x",
                "themeColor": "#000000",
            },
        )


class TestSendMessage(unittest.TestCase):
    def setUp(self):
        self.message = Message("some_title", "some_text", "some_color")

    def test_passes_input_params(self):
        client = MagicMock()

        result = send_message(client, "some_url", self.message)

        client.send.assert_called_once_with("some_url", self.message)
        self.assertIs(result, client.send.return_value)

    def test_returns_error_if_occurred(self):
        error = RuntimeError("some err")
        client = MagicMock()
        client.send.side_effect = error

        with self.assertRaises(RuntimeError) as ctx:
            send_message(client, "some_url", self.message)

        self.assertIs(ctx.exception, error)


class TestTeamsWebhookClient(unittest.TestCase):
    url = "https://example.webhook.office.com/webhookb2/abc"

    def make_client(self, status=200, text="1"):
        session = MagicMock()
        resp = session.post.return_value
        resp.text = text
        if status >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
        return TeamsWebhookClient(session=session), session

    def test_posts_card(self):
        client, session = self.make_client()
        message = Message("t", "x", "#34D399")

        client.send(self.url, message)

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        self.assertEqual(args[0], self.url)
        self.assertEqual(kwargs["json"], message.to_card())
        self.assertEqual(kwargs["timeout"], 10)

    def test_accepts_empty_body(self):
        client, _ = self.make_client(status=202, text="")
        client.send(self.url, Message("t", "x", "c"))

    def test_raises_on_http_error(self):
        client, _ = self.make_client(status=400, text="Bad payload")
        with self.assertRaises(requests.HTTPError):
            client.send(self.url, Message("t", "x", "c"))

    def test_raises_on_unexpected_body(self):
        client, _ = self.make_client(text="Webhook message delivery failed")
        with self.assertRaises(WebhookError):
            client.send(self.url, Message("t", "x", "c"))

    def test_rejects_invalid_url(self):
        client, session = self.make_client()
        for url in (
            "",
            "not a url",
            "ftp://example.webhook.office.com/hook",
            "http://example.webhook.office.com/hook",
            "https://example.com/hook",
            "https://webhook.office.com.evil.example/hook",
        ):
            with self.assertRaises(WebhookError):
                client.send(url, Message("t", "x", "c"))
        session.post.assert_not_called()

    def test_accepts_teams_and_workflow_hosts(self):
        client, session = self.make_client(text="")
        for url in (
            "https://contoso.webhook.office.com/webhookb2/abc",
            "https://outlook.office.com/webhook/abc",
            "https://prod-01.westus.logic.azure.com:443/workflows/abc/triggers/manual",
            "https://default123.environment.api.powerplatform.com/powerautomate/abc",
        ):
            client.send(url, Message("t", "x", "c"))
        self.assertEqual(session.post.call_count, 4)

    def test_close_closes_session(self):
        client, session = self.make_client()
        client.close()
        session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
