"""
Error types raised by the Article Notify application.

Transport failures from the Notion and Teams clients are not wrapped here;
they reach the orchestrator exactly as the client raised them.
"""


class ArticleNotifyError(Exception):
    """Base class for application errors."""


class ConfigError(ArticleNotifyError):
    """Raised when the runtime configuration is missing or incomplete."""


class EmptyInputError(ArticleNotifyError):
    """Raised when there is nothing to pick an article from."""


class PropertyDecodeError(ArticleNotifyError):
    """Raised when a Notion property does not have the expected type."""

    def __init__(self, name: str, expected: str, actual: str):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Property '{name}' has type '{actual}', expected '{expected}'"
        )


class WebhookError(ArticleNotifyError):
    """Raised when the webhook rejects a message."""
