"""
Capability contracts for the remote collaborators.

Each pipeline step depends only on the narrow operation it needs, so a
notion_client endpoint, a Teams client or a test stand-in can be passed in.
"""

from typing import Any, Dict, List, Optional, Protocol

from src.models import Message


class DatabaseQueryClient(Protocol):
    """The `databases` endpoint of a Notion client."""

    def query(
        self,
        database_id: str,
        *,
        filter: Optional[Dict[str, Any]] = None,  # pylint: disable=redefined-builtin
        sorts: Optional[List[Dict[str, Any]]] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Queries a database and returns the raw response."""


class PageUpdateClient(Protocol):
    """The `pages` endpoint of a Notion client."""

    def update(self, page_id: str, **kwargs: Any) -> Dict[str, Any]:
        """Updates page properties and returns the updated page."""


class MessageSender(Protocol):
    """Anything that can deliver a message to a webhook."""

    def send(self, webhook_url: str, message: Message) -> None:
        """Sends a message, raising on failure."""
