"""
Base classes and interfaces for response parsers.

This module defines the contract that turns a raw database query response
into articles.
"""

from typing import Any, Dict, List, Protocol

from src.models import Article


class ResponseParser(Protocol):
    """
    Protocol for response parsers.

    Classes implementing this protocol should be able to map a raw query
    response into a list of Article objects, preserving record order.
    """

    def parse(self, response: Dict[str, Any]) -> List[Article]:
        """Maps a raw query response to articles."""
