"""Random article selection."""

import random
from typing import Optional, Sequence

from src.errors import EmptyInputError
from src.models import Article


def pick_random_article(
    articles: Sequence[Article], rng: Optional[random.Random] = None
) -> Article:
    """Picks one article uniformly at random."""
    if not articles:
        raise EmptyInputError("Given list of articles is empty")

    rng = rng or random.Random()
    return articles[rng.randrange(len(articles))]
