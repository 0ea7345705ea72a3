"""
Swipe deck for catswipe.
Holds the queue of fetched cats a user swipes through, and routes each
swipe to CatService.
"""
import logging
from typing import List, Optional

from catswipe.models import Cat
from catswipe.service import DEFAULT_BATCH_SIZE, CatService

logger = logging.getLogger("catswipe.deck")


class SwipeDeck:
    def __init__(self, service: CatService, batch_size: int = DEFAULT_BATCH_SIZE):
        self.service = service
        self.batch_size = batch_size
        self.cats: List[Cat] = []
        self.index = 0

    async def load_more(self) -> int:
        """Appends a fresh batch to the deck. Returns how many cats were added."""
        batch = await self.service.fetch_cats(self.batch_size)
        self.cats.extend(batch)
        if not batch:
            logger.info("No new cats available.")
        return len(batch)

    @property
    def current(self) -> Optional[Cat]:
        if self.index < len(self.cats):
            return self.cats[self.index]
        return None

    @property
    def remaining(self) -> int:
        return max(len(self.cats) - self.index, 0)

    @property
    def is_exhausted(self) -> bool:
        return self.current is None

    async def like_current(self) -> Optional[Cat]:
        cat = self.current
        if cat is None:
            return None
        await self.service.like_cat(cat)
        self.index += 1
        return cat

    async def dislike_current(self) -> Optional[Cat]:
        cat = self.current
        if cat is None:
            return None
        await self.service.dislike_cat(cat)
        self.index += 1
        return cat
