"""
Cat collection service for catswipe.
- Fetches batches from TheCatAPI through CatApiClient
- Avoids repeats within a process using an in-memory seen-id set
- Injects the rare epic cat
- Keeps the liked collection in memory and mirrors it to LikedCatStore
"""
import logging
import random
from datetime import datetime
from typing import Dict, List, Optional

from catswipe.client.cat_api_client import CatApiClient, CatApiError
from catswipe.fallback import EPIC_CAT_ID, EPIC_CAT_ODDS, create_epic_cat, get_fallback_cats
from catswipe.models import Cat
from catswipe.storage import LikedCatStore

logger = logging.getLogger("catswipe.service")

DEFAULT_BATCH_SIZE = 10


class CatService:
    def __init__(self, api_client: Optional[CatApiClient] = None, store: Optional[LikedCatStore] = None,
                 file_path=None, api_key: str = "", rng: Optional[random.Random] = None):
        self.api = api_client or CatApiClient(api_key=api_key)
        self.store = store or LikedCatStore(file_path)
        self.rng = rng or random.Random()
        self._seen_ids = set()
        self._liked: Dict[str, Cat] = self.store.load()

    @classmethod
    def from_config(cls, config, rng: Optional[random.Random] = None) -> "CatService":
        api_client = CatApiClient(
            api_key=config.cat_api_key,
            api_url=config.cat_api_url,
            timeout=config.cat_api_timeout,
        )
        return cls(api_client=api_client, store=LikedCatStore(config.liked_cats_file), rng=rng)

    async def fetch_cats(self, count: int = DEFAULT_BATCH_SIZE) -> List[Cat]:
        """
        Returns up to `count` cats not seen before by this service.
        Falls back to the offline cats if the API is unavailable; never raises
        for remote failures.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ValueError(f"count must be a positive integer, got {count!r}")

        try:
            payload = await self.api.search_images(count)
            if not payload:
                return []
            candidates = [Cat.from_api(item) for item in payload]
        except (CatApiError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Cat API unavailable ({e}); serving fallback cats.")
            cats = get_fallback_cats(count)
        else:
            cats = []
            for cat in candidates:
                if cat.id in self._seen_ids:
                    continue
                self._seen_ids.add(cat.id)
                cats.append(cat)
            logger.info(f"Fetched {len(candidates)} cats, {len(cats)} new.")

        self._maybe_add_epic_cat(cats)
        return cats

    def _maybe_add_epic_cat(self, cats: List[Cat]):
        # The draw happens on every call; the seen check keeps it to one appearance.
        if self.rng.randrange(EPIC_CAT_ODDS) == 0 and EPIC_CAT_ID not in self._seen_ids:
            self._seen_ids.add(EPIC_CAT_ID)
            cats.insert(0, create_epic_cat())
            logger.info("A legendary epic cat appeared!")

    async def get_liked_cats(self) -> List[Cat]:
        return [cat.copy() for cat in self._liked.values()]

    async def like_cat(self, cat: Cat):
        cat.is_liked = True
        cat.liked_at = datetime.now()
        self._liked[cat.id] = cat.copy()
        self._save()

    async def dislike_cat(self, cat: Cat):
        cat.is_liked = False
        cat.liked_at = None
        self._liked.pop(cat.id, None)
        self._save()

    def _save(self):
        # In-memory state stays authoritative even when the write fails.
        self.store.save(list(self._liked.values()))

    async def aclose(self):
        await self.api.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
