"""
Persistent storage helper for the liked cats collection.
Stores liked cats as a JSON list so the collection survives restarts.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List

from catswipe.config import default_liked_cats_path
from catswipe.models import Cat

logger = logging.getLogger("catswipe.storage")


class LikedCatStore:
    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_liked_cats_path()
        self._ensure_directory()

    def _ensure_directory(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to create directory for liked cats storage {self.path.parent}: {e}")

    def load(self) -> Dict[str, Cat]:
        """
        Reads the liked cats file and returns a mapping of id -> Cat.
        Returns an empty mapping if the file doesn't exist or can't be parsed.
        """
        try:
            if not self.path.exists():
                logger.info(f"Liked cats file {self.path} not found. Starting with an empty collection.")
                return {}
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if raw is None:
                return {}
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON list, got {type(raw).__name__}")
            cats = {}
            for entry in raw:
                cat = Cat.from_dict(entry)
                # Only liked records with a timestamp belong in the collection
                if not cat.is_liked or cat.liked_at is None:
                    logger.warning(f"Skipping stored cat {cat.id} that is not marked as liked.")
                    continue
                cats[cat.id] = cat
            logger.info(f"Loaded {len(cats)} liked cats from {self.path}")
            return cats
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to load liked cats from {self.path}: {e}")
            return {}

    def save(self, cats: List[Cat]) -> bool:
        """
        Rewrites the whole file with the given cats.
        Returns False (after logging) if the write failed.
        """
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([cat.to_dict() for cat in cats], f, indent=2, ensure_ascii=False)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save liked cats to {self.path}: {e}", exc_info=True)
            return False
