# catswipe/fallback.py
"""Offline fallback cats and the rare epic cat."""
from typing import List

from catswipe.models import Cat

FALLBACK_IMAGE_URLS = [
    "https://cdn2.thecatapi.com/images/0XYvRd7oD.jpg",
    "https://cdn2.thecatapi.com/images/1p0.jpg",
    "https://cdn2.thecatapi.com/images/3eg.jpg",
    "https://cdn2.thecatapi.com/images/4fk.jpg",
    "https://cdn2.thecatapi.com/images/5i3.jpg",
]
FALLBACK_BREED = "Mixed"
FALLBACK_DESCRIPTION = "A beautiful cat"

EPIC_CAT_ID = "epic_cat_legendary"
EPIC_CAT_IMAGE = "epic_cat.png"
EPIC_CAT_BREED = "Legendary Epic Cat"
EPIC_CAT_DESCRIPTION = (
    "🌟 LEGENDARY EPIC CAT 🌟 A festive once-in-a-lifetime feline! "
    "Only one swipe in a thousand ever meets this cat. 🎉"
)
# One draw in EPIC_CAT_ODDS per fetch call
EPIC_CAT_ODDS = 1000


def get_fallback_cats(count: int) -> List[Cat]:
    return [
        Cat(
            id=f"fallback_{i}",
            image_url=url,
            breed=FALLBACK_BREED,
            description=FALLBACK_DESCRIPTION,
        )
        for i, url in enumerate(FALLBACK_IMAGE_URLS[:max(count, 0)])
    ]


def create_epic_cat() -> Cat:
    return Cat(
        id=EPIC_CAT_ID,
        image_url=EPIC_CAT_IMAGE,
        breed=EPIC_CAT_BREED,
        description=EPIC_CAT_DESCRIPTION,
    )
