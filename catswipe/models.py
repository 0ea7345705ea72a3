# catswipe/models.py
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

UNKNOWN_BREED = "Unknown Breed"
DEFAULT_DESCRIPTION = "A beautiful cat"


@dataclass
class Cat:
    id: str
    image_url: str
    breed: Optional[str] = None
    description: Optional[str] = None
    is_liked: bool = False
    liked_at: Optional[datetime] = None

    @property
    def display_breed(self) -> str:
        return self.breed or UNKNOWN_BREED

    @property
    def display_description(self) -> str:
        return self.description or DEFAULT_DESCRIPTION

    def copy(self) -> "Cat":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "imageUrl": self.image_url,
            "breed": self.breed,
            "description": self.description,
            "isLiked": self.is_liked,
            "likedAt": self.liked_at.isoformat() if self.liked_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cat":
        """
        Builds a Cat from its stored JSON form.
        Raises KeyError/TypeError/ValueError on malformed records.
        """
        liked_at = data.get("likedAt")
        return cls(
            id=str(data["id"]),
            image_url=str(data.get("imageUrl") or ""),
            breed=data.get("breed"),
            description=data.get("description"),
            is_liked=bool(data.get("isLiked", False)),
            liked_at=datetime.fromisoformat(liked_at) if liked_at else None,
        )

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Cat":
        """
        Builds a Cat from one TheCatAPI image search result.
        Only the first listed breed is used.
        """
        breeds = item.get("breeds") or []
        first = breeds[0] if breeds else None
        return cls(
            id=str(item["id"]),
            image_url=str(item.get("url") or ""),
            breed=first.get("name") if first else None,
            description=first.get("description") if first else None,
        )
