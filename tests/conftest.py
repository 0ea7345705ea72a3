import pytest
from catswipe.client.cat_api_client import CatApiError
from catswipe.service import CatService
from catswipe.storage import LikedCatStore


class FixedRandom:
    """Stands in for random.Random; randrange always returns `value`."""
    def __init__(self, value):
        self.value = value
        self.calls = 0
    def randrange(self, stop):
        self.calls += 1
        return self.value


class DummyCatApi:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.requests = []
        self.closed = False
    async def search_images(self, limit):
        self.requests.append(limit)
        if self.error:
            raise self.error
        return self.payload
    async def aclose(self):
        self.closed = True


def api_item(cat_id, breed=None, description=None):
    item = {"id": cat_id, "url": f"https://example.com/{cat_id}.jpg"}
    if breed is not None:
        item["breeds"] = [{"name": breed, "description": description}]
    return item


@pytest.fixture
def liked_path(tmp_path):
    return tmp_path / "liked_cats.json"


@pytest.fixture
def api():
    return DummyCatApi(payload=[])


@pytest.fixture
def service(api, liked_path):
    # randrange(1000) == 1 never triggers the epic cat
    return CatService(api_client=api, store=LikedCatStore(liked_path), rng=FixedRandom(1))


@pytest.fixture
def offline_api():
    return DummyCatApi(error=CatApiError("Network error"))
