import httpx
import pytest
from catswipe.client.cat_api_client import CatApiClient, CatApiError

API_URL = "https://api.thecatapi.com/v1/images/search"

def make_client(handler, api_key=""):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CatApiClient(api_key=api_key, api_url=API_URL, http_client=http)

@pytest.mark.asyncio
async def test_search_sends_limit_and_breed_flag():
    seen = {}
    def handler(request):
        seen["url"] = request.url
        seen["headers"] = request.headers
        return httpx.Response(200, json=[{"id": "abc", "url": "https://example.com/abc.jpg"}])
    client = make_client(handler)
    result = await client.search_images(3)
    assert result == [{"id": "abc", "url": "https://example.com/abc.jpg"}]
    assert seen["url"].params["limit"] == "3"
    assert seen["url"].params["has_breeds"] == "1"
    assert "x-api-key" not in seen["headers"]

@pytest.mark.asyncio
async def test_search_sends_api_key_when_configured():
    seen = {}
    def handler(request):
        seen["key"] = request.headers.get("x-api-key")
        return httpx.Response(200, json=[])
    client = make_client(handler, api_key="secret")
    assert await client.search_images(1) == []
    assert seen["key"] == "secret"

@pytest.mark.asyncio
async def test_search_null_payload_returns_none():
    client = make_client(lambda request: httpx.Response(200, content=b"null"))
    assert await client.search_images(1) is None

@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    httpx.Response(500, json={"message": "boom"}),
    httpx.Response(429, text="slow down"),
    httpx.Response(200, content=b"<html>not json</html>"),
    httpx.Response(200, json={"id": "abc"}),
])
async def test_search_failures_raise_cat_api_error(response):
    client = make_client(lambda request: response)
    with pytest.raises(CatApiError):
        await client.search_images(1)

@pytest.mark.asyncio
async def test_search_network_error_raises_cat_api_error():
    def handler(request):
        raise httpx.ConnectError("Network error", request=request)
    client = make_client(handler)
    with pytest.raises(CatApiError):
        await client.search_images(1)

@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
    client = CatApiClient(http_client=http)
    await client.aclose()
    assert not http.is_closed
    await http.aclose()

@pytest.mark.asyncio
async def test_service_falls_back_on_http_error(tmp_path):
    from catswipe.service import CatService
    from conftest import FixedRandom
    client = make_client(lambda request: httpx.Response(503))
    service = CatService(api_client=client, file_path=tmp_path / "liked.json", rng=FixedRandom(1))
    cats = await service.fetch_cats(2)
    assert [c.id for c in cats] == ["fallback_0", "fallback_1"]
