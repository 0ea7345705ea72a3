"""
CatApiClient for catswipe

- Thin async wrapper over TheCatAPI image search endpoint (httpx.AsyncClient)
- Sends the x-api-key header only when an API key is configured
- Normalizes every transport/status/decoding failure into CatApiError
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from catswipe.config import DEFAULT_CAT_API_URL

logger = logging.getLogger("catswipe.cat_api_client")


class CatApiError(RuntimeError):
    """Raised when the image search request cannot produce a usable payload."""


class CatApiClient:
    def __init__(self, api_key: str = "", api_url: str = DEFAULT_CAT_API_URL,
                 timeout: float = 10.0, http_client: Optional[httpx.AsyncClient] = None):
        self.api_url = api_url
        self.api_key = api_key
        self._owns_client = http_client is None
        self.http = http_client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    def _headers(self) -> Dict[str, str]:
        headers = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def search_images(self, limit: int) -> Optional[List[Dict[str, Any]]]:
        """
        Requests up to `limit` images that carry breed metadata.
        Returns the decoded list, or None when the API answered with JSON null.
        """
        params = {"limit": limit, "has_breeds": 1}
        try:
            response = await self.http.get(self.api_url, params=params, headers=self._headers())
            response.raise_for_status()  # Raises exception for 4xx/5xx
            payload = response.json()
        except httpx.HTTPError as e:
            raise CatApiError(f"Cat API request failed: {e}") from e
        except ValueError as e:
            raise CatApiError(f"Cat API returned invalid JSON: {e}") from e

        if payload is None:
            return None
        if not isinstance(payload, list):
            raise CatApiError(f"Cat API returned {type(payload).__name__}, expected a list")
        logger.debug(f"Cat API returned {len(payload)} items for limit={limit}")
        return payload

    async def aclose(self):
        if self._owns_client:
            await self.http.aclose()
