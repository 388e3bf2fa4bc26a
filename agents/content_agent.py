import logging
from typing import List, Optional

import httpx

from utils.config import settings
from utils.errors import EnrichmentError

logger = logging.getLogger(__name__)


class ContentAgent:
    """Fetches recent web context for a topic from Bing Web Search."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        search_url: Optional[str] = None,
        result_count: int = settings.SEARCH_RESULT_COUNT,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.bing_search_api_key
        self.search_url = search_url or settings.bing_search_url
        self.result_count = result_count
        self.timeout = timeout or settings.search_timeout
        self.transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search(self, topic: str) -> List[dict]:
        """Return the raw web page results for a topic."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.search_url,
                    params={"q": topic, "count": self.result_count},
                    headers={"Ocp-Apim-Subscription-Key": self.api_key},
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise EnrichmentError(f"Bing search failed for '{topic}': {e}") from e

        if not isinstance(data, dict):
            raise EnrichmentError(f"Unexpected Bing response for '{topic}'")

        web_pages = data.get("webPages")
        if web_pages is None:
            return []
        if not isinstance(web_pages, dict):
            raise EnrichmentError(f"Unexpected webPages in Bing response for '{topic}'")

        pages = web_pages.get("value") or []
        if not isinstance(pages, list):
            raise EnrichmentError(f"Unexpected webPages.value in Bing response for '{topic}'")
        return [item for item in pages if isinstance(item, dict)]

    async def fetch_context(self, topic: str) -> str:
        """
        Return "title: snippet" lines for the top search results, or "" when
        search is unconfigured or fails for any reason.
        """
        if not self.is_configured():
            return ""

        try:
            pages = await self.search(topic)
        except EnrichmentError as e:
            logger.warning(str(e))
            return ""

        return "\n".join(
            f"{item.get('name', '')}: {item.get('snippet', '')}"
            for item in pages[:self.result_count]
        )
