from urllib.parse import quote

import httpx

from seteuk.knowledge.base import BaseDocumentStore
from seteuk.knowledge.exceptions import ResourceUnavailableError


class HttpxDocumentStore(BaseDocumentStore):
    """Fetches reference documents from a static file server."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def url_for(self, name: str) -> str:
        return f"{self._base_url}/{quote(name)}"

    async def fetch(self, name: str) -> bytes:
        url = self.url_for(name)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise ResourceUnavailableError(f"Failed to fetch {name}: {exc}") from exc
        if response.status_code != httpx.codes.OK:
            raise ResourceUnavailableError(
                f"Failed to fetch {name}: HTTP {response.status_code}"
            )
        return response.content
