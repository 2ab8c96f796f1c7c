"""Nutritionix API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NutritionixClient(Protocol):
    """Interface for Nutritionix API interactions."""

    async def request_natural(self, query: str) -> list[dict[str, object]]:
        """Resolve a natural-language query to raw food payloads."""

    async def request_upc(self, upc: str) -> list[dict[str, object]]:
        """Look up a UPC and return raw food payloads."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str
    ) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def request_natural(self, query: str) -> list[dict[str, object]]:
        """Call the natural nutrients endpoint."""
        response = await self.http_client.post(
            f"{self.base_url}/natural/nutrients",
            headers=self._headers(),
            json={"query": query},
            timeout=15,
        )
        response.raise_for_status()
        return response.json().get("foods") or []

    async def request_upc(self, upc: str) -> list[dict[str, object]]:
        """Call the item search endpoint for a UPC."""
        response = await self.http_client.get(
            f"{self.base_url}/search/item",
            headers=self._headers(),
            params={"upc": upc},
            timeout=15,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return []
        response.raise_for_status()
        return response.json().get("foods") or []

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _headers(self) -> dict[str, str]:
        return {"x-app-id": self.app_id, "x-app-key": self.app_key}
