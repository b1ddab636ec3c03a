from __future__ import annotations
import httpx
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from repairdesk.core.config import settings


class RepairDeskAPIError(Exception):
    def __init__(self, status_code: int, error: str):
        super().__init__(f"{status_code}: {error}")
        self.status_code = status_code
        self.error = error


@dataclass
class RepairDeskClient:
    """Async client for the repairdesk HTTP surface.

    ``entities`` is the plural route segment, e.g. ``"devices"`` or
    ``"repair-invoices"``. Pass ``transport`` to talk to an in-process app.
    """
    base_url: str = f"http://localhost:{settings.api_port}{settings.api_prefix}"
    timeout: float = 30
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        async with self._client() as client:
            r = await client.request(method, path, **kwargs)
        if r.is_error:
            try:
                error = r.json().get("error", r.text)
            except ValueError:
                error = r.text
            raise RepairDeskAPIError(r.status_code, error)
        return r.json()

    async def create(self, entities: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/{entities}", json=body)

    async def get(self, entities: str, id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/{entities}/{id}")

    async def list(self, entities: str, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {k: v for k, v in {"limit": limit, "offset": offset}.items() if v is not None}
        return await self._request("GET", f"/{entities}", params=params)

    async def update(self, entities: str, id: int, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/{entities}/{id}", json=body)

    async def delete(self, entities: str, id: int) -> Dict[str, Any]:
        return await self._request("DELETE", f"/{entities}/{id}")

    async def repair_invoices_for(self, entities: str, id: int, limit: Optional[int] = None,
                                  offset: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {k: v for k, v in {"limit": limit, "offset": offset}.items() if v is not None}
        return await self._request("GET", f"/{entities}/{id}/repair-invoices", params=params)
