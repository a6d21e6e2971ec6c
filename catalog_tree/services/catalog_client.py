# catalog_tree/services/catalog_client.py
import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

import aiohttp

from ..config import Config
from ..exceptions import CatalogAPIError
from ..models.query import CategoryQuery

logger = logging.getLogger(__name__)


class CatalogClient:
    """Client for the admin category endpoints of the catalog service"""

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.base_url = (base_url or Config.CATALOG_API_URL).rstrip("/")
        self.token = token if token is not None else Config.CATALOG_API_TOKEN
        self.timeout = aiohttp.ClientTimeout(total=timeout or Config.CATALOG_TIMEOUT)

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        """GET one endpoint and unwrap the {success, data, message} envelope"""
        url = f"{self.base_url}{path}"
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url, params=params, headers=self._headers()) as response:
                    if response.status != 200:
                        raise CatalogAPIError(
                            f"Catalog request {path} failed with status {response.status}",
                            status=response.status
                        )
                    payload = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Catalog request {path} failed: {e}")
            raise CatalogAPIError(f"Catalog request {path} failed: {e}") from e

        if not isinstance(payload, dict) or not payload.get("success"):
            message = payload.get("message") if isinstance(payload, dict) else None
            raise CatalogAPIError(message or f"Catalog request {path} was not successful", status=200)

        return payload.get("data")

    @staticmethod
    def _unpack_page(data: Any, query: CategoryQuery) -> Tuple[List[Any], Dict[str, int]]:
        """Split a paginator object (or a bare list) into records and paging info"""
        if isinstance(data, list):
            return data, {
                "current_page": 1,
                "last_page": 1,
                "per_page": len(data) or query.per_page,
                "total": len(data),
            }
        if not isinstance(data, dict) or not isinstance(data.get("data"), list):
            raise CatalogAPIError("Unexpected category listing shape", status=200)

        records = data["data"]
        return records, {
            "current_page": int(data.get("current_page") or query.page),
            "last_page": int(data.get("last_page") or 1),
            "per_page": int(data.get("per_page") or query.per_page),
            "total": int(data.get("total") or len(records)),
        }

    async def fetch_page(self, query: CategoryQuery) -> Tuple[List[Any], Dict[str, int]]:
        """Raw records of one listing page plus its paging info"""
        data = await self._get("/admin/categories", params=query.to_params())
        return self._unpack_page(data, query)

    async def fetch_all_records(self, query: CategoryQuery) -> List[Any]:
        """Raw records of every page, starting at ``query.page``"""
        records: List[Any] = []
        page = query.page
        while True:
            batch, paging = await self.fetch_page(query.model_copy(update={"page": page}))
            records.extend(batch)
            if not batch or page >= paging["last_page"]:
                break
            page += 1

        logger.info(f"Fetched {len(records)} category records in {page - query.page + 1} page(s)")
        return records

