"""CI build cache: opaque blobs stored under a key and an optional version."""

from gitness.pagination import Page
from gitness.schemas.cicache import CiCacheEntry, GetCiCacheOptions, ListCiCacheOptions
from gitness.services.base import BaseService, escape


class CiCacheService(BaseService):
    async def upload_ci_cache(self, key: str, version: int, data: bytes) -> CiCacheEntry:
        """Store ``data`` under ``key``.

        Args:
            key: Cache key.
            version: Cache version; ``0`` or less leaves the version unset.
            data: Raw bytes, sent as ``application/octet-stream``.
        """
        params = {"version": version} if version > 0 else None
        resp = await self._client.put(
            f"ci/cache/{escape(key)}",
            params=params,
            content=data,
            content_type="application/octet-stream",
        )
        return self._client.parse(resp, CiCacheEntry)

    async def get_ci_cache(self, key: str, options: GetCiCacheOptions | None = None) -> bytes:
        resp = await self._client.get(f"ci/cache/{escape(key)}", params=options)
        return resp.raw.content

    async def list_ci_cache(self, options: ListCiCacheOptions | None = None) -> Page[CiCacheEntry]:
        return await self._list("ci/cache", CiCacheEntry, params=options)

    async def delete_ci_cache(self, key: str) -> None:
        await self._client.delete(f"ci/cache/{escape(key)}")

    async def clear_ci_cache(self) -> None:
        await self._client.delete("ci/cache")
