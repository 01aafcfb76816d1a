"""Shared plumbing for the per-resource services."""

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from gitness.pagination import Page

if TYPE_CHECKING:
    from gitness.client import Client

_T = TypeVar("_T")


def escape(value: str | int) -> str:
    """Percent-encode one path segment, including ``/`` (``ci/demo`` -> ``ci%2Fdemo``)."""
    return quote(str(value), safe="")


def escape_path(value: str) -> str:
    """Percent-encode a wildcard path tail, keeping ``/`` as the separator."""
    return quote(value.lstrip("/"), safe="/")


class BaseService:
    def __init__(self, client: "Client") -> None:
        self._client = client

    async def _get(self, path: str, model: type[_T], *, params: Any = None) -> _T:
        resp = await self._client.get(path, params=params)
        return self._client.parse(resp, model)

    async def _get_list(self, path: str, model: type[_T], *, params: Any = None) -> list[_T]:
        resp = await self._client.get(path, params=params)
        return self._client.parse_list(resp, model)

    async def _list(self, path: str, model: type[_T], *, params: Any = None) -> Page[_T]:
        resp = await self._client.get(path, params=params)
        return Page.from_response(self._client.parse_list(resp, model), resp)

    async def _post(self, path: str, model: type[_T], body: Any = None, *, params: Any = None) -> _T:
        resp = await self._client.post(path, body, params=params)
        return self._client.parse(resp, model)

    async def _put(self, path: str, model: type[_T], body: Any = None) -> _T:
        resp = await self._client.put(path, body)
        return self._client.parse(resp, model)

    async def _patch(self, path: str, model: type[_T], body: Any = None) -> _T:
        resp = await self._client.patch(path, body)
        return self._client.parse(resp, model)
