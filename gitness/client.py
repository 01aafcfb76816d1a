"""HTTP adapter for the Gitness REST API v1."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

import httpx
import pydantic
import structlog

from gitness.config.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    Settings,
)
from gitness.schemas.common import as_utc
from gitness.services.admin import AdminService, AuditService
from gitness.services.auth import AuthService
from gitness.services.checks import ChecksService
from gitness.services.cicache import CiCacheService
from gitness.services.connectors import ConnectorsService
from gitness.services.pipelines import PipelinesService
from gitness.services.plugins import PluginsService
from gitness.services.principals import PrincipalsService
from gitness.services.pullrequests import PullRequestsService
from gitness.services.repositories import RepositoriesService
from gitness.services.resources import ResourceService
from gitness.services.secrets import SecretsService
from gitness.services.spaces import SpacesService
from gitness.services.system import SystemService
from gitness.services.templates import TemplatesService
from gitness.services.uploads import UploadService
from gitness.services.users import UsersService
from gitness.services.webhooks import WebhooksService

logger = structlog.get_logger(__name__)

API_VERSION_PATH = "api/v1/"

_T = TypeVar("_T")

_PAGINATION_HEADERS = {
    "page": "x-page",
    "per_page": "x-per-page",
    "next_page": "x-next-page",
    "total": "x-total",
    "total_pages": "x-total-pages",
}


class GitnessClientError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ErrorResponse(GitnessClientError):
    """A non-2xx answer from the API, decoded from its ``{message, details}`` body."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: str | None = None,
        method: str | None = None,
        url: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.details = details
        self.method = method
        self.url = url
        self.response = response

    def __str__(self) -> str:
        if self.method and self.url:
            return f"{self.method} {self.url}: {self.status_code} {self.message}"
        return self.message


@dataclass
class Response:
    """An API response plus the pagination metadata carried in its headers."""

    raw: httpx.Response
    page: int | None = None
    per_page: int | None = None
    next_page: int | None = None
    total: int | None = None
    total_pages: int | None = None

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> "Response":
        fields = {name: _header_int(resp.headers, header) for name, header in _PAGINATION_HEADERS.items()}
        return cls(raw=resp, **fields)

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers


def _header_int(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _normalize_base_url(base_url: str) -> str:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise ValueError(f"Invalid Gitness base URL: {base_url!r}") from exc
    if not url.scheme or not url.host:
        raise ValueError(f"Invalid Gitness base URL: {base_url!r}")
    normalized = str(url)
    if not normalized.endswith("/"):
        normalized += "/"
    return normalized


def _encode_body(body: Any) -> Any:
    if isinstance(body, pydantic.BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


def _encode_params(params: Any) -> dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, pydantic.BaseModel):
        return params.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(params, Mapping):
        encoded: dict[str, Any] = {}
        for key, value in params.items():
            if value is None:
                continue
            encoded[key] = as_utc(value).isoformat() if isinstance(value, datetime) else value
        return encoded
    raise TypeError(f"Unsupported query parameter container: {type(params).__name__}")


class Client:
    """Gitness API client.

    Holds one ``httpx.AsyncClient`` rooted at ``<base_url>api/v1/`` and exposes
    one service object per API resource (``client.repositories``,
    ``client.pull_requests``, ...). Every service method is a single request.

    ``retries`` configures the default transport. It cannot be combined with
    a custom ``transport``, which must carry its own retry policy.
    """

    def __init__(
        self,
        token: str = "",
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        retries: int = 0,
        debug: bool = False,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if transport is not None and retries > 0:
            raise ValueError("retries cannot be combined with a custom transport; configure retries on the transport")
        self._token = token
        self._base_url = _normalize_base_url(base_url)
        headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        # Retry policy is the transport's connect retry count, nothing more.
        if retries > 0:
            transport = httpx.AsyncHTTPTransport(retries=retries)
        event_hooks = {"request": [self._log_request], "response": [self._log_response]} if debug else None
        self._http = httpx.AsyncClient(
            base_url=self.api_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            event_hooks=event_hooks,
            follow_redirects=True,
        )

        self.admin = AdminService(self)
        self.audit = AuditService(self)
        self.auth = AuthService(self)
        self.checks = ChecksService(self)
        self.ci_cache = CiCacheService(self)
        self.connectors = ConnectorsService(self)
        self.pipelines = PipelinesService(self)
        self.principals = PrincipalsService(self)
        self.plugins = PluginsService(self)
        self.pull_requests = PullRequestsService(self)
        self.repositories = RepositoriesService(self)
        self.resource = ResourceService(self)
        self.secrets = SecretsService(self)
        self.spaces = SpacesService(self)
        self.system = SystemService(self)
        self.templates = TemplatesService(self)
        self.upload = UploadService(self)
        self.users = UsersService(self)
        self.webhooks = WebhooksService(self)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Client":
        settings = settings or Settings()
        return cls(
            settings.token,
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            retries=settings.retry_count,
            debug=settings.debug,
            user_agent=settings.user_agent,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_url(self) -> str:
        return self._base_url + API_VERSION_PATH

    @property
    def token(self) -> str:
        return self._token

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if not self._http.is_closed:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    async def get(self, path: str, *, params: Any = None) -> Response:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Any = None, *, params: Any = None) -> Response:
        return await self._request("POST", path, body=body, params=params)

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        params: Any = None,
        content: bytes | None = None,
        content_type: str | None = None,
    ) -> Response:
        return await self._request("PUT", path, body=body, params=params, content=content, content_type=content_type)

    async def patch(self, path: str, body: Any = None) -> Response:
        return await self._request("PATCH", path, body=body)

    async def delete(self, path: str, body: Any = None) -> Response:
        return await self._request("DELETE", path, body=body)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def parse(self, resp: Response, model: type[_T]) -> _T:
        """Validate the JSON body against a Pydantic model.

        Raises GitnessClientError for both invalid JSON bodies and schema
        mismatches, so callers don't need to handle json.JSONDecodeError or
        pydantic.ValidationError individually.
        """
        data = self._json(resp)
        try:
            return model.model_validate(data)  # type: ignore[attr-defined]
        except pydantic.ValidationError as exc:
            raise GitnessClientError(
                f"Gitness response schema mismatch: {exc}",
                status_code=resp.status_code,
            ) from exc

    def parse_list(self, resp: Response, model: type[_T]) -> list[_T]:
        """Validate a JSON array body element by element. ``null`` decodes as ``[]``."""
        items = self._json(resp)
        if items is None:
            return []
        if not isinstance(items, list):
            raise GitnessClientError(
                f"Gitness returned unexpected shape, expected array, got {type(items).__name__} "
                f"(status {resp.status_code})",
                status_code=resp.status_code,
            )
        result: list[_T] = []
        for item in items:
            try:
                result.append(model.model_validate(item))  # type: ignore[attr-defined]
            except pydantic.ValidationError as exc:
                raise GitnessClientError(
                    f"Gitness response schema mismatch: {exc}",
                    status_code=resp.status_code,
                ) from exc
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Any = None,
        content: bytes | None = None,
        content_type: str | None = None,
    ) -> Response:
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = _encode_body(body)
        if content is not None:
            kwargs["content"] = content
        if content_type is not None:
            kwargs["headers"] = {"Content-Type": content_type}
        query = _encode_params(params)
        if query:
            kwargs["params"] = query

        resp = await self._http.request(method, path.lstrip("/"), **kwargs)
        self._check_response(resp)
        return Response.from_httpx(resp)

    def _check_response(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return

        message = ""
        details: str | None = None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            if isinstance(body.get("message"), str):
                message = body["message"]
            if isinstance(body.get("details"), str):
                details = body["details"]
        if not message:
            message = f"HTTP {resp.status_code}: {httpx.codes.get_reason_phrase(resp.status_code)}"

        logger.warning(
            "gitness_api_error",
            method=resp.request.method,
            url=str(resp.request.url),
            status_code=resp.status_code,
            message=message,
        )
        raise ErrorResponse(
            message,
            status_code=resp.status_code,
            details=details,
            method=resp.request.method,
            url=str(resp.request.url),
            response=resp,
        )

    def _json(self, resp: Response) -> Any:
        try:
            return resp.raw.json()
        except json.JSONDecodeError as exc:
            raise GitnessClientError(
                f"Gitness returned non-JSON body (status {resp.status_code}): {exc}",
                status_code=resp.status_code,
            ) from exc

    async def _log_request(self, request: httpx.Request) -> None:
        logger.debug("gitness_request", method=request.method, url=str(request.url))

    async def _log_response(self, response: httpx.Response) -> None:
        logger.debug(
            "gitness_response",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            page=response.headers.get("x-page"),
            total=response.headers.get("x-total"),
        )
