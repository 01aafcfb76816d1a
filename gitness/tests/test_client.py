import json
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import httpx
import pydantic
import pytest
import respx
from structlog.testing import capture_logs

from gitness.client import Client, ErrorResponse, GitnessClientError
from gitness.config.config import DEFAULT_BASE_URL, Settings
from gitness.schemas.repositories import Repository
from gitness.schemas.users import CreateTokenOptions, User

BASE_URL = "http://gitness.test/"
API_URL = "http://gitness.test/api/v1"
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestConstruction:
    async def test_defaults(self):
        async with Client() as client:
            assert client.base_url == DEFAULT_BASE_URL
            assert client.api_url == "https://gitness.com/api/v1/"
            assert client.token == ""
            assert client._http.timeout == httpx.Timeout(10.0)

    async def test_base_url_without_trailing_slash_is_normalized(self):
        async with Client(base_url="http://gitness.test/sub") as client:
            assert client.base_url == "http://gitness.test/sub/"
            assert client.api_url == "http://gitness.test/sub/api/v1/"

    def test_base_url_without_scheme_raises(self):
        with pytest.raises(ValueError):
            Client(base_url="gitness.test")

    async def test_custom_timeout(self):
        async with Client(base_url=BASE_URL, timeout=2.5) as client:
            assert client._http.timeout == httpx.Timeout(2.5)

    async def test_service_attributes(self):
        async with Client(base_url=BASE_URL) as client:
            for name in (
                "admin",
                "audit",
                "auth",
                "checks",
                "ci_cache",
                "connectors",
                "pipelines",
                "principals",
                "plugins",
                "pull_requests",
                "repositories",
                "resource",
                "secrets",
                "spaces",
                "system",
                "templates",
                "upload",
                "users",
                "webhooks",
            ):
                assert getattr(client, name)._client is client

    async def test_close_is_idempotent(self):
        client = Client(base_url=BASE_URL)
        await client.close()
        await client.close()
        assert client._http.is_closed


class TestHeaders:
    async def test_token_user_agent_and_accept(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.get("/user").respond(200, json={"uid": "admin"})
            async with Client("secret-token", base_url=BASE_URL, user_agent="ci-bot") as client:
                await client.get("user")
        headers = route.calls.last.request.headers
        assert headers["Authorization"] == "Bearer secret-token"
        assert headers["User-Agent"] == "ci-bot"
        assert headers["Accept"] == "application/json"

    async def test_no_authorization_header_without_token(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.get("/system/config").respond(200, json={})
            async with Client(base_url=BASE_URL) as client:
                await client.get("system/config")
        assert "Authorization" not in route.calls.last.request.headers


class TestFromSettings:
    async def test_reads_environment(self, clean_env):
        clean_env.setenv("GITNESS_TOKEN", "env-token")
        clean_env.setenv("GITNESS_BASE_URL", "http://gitness.test")
        clean_env.setenv("GITNESS_TIMEOUT_SECONDS", "3")
        async with Client.from_settings() as client:
            assert client.token == "env-token"
            assert client.api_url == "http://gitness.test/api/v1/"
            assert client._http.timeout == httpx.Timeout(3.0)

    async def test_explicit_settings(self, clean_env):
        settings = Settings(token="abc", base_url="http://other.test/", user_agent="custom")
        async with Client.from_settings(settings) as client:
            assert client.token == "abc"
            assert client.base_url == "http://other.test/"
            assert client._http.headers["User-Agent"] == "custom"

    def test_import_ignores_malformed_environment(self, tmp_path):
        env = {**os.environ, "GITNESS_TIMEOUT_SECONDS": "abc"}
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
        result = subprocess.run(
            [sys.executable, "-c", "import gitness"],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr

    async def test_malformed_environment_only_fails_from_settings(self, clean_env):
        clean_env.setenv("GITNESS_TIMEOUT_SECONDS", "abc")
        with pytest.raises(pydantic.ValidationError):
            Client.from_settings()
        async with Client(base_url=BASE_URL, timeout=1.0) as client:
            assert client._http.timeout == httpx.Timeout(1.0)


class TestRetries:
    async def test_retries_configure_transport(self):
        with patch.object(httpx, "AsyncHTTPTransport", wraps=httpx.AsyncHTTPTransport) as transport_cls:
            client = Client(base_url=BASE_URL, retries=3)
            await client.close()
        transport_cls.assert_called_once_with(retries=3)

    async def test_zero_retries_uses_default_transport(self):
        with patch.object(httpx, "AsyncHTTPTransport", wraps=httpx.AsyncHTTPTransport) as transport_cls:
            client = Client(base_url=BASE_URL, retries=0)
            await client.close()
        transport_cls.assert_not_called()

    def test_retries_with_custom_transport_raises(self):
        with pytest.raises(ValueError):
            Client(base_url=BASE_URL, retries=2, transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    async def test_custom_transport_is_used(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json={})

        async with Client(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
            await client.get("system/config")
        assert seen == ["/api/v1/system/config"]


class TestVerbs:
    async def test_get_with_params(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.get("/spaces").respond(200, json=[])
            async with Client(base_url=BASE_URL) as client:
                resp = await client.get("spaces", params={"page": 2, "recursive": True, "query": None})
        assert resp.status_code == 200
        params = route.calls.last.request.url.params
        assert params["page"] == "2"
        assert params["recursive"] == "true"
        assert "query" not in params

    async def test_naive_datetime_param_is_sent_as_utc(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.get("/admin/audit").respond(200, json=[])
            async with Client(base_url=BASE_URL) as client:
                await client.get("admin/audit", params={"from": datetime(2024, 1, 1, 8, 30)})
        assert route.calls.last.request.url.params["from"] == "2024-01-01T08:30:00+00:00"

    async def test_post_sends_model_without_none_fields(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.post("/user/tokens").respond(201, json={"identifier": "t1"})
            async with Client(base_url=BASE_URL) as client:
                await client.post("user/tokens", CreateTokenOptions(identifier="t1"))
        assert json.loads(route.calls.last.request.content) == {"identifier": "t1"}

    async def test_post_without_body_sends_no_content(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.post("/logout").respond(200)
            async with Client(base_url=BASE_URL) as client:
                await client.post("logout")
        assert route.calls.last.request.content == b""

    async def test_put_with_raw_content(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.put("/ci/cache/key").respond(200, json={})
            async with Client(base_url=BASE_URL) as client:
                await client.put("ci/cache/key", content=b"\x00\x01", content_type="application/octet-stream")
        request = route.calls.last.request
        assert request.content == b"\x00\x01"
        assert request.headers["Content-Type"] == "application/octet-stream"

    async def test_patch_with_dict_body(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.patch("/admin/users/bob/admin").respond(200, json={"uid": "bob", "admin": True})
            async with Client(base_url=BASE_URL) as client:
                await client.patch("admin/users/bob/admin", {"admin": True})
        assert json.loads(route.calls.last.request.content) == {"admin": True}

    async def test_delete_with_body(self):
        with respx.mock(base_url=API_URL) as mock:
            route = mock.delete("/repos/demo").respond(204)
            async with Client(base_url=BASE_URL) as client:
                resp = await client.delete("repos/demo", {"delete_id": "d1"})
        assert resp.status_code == 204
        assert json.loads(route.calls.last.request.content) == {"delete_id": "d1"}


class TestErrors:
    async def test_json_error_body(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/repos/missing").respond(404, json={"message": "Repository not found", "details": "no such repo"})
            async with Client(base_url=BASE_URL) as client:
                with pytest.raises(ErrorResponse) as exc_info:
                    await client.get("repos/missing")
        err = exc_info.value
        assert err.status_code == 404
        assert err.message == "Repository not found"
        assert err.details == "no such repo"
        assert err.method == "GET"
        assert err.response.status_code == 404
        assert str(err) == "GET http://gitness.test/api/v1/repos/missing: 404 Repository not found"

    async def test_non_json_error_body_uses_reason_phrase(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/user").respond(502, text="upstream down")
            async with Client(base_url=BASE_URL) as client:
                with pytest.raises(ErrorResponse) as exc_info:
                    await client.get("user")
        assert exc_info.value.message == "HTTP 502: Bad Gateway"
        assert exc_info.value.details is None

    async def test_json_error_without_message(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.post("/login").respond(401, json={"error": "nope"})
            async with Client(base_url=BASE_URL) as client:
                with pytest.raises(ErrorResponse) as exc_info:
                    await client.post("login", {"login_identifier": "x"})
        assert exc_info.value.message == "HTTP 401: Unauthorized"

    async def test_error_response_is_a_client_error(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.delete("/secrets/s1").respond(403, json={"message": "Forbidden"})
            async with Client(base_url=BASE_URL) as client:
                with pytest.raises(GitnessClientError):
                    await client.delete("secrets/s1")

    async def test_error_is_logged(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/user").respond(500, json={"message": "boom"})
            async with Client(base_url=BASE_URL) as client:
                with capture_logs() as logs, pytest.raises(ErrorResponse):
                    await client.get("user")
        events = [entry for entry in logs if entry["event"] == "gitness_api_error"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"
        assert events[0]["status_code"] == 500
        assert events[0]["message"] == "boom"

    async def test_timeout_propagates(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/user").mock(side_effect=httpx.ReadTimeout("timed out"))
            async with Client(base_url=BASE_URL, timeout=0.1) as client:
                with pytest.raises(httpx.ReadTimeout):
                    await client.get("user")

    async def test_connect_error_propagates(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/user").mock(side_effect=httpx.ConnectError("refused"))
            async with Client(base_url=BASE_URL) as client:
                with pytest.raises(httpx.ConnectError):
                    await client.get("user")


class TestDecoding:
    async def test_parse_model(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/user").respond(200, json={"uid": "admin", "admin": True, "unknown_field": 1})
            async with Client(base_url=BASE_URL) as client:
                user = client.parse(await client.get("user"), User)
        assert isinstance(user, User)
        assert user.uid == "admin"
        assert user.admin is True

    async def test_parse_non_json_body_raises(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/user").respond(200, text="<html>")
            async with Client(base_url=BASE_URL) as client:
                resp = await client.get("user")
                with pytest.raises(GitnessClientError):
                    client.parse(resp, User)

    async def test_parse_schema_mismatch_raises(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/repos/demo").respond(200, json={"id": "not-a-number"})
            async with Client(base_url=BASE_URL) as client:
                resp = await client.get("repos/demo")
                with pytest.raises(GitnessClientError) as exc_info:
                    client.parse(resp, Repository)
        assert exc_info.value.status_code == 200

    async def test_parse_list_null_is_empty(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/plugins").respond(200, content=b"null")
            async with Client(base_url=BASE_URL) as client:
                resp = await client.get("plugins")
                assert client.parse_list(resp, User) == []

    async def test_parse_list_rejects_object(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/plugins").respond(200, json={"items": []})
            async with Client(base_url=BASE_URL) as client:
                resp = await client.get("plugins")
                with pytest.raises(GitnessClientError):
                    client.parse_list(resp, User)


class TestDebugLogging:
    async def test_debug_logs_request_and_response(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/spaces").respond(200, json=[], headers={"x-page": "1", "x-total": "0"})
            async with Client(base_url=BASE_URL, debug=True) as client:
                with capture_logs() as logs:
                    await client.get("spaces")
        events = [entry["event"] for entry in logs]
        assert events == ["gitness_request", "gitness_response"]
        assert logs[1]["status_code"] == 200
        assert logs[1]["page"] == "1"

    async def test_no_logs_without_debug(self):
        with respx.mock(base_url=API_URL) as mock:
            mock.get("/spaces").respond(200, json=[])
            async with Client(base_url=BASE_URL) as client:
                with capture_logs() as logs:
                    await client.get("spaces")
        assert logs == []
