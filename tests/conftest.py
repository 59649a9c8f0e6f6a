"""Shared fixtures for forge_client tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from forge_client.clients.http import HttpGithubClient, HttpxTransport
from forge_client.context import Context

API = "https://api.github.com/"


def release_json(release_id: int, tag: str | None = None) -> dict[str, Any]:
    """Build a release record as the API returns it."""
    tag = tag or f"v{release_id}.0.0"
    base = f"https://api.github.com/repos/unicode-org/icu/releases/{release_id}"
    return {
        "url": base,
        "html_url": f"https://github.com/unicode-org/icu/releases/tag/{tag}",
        "assets_url": f"{base}/assets",
        "upload_url": f"https://uploads.github.com/repos/unicode-org/icu/releases/{release_id}/assets{{?name,label}}",
        "tarball_url": f"https://api.github.com/repos/unicode-org/icu/tarball/{tag}",
        "zipball_url": f"https://api.github.com/repos/unicode-org/icu/zipball/{tag}",
        "id": release_id,
        "node_id": f"RE_{release_id}",
        "tag_name": tag,
        "target_commitish": "main",
        "name": f"ICU {tag}",
        "body": None,
        "draft": False,
        "prerelease": False,
        "created_at": "2024-04-16T18:04:42Z",
        "published_at": "2024-04-17T00:20:45Z",
        "author": {"login": "someone", "id": 1},
        "assets": [
            {
                "url": f"{base}/assets/{release_id}1",
                "browser_download_url": f"https://github.com/unicode-org/icu/releases/download/{tag}/src.tgz",
                "id": release_id * 10 + 1,
                "node_id": f"RA_{release_id}",
                "name": "src.tgz",
                "label": None,
                "state": "uploaded",
                "content_type": "application/gzip",
                "size": 26_000_000,
                "download_count": 42,
                "created_at": "2024-04-16T18:05:00Z",
                "updated_at": "2024-04-16T18:05:10Z",
            },
        ],
    }


class ScriptedTransport:
    """In-memory transport returning scripted responses in order."""

    def __init__(
        self,
        responses: list[httpx.Response | Exception] | None = None,
        *,
        ready_error: Exception | None = None,
    ) -> None:
        self.responses = list(responses or [])
        self.ready_error = ready_error
        self.requests: list[httpx.Request] = []
        self.closed = False

    async def poll_ready(self) -> None:
        if self.ready_error is not None:
            raise self.ready_error

    async def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def context() -> Context:
    return Context.new().set_github_url(API).set_user_agent("forge-client-tests/1.0")


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpGithubClient]:
    """Build a client whose HTTP traffic is answered by `handler`."""

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> HttpGithubClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return HttpGithubClient(HttpxTransport(http))

    return build
