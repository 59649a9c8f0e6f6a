"""Release client over an HTTP transport, using httpx."""

from collections.abc import Iterable
from types import TracebackType
from typing import ClassVar, Self
from urllib.parse import quote

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from forge_client.context import GithubUrl, UserAgent
from forge_client.errors import ClientError, ErrorKind
from forge_client.links import get_cursors
from forge_client.models.page import Page
from forge_client.models.release import Release
from forge_client.protocols import Transport
from forge_client.queries import GetReleaseListPageQuery, GetReleaseListQuery, ReleaseListQuery
from forge_client.settings import ClientSettings

logger = structlog.get_logger(__name__)

RELEASE_MEDIA_TYPE = "application/vnd.github+json"

_RELEASES = TypeAdapter(list[Release])

_STATUS_KINDS: dict[int, ErrorKind] = {
    401: ErrorKind.FORBIDDEN,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
}


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` configured from settings.

    Redirects are not followed, so `PRIVATE-TOKEN` and `JOB-TOKEN` only
    ever reach the host a query names. A 3xx surfaces as a `ClientError`
    of kind `OTHER`.
    """
    settings = settings or ClientSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        transport=transport,
    )


def url_join(base: str, segments: Iterable[str]) -> httpx.URL:
    """Append percent-encoded path segments to the path of `base`."""
    url = httpx.URL(base)
    path = "/".join([url.path.rstrip("/"), *(quote(s, safe="") for s in segments)])
    return url.copy_with(path=path)


class HttpxTransport:
    """Transport backed by an `httpx.AsyncClient`."""

    __slots__: ClassVar[tuple[str]] = ("_client",)

    _client: httpx.AsyncClient

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def poll_ready(self) -> None:
        if self._client.is_closed:
            msg = "HTTP client is closed"
            raise RuntimeError(msg)

    async def send(self, request: httpx.Request) -> httpx.Response:
        return await self._client.send(request, stream=True)

    async def aclose(self) -> None:
        await self._client.aclose()


class HttpGithubClient:
    """Service turning release queries into HTTP requests and responses into pages."""

    __slots__: ClassVar[tuple[str]] = ("_transport",)

    _transport: Transport

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @classmethod
    async def connect(cls, settings: ClientSettings | None = None) -> Self:
        """Create a client with its own HTTP connection pool."""
        return cls(HttpxTransport(build_async_client(settings)))

    async def disconnect(self) -> None:
        """Release the underlying transport."""
        await self._transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

    async def get_release_list(self, query: GetReleaseListQuery) -> Page[Release]:
        """Fetch the first page of releases of a repository."""
        return await self.call(query)

    async def get_release_list_page(self, query: GetReleaseListPageQuery) -> Page[Release]:
        """Fetch the page of releases at a cursor."""
        return await self.call(query)

    async def call(self, query: ReleaseListQuery) -> Page[Release]:
        """Run a query and return the page it designates.

        Raises:
            ContextError: If the query context lacks a required capability.
                Nothing is sent in that case.
            ClientError: For every failure past that point.
        """
        query.context.require(*query.required_capabilities)

        try:
            await self._transport.poll_ready()
        except Exception as e:
            msg = f"Failed to poll ready status: {e}"
            raise ClientError(msg, kind=ErrorKind.POLL_READY, source=e) from e

        try:
            request = self.build_request(query)
        except (httpx.InvalidURL, ValueError) as e:
            msg = f"Failed to build request: {e}"
            raise ClientError(msg, kind=ErrorKind.OTHER, source=e) from e
        return await self._dispatch(request)

    def build_request(self, query: ReleaseListQuery) -> httpx.Request:
        """Build the wire request for a query."""
        headers: dict[str, str] = {}
        url: httpx.URL | str
        match query:
            case GetReleaseListQuery():
                base = query.context.get_ref(GithubUrl).url
                url = url_join(base, (*query.repository.path_segments(), "releases"))
                if query.pagination is not None and query.pagination.per_page is not None:
                    url = url.copy_add_param("per_page", str(query.pagination.per_page))
                headers["Content-Type"] = RELEASE_MEDIA_TYPE
            case GetReleaseListPageQuery():
                # Cursors are fully qualified URLs. Parsing lower-cases the
                # scheme and host and drops a default port; path and query
                # are sent unchanged.
                url = query.cursor
            case _:
                msg = f"Unsupported query type: {type(query).__name__}"
                raise TypeError(msg)

        headers["User-Agent"] = query.context.get_ref(UserAgent).value
        if query.auth is not None:
            name, value = query.auth.http_header()
            headers[name] = value
        return httpx.Request("GET", url, headers=headers)

    async def _dispatch(self, request: httpx.Request) -> Page[Release]:
        log = logger.bind(method=request.method, url=str(request.url))
        log.debug("release_list.request")

        try:
            response = await self._transport.send(request)
        except Exception as e:
            msg = f"Failed to send request: {e}"
            raise ClientError(msg, kind=ErrorKind.SEND, source=e) from e

        cursors = get_cursors(response.headers)

        try:
            body = await response.aread()
        except Exception as e:
            msg = f"Failed to receive response: {e}"
            raise ClientError(msg, kind=ErrorKind.RECEIVE, source=e, status=response.status_code) from e
        finally:
            await response.aclose()

        status = response.status_code
        if not response.is_success:
            kind = _STATUS_KINDS.get(status, ErrorKind.OTHER)
            log.warning("release_list.status", status=status, kind=str(kind))
            msg = f"Unexpected response status {status}"
            raise ClientError(msg, kind=kind, body=body, status=status)

        try:
            items = _RELEASES.validate_json(body)
        except ValidationError as e:
            log.warning("release_list.decode_failed", status=status, errors=e.error_count())
            msg = f"Failed to parse response: {e}"
            raise ClientError(
                msg, kind=ErrorKind.RESPONSE_FORMAT, source=e, body=body, status=status
            ) from e

        log.debug("release_list.page", status=status, items=len(items), has_next=cursors.next is not None)
        return Page[Release](
            items=items,
            first=cursors.first,
            next=cursors.next,
            last=cursors.last,
        )


Client = HttpGithubClient
