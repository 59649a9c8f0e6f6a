"""Core protocols for transports and release clients."""

from typing import Protocol, runtime_checkable

import httpx

from forge_client.models.page import Page
from forge_client.models.release import Release
from forge_client.queries import GetReleaseListPageQuery, GetReleaseListQuery


@runtime_checkable
class Transport(Protocol):
    """Protocol for the component that carries requests to the network."""

    async def poll_ready(self) -> None:
        """Return once the transport can accept a request.

        Raises if the transport will not become ready.
        """
        ...

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return the response.

        The response body may still be unread; callers read it themselves.
        """
        ...

    async def aclose(self) -> None:
        """Release connections held by the transport."""
        ...


@runtime_checkable
class ReleaseClient(Protocol):
    """Protocol for anything that can list releases.

    Calling code depends on this instead of a concrete transport.
    """

    async def get_release_list(self, query: GetReleaseListQuery) -> Page[Release]:
        """Fetch the first page of releases of a repository."""
        ...

    async def get_release_list_page(self, query: GetReleaseListPageQuery) -> Page[Release]:
        """Fetch the page of releases at a cursor."""
        ...
