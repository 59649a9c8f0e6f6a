"""Sequential walks over paginated release listings."""

from collections.abc import AsyncIterator

import structlog

from forge_client.models.page import Page
from forge_client.models.release import Release
from forge_client.protocols import ReleaseClient
from forge_client.queries import GetReleaseListPageQuery, GetReleaseListQuery

logger = structlog.get_logger(__name__)


async def iter_pages(
    client: ReleaseClient,
    query: GetReleaseListQuery,
    *,
    max_pages: int | None = None,
) -> AsyncIterator[Page[Release]]:
    """Yield the first page of a listing, then every page reached through `next`.

    Each request is issued only after the previous page has been received.
    Follow-up queries reuse the context and credentials of `query`. Errors
    propagate to the caller; pages already yielded remain valid.
    """
    if max_pages is not None and max_pages < 1:
        return

    page = await client.get_release_list(query)
    count = 1
    yield page

    while page.next is not None:
        if max_pages is not None and count >= max_pages:
            logger.debug("release_list.max_pages", max_pages=max_pages, next=page.next)
            return
        page_query = GetReleaseListPageQuery.follow(page.next, query)
        page = await client.get_release_list_page(page_query)
        count += 1
        yield page


async def iter_releases(
    client: ReleaseClient,
    query: GetReleaseListQuery,
    *,
    max_pages: int | None = None,
) -> AsyncIterator[tuple[Release, str | None]]:
    """Yield (release, cursor) tuples across all pages.

    The cursor is the `next` cursor of the page the release came from, so a
    stream interrupted after a page can be resumed with a page query.
    """
    async for page in iter_pages(client, query, max_pages=max_pages):
        for release in page.items:
            yield (release, page.next)
