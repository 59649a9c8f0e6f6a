"""Typed client for the releases endpoints of a forge REST API."""

from forge_client.clients.http import HttpGithubClient, HttpxTransport
from forge_client.context import Context, GithubUrl, UserAgent
from forge_client.errors import ClientError, ContextError, ErrorKind
from forge_client.links import Cursors, get_cursors
from forge_client.models import (
    JobToken,
    Page,
    Pagination,
    PrivateToken,
    ProjectSlug,
    Release,
    ReleaseAsset,
    RepositoryId,
)
from forge_client.pagination import iter_pages, iter_releases
from forge_client.protocols import ReleaseClient, Transport
from forge_client.queries import GetReleaseListPageQuery, GetReleaseListQuery
from forge_client.settings import ClientSettings

__all__ = [
    "ClientError",
    "ClientSettings",
    "Context",
    "ContextError",
    "Cursors",
    "ErrorKind",
    "GetReleaseListPageQuery",
    "GetReleaseListQuery",
    "GithubUrl",
    "HttpGithubClient",
    "HttpxTransport",
    "JobToken",
    "Page",
    "Pagination",
    "PrivateToken",
    "ProjectSlug",
    "Release",
    "ReleaseAsset",
    "ReleaseClient",
    "RepositoryId",
    "Transport",
    "UserAgent",
    "get_cursors",
    "iter_pages",
    "iter_releases",
]
