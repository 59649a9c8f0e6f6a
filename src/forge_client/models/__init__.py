"""Data types exchanged with the forge API."""

from forge_client.models.auth import GithubAuth, JobToken, PrivateToken
from forge_client.models.page import Page, Pagination
from forge_client.models.release import Release, ReleaseAsset
from forge_client.models.repository import (
    ProjectSlug,
    RepositoryId,
    RepositoryRef,
    parse_repository_ref,
)

__all__ = [
    # Credentials
    "GithubAuth",
    "JobToken",
    "PrivateToken",
    # Repositories
    "ProjectSlug",
    "RepositoryId",
    "RepositoryRef",
    "parse_repository_ref",
    # Pagination
    "Page",
    "Pagination",
    # Payloads
    "Release",
    "ReleaseAsset",
]
