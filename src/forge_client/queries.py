"""Query types for the release endpoints.

A query describes one API operation: its context, optional credentials and
operation parameters. Queries are transport-agnostic; a service turns them
into HTTP requests.
"""

from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from forge_client.context import Capability, Context, GithubUrl, UserAgent
from forge_client.models.auth import GithubAuth
from forge_client.models.page import Pagination
from forge_client.models.repository import RepositoryRef


class GetReleaseListQuery(BaseModel):
    """List the releases of a repository, starting at the first page.

    <https://docs.github.com/en/rest/releases/releases#list-releases>
    """

    model_config = ConfigDict(validate_assignment=True)

    required_capabilities: ClassVar[tuple[type[Capability], ...]] = (GithubUrl, UserAgent)

    context: Context = Field(default_factory=Context.new)
    auth: GithubAuth | None = None
    pagination: Pagination | None = None
    repository: RepositoryRef

    @classmethod
    def new(cls, repository: RepositoryRef) -> Self:
        return cls(repository=repository)

    def set_context(self, context: Context) -> Self:
        return self.model_copy(update={"context": context})


class GetReleaseListPageQuery(BaseModel):
    """Fetch one page of a release listing from a cursor.

    The cursor is the fully qualified URL of the page, so only a
    `UserAgent` is needed in the context.
    """

    model_config = ConfigDict(validate_assignment=True)

    required_capabilities: ClassVar[tuple[type[Capability], ...]] = (UserAgent,)

    context: Context = Field(default_factory=Context.new)
    auth: GithubAuth | None = None
    cursor: str

    @classmethod
    def new(cls, cursor: str) -> Self:
        return cls(cursor=cursor)

    @classmethod
    def follow(cls, cursor: str, query: "GetReleaseListQuery | GetReleaseListPageQuery") -> Self:
        """Build a page query that reuses the context and credentials of `query`."""
        return cls(context=query.context, auth=query.auth, cursor=cursor)

    def set_context(self, context: Context) -> Self:
        return self.model_copy(update={"context": context})


type ReleaseListQuery = GetReleaseListQuery | GetReleaseListPageQuery
