"""Authentication credentials.

Each credential variant is sent as its own request header. Token values
are opaque and never inspected.
"""

from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, Field


class PrivateToken(BaseModel, frozen=True):
    """Personal access token, sent as `PRIVATE-TOKEN`."""

    header_name: ClassVar[str] = "PRIVATE-TOKEN"

    kind: Literal["private_token"] = "private_token"
    token: str = Field(repr=False)

    def http_header(self) -> tuple[str, str]:
        return (self.header_name, self.token)


class JobToken(BaseModel, frozen=True):
    """CI job token, sent as `JOB-TOKEN`."""

    header_name: ClassVar[str] = "JOB-TOKEN"

    kind: Literal["job_token"] = "job_token"
    token: str = Field(repr=False)

    def http_header(self) -> tuple[str, str]:
        return (self.header_name, self.token)


type GithubAuth = Annotated[PrivateToken | JobToken, Field(discriminator="kind")]
