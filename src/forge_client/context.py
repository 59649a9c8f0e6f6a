"""Capability context for client queries.

A context is a small immutable record of request-wide settings. Each
setting is a capability: a typed value such as `GithubUrl` or `UserAgent`
that a query dispatch can demand. Contexts are built incrementally, each
`set_*` call returning a new context with one more capability bound.

Dispatch checks its requirements with `Context.require` before the
transport is touched, so a missing capability never results in a request.
"""

from typing import ClassVar, Self, TypeVar

import httpx
from pydantic import BaseModel, field_validator

from forge_client.errors import ContextError


class Capability(BaseModel, frozen=True):
    """Base class for values that can be bound to a context."""

    slot: ClassVar[str]
    """Name of the context field holding this capability."""


class GithubUrl(Capability, frozen=True):
    """Base URL of the forge REST API (for example `https://api.github.com/`)."""

    slot: ClassVar[str] = "github_url"

    url: str

    @field_validator("url")
    @classmethod
    def _check_absolute(cls, value: str) -> str:
        msg = f"expected an absolute http(s) URL, got {value!r}"
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(msg) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(msg)
        return value


class UserAgent(Capability, frozen=True):
    """Value of the `User-Agent` request header."""

    slot: ClassVar[str] = "user_agent"

    value: str


C = TypeVar("C", bound=Capability)


class Context(BaseModel, frozen=True):
    """Request-wide settings shared by queries."""

    github_url: GithubUrl | None = None
    user_agent: UserAgent | None = None

    @classmethod
    def new(cls) -> Self:
        """Create a context with no capability bound."""
        return cls()

    def set_github_url(self, github_url: GithubUrl | str) -> Self:
        """Return a copy of this context with the API base URL bound."""
        if isinstance(github_url, str):
            github_url = GithubUrl(url=github_url)
        return self.model_copy(update={"github_url": github_url})

    def set_user_agent(self, user_agent: UserAgent | str) -> Self:
        """Return a copy of this context with the `User-Agent` value bound."""
        if isinstance(user_agent, str):
            user_agent = UserAgent(value=user_agent)
        return self.model_copy(update={"user_agent": user_agent})

    def has(self, capability: type[Capability]) -> bool:
        """Whether `capability` is bound on this context."""
        return getattr(self, capability.slot) is not None

    def get_ref(self, capability: type[C]) -> C:
        """Return the bound value for `capability`.

        Raises:
            ContextError: If the capability was never set on this context.
        """
        value = getattr(self, capability.slot)
        if value is None:
            raise ContextError(capability.__name__)
        return value

    def require(self, *capabilities: type[Capability]) -> None:
        """Check that every listed capability is bound."""
        for capability in capabilities:
            if not self.has(capability):
                raise ContextError(capability.__name__)
