"""Error types for client operations."""

from enum import StrEnum
from typing import final


class ErrorKind(StrEnum):
    """Classification of client errors."""

    POLL_READY = "poll_ready"
    SEND = "send"
    RECEIVE = "receive"
    RESPONSE_FORMAT = "response_format"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    OTHER = "other"


@final
class ClientError(Exception):
    """Error raised by a service for any failed query."""

    __slots__ = ("body", "kind", "message", "source", "status")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.OTHER,
        source: BaseException | None = None,
        body: bytes | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source
        self.body = body
        self.status = status

    def __repr__(self) -> str:
        return f"ClientError({self.message!r}, kind={self.kind!r})"


@final
class ContextError(LookupError):
    """A query context lacks a capability that its dispatch requires.

    Raised before anything is sent to the transport.
    """

    __slots__ = ("capability",)

    def __init__(self, capability: str) -> None:
        super().__init__(f"context has no `{capability}` capability")
        self.capability = capability
