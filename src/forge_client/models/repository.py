"""Repository references."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class RepositoryId(BaseModel, frozen=True):
    """Repository addressed by its numeric identifier."""

    kind: Literal["id"] = "id"
    id: int

    def path_segments(self) -> tuple[str, ...]:
        return ("repositories", str(self.id))


class ProjectSlug(BaseModel, frozen=True):
    """Repository addressed by its owner and name."""

    kind: Literal["slug"] = "slug"
    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    def path_segments(self) -> tuple[str, ...]:
        return ("repos", self.owner, self.name)

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


type RepositoryRef = Annotated[RepositoryId | ProjectSlug, Field(discriminator="kind")]


def parse_repository_ref(text: str) -> RepositoryId | ProjectSlug:
    """Parse `"42"` into a `RepositoryId` and `"owner/name"` into a `ProjectSlug`."""
    text = text.strip()
    if text.isdigit():
        return RepositoryId(id=int(text))
    owner, sep, name = text.partition("/")
    if not sep or not owner or not name or "/" in name:
        msg = f"expected a numeric id or `owner/name`, got {text!r}"
        raise ValueError(msg)
    return ProjectSlug(owner=owner, name=name)
