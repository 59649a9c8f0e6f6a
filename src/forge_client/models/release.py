"""Release records returned by the releases endpoints.

See <https://docs.github.com/en/rest/releases/releases#list-releases>.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ReleaseAsset(BaseModel):
    """A file attached to a release."""

    url: str
    browser_download_url: str
    id: int
    node_id: str
    name: str
    label: str | None = None
    state: str
    """Upload state (`uploaded`, `open`)."""
    content_type: str
    size: int
    download_count: int
    created_at: datetime
    updated_at: datetime


class Release(BaseModel):
    """A published or draft release of a repository."""

    url: str
    html_url: str
    assets_url: str
    upload_url: str
    tarball_url: str | None = None
    zipball_url: str | None = None
    id: int
    node_id: str
    tag_name: str
    target_commitish: str
    name: str | None = None
    body: str | None = None
    draft: bool
    prerelease: bool
    created_at: datetime
    published_at: datetime | None = None
    assets: list[ReleaseAsset] = Field(default_factory=list)
