"""Client configuration.

Settings come from `FORGE_CLIENT_*` environment variables or a `.env`
file and are turned into the context and credentials that queries carry.
"""

from typing import Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forge_client.context import Context
from forge_client.models.auth import JobToken, PrivateToken


class ClientSettings(BaseSettings):
    """Central client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FORGE_CLIENT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    github_url: str = Field(
        default="https://api.github.com/",
        min_length=8,
        description="Base URL of the REST API.",
    )
    user_agent: str = Field(
        default="forge-client/0.1.0",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    private_token: SecretStr | None = Field(
        default=None,
        description="Personal access token, sent as PRIVATE-TOKEN.",
    )
    job_token: SecretStr | None = Field(
        default=None,
        description="CI job token, sent as JOB-TOKEN.",
    )
    log_level: str = Field(default="WARNING", description="Logging level.")
    log_json: bool = Field(default=False, description="Emit JSON log lines.")

    @model_validator(mode="after")
    def _single_credential(self) -> Self:
        if self.private_token is not None and self.job_token is not None:
            msg = "set at most one of private_token and job_token"
            raise ValueError(msg)
        return self

    def context(self) -> Context:
        """Context bound with the configured base URL and user agent."""
        return Context.new().set_github_url(self.github_url).set_user_agent(self.user_agent)

    def auth(self) -> PrivateToken | JobToken | None:
        if self.private_token is not None:
            return PrivateToken(token=self.private_token.get_secret_value())
        if self.job_token is not None:
            return JobToken(token=self.job_token.get_secret_value())
        return None
