"""Tests for environment-driven settings."""

import pydantic
import pytest

from forge_client.context import GithubUrl, UserAgent
from forge_client.models import JobToken, PrivateToken
from forge_client.settings import ClientSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_URL", "USER_AGENT", "PRIVATE_TOKEN", "JOB_TOKEN", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(f"FORGE_CLIENT_{name}", raising=False)


def test_defaults() -> None:
    settings = ClientSettings()
    context = settings.context()
    assert context.get_ref(GithubUrl).url == "https://api.github.com/"
    assert context.get_ref(UserAgent).value.startswith("forge-client/")
    assert settings.auth() is None


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORGE_CLIENT_GITHUB_URL", "https://forge.example/api/v3/")
    monkeypatch.setenv("FORGE_CLIENT_USER_AGENT", "ci-bot/2")
    monkeypatch.setenv("FORGE_CLIENT_PRIVATE_TOKEN", "secret")

    settings = ClientSettings()

    assert settings.context().get_ref(GithubUrl).url == "https://forge.example/api/v3/"
    assert settings.context().get_ref(UserAgent).value == "ci-bot/2"
    assert settings.auth() == PrivateToken(token="secret")
    assert "secret" not in repr(settings)


def test_job_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORGE_CLIENT_JOB_TOKEN", "job")
    assert ClientSettings().auth() == JobToken(token="job")


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("FORGE_CLIENT_USER_AGENT=from-dotenv/1\n", encoding="utf-8")
    assert ClientSettings().user_agent == "from-dotenv/1"


def test_both_tokens_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORGE_CLIENT_PRIVATE_TOKEN", "a")
    monkeypatch.setenv("FORGE_CLIENT_JOB_TOKEN", "b")
    with pytest.raises(pydantic.ValidationError):
        ClientSettings()


def test_timeout_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORGE_CLIENT_HTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(pydantic.ValidationError):
        ClientSettings()
