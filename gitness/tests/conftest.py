import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any ``configure_logging`` call so log capture sees every level."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no GITNESS_* variables and no stray .env file."""
    for name in ("TOKEN", "BASE_URL", "TIMEOUT_SECONDS", "RETRY_COUNT", "DEBUG", "USER_AGENT"):
        monkeypatch.delenv(f"GITNESS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
