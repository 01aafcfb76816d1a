from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://gitness.com/"
DEFAULT_USER_AGENT = "python-gitness"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GITNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    retry_count: int = 0
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT
