from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PORT: int = 3000
    DOWNLOAD_DIR: str = "/tmp/notebooklm"
    API_SECRET: str = "change-me"
    GOOGLE_EMAIL: str | None = None
    GOOGLE_PASSWORD: str | None = None
    LOG_LEVEL: str = "info"
    HEADLESS: bool = True
    POLL_INTERVAL_SECONDS: PositiveInt = 15
    POLL_DEADLINE_SECONDS: PositiveInt = 600


settings = Settings()
