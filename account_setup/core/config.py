from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    ACTION_CATALOG_PATH: str | None = None
    SESSION_LIMIT: int = 1000


settings = Settings()
