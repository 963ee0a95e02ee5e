from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    MOVIES_DATABASE_URL: str = "sqlite+aiosqlite:///db/movies.db"
    RATINGS_DATABASE_URL: str = "sqlite+aiosqlite:///db/ratings.db"
    MOVIES_DATABASE_ECHO: bool = False
    RATINGS_DATABASE_ECHO: bool = False


class PaginationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="PAGINATION_", extra="ignore"
    )

    default_limit: int = 50
    max_limit: int = 50
