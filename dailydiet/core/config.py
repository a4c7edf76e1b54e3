from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./dailydiet.db"

    # sessionId cookie, 7 days on the client side; no server-side expiry
    session_cookie_name: str = "sessionId"
    session_max_age_days: int = 7
    cookie_secure: bool = False

    # dev/test convenience; production schema is managed by alembic
    create_tables_on_startup: bool = True

    host: str = "0.0.0.0"
    port: int = 3333
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DAILY_DIET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_days * 24 * 60 * 60


def get_settings() -> Settings:
    return Settings()
