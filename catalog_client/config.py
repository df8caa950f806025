from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    graphql_endpoint: str = "http://localhost:8000/graphql"
    request_timeout: float = 30.0
    log_level: str = "INFO"
    debug: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
