from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Llumos"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./llumos.db"

    openai_api_key: Optional[str] = None
    openai_api_base: str = "https://api.openai.com/v1"
    ner_model: str = "gpt-4o-mini"

    enable_ner_fallback: bool = True
    ner_timeout_seconds: float = 15.0
    ner_max_candidates: int = 15
    ner_text_limit: int = 2000

    max_competitors: int = 20

    history_window_days: int = 90
    history_min_mentions: int = 3
    history_row_limit: int = 200
    history_top_n: int = 50

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False


settings = Settings()
