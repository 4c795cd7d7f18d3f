from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "ComboLens"
    debug: bool = False
    log_level: str = "INFO"

    max_combos: int = 1500
    noise_threshold: float = 0.5

    min_combo_length: int = 2
    max_combo_length: int = 4

    default_rule_set: Optional[str] = None


settings = Settings()
