from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

WindCode = Literal["E", "S", "W", "N"]


class Settings(BaseSettings):
    app_title: str = "Riichi Mahjong Hand Score API"
    default_seat_wind: WindCode = "E"
    default_round_wind: WindCode = "E"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
