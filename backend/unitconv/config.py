from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Unit Converter"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 0  # 0 = pick a free port
    max_value_length: int = 64  # characters

    class Config:
        env_prefix = "CONV_"


settings = Settings()
