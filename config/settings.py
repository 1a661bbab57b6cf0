from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep all endpoints, file locations and tuning knobs centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    memory_file: str = os.getenv("MEMORY_FILE", "teach.txt")
    static_dir: Optional[str] = os.getenv("STATIC_DIR", "public")

    image_api_url: str = os.getenv(
        "IMAGE_API_URL", "https://pinterest-dev.onrender.com/pinterest"
    )
    text_api_url: str = os.getenv(
        "TEXT_API_URL", "https://llama3-cv-shassan.onrender.com/llama3"
    )
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "30"))

    match_threshold: float = float(os.getenv("MATCH_THRESHOLD", "0.4"))
    max_images: int = int(os.getenv("MAX_IMAGES", "10"))
    # 0 keeps every entry for the life of the process
    history_limit: int = int(os.getenv("HISTORY_LIMIT", "0"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
