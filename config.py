from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from appdirs import user_data_dir, user_log_dir
from dotenv import load_dotenv

APP_NAME = "repair_shop"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@dataclass
class Settings:
    data_dir: str = field(default_factory=lambda: user_data_dir(APP_NAME))
    database_path: str = ""
    log_dir: str = field(default_factory=lambda: user_log_dir(APP_NAME))
    log_level: str = "INFO"
    detailed_logging: bool = False
    warranty_days: int = 30
    currency_symbol: str = "₹"
    twilio_account_sid: str | None = None
    twilio_auth_token: str | None = None
    twilio_from_number: str | None = None
    secure_store_service: str = APP_NAME

    def __post_init__(self) -> None:
        if not self.database_path:
            self.database_path = str(Path(self.data_dir) / "app_data.db")

    @property
    def images_dir(self) -> Path:
        """Каталог, куда копируются фотографии ремонтов."""
        return Path(self.data_dir).expanduser() / "images"


@lru_cache()
def get_settings() -> Settings:
    dotenv_path = Path(__file__).resolve().parent / ".env"
    load_dotenv(dotenv_path)

    data_dir = os.getenv("DATA_DIR") or user_data_dir(APP_NAME)
    return Settings(
        data_dir=data_dir,
        database_path=os.getenv("DATABASE_PATH", ""),
        log_dir=os.getenv("LOG_DIR") or user_log_dir(APP_NAME),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        detailed_logging=os.getenv("DETAILED_LOGGING", "0").lower() in {"1", "true", "yes", "on"},
        warranty_days=_int_env("WARRANTY_DAYS", 30),
        currency_symbol=os.getenv("CURRENCY_SYMBOL", "₹"),
        twilio_account_sid=os.getenv("TWILIO_ACCOUNT_SID"),
        twilio_auth_token=os.getenv("TWILIO_AUTH_TOKEN"),
        twilio_from_number=os.getenv("TWILIO_FROM_NUMBER"),
        secure_store_service=os.getenv("SECURE_STORE_SERVICE", APP_NAME),
    )
