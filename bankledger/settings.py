from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str
    reset_on_start: bool = False
    log_level: str = "WARNING"


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value and value.strip():
        return value.strip()
    return None


def get_data_dir() -> Path:
    # 1) env var
    env = _env("BANKLEDGER_DATA_DIR")
    if env:
        p = Path(env).expanduser()
    else:
        # 2) default: <repo>/data
        # bankledger/settings.py -> bankledger/ -> <repo>/
        p = Path(__file__).resolve().parents[1] / "data"

    p.mkdir(parents=True, exist_ok=True)
    return p


def get_settings() -> Settings:
    data_dir = get_data_dir()

    database_url = _env("BANKLEDGER_DATABASE_URL")
    if database_url is None:
        database_url = f"sqlite:///{(data_dir / 'bankledger.db').as_posix()}"

    reset = (_env("BANKLEDGER_RESET_DB") or "").lower() in _TRUTHY
    log_level = (_env("BANKLEDGER_LOG_LEVEL") or "WARNING").upper()

    return Settings(
        data_dir=data_dir,
        database_url=database_url,
        reset_on_start=reset,
        log_level=log_level,
    )
