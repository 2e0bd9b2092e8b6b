from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

BASE_DIR = Path(__file__).parent


def _load_dotenv() -> None:
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [repo_root / ".env", Path.cwd() / ".env"]
    for env_path in candidates:
        if not env_path.exists():
            continue
        try:
            for line in env_path.read_text().splitlines():
                stripped = line.strip()
                if not stripped or stripped.startswith("#") or "=" not in stripped:
                    continue
                key, value = stripped.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key and key not in os.environ:
                    os.environ[key] = value
        except (OSError, UnicodeDecodeError):
            continue
        break


_load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in os.getenv(name, default).split(",") if item.strip())


@dataclass(frozen=True)
class ServerConfig:
    host: str = os.getenv("MRZ_HOST", "127.0.0.1")
    port: int = int(os.getenv("MRZ_PORT", "8000"))
    cors_origins: Tuple[str, ...] = _env_list("MRZ_CORS_ORIGINS", "*")


@dataclass(frozen=True)
class DecodeConfig:
    # Per-field check digit booleans in /decode responses.
    expose_checks: bool = _env_flag("MRZ_EXPOSE_CHECKS", "true")


@dataclass(frozen=True)
class AppConfig:
    log_level: str = os.getenv("MRZ_LOG_LEVEL", "INFO").upper()
    server: ServerConfig = field(default_factory=ServerConfig)
    decode: DecodeConfig = field(default_factory=DecodeConfig)


CONFIG = AppConfig()
