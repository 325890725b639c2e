"""Settings from environment variables (and .env), plus logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from kinboard.domain import DEFAULT_STATUSES

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_env() -> Path | None:
    """Load .env from repo root or current dir (first found). Returns the path loaded."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_statuses: tuple[str, ...] = DEFAULT_STATUSES
    boards_path: Path | None = None


def _parse_statuses(raw: str) -> tuple[str, ...]:
    # Comma separated; blanks dropped, duplicates collapse keeping first
    labels = (label.strip() for label in raw.split(","))
    return tuple(dict.fromkeys(label for label in labels if label))


def get_settings() -> Settings:
    """Read settings from the current environment."""
    log_level = os.environ.get("KINBOARD_LOG_LEVEL", "").strip().upper() or "INFO"
    statuses = _parse_statuses(os.environ.get("KINBOARD_DEFAULT_STATUSES", ""))
    boards_path = os.environ.get("KINBOARD_BOARDS_PATH", "").strip()
    return Settings(
        log_level=log_level,
        default_statuses=statuses or DEFAULT_STATUSES,
        boards_path=Path(boards_path).resolve() if boards_path else None,
    )


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")
    logging.basicConfig(format=LOG_FORMAT, level=level)
