"""
Engine Configuration

Loads runtime settings from environment variables and provides defaults.
A .env file at the project root is loaded with python-dotenv when present.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models.config import DEFAULT_CONFIG, RecommendationConfig

ROOT_ENV = Path(__file__).resolve().parent.parent / ".env"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _int_env(key: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


@dataclass
class EngineSettings:
    """Runtime settings for scripts and hosts embedding the engine."""

    # JSON file passed to RecommendationConfig.from_dict
    config_path: Optional[Path] = None
    log_level: str = "INFO"
    default_limit: int = 10
    # Seed for the force-refresh shuffle; None means unseeded
    random_seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Load settings from environment variables."""
        if ROOT_ENV.exists():
            load_dotenv(ROOT_ENV)

        config_path = os.getenv("RECOMMENDER_CONFIG_PATH", "").strip()
        path = None
        if config_path:
            path = Path(config_path)
            if not path.is_absolute():
                path = (ROOT_ENV.parent / path).resolve()

        return cls(
            config_path=path,
            log_level=os.getenv("RECOMMENDER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            default_limit=_int_env("RECOMMENDER_DEFAULT_LIMIT", 10),
            random_seed=_int_env("RECOMMENDER_RANDOM_SEED", None),
        )


# Global settings instance
_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = EngineSettings.from_env()
    return _settings


def reload_settings() -> EngineSettings:
    """Reload settings from environment."""
    global _settings
    _settings = None
    return get_settings()


def load_recommendation_config(settings: Optional[EngineSettings] = None) -> RecommendationConfig:
    """
    RecommendationConfig from the JSON file named by config_path.

    No path → DEFAULT_CONFIG. A missing file raises FileNotFoundError.
    """
    settings = settings or get_settings()
    if settings.config_path is None:
        return DEFAULT_CONFIG
    if not settings.config_path.exists():
        raise FileNotFoundError(f"Recommendation config not found: {settings.config_path}")
    with open(settings.config_path) as f:
        return RecommendationConfig.from_dict(json.load(f))


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for script use. The library never calls this itself."""
    logging.basicConfig(level=(level or get_settings().log_level).upper(), format=LOG_FORMAT)
