"""
Configuration for SDLC Explorer.

Defaults live as module constants. load_settings() layers an optional YAML
file and then environment variables (a .env file is honoured) on top.

Environment variables:
    SDLC_EXPLORER_TICK_MS         Visualizer autoplay period in milliseconds
    SDLC_EXPLORER_CONTENT_DIR     Directory holding catalog.yaml and topic files
    SDLC_EXPLORER_DEFAULT_TOPIC   Topic shown when the app starts
    SDLC_EXPLORER_LOG_LEVEL       Logging level for entry points
    SDLC_EXPLORER_ARRANGE_TIME_MS Time allowed per phase arrangement question
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


DEFAULT_CONTENT_DIR = Path(__file__).parent / "content"
DEFAULT_TICK_PERIOD_MS = 3000
DEFAULT_TOPIC = "planning"

DEFAULT_ARRANGE_TIME_LIMIT_MS = 120_000
ARRANGE_PASSING_SCORE = 0.6
CASE_STUDY_PASSING_SCORE = 0.7

ENV_PREFIX = "SDLC_EXPLORER_"
ENV_FIELDS = {
    "TICK_MS": "tick_period_ms",
    "CONTENT_DIR": "content_dir",
    "DEFAULT_TOPIC": "default_topic",
    "LOG_LEVEL": "log_level",
    "ARRANGE_TIME_MS": "arrange_time_limit_ms",
}


class Settings(BaseModel):
    tick_period_ms: int = Field(default=DEFAULT_TICK_PERIOD_MS, gt=0)
    content_dir: Path = DEFAULT_CONTENT_DIR
    default_topic: str = DEFAULT_TOPIC
    log_level: str = "INFO"
    arrange_time_limit_ms: int = Field(default=DEFAULT_ARRANGE_TIME_LIMIT_MS, gt=0)


def load_settings(config_path: Optional[Path] = None, use_env: bool = True) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment.

    Args:
        config_path: Optional YAML file with any of the Settings keys
        use_env: Whether to apply SDLC_EXPLORER_* environment overrides

    Returns:
        Validated Settings

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        pydantic.ValidationError: If a value is invalid (e.g. tick period <= 0)
    """
    values: dict = {}

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            values.update(yaml.safe_load(f) or {})

    if use_env:
        load_dotenv()
        for suffix, field_name in ENV_FIELDS.items():
            raw = os.environ.get(ENV_PREFIX + suffix)
            if raw:
                values[field_name] = raw

    return Settings(**values)
