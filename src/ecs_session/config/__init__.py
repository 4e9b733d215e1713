"""Configuration for ecs-session."""

from ecs_session.config.paths import config_dir, default_region_path
from ecs_session.config.settings import SessionSettings, get_settings

__all__ = [
    "SessionSettings",
    "config_dir",
    "default_region_path",
    "get_settings",
]
