"""Shared filesystem paths for user configuration."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "ecs-session"
DEFAULT_REGION_FILENAME = "default_region.txt"


def config_dir() -> Path:
    """Return the user configuration directory.

    Returns:
        The user configuration directory path.
    """
    return Path(user_config_dir(APP_NAME))


def default_region_path() -> Path:
    """Return the default region file path.

    Returns:
        The default region file path.
    """
    return config_dir() / DEFAULT_REGION_FILENAME
