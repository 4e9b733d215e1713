"""AWS session helpers."""

import boto3
from botocore.exceptions import BotoCoreError

from ecs_session.core.errors import ConfigurationError


def create_session(region: str, profile: str | None = None) -> boto3.session.Session:
    """Create a boto3 session bound to a region."""
    try:
        if profile:
            return boto3.session.Session(profile_name=profile, region_name=region)
        return boto3.session.Session(region_name=region)
    except BotoCoreError as exc:
        raise ConfigurationError(f"Unable to load AWS configuration for {region}: {exc}") from exc
