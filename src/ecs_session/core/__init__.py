"""AWS-facing collaborators for the session navigator."""

from ecs_session.core.arns import extract_cluster_name, extract_service_name
from ecs_session.core.errors import (
    ConfigurationError,
    EcsSessionError,
    ExecuteCommandNotEnabledError,
    InventoryError,
    LaunchError,
)
from ecs_session.core.inventory import EcsInventory
from ecs_session.core.launcher import SessionLauncher, build_execute_command
from ecs_session.core.session import create_session

__all__ = [
    "ConfigurationError",
    "EcsInventory",
    "EcsSessionError",
    "ExecuteCommandNotEnabledError",
    "InventoryError",
    "LaunchError",
    "SessionLauncher",
    "build_execute_command",
    "create_session",
    "extract_cluster_name",
    "extract_service_name",
]
