"""Error types raised by the ECS session collaborators."""


class EcsSessionError(RuntimeError):
    """Base class for fatal ecs-session errors."""


class ConfigurationError(EcsSessionError):
    """The AWS session could not be configured for the chosen region."""


class InventoryError(EcsSessionError):
    """An ECS inventory query failed."""


class LaunchError(EcsSessionError):
    """The execute-command session could not be started."""


class ExecuteCommandNotEnabledError(LaunchError):
    """The target rejected the session because execute-command is disabled."""
