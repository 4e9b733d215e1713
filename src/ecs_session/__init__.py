"""Interactive ECS execute-command sessions."""

__version__ = "0.1.0"
