"""Command line interface for ecs-session."""
