"""Shared fixtures for ecs-session tests."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from ecs_session.cli.region import RegionStore


class ScriptedPrompter:
    """Prompter that replays answers in order.

    Answers are ``(kind, value)`` pairs. For ``choose`` the value is the number
    the operator would type, so ``0`` means back and ``2`` the second option.
    """

    def __init__(self, answers: Sequence[tuple[str, Any]]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[Any, ...]] = []

    def choose(self, entity: str, options: Sequence[str], allow_back: bool = True) -> int | None:
        number = self._next("choose", entity, list(options), allow_back)
        return None if number == 0 else number - 1

    def ask_number(self, message: str) -> int | None:
        return self._next("ask_number", message)

    def confirm(self, message: str) -> bool:
        return bool(self._next("confirm", message))

    def text(self, message: str) -> str:
        return str(self._next("text", message))

    def chosen_entities(self) -> list[str]:
        """Return the entity of every menu shown, in order."""
        return [call[1] for call in self.calls if call[0] == "choose"]

    def _next(self, kind: str, *details: Any) -> Any:
        self.calls.append((kind, *details))
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {details}")
        expected, value = self.answers.pop(0)
        if expected != kind:
            raise AssertionError(f"Expected a {expected} prompt, got {kind}: {details}")
        return value


class FakeInventory:
    """In-memory inventory recording every query."""

    def __init__(
        self,
        clusters: list[str],
        services: dict[str, list[str]],
        tasks: dict[tuple[str, str], list[str]],
        containers: dict[tuple[str, str], list[str]],
        exec_disabled: set[str] | None = None,
    ) -> None:
        self.clusters = clusters
        self.services = services
        self.tasks = tasks
        self.containers = containers
        self.exec_disabled = exec_disabled or set()
        self.calls: list[tuple[str, ...]] = []

    def list_clusters(self) -> list[str]:
        self.calls.append(("list_clusters",))
        return list(self.clusters)

    def list_services(self, cluster: str) -> list[str]:
        self.calls.append(("list_services", cluster))
        return list(self.services.get(cluster, []))

    def list_tasks(self, cluster: str, service: str) -> list[str]:
        self.calls.append(("list_tasks", cluster, service))
        return list(self.tasks.get((cluster, service), []))

    def list_containers(self, cluster: str, task_arn: str) -> list[str]:
        self.calls.append(("list_containers", cluster, task_arn))
        return list(self.containers.get((cluster, task_arn), []))

    def is_execute_command_enabled(self, cluster: str, service: str) -> bool:
        self.calls.append(("is_execute_command_enabled", cluster, service))
        return service not in self.exec_disabled

    def operations(self) -> list[str]:
        """Return the operation names called, in order."""
        return [call[0] for call in self.calls]


class FakeLauncher:
    """Launcher recording the sessions it was asked to start."""

    def __init__(self) -> None:
        self.launches: list[tuple[str, str, str, str, str]] = []

    def launch(
        self,
        region: str,
        cluster: str,
        task_arn: str,
        container: str,
        command: str,
    ) -> None:
        self.launches.append((region, cluster, task_arn, container, command))


TASK_ARN = "arn:aws:ecs:eu-west-1:123456789012:task/payments/0f1e2d3c4b5a"


@pytest.fixture
def inventory() -> FakeInventory:
    """Return an inventory with two clusters and a single running task."""
    return FakeInventory(
        clusters=["prod", "staging"],
        services={"prod": ["api", "worker"], "staging": ["api"]},
        tasks={
            ("prod", "api"): [TASK_ARN],
            ("prod", "worker"): [TASK_ARN],
            ("staging", "api"): [TASK_ARN],
        },
        containers={
            ("prod", TASK_ARN): ["app", "envoy"],
            ("staging", TASK_ARN): ["app"],
        },
    )


@pytest.fixture
def launcher() -> FakeLauncher:
    """Return a recording launcher."""
    return FakeLauncher()


@pytest.fixture
def region_store(tmp_path: Path) -> RegionStore:
    """Return a region store in a temporary directory."""
    return RegionStore(tmp_path / "config" / "default_region.txt")
