"""Guided selection of an ECS container and launch of a shell session.

The navigator is an explicit state machine. Each stage handler returns the
next stage; "back" unwinds exactly one stage, and going back from the cluster
list clears the region so that it is resolved again.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields
from enum import Enum
from typing import Protocol

from ecs_session.cli.prompts import Prompter
from ecs_session.cli.region import RegionStore, resolve_region
from ecs_session.cli.ui import clear_screen, console, print_breadcrumb, print_menu

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "sh"
COMMAND_CHOICES = {1: "sh", 2: "bash"}
CUSTOM_COMMAND_CHOICE = 3


class Stage(Enum):
    """Wizard stages, in navigation order."""

    REGION = "region"
    CLUSTER = "cluster"
    SERVICE = "service"
    TASK = "task"
    CONTAINER = "container"
    COMMAND = "command"
    LAUNCH = "launch"
    DONE = "done"


class Inventory(Protocol):
    """ECS queries for a single region."""

    def list_clusters(self) -> list[str]: ...

    def list_services(self, cluster: str) -> list[str]: ...

    def list_tasks(self, cluster: str, service: str) -> list[str]: ...

    def list_containers(self, cluster: str, task_arn: str) -> list[str]: ...

    def is_execute_command_enabled(self, cluster: str, service: str) -> bool: ...


class Launcher(Protocol):
    """Starts the interactive session."""

    def launch(
        self,
        region: str,
        cluster: str,
        task_arn: str,
        container: str,
        command: str,
    ) -> None: ...


InventoryFactory = Callable[[str], Inventory]


@dataclass
class NavigationContext:
    """Selections confirmed so far.

    Fields are in stage order; clearing one stage clears every stage after it.
    """

    region: str = ""
    cluster: str | None = None
    service: str | None = None
    task_arn: str | None = None
    container: str | None = None
    command: str | None = None

    def clear_from(self, name: str) -> None:
        """Reset a selection and every selection that depends on it.

        Args:
            name: Field name of the first selection to clear.
        """
        clearing = False
        for item in fields(self):
            clearing = clearing or item.name == name
            if clearing:
                setattr(self, item.name, item.default)

    def breadcrumb(self) -> list[tuple[str, str]]:
        """Return (label, value) pairs for the selections made."""
        labels = {
            "region": "Region",
            "cluster": "Cluster",
            "service": "Service",
            "task_arn": "Task",
            "container": "Container",
            "command": "Command",
        }
        return [
            (label, str(getattr(self, name)))
            for name, label in labels.items()
            if getattr(self, name)
        ]


class SelectionNavigator:
    """Walks the operator from region to container and launches one session."""

    def __init__(
        self,
        inventory_factory: InventoryFactory,
        launcher: Launcher,
        prompter: Prompter,
        region_store: RegionStore,
        region: str | None = None,
    ) -> None:
        """Create the navigator.

        Args:
            inventory_factory: Builds the inventory client for a region.
            launcher: Session launcher.
            prompter: Operator prompts.
            region_store: Saved default region.
            region: Region given on the command line, used for the first pass only.
        """
        self.inventory_factory = inventory_factory
        self.launcher = launcher
        self.prompter = prompter
        self.region_store = region_store
        self.context = NavigationContext()
        self._preset_region = region or None
        self._inventory: Inventory | None = None
        self._inventory_region = ""
        self._handlers: dict[Stage, Callable[[], Stage]] = {
            Stage.REGION: self._resolve_region,
            Stage.CLUSTER: self._choose_cluster,
            Stage.SERVICE: self._choose_service,
            Stage.TASK: self._choose_task,
            Stage.CONTAINER: self._choose_container,
            Stage.COMMAND: self._choose_command,
            Stage.LAUNCH: self._launch,
        }

    def run(self, stage: Stage = Stage.REGION) -> NavigationContext:
        """Run the wizard until a session has been launched.

        Args:
            stage: Stage to start from.

        Returns:
            The selections used for the launched session.
        """
        while stage is not Stage.DONE:
            logger.debug("Entering stage %s", stage.value)
            stage = self._handlers[stage]()
        return self.context

    def _resolve_region(self) -> Stage:
        self.context.clear_from("region")
        if self._preset_region:
            self.context.region = self._preset_region
            self._preset_region = None
        else:
            self.context.region = resolve_region(self.prompter, self.region_store)
        self._redraw()
        return Stage.CLUSTER

    def _choose_cluster(self) -> Stage:
        region = self._require("region")
        clusters = self._inventory_for(region).list_clusters()
        index = self.prompter.choose("cluster", clusters)
        if index is None:
            self.context.clear_from("region")
            self._redraw()
            return Stage.REGION

        self.context.cluster = clusters[index]
        self._redraw()
        return Stage.SERVICE

    def _choose_service(self) -> Stage:
        cluster = self._require("cluster")
        inventory = self._inventory_for(self._require("region"))
        services = inventory.list_services(cluster)
        index = self.prompter.choose("service", services)
        if index is None:
            self.context.clear_from("cluster")
            self._redraw()
            return Stage.CLUSTER

        service = services[index]
        if not inventory.is_execute_command_enabled(cluster, service):
            clear_screen()
            console.print(f"[yellow]Execute-command is disabled for service: {service}[/yellow]")
            if self.prompter.confirm("Do you want to go back and choose a different service?"):
                self._redraw()
                return Stage.SERVICE

        self.context.service = service
        self._redraw()
        return Stage.TASK

    def _choose_task(self) -> Stage:
        cluster = self._require("cluster")
        service = self._require("service")
        tasks = self._inventory_for(self._require("region")).list_tasks(cluster, service)
        index = self.prompter.choose("task", tasks)
        if index is None:
            self.context.clear_from("service")
            self._redraw()
            return Stage.SERVICE

        self.context.task_arn = tasks[index]
        self._redraw()
        return Stage.CONTAINER

    def _choose_container(self) -> Stage:
        cluster = self._require("cluster")
        task_arn = self._require("task_arn")
        containers = self._inventory_for(self._require("region")).list_containers(
            cluster, task_arn
        )
        index = self.prompter.choose("container", containers)
        if index is None:
            self.context.clear_from("task_arn")
            self._redraw()
            return Stage.TASK

        self.context.container = containers[index]
        self._redraw()
        return Stage.COMMAND

    def _choose_command(self) -> Stage:
        self._require("container")
        print_menu(
            "Choose a command to run:",
            [*COMMAND_CHOICES.values(), "Enter custom command"],
        )
        choice = self.prompter.ask_number("Enter the number of your choice:")
        if choice == CUSTOM_COMMAND_CHOICE:
            command = self.prompter.text("Enter your custom command:")
        elif choice in COMMAND_CHOICES:
            command = COMMAND_CHOICES[choice]
        else:
            console.print(f"[yellow]Invalid choice, defaulting to '{DEFAULT_COMMAND}'[/yellow]")
            command = DEFAULT_COMMAND

        self.context.command = command
        self._redraw()
        return Stage.LAUNCH

    def _launch(self) -> Stage:
        console.print("[cyan]Starting AWS CLI execute-command session...[/cyan]")
        self.launcher.launch(
            self._require("region"),
            self._require("cluster"),
            self._require("task_arn"),
            self._require("container"),
            self._require("command"),
        )
        return Stage.DONE

    def _inventory_for(self, region: str) -> Inventory:
        """Return the inventory client for a region, building it on first use."""
        if self._inventory is None or self._inventory_region != region:
            logger.debug("Creating inventory client for %s", region)
            self._inventory = self.inventory_factory(region)
            self._inventory_region = region
        return self._inventory

    def _require(self, name: str) -> str:
        """Return a selection that the current stage depends on.

        Raises:
            RuntimeError: If the selection has not been made.
        """
        value = getattr(self.context, name)
        if not value:
            raise RuntimeError(f"Cannot continue before a {name} has been selected.")
        return str(value)

    def _redraw(self) -> None:
        clear_screen()
        print_breadcrumb(self.context.breadcrumb())
