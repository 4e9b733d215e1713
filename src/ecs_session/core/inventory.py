"""Read-only ECS inventory queries."""

import logging
from collections.abc import Callable
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ecs_session.core.arns import extract_cluster_name, extract_service_name
from ecs_session.core.errors import ConfigurationError, InventoryError

logger = logging.getLogger(__name__)


class EcsInventory:
    """ECS queries bound to a single region."""

    def __init__(self, session: boto3.session.Session, client: Any | None = None) -> None:
        """Create the inventory client.

        Args:
            session: Session whose region and credentials are used.
            client: Pre-built ECS client, mainly for stubbing in tests.

        Raises:
            ConfigurationError: If the ECS client cannot be created.
        """
        self.region = str(session.region_name or "")
        if client is not None:
            self._ecs = client
            return
        try:
            self._ecs = session.client("ecs")
        except BotoCoreError as exc:
            raise ConfigurationError(
                f"Unable to load AWS configuration for {self.region}: {exc}"
            ) from exc

    def list_clusters(self) -> list[str]:
        """Return the short names of all clusters in the region."""
        arns = self._paginate("list_clusters", "clusterArns")
        return _short_names(arns, extract_cluster_name)

    def list_services(self, cluster: str) -> list[str]:
        """Return the short names of the services in a cluster."""
        arns = self._paginate("list_services", "serviceArns", cluster=cluster)
        return _short_names(arns, extract_service_name)

    def list_tasks(self, cluster: str, service: str) -> list[str]:
        """Return the task ARNs of a service.

        Task ARNs are returned unshortened because execute-command needs them.
        """
        return self._paginate("list_tasks", "taskArns", cluster=cluster, serviceName=service)

    def list_containers(self, cluster: str, task_arn: str) -> list[str]:
        """Return the container names of a task."""
        response = self._call("describe_tasks", cluster=cluster, tasks=[task_arn])
        tasks = response.get("tasks", [])
        if not tasks:
            return []
        return [str(container.get("name", "")) for container in tasks[0].get("containers", [])]

    def is_execute_command_enabled(self, cluster: str, service: str) -> bool:
        """Return true when the service has execute-command enabled."""
        response = self._call("describe_services", cluster=cluster, services=[service])
        services = response.get("services", [])
        if not services:
            return False
        return bool(services[0].get("enableExecuteCommand", False))

    def _paginate(self, operation: str, key: str, **kwargs: Any) -> list[str]:
        """Collect a list field across all pages of an ECS list operation.

        Args:
            operation: ECS client operation name.
            key: Response field holding the ARNs.
            **kwargs: Operation parameters.

        Returns:
            All values of the field across pages.
        """
        logger.debug("Paginating ecs.%s in %s with %s", operation, self.region, kwargs)
        values: list[str] = []
        try:
            for page in self._ecs.get_paginator(operation).paginate(**kwargs):
                values.extend(page.get(key, []))
        except (BotoCoreError, ClientError) as exc:
            raise InventoryError(f"Unable to {_describe(operation)}: {exc}") from exc
        return values

    def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        """Call a single ECS operation, wrapping botocore errors."""
        logger.debug("Calling ecs.%s in %s with %s", operation, self.region, kwargs)
        try:
            response: dict[str, Any] = getattr(self._ecs, operation)(**kwargs)
        except (BotoCoreError, ClientError) as exc:
            raise InventoryError(f"Unable to {_describe(operation)}: {exc}") from exc
        return response


def _describe(operation: str) -> str:
    """Return a readable form of an operation name, e.g. ``list clusters``."""
    return operation.replace("_", " ")


def _short_names(arns: list[str], extract: Callable[[str], str]) -> list[str]:
    """Shorten ARNs, reporting unexpected formats as inventory errors."""
    try:
        return [extract(arn) for arn in arns]
    except ValueError as exc:
        raise InventoryError(f"Unexpected ARN in ECS response: {exc}") from exc
