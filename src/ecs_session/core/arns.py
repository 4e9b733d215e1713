"""Helpers for turning ECS ARNs into display names."""

ARN_RESOURCE_INDEX = 5


def extract_cluster_name(arn: str) -> str:
    """Return the cluster name from a cluster ARN.

    Args:
        arn: Cluster ARN, e.g. ``arn:aws:ecs:eu-west-1:123:cluster/payments``.

    Returns:
        The short cluster name.
    """
    return _resource_path(arn)[1]


def extract_service_name(arn: str) -> str:
    """Return the service name from a service ARN.

    Long-format ARNs carry the cluster name (``service/payments/api``) while
    legacy ones do not (``service/api``); both yield ``api``.

    Args:
        arn: Service ARN.

    Returns:
        The short service name.
    """
    return _resource_path(arn)[-1]


def _resource_path(arn: str) -> list[str]:
    """Split the resource part of an ARN on ``/``.

    Args:
        arn: Any ECS ARN.

    Returns:
        The slash-separated resource segments.

    Raises:
        ValueError: If the ARN has no resource part.
    """
    parts = arn.split(":", ARN_RESOURCE_INDEX)
    if len(parts) <= ARN_RESOURCE_INDEX or "/" not in parts[ARN_RESOURCE_INDEX]:
        raise ValueError(f"Not an ECS resource ARN: {arn}")
    return parts[ARN_RESOURCE_INDEX].split("/")
