"""Tests for ARN short-name extraction."""

import pytest

from ecs_session.core.arns import extract_cluster_name, extract_service_name

CLUSTER_ARN = "arn:aws:ecs:eu-west-1:123456789012:cluster/payments"
SERVICE_ARN = "arn:aws:ecs:eu-west-1:123456789012:service/payments/api"


def test_cluster_name_from_arn() -> None:
    """Test that the cluster name is the segment after 'cluster/'."""
    assert extract_cluster_name(CLUSTER_ARN) == "payments"


def test_service_name_from_arn() -> None:
    """Test that the service name is the segment after the cluster name."""
    assert extract_service_name(SERVICE_ARN) == "api"


def test_service_name_from_legacy_arn() -> None:
    """Test that old-format service ARNs without a cluster segment still resolve."""
    assert extract_service_name("arn:aws:ecs:us-east-1:123456789012:service/api") == "api"


@pytest.mark.parametrize("value", ["payments", "arn:aws:ecs:eu-west-1:123:payments"])
def test_non_resource_arn_is_rejected(value: str) -> None:
    """Test that values without a resource path are rejected."""
    with pytest.raises(ValueError, match="Not an ECS resource ARN"):
        extract_cluster_name(value)
