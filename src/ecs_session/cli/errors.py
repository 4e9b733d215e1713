"""Rendering of fatal errors for the operator."""

from botocore.exceptions import (
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
    ProfileNotFound,
)
from rich.markup import escape

from ecs_session.cli.ui import console
from ecs_session.core.errors import ExecuteCommandNotEnabledError

AUTH_ERROR_CODES = {
    "ExpiredToken",
    "ExpiredTokenException",
    # spellchecker:ignore-next-line
    "UnrecognizedClientException",
    "InvalidClientTokenId",
    "InvalidSignatureException",
    "AccessDenied",
    "AccessDeniedException",
}


def report_error(exc: Exception) -> None:
    """Render a fatal error with actionable guidance.

    Args:
        exc: Error that ended the session.
    """
    if isinstance(exc, ExecuteCommandNotEnabledError):
        console.print(f"[red]{escape(str(exc))}[/red]")
        console.print(
            "[dim]Enable it with: aws ecs update-service --enable-execute-command "
            "--force-new-deployment, then retry once new tasks are running.[/dim]"
        )
        return

    if is_aws_auth_error(exc):
        console.print(
            "[red]AWS authentication failed. Your credentials are missing, invalid, "
            "or expired.[/red]"
        )
        console.print(
            "[dim]If using AWS profile/SSO, run: aws sso login --profile <profile>. "
            "If using temporary keys, refresh AWS_SESSION_TOKEN and retry.[/dim]"
        )
        return

    if is_aws_endpoint_error(exc):
        console.print("[red]Could not reach AWS endpoint from this environment.[/red]")
        console.print("[dim]Check network connectivity and the region you selected.[/dim]")
        return

    console.print(f"[red]{escape(str(exc))}[/red]")


def is_aws_auth_error(exc: BaseException) -> bool:
    """Return true when an exception chain indicates AWS auth issues.

    Args:
        exc: Raised exception.

    Returns:
        True when the chain contains an auth-related error.
    """
    for item in exception_chain(exc):
        if isinstance(item, (NoCredentialsError, ProfileNotFound)):
            return True
        if isinstance(item, ClientError):
            code = str(item.response.get("Error", {}).get("Code", ""))
            if code in AUTH_ERROR_CODES:
                return True
        if "security token included in the request is expired" in str(item).lower():
            return True
    return False


def is_aws_endpoint_error(exc: BaseException) -> bool:
    """Return true when an exception chain indicates endpoint or region errors."""
    return any(
        isinstance(item, (EndpointConnectionError, NoRegionError))
        for item in exception_chain(exc)
    )


def exception_chain(exc: BaseException) -> list[BaseException]:
    """Return exceptions in cause/context chain.

    Args:
        exc: Root exception.

    Returns:
        Ordered exception chain from root to cause/context.
    """
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        chain.append(current)
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return chain
