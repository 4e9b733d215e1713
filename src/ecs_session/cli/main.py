"""CLI entrypoint for ecs-session."""

import logging

import click

from ecs_session import __version__
from ecs_session.cli.errors import report_error
from ecs_session.cli.navigator import SelectionNavigator
from ecs_session.cli.prompts import PromptCancelledError, QuestionaryPrompter
from ecs_session.cli.region import RegionStore
from ecs_session.cli.ui import apply_questionary_style, console
from ecs_session.config.settings import get_settings
from ecs_session.core import EcsInventory, EcsSessionError, SessionLauncher, create_session

logger = logging.getLogger(__name__)

CANCELLED_EXIT_CODE = 130


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--region", "-r", default=None, help="AWS region (e.g. us-west-2).")
@click.option("--profile", "-p", default=None, help="AWS named profile to use.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.version_option(__version__, prog_name="ecs-session")
@click.pass_context
def cli(ctx: click.Context, region: str | None, profile: str | None, verbose: bool) -> None:
    """Open an interactive shell in an ECS container.

    Args:
        ctx: Click context for the command invocation.
        region: Region to use, skipping region selection.
        profile: AWS named profile.
        verbose: Whether to enable debug logging.
    """
    configure_logging(verbose)
    apply_questionary_style()

    settings = get_settings()
    profile = profile or settings.default_profile
    navigator = SelectionNavigator(
        inventory_factory=lambda name: EcsInventory(create_session(name, profile)),
        launcher=SessionLauncher(settings.aws_cli, profile),
        prompter=QuestionaryPrompter(),
        region_store=RegionStore(settings.resolved_region_file()),
        region=region,
    )

    try:
        navigator.run()
    except PromptCancelledError:
        console.print("[dim]Cancelled.[/dim]")
        ctx.exit(CANCELLED_EXIT_CODE)
    except EcsSessionError as exc:
        logger.debug("Session failed", exc_info=exc)
        report_error(exc)
        ctx.exit(1)


def configure_logging(verbose: bool) -> None:
    """Configure root logging for the CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # botocore is noisy at debug level
    logging.getLogger("botocore").setLevel(logging.INFO if verbose else logging.WARNING)


def main() -> None:
    """Run the CLI."""
    cli()
