"""Region resolution and the saved default region."""

import logging
import os
import tempfile
from pathlib import Path

from ecs_session.cli.prompts import Prompter
from ecs_session.cli.ui import console, print_menu

logger = logging.getLogger(__name__)

TOP_REGIONS = [
    "us-east-1",
    "us-west-2",
    "eu-west-1",
    "ap-southeast-1",
    "ap-northeast-1",
]
MANUAL_ENTRY_CHOICE = 1


class RegionStore:
    """Flat file holding the default region code."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> str | None:
        """Return the saved region, if any.

        A missing file means no saved region. Other read failures are logged
        and treated the same way.

        Returns:
            The saved region code, or None.
        """
        try:
            region = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read default region file %s: %s", self.path, exc)
            return None
        return region or None

    def save(self, region: str) -> Path:
        """Replace the saved region.

        Args:
            region: Region code to save.

        Returns:
            The region file path.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".region-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(region.strip())
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return self.path


def resolve_region(prompter: Prompter, store: RegionStore) -> str:
    """Resolve the region from the saved default or the operator.

    Args:
        prompter: Operator prompts.
        store: Saved default region.

    Returns:
        The resolved region code.
    """
    saved = store.load()
    if saved and prompter.confirm(f"Found saved region '{saved}'. Do you want to use it?"):
        return saved

    region = enter_or_choose_region(prompter)
    offer_to_save(prompter, store, region)
    return region


def enter_or_choose_region(prompter: Prompter) -> str:
    """Ask for a region code, typed in or picked from the shortlist."""
    print_menu(
        "Would you like to:",
        [
            "Enter a region manually (e.g. us-west-2)",
            f"Choose from the {len(TOP_REGIONS)} most-used regions",
        ],
    )
    if prompter.ask_number("Enter the number of your choice:") == MANUAL_ENTRY_CHOICE:
        return prompter.text("Enter your desired region code:")

    index = prompter.choose("region", TOP_REGIONS, allow_back=False)
    # Without a back option the prompter always returns an index.
    return TOP_REGIONS[index or 0]


def offer_to_save(prompter: Prompter, store: RegionStore, region: str) -> None:
    """Offer to save a region as the default for next time."""
    if not prompter.confirm(f"Would you like to save '{region}' as the default region?"):
        return
    try:
        path = store.save(region)
    except OSError as exc:
        logger.warning("Could not save default region to %s: %s", store.path, exc)
        console.print(f"[yellow]Could not save default region: {exc}[/yellow]")
        return
    logger.debug("Saved default region %s to %s", region, path)
    console.print("[green]Default region saved.[/green]")
