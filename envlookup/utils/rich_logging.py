"""Rich console output for binding results."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from envlookup.core.errors import FieldError

_CONSOLE = Console(stderr=True)


def get_console() -> Console:
    """Return the shared stderr console used for logs and error reports."""
    return _CONSOLE


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send every log record through a RichHandler on the shared console."""
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[
            RichHandler(
                console=get_console(),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=True,
    )


def build_error_table(errors: Iterable[FieldError]) -> Table:
    """Lay out binding failures as one row per failure, in reporting order."""
    table = Table(title="Configuration errors", title_style="bold red")
    table.add_column("Field", style="cyan")
    table.add_column("Variable", style="bold")
    table.add_column("Kind", style="yellow")
    table.add_column("Message")
    for error in errors:
        table.add_row(error.field, error.env_name, error.kind.value, error.message)
    return table


def render_errors(errors: Iterable[FieldError]) -> None:
    """Print binding failures to the shared console."""
    get_console().print(build_error_table(errors))
