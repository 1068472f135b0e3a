import sys
from typing import TYPE_CHECKING, Any, Optional

from sqlevents.events import SQLEventKind

if TYPE_CHECKING:
    from click import Group

    from sqlevents.events import SQLEvent

__all__ = ("add_event_commands", "get_sqlevents_group", "main")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _import_click() -> Any:
    from sqlevents.exceptions import MissingDependencyError

    try:
        import click
    except ImportError as e:
        raise MissingDependencyError(package="click", install_package="cli") from e
    return click


def get_sqlevents_group() -> "Group":
    """Get the sqlevents CLI group.

    Raises:
        MissingDependencyError: If the `click` package is not installed.

    Returns:
        The sqlevents CLI group.
    """
    click = _import_click()

    @click.group(name="sqlevents")
    @click.option(
        "--log-level",
        help="Logging level for the sqlevents logger.",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default="WARNING",
        show_default=True,
    )
    @click.option(
        "--log-format",
        help="Log record format.",
        type=click.Choice(("structured", "simple")),
        default="simple",
        show_default=True,
    )
    def sqlevents_group(log_level: str, log_format: str) -> None:
        """Detect telemetry events in SQL scripts."""
        from sqlevents.utils.logging import configure_logging

        configure_logging(level=log_level, format_style=log_format)

    return sqlevents_group


def add_event_commands(events_group: Optional["Group"] = None) -> "Group":
    """Add the event detection commands to the CLI group.

    Args:
        events_group: The group to add the commands to.

    Raises:
        MissingDependencyError: If the `click` package is not installed.

    Returns:
        The group with the event commands added.
    """
    click = _import_click()
    from rich import get_console
    from rich.table import Table

    console = get_console()

    if events_group is None:
        events_group = get_sqlevents_group()

    files_argument = click.argument("files", type=click.File("r", encoding="utf-8"), nargs=-1)

    def read_sql(files: "tuple[click.utils.LazyFile, ...]") -> str:
        if not files:
            return click.get_text_stream("stdin").read()
        return ";\n".join(f.read() for f in files)

    def render_events(events: "list[SQLEvent]", output_format: str) -> None:
        if output_format == "json":
            import msgspec

            for event in events:
                click.echo(msgspec.json.encode(event.to_dict()).decode("utf-8"))
            return

        if not events:
            console.print("[yellow]No telemetry events detected[/]")
            return
        table = Table(title="SQL events")
        table.add_column("Kind", style="cyan")
        table.add_column("Schema")
        table.add_column("Name", style="green")
        for event in events:
            table.add_row(event.kind.value, event.schema or "", event.name or "")
        console.print(table)

    @events_group.command(name="parse", help="List the telemetry events detected in SQL files (or stdin).")
    @files_argument
    @click.option(
        "--format",
        "output_format",
        help="Output format.",
        type=click.Choice(("table", "json")),
        default="table",
        show_default=True,
    )
    @click.option("--tables-only", help="Only report table events.", is_flag=True, default=False)
    def parse_events(  # pyright: ignore[reportUnusedFunction]
        files: "tuple[click.utils.LazyFile, ...]", output_format: str, tables_only: bool
    ) -> None:
        """Print detected events."""
        from sqlevents import get_table_events, parse_sql_events

        sql = read_sql(files)
        events: list[SQLEvent] = list(get_table_events(sql)) if tables_only else parse_sql_events(sql)
        render_events(events, output_format)

    @events_group.command(name="check", help="Exit with status 0 if any event of the given kinds is detected.")
    @files_argument
    @click.option(
        "--kind",
        "kinds",
        help="Event kind to look for; may be repeated.",
        type=click.Choice([kind.value for kind in SQLEventKind]),
        multiple=True,
        required=True,
    )
    def check_events(  # pyright: ignore[reportUnusedFunction]
        files: "tuple[click.utils.LazyFile, ...]", kinds: "tuple[str, ...]"
    ) -> None:
        """Check SQL for event kinds."""
        from sqlevents import contains_event_kind

        if contains_event_kind(read_sql(files), kinds):
            console.print(f"[green]Found event kind(s): {', '.join(kinds)}[/]")
            return
        console.print(f"[red]No events of kind(s): {', '.join(kinds)}[/]")
        sys.exit(1)

    return events_group


def main() -> None:
    """Run the sqlevents command line interface."""
    add_event_commands()()
