"""Entry point for evtflags CLI."""

import json
import logging
import sys
from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from evtflags.core.config import Config, ConfigError, ConfigLoader
from evtflags.core.errors import EventFlagError
from evtflags.core.help import events_help
from evtflags.core.parser import EventFlagParser
from evtflags.logging_config import setup_logging
from evtflags.models.descriptor import PolicyFilterMap

click.rich_click.TEXT_MARKUP = "rich"

logger = logging.getLogger(__name__)

_OPERATOR_STYLES = {
    "-": "red",
    "": "dim",
}


def _load_config(config_path: str | None, no_config: bool) -> Config:
    """Load the explicit config file, or merge the discovered ones.

    Args:
        config_path: Path given with --config, or None.
        no_config: Skip config discovery entirely.

    Returns:
        The loaded Config (defaults when nothing was loaded).

    Raises:
        ConfigError: If a config file is invalid.
    """
    loader = ConfigLoader()
    if config_path:
        return loader.load(Path(config_path))
    if no_config:
        return Config()
    return loader.load_merged()


def _policy_map_to_json(policies: PolicyFilterMap) -> str:
    """Serialize a policy map to JSON, keyed by policy id."""
    data = {
        str(policy_id): policy.model_dump(mode="json")
        for policy_id, policy in policies.items()
    }
    return json.dumps(data, indent=2)


def _render_policies(console: Console, policies: PolicyFilterMap) -> None:
    """Print one table of descriptors per policy."""
    for policy_id, policy in sorted(policies.items()):
        title = f"Policy {policy_id}"
        if policy.name:
            title += f" ({policy.name})"

        table = Table(title=title)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Event", style="cyan", no_wrap=True)
        table.add_column("Category", style="green")
        table.add_column("Field")
        table.add_column("Operator", justify="center")
        table.add_column("Values")

        for idx, descriptor in enumerate(policy.filters, start=1):
            operator = descriptor.operator or "none"
            style = _OPERATOR_STYLES.get(descriptor.operator, "yellow")
            table.add_row(
                str(idx),
                escape(descriptor.event_name),
                escape(descriptor.option_category),
                escape(descriptor.option_field),
                f"[{style}]{escape(operator)}[/{style}]",
                escape(descriptor.values),
            )

        console.print(table)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", is_flag=True, help="Show version and exit.")
@click.option(
    "-e",
    "--events",
    "events",
    type=str,
    multiple=True,
    help="Event selection or filter (can be repeated). See --help-events."
)
@click.option(
    "--help-events",
    is_flag=True,
    help="Show the --events grammar with examples and exit."
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=None,
    help="Output format: text (table) or json. Default: from config, else text."
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a TOML config file (disables config discovery)."
)
@click.option(
    "--no-config",
    is_flag=True,
    help="Ignore discovered config files."
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Disable colored output."
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log parsing details to stderr."
)
@click.pass_context
def cli(
    ctx: click.Context,
    version: bool,
    events: tuple[str, ...],
    help_events: bool,
    output_format: str | None,
    config_path: str | None,
    no_config: bool,
    no_color: bool,
    verbose: bool,
) -> None:
    """evtflags - parse --events selections and filters.

    Turns event names, sets, exclusions and scope/data/retval filters into
    the filter descriptors of the default policy.
    """
    setup_logging(verbose)
    stderr_console = Console(file=sys.stderr)

    if version:
        from evtflags import __version__
        click.echo(f"evtflags {__version__}")
        return

    if help_events:
        click.echo(events_help(), nl=False)
        return

    try:
        config = _load_config(config_path, no_config)
    except ConfigError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        ctx.exit(1)

    flags = [*config.events.default, *events]
    if not flags:
        click.echo(ctx.get_help())
        return

    logger.debug("Parsing %d flag(s)", len(flags))
    try:
        policies = EventFlagParser().parse_all(flags)
    except EventFlagError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        ctx.exit(1)

    output_format = (output_format or config.output.format).lower()
    if output_format == "json":
        click.echo(_policy_map_to_json(policies))
        return

    console = Console(no_color=no_color or not config.output.color)
    _render_policies(console, policies)


if __name__ == "__main__":
    cli()
