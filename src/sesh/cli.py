"""
Command-line interface for sesh.

Opens project directories as tmux sessions and manages the search paths
projects are picked from.
"""

import logging
import sys

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

import click

from sesh.config import ConfigStore
from sesh.errors import SeshError
from sesh.logging_config import get_log_path, setup_logging
from sesh.paths import is_valid_dir
from sesh.selector import select_project
from sesh.tmux import TmuxLauncher

logger = logging.getLogger(__name__)

try:
    __version__ = get_version("sesh")
except PackageNotFoundError:
    __version__ = "dev"

USAGE = """Usage:
____________________________________________________________

sesh                 Launch fzf to pick a session path
sesh PATH            Open PATH as a session
sesh add PATH        Add a directory to session paths
sesh remove PATH     Remove a directory from session paths
sesh paths           List session paths
sesh editor [CMD]    Show or set the editor command
sesh help            Show this help message
____________________________________________________________"""


class SeshGroup(click.Group):
    """Command group that treats a directory argument as ``open DIR``."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None:
            store: ConfigStore = ctx.ensure_object(ConfigStore)
            if is_valid_dir(cmd_name, store.home_resolver):
                return "open", self.get_command(ctx, "open"), args
            ctx.fail(f"Unknown command {cmd_name!r}. Run `sesh help` for usage.")
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except SeshError as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


def _launch(store: ConfigStore, project_path: str) -> None:
    editor = store.get_editor_command()
    name = TmuxLauncher().launch(project_path, editor)
    logger.info(f"Attached to session {name}")


@click.group(
    cls=SeshGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="sesh")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sesh: open project directories as tmux sessions."""
    setup_logging(verbose=verbose, console_format="%(levelname)s: %(message)s")
    store = ctx.ensure_object(ConfigStore)

    if ctx.invoked_subcommand is not None:
        return

    project_path = select_project(store.get_search_paths())
    if project_path is None:
        ctx.exit(0)
    _launch(store, project_path)


@cli.command("open", hidden=True)
@click.argument("path")
@click.pass_obj
def open_cmd(store: ConfigStore, path: str) -> None:
    """Open PATH as a tmux session."""
    _launch(store, store.resolve_path(path))


@cli.command()
@click.argument("path")
@click.pass_obj
def add(store: ConfigStore, path: str) -> None:
    """Add a directory to session paths."""
    if not is_valid_dir(path, store.home_resolver):
        click.echo(f"Invalid path: {path}", err=True)
        sys.exit(1)

    try:
        store.add_search_path(path)
    except SeshError as e:
        click.echo(f"Failed to add path: {e}", err=True)
        sys.exit(1)
    click.echo(f"Path added: {path}")


@cli.command()
@click.argument("path")
@click.pass_obj
def remove(store: ConfigStore, path: str) -> None:
    """Remove a directory from session paths."""
    try:
        store.remove_search_path(path)
    except SeshError as e:
        click.echo(f"Failed to remove path: {e}", err=True)
        sys.exit(1)
    click.echo(f"Path removed: {path}")


@cli.command()
@click.pass_obj
def paths(store: ConfigStore) -> None:
    """List session paths."""
    for path in store.get_search_paths():
        click.echo(path)


@cli.command()
@click.argument("command", required=False)
@click.pass_obj
def editor(store: ConfigStore, command: str | None) -> None:
    """Show the editor command, or set it to COMMAND."""
    if command is None:
        click.echo(store.get_editor_command())
        return

    if not command.strip():
        click.echo("Editor command cannot be empty", err=True)
        sys.exit(1)

    store.set_editor_command(command)
    click.echo(f"✓ Editor: {command}")


@cli.command("help")
def help_cmd() -> None:
    """Show usage."""
    click.echo(USAGE)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command("path")
@click.pass_obj
def config_path_cmd(store: ConfigStore) -> None:
    """Show the config file location."""
    click.echo(str(store.config_path))


@config.command("show")
@click.pass_obj
def show_config_cmd(store: ConfigStore) -> None:
    """Show all configuration settings."""
    current = store.reload()

    click.echo(f"Config file: {store.config_path}\n")
    click.echo(f"Editor: {current.editor}")
    if not current.paths:
        click.echo("Paths: (none)")
        return

    click.echo("Paths:")
    for path in current.paths:
        click.echo(f"  {path}")


@cli.group()
def logs() -> None:
    """Log file management commands."""
    pass


@logs.command("path")
def logs_path() -> None:
    """Show log file location."""
    log_path = get_log_path()
    click.echo(f"Log file: {log_path}")

    if log_path.exists():
        size_kb = log_path.stat().st_size / 1024
        click.echo(f"Size: {size_kb:.1f} KB")
    else:
        click.echo("(File does not exist yet)")


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
