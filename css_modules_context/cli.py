"""
CLI commands for css-modules-context.

Provides the `cssm` command-line interface for inspecting what the editor
features see: the classname index of a stylesheet, the stylesheet an
identifier resolves to, and hover/definition/completion results at a
position in a source file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from config.defaults import DEFAULT_SETTINGS, ENV_VAR_MAPPING
from core.indexer import build_index, get_transformer
from core.models.config import CamelCaseMode, GlobalSettings
from core.parser.base import ParseError
from core.providers import CompletionProvider, DefinitionProvider, HoverProvider
from core.resolver import ModuleAliasResolver, resolve_import

from . import __version__

console = Console()
logger = logging.getLogger(__name__)

CAMEL_CASE_CHOICES = [mode.value for mode in CamelCaseMode]


def configure_logging(level: str) -> None:
    """Route log records through rich on stderr"""
    logging.basicConfig(
        level=level,
        format="%(name)s - %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_source(source: Path) -> str:
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]❌ Cannot read {escape(str(source))}: {escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="cssm")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option(
    '--camel-case',
    type=click.Choice(CAMEL_CASE_CHOICES, case_sensitive=False),
    default=None,
    help='Classname transformation (default: CSS_MODULES_CAMEL_CASE or full)'
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, camel_case: Optional[str]):
    """
    CSS Modules Context CLI.

    Inspect classname indexes and import resolution for CSS modules.
    """
    try:
        settings = GlobalSettings()
    except ValidationError as e:
        console.print(f"[red]❌ Invalid settings: {escape(str(e))}[/red]")
        sys.exit(2)

    if camel_case is not None:
        settings.camel_case = CamelCaseMode.from_option(camel_case)

    configure_logging("DEBUG" if verbose else settings.log_level)
    logger.debug(f"Effective settings: {settings!r}")

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def classnames(ctx: click.Context, path: Path):
    """Show the classname index of a stylesheet."""
    settings: GlobalSettings = ctx.obj["settings"]

    try:
        index = build_index(path, get_transformer(settings.camel_case), settings)
    except (ParseError, OSError) as e:
        console.print(f"[red]❌ Failed to index {escape(str(path))}: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=f"Classnames in {escape(path.name)}")
    table.add_column("Class", style="cyan", no_wrap=True)
    table.add_column("Position", style="yellow", no_wrap=True)
    table.add_column("Declarations", style="white")
    table.add_column("Comments", style="dim")

    for name, entry in index.items():
        table.add_row(
            escape(name),
            f"{entry.position.line}:{entry.position.column}",
            escape("\n".join(entry.declarations)),
            escape("\n".join(entry.comments)),
        )

    console.print(table)
    console.print(f"[blue]{len(index)} class names[/blue]")


@main.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('identifier')
@click.pass_context
def resolve(ctx: click.Context, source: Path, identifier: str):
    """Print the stylesheet IDENTIFIER is imported from in SOURCE."""
    settings: GlobalSettings = ctx.obj["settings"]
    resolver = ModuleAliasResolver.from_settings(settings)

    text = _read_source(source)
    resolved = resolve_import(text, identifier, source.absolute().parent, resolver=resolver)
    if resolved is None:
        console.print(f"[red]❌ Cannot resolve '{escape(identifier)}' in {escape(str(source))}[/red]")
        sys.exit(1)

    click.echo(str(resolved))


def _provider_kwargs(settings: GlobalSettings) -> dict:
    return {
        "camel_case": settings.camel_case,
        "resolver": ModuleAliasResolver.from_settings(settings),
        "settings": settings,
    }


@main.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('line', type=click.IntRange(min=0))
@click.argument('character', type=click.IntRange(min=0))
@click.pass_context
def hover(ctx: click.Context, source: Path, line: int, character: int):
    """Show hover content at LINE:CHARACTER (0-based) of SOURCE."""
    provider = HoverProvider(**_provider_kwargs(ctx.obj["settings"]))
    result = provider.provide_hover(_read_source(source), source.absolute(), line, character)
    if result is None:
        console.print("[yellow]No hover information[/yellow]")
        sys.exit(1)

    click.echo(result.value)


@main.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('line', type=click.IntRange(min=0))
@click.argument('character', type=click.IntRange(min=0))
@click.pass_context
def definition(ctx: click.Context, source: Path, line: int, character: int):
    """Show the definition target at LINE:CHARACTER (0-based) of SOURCE."""
    provider = DefinitionProvider(**_provider_kwargs(ctx.obj["settings"]))
    location = provider.provide_definition(_read_source(source), source.absolute(), line, character)
    if location is None:
        console.print("[yellow]No definition found[/yellow]")
        sys.exit(1)

    click.echo(f"{location.path}:{location.line}:{location.column}")


@main.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('line', type=click.IntRange(min=0))
@click.argument('character', type=click.IntRange(min=0))
@click.pass_context
def complete(ctx: click.Context, source: Path, line: int, character: int):
    """List completions at LINE:CHARACTER (0-based) of SOURCE."""
    provider = CompletionProvider(**_provider_kwargs(ctx.obj["settings"]))
    for item in provider.provide_completion(_read_source(source), source.absolute(), line, character):
        click.echo(item.label)


@main.command()
@click.pass_context
def settings(ctx: click.Context):
    """Show effective settings and their environment variables."""
    current: GlobalSettings = ctx.obj["settings"]

    table = Table(title="CSS Modules Context Settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Default", style="dim")
    table.add_column("Environment", style="yellow", no_wrap=True)

    for env_var, field_name in ENV_VAR_MAPPING.items():
        value = getattr(current, field_name)
        if isinstance(value, CamelCaseMode):
            value = value.value
        table.add_row(
            field_name,
            escape(str(value)),
            escape(str(DEFAULT_SETTINGS[field_name])),
            env_var,
        )

    console.print(table)


if __name__ == "__main__":
    main()
