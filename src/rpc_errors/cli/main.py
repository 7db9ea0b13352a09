"""Command line interface for error catalogs and error payloads."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config import TranslatorConfig, load_config
from ..errors.catalog import CatalogDecodeError, load_catalog
from ..errors.error import INT32_MAX, INT32_MIN, new as new_error, parse as parse_error
from ..errors.translator import ErrorTranslator
from ..utils.rich_logging import setup_logging


console = Console()


@click.group()
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path),
              help="YAML config file (defaults to RPC_ERRORS_* environment settings)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """rpc-errors - structured RPC errors and localized messages."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path) if config_path else TranslatorConfig()
    except ValueError as e:
        console.print(f"[red]Error: invalid configuration: {escape(str(e))}[/]", highlight=False)
        raise SystemExit(1)

    setup_logging("DEBUG" if verbose else config.log_level, stream=sys.stderr)
    ctx.obj["config"] = config
    ctx.obj["translator"] = ErrorTranslator.from_config(config)


@cli.command()
@click.argument("message_type")
@click.argument("language", required=False)
@click.option("--catalog", type=click.Path(path_type=Path),
              help="Catalog file (defaults to catalog_path from config)")
@click.pass_context
def translate(ctx, message_type, language, catalog):
    """Print the LANGUAGE text for MESSAGE_TYPE.

    LANGUAGE defaults to default_language from config.
    """
    translator = ctx.obj["translator"]
    if catalog is not None:
        translator = ErrorTranslator(catalog, default_language=translator.default_language)

    try:
        text = translator.translate(message_type, language)
    except (OSError, CatalogDecodeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]", highlight=False)
        raise SystemExit(1)

    click.echo(text)


@cli.command()
@click.argument("catalog", type=click.Path(path_type=Path), required=False)
@click.pass_context
def show(ctx, catalog):
    """Show which languages each message type in CATALOG supports.

    CATALOG defaults to catalog_path from config.
    """
    catalog = catalog or ctx.obj["translator"].catalog_path
    try:
        error_catalog = load_catalog(catalog)
    except (OSError, CatalogDecodeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]", highlight=False)
        raise SystemExit(1)

    if not error_catalog.error_list:
        console.print(f"[yellow]No message types in {catalog}[/]")
        return

    languages = error_catalog.languages()
    table = Table(title=escape(str(catalog)))
    table.add_column("Type")
    for language in languages:
        table.add_column(escape(language))

    for entry in error_catalog.error_list:
        cells = [entry.find_text(language) for language in languages]
        table.add_row(escape(entry.type), *["-" if text is None else escape(text) for text in cells])

    console.print(table)


@cli.command()
@click.argument("raw")
def parse(raw):
    """Decode RAW as an error payload and print its fields."""
    error = parse_error(raw)

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("id", escape(error.id))
    table.add_row("code", str(error.code))
    table.add_row("detail", escape(error.detail))
    table.add_row("status", escape(error.status))
    console.print(table)


@cli.command()
@click.argument("code", type=click.IntRange(INT32_MIN, INT32_MAX))
@click.argument("error_id")
@click.argument("detail")
def new(code, error_id, detail):
    """Print the JSON encoding of an error with CODE, ERROR_ID and DETAIL."""
    click.echo(new_error(error_id, detail, code).to_json())


if __name__ == "__main__":
    cli()
