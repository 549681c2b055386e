"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from schema_doc_tree.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    SessionSettings,
    load_settings,
    write_placeholder_settings,
)
from schema_doc_tree.outline_writing import (
    build_outline,
    format_outline_json,
    format_outline_text,
)
from schema_doc_tree.schema_loading import DocumentSession, SchemaLoadError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-doc-tree")
def cli() -> None:
    """Decorate JSON Schema documents for documentation generation."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings template with guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="outline")
@click.argument("schema_paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON settings file",
)
@click.option(
    "--sparse/--dense",
    "sparse",
    default=None,
    help="Use full titles in slugs (sparse) or three-letter abbreviations (dense).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Outline output format",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Level for diagnostics written to stderr",
)
def outline(
    schema_paths: tuple[str, ...],
    config_path: str | None,
    sparse: bool | None,
    output_format: str,
    log_level: str,
) -> None:
    """Load schemas into one session and print every node's slug, pointer and titles."""
    _setup_logging(log_level)
    try:
        settings = load_settings(config_path) if config_path else SessionSettings()
        if sparse is not None:
            settings = replace(settings, sparse=sparse)
        session = DocumentSession(settings)
        roots = [session.load_file(path) for path in schema_paths]
    except (ConfigurationError, SchemaLoadError) as exc:
        raise CliError(str(exc)) from exc

    documents = [(root, build_outline(root)) for root in roots]
    if output_format == "json":
        click.echo(format_outline_json(documents))
    else:
        click.echo(format_outline_text(documents))


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
