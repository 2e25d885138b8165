from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .canonical_name import create_resolver
from .catalog import CatalogError, ReferenceCatalog, UnregisteredLicenseError, default_catalog, load_catalog
from .classifier import classify
from .config import ConfigError, Settings, find_config, load_config
from .log import configure_logging
from .manifest import ManifestError, extract_records, load_manifest
from .reporting import write_report


def _load_settings(config: Optional[str]) -> Settings:
    path = Path(config) if config else find_config(Path.cwd())
    if path is None:
        return Settings()
    try:
        return load_config(path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _load_catalog(catalog: Optional[str], settings: Settings) -> ReferenceCatalog:
    path = Path(catalog) if catalog else settings.catalog_path
    if path is None:
        return default_catalog()
    try:
        return load_catalog(path)
    except (CatalogError, OSError) as exc:
        raise click.ClickException(f"Unable to load catalog {path}: {exc}") from exc


config_option = click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="YAML or pyproject.toml settings (auto-detected in the working directory if omitted).",
)
catalog_option = click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="JSON or YAML unified list to use instead of the bundled one.",
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(verbose: bool) -> None:
    """License reporter CLI."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False, path_type=str))
@config_option
@catalog_option
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "markdown", "md", "html"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format for the report.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    help="Write the report to a file instead of stdout.",
)
@click.option(
    "--fail-on-not-approved",
    is_flag=True,
    help="Exit non-zero when any dependency license is not approved.",
)
def check(
    manifest: str,
    config: Optional[str],
    catalog: Optional[str],
    fmt: str,
    output: Optional[str],
    fail_on_not_approved: bool,
) -> None:
    """Classify the licenses declared in MANIFEST (XML or JSON)."""
    settings = _load_settings(config)
    reference = _load_catalog(catalog, settings)
    resolver = create_resolver(settings.canonical_names)

    try:
        records = extract_records(load_manifest(Path(manifest)), resolver)
    except ManifestError as exc:
        raise click.ClickException(str(exc)) from exc

    if not records:
        click.echo("No dependencies detected; nothing to check.", err=True)

    result = classify(records, reference)
    destination = Path(output) if output else None
    rendered = write_report(result, fmt, destination, reference)
    if not destination:
        click.echo(rendered)

    if (fail_on_not_approved or settings.fail_on_not_approved) and not result.passed:
        raise SystemExit(1)


@main.command()
@click.argument("name")
@config_option
@catalog_option
def url(name: str, config: Optional[str], catalog: Optional[str]) -> None:
    """Print the reference URL registered for a canonical license NAME."""
    reference = _load_catalog(catalog, _load_settings(config))
    try:
        click.echo(reference.url_for(name))
    except UnregisteredLicenseError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
@click.argument("names", nargs=-1, required=True)
@config_option
def resolve(names: tuple[str, ...], config: Optional[str]) -> None:
    """Show the canonical name for each raw license NAME."""
    resolver = create_resolver(_load_settings(config).canonical_names)
    for name in names:
        click.echo(f"{name} -> {resolver.resolve(name)}")


if __name__ == "__main__":
    main()
