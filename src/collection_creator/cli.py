"""CLI entry point for collection-creator."""

import logging
import sys
from pathlib import Path

import click

from collection_creator.config import GeneratorSettings, load_settings
from collection_creator.errors import CollectionError
from collection_creator.generator.writer import render_collection
from collection_creator.routes.loader import import_route_table, is_descriptor_file, load_route_table
from collection_creator.routes.table import RouteTable
from collection_creator.service import CollectionService


def _load_routes(source: str, app_dir: str) -> RouteTable:
    """Load routes from a descriptor file or a 'module:attribute' import spec."""
    if is_descriptor_file(source):
        path = Path(source)
        if not path.exists():
            raise click.BadParameter(f"File {source!r} does not exist.", param_hint="SOURCE")
        return load_route_table(path)

    if app_dir not in sys.path:
        sys.path.insert(0, app_dir)
    return import_route_table(source)


def _apply_output(settings: GeneratorSettings, output: Path | None) -> GeneratorSettings:
    if output is None:
        return settings
    return settings.model_copy(
        update={"output": settings.output.model_copy(update={"directory": str(output.parent), "filename": output.name})}
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Collection Creator — generate Postman collections from a route table."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("source")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="Settings YAML file.")
@click.option("--base-url", default=None, help="Base URL used when settings do not define one.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path, overrides settings.")
@click.option("--app-dir", default=".", show_default=True, help="Directory added to sys.path before importing SOURCE.")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the collection instead of writing a file.")
def generate(source: str, config_path: Path | None, base_url: str | None, output: Path | None, app_dir: str, to_stdout: bool):
    """Generate a collection from SOURCE (descriptor file or module:attribute)."""
    try:
        table = _load_routes(source, app_dir)
        settings = _apply_output(load_settings(config_path), output)
        service = CollectionService(table, settings)

        if to_stdout:
            click.echo(render_collection(service.build_collection(base_url)))
            return

        path, report = service.generate_with_report(base_url)
    except (CollectionError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Found {len(table)} routes, built {len(report.collection.item)} requests.")
    for failure in report.failures:
        click.echo(f"  Skipped {failure.route}: {failure.error}")
    if report.unmapped:
        click.echo(f"  Skipped {report.unmapped} route(s) without path or method.")
    click.echo(f"Collection saved to {path}")


@main.command()
@click.argument("source")
@click.option("--app-dir", default=".", show_default=True, help="Directory added to sys.path before importing SOURCE.")
def routes(source: str, app_dir: str):
    """List the routes found in SOURCE."""
    try:
        table = _load_routes(source, app_dir)
    except (CollectionError, OSError) as e:
        raise click.ClickException(str(e)) from e

    for route in table:
        methods = ",".join(route.methods) or "-"
        for pattern in route.patterns or ["-"]:
            click.echo(f"{methods} {pattern} -> {route.label}")
    click.echo(f"Total routes: {len(table)}")
