"""frontreg CLI — resolve installed front-end libraries from the shell."""

import functools
import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from frontreg import __version__

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Log resolution steps")
def main(verbose: bool):
    """frontreg — local front-end library registry.

    Look up libraries installed under node_modules-style search roots,
    check their versions, and serve their main or minified files.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


def _registry_options(func):
    """Options shared by every command that takes a library request."""

    @click.argument("name")
    @click.option("--version", "-v", "version", default=None, help="Semver range (default: latest)")
    @click.option("--path", "-p", "path", default=None, help="File path inside the library (default: manifest main)")
    @click.option("--minified-path", "-m", default=None, help="Pre-built minified file inside the library")
    @click.option("--type", "-t", "file_type", default="js", type=click.Choice(["js", "css"]))
    @click.option("--root", "-r", "roots", multiple=True, help="Search root (repeatable)")
    @click.option("--config", "-c", "config_path", default=None, help="YAML config file")
    @functools.wraps(func)
    def wrapper(name, version, path, minified_path, file_type, roots, config_path, **kwargs):
        from frontreg.config import ConfigError, build_registry, load_config
        from frontreg.registry import FileType, Library, RegistryError

        try:
            registry = build_registry(load_config(roots, config_path))
        except ConfigError as e:
            raise click.UsageError(str(e)) from e

        try:
            lib = Library(
                name,
                version=version,
                path=path,
                minified_path=minified_path,
                file_type=FileType(file_type),
            )
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="NAME") from e

        try:
            return func(registry, lib, **kwargs)
        except RegistryError as e:
            err_console.print(f"[red]{type(e).__name__}:[/] {e}")
            raise SystemExit(1) from e

    return wrapper


# ── Lookup ───────────────────────────────────────────────────────────


@main.command(name="dir")
@_registry_options
def lib_dir(registry, lib):
    """Print the directory a library is installed in."""
    result = registry.get_lib_dir(lib)
    if result is None:
        err_console.print(f"[yellow]{lib.name} is not installed in any search root.[/]")
        raise SystemExit(1)
    click.echo(str(result))


@main.command()
@_registry_options
def manifest(registry, lib):
    """Print a library's package.json."""
    click.echo(json.dumps(registry.get_manifest(lib), indent=2))


@main.command()
@_registry_options
@click.option("--minified", is_flag=True, help="Resolve the pre-built minified file")
def path(registry, lib, minified: bool):
    """Print the resolved path of a library's main or minified file."""
    result = registry.get_minified_path(lib) if minified else registry.get_path(lib)
    click.echo(str(result))


@main.command()
@_registry_options
@click.option("--minified", is_flag=True, help="Serve minified content, minifying on demand")
@click.option("--output", "-o", default=None, help="Write to a file instead of stdout")
def get(registry, lib, minified: bool, output: str | None):
    """Print the contents of a library's main or minified file."""
    content = registry.get_minified(lib) if minified else registry.get(lib)
    if output:
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        err_console.print(f"[green]Wrote[/] {lib.name} to {output}")
    else:
        click.echo(content, nl=False)


# ── Config ───────────────────────────────────────────────────────────


@main.command()
@click.option("--root", "-r", "roots", multiple=True, help="Search root (repeatable)")
@click.option("--config", "-c", "config_path", default=None, help="YAML config file")
def roots(roots: tuple, config_path: str | None):
    """Show the effective search roots, in lookup order."""
    from frontreg.config import ConfigError, load_config

    try:
        config = load_config(roots, config_path)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    table = Table(title=f"Search roots (from {config.source})")
    table.add_column("#", style="dim", width=3)
    table.add_column("Path", style="cyan")
    table.add_column("Exists", justify="center")

    for i, root in enumerate(config.search_roots):
        exists = "[green]Y[/]" if root.is_dir() else "[red]N[/]"
        table.add_row(str(i + 1), str(root), exists)

    console.print(table)


if __name__ == "__main__":
    main()
