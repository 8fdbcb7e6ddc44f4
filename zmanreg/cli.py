"""CLI entrypoint for zmanreg."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="zmanreg")
@click.option(
    "--data",
    "-d",
    "data_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    envvar="ZMANREG_DATA",
    default=None,
    help="Reference data file (defaults to the bundled zmanim.toml)",
)
@click.option("--verbose", is_flag=True, help="Log registry initialization details")
@click.pass_context
def cli(ctx: click.Context, data_path: Path | None, verbose: bool) -> None:
    """zmanreg - Names, explanations and groupings of zmanim calculations.

    Inspect the calculation methods the registry knows about, and validate
    reference data files before shipping them.
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj["data"] = data_path.resolve() if data_path else None


@cli.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def list_cmd(ctx: click.Context, output_json: bool) -> None:
    """List every calculation method in catalog order."""
    from .commands.catalog import run_list

    sys.exit(run_list(ctx.obj["data"], json_output=output_json))


@cli.command()
@click.argument("token")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def show(ctx: click.Context, token: str, output_json: bool) -> None:
    """Show names, explanation and related methods for one calculation method.

    Examples:

        zmanreg show sunrise

        zmanreg show sofZmanShmaMGA --json
    """
    from .commands.catalog import run_show

    sys.exit(run_show(token, ctx.obj["data"], json_output=output_json))


@cli.command()
@click.argument("token")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def related(ctx: click.Context, token: str, output_json: bool) -> None:
    """Show the calculation methods related to TOKEN, in authored order."""
    from .commands.catalog import run_related

    sys.exit(run_related(token, ctx.obj["data"], json_output=output_json))


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def groups(ctx: click.Context, output_json: bool) -> None:
    """Show the authored groups of related calculation methods."""
    from .commands.catalog import run_groups

    sys.exit(run_groups(ctx.obj["data"], json_output=output_json))


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def check(ctx: click.Context, output_json: bool) -> None:
    """Validate reference data without loading it as the registry.

    Exits 1 when the data has problems, so it can gate CI.

    Examples:

        zmanreg check

        zmanreg --data ./my-zmanim.toml check --json
    """
    from .commands.catalog import run_check

    sys.exit(run_check(ctx.obj["data"], json_output=output_json))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
