import json
import logging
import sys
from pathlib import Path

import click

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig, load_settings  # noqa: E402
from backend.app.services.path_service import PathService  # noqa: E402
from flightpath import __version__  # noqa: E402
from flightpath.errors import FlightpathError  # noqa: E402


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format=config.log_format,
    )


@click.group()
@click.version_option(version=__version__, prog_name="flightpath")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    metavar="./path/config.yaml",
    help="Path to a settings file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """Flights path API."""
    ctx.ensure_object(dict)
    config = AppConfig.from_settings(load_settings(config_path))
    configure_logging(config)
    ctx.obj["config"] = config


@cli.command()
@click.pass_context
def server(ctx: click.Context) -> None:
    """Run the API server."""
    import uvicorn

    from backend.app.main import create_app

    config: AppConfig = ctx.obj["config"]
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


@cli.command()
@click.argument("segments_file", type=click.File("r"), default="-")
@click.pass_context
def calculate(ctx: click.Context, segments_file) -> None:
    """Print the longest path through the segments in SEGMENTS_FILE."""
    config: AppConfig = ctx.obj["config"]

    try:
        segments = json.load(segments_file)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"wrong payload: {exc}") from exc

    if not isinstance(segments, list):
        raise click.ClickException("wrong payload")

    try:
        result = PathService(config.synthesis).calculate(segments)
    except FlightpathError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(
        json.dumps({"short_path": result.short_path, "full_path": result.full_path})
    )


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
