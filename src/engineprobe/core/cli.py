"""
engineprobe CLI: Command-line interface for probing the Docker Engine
"""

from importlib.metadata import version, PackageNotFoundError
import sys
import logging
import json
import asyncio
import click

from engineprobe.client import DockerEngineClient, DockerEngineError
from engineprobe.core import conf, detect_engine

try:
    __version__ = version("engineprobe")
except PackageNotFoundError:
    __version__ = "0.1.0"  # fallback


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    for name in ("engineprobe.console", "engineprobe.engine"):
        logging.getLogger(name).setLevel(level)


@click.group()
@click.version_option(version=__version__, prog_name="engineprobe")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, verbose):
    """engineprobe CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


@cli.command()
@click.option("--socket", "socket_path", default=None, help="Daemon socket path")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def check(ctx, socket_path, as_json):
    """Check whether the Docker Engine is reachable."""
    logger = logging.getLogger("engineprobe.console")
    result = asyncio.run(detect_engine(socket_path))

    if as_json:
        click.echo(json.dumps(result, indent=2))
    elif result["available"]:
        logger.info("Docker Engine available at %s", result["socket_path"])
        logger.info("\tVersion: %s", result["version"])
    else:
        logger.error("Docker Engine unavailable at %s", result["socket_path"])
        logger.error("\t%s", result["error"])

    ctx.exit(0 if result["available"] else 1)


@cli.command(name="version")
@click.option("--socket", "socket_path", default=None, help="Daemon socket path")
@click.pass_context
def engine_version(ctx, socket_path):
    """Print the Docker Engine version."""
    logger = logging.getLogger("engineprobe.console")
    client = DockerEngineClient(
        socket_path=socket_path or conf.resolve_socket_path(),
        **conf.client_kwargs(),
    )

    try:
        click.echo(asyncio.run(client.get_version()))
    except DockerEngineError as e:
        logger.error("%s", e)
        ctx.exit(1)


@cli.command()
@click.option(
    "--key",
    default=None,
    help="Key to show from the configuration (dot notation)",
)
@click.pass_context
def config(ctx, key):
    """Show the identified engineprobe configuration."""
    logger = logging.getLogger("engineprobe.console")
    logger.info("engineprobe configuration:\n")
    logger.info("> Path: %s", conf.path)
    logger.info("> Socket: %s", conf.resolve_socket_path())
    if key:
        logger.info("> Key: Value")
        value = json.dumps(conf.get(key, "undefined"), indent=2)
        logger.info("%s: %s", key, value)
    else:
        logger.info("> Configuration Dictionary:")
        logger.info(json.dumps(conf.config, indent=2))


if __name__ == "__main__":
    cli()
