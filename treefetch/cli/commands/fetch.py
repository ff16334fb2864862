import importlib.metadata
from typing import Optional

import typer

from treefetch.facts import ProviderFactory, current_user
from treefetch.internal.logging import get_logger, setup_logging
from treefetch.kernel.contracts import HEADER_COLORS, ArtSelector, DisplayConfig
from treefetch.render import get_art, print_rows, render_banner, resolve_selector

logger = get_logger(__name__)


def _version_callback(value: bool):
    if not value:
        return
    try:
        package_version = importlib.metadata.version("treefetch")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("treefetch is not installed or version metadata not found.", err=True)
        raise typer.Exit(1)
    typer.echo(f"treefetch version: {package_version}")
    raise typer.Exit()


def _header_color_callback(value: str) -> str:
    if value not in HEADER_COLORS:
        raise typer.BadParameter(f"expected one of {', '.join(HEADER_COLORS)}")
    return value


def fetch(
    no_hostname: bool = typer.Option(False, "--no-hostname", help="Hide the user@hostname line."),
    no_os: bool = typer.Option(False, "--no-os", help="Hide the OS line."),
    no_kernel: bool = typer.Option(False, "--no-kernel", help="Hide the kernel line."),
    no_cpu: bool = typer.Option(False, "--no-cpu", help="Hide the CPU architecture line."),
    no_memory: bool = typer.Option(False, "--no-memory", help="Hide the memory line."),
    no_uptime: bool = typer.Option(False, "--no-uptime", help="Hide the uptime line."),
    no_shell: bool = typer.Option(False, "--no-shell", help="Hide the shell line."),
    no_packages: bool = typer.Option(False, "--no-packages", help="Hide the brew packages line."),
    right: bool = typer.Option(False, "-r", "--right", help="Print information on the right side (default is left)."),
    art: ArtSelector = typer.Option(ArtSelector.primary, "-a", "--art", help="Art to draw beside the information."),
    header_color: str = typer.Option("blue", "--header-color", callback=_header_color_callback, help="Color of the info labels."),
    version: Optional[bool] = typer.Option(None, "--version", callback=_version_callback, is_eager=True, help="Show the treefetch version and exit."),
):
    """
    Print host information beside a piece of ASCII art.
    """
    setup_logging()

    config = DisplayConfig(
        show_hostname=not no_hostname,
        show_os=not no_os,
        show_kernel=not no_kernel,
        show_cpu=not no_cpu,
        show_memory=not no_memory,
        show_uptime=not no_uptime,
        show_shell=not no_shell,
        show_packages=not no_packages,
        info_on_left=not right,
        art=art,
        header_color=header_color,
    )
    asset = get_art(resolve_selector(config.art))
    logger.debug("Display configured", art=asset.name, info_on_left=config.info_on_left)

    facts = ProviderFactory.create().collect()
    print_rows(render_banner(facts, config, current_user(), asset))
