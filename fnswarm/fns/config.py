""" fns config and version commands. """

import click
from rich import box
from rich.console import Console
from rich.table import Table
from importlib.metadata import version, PackageNotFoundError
from fnswarm.schemas.deployer_config import DeployerConfig
import fnswarm.config as config


@click.command(name='config')
def click_config() -> None:
    """ Show the deployer configuration. """
    table = Table(
        title="Deployer Configuration",
        title_justify="left",
        box=box.HORIZONTALS
    )
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", justify="left")

    table.add_row("docker_url", str(config.DOCKER_URL))
    for setting, value in DeployerConfig.from_config().model_dump().items():
        table.add_row(setting, str(value))

    Console().print(table)


@click.command(name='version')
def click_version() -> None:
    """ Show the fnswarm version. """
    try:
        click.echo(f"fnswarm {version('fnswarm')}")
    except PackageNotFoundError:
        click.echo("fnswarm (not installed)")
