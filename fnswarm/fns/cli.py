""" fns command line interface. """

import click
from fnswarm.fns.compile import click_compile
from fnswarm.fns.deploy import click_deploy
from fnswarm.fns.config import click_config, click_version


@click.group()
def cli():
    """ fnswarm - deploy functions on Docker Swarm. """
    pass


cli.add_command(click_compile)
cli.add_command(click_deploy)
cli.add_command(click_config)
cli.add_command(click_version)
