""" fns deploy command. """

import sys
import click
from fnswarm.docker.docker_access_layer import dal
from fnswarm.function_deployer import FunctionDeployer
from fnswarm.models.user_notifications import user_notify
from fnswarm.schemas.requests import get_request_from_config_file


@click.command(name='deploy')
@click.option('-f', '--file', 'yaml_file', required=True,
              type=click.Path(exists=True, dir_okay=False),
              help='YAML file describing the function')
def click_deploy(yaml_file: str) -> None:
    """ Deploy a function on Docker Swarm. """
    request = get_request_from_config_file(yaml_file)
    if request is None:
        sys.exit(1)

    outcome = FunctionDeployer(dal).deploy(request)

    for diagnostic in outcome.diagnostics:
        user_notify.warning(diagnostic.message)
    for warning in outcome.warnings:
        user_notify.warning(warning)

    if not outcome.accepted:
        user_notify.fail(f"Function {request.service} could not be deployed\n{outcome.message}")
        sys.exit(1)

    user_notify.success(f"Function {request.service} deployed successfully (service {outcome.service_id})")
