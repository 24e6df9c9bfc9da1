""" fns compile command. """

import json
import sys
import click
from rich.console import Console
from fnswarm.exceptions import InvalidLabelConfiguration, RegistryAuthError
from fnswarm.models.user_notifications import user_notify
from fnswarm.registry_auth import build_encoded_auth_config
from fnswarm.schemas.deployer_config import DeployerConfig
from fnswarm.schemas.requests import get_request_from_config_file
from fnswarm.spec_builder import DeploymentCompiler


@click.command(name='compile')
@click.option('-f', '--file', 'yaml_file', required=True,
              type=click.Path(exists=True, dir_okay=False),
              help='YAML file describing the function')
@click.option('--network', default=None, help='Network to attach the function to')
def click_compile(yaml_file: str, network: str) -> None:
    """ Print the Docker Swarm service spec of a function, without deploying it. """
    request = get_request_from_config_file(yaml_file)
    if request is None:
        sys.exit(1)
    if network:
        request = request.model_copy(update={'network': network})

    deployer_config = DeployerConfig.from_config()

    if request.registry_auth:
        try:
            build_encoded_auth_config(request.registry_auth, request.image,
                                      default_namespace=deployer_config.default_registry_namespace)
        except RegistryAuthError as err:
            user_notify.fail(f"Invalid registry auth: {err}")
            sys.exit(1)

    try:
        result = DeploymentCompiler(deployer_config).compile(request)
    except InvalidLabelConfiguration as err:
        user_notify.fail(f"Function {request.service} can not be compiled: {err}")
        sys.exit(1)

    for diagnostic in result.diagnostics:
        user_notify.warning(diagnostic.message)

    Console().print_json(json.dumps(result.spec.to_api()))
