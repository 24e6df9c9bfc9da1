"""
Function secrets.

Resolves the secret names of a request into swarm secret references. Each
secret is exposed to the function as `/run/secrets/<name>`, readable by all
users of the container.
"""

import docker
import requests
from typing import List, Optional
from fnswarm.docker.docker_access_layer import DockerAccessLayer
from fnswarm.exceptions import SecretsResolutionError
from fnswarm.schemas.service_spec import SecretFile, SecretReference


def make_secrets_array(dal: DockerAccessLayer, secret_names: Optional[List[str]]) -> List[SecretReference]:
    """
    Build the secret references of a function.

    Args:
        dal (DockerAccessLayer): Access to the swarm.
        secret_names (Optional[List[str]]): Names of the requested secrets.

    Returns:
        List[SecretReference]: One reference per requested secret, in request order.

    Raises:
        SecretsResolutionError: If a secret is requested twice, does not exist or the swarm can not be queried.
    """
    if not secret_names:
        return []

    try:
        found_secrets = dal.list_secrets(secret_names)
    except (docker.errors.DockerException, requests.exceptions.RequestException) as err:
        raise SecretsResolutionError(f"Error querying secrets: {err}") from err

    references = []
    requested = set()
    for name in secret_names:
        if name in requested:
            raise SecretsResolutionError(f"duplicate secret target for {name} not allowed")
        if name not in found_secrets:
            raise SecretsResolutionError(f"secret not found: {name}")
        requested.add(name)
        references.append(SecretReference(
            file=SecretFile(name=name),
            secret_id=found_secrets[name],
            secret_name=name
        ))
    return references
