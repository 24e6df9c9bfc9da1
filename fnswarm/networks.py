"""
Default function network.

Functions deployed without a network are attached to the first swarm network
carrying the `openfaas=true` label.
"""

import docker
import requests
from typing import List, Optional
from fnswarm.diagnostics import Diagnostic, DiagnosticKind, record
from fnswarm.docker.docker_access_layer import DockerAccessLayer


NETWORK_LABEL = "openfaas=true"


class NetworkResolver:
    """ Looks up the default network of functions. """

    def __init__(self, dal: DockerAccessLayer, label: str = NETWORK_LABEL) -> None:
        self.dal = dal
        self.label = label

    def resolve(self, diagnostics: Optional[List[Diagnostic]] = None) -> Optional[str]:
        """
        Name of the first network carrying the network label.

        A failing lookup is recorded in `diagnostics` and results in `None`.

        Returns:
            Optional[str]: Network name, or `None` if no network qualifies.
        """
        try:
            networks = self.dal.list_networks(self.label)
        except (docker.errors.DockerException, requests.exceptions.RequestException) as err:
            record(diagnostics, DiagnosticKind.NETWORK_LOOKUP_FAILED, "network", None,
                   f"Error querying networks: {err}")
            return None

        if networks:
            return networks[0]
        return None
