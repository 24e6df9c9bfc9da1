""" Docker Access Layer. """

import docker
import requests
import fnswarm.config as config
from fnswarm.models.user_notifications import user_notify
from fnswarm.schemas.service_spec import ServiceSpec
from typing import Any, Dict, List, Optional


class DockerAccessLayer:
    """
    Docker Access Layer (DAL) for interfacing with the Docker Swarm cluster.

    Provides methods to connect to the Docker daemon, look up networks and secrets,
    and create function services.
    """

    def __init__(self) -> None:
        """
        Initializes the DockerAccessLayer with empty connection state.

        Attributes:
            docker_client (Optional[docker.DockerClient]): The Docker client used to communicate with the manager node.
            docker_url (Optional[str]): The URL used to connect to the Docker daemon.
            swarm_manager (bool): Whether the Docker daemon is a Swarm manager.
        """
        self.docker_client: Optional[docker.DockerClient] = None
        self.docker_url: Optional[str] = None
        self.swarm_manager: bool = False

    def connect(self, docker_url: Optional[str] = None) -> None:
        """
        Connects to the Docker engine of a Swarm manager node.

        Args:
            docker_url (Optional[str]): URL of the Docker daemon. Defaults to `config.DOCKER_URL`.

        Note:
            Warns the user if the Docker daemon can not be reached or is not a Swarm manager.
        """
        self.docker_url = docker_url or config.DOCKER_URL
        self.swarm_manager = False

        try:
            self.docker_client = docker.DockerClient(base_url=self.docker_url)
            swarm_attrs = self.docker_client.swarm.attrs
        except docker.errors.DockerException as e:
            user_notify.warning(f"ERROR: Could not connect to Docker at {self.docker_url}: {e}")
            return

        if 'JoinTokens' not in swarm_attrs:
            user_notify.warning(f'WARNING: Docker running on {self.docker_url} is not a Swarm manager')
            return
        self.swarm_manager = True

    def _client(self) -> docker.DockerClient:
        if self.docker_client is None:
            raise docker.errors.DockerException("Docker Access Layer is not connected")
        return self.docker_client

    def list_networks(self, label: str) -> List[str]:
        """
        Names of the networks carrying a label.

        Args:
            label (str): Label filter, either 'key' or 'key=value'.

        Returns:
            List[str]: Network names, in the order returned by Docker.
        """
        networks = self._client().networks.list(filters={'label': label})
        return [network.name for network in networks]

    def list_secrets(self, names: List[str]) -> Dict[str, str]:
        """
        Look up swarm secrets by name.

        Args:
            names (List[str]): Secret names.

        Returns:
            Dict[str, str]: Secret IDs by secret name, for the secrets found.
        """
        secrets = self._client().secrets.list(filters={'name': names})
        return {secret.name: secret.id for secret in secrets}

    def create_service(self, spec: ServiceSpec, encoded_registry_auth: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a Docker Swarm service.

        Args:
            spec (ServiceSpec): Service specification.
            encoded_registry_auth (Optional[str]): Encoded registry auth, sent as `X-Registry-Auth` header when given.

        Returns:
            Dict[str, Any]: Docker response, with the service `ID` and optional `Warnings`.

        Raises:
            docker.errors.APIError: If Docker refuses to create the service.
        """
        api = self._client().api
        headers = {}
        if encoded_registry_auth:
            headers['X-Registry-Auth'] = encoded_registry_auth
        # docker-py exposes no public URL builder for raw Engine API calls
        url = api._url('/services/create')
        response = api.post(url, json=spec.to_api(), headers=headers, timeout=api.timeout)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise docker.errors.create_api_error_from_http_exception(e) from e
        return response.json()


dal = DockerAccessLayer()
