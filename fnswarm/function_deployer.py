"""
Function Deployer

Runs the complete deployment of a function on Docker Swarm: registry auth,
secrets, compilation of the service specification and service creation.

Every fatal failure aborts the deployment before anything is submitted to
Docker Swarm and is reported as a rejected :class:`DeployOutcome` (status 400).
A created service is reported as accepted (status 202). The status codes are
the ones an HTTP layer in front of the deployer returns to its clients.

Usage Example:
--------------
.. code-block:: python

    from fnswarm.docker.docker_access_layer import dal

    dal.connect()
    deployer = FunctionDeployer(dal)
    outcome = deployer.handle_deploy_body(request_body)
    if not outcome.accepted:
        print(outcome.message)
"""

import docker
import requests
from pydantic import BaseModel, Field
from typing import List, Optional, Tuple, Union
from fnswarm.diagnostics import Diagnostic
from fnswarm.docker.docker_access_layer import DockerAccessLayer
from fnswarm.exceptions import FnSwarmException, RegistryAuthError, InvalidRequestBody, DeploymentError
from fnswarm.logger import get_logger
from fnswarm.networks import NetworkResolver
from fnswarm.registry_auth import build_encoded_auth_config
from fnswarm.schemas.deployer_config import DeployerConfig
from fnswarm.schemas.requests import DeploymentRequest, parse_deployment_request
from fnswarm.secrets import make_secrets_array
from fnswarm.spec_builder import DeploymentCompiler


logger = get_logger(__name__)

HTTP_ACCEPTED = 202
HTTP_BAD_REQUEST = 400


class DeployOutcome(BaseModel):
    """ Result of a function deployment. """
    status: int = Field(..., description="HTTP status equivalent (202 accepted, 400 rejected)")
    message: str = Field(default="", description="Reason of a rejection")
    service_id: Optional[str] = Field(default=None, description="ID of the created service")
    warnings: List[str] = Field(default_factory=list, description="Warnings returned by Docker Swarm")
    diagnostics: List[Diagnostic] = Field(
        default_factory=list,
        description="Non-fatal failures absorbed while compiling"
    )

    @property
    def accepted(self) -> bool:
        return self.status == HTTP_ACCEPTED


class FunctionDeployer:
    """
    Deploys functions on Docker Swarm.

    Attributes:
        dal (DockerAccessLayer): Connected Docker Access Layer.
        config (DeployerConfig): Deploy-time settings.
        compiler (DeploymentCompiler): Compiler of the service specifications.
    """

    def __init__(self, dal: DockerAccessLayer, deployer_config: Optional[DeployerConfig] = None) -> None:
        """
        Initializes the FunctionDeployer.

        Args:
            dal (DockerAccessLayer): Connected Docker Access Layer.
            deployer_config (Optional[DeployerConfig]): Deploy-time settings.
                Defaults to the settings of the fnswarm configuration file.
        """
        self.dal = dal
        self.config = deployer_config or DeployerConfig.from_config()
        self.compiler = DeploymentCompiler(self.config, NetworkResolver(dal, self.config.network_label))

    def deploy(self, request: DeploymentRequest) -> DeployOutcome:
        """
        Deploy a function.

        Args:
            request (DeploymentRequest): The function deployment request.

        Returns:
            DeployOutcome: Accepted outcome with the service ID, or rejected outcome with its reason.
        """
        try:
            response, diagnostics = self._deploy(request)
        except RegistryAuthError as err:
            logger.error(f"Error building registry auth configuration: {err}")
            return DeployOutcome(status=HTTP_BAD_REQUEST, message="Invalid registry auth")
        except FnSwarmException as err:
            logger.error(f"Deployment error: {err}")
            return DeployOutcome(status=HTTP_BAD_REQUEST, message=f"Deployment error: {err}")

        warnings = response.get('Warnings') or []
        if warnings:
            logger.warning(f"Function {request.service} deployed with warnings: {warnings}")

        logger.info(f"Function {request.service} deployed as service {response.get('ID')}")
        return DeployOutcome(status=HTTP_ACCEPTED,
                             service_id=response.get('ID'),
                             warnings=warnings,
                             diagnostics=diagnostics)

    def _deploy(self, request: DeploymentRequest) -> Tuple[dict, List[Diagnostic]]:
        encoded_auth = None
        if request.registry_auth:
            encoded_auth = build_encoded_auth_config(request.registry_auth, request.image,
                                                     default_namespace=self.config.default_registry_namespace)

        secrets = make_secrets_array(self.dal, request.secrets)
        result = self.compiler.compile(request, secrets)

        try:
            response = self.dal.create_service(result.spec, encoded_auth)
        except (docker.errors.DockerException, requests.exceptions.RequestException) as err:
            raise DeploymentError(str(err)) from err
        return response, result.diagnostics

    def handle_deploy_body(self, body: Union[str, bytes]) -> DeployOutcome:
        """
        Deploy a function from the JSON body of a deployment request.

        Args:
            body (Union[str, bytes]): Raw request body.

        Returns:
            DeployOutcome: Outcome of the deployment, rejected if the body can not be parsed.
        """
        try:
            request = parse_deployment_request(body)
        except InvalidRequestBody as err:
            logger.error(str(err))
            return DeployOutcome(status=HTTP_BAD_REQUEST, message="Invalid request body")
        return self.deploy(request)
