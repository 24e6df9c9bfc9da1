"""
Function Deployment Request Schemas

This module defines the Pydantic models describing a function deployment
request, as posted by an OpenFaaS-style gateway or written by a user in a
YAML file for the `fns` command line interface.

Components:
-----------
- `FunctionResources`: Memory and CPU strings of a resource group.
- `DeploymentRequest`: The complete function deployment request.
- `parse_deployment_request`: Parses a JSON request body.
- `get_request_from_config_file`: Loads a request from a YAML file.

Field names follow the JSON wire format of the gateway (camelCase), while
Python code uses the snake_case attribute names:

    >>> req = DeploymentRequest.model_validate({
    ...     "service": "figlet",
    ...     "image": "functions/figlet:latest",
    ...     "envProcess": "figlet",
    ...     "limits": {"memory": "40m"}
    ... })
    >>> req.env_process
    'figlet'

YAML Example:
-------------
.. code-block:: yaml

    function:
      service: figlet
      image: functions/figlet:latest
      envProcess: figlet
      labels:
        com.openfaas.scale.min: "2"
      annotations:
        topic: text
      limits:
        memory: 40m
      readOnlyRootFilesystem: true
"""

from pydantic import BaseModel, Field, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union
from fnswarm.config import load_yaml
from fnswarm.exceptions import InvalidRequestBody
from fnswarm.models.user_notifications import user_notify


def _number_to_str(value: Any) -> Any:
    """ YAML numbers (e.g. `cpu: 100`) are accepted for string fields. """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class FunctionResources(BaseModel):
    """ Memory and CPU of a resource group (limits or requests). """
    memory: Optional[str] = Field(
        default=None,
        description="Memory size (e.g., '40m', '1g')."
    )
    cpu: Optional[str] = Field(
        default=None,
        description="CPU in nano CPUs as a base-10 integer (e.g., '500000000' for half a CPU)."
    )

    model_config = ConfigDict(frozen=True)

    @field_validator('memory', 'cpu', mode='before')
    def validate_quantity(cls, value: Any) -> Any:
        return _number_to_str(value)


class DeploymentRequest(BaseModel):
    """ Function deployment request. """
    service: str = Field(..., description="Name of the function (Docker service name)")
    image: str = Field(..., description="Docker image of the function")
    network: Optional[str] = Field(
        default=None,
        description="Network to attach the function to. Looked up in the swarm when missing."
    )
    env_process: Optional[str] = Field(
        default=None,
        description="Process run by the function watchdog (exported as 'fprocess')"
    )
    env_vars: Optional[Dict[str, str]] = Field(
        default=None,
        description="Environment variables of the function"
    )
    labels: Optional[Dict[str, str]] = Field(
        default=None,
        description="Labels of the function service"
    )
    annotations: Optional[Dict[str, str]] = Field(
        default=None,
        description="Annotations, stored as prefixed labels"
    )
    secrets: Optional[List[str]] = Field(
        default=None,
        description="Names of swarm secrets exposed to the function"
    )
    limits: Optional[FunctionResources] = Field(
        default=None,
        description="Maximum resources the function is allowed to consume"
    )
    requests: Optional[FunctionResources] = Field(
        default=None,
        description="Resources reserved for the function"
    )
    constraints: Optional[List[str]] = Field(
        default=None,
        description="Placement constraints (e.g., ['node.role == worker'])"
    )
    read_only_root_filesystem: bool = Field(
        default=False,
        description="Mount the root filesystem read-only (a writable tmpfs is provided instead)"
    )
    registry_auth: Optional[str] = Field(
        default=None,
        description="Base64 encoded 'user:password' for a private registry"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator('env_vars', 'labels', 'annotations', mode='before')
    def validate_mapping(cls, value: Any) -> Any:
        """
        Converts numeric values of the mappings to strings.

        Allows YAML files like `com.openfaas.scale.min: 2`.
        """
        if isinstance(value, dict):
            return {key: _number_to_str(val) for key, val in value.items()}
        return value


def parse_deployment_request(body: Union[str, bytes]) -> DeploymentRequest:
    """
    Parse the JSON body of a deployment request.

    Args:
        body (Union[str, bytes]): Raw request body.

    Returns:
        DeploymentRequest: The validated request.

    Raises:
        InvalidRequestBody: If the body is not JSON or does not describe a valid request.
    """
    try:
        return DeploymentRequest.model_validate_json(body)
    except ValidationError as err:
        raise InvalidRequestBody(f"Error parsing request: {err}") from err


def get_request_from_config_file(yaml_config_file: str) -> Optional[DeploymentRequest]:
    """
    Load and validate a function deployment request from a YAML file.

    The file holds the request under a top level `function` key.

    Args:
        yaml_config_file (str): Path to the YAML file.

    Returns:
        Optional[DeploymentRequest]: The validated request, or `None` if validation fails.

    Note:
        In case of validation errors, user notifications will be triggered and `None` will be returned.
    """
    cfg = load_yaml(yaml_config_file)

    if not isinstance(cfg, dict) or 'function' not in cfg:
        user_notify.fail(f"Provided YAML configuration file {yaml_config_file} has no 'function' entry")
        return None

    try:
        return DeploymentRequest.model_validate(cfg['function'])
    except ValidationError as err:
        user_notify.fail(f"Provided YAML configuration file has invalid format\n{err}")
        return None
