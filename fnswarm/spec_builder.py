"""
Function Deployment Compiler

Compiles a function deployment request into a Docker Swarm service
specification.

Key Components:
---------------
- **DeploymentCompiler**: Builds the :class:`ServiceSpec` of a request from the
  read-only :class:`DeployerConfig` it was constructed with.
- **CompileResult**: The compiled spec together with the diagnostics of the
  failures absorbed while compiling.

Compilation rules:
------------------
- Placement constraints of the request, or the default linux-only constraint.
- Labels merged from system labels, user labels and prefixed annotations;
  an annotation clashing with a label aborts with `InvalidLabelConfiguration`.
- Resource limits and reservations, dropping fields that can not be parsed.
- Network of the request, or the default function network when a
  :class:`NetworkResolver` is configured.
- Restart policy `any` with the configured maximum attempts and delay.
- A tmpfs mount when the root filesystem is read-only.
- `fprocess` followed by the user environment variables, in request order.
- Replicas from the `com.openfaas.scale.min` label, 1 otherwise.

Usage Example:
--------------
.. code-block:: python

    compiler = DeploymentCompiler(DeployerConfig.from_config(), NetworkResolver(dal))
    result = compiler.compile(request)
    dal.create_service(result.spec)

Compiling does not modify the request nor keep any reference to the result,
a compiler can be shared between threads.
"""

import re
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from fnswarm.diagnostics import Diagnostic, DiagnosticKind, record
from fnswarm.exceptions import InvalidLabelConfiguration, LabelAnnotationConflict
from fnswarm.labels import build_labels
from fnswarm.networks import NetworkResolver
from fnswarm.resources import build_resources
from fnswarm.schemas.deployer_config import DeployerConfig
from fnswarm.schemas.requests import DeploymentRequest
from fnswarm.schemas.service_spec import (ServiceSpec, TaskSpec, ContainerSpec, RestartPolicy, Placement,
                                          NetworkAttachmentConfig, Mount, SecretReference,
                                          ServiceMode, ReplicatedService)


_integer_pattern = re.compile(r'[+-]?\d+', re.ASCII)


class CompileResult(BaseModel):
    """ Compiled service specification. """
    spec: ServiceSpec = Field(..., description="Docker Swarm service specification")
    diagnostics: List[Diagnostic] = Field(
        default_factory=list,
        description="Non-fatal failures absorbed while compiling"
    )


def build_env(env_process: Optional[str], env_vars: Optional[Dict[str, str]],
              fprocess_env: str = "fprocess") -> List[str]:
    """
    Environment variables of a function in `KEY=VALUE` format.

    The function process comes first, followed by the user variables in request order.
    """
    env = []
    if env_process:
        env.append(f"{fprocess_env}={env_process}")

    if env_vars:
        for key, value in env_vars.items():
            env.append(f"{key}={value}")
    return env


class DeploymentCompiler:
    """
    Compiles function deployment requests into Docker Swarm service specifications.

    Attributes:
        config (DeployerConfig): Deploy-time settings.
        network_resolver (Optional[NetworkResolver]): Looks up the default network of functions
            deployed without one. Without resolver such functions get no network attachment.
    """

    def __init__(self, config: DeployerConfig, network_resolver: Optional[NetworkResolver] = None) -> None:
        self.config = config
        self.network_resolver = network_resolver

    def compile(self, request: DeploymentRequest,
                secrets: Optional[List[SecretReference]] = None) -> CompileResult:
        """
        Compile a deployment request.

        Args:
            request (DeploymentRequest): The function deployment request.
            secrets (Optional[List[SecretReference]]): Resolved secrets of the function.

        Returns:
            CompileResult: The service specification and the diagnostics of absorbed failures.

        Raises:
            InvalidLabelConfiguration: If an annotation clashes with a label.
        """
        diagnostics: List[Diagnostic] = []

        if request.constraints:
            constraints = list(request.constraints)
        else:
            constraints = list(self.config.default_constraints)

        try:
            labels = build_labels(request.service, request.labels, request.annotations,
                                  annotation_prefix=self.config.annotation_label_prefix,
                                  function_label=self.config.function_label)
        except LabelAnnotationConflict as err:
            raise InvalidLabelConfiguration(str(err)) from err

        resources = build_resources(request.limits, request.requests, diagnostics)

        network = request.network
        if not network and self.network_resolver is not None:
            network = self.network_resolver.resolve(diagnostics)

        container_spec = ContainerSpec(
            image=request.image,
            labels=dict(labels),
            secrets=list(secrets) if secrets else None,
            read_only=request.read_only_root_filesystem
        )

        if request.read_only_root_filesystem:
            container_spec.mounts = [Mount(type="tmpfs", target=self.config.read_only_tmpfs_target)]

        env = build_env(request.env_process, request.env_vars, self.config.fprocess_env)
        if env:
            container_spec.env = env

        spec = ServiceSpec(
            name=request.service,
            labels=labels,
            task_template=TaskSpec(
                container_spec=container_spec,
                resources=resources,
                restart_policy=RestartPolicy(
                    condition="any",
                    delay=self.config.restart_delay_ns,
                    max_attempts=self.config.max_restarts
                ),
                placement=Placement(constraints=constraints),
                networks=[NetworkAttachmentConfig(target=network)] if network else None
            ),
            mode=ServiceMode(replicated=ReplicatedService(replicas=self.min_replicas(request, diagnostics)))
        )

        return CompileResult(spec=spec, diagnostics=diagnostics)

    def min_replicas(self, request: DeploymentRequest,
                     diagnostics: Optional[List[Diagnostic]] = None) -> int:
        """
        Replica count of a function.

        Read from the scale label of the request. A missing label or a value that is not
        a non-negative integer results in 1 replica.
        """
        replicas = 1

        if request.labels and self.config.scale_min_label in request.labels:
            value = request.labels[self.config.scale_min_label]
            if _integer_pattern.fullmatch(value) and int(value) >= 0:
                replicas = int(value)
            else:
                record(diagnostics, DiagnosticKind.INVALID_SCALE_LABEL,
                       f"labels.{self.config.scale_min_label}", value,
                       f"Error parsing scale label {self.config.scale_min_label}: '{value}' is not a replica count")
        return replicas
