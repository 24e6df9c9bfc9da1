"""
Deployer configuration.

Deploy-time settings shared by all compilations. Defaults are read from the
fnswarm configuration (`fnswarm/config/fnswarm.yml`) with
:meth:`DeployerConfig.from_config`, tests and embedding applications can
construct the model directly.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import List
import fnswarm.config as config


class DeployerConfig(BaseModel):
    """ Read-only settings of the function deployment compiler. """
    max_restarts: int = Field(default=5, ge=0, description="Maximum restart attempts of a function task")
    restart_delay: float = Field(default=5.0, ge=0, description="Delay between restarts, in seconds")
    default_registry_namespace: str = Field(
        default="docker.io",
        description="Registry prepended to image references without registry host"
    )
    function_label: str = Field(default="com.openfaas.function", description="Label identifying the function")
    annotation_label_prefix: str = Field(
        default="com.openfaas.annotations.",
        description="Prefix of the labels storing annotations"
    )
    scale_min_label: str = Field(default="com.openfaas.scale.min", description="Label holding the replica count")
    network_label: str = Field(default="openfaas=true", description="Label filter of the default network")
    default_constraints: List[str] = Field(
        default_factory=lambda: ["node.platform.os == linux"],
        description="Placement constraints used when a request has none"
    )
    read_only_tmpfs_target: str = Field(
        default="/tmp",
        description="Writable tmpfs mounted for read-only root filesystems"
    )
    fprocess_env: str = Field(default="fprocess", description="Environment variable holding the function process")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def restart_delay_ns(self) -> int:
        """ Restart delay in nanoseconds, as expected by the Docker Engine API. """
        return int(round(self.restart_delay * 1_000_000_000))

    @classmethod
    def from_config(cls) -> "DeployerConfig":
        """ Build the configuration from the fnswarm configuration file. """
        return cls(
            max_restarts=config.FNSWARM_MAX_RESTARTS,
            restart_delay=config.FNSWARM_RESTART_DELAY,
            default_registry_namespace=config.DEFAULT_REGISTRY_NAMESPACE,
            function_label=config.FUNCTION_LABEL,
            annotation_label_prefix=config.ANNOTATION_LABEL_PREFIX,
            scale_min_label=config.SCALE_MIN_LABEL,
            network_label=config.NETWORK_LABEL,
            default_constraints=config.DEFAULT_CONSTRAINTS,
            read_only_tmpfs_target=config.READ_ONLY_TMPFS_TARGET,
            fprocess_env=config.FPROCESS_ENV
        )
