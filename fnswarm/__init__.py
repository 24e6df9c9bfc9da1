""" fnswarm package. """
from dotenv import load_dotenv
from importlib.metadata import version

# load env vars from .fnsenv
load_dotenv('.fnsenv')


from fnswarm.spec_builder import DeploymentCompiler, CompileResult
from fnswarm.function_deployer import FunctionDeployer, DeployOutcome
from fnswarm.registry_auth import build_encoded_auth_config
from fnswarm.schemas.deployer_config import DeployerConfig
from fnswarm.schemas.requests import DeploymentRequest


try:
    __version__ = version('fnswarm')
except Exception:
    __version__ = "unknown"
