"""
fnswarm exceptions.

Fatal errors abort a deployment before anything is submitted to Docker Swarm.
`InvalidQuantity` is the only error the compiler absorbs: the offending
resource field is dropped and a diagnostic is recorded instead.
"""


class FnSwarmException(Exception):
    """ Base class for all fnswarm errors. """
    pass


class InvalidRequestBody(FnSwarmException):
    """ The deployment request body is not a valid function request. """
    pass


class SecretsResolutionError(FnSwarmException):
    """ Requested secrets could not be resolved in the swarm. """
    pass


class LabelAnnotationConflict(FnSwarmException):
    """ An annotation key, once prefixed, clashes with an existing label. """

    def __init__(self, key: str, label_key: str):
        self.key = key
        self.label_key = label_key
        super().__init__(f"Key {key} can not be used as a label as it clashes with annotation {label_key}")


class InvalidLabelConfiguration(FnSwarmException):
    """ Labels and annotations of a request can not be merged. """
    pass


class InvalidQuantity(FnSwarmException, ValueError):
    """ A memory or CPU quantity could not be parsed. """
    pass


class RegistryAuthError(FnSwarmException):
    """ Base class for errors while building the registry auth configuration. """
    pass


class InvalidReference(RegistryAuthError):
    """ The image reference does not follow the reference grammar. """
    pass


class UnresolvableRegistry(RegistryAuthError):
    """ The image reference does not map to a registry index. """
    pass


class InvalidEncoding(RegistryAuthError):
    """ The basic auth string is not valid base64. """
    pass


class MalformedCredentials(RegistryAuthError):
    """ The decoded basic auth string is not of the form `user:password`. """
    pass


class DeploymentError(FnSwarmException):
    """ Docker Swarm refused to create the service. """
    pass
