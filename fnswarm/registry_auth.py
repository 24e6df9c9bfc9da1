"""
Registry authentication for private function images.

Builds the encoded registry auth configuration Docker Swarm needs to pull an
image from a private registry (sent as the `X-Registry-Auth` header of the
service create call).

Example:
    .. code-block:: python

        auth = build_encoded_auth_config(
            base64.b64encode(b"alice:secret").decode(),
            "alice/figlet:latest"
        )
"""

import base64
import binascii
import json
import re
from docker.auth import resolve_repository_name
from docker.errors import InvalidRepository
from typing import Tuple
from fnswarm.exceptions import InvalidReference, UnresolvableRegistry, InvalidEncoding, MalformedCredentials


DEFAULT_NAMESPACE = "docker.io"
NAME_TOTAL_LENGTH_MAX = 255

_domain_component = r'(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])'
_domain = _domain_component + r'(?:\.' + _domain_component + r')*(?::[0-9]+)?'
_path_component = r'[a-z0-9]+(?:(?:[._]|__|[-]*)[a-z0-9]+)*'
_tag = r'[\w][\w.-]{0,127}'
_digest = r'[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9A-Fa-f]{32,}'

_reference_pattern = re.compile(
    r'(?P<name>(?:' + _domain + r'/)?' + _path_component + r'(?:/' + _path_component + r')*)'
    r'(?::(?P<tag>' + _tag + r'))?'
    r'(?:@(?P<digest>' + _digest + r'))?'
)


def split_domain(name: str) -> Tuple[str, str]:
    """
    Split a repository name into its registry domain and remote path.

    The first component is a registry domain only if it contains a '.' or a ':' or is 'localhost'.

    Returns:
        Tuple[str, str]: domain (empty when the name has none) and remote path.
    """
    parts = name.split('/', 1)
    if len(parts) == 1 or ('.' not in parts[0] and ':' not in parts[0] and parts[0] != 'localhost'):
        return '', name
    return parts[0], parts[1]


def parse_named_reference(image: str) -> str:
    """
    Validate a fully qualified image reference and return its repository name.

    Args:
        image (str): Image reference such as 'docker.io/alice/figlet:latest'.

    Returns:
        str: The repository name without tag or digest (e.g., 'docker.io/alice/figlet').

    Raises:
        InvalidReference: If the reference does not follow the image reference grammar
                          or is not in its canonical form.
    """
    match = _reference_pattern.fullmatch(image)
    if match is None:
        raise InvalidReference(f"invalid reference format: '{image}'")

    name = match.group('name')
    if len(name) > NAME_TOTAL_LENGTH_MAX:
        raise InvalidReference(f"repository name must not be more than {NAME_TOTAL_LENGTH_MAX} characters")

    domain, remote = split_domain(name)
    if not domain or domain == 'index.docker.io' or (domain == DEFAULT_NAMESPACE and '/' not in remote):
        raise InvalidReference(f"repository name must be canonical: '{image}'")

    return name


def user_password_from_basic_auth(basic_auth_b64: str) -> Tuple[str, str]:
    """
    Extract user name and password from a base64 encoded 'user:password' string.

    Raises:
        InvalidEncoding: If the string is not valid base64 or not UTF-8 once decoded.
        MalformedCredentials: If the decoded string contains no ':'.
    """
    try:
        decoded = base64.b64decode(basic_auth_b64, validate=True).decode('utf-8')
    except (binascii.Error, ValueError) as err:
        raise InvalidEncoding(f"invalid basic auth encoding: {err}") from err

    user, sep, password = decoded.partition(':')
    if not sep:
        raise MalformedCredentials("Invalid basic auth")
    return user, password


def build_encoded_auth_config(basic_auth_b64: str, image: str,
                              default_namespace: str = DEFAULT_NAMESPACE) -> str:
    """
    Build the encoded registry auth configuration of a function image.

    If the image reference includes no registry (e.g., 'alice/figlet'), `default_namespace`
    is prepended ('docker.io/alice/figlet').

    Args:
        basic_auth_b64 (str): Base64 encoded 'user:password'.
        image (str): Image reference of the function.
        default_namespace (str): Registry used when the reference includes none.

    Returns:
        str: URL-safe base64 encoded JSON auth configuration.

    Raises:
        InvalidReference: If the image reference is invalid.
        UnresolvableRegistry: If the registry index can not be resolved.
        InvalidEncoding: If `basic_auth_b64` is not valid base64.
        MalformedCredentials: If the decoded credentials are not of the form 'user:password'.
    """
    if len(image.split('/')) < 3:
        image = f"{default_namespace}/{image}"

    name = parse_named_reference(image)

    try:
        index_name, _ = resolve_repository_name(name)
    except InvalidRepository as err:
        raise UnresolvableRegistry(str(err)) from err

    user, password = user_password_from_basic_auth(basic_auth_b64)

    auth_config = {'username': user, 'password': password, 'serveraddress': index_name}
    # empty fields are left out like in the Docker client
    auth_config = {key: value for key, value in auth_config.items() if value}
    return base64.urlsafe_b64encode(json.dumps(auth_config, separators=(",", ":")).encode('utf-8')).decode('ascii')
