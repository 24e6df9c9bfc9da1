"""
fnswarm Command Line Interface.

Usage: fns [OPTIONS] COMMAND [ARGS]...
Help: fns --help


Becomes available after installing fnswarm like

> pip install .

or (during development)

> pip install -e .
"""

import sys
import socket
import paramiko.ssh_exception
from fnswarm.fns.cli import cli
from fnswarm.models.user_notifications import user_notify
from fnswarm.docker.docker_access_layer import dal
import fnswarm.config as Config


def init_environment(connect_docker: bool = True) -> bool:
    """
    Setup fnswarm environment (notifications, Docker).

    Args:
        connect_docker (bool, optional): Whether to connect to the Docker Swarm manager. Defaults to True.

    Returns:
        bool: `False` if the connection to the Docker daemon failed.
    """
    user_notify.setup(
        success_msg=lambda msg: print(f"{Config.FNS_SUCCESS}{msg}{Config.FNS_END}"),
        fail_msg=lambda msg: print(f"{Config.FNS_FAIL}{msg}{Config.FNS_END}"),
        info_msg=print,
        warning_msg=lambda msg: print(f"{Config.FNS_WARNING}{msg}{Config.FNS_END}")
    )

    if connect_docker:
        try:
            dal.connect()
        except (paramiko.ssh_exception.AuthenticationException,
                paramiko.ssh_exception.NoValidConnectionsError,
                socket.gaierror) as e:
            user_notify.fail(f"Connection to {Config.DOCKER_URL} failed: {e}")
            return False

    return True


def main():
    """ Command line interface of fnswarm. """
    skip_docker_connection = {"--help", "version", "config", "compile"}
    if len(sys.argv) == 1 or sys.argv[1] in skip_docker_connection:
        init_environment(connect_docker=False)
        cli()
        return

    if not init_environment():
        exit(1)

    cli()


if __name__ == '__main__':
    main()
