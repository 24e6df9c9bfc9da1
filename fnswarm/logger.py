"""
fnswarm Logger
==============

Pre-configured loggers for the fnswarm deployer.

Usage
-----

.. code-block:: python

    from fnswarm.logger import get_logger

    logger = get_logger(__name__)
    logger.warning("Error parsing memory limit: 40x")

Configuration
-------------

- The log level can be set via the environment variable ``FNSWARM_LOG_LEVEL`` (default: ``INFO``).
- The logger outputs to the standard error stream.
- Only one handler is attached to the ``fnswarm`` root logger to prevent duplicate logs.
"""

import logging
import os


def get_logger(name: str = "fnswarm") -> logging.Logger:
    """
    Returns a configured logger instance.

    Loggers below ``fnswarm`` (e.g. ``fnswarm.labels``) propagate to the configured ``fnswarm`` logger.
    """
    root = logging.getLogger("fnswarm")

    # Only configure if it has no handlers (prevents duplicate logs)
    if not root.handlers:
        log_level = os.getenv("FNSWARM_LOG_LEVEL", "INFO").upper()
        root.setLevel(log_level)

        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return logging.getLogger(name)

