import os
import unittest
from unittest.mock import patch
from fnswarm.config import expandvars_with_defaults


class TestExpandVarsWithDefaults(unittest.TestCase):
    """
    Test cases for expandvars_with_defaults
    """

    @patch.dict(os.environ, {"DOCKER_HOST_VAR": "tcp://manager:2375"})
    def test_set_variable(self):
        """ Test set variables are expanded """
        self.assertEqual(expandvars_with_defaults("url: ${DOCKER_HOST_VAR}"), "url: tcp://manager:2375")
        self.assertEqual(expandvars_with_defaults("url: ${DOCKER_HOST_VAR:-unix:///sock}"), "url: tcp://manager:2375")

    @patch.dict(os.environ, {}, clear=True)
    def test_unset_variable(self):
        """ Test unset variables use their default, or expand to an empty string """
        self.assertEqual(expandvars_with_defaults("${MISSING:-5}"), "5")
        self.assertEqual(expandvars_with_defaults("${MISSING:-unix:///var/run/docker.sock}"), "unix:///var/run/docker.sock")
        self.assertEqual(expandvars_with_defaults("a${MISSING}b"), "ab")

    def test_text_without_variables(self):
        """ Test text without variables is unchanged """
        self.assertEqual(expandvars_with_defaults("prefix: com.openfaas.annotations."), "prefix: com.openfaas.annotations.")
