import unittest
import docker
import requests
from unittest.mock import MagicMock
from fnswarm.exceptions import SecretsResolutionError
from fnswarm.secrets import make_secrets_array


class TestMakeSecretsArray(unittest.TestCase):
    """
    Test class for the make_secrets_array function
    """

    def test_no_secrets(self):
        """ Test no secrets give an empty list without querying the swarm """
        dal = MagicMock()
        self.assertEqual(make_secrets_array(dal, None), [])
        self.assertEqual(make_secrets_array(dal, []), [])
        dal.list_secrets.assert_not_called()

    def test_secrets_are_resolved(self):
        """ Test secret references are built in request order """
        dal = MagicMock()
        dal.list_secrets.return_value = {"db-password": "id2", "api-key": "id1"}

        references = make_secrets_array(dal, ["api-key", "db-password"])

        dal.list_secrets.assert_called_once_with(["api-key", "db-password"])
        self.assertEqual([ref.to_api() for ref in references], [
            {"File": {"Name": "api-key", "UID": "0", "GID": "0", "Mode": 0o444},
             "SecretID": "id1", "SecretName": "api-key"},
            {"File": {"Name": "db-password", "UID": "0", "GID": "0", "Mode": 0o444},
             "SecretID": "id2", "SecretName": "db-password"},
        ])

    def test_missing_secret_raises(self):
        """ Test an unknown secret raises SecretsResolutionError """
        dal = MagicMock()
        dal.list_secrets.return_value = {"api-key": "id1"}
        with self.assertRaises(SecretsResolutionError) as cm:
            make_secrets_array(dal, ["api-key", "db-password"])
        self.assertEqual(str(cm.exception), "secret not found: db-password")

    def test_duplicate_secret_raises(self):
        """ Test a secret requested twice raises SecretsResolutionError """
        dal = MagicMock()
        dal.list_secrets.return_value = {"api-key": "id1"}
        with self.assertRaises(SecretsResolutionError) as cm:
            make_secrets_array(dal, ["api-key", "api-key"])
        self.assertIn("duplicate secret target for api-key", str(cm.exception))

    def test_query_failure_raises(self):
        """ Test a failing secret query raises SecretsResolutionError """
        dal = MagicMock()
        dal.list_secrets.side_effect = docker.errors.APIError("server error")
        with self.assertRaises(SecretsResolutionError):
            make_secrets_array(dal, ["api-key"])

    def test_connection_failure_raises(self):
        """ Test a lost connection to the daemon raises SecretsResolutionError """
        dal = MagicMock()
        dal.list_secrets.side_effect = requests.exceptions.ConnectionError("refused")
        with self.assertRaises(SecretsResolutionError) as cm:
            make_secrets_array(dal, ["api-key"])
        self.assertIn("refused", str(cm.exception))
