import unittest
from unittest.mock import patch, MagicMock
from click.testing import CliRunner
from fnswarm.diagnostics import Diagnostic, DiagnosticKind
from fnswarm.fns.deploy import click_deploy
from fnswarm.function_deployer import DeployOutcome
from fnswarm.schemas.requests import DeploymentRequest


class TestClickDeploy(unittest.TestCase):
    """
    Unit tests for fns deploy command
    """

    def setUp(self):
        self.request = DeploymentRequest(service="figlet", image="alice/figlet:latest")

    @patch("fnswarm.fns.deploy.user_notify")
    @patch("fnswarm.fns.deploy.FunctionDeployer")
    @patch("fnswarm.fns.deploy.get_request_from_config_file")
    def test_deploy_success(self, mock_get_request, MockDeployer, mock_user_notify):
        """ Test a deployed function is reported """
        mock_get_request.return_value = self.request
        diagnostic = Diagnostic(kind=DiagnosticKind.NETWORK_LOOKUP_FAILED, field="network",
                                message="Error querying networks")
        MockDeployer.return_value.deploy.return_value = DeployOutcome(
            status=202, service_id="service-id", warnings=["slow registry"], diagnostics=[diagnostic]
        )

        runner = CliRunner()
        with runner.isolated_filesystem():
            open("figlet.yml", "w").close()
            result = runner.invoke(click_deploy, ["-f", "figlet.yml"])

        self.assertEqual(result.exit_code, 0)
        MockDeployer.return_value.deploy.assert_called_once_with(self.request)
        mock_user_notify.warning.assert_any_call("Error querying networks")
        mock_user_notify.warning.assert_any_call("slow registry")
        self.assertIn("service-id", mock_user_notify.success.call_args[0][0])

    @patch("fnswarm.fns.deploy.user_notify")
    @patch("fnswarm.fns.deploy.FunctionDeployer")
    @patch("fnswarm.fns.deploy.get_request_from_config_file")
    def test_deploy_rejected(self, mock_get_request, MockDeployer, mock_user_notify):
        """ Test a rejected deployment fails the command """
        mock_get_request.return_value = self.request
        MockDeployer.return_value.deploy.return_value = DeployOutcome(status=400, message="Invalid registry auth")

        runner = CliRunner()
        with runner.isolated_filesystem():
            open("figlet.yml", "w").close()
            result = runner.invoke(click_deploy, ["-f", "figlet.yml"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid registry auth", mock_user_notify.fail.call_args[0][0])
        mock_user_notify.success.assert_not_called()

    @patch("fnswarm.fns.deploy.FunctionDeployer")
    @patch("fnswarm.fns.deploy.get_request_from_config_file", return_value=None)
    def test_deploy_invalid_file(self, mock_get_request, MockDeployer):
        """ Test nothing is deployed from an invalid function file """
        runner = CliRunner()
        with runner.isolated_filesystem():
            open("figlet.yml", "w").close()
            result = runner.invoke(click_deploy, ["-f", "figlet.yml"])

        self.assertEqual(result.exit_code, 1)
        MockDeployer.assert_not_called()
