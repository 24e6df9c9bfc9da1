import unittest
from unittest.mock import patch
from pydantic import ValidationError
from fnswarm.schemas.deployer_config import DeployerConfig


class TestDeployerConfig(unittest.TestCase):
    """
    Test class for the DeployerConfig schema
    """

    def test_defaults(self):
        """ Test default settings """
        cfg = DeployerConfig()
        self.assertEqual(cfg.max_restarts, 5)
        self.assertEqual(cfg.restart_delay_ns, 5_000_000_000)
        self.assertEqual(cfg.annotation_label_prefix, "com.openfaas.annotations.")
        self.assertEqual(cfg.default_constraints, ["node.platform.os == linux"])

    def test_negative_values_raise(self):
        """ Test restart settings can not be negative """
        with self.assertRaises(ValidationError):
            DeployerConfig(max_restarts=-1)
        with self.assertRaises(ValidationError):
            DeployerConfig(restart_delay=-1)

    def test_unknown_setting_raises(self):
        """ Test unknown settings are refused """
        with self.assertRaises(ValidationError):
            DeployerConfig(max_restart=3)

    @patch("fnswarm.schemas.deployer_config.config")
    def test_from_config(self, mock_config):
        """ Test settings are read from the configuration module """
        mock_config.FNSWARM_MAX_RESTARTS = 2
        mock_config.FNSWARM_RESTART_DELAY = 1.5
        mock_config.DEFAULT_REGISTRY_NAMESPACE = "registry.example.com"
        mock_config.FUNCTION_LABEL = "com.openfaas.function"
        mock_config.ANNOTATION_LABEL_PREFIX = "annotations/"
        mock_config.SCALE_MIN_LABEL = "com.openfaas.scale.min"
        mock_config.NETWORK_LABEL = "faas"
        mock_config.DEFAULT_CONSTRAINTS = ["node.role == worker"]
        mock_config.READ_ONLY_TMPFS_TARGET = "/tmp"
        mock_config.FPROCESS_ENV = "fprocess"

        cfg = DeployerConfig.from_config()

        self.assertEqual(cfg.max_restarts, 2)
        self.assertEqual(cfg.restart_delay_ns, 1_500_000_000)
        self.assertEqual(cfg.default_registry_namespace, "registry.example.com")
        self.assertEqual(cfg.annotation_label_prefix, "annotations/")
        self.assertEqual(cfg.network_label, "faas")
        self.assertEqual(cfg.default_constraints, ["node.role == worker"])
