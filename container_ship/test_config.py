#!/usr/bin/env python3
"""
Unit tests for application configuration.
"""

import os
import unittest
from unittest.mock import patch

from container_ship.config import DEFAULT_MANIFEST_FILENAME, AppConfig


class TestAppConfig(unittest.TestCase):
    """Test configuration defaults, environment loading and validation."""

    def test_defaults(self):
        config = AppConfig()

        self.assertEqual(config.manifest_filename, DEFAULT_MANIFEST_FILENAME)
        self.assertFalse(config.write_manifest)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.max_speed, 25.5)
        self.assertEqual(config.max_containers, 100)
        self.assertEqual(config.max_weight, 50000.0)
        config.validate()

    @patch.dict(os.environ, {
        'SHIP_MANIFEST_FILE': 'custom.xlsx',
        'SHIP_LOG_LEVEL': 'DEBUG',
        'SHIP_MAX_SPEED': '18',
        'SHIP_MAX_CONTAINERS': '12',
        'SHIP_MAX_WEIGHT': '900.5',
    })
    def test_from_env(self):
        config = AppConfig.from_env()

        self.assertEqual(config.manifest_filename, 'custom.xlsx')
        self.assertTrue(config.write_manifest)
        self.assertEqual(config.log_level, 'DEBUG')
        self.assertEqual(config.max_speed, 18.0)
        self.assertEqual(config.max_containers, 12)
        self.assertEqual(config.max_weight, 900.5)

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_falls_back_to_defaults(self):
        self.assertEqual(AppConfig.from_env(), AppConfig())

    @patch.dict(os.environ, {'SHIP_MAX_CONTAINERS': 'many'})
    def test_from_env_rejects_bad_number(self):
        with self.assertRaises(ValueError):
            AppConfig.from_env()

    def test_invalid_log_level(self):
        with self.assertRaises(ValueError) as cm:
            AppConfig(log_level='LOUD').validate()

        self.assertIn("Invalid log level", str(cm.exception))

    def test_invalid_manifest_filename(self):
        with self.assertRaises(ValueError) as cm:
            AppConfig(manifest_filename='manifest.csv', write_manifest=True).validate()

        self.assertIn(".xlsx", str(cm.exception))

    def test_manifest_filename_ignored_when_not_writing(self):
        AppConfig(manifest_filename='manifest.csv').validate()

    def test_non_positive_ship_limits(self):
        for field, value in (('max_speed', 0), ('max_containers', -1), ('max_weight', 0.0)):
            with self.subTest(field=field):
                with self.assertRaises(ValueError) as cm:
                    AppConfig(**{field: value}).validate()
                self.assertIn(field, str(cm.exception))


if __name__ == '__main__':
    unittest.main()
