import os
import unittest
from unittest.mock import patch

from branchreport.config import DEFAULT_DATABASE_URL, Settings


class SettingsTests(unittest.TestCase):
    def _settings(self, env):
        with patch.dict(os.environ, env, clear=True):
            return Settings(_env_file=None)

    def test_defaults(self):
        settings = self._settings({})
        self.assertEqual(settings.database_url, DEFAULT_DATABASE_URL)
        self.assertEqual(settings.server_host, "0.0.0.0")
        self.assertEqual(settings.server_port, 8085)
        self.assertEqual(settings.api_prefix, "/api/branchreport")
        self.assertFalse(settings.response_envelope)

    def test_port_from_either_variable(self):
        self.assertEqual(self._settings({"PORT": "9000"}).server_port, 9000)
        self.assertEqual(self._settings({"SERVER_PORT": "9100"}).server_port, 9100)
        both = self._settings({"SERVER_PORT": "9100", "PORT": "9000"})
        self.assertEqual(both.server_port, 9100)

    def test_environment_overrides(self):
        settings = self._settings(
            {
                "DATABASE_URL": "sqlite+pysqlite:///:memory:",
                "SERVER_HOST": "127.0.0.1",
                "RESPONSE_ENVELOPE": "true",
            }
        )
        self.assertEqual(settings.database_url, "sqlite+pysqlite:///:memory:")
        self.assertEqual(settings.server_host, "127.0.0.1")
        self.assertTrue(settings.response_envelope)

    def test_legacy_postgres_scheme_normalized(self):
        settings = self._settings({"DATABASE_URL": "postgres://u:p@db:5432/app"})
        self.assertEqual(settings.database_url, "postgresql://u:p@db:5432/app")


if __name__ == "__main__":
    unittest.main()
