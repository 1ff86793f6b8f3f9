from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from pydantic import ValidationError

from notification_relay import logging_config
from notification_relay.config import RelaySettings


class RelaySettingsTests(unittest.TestCase):
    @mock.patch.dict(
        os.environ,
        {
            "EMAIL_USER": "relay@example.com",
            "EMAIL_PASS": "app-password",
            "TEXTBELT_KEY": "textbelt",
            "PORT": "8080",
            "SMTP_PORT": "465",
            "SMTP_USE_SSL": "true",
        },
        clear=True,
    )
    def test_reads_environment(self) -> None:
        settings = RelaySettings(_env_file=None)

        self.assertEqual(settings.email_user, "relay@example.com")
        self.assertEqual(settings.email_pass.get_secret_value(), "app-password")
        self.assertEqual(settings.textbelt_key.get_secret_value(), "textbelt")
        self.assertEqual(settings.app_port, 8080)
        self.assertEqual(settings.smtp_port, 465)
        self.assertTrue(settings.smtp_use_ssl)
        self.assertTrue(settings.smtp_configured)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults_embed_no_credentials(self) -> None:
        settings = RelaySettings(_env_file=None)

        self.assertIsNone(settings.email_user)
        self.assertIsNone(settings.email_pass)
        self.assertIsNone(settings.textbelt_key)
        self.assertIsNone(settings.default_sender)
        self.assertFalse(settings.smtp_configured)
        self.assertEqual(settings.textbelt_url, "https://textbelt.com/text")
        self.assertEqual(settings.app_port, 3000)

    @mock.patch.dict(os.environ, {"TEXTBELT_KEY": "  ", "EMAIL_USER": ""}, clear=True)
    def test_blank_values_count_as_missing(self) -> None:
        settings = RelaySettings(_env_file=None)

        self.assertIsNone(settings.textbelt_key)
        self.assertIsNone(settings.email_user)

    @mock.patch.dict(
        os.environ,
        {"EMAIL_USER": "relay@example.com", "EMAIL_FROM": "notices@example.org"},
        clear=True,
    )
    def test_default_sender_prefers_email_from(self) -> None:
        self.assertEqual(RelaySettings(_env_file=None).default_sender, "notices@example.org")

    @mock.patch.dict(os.environ, {"LOG_LEVEL": "chatty"}, clear=True)
    def test_rejects_unknown_log_level(self) -> None:
        with self.assertRaises(ValidationError):
            RelaySettings(_env_file=None)

    @mock.patch.dict(os.environ, {"SMTP_PORT": "70000"}, clear=True)
    def test_rejects_out_of_range_port(self) -> None:
        with self.assertRaises(ValidationError):
            RelaySettings(_env_file=None)


class LoggingConfigTests(unittest.TestCase):
    def test_console_only_without_log_dir(self) -> None:
        config = logging_config._default_config("INFO", None)

        self.assertEqual(config["root"]["handlers"], ["console"])

    def test_file_handler_when_log_dir_set(self) -> None:
        config = logging_config._default_config("DEBUG", Path("/tmp/relay-logs"))

        self.assertEqual(config["root"]["handlers"], ["console", "file"])
        self.assertEqual(config["handlers"]["file"]["filename"], str(Path("/tmp/relay-logs") / "relay.log"))
        self.assertEqual(config["root"]["level"], "DEBUG")


if __name__ == "__main__":
    unittest.main()
