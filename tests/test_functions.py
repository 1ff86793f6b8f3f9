from __future__ import annotations

import json
import unittest
from typing import Any
from unittest import mock

from helpers import RecordingEvents, make_settings

from notification_relay.adapters.functions import (
    handle_email_function,
    handle_sms_function,
    invoke_sms_function,
)


def make_email_body(**overrides: Any) -> str:
    base: dict[str, Any] = {
        "to": "person@example.com",
        "from": "care@example.com",
        "senderName": "Care Team",
        "subject": "Visit reminder",
        "content": "Hello!\nSee you tomorrow.",
    }
    return json.dumps(base | overrides)


def make_sms_body(**overrides: Any) -> str:
    base: dict[str, Any] = {
        "to": "+15555550123",
        "from": "Care Team",
        "content": "See you tomorrow.",
    }
    return json.dumps(base | overrides)


class EmailFunctionTests(unittest.TestCase):
    def test_handle_email_function_returns_message_id(self) -> None:
        events = RecordingEvents()

        def send_email(**kwargs: Any) -> dict[str, Any]:
            return {"message_id": "<msg-1@example.com>", "accepted": [kwargs["to_email"]]}

        response = handle_email_function(make_email_body(), send_email=send_email, events=events)

        self.assertEqual(response["status_code"], 200)
        self.assertEqual(response["body"], {"success": True, "messageId": "<msg-1@example.com>"})
        self.assertEqual(len(events.sent_events), 1)

    def test_handle_email_function_reports_provider_failure(self) -> None:
        def send_email(**kwargs: Any) -> dict[str, Any]:
            raise RuntimeError("Invalid login")

        response = handle_email_function(
            make_email_body(), send_email=send_email, events=RecordingEvents()
        )

        self.assertEqual(response["status_code"], 500)
        self.assertEqual(response["body"], {"success": False, "error": "Invalid login"})

    def test_handle_email_function_malformed_body_is_a_failure(self) -> None:
        calls: list[dict[str, Any]] = []
        events = RecordingEvents()

        def send_email(**kwargs: Any) -> dict[str, Any]:
            calls.append(kwargs)
            return {"message_id": "<never@example.com>", "accepted": []}

        response = handle_email_function("{not json", send_email=send_email, events=events)

        self.assertEqual(response["status_code"], 500)
        self.assertFalse(response["body"]["success"])
        self.assertIn("Invalid email request", response["body"]["error"])
        self.assertEqual(calls, [])
        self.assertEqual(len(events.failed_events), 1)


class SMSFunctionTests(unittest.TestCase):
    def test_handle_sms_function_returns_text_id_and_quota(self) -> None:
        def send_sms(*, to_phone: str, message: str) -> dict[str, Any]:
            return {"success": True, "textId": "98765", "quotaRemaining": 3}

        response = handle_sms_function(make_sms_body(), send_sms=send_sms, events=RecordingEvents())

        self.assertEqual(response["status_code"], 200)
        self.assertEqual(
            response["body"], {"success": True, "textId": "98765", "quotaRemaining": 3}
        )

    def test_handle_sms_function_surfaces_gateway_error(self) -> None:
        def send_sms(*, to_phone: str, message: str) -> dict[str, Any]:
            return {"success": False, "error": "Out of quota"}

        response = handle_sms_function(make_sms_body(), send_sms=send_sms, events=RecordingEvents())

        self.assertEqual(response["status_code"], 500)
        self.assertEqual(response["body"], {"success": False, "error": "Out of quota"})

    def test_handle_sms_function_requires_content(self) -> None:
        def send_sms(*, to_phone: str, message: str) -> dict[str, Any]:
            return {"success": True, "textId": "1"}

        response = handle_sms_function(
            make_sms_body(content=None), send_sms=send_sms, events=RecordingEvents()
        )

        self.assertEqual(response["status_code"], 500)
        self.assertIn("content", response["body"]["error"])

    def test_invoke_sms_function_without_key_fails_cleanly(self) -> None:
        settings = make_settings(textbelt_key=None)

        with mock.patch(
            "notification_relay.adapters.real_senders.urllib.request.urlopen"
        ) as urlopen_mock:
            response = invoke_sms_function(make_sms_body(), settings)

        self.assertEqual(response["status_code"], 500)
        self.assertEqual(response["body"]["error"], "TEXTBELT_KEY must be configured")
        self.assertFalse(urlopen_mock.called)


if __name__ == "__main__":
    unittest.main()
