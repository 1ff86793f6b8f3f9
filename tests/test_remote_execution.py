from __future__ import annotations

import json
import unittest
from typing import Any
from unittest import mock

from notification_relay.adapters import remote_execution


class RemoteExecutionClientTests(unittest.TestCase):
    @mock.patch("notification_relay.adapters.remote_execution.urllib.request.urlopen")
    def test_execute_function_posts_double_encoded_body(self, urlopen_mock: mock.Mock) -> None:
        response = urlopen_mock.return_value.__enter__.return_value
        response.getcode.return_value = 201
        response.read.return_value = b'{"$id":"exec-1","status":"waiting"}'

        status, execution = remote_execution.execute_function(
            endpoint="https://cloud.example.com/v1/",
            project_id="project-1",
            function_id="fn-1",
            payload={"to": "a@b.com", "content": "hi"},
        )

        self.assertEqual(status, 201)
        self.assertEqual(execution["$id"], "exec-1")
        request_obj = urlopen_mock.call_args.args[0]
        self.assertEqual(
            request_obj.full_url, "https://cloud.example.com/v1/functions/fn-1/executions"
        )
        self.assertEqual(request_obj.get_header("X-appwrite-project"), "project-1")
        outer = json.loads(request_obj.data.decode("utf-8"))
        self.assertEqual(json.loads(outer["body"]), {"to": "a@b.com", "content": "hi"})


class ExecutionHelperTests(unittest.TestCase):
    def test_wait_for_execution_polls_until_settled(self) -> None:
        replies = [
            (200, {"$id": "exec-1", "status": "processing"}),
            (200, {"$id": "exec-1", "status": "completed", "responseBody": "{}"}),
        ]
        fetched: list[str] = []
        sleeps: list[float] = []

        def fetch(execution_id: str) -> tuple[int, dict[str, Any]]:
            fetched.append(execution_id)
            return replies.pop(0)

        final = remote_execution.wait_for_execution(
            {"$id": "exec-1", "status": "waiting"},
            fetch,
            interval_seconds=0.5,
            sleep=sleeps.append,
        )

        self.assertEqual(final["status"], "completed")
        self.assertEqual(fetched, ["exec-1", "exec-1"])
        self.assertEqual(sleeps, [0.5, 0.5])

    def test_wait_for_execution_stops_after_max_polls(self) -> None:
        def fetch(execution_id: str) -> tuple[int, dict[str, Any]]:
            return 200, {"$id": execution_id, "status": "waiting"}

        final = remote_execution.wait_for_execution(
            {"$id": "exec-2", "status": "waiting"}, fetch, max_polls=3, sleep=lambda _s: None
        )

        self.assertEqual(final["status"], "waiting")

    def test_summarize_execution_decodes_nested_response(self) -> None:
        summary = remote_execution.summarize_execution(
            {
                "$id": "exec-3",
                "status": "completed",
                "responseBody": '{"success": true, "messageId": "<m@example.com>"}',
                "stdout": "Email sent successfully to a@b.com",
            }
        )

        self.assertEqual(summary["function_response"]["messageId"], "<m@example.com>")
        self.assertEqual(summary["stdout"], "Email sent successfully to a@b.com")
        self.assertEqual(summary["stderr"], "")

    def test_summarize_execution_keeps_non_json_response_text(self) -> None:
        summary = remote_execution.summarize_execution({"$id": "e", "responseBody": "plain"})

        self.assertEqual(summary["function_response"], "plain")
        self.assertEqual(summary["status"], "pending")

    def test_render_report_flags_function_error(self) -> None:
        lines = remote_execution.render_report(
            201,
            {
                "$id": "exec-4",
                "status": "completed",
                "responseBody": '{"success": false, "error": "Invalid login"}',
                "errors": "Error sending email: Invalid login",
            },
        )

        self.assertEqual(lines[0], "[RESPONSE STATUS] 201")
        self.assertIn("[RESULT] function reported error: Invalid login", lines)
        self.assertIn("[STDERR]", lines)

    def test_render_report_without_execution_id(self) -> None:
        lines = remote_execution.render_report(404, {"message": "Function not found"})

        self.assertEqual(lines[-1], "[UNEXPECTED] response has no execution id")


if __name__ == "__main__":
    unittest.main()
