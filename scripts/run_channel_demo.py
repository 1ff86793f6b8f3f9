#!/usr/bin/env python3
"""Run the email and SMS function entry points locally.

By default both channels go through the console senders, so nothing leaves the
machine. Pass `--live` to use the SMTP provider and SMS gateway configured in
the environment / `.env`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_relay.adapters.events import LoggingEvents  # noqa: E402
from notification_relay.adapters.fake_senders import (  # noqa: E402
    send_email_via_console,
    send_sms_via_console,
)
from notification_relay.adapters.functions import (  # noqa: E402
    handle_email_function,
    handle_sms_function,
    invoke_email_function,
    invoke_sms_function,
)
from notification_relay.logging_config import configure_logging  # noqa: E402


def main() -> int:
    args = parse_args()
    configure_logging()
    payload = load_payload(args.payload_file)
    channels = ["email", "sms"] if args.channel == "both" else [args.channel]

    responses = []
    for channel in channels:
        raw_body = json.dumps(channel_payload(payload, channel))
        responses.append((channel, run_channel(channel, raw_body, live=args.live)))

    print("")
    print("[SUMMARY]")
    for channel, response in responses:
        print(f"channel={channel} status_code={response['status_code']} body={response['body']}")
    return 0 if all(response["status_code"] == 200 for _, response in responses) else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Execute email/sms function handlers with a sample payload."
    )
    parser.add_argument(
        "--channel",
        choices=("email", "sms", "both"),
        default="both",
        help="Which function entry point to run.",
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file with to/from/senderName/subject/content fields.",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="Send through the configured providers instead of the console.",
    )
    return parser.parse_args()


def run_channel(channel: str, raw_body: str, *, live: bool) -> dict[str, Any]:
    if channel == "email":
        if live:
            return invoke_email_function(raw_body)
        return handle_email_function(
            raw_body, send_email=send_email_via_console, events=LoggingEvents()
        )
    if live:
        return invoke_sms_function(raw_body)
    return handle_sms_function(raw_body, send_sms=send_sms_via_console, events=LoggingEvents())


def load_payload(payload_file: Path | None) -> dict[str, Any]:
    if payload_file is None:
        return sample_payload()
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def channel_payload(payload: dict[str, Any], channel: str) -> dict[str, Any]:
    if channel == "sms":
        return {
            "to": payload.get("phone", payload.get("to")),
            "from": payload.get("senderName", payload.get("from")),
            "content": payload.get("content"),
        }
    return {key: value for key, value in payload.items() if key != "phone"}


def sample_payload() -> dict[str, Any]:
    return {
        "to": "user@example.com",
        "phone": "+15555550123",
        "from": "care-team@example.com",
        "senderName": "Care Team",
        "subject": "Visit reminder",
        "content": "Hello!\n\nThis is a reminder about tomorrow's visit.",
    }


if __name__ == "__main__":
    sys.exit(main())
