#!/usr/bin/env python3
"""Execute a deployed email/SMS function remotely and print the outcome.

Posts a test payload to an Appwrite-style executions API, waits for the
execution to settle and pretty-prints the reply, including the function's own
nested JSON response and its captured logs.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_relay.adapters.remote_execution import (  # noqa: E402
    execute_function,
    get_execution,
    render_report,
    wait_for_execution,
)


def main() -> int:
    args = parse_args()
    payload = load_payload(args.payload_file, args.to)

    print("[PAYLOAD]")
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    print("")

    try:
        status, execution = execute_function(
            endpoint=args.endpoint,
            project_id=args.project_id,
            function_id=args.function_id,
            payload=payload,
            api_key=args.api_key,
            timeout_seconds=args.timeout,
        )
        if args.max_polls > 0:
            execution = wait_for_execution(
                execution,
                lambda execution_id: get_execution(
                    endpoint=args.endpoint,
                    project_id=args.project_id,
                    function_id=args.function_id,
                    execution_id=execution_id,
                    api_key=args.api_key,
                    timeout_seconds=args.timeout,
                ),
                max_polls=args.max_polls,
                interval_seconds=args.poll_interval,
            )
    except RuntimeError as exc:
        print(f"[REQUEST ERROR] {exc}")
        print("- Check your internet connection")
        print("- Verify the execution endpoint is correct")
        return 1

    for line in render_report(status, execution):
        print(line)

    return 0 if 200 <= status < 300 else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Execute a deployed notification function.")
    parser.add_argument(
        "--endpoint",
        default=os.getenv("APPWRITE_ENDPOINT", "https://cloud.appwrite.io/v1"),
        help="Execution API base URL. Default: APPWRITE_ENDPOINT.",
    )
    parser.add_argument(
        "--project-id",
        default=os.getenv("APPWRITE_PROJECT_ID"),
        required=os.getenv("APPWRITE_PROJECT_ID") is None,
        help="Project id header value. Default: APPWRITE_PROJECT_ID.",
    )
    parser.add_argument("--function-id", required=True, help="Deployed function id.")
    parser.add_argument(
        "--api-key",
        default=os.getenv("APPWRITE_API_KEY"),
        help="Optional API key. Default: APPWRITE_API_KEY.",
    )
    parser.add_argument("--to", default="test@example.com", help="Recipient for the sample payload.")
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file used as the function body instead of the sample.",
    )
    parser.add_argument("--timeout", type=float, default=30.0, help="Per-request timeout seconds.")
    parser.add_argument("--max-polls", type=int, default=10, help="0 disables polling.")
    parser.add_argument("--poll-interval", type=float, default=1.0, help="Seconds between polls.")
    return parser.parse_args()


def load_payload(payload_file: Path | None, to: str) -> dict[str, Any]:
    if payload_file is not None:
        with payload_file.open("r", encoding="utf-8") as file_handle:
            return json.load(file_handle)
    return {
        "to": to,
        "from": "relay-test@example.com",
        "senderName": "Relay Function Test",
        "subject": "Function test",
        "content": (
            "Hello!\n\n"
            "This is a test message executed directly against the deployed function.\n\n"
            "If it arrived with the styled header and footer, the function works."
        ),
    }


if __name__ == "__main__":
    sys.exit(main())
