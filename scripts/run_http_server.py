#!/usr/bin/env python3
"""Run the HTTP email server (`POST /send`, `GET /health`)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_relay.adapters.http_app import run_server  # noqa: E402
from notification_relay.config import get_settings  # noqa: E402
from notification_relay.logging_config import configure_logging  # noqa: E402


def main() -> int:
    args = parse_args()
    settings = get_settings()
    overrides = {}
    if args.host is not None:
        overrides["app_host"] = args.host
    if args.port is not None:
        overrides["app_port"] = args.port
    if args.skip_smtp_check:
        overrides["smtp_verify_on_startup"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings)
    run_server(settings)
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the notification relay email API.")
    parser.add_argument("--host", default=None, help="Bind address. Default: HOST or 0.0.0.0.")
    parser.add_argument("--port", type=int, default=None, help="Bind port. Default: PORT or 3000.")
    parser.add_argument(
        "--skip-smtp-check",
        action="store_true",
        help="Do not verify SMTP credentials on startup.",
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
