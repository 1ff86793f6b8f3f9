"""HTTP email server (FastAPI).

Mental model refresher:
- This is the HTTP controller for the email channel.
- `POST /send` validates the body, dispatches once and reflects the result:
  400 for missing fields, 200 on success, 500 on provider or parse failure.
- `GET /health` is a liveness probe.
- Startup runs an advisory SMTP check; its outcome is only logged.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import AsyncIterator, Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..application.dispatch import dispatch_notification
from ..config import RelaySettings, get_settings
from ..types import DispatchEvents, SendEmailFn
from .events import LoggingEvents
from .payload import MissingFieldsError, decode_json_body, parse_send_request
from .real_senders import make_email_sender, verify_smtp_connection

logger = logging.getLogger(__name__)

VerifyFn = Callable[[RelaySettings], bool]


def create_app(
    settings: RelaySettings | None = None,
    *,
    send_email: SendEmailFn | None = None,
    events: DispatchEvents | None = None,
    verify_connection: VerifyFn | None = None,
) -> FastAPI:
    """Build the email server with its collaborators injected."""
    settings = settings or get_settings()
    send_email = send_email or make_email_sender(settings)
    events = events or LoggingEvents()
    verify_connection = verify_connection or verify_smtp_connection

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        if settings.smtp_verify_on_startup:
            try:
                await run_in_threadpool(verify_connection, settings)
            except Exception:
                logger.exception("SMTP connection check failed")
        logger.info("Email server running on port %s", settings.app_port)
        yield

    app = FastAPI(title=settings.service_name, lifespan=lifespan)

    @app.post("/send", tags=["email"])
    async def send(request: Request) -> JSONResponse:
        """Send one email built from the JSON body."""
        try:
            raw_body = await request.body()
            payload = decode_json_body(raw_body) if raw_body.strip() else {}
            send_request = parse_send_request(payload)
        except MissingFieldsError as exc:
            return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})
        except Exception as exc:
            logger.error("Email send error: %s", exc)
            return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})

        result = await run_in_threadpool(
            dispatch_notification,
            send_request,
            "email",
            send_email=send_email,
            events=events,
            brand=settings.brand_name,
        )
        if not result["success"]:
            return JSONResponse(
                status_code=500, content={"success": False, "error": result["error"]}
            )
        return JSONResponse(
            content={
                "success": True,
                "messageId": result["provider_message_id"],
                "accepted": result.get("accepted", []),
            }
        )

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        """Simple health probe for liveness checks."""
        return {
            "status": "healthy",
            "service": settings.service_name,
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }

    return app


def run_server(settings: RelaySettings | None = None) -> None:
    """Serve the email server with uvicorn until interrupted."""
    settings = settings or get_settings()
    app = create_app(settings)
    logger.info("Endpoint: http://localhost:%s/send", settings.app_port)
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_config=None)
