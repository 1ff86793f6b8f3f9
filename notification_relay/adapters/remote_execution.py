"""Smoke-test client for a remote function-execution API.

Deployed email/SMS functions are invoked through an Appwrite-style
`POST {endpoint}/functions/{function_id}/executions` call whose JSON reply
nests the function's own JSON response as a string (`responseBody`). This
module makes that call, polls until the execution settles, and unpacks the
nested payload for display.
"""

from __future__ import annotations

import json
import time
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Mapping

PENDING_STATUSES = frozenset({"waiting", "processing"})


def execute_function(
    *,
    endpoint: str,
    project_id: str,
    function_id: str,
    payload: Mapping[str, Any],
    api_key: str | None = None,
    timeout_seconds: float = 30.0,
) -> tuple[int, dict[str, Any]]:
    """Create one execution and return `(http_status, execution_json)`."""
    url = _executions_url(endpoint, function_id)
    # The function receives the payload as a JSON string, so it is encoded twice.
    data = json.dumps({"body": json.dumps(dict(payload))}).encode("utf-8")
    request = urllib.request.Request(url, data=data, method="POST")
    _add_headers(request, project_id, api_key)
    return _send(request, timeout_seconds)


def get_execution(
    *,
    endpoint: str,
    project_id: str,
    function_id: str,
    execution_id: str,
    api_key: str | None = None,
    timeout_seconds: float = 30.0,
) -> tuple[int, dict[str, Any]]:
    url = f"{_executions_url(endpoint, function_id)}/{urllib.parse.quote(execution_id, safe='')}"
    request = urllib.request.Request(url, method="GET")
    _add_headers(request, project_id, api_key)
    return _send(request, timeout_seconds)


def wait_for_execution(
    execution: Mapping[str, Any],
    fetch: Callable[[str], tuple[int, dict[str, Any]]],
    *,
    max_polls: int = 10,
    interval_seconds: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, Any]:
    """Poll `fetch(execution_id)` until the execution leaves a pending status."""
    current = dict(execution)
    execution_id = current.get("$id")
    polls = 0
    while execution_id and current.get("status") in PENDING_STATUSES and polls < max_polls:
        sleep(interval_seconds)
        _status, current = fetch(str(execution_id))
        polls += 1
    return current


def summarize_execution(execution: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten an execution reply, decoding the nested function response."""
    raw_response = execution.get("responseBody")
    function_response: Any = raw_response
    if isinstance(raw_response, str) and raw_response.strip():
        try:
            function_response = json.loads(raw_response)
        except ValueError:
            function_response = raw_response

    return {
        "execution_id": execution.get("$id"),
        "status": execution.get("status") or "pending",
        "response_status_code": execution.get("responseStatusCode"),
        "function_response": function_response or None,
        "stdout": execution.get("stdout") or execution.get("logs") or "",
        "stderr": execution.get("stderr") or execution.get("errors") or "",
    }


def render_report(http_status: int, execution: Mapping[str, Any]) -> list[str]:
    """Return printable report lines for one execution."""
    lines = [f"[RESPONSE STATUS] {http_status}", "[RESPONSE BODY]", _pretty(execution)]
    summary = summarize_execution(execution)
    if summary["execution_id"] is None:
        lines.append("[UNEXPECTED] response has no execution id")
        return lines

    lines.append(f"[EXECUTION] id={summary['execution_id']} status={summary['status']}")
    function_response = summary["function_response"]
    if function_response is not None:
        lines.append("[FUNCTION RESPONSE]")
        lines.append(_pretty(function_response))
        if isinstance(function_response, Mapping):
            if function_response.get("success"):
                lines.append("[RESULT] function reported success")
            else:
                lines.append(f"[RESULT] function reported error: {function_response.get('error')}")
    if summary["stdout"]:
        lines.extend(["[STDOUT]", str(summary["stdout"])])
    if summary["stderr"]:
        lines.extend(["[STDERR]", str(summary["stderr"])])
    return lines


def _executions_url(endpoint: str, function_id: str) -> str:
    return (
        f"{endpoint.rstrip('/')}/functions/"
        f"{urllib.parse.quote(function_id, safe='')}/executions"
    )


def _add_headers(request: urllib.request.Request, project_id: str, api_key: str | None) -> None:
    request.add_header("Content-Type", "application/json")
    request.add_header("X-Appwrite-Project", project_id)
    if api_key:
        request.add_header("X-Appwrite-Key", api_key)


def _send(request: urllib.request.Request, timeout_seconds: float) -> tuple[int, dict[str, Any]]:
    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            text = response.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        status = exc.code
        text = exc.read().decode("utf-8", errors="replace")
    except urllib.error.URLError as exc:
        raise RuntimeError(f"Execution request failed: {exc.reason}") from exc

    try:
        parsed = json.loads(text) if text.strip() else {}
    except ValueError:
        return status, {"raw": text}
    if not isinstance(parsed, dict):
        return status, {"raw": parsed}
    return status, parsed


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
