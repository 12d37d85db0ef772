"""
Serverless entry point.

Netlify / AWS Lambda style functions receive an event dict and return
{statusCode, headers, body, isBase64Encoded}. This module feeds the event
through the same FastAPI app, so routing, validation and error handling are
identical to the ASGI server.

    /.netlify/functions/applications/3/resume  ->  /api/applications/3/resume

Binary bodies (resume downloads) go back as base64 text with
isBase64Encoded=True; JSON and text bodies go back as plain text.
"""

import asyncio
import base64
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from fastapi import FastAPI

from portal.utils.resume_codec import encode_resume

TEXT_CONTENT_TYPES = ("application/json", "text/")


def rewrite_path(path: str, function_prefix: str, api_prefix: str) -> str:
    if function_prefix and path.startswith(function_prefix):
        return api_prefix + path[len(function_prefix):]
    return path


def is_text_content(content_type: str) -> bool:
    return content_type.lower().startswith(TEXT_CONTENT_TYPES)


def build_scope(event: Dict[str, Any], path: str) -> Dict[str, Any]:
    headers = event.get("headers") or {}
    query = event.get("queryStringParameters") or {}
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": (event.get("httpMethod") or "GET").upper(),
        "scheme": "https",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "root_path": "",
        "query_string": urlencode(query).encode("latin-1"),
        "headers": [(k.lower().encode("latin-1"), str(v).encode("latin-1")) for k, v in headers.items()],
        "client": None,
        "server": None,
    }


def event_body(event: Dict[str, Any]) -> bytes:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body.encode("utf-8")


async def invoke(app: FastAPI, event: Dict[str, Any]) -> Dict[str, Any]:
    settings = app.state.settings
    path = rewrite_path(event.get("path") or "/", settings.function_path_prefix, settings.api_prefix)
    scope = build_scope(event, path)

    body = event_body(event)
    request_sent = False
    response_done = asyncio.Event()
    status = {"code": 500}
    headers: Dict[str, str] = {}
    chunks = []

    async def receive():
        nonlocal request_sent
        if not request_sent:
            request_sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        # Nothing else arrives; report the disconnect only after the response went out
        await response_done.wait()
        return {"type": "http.disconnect"}

    async def send(message):
        if message["type"] == "http.response.start":
            status["code"] = message["status"]
            for key, value in message.get("headers", []):
                headers[key.decode("latin-1")] = value.decode("latin-1")
        elif message["type"] == "http.response.body":
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                response_done.set()

    await app(scope, receive, send)
    response_done.set()

    raw = b"".join(chunks)
    content_type = headers.get("content-type", "")
    if not raw or is_text_content(content_type):
        return {
            "statusCode": status["code"],
            "headers": headers,
            "body": raw.decode("utf-8"),
            "isBase64Encoded": False,
        }
    return {
        "statusCode": status["code"],
        "headers": headers,
        "body": encode_resume(raw),
        "isBase64Encoded": True,
    }


def handler(event: Dict[str, Any], context: Any = None, app: Optional[FastAPI] = None) -> Dict[str, Any]:
    """Function entry point. The app (and its storage backend) is created on cold start."""
    if app is None:
        from portal.main import app
    return asyncio.run(invoke(app, event))
