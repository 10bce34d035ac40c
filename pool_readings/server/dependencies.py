"""
FastAPI dependencies shared by the webhook and readings routes.
"""
import json
from typing import Any, Dict

from fastapi import HTTPException, Request

from pool_readings.storage import StorageBackend


def get_backend(request: Request) -> StorageBackend:
    """The storage backend created at startup and attached to the app"""
    return request.app.state.backend


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def get_client_ip(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return request.client.host


async def json_payload(request: Request) -> Dict[str, Any]:
    """
    Require an application/json body holding a JSON object.
    The body is read in full before any check can reject it. A `null` body
    is treated as an empty object.
    """
    body = await request.body()

    if request.headers.get("content-type") != "application/json":
        raise HTTPException(status_code=415, detail="Unsupported Media Type")

    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Invalid JSON")

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON")
    return payload
