"""
Webhook route for incoming water test readings.
Normalizes the posted JSON and hands it to the storage backend.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from pool_readings.config import logger, WEBHOOK_SUCCESS_MESSAGE
from pool_readings.models import MessageResponse
from pool_readings.normalizer import normalize_payload
from pool_readings.server.dependencies import get_backend, get_client_ip, json_payload
from pool_readings.storage import StorageBackend, StorageError

router = APIRouter()


@router.post("/webhook", response_model=MessageResponse)
def receive_webhook(
    request: Request,
    payload: Dict[str, Any] = Depends(json_payload),
    backend: StorageBackend = Depends(get_backend)
):
    """Store one reading sent by a webhook"""
    client_ip = get_client_ip(request)
    measurement = normalize_payload(payload)

    try:
        backend.store(measurement)
    except StorageError as e:
        logger.error(f"Error storing payload (clientIP={client_ip}): {e}")
        raise HTTPException(status_code=500, detail="Failed to store payload")

    logger.info(f"Payload stored successfully (clientIP={client_ip})")
    return MessageResponse(message=WEBHOOK_SUCCESS_MESSAGE)
