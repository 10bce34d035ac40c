"""
Read-only route listing every stored reading.
Only mounted when the backend can read readings back.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from pool_readings.config import logger
from pool_readings.models import ReadingsResponse
from pool_readings.server.dependencies import get_backend, get_client_ip
from pool_readings.storage import StorageBackend, StorageError

router = APIRouter()


@router.get("/readings", response_model=ReadingsResponse)
def fetch_readings(request: Request, backend: StorageBackend = Depends(get_backend)):
    """Fetch all readings, oldest first"""
    try:
        readings = backend.list_all()
    except StorageError as e:
        logger.error(f"Error retrieving readings (clientIP={get_client_ip(request)}): {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve readings")

    return ReadingsResponse(readings=readings)
