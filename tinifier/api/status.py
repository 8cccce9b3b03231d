"""
API key status endpoint.
"""
import logging

import tinify
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from tinifier.api.deps import get_client
from tinifier.core.client import TinifyClient
from tinifier.core.errors import AuthFailureError
from tinifier.models.status import StatusResponse, StatusErrorResponse

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Status"])


@router.get(
    "/status",
    response_model=StatusResponse,
    responses={401: {"model": StatusErrorResponse}}
)
async def api_status(client: TinifyClient = Depends(get_client)):
    """
    Validate the configured API key against Tinify and report usage.

    Validation does not consume a compression.
    """
    try:
        await run_in_threadpool(client.validate)
    except tinify.Error as e:
        logger.warning(f"API key validation failed: {e}")
        body = StatusErrorResponse(error=AuthFailureError.error, message=str(e))
        return JSONResponse(status_code=401, content=body.model_dump())

    return StatusResponse(
        compression_count=client.compression_count,
        message="API key validated successfully"
    )
