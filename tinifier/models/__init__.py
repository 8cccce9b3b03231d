"""
Data models for the Tinify relay API.

This module provides Pydantic models for request/response validation and
documentation of the compression and status endpoints.
"""
from tinifier.models.base import (
    CamelModel,
    ErrorResponse,
    ServiceInfo
)

from tinifier.models.compression import (
    CompressRequest,
    CompressResponse
)

from tinifier.models.status import (
    StatusResponse,
    StatusErrorResponse
)

__all__ = [
    # Base models
    'CamelModel',
    'ErrorResponse',
    'ServiceInfo',

    # Compression models
    'CompressRequest',
    'CompressResponse',

    # Status models
    'StatusResponse',
    'StatusErrorResponse'
]
