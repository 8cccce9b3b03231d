"""
Models for the API key status endpoint.
"""
from pydantic import Field

from tinifier.core.errors import FREE_TIER_MONTHLY_LIMIT
from tinifier.models.base import CamelModel


class StatusResponse(CamelModel):
    """Result of a successful key validation"""
    status: str = Field("ok", description="Always 'ok' on success")
    compression_count: int = Field(
        ..., alias="compressionCount", description="Compressions used this month"
    )
    monthly_limit: int = Field(
        FREE_TIER_MONTHLY_LIMIT, alias="monthlyLimit", description="Free tier monthly allowance"
    )
    message: str = Field(..., description="Human-readable result")


class StatusErrorResponse(CamelModel):
    """Result of a failed key validation"""
    status: str = Field("error", description="Always 'error'")
    error: str = Field(..., description="Short error label")
    message: str = Field(..., description="Reason reported by the service")
