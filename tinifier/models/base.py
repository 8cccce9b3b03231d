"""
Base models shared by the relay's request and response schemas.
"""
from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """Base class for wire models whose JSON keys are camelCase"""
    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body returned for every failed request"""
    error: str = Field(..., description="Short error label")
    message: str = Field(..., description="Human-readable explanation")


class ServiceInfo(BaseModel):
    """Liveness payload for the root endpoint"""
    service: str = Field(..., description="Service name")
    status: str = Field(..., description="Process status")
    version: str = Field(..., description="Service version")
