"""
Models for the compression endpoints.
"""
from typing import Optional

from pydantic import Field, field_validator

from tinifier.core.pipeline import SUPPORTED_FORMATS, TransformOptions, normalize_format
from tinifier.models.base import CamelModel


class CompressRequest(CamelModel):
    """JSON body for base64 compression"""
    image: Optional[str] = Field(
        None, description="Base64-encoded image data; a data URL prefix is accepted"
    )
    format: Optional[str] = Field(
        None,
        validate_default=True,
        description=f"Output format: {', '.join(SUPPORTED_FORMATS)} (or jpg). Defaults to png"
    )
    width: Optional[int] = Field(None, gt=0, description="Fit within this width")
    height: Optional[int] = Field(None, gt=0, description="Fit within this height")
    background: Optional[str] = Field(
        None, description="Background color for jpeg output (default white)"
    )

    @field_validator("format")
    @classmethod
    def resolve_format(cls, value: Optional[str]) -> str:
        return normalize_format(value)

    def to_options(self) -> TransformOptions:
        return TransformOptions(
            format=self.format,
            width=self.width,
            height=self.height,
            background=self.background,
        )


class CompressResponse(CamelModel):
    """JSON body returned by base64 compression"""
    success: bool = Field(True, description="Always true on success")
    data: str = Field(..., description="Base64-encoded compressed image")
    format: str = Field(..., description="Resolved output format")
    original_size: int = Field(
        ..., alias="originalSize", description="Size of the uploaded image in bytes"
    )
    compressed_size: int = Field(
        ..., alias="compressedSize", description="Size of the compressed image in bytes"
    )
    savings: int = Field(..., description="Percentage of bytes saved")
    compression_count: int = Field(
        ..., alias="compressionCount", description="Compressions used this month"
    )
