"""
Compression endpoints.

Two adapters over the same pipeline: one takes base64 in a JSON body and
answers in JSON, the other takes a multipart upload and answers with the
raw image, carrying the size metadata in response headers.
"""
import base64
import binascii
import logging
from typing import Dict, Optional, Union

from fastapi import APIRouter, Body, Depends, File, Form, UploadFile
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from tinifier.api.deps import get_client, get_settings
from tinifier.config import Settings
from tinifier.core.client import TinifyClient
from tinifier.core.errors import (
    InvalidInputError,
    MissingInputError,
    PayloadTooLargeError
)
from tinifier.core.pipeline import (
    CompressionResult,
    TransformOptions,
    compress,
    normalize_format
)
from tinifier.models.base import ErrorResponse
from tinifier.models.compression import CompressRequest, CompressResponse

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Compression"])

# Size metadata headers on the binary response
METADATA_HEADERS = (
    "X-Original-Size",
    "X-Compressed-Size",
    "X-Savings",
    "X-Compression-Count",
)

ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 401, 413, 429, 500)
}


def decode_image(payload: str) -> bytes:
    """
    Decode base64 image data, accepting an optional data URL prefix.

    Args:
        payload: Base64 string, e.g. "iVBORw0..." or "data:image/png;base64,iVBORw0..."

    Returns:
        Raw image bytes

    Raises:
        InvalidInputError: If the payload is not valid base64
    """
    if payload.startswith("data:"):
        payload = payload.split(",", 1)[-1]
    try:
        return base64.b64decode(payload)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(f"Image data is not valid base64: {e}") from e


def metadata_headers(result: CompressionResult) -> Dict[str, str]:
    values = (
        result.original_size,
        result.compressed_size,
        result.savings,
        result.compression_count,
    )
    return {name: str(value) for name, value in zip(METADATA_HEADERS, values)}


async def run_pipeline(
    client: TinifyClient,
    image_bytes: bytes,
    options: TransformOptions
) -> CompressionResult:
    # tinify is blocking; keep it off the event loop
    return await run_in_threadpool(compress, client, image_bytes, options)


@router.post("/compress", response_model=CompressResponse, responses=ERROR_RESPONSES)
async def compress_base64(
    payload: Optional[CompressRequest] = Body(None),
    client: TinifyClient = Depends(get_client),
    settings: Settings = Depends(get_settings)
):
    """
    Compress a base64-encoded image.

    - **image**: Base64 image data (required)
    - **format**: png (default), jpeg/jpg, webp or avif
    - **width** / **height**: Fit the image within these bounds
    - **background**: Fill color for jpeg output (default white)

    Returns:
        The compressed image as base64 with size and savings metadata
    """
    if payload is None or not payload.image:
        raise MissingInputError("Please provide base64-encoded image data")

    image_bytes = decode_image(payload.image)
    if len(image_bytes) > settings.max_upload_size:
        raise PayloadTooLargeError(
            f"Image exceeds the {settings.max_upload_size} byte limit"
        )

    result = await run_pipeline(client, image_bytes, payload.to_options())

    return CompressResponse(
        data=base64.b64encode(result.output_bytes).decode("ascii"),
        format=result.output_format,
        original_size=result.original_size,
        compressed_size=result.compressed_size,
        savings=result.savings,
        compression_count=result.compression_count
    )


@router.post(
    "/compress/binary",
    response_class=Response,
    responses={200: {"content": {"image/*": {}}}, **ERROR_RESPONSES}
)
async def compress_binary(
    image: Union[UploadFile, str, None] = File(None),
    format: Optional[str] = Form(None),
    width: Optional[int] = Form(None, gt=0),
    height: Optional[int] = Form(None, gt=0),
    background: Optional[str] = Form(None),
    client: TinifyClient = Depends(get_client),
    settings: Settings = Depends(get_settings)
):
    """
    Compress an uploaded image file and return the raw result.

    - **image**: Image file (multipart, required)
    - **format**, **width**, **height**, **background**: As for /compress

    Size metadata is returned in the X-Original-Size, X-Compressed-Size,
    X-Savings and X-Compression-Count headers.
    """
    # A plain text field named "image" carries no file
    if not isinstance(image, StarletteUploadFile):
        raise MissingInputError("Please provide image file")

    try:
        output_format = normalize_format(format)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e

    # Read one byte past the limit to detect oversize uploads
    image_bytes = await image.read(settings.max_upload_size + 1)
    if len(image_bytes) > settings.max_upload_size:
        raise PayloadTooLargeError(
            f"Image exceeds the {settings.max_upload_size} byte limit"
        )
    if not image_bytes:
        raise MissingInputError("Please provide image file")

    logger.debug(f"Received upload {image.filename} ({len(image_bytes)} bytes)")

    options = TransformOptions(
        format=output_format,
        width=width,
        height=height,
        background=background
    )
    result = await run_pipeline(client, image_bytes, options)

    return Response(
        content=result.output_bytes,
        media_type=result.media_type,
        headers=metadata_headers(result)
    )
