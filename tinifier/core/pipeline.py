"""
Shared transform-and-relay pipeline.

Both request adapters funnel into ``compress``: the image is uploaded to
Tinify, optionally resized, converted and flattened onto a background, and
the final bytes are downloaded. Each call costs one compression against the
account's monthly quota.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import tinify

from tinifier.core.client import TinifyClient
from tinifier.core.errors import MissingInputError, classify_service_error
from tinifier.utils.metrics import calculate_savings, PerformanceTimer

# Set up logging
logger = logging.getLogger(__name__)

# Format constants
DEFAULT_FORMAT = "png"
SUPPORTED_FORMATS = ("png", "jpeg", "webp", "avif")
FORMAT_ALIASES = {"jpg": "jpeg"}

# Stand-in for an unconstrained axis in a "fit" resize
UNBOUNDED_DIMENSION = 9999

# JPEG has no alpha channel, so transparent pixels are filled with this
DEFAULT_BACKGROUND = "white"


def normalize_format(value: Optional[str]) -> str:
    """
    Resolve a requested output format to one Tinify understands.

    Args:
        value: Requested format, case-insensitive; None or empty means png

    Returns:
        One of SUPPORTED_FORMATS

    Raises:
        ValueError: If the format is not supported
    """
    if not value:
        return DEFAULT_FORMAT
    fmt = value.strip().lower()
    fmt = FORMAT_ALIASES.get(fmt, fmt)
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported format '{value}', expected one of: {', '.join(SUPPORTED_FORMATS)}"
        )
    return fmt


@dataclass
class TransformOptions:
    """Optional transforms applied on the Tinify side."""
    format: str = DEFAULT_FORMAT
    width: Optional[int] = None
    height: Optional[int] = None
    background: Optional[str] = None

    def __post_init__(self):
        self.format = normalize_format(self.format)

    @property
    def media_type(self) -> str:
        return f"image/{self.format}"


@dataclass
class CompressionResult:
    """Compressed image plus the numbers reported back to the caller."""
    output_bytes: bytes
    output_format: str
    original_size: int
    compressed_size: int
    compression_count: int
    compression_time: float = 0.0

    @property
    def savings(self) -> int:
        return calculate_savings(self.original_size, self.compressed_size)

    @property
    def media_type(self) -> str:
        return f"image/{self.output_format}"


def apply_transforms(source, options: TransformOptions):
    """
    Chain the requested operations onto a Tinify source.

    Order is fixed: resize, then convert, then background fill.

    Args:
        source: tinify.Source returned by the upload
        options: Requested transforms

    Returns:
        The source with every operation applied
    """
    if options.width or options.height:
        source = source.resize(
            method="fit",
            width=options.width or UNBOUNDED_DIMENSION,
            height=options.height or UNBOUNDED_DIMENSION,
        )

    if options.format != DEFAULT_FORMAT:
        source = source.convert(type=options.media_type)

    if options.format == "jpeg":
        source = source.transform(background=options.background or DEFAULT_BACKGROUND)

    return source


def compress(
    client: TinifyClient,
    image_bytes: bytes,
    options: Optional[TransformOptions] = None
) -> CompressionResult:
    """
    Compress an image through Tinify.

    Args:
        client: Handle on the compression service
        image_bytes: Raw image data
        options: Transforms to apply; defaults to plain png compression

    Returns:
        CompressionResult with the compressed bytes and size metadata

    Raises:
        MissingInputError: If image_bytes is empty
        TinifierError: Classified backend failure
    """
    if not image_bytes:
        raise MissingInputError("Image data is empty")
    if options is None:
        options = TransformOptions()

    logger.info(
        f"Compressing {len(image_bytes)} bytes to {options.format} "
        f"(width={options.width}, height={options.height})"
    )

    try:
        with PerformanceTimer() as timer:
            source = apply_transforms(client.from_buffer(image_bytes), options)
            output = source.to_buffer()
    except tinify.Error as e:
        error = classify_service_error(e)
        logger.error(f"Tinify request failed ({error.status_code}): {e}")
        raise error from e

    result = CompressionResult(
        output_bytes=output,
        output_format=options.format,
        original_size=len(image_bytes),
        compressed_size=len(output),
        compression_count=client.compression_count,
        compression_time=timer.execution_time,
    )
    logger.info(
        f"Compressed {result.original_size} -> {result.compressed_size} bytes "
        f"({result.savings}% saved) in {result.compression_time:.2f}s"
    )
    return result
