"""
Core of the Tinify relay.

- client: explicit handle on the Tinify service
- pipeline: the shared resize/convert/background pipeline
- errors: error taxonomy and Tinify failure classification
"""
from tinifier.core.client import TinifyClient

from tinifier.core.errors import (
    FREE_TIER_MONTHLY_LIMIT,
    TinifierError,
    MissingInputError,
    InvalidInputError,
    PayloadTooLargeError,
    AuthFailureError,
    QuotaExceededError,
    CompressionFailedError,
    classify_service_error
)

from tinifier.core.pipeline import (
    DEFAULT_FORMAT,
    SUPPORTED_FORMATS,
    UNBOUNDED_DIMENSION,
    DEFAULT_BACKGROUND,
    TransformOptions,
    CompressionResult,
    normalize_format,
    apply_transforms,
    compress
)

__all__ = [
    # Service handle
    'TinifyClient',

    # Errors
    'FREE_TIER_MONTHLY_LIMIT',
    'TinifierError',
    'MissingInputError',
    'InvalidInputError',
    'PayloadTooLargeError',
    'AuthFailureError',
    'QuotaExceededError',
    'CompressionFailedError',
    'classify_service_error',

    # Pipeline
    'DEFAULT_FORMAT',
    'SUPPORTED_FORMATS',
    'UNBOUNDED_DIMENSION',
    'DEFAULT_BACKGROUND',
    'TransformOptions',
    'CompressionResult',
    'normalize_format',
    'apply_transforms',
    'compress'
]
