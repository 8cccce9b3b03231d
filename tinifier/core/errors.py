"""
Error taxonomy for the relay and the mapping from Tinify failures onto it.

Every error carries the HTTP status, a short ``error`` label and a
user-facing ``message``; the API layer renders them as JSON.
"""
import logging
from typing import Dict, Optional

import tinify

# Set up logging
logger = logging.getLogger(__name__)

FREE_TIER_MONTHLY_LIMIT = 500


class TinifierError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code = 500
    error = "Internal server error"
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error, "message": self.message}


class MissingInputError(TinifierError):
    status_code = 400
    error = "Missing image data"
    default_message = "Please provide image data"


class InvalidInputError(TinifierError):
    status_code = 400
    error = "Invalid request"
    default_message = "Request could not be processed"


class PayloadTooLargeError(TinifierError):
    status_code = 413
    error = "File too large"
    default_message = "Uploaded image exceeds the size limit"


class AuthFailureError(TinifierError):
    status_code = 401
    error = "Invalid API key"
    default_message = "Check your TINIFY_API_KEY environment variable"


class QuotaExceededError(TinifierError):
    status_code = 429
    error = "Rate limited"
    default_message = (
        f"Monthly compression limit reached ({FREE_TIER_MONTHLY_LIMIT} for free tier)"
    )


class CompressionFailedError(TinifierError):
    status_code = 500
    error = "Compression failed"


def classify_service_error(exc: tinify.Error) -> TinifierError:
    """
    Map a Tinify library error onto the relay's error taxonomy.

    Args:
        exc: Error raised by the tinify client

    Returns:
        AuthFailureError for HTTP 401, QuotaExceededError for HTTP 429,
        CompressionFailedError carrying the backend message otherwise
    """
    status = getattr(exc, "status", None)
    if status == 401:
        return AuthFailureError()
    if status == 429:
        return QuotaExceededError()
    return CompressionFailedError(str(exc))
