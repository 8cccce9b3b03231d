"""
Handle on the Tinify compression service.
"""
import logging
from typing import Optional

import tinify

# Set up logging
logger = logging.getLogger(__name__)


class TinifyClient:
    """
    Thin wrapper over the ``tinify`` library.

    The library keeps the API key and the monthly usage counter as module
    state. This object owns both so the rest of the service receives them
    as an explicit dependency and tests can substitute a fake backend.
    """

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key
        tinify.key = api_key

    def from_buffer(self, data: bytes):
        """Upload raw image bytes and return the resulting tinify.Source."""
        return tinify.from_buffer(data)

    def validate(self) -> bool:
        """Check the API key against the service. Raises tinify.Error on failure."""
        logger.debug("Validating Tinify API key")
        return tinify.validate()

    @property
    def compression_count(self) -> int:
        """Compressions used this month, as last reported by the service."""
        return tinify.compression_count or 0
