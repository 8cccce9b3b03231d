"""
Runtime configuration for the relay, read from environment variables.
"""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

# Binary upload cap (50 MiB)
MAX_UPLOAD_SIZE = 50 * 1024 * 1024

# Room for the JSON envelope and transform options around the base64 image
JSON_ENVELOPE_ALLOWANCE = 4096

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    """Service settings; see ``Settings.from_env`` for the variable names."""
    api_key: Optional[str] = Field(None, description="Tinify API key")
    host: str = Field(DEFAULT_HOST, description="Interface to bind")
    port: int = Field(DEFAULT_PORT, description="Port to listen on")
    log_level: str = Field("INFO", description="Root logging level")
    max_upload_size: int = Field(
        MAX_UPLOAD_SIZE, gt=0, description="Largest accepted binary upload in bytes"
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Populated Settings instance
        """
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("TINIFY_API_KEY") or None,
            host=env.get("HOST", DEFAULT_HOST),
            port=int(env.get("PORT", DEFAULT_PORT)),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            max_upload_size=int(env.get("MAX_UPLOAD_SIZE", MAX_UPLOAD_SIZE)),
        )

    @property
    def max_json_body_size(self) -> int:
        """Largest accepted JSON body: the upload cap after base64 inflation."""
        return -(-self.max_upload_size * 4 // 3) + JSON_ENVELOPE_ALLOWANCE
