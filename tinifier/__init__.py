"""
Figma-Tinifier relay

This package implements a FastAPI relay in front of the Tinify (TinyPNG)
image compression service:
- Base64 JSON and multipart binary compression endpoints
- Optional resize, format conversion and background fill
- API key validation and monthly usage reporting
"""
# Export the app instance
from tinifier.api import app, create_app

__all__ = ['app', 'create_app']
