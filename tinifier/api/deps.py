"""
FastAPI dependencies exposing the per-application client and settings.
"""
from fastapi import Request

from tinifier.config import Settings
from tinifier.core.client import TinifyClient


def get_client(request: Request) -> TinifyClient:
    return request.app.state.client


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
