"""FastAPI dependencies for the translation routes."""

from __future__ import annotations

from fastapi import Request

from tenantmock.config import TenantMockConfig
from tenantmock.translator import Translator


def get_translator(request: Request) -> Translator:
    """Get the shared translator from app state."""
    return request.app.state.translator


def get_config(request: Request) -> TenantMockConfig:
    """Get the loaded configuration from app state."""
    return request.app.state.config
