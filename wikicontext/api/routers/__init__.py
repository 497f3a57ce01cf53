"""API router factory functions."""
from .context import create_context_router
from .systems import create_systems_router

__all__ = [
    "create_context_router",
    "create_systems_router",
]
