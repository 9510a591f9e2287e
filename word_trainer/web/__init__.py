"""JSON API for managing and practicing words."""

from .app import create_app

__all__ = [
    'create_app'
]
