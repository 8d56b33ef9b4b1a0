"""
Preview API for generated movies.

This package exposes generated movies over HTTP: metadata, per-frame colour
previews and the binary payload.
"""

from .app import create_app
from .movies import movies_bp, register_movie_routes

__all__ = ['create_app', 'movies_bp', 'register_movie_routes']
