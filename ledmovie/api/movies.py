"""
Movie API endpoints.

This module provides REST endpoints to generate comet movies, inspect their
metadata and frames, and fetch the binary payload a device would receive.
Movies are kept in memory only and are lost when the server stops.
"""

import logging
import threading
from typing import Any, Dict, Optional

from flask import Blueprint, Response, abort, jsonify, request

from ..errors import LedMovieError
from ..generator import make_movie
from ..movie import Movie

# Configure logging
logger = logging.getLogger(__name__)

# Generator keyword arguments accepted in POST bodies, with their types
GENERATOR_FIELDS = {
    'n_leds': int,
    'n_frames': int,
    'tail_length': int,
    'led_type': str,
    'fps': int,
    'step': int,
    'saturation_factor': float,
    'buffer_seconds': int,
    'loop_type': int,
}

# Global state (will be set by register_movie_routes)
movies: Dict[int, Movie] = {}
movies_lock = threading.Lock()
next_movie_id = 0
generator_defaults: Dict[str, Any] = {}

# Create blueprint for movie routes
movies_bp = Blueprint('movies', __name__, url_prefix='/api/movies')


def _describe(movie_id: int, movie: Movie) -> Dict[str, Any]:
    description = movie.export()
    description['id'] = movie_id
    return description


def _get_movie(movie_id: int) -> Movie:
    with movies_lock:
        movie = movies.get(movie_id)
    if movie is None:
        abort(404, f"Movie {movie_id} not found")
    return movie


def add_movie(movie: Movie) -> int:
    """
    Store a movie in the in-memory registry.

    Returns:
        ID assigned to the movie
    """
    global next_movie_id
    with movies_lock:
        movie_id = next_movie_id
        next_movie_id += 1
        movies[movie_id] = movie
        movie.id = movie_id
    return movie_id


@movies_bp.errorhandler(LedMovieError)
def handle_movie_error(error):
    logger.error(f"Rejected movie request: {error}")
    return jsonify({'error': str(error)}), 400


@movies_bp.route('/', methods=['GET'])
def get_movies():
    """
    Get a list of all generated movies.

    Returns:
        JSON array of movie metadata
    """
    with movies_lock:
        items = sorted(movies.items())
    return jsonify([_describe(movie_id, movie) for movie_id, movie in items])


@movies_bp.route('/', methods=['POST'])
def create_movie():
    """
    Generate a comet movie.

    Request Body:
        Optional JSON object with generator parameters (n_leds, n_frames,
        tail_length, led_type, fps, step, saturation_factor, buffer_seconds,
        loop_type); missing ones come from configuration. Values of the
        wrong JSON type (floats or booleans for integer fields) are rejected

    Returns:
        JSON movie metadata including the new ID
    """
    data = request.get_json(silent=True) if request.data else {}
    if not isinstance(data, dict):
        abort(400, "Request body must be a JSON object")

    params = dict(generator_defaults)
    for field, field_type in GENERATOR_FIELDS.items():
        if field not in data:
            continue
        value = data[field]
        accepted = (int, float) if field_type is float else field_type
        if isinstance(value, bool) or not isinstance(value, accepted):
            abort(400, f"Invalid value for {field}: {value!r}")
        params[field] = field_type(value)

    movie = make_movie(**params)
    movie_id = add_movie(movie)
    logger.info(f"Created movie {movie_id}: {movie.name}")

    return jsonify(_describe(movie_id, movie)), 201


@movies_bp.route('/<int:movie_id>', methods=['GET'])
def get_movie(movie_id):
    """Get metadata for a specific movie."""
    return jsonify(_describe(movie_id, _get_movie(movie_id)))


@movies_bp.route('/<int:movie_id>', methods=['DELETE'])
def delete_movie(movie_id):
    _get_movie(movie_id)
    with movies_lock:
        movies.pop(movie_id, None)
    logger.info(f"Deleted movie {movie_id}")
    return jsonify({'id': movie_id, 'status': 'deleted'})


@movies_bp.route('/<int:movie_id>/frames/<int:frame_index>', methods=['GET'])
def get_movie_frame(movie_id, frame_index):
    """
    Get a preview of a specific movie frame.

    Args:
        movie_id: ID of the movie
        frame_index: Index of the frame to preview

    Returns:
        JSON array of LED colour values
    """
    movie = _get_movie(movie_id)
    if not 0 <= frame_index < movie.frames_number:
        abort(404, f"Frame {frame_index} not found")

    formatted_frame = []
    for pixel in movie.get_frame(frame_index):
        r, g, b = (int(value) & 0xFF for value in (pixel.red, pixel.green, pixel.blue))
        formatted_frame.append({
            'r': r,
            'g': g,
            'b': b,
            'w': None if pixel.white is None else int(pixel.white) & 0xFF,
            'hex': f'#{r:02x}{g:02x}{b:02x}'
        })

    return jsonify({
        'frame_index': frame_index,
        'leds': formatted_frame
    })


@movies_bp.route('/<int:movie_id>/octet', methods=['GET'])
def get_movie_octet(movie_id):
    """Get the binary pixel payload of a movie."""
    movie = _get_movie(movie_id)
    return Response(movie.to_octet(), mimetype='application/octet-stream')


@movies_bp.route('/<int:movie_id>/size', methods=['GET'])
def get_movie_size(movie_id):
    """
    Get the payload size of a movie.

    Query Parameters:
        compressed (bool): Return the estimated compressed size (default: false)
    """
    movie = _get_movie(movie_id)
    compressed = request.args.get('compressed', 'false').lower() == 'true'
    return jsonify({
        'id': movie_id,
        'compressed': compressed,
        'size': movie.size(is_compressed=compressed)
    })


def register_movie_routes(app, defaults: Optional[Dict[str, Any]] = None):
    """
    Register movie API routes.

    The registry is module-global and is cleared on every call, so only one
    application per process is supported; a second create_app() discards the
    movies of the first.

    Args:
        app: Flask application
        defaults: Generator keyword arguments used when a request omits them
    """
    global next_movie_id
    generator_defaults.clear()
    generator_defaults.update(defaults or {})
    with movies_lock:
        movies.clear()
        next_movie_id = 0

    app.register_blueprint(movies_bp)
    logger.info("Movie API routes registered")
