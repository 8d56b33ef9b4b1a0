"""
Movie preview server - Flask application factory
"""

import configparser
import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from ..config import generator_settings, movie_settings
from .movies import register_movie_routes

# Configure logging
logger = logging.getLogger(__name__)


def create_app(config: Optional[configparser.ConfigParser] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        config: Loaded configuration; defaults are used when omitted

    Returns:
        Flask application with the movie routes registered
    """
    config = config or configparser.ConfigParser(interpolation=None)

    app = Flask(__name__)
    CORS(app)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    defaults = generator_settings(config)
    defaults.update(movie_settings(config))
    register_movie_routes(app, defaults)

    logger.info("Movie preview server created")
    return app
