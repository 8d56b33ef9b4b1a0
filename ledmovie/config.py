"""
Configuration loading.

Settings live in an INI file read with configparser. Every value is looked up
with a fallback, so a missing file or section simply means defaults.
"""

import configparser
import logging
import os
from typing import Any, Dict, Optional

from .movie import DEFAULT_COMPRESSION_RATIO

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = 'config.ini'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config(config_path: Optional[str] = DEFAULT_CONFIG_FILE) -> configparser.ConfigParser:
    """
    Load configuration from file.

    The path is tried as given first, then relative to the package directory.
    If neither exists a warning is logged and an empty parser is returned so
    callers fall back to defaults.

    Args:
        config_path: Path to the INI file, or None for defaults only

    Returns:
        ConfigParser object
    """
    config = configparser.ConfigParser(interpolation=None)
    if not config_path:
        return config

    abs_config_path = os.path.abspath(config_path)
    if not os.path.exists(abs_config_path):
        package_dir = os.path.dirname(__file__)
        path_relative_to_package = os.path.join(package_dir, config_path)
        if os.path.exists(path_relative_to_package):
            abs_config_path = path_relative_to_package
            logger.debug(f"Config path '{config_path}' resolved relative to package: {abs_config_path}")
        else:
            logger.warning(f"Config file '{config_path}' (resolved to '{abs_config_path}') not found. Using defaults.")
            return config

    read_ok = config.read(abs_config_path)
    if not read_ok:
        logger.warning(f"Config file '{abs_config_path}' exists but failed to read. Using defaults.")
    else:
        logger.debug(f"Loaded configuration from {abs_config_path}")
    return config


def setup_logging(config: configparser.ConfigParser, level: Optional[str] = None) -> None:
    """Configure root logging from LOG_LEVEL, unless an explicit level is given."""
    log_level = level or config.get('DEFAULT', 'LOG_LEVEL', fallback='INFO')
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO),
                        format=LOG_FORMAT)


def generator_settings(config: configparser.ConfigParser) -> Dict[str, Any]:
    """Keyword arguments for make_movie() from the [GENERATOR] section."""
    section = 'GENERATOR'
    return {
        'n_leds': config.getint(section, 'N_LEDS', fallback=600),
        'n_frames': config.getint(section, 'N_FRAMES', fallback=250),
        'tail_length': config.getint(section, 'TAIL_LENGTH', fallback=15),
        'led_type': config.get(section, 'TYPE', fallback='rgb').lower(),
        'fps': config.getint(section, 'FPS', fallback=15),
        'step': config.getint(section, 'STEP', fallback=5),
        'saturation_factor': config.getfloat(section, 'SATURATION_FACTOR', fallback=0.5),
        'buffer_seconds': config.getint(section, 'BUFFER_SECONDS', fallback=3),
    }


def movie_settings(config: configparser.ConfigParser) -> Dict[str, Any]:
    """Movie metadata defaults from the [MOVIE] section."""
    section = 'MOVIE'
    return {
        'loop_type': config.getint(section, 'LOOP_TYPE', fallback=0),
        'compression_ratio': config.getfloat(section, 'COMPRESSION_RATIO',
                                             fallback=DEFAULT_COMPRESSION_RATIO),
    }


def api_settings(config: configparser.ConfigParser) -> Dict[str, Any]:
    """Host and port for the preview API from the [API] section."""
    return {
        'host': config.get('API', 'HOST', fallback='0.0.0.0'),
        'port': config.getint('API', 'PORT', fallback=5000),
    }
