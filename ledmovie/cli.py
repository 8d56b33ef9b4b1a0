#!/usr/bin/env python3
"""
Command line entry point.

    ledmovie generate --leds 250 --tail 20 --type rgbw --preview 3
    ledmovie generate --upload
    ledmovie serve --config config.ini
"""

import argparse
import json
import logging
import sys

from .config import DEFAULT_CONFIG_FILE, api_settings, generator_settings, load_config, movie_settings, setup_logging
from .device import MockDevice, upload_movie
from .errors import LedMovieError
from .generator import LED_TYPES, make_movie

# Configure logging
logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Generate and encode LED comet movies")
    parser.add_argument('--config', type=str, default=DEFAULT_CONFIG_FILE,
                        help='Path to the configuration file (default: config.ini)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Override LOG_LEVEL from the configuration')

    subparsers = parser.add_subparsers(dest='command')

    generate = subparsers.add_parser('generate', help='Generate a comet movie and print its metadata')
    generate.add_argument('--leds', type=int, help='Number of LEDs')
    generate.add_argument('--frames', type=int, help='Head positions to sweep')
    generate.add_argument('--tail', type=int, help='Tail length in LEDs')
    generate.add_argument('--type', choices=LED_TYPES, help='LED profile')
    generate.add_argument('--fps', type=int, help='Frames per second')
    generate.add_argument('--preview', type=int, metavar='N',
                          help='Print frame N as hex colours')
    generate.add_argument('--upload', action='store_true',
                          help='Upload the movie to a simulated device; LED count and profile come from the device')

    subparsers.add_parser('serve', help='Run the movie preview API')

    args = parser.parse_args(argv)
    if args.command is None:
        argv = sys.argv[1:] if argv is None else list(argv)
        args = parser.parse_args(argv + ['generate'])
    return args


def _print_preview(movie, index: int) -> None:
    frame = movie.get_frame(index)
    colours = [f'#{int(p.red) & 0xFF:02x}{int(p.green) & 0xFF:02x}{int(p.blue) & 0xFF:02x}' for p in frame]
    print(f"Frame {index}: {' '.join(colours)}")


def generate(args, config) -> int:
    settings = generator_settings(config)
    settings.update(movie_settings(config))

    overrides = {
        'n_leds': args.leds,
        'n_frames': args.frames,
        'tail_length': args.tail,
        'led_type': args.type,
        'fps': args.fps,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})

    device = None
    if args.upload:
        device = MockDevice()
        device.login()
        details = device.get_device_details()
        logger.info(f"This device is called {device.get_name()}")
        settings['n_leds'] = device.get_n_leds()
        settings['led_type'] = (details.get('led_profile') or 'rgb').lower()
        if args.frames is None:
            settings['n_frames'] = settings['n_leds'] + 20

    movie = make_movie(**settings)

    print(json.dumps(movie.export(), indent=2))
    print(f"File size {movie.size() / 1000} kb "
          f"(~{movie.size(is_compressed=True) / 1000} kb compressed)")

    if args.preview is not None:
        if not 0 <= args.preview < movie.frames_number:
            logger.error(f"Frame {args.preview} is out of range (movie has {movie.frames_number} frames)")
            return 1
        _print_preview(movie, args.preview)

    if device is not None:
        movie_id = upload_movie(device, movie)
        print(f"Uploaded as movie {movie_id}; device has {len(device.get_list_of_movies())} movie(s)")

    return 0


def serve(config) -> int:
    from .api import create_app

    settings = api_settings(config)
    app = create_app(config)
    logger.info(f"Starting web server on port {settings['port']}")
    try:
        app.run(host=settings['host'], port=settings['port'])
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    finally:
        logger.info("Server shutdown complete")
    return 0


def main(argv=None) -> int:
    args = parse_arguments(argv)
    config = load_config(args.config)
    setup_logging(config, args.log_level)

    try:
        if args.command == 'serve':
            return serve(config)
        return generate(args, config)
    except LedMovieError as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
