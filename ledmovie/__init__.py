"""
LED movie toolkit.

Colour model, frame and movie containers with their binary encoding, and the
comet animation generator. The main components are:

- Pixel: RGB/RGBW colour with chainable in-place transforms
- Frame: one time-slice of pixels, encoded pixel after pixel
- Movie: frames plus playback metadata, encoded frame after frame
- make_movie: comet animation generator

Usage:
    from ledmovie import make_movie

    movie = make_movie(n_leds=250, tail_length=20, led_type='rgbw')
    metadata = movie.export()
    payload = movie.to_octet()
"""

from .errors import DeviceError, InvalidFrame, InvalidParameter, LedMovieError
from .frame import Frame
from .generator import make_movie
from .movie import Movie, estimate_compressed_size
from .pixel import ChannelMode, Pixel
from .utils import reorder_array

__all__ = [
    'ChannelMode',
    'DeviceError',
    'Frame',
    'InvalidFrame',
    'InvalidParameter',
    'LedMovieError',
    'Movie',
    'Pixel',
    'estimate_compressed_size',
    'make_movie',
    'reorder_array',
]

__version__ = '0.1.0'
