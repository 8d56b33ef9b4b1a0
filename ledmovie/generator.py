"""
Comet animation generator.

Builds a movie of a single "comet" sweeping along the strip: a bright head
followed by a tail that fades out and turns greyer towards its end, then a
few seconds of blank frames so the loop restarts from a dark strip.
"""

import logging
import math
from typing import List, Tuple

from .errors import InvalidParameter
from .frame import Frame
from .movie import DEFAULT_COMPRESSION_RATIO, Movie
from .pixel import Pixel
from .utils import round_half_up

# Configure logging
logger = logging.getLogger(__name__)

LED_TYPES = ('rgb', 'rgbw')


def _validate(n_leds: int, n_frames: int, tail_length: int, led_type: str,
              fps: int, step: int, saturation_factor: float) -> None:
    if n_leds <= 0:
        raise InvalidParameter(f"n_leds must be positive, got {n_leds}")
    if n_frames < 0:
        raise InvalidParameter(f"n_frames must not be negative, got {n_frames}")
    if tail_length < 1:
        raise InvalidParameter(f"tail_length must be at least 1, got {tail_length}")
    if led_type not in LED_TYPES:
        raise InvalidParameter(f"Unknown LED type '{led_type}', expected one of {LED_TYPES}")
    if fps <= 0:
        raise InvalidParameter(f"fps must be positive, got {fps}")
    if step <= 0:
        raise InvalidParameter(f"step must be positive, got {step}")
    if not math.isfinite(saturation_factor):
        raise InvalidParameter(f"saturation_factor must be a finite number, got {saturation_factor}")


def comet_frame(position: int, n_leds: int, tail_length: int, background: Pixel,
                color: Tuple[int, int, int] = (0, 0, 255),
                saturation_factor: float = 0.5) -> Frame:
    """
    Generate a single frame of the comet effect.

    Args:
        position: Index of the comet head (may be past the end of the strip)
        n_leds: Total number of LEDs
        tail_length: Number of LEDs lit by the head and its tail
        background: Pixel used for every LED the comet does not touch
        color: Head colour (r, g, b)
        saturation_factor: Desaturation reached at the last tail LED

    Returns:
        Frame with the comet drawn over the background
    """
    rgbw = background.white is not None
    pixels = [background.copy() for _ in range(n_leds)]

    for j in range(tail_length):
        index = position - j
        # Tail LEDs before the start (or past the end) of the strip are not drawn
        if index < 0 or index >= n_leds:
            continue

        fade = (tail_length - j) / tail_length
        if tail_length > 1:
            desaturation = saturation_factor * j / (tail_length - 1)
        else:
            desaturation = 0

        r, g, b = color
        pixels[index] = (Pixel(r, g, b, 0 if rgbw else None)
                         .desaturate(desaturation)
                         .brighten(fade))

    return Frame(pixels)


def make_movie(n_leds: int = 600, n_frames: int = 250, tail_length: int = 15,
               led_type: str = 'rgb', fps: int = 15, step: int = 5,
               saturation_factor: float = 0.5, buffer_seconds: int = 3,
               color: Tuple[int, int, int] = (0, 0, 255),
               loop_type: int = 0,
               compression_ratio: float = DEFAULT_COMPRESSION_RATIO) -> Movie:
    """
    Generate a comet animation movie.

    The head advances `step` LEDs per frame, so the movie has
    ceil(n_frames / step) comet frames followed by buffer_seconds * fps blank
    frames.

    Args:
        n_leds: Number of LEDs on the device
        n_frames: Head positions to sweep before down-sampling by `step`
        tail_length: Number of LEDs lit by the head and its tail
        led_type: 'rgb' or 'rgbw', matching the device LED profile
        fps: Frames per second
        step: Head advance per frame
        saturation_factor: Desaturation reached at the last tail LED
        buffer_seconds: Seconds of blank frames appended after the sweep
        color: Head colour (r, g, b)
        loop_type: Device-defined loop mode stored on the movie
        compression_ratio: Ratio used by Movie.size(is_compressed=True)

    Returns:
        The generated Movie

    Raises:
        InvalidParameter: On non-positive n_leds, fps or step, negative
            n_frames or buffer_seconds, tail_length below 1, an unknown
            led_type, or when no frame at all would be produced
    """
    _validate(n_leds, n_frames, tail_length, led_type, fps, step, saturation_factor)
    if buffer_seconds < 0:
        raise InvalidParameter(f"buffer_seconds must not be negative, got {buffer_seconds}")

    black = Pixel(0, 0, 0, 0) if led_type == 'rgbw' else Pixel(0, 0, 0)
    frames: List[Frame] = []

    for i in range(0, n_frames, step):
        frames.append(comet_frame(i, n_leds, tail_length, black, color, saturation_factor))

    n_buffer_frames = buffer_seconds * fps
    for _ in range(n_buffer_frames):
        frames.append(Frame.filled(n_leds, black))

    duration = round_half_up(len(frames) / fps)
    movie = Movie(
        frames,
        fps,
        name=f"fairy_{fps}fps_{duration}s",
        descriptor_type=f"{led_type}_raw",
        loop_type=loop_type,
        compression_ratio=compression_ratio,
    )

    logger.info(f"Generated movie '{movie.name}': {movie.frames_number} frames "
                f"({len(frames) - n_buffer_frames} comet, {n_buffer_frames} blank), "
                f"{n_leds} {led_type} LEDs")
    return movie
