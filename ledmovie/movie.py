"""
Movie Module.

A movie is the unit a lighting device stores and loops: an ordered list of
frames plus the playback metadata registered on the device before the pixel
payload is uploaded.

The metadata (export()) and the binary payload (to_octet()) travel
separately; the device collaborator sends the first to create a movie slot
and then streams the second into it.
"""

import logging
import math
import uuid
from typing import Any, Dict, List, Optional, Sequence

from .errors import InvalidFrame, InvalidParameter
from .frame import Frame
from .utils import round_half_up

# Configure logging
logger = logging.getLogger(__name__)

# Assumed ratio of compressed to raw payload size. The device transport
# decides how much it actually saves; override per movie or in config.
DEFAULT_COMPRESSION_RATIO = 0.5


def estimate_compressed_size(raw_size: int, ratio: float = DEFAULT_COMPRESSION_RATIO) -> int:
    """
    Estimate the size of a payload after transport compression.

    Args:
        raw_size: Uncompressed payload size in bytes
        ratio: Expected compressed/raw size ratio (0 < ratio <= 1)

    Returns:
        Estimated size in bytes, rounded up
    """
    if not 0 < ratio <= 1:
        raise InvalidParameter(f"Compression ratio must be in (0, 1], got {ratio}")
    return int(math.ceil(raw_size * ratio))


class Movie:
    """A sequence of frames plus the metadata a device needs to play it."""

    def __init__(self, frames: Sequence[Frame], fps: int, name: str,
                 descriptor_type: Optional[str] = None,
                 loop_type: int = 0,
                 unique_id: Optional[str] = None,
                 id: Optional[int] = None,
                 compression_ratio: float = DEFAULT_COMPRESSION_RATIO):
        """
        Create a movie.

        Args:
            frames: Frames in playback order; all must share LED count and mode
            fps: Frames per second
            name: Name shown in the device's movie list
            descriptor_type: Device pixel encoding, defaults to '<mode>_raw'
            loop_type: Device-defined loop mode
            unique_id: Movie identifier, a fresh UUID when omitted
            id: Slot id assigned by the device, None until uploaded
            compression_ratio: Ratio used by size(is_compressed=True)

        Raises:
            InvalidParameter: If there are no frames or fps is not positive
            InvalidFrame: If frames differ in LED count or channel mode
        """
        self._frames: List[Frame] = list(frames)
        if not self._frames:
            raise InvalidParameter("A movie needs at least one frame")
        if fps <= 0:
            raise InvalidParameter(f"fps must be positive, got {fps}")

        first = self._frames[0]
        for index, frame in enumerate(self._frames):
            if frame.get_n_leds() != first.get_n_leds():
                raise InvalidFrame(
                    f"Frame {index} has {frame.get_n_leds()} LEDs, expected {first.get_n_leds()}"
                )
            if frame.mode != first.mode:
                raise InvalidFrame(
                    f"Frame {index} is {frame.mode.value}, expected {first.mode.value}"
                )

        self.id = id
        self.name = name
        self.unique_id = unique_id or str(uuid.uuid4())
        self.descriptor_type = descriptor_type or f"{first.mode.value}_raw"
        self.loop_type = loop_type
        self.fps = fps
        self.compression_ratio = compression_ratio
        self._channels = first.channels

        logger.debug(f"Created movie '{self.name}': {self.frames_number} frames, "
                     f"{self.leds_per_frame} LEDs, {self.descriptor_type}")

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    @property
    def leds_per_frame(self) -> int:
        return self._frames[0].get_n_leds()

    @property
    def frames_number(self) -> int:
        return len(self._frames)

    @property
    def channels(self) -> int:
        """Bytes per encoded pixel, shared by every frame."""
        return self._channels

    def get_frame(self, index: int) -> Frame:
        return self._frames[index]

    def duration(self) -> int:
        """Playback length of one loop in whole seconds."""
        return round_half_up(self.frames_number / self.fps)

    def export(self) -> Dict[str, Any]:
        """
        Export the movie metadata, without any pixel data.

        Returns:
            Dictionary with name, unique_id, descriptor_type, leds_per_frame,
            loop_type, frames_number and fps
        """
        return {
            'name': self.name,
            'unique_id': self.unique_id,
            'descriptor_type': self.descriptor_type,
            'leds_per_frame': self.leds_per_frame,
            'loop_type': self.loop_type,
            'frames_number': self.frames_number,
            'fps': self.fps,
        }

    def to_octet(self) -> bytes:
        """
        Output the whole animation as one contiguous byte payload.

        Returns:
            Every frame's bytes, in frame order
        """
        payload = bytearray()
        for frame in self._frames:
            payload.extend(frame.to_octet())

        logger.debug(f"Encoded movie '{self.name}' into {len(payload)} bytes")
        return bytes(payload)

    def size(self, is_compressed: bool = False) -> int:
        """
        Get the payload size in bytes.

        Args:
            is_compressed: Return the estimated size after transport compression

        Returns:
            Size in bytes
        """
        raw_size = self.leds_per_frame * self.frames_number * self._channels
        if is_compressed:
            return estimate_compressed_size(raw_size, self.compression_ratio)
        return raw_size

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return (f"Movie(name={self.name!r}, frames_number={self.frames_number}, "
                f"leds_per_frame={self.leds_per_frame}, fps={self.fps})")
