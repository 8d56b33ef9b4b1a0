"""
Frame Module.

A frame is one time-slice of a display: the colour of every LED, in strip
order. Frames encode to the flat byte layout the device expects, one pixel
after another.
"""

from typing import Iterable, Iterator, Tuple

from .errors import InvalidFrame
from .pixel import ChannelMode, Pixel


class Frame:
    """An ordered, fixed-length sequence of pixels sharing one channel mode."""

    def __init__(self, pixels: Iterable[Pixel]):
        """
        Create a frame.

        Args:
            pixels: Pixels in strip order, one per LED

        Raises:
            InvalidFrame: If there are no pixels or their channel modes differ
        """
        self._pixels = list(pixels)
        if not self._pixels:
            raise InvalidFrame("A frame needs at least one pixel")

        mode = self._pixels[0].mode
        for index, pixel in enumerate(self._pixels):
            if pixel.mode != mode:
                raise InvalidFrame(
                    f"Pixel {index} is {pixel.type}, expected {mode.value} like the first pixel"
                )

    @classmethod
    def filled(cls, n_leds: int, pixel: Pixel) -> 'Frame':
        """Create a frame of n_leds independent copies of a pixel."""
        return cls(pixel.copy() for _ in range(n_leds))

    @property
    def pixels(self) -> Tuple[Pixel, ...]:
        return tuple(self._pixels)

    @property
    def mode(self) -> ChannelMode:
        return self._pixels[0].mode

    @property
    def channels(self) -> int:
        """Bytes per encoded pixel (3 for RGB, 4 for RGBW)."""
        return self.mode.width

    def get_n_leds(self) -> int:
        """
        Get the number of LEDs in this frame.

        Returns:
            Pixel count
        """
        return len(self._pixels)

    def to_octet(self) -> bytes:
        """
        Output the frame as bytes.

        Returns:
            get_n_leds() * channels bytes, each pixel encoded in turn

        Raises:
            InvalidFrame: If a pixel changed channel mode after the frame was built
        """
        channels = self.channels
        output = bytearray(len(self._pixels) * channels)
        offset = 0
        for index, pixel in enumerate(self._pixels):
            octet = pixel.to_octet()
            if len(octet) != channels:
                raise InvalidFrame(
                    f"Pixel {index} encodes to {len(octet)} bytes, frame uses {channels}"
                )
            output[offset:offset + channels] = octet
            offset += channels
        return bytes(output)

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def __getitem__(self, index: int) -> Pixel:
        return self._pixels[index]

    def __repr__(self) -> str:
        return f"Frame(n_leds={len(self._pixels)}, mode={self.mode.value})"
