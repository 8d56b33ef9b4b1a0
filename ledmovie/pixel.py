"""
Pixel Module.

This module defines the colour state of a single addressable LED. A pixel is
either RGB or RGBW; which one is decided solely by whether it carries a white
value, so the channel mode can never disagree with the stored channels.

Every colour transform mutates the pixel in place and returns it, so calls
can be chained:

    Pixel(0, 0, 255).desaturate(0.25).brighten(0.5)
"""

from enum import Enum
from typing import Optional, Tuple

from .utils import clamp, round_half_up


class ChannelMode(Enum):
    """Channel layout of a pixel."""

    RGB = 'rgb'
    RGBW = 'rgbw'

    @property
    def width(self) -> int:
        """Number of bytes a pixel of this mode encodes to."""
        return len(self.value)


class Pixel:
    """
    A single RGB or RGBW LED colour.

    Channels are plain numbers with a nominal range of 0-255. Transforms that
    blend towards grey (saturate, desaturate) may leave fractional values;
    they are truncated to bytes only when the pixel is encoded.
    """

    def __init__(self, red: float, green: float, blue: float, white: Optional[float] = None):
        """
        Create a pixel.

        Args:
            red: Red value (0-255)
            green: Green value (0-255)
            blue: Blue value (0-255)
            white: Optional white value (0-255); when given the pixel is RGBW
        """
        self.red = red
        self.green = green
        self.blue = blue
        self.white = white

    @property
    def mode(self) -> ChannelMode:
        """Channel mode, derived from the presence of a white value."""
        return ChannelMode.RGBW if self.white is not None else ChannelMode.RGB

    @property
    def type(self) -> str:
        """Channel mode as the device-facing string ('rgb' or 'rgbw')."""
        return self.mode.value

    @property
    def channels(self) -> Tuple[float, ...]:
        """Active channel values in (r, g, b[, w]) order."""
        if self.white is None:
            return (self.red, self.green, self.blue)
        return (self.red, self.green, self.blue, self.white)

    def copy(self) -> 'Pixel':
        """Return an independent pixel with the same channels."""
        return Pixel(self.red, self.green, self.blue, self.white)

    # --- mode conversion ---

    def to_rgbw(self) -> 'Pixel':
        """
        Convert the pixel to RGBW. A pixel that is already RGBW is unchanged,
        otherwise the white channel starts at 0.
        """
        if self.white is None:
            self.white = 0
        return self

    def to_rgb(self, preserve_white: bool = False) -> 'Pixel':
        """
        Convert the pixel to RGB, dropping the white channel.

        Args:
            preserve_white: Fold the brightness of a non-zero white value into
                the remaining RGB channels before dropping it

        Returns:
            The updated pixel
        """
        white = self.white
        if white is None:
            return self
        self.white = None

        if white and preserve_white:
            self.brighten(white / 255)

        return self

    # --- state ---

    def is_on(self) -> bool:
        """True if any active channel (white included) is above zero."""
        return any(value > 0 for value in self.channels)

    def turn_off(self) -> 'Pixel':
        """Set every active channel to 0."""
        self.red = 0
        self.green = 0
        self.blue = 0
        if self.white is not None:
            self.white = 0
        return self

    def set_color(self, red: float, green: float, blue: float, white: Optional[float] = None) -> 'Pixel':
        """
        Overwrite the colour.

        A numeric white value makes the pixel RGBW whatever its previous mode;
        passing no white leaves the current white channel as it is.
        """
        self.red = red
        self.green = green
        self.blue = blue
        if white is not None:
            self.white = white
        return self

    def invert_color(self) -> 'Pixel':
        """Invert each channel (255 - value); white only when present."""
        self.red = 255 - self.red
        self.green = 255 - self.green
        self.blue = 255 - self.blue
        if self.white is not None:
            self.white = 255 - self.white
        return self

    # --- colour algebra ---

    def _scale(self, factor: float) -> None:
        self.red = clamp(round_half_up(self.red * factor))
        self.green = clamp(round_half_up(self.green * factor))
        self.blue = clamp(round_half_up(self.blue * factor))
        if self.white is not None:
            self.white = clamp(round_half_up(self.white * factor))

    def brighten(self, factor: float) -> 'Pixel':
        """
        Scale every channel by a factor (e.g. 1.2 is 20% brighter).

        Results are rounded and clamped into [0, 255] for any factor.
        """
        self._scale(factor)
        return self

    def dim(self, factor: float) -> 'Pixel':
        """
        Scale every channel by a factor (e.g. 0.8 is 20% dimmer).

        Same computation as brighten(); results are rounded and clamped into
        [0, 255].
        """
        self._scale(factor)
        return self

    def saturate(self, factor: float) -> 'Pixel':
        """
        Push channels away from (factor > 1) or towards (factor < 1) the grey
        average of red, green and blue.

        The white channel is blended against the same RGB average. Results are
        clamped into [0, 255].

        Args:
            factor: 1 keeps the colour, 0 turns it fully grey

        Returns:
            The updated pixel
        """
        average = (self.red + self.green + self.blue) / 3
        self.red = clamp(average + factor * (self.red - average))
        self.green = clamp(average + factor * (self.green - average))
        self.blue = clamp(average + factor * (self.blue - average))
        if self.white is not None:
            self.white = clamp(average + factor * (self.white - average))
        return self

    def desaturate(self, factor: float) -> 'Pixel':
        """
        Blend channels towards the grey average of red, green and blue.

        Unlike saturate() the result is not clamped: a factor outside [0, 1]
        can move values outside [0, 255].

        Args:
            factor: 0 keeps the colour, 1 turns it fully grey

        Returns:
            The updated pixel
        """
        average = (self.red + self.green + self.blue) / 3
        self.red = self.red + factor * (average - self.red)
        self.green = self.green + factor * (average - self.green)
        self.blue = self.blue + factor * (average - self.blue)
        if self.white is not None:
            self.white = self.white + factor * (average - self.white)
        return self

    # --- encoding ---

    def to_octet(self) -> bytes:
        """
        Encode the pixel for the device.

        RGBW pixels encode white first: [w, r, g, b]. RGB pixels encode
        [r, g, b]. Values are truncated towards zero and reduced to a single
        byte.
        """
        if self.white is None:
            values = (self.red, self.green, self.blue)
        else:
            values = (self.white, self.red, self.green, self.blue)
        return bytes(int(value) & 0xFF for value in values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pixel):
            return NotImplemented
        return self.mode == other.mode and self.channels == other.channels

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.type}({self.red}, {self.green}, {self.blue}, {self.white})"

    def __repr__(self) -> str:
        return f"Pixel(r={self.red}, g={self.green}, b={self.blue}, w={self.white})"
