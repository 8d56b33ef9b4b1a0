"""
Device collaborator interface.

The package never talks to real hardware. A device implementation (network
client, test double, ...) only has to provide the calls below; the core hands
it a Movie and the device registers movie.export() and then uploads
movie.to_octet().

MockDevice keeps everything in memory so the upload flow can run without a
device on the network.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .errors import DeviceError, InvalidParameter
from .movie import Movie

# Configure logging
logger = logging.getLogger(__name__)


class Device(ABC):
    """Operations the core expects from a lighting device."""

    @abstractmethod
    def login(self) -> None:
        """Authenticate; must be called before any other command."""

    @abstractmethod
    def get_device_details(self) -> Dict[str, Any]:
        """Return device details, including 'number_of_led' and 'led_profile'."""

    @abstractmethod
    def get_n_leds(self) -> int:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def set_brightness(self, percent: int) -> None:
        pass

    @abstractmethod
    def set_mode(self, name: str) -> None:
        pass

    @abstractmethod
    def get_list_of_movies(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def add_movie(self, movie: Movie) -> int:
        """Register and upload a movie, returning the slot id the device assigned."""


class MockDevice(Device):
    """
    A mock implementation of a lighting device for when hardware is not available.
    This allows the upload flow to run in a simulation mode.
    """

    MODES = ('off', 'color', 'demo', 'effect', 'movie', 'playlist', 'rt')

    def __init__(self, name: str = 'Mock', n_leds: int = 600, led_profile: str = 'RGB'):
        self.name = name
        self.n_leds = n_leds
        self.led_profile = led_profile
        self.logged_in = False
        self.brightness = 100
        self.mode = 'off'
        self.movies: List[Dict[str, Any]] = []
        self.payloads: Dict[int, bytes] = {}
        logger.info(f"Created mock device '{name}' with {n_leds} {led_profile} LEDs")

    def _require_login(self) -> None:
        if not self.logged_in:
            raise DeviceError(f"Device '{self.name}' requires login() first")

    def login(self) -> None:
        self.logged_in = True
        logger.info(f"Logged in to mock device '{self.name}'")

    def get_device_details(self) -> Dict[str, Any]:
        self._require_login()
        return {
            'device_name': self.name,
            'number_of_led': self.n_leds,
            'led_profile': self.led_profile,
        }

    def get_n_leds(self) -> int:
        self._require_login()
        return self.n_leds

    def get_name(self) -> str:
        self._require_login()
        return self.name

    def set_brightness(self, percent: int) -> None:
        self._require_login()
        if not 0 <= percent <= 100:
            raise InvalidParameter(f"Brightness must be 0-100, got {percent}")
        self.brightness = percent
        logger.info(f"Mock device brightness set to {percent}%")

    def set_mode(self, name: str) -> None:
        self._require_login()
        if name not in self.MODES:
            raise InvalidParameter(f"Unknown mode '{name}', expected one of {self.MODES}")
        self.mode = name
        logger.info(f"Mock device mode set to {name}")

    def get_list_of_movies(self) -> List[Dict[str, Any]]:
        self._require_login()
        return [dict(entry) for entry in self.movies]

    def add_movie(self, movie: Movie) -> int:
        self._require_login()
        if movie.leds_per_frame != self.n_leds:
            logger.warning(f"Movie '{movie.name}' has {movie.leds_per_frame} LEDs per frame, "
                           f"device has {self.n_leds}")

        movie_id = len(self.movies)
        entry = movie.export()
        entry['id'] = movie_id
        self.movies.append(entry)
        self.payloads[movie_id] = movie.to_octet()
        movie.id = movie_id

        logger.info(f"Mock upload of movie '{movie.name}' as id {movie_id}: "
                    f"{len(self.payloads[movie_id])} bytes")
        return movie_id


def upload_movie(device: Device, movie: Movie) -> int:
    """
    Upload a movie and start playing it.

    Sets full brightness, switches the device off while uploading, adds the
    movie and switches to movie mode.

    Returns:
        Slot id assigned by the device
    """
    logger.info(f"Uploading movie '{movie.name}' ({movie.size() / 1000} kb)")
    device.set_brightness(100)
    device.set_mode('off')
    movie_id = device.add_movie(movie)
    device.set_mode('movie')
    return movie_id
