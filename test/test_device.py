#!/usr/bin/env python3
"""
Tests for the device collaborator interface and the mock device
"""

import unittest
from unittest.mock import MagicMock, call

from ledmovie.device import Device, MockDevice, upload_movie
from ledmovie.errors import DeviceError, InvalidParameter
from ledmovie.generator import make_movie


class TestMockDevice(unittest.TestCase):
    """Test the in-memory device."""

    def setUp(self):
        """Set up test fixtures."""
        self.device = MockDevice(name='Tree', n_leds=10, led_profile='RGBW')
        self.movie = make_movie(n_leds=10, n_frames=10, tail_length=3, led_type='rgbw', fps=5)

    def test_requires_login(self):
        with self.assertRaises(DeviceError):
            self.device.get_n_leds()
        with self.assertRaises(DeviceError):
            self.device.add_movie(self.movie)

    def test_details(self):
        self.device.login()
        self.assertEqual(self.device.get_name(), 'Tree')
        self.assertEqual(self.device.get_n_leds(), 10)
        self.assertEqual(self.device.get_device_details()['led_profile'], 'RGBW')

    def test_add_movie_stores_metadata_and_payload(self):
        self.device.login()
        movie_id = self.device.add_movie(self.movie)

        self.assertEqual(movie_id, 0)
        self.assertEqual(self.movie.id, 0)
        movies = self.device.get_list_of_movies()
        self.assertEqual(len(movies), 1)
        self.assertEqual(movies[0]['name'], self.movie.name)
        self.assertEqual(movies[0]['descriptor_type'], 'rgbw_raw')
        self.assertEqual(self.device.payloads[0], self.movie.to_octet())

    def test_add_movie_warns_on_led_mismatch(self):
        self.device.login()
        movie = make_movie(n_leds=5, n_frames=5, tail_length=2, fps=5)
        with self.assertLogs('ledmovie.device', level='WARNING'):
            self.device.add_movie(movie)

    def test_brightness_and_mode_validation(self):
        self.device.login()
        with self.assertRaises(InvalidParameter):
            self.device.set_brightness(101)
        with self.assertRaises(InvalidParameter):
            self.device.set_mode('disco')
        self.device.set_brightness(40)
        self.device.set_mode('movie')
        self.assertEqual(self.device.brightness, 40)
        self.assertEqual(self.device.mode, 'movie')

    def test_upload_movie(self):
        self.device.login()
        movie_id = upload_movie(self.device, self.movie)

        self.assertEqual(movie_id, 0)
        self.assertEqual(self.device.brightness, 100)
        self.assertEqual(self.device.mode, 'movie')

    def test_upload_movie_call_order(self):
        """Any Device implementation gets the same sequence of calls."""
        device = MagicMock(spec=Device)
        device.add_movie.return_value = 7

        self.assertEqual(upload_movie(device, self.movie), 7)
        self.assertEqual(device.method_calls, [
            call.set_brightness(100),
            call.set_mode('off'),
            call.add_movie(self.movie),
            call.set_mode('movie'),
        ])


if __name__ == '__main__':
    unittest.main()
