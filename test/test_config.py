#!/usr/bin/env python3
"""
Unit tests for configuration loading
"""

import os
import tempfile
import unittest

from ledmovie.config import api_settings, generator_settings, load_config, movie_settings


class TestConfig(unittest.TestCase):
    """Test configuration loading with fallbacks."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.temp_dir.name, 'config.ini')
        with open(self.config_path, 'w') as f:
            f.write("[DEFAULT]\nLOG_LEVEL = DEBUG\n\n"
                    "[GENERATOR]\nN_LEDS = 250\nTYPE = RGBW\nSATURATION_FACTOR = 0.75\n\n"
                    "[MOVIE]\nCOMPRESSION_RATIO = 0.3\n")

    def tearDown(self):
        """Clean up test fixtures."""
        self.temp_dir.cleanup()

    def test_missing_file_uses_defaults(self):
        with self.assertLogs('ledmovie.config', level='WARNING'):
            config = load_config(os.path.join(self.temp_dir.name, 'missing.ini'))

        self.assertEqual(generator_settings(config), {
            'n_leds': 600,
            'n_frames': 250,
            'tail_length': 15,
            'led_type': 'rgb',
            'fps': 15,
            'step': 5,
            'saturation_factor': 0.5,
            'buffer_seconds': 3,
        })
        self.assertEqual(movie_settings(config), {'loop_type': 0, 'compression_ratio': 0.5})
        self.assertEqual(api_settings(config), {'host': '0.0.0.0', 'port': 5000})

    def test_values_from_file(self):
        config = load_config(self.config_path)
        settings = generator_settings(config)

        self.assertEqual(config.get('DEFAULT', 'LOG_LEVEL'), 'DEBUG')
        self.assertEqual(settings['n_leds'], 250)
        self.assertEqual(settings['led_type'], 'rgbw')
        self.assertEqual(settings['saturation_factor'], 0.75)
        self.assertEqual(settings['tail_length'], 15)
        self.assertEqual(movie_settings(config)['compression_ratio'], 0.3)

    def test_no_path_means_defaults(self):
        config = load_config(None)
        self.assertEqual(generator_settings(config)['fps'], 15)


if __name__ == '__main__':
    unittest.main()
