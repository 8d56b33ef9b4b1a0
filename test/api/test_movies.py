#!/usr/bin/env python3
"""
Unit tests for the movies API
"""

import unittest

from ledmovie.api import create_app


class TestMoviesAPI(unittest.TestCase):
    """Test suite for the movies API"""

    def setUp(self):
        """Set up each test"""
        self.app = create_app()
        self.app.testing = True
        self.client = self.app.test_client()

        self.params = {
            'n_leds': 10,
            'n_frames': 10,
            'tail_length': 3,
            'led_type': 'rgb',
            'fps': 5,
        }

    def create(self, **overrides):
        params = dict(self.params, **overrides)
        response = self.client.post('/api/movies/', json=params)
        self.assertEqual(response.status_code, 201)
        return response.get_json()

    def test_health(self):
        response = self.client.get('/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'status': 'ok'})

    def test_create_movie(self):
        movie = self.create()
        self.assertEqual(movie['id'], 0)
        self.assertEqual(movie['frames_number'], 17)
        self.assertEqual(movie['leds_per_frame'], 10)
        self.assertEqual(movie['descriptor_type'], 'rgb_raw')
        self.assertEqual(movie['loop_type'], 0)

    def test_create_movie_with_defaults(self):
        response = self.client.post('/api/movies/')
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.get_json()['leds_per_frame'], 600)

    def test_create_movie_rejects_invalid_parameters(self):
        response = self.client.post('/api/movies/', json=dict(self.params, n_leds=0))
        self.assertEqual(response.status_code, 400)
        self.assertIn('n_leds', response.get_json()['error'])

        response = self.client.post('/api/movies/', json=dict(self.params, fps='fast'))
        self.assertEqual(response.status_code, 400)

        response = self.client.post('/api/movies/', json=[1, 2, 3])
        self.assertEqual(response.status_code, 400)

    def test_create_movie_rejects_non_finite_saturation_factor(self):
        for literal in ('NaN', 'Infinity', '1e999'):
            with self.subTest(literal=literal):
                body = f'{{"n_leds": 10, "fps": 5, "saturation_factor": {literal}}}'
                response = self.client.post('/api/movies/', data=body, content_type='application/json')
                self.assertEqual(response.status_code, 400)
                self.assertIn('saturation_factor', response.get_json()['error'])

    def test_create_movie_rejects_mistyped_numbers(self):
        for field, value in (('n_leds', 2.7), ('fps', True), ('tail_length', '3'),
                             ('saturation_factor', False), ('led_type', 1)):
            with self.subTest(field=field, value=value):
                response = self.client.post('/api/movies/', json=dict(self.params, **{field: value}))
                self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get('/api/movies/').get_json(), [])

    def test_create_movie_accepts_integer_saturation_factor(self):
        movie = self.create(saturation_factor=1)
        self.assertEqual(movie['leds_per_frame'], 10)

    def test_list_and_get(self):
        self.create()
        self.create(led_type='rgbw')

        response = self.client.get('/api/movies/')
        self.assertEqual(response.status_code, 200)
        movies = response.get_json()
        self.assertEqual([movie['id'] for movie in movies], [0, 1])

        response = self.client.get('/api/movies/1')
        self.assertEqual(response.get_json()['descriptor_type'], 'rgbw_raw')

    def test_get_unknown_movie(self):
        response = self.client.get('/api/movies/42')
        self.assertEqual(response.status_code, 404)

    def test_frame_preview(self):
        movie = self.create()
        response = self.client.get(f"/api/movies/{movie['id']}/frames/1")
        self.assertEqual(response.status_code, 200)

        leds = response.get_json()['leds']
        self.assertEqual(len(leds), 10)
        self.assertEqual(leds[5], {'r': 0, 'g': 0, 'b': 255, 'w': None, 'hex': '#0000ff'})
        self.assertEqual(leds[4]['hex'], '#0e0e8e')

        response = self.client.get(f"/api/movies/{movie['id']}/frames/17")
        self.assertEqual(response.status_code, 404)

    def test_octet(self):
        movie = self.create(led_type='rgbw')
        response = self.client.get(f"/api/movies/{movie['id']}/octet")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'application/octet-stream')
        self.assertEqual(len(response.data), 17 * 10 * 4)
        self.assertEqual(response.data[:4], bytes([0, 0, 0, 255]))

    def test_size(self):
        movie = self.create()
        response = self.client.get(f"/api/movies/{movie['id']}/size")
        self.assertEqual(response.get_json()['size'], 510)

        response = self.client.get(f"/api/movies/{movie['id']}/size?compressed=true")
        self.assertEqual(response.get_json(), {'id': movie['id'], 'compressed': True, 'size': 255})

    def test_delete(self):
        movie = self.create()
        response = self.client.delete(f"/api/movies/{movie['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['status'], 'deleted')

        response = self.client.get(f"/api/movies/{movie['id']}")
        self.assertEqual(response.status_code, 404)

    def test_new_app_resets_registry(self):
        self.create()
        other = create_app().test_client()
        self.assertEqual(other.get('/api/movies/').get_json(), [])
        self.assertEqual(self.client.get('/api/movies/').get_json(), [])


if __name__ == '__main__':
    unittest.main()
