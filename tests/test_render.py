"""Tests for the Renderer.

Tests cover:
- Output buffer shape and value range
- Progress callbacks and the row generator
- Cooperative cancellation between pixels
- Reproducibility with a seeded generator
- 8-bit conversion of the buffer
"""

import numpy as np
import pytest

from ray_tracing.camera.pinhole import Camera
from ray_tracing.core.render import RenderCancelledError, Renderer
from ray_tracing.scene.presets import create_two_sphere_scene

WIDTH = 16
HEIGHT = 9


def make_camera(antialiasing=1, bounces=3):
    return Camera(WIDTH, HEIGHT, 2.0 * WIDTH / HEIGHT, 2.0, 1.0, antialiasing, bounces)


@pytest.fixture
def renderer(rng):
    return Renderer(make_camera(), create_two_sphere_scene(), rng=rng)


class TestRender:
    """Tests for Renderer.render."""

    def test_shape_and_dtype(self, renderer):
        image = renderer.render()
        assert image.shape == (HEIGHT, WIDTH, 3)
        assert image.dtype == np.float64

    def test_values_in_unit_range(self, renderer):
        image = renderer.render()
        assert np.all(image >= 0.0)
        assert np.all(image <= 1.0)

    def test_callback_called_per_row(self, renderer):
        calls = []
        renderer.render(callback=lambda done, total: calls.append((done, total)))
        assert calls == [(row, HEIGHT) for row in range(1, HEIGHT + 1)]
        assert renderer.rows_completed == HEIGHT

    def test_render_returns_copy(self, renderer):
        image = renderer.render()
        image[:] = -1.0
        assert np.all(renderer.get_image_numpy() >= 0.0)

    def test_top_row_is_sky(self, renderer):
        """Nothing is above the horizon, so the top row is the sky gradient."""
        image = renderer.render()
        assert np.all(image[0, :, 2] == 1.0)

    def test_seeded_renders_match(self):
        world = create_two_sphere_scene()
        first = Renderer(make_camera(), world, rng=np.random.default_rng(3)).render()
        second = Renderer(make_camera(), world, rng=np.random.default_rng(3)).render()
        assert np.array_equal(first, second)


class TestRenderRows:
    """Tests for the generator interface."""

    def test_yields_each_row(self, renderer):
        progress = list(renderer.render_rows())
        assert progress[0] == (1, HEIGHT)
        assert progress[-1] == (HEIGHT, HEIGHT)
        assert len(progress) == HEIGHT

    def test_partial_iteration(self, renderer):
        rows = renderer.render_rows()
        next(rows)
        next(rows)
        assert renderer.rows_completed == 2
        image = renderer.get_image_numpy()
        assert np.all(image[2:] == 0.0)


class TestCancellation:
    """Tests for cooperative cancellation."""

    def test_cancel_before_start(self, rng):
        renderer = Renderer(make_camera(), create_two_sphere_scene(), rng=rng, cancel=lambda: True)
        with pytest.raises(RenderCancelledError) as exc_info:
            renderer.render()
        assert exc_info.value.rows_completed == 0
        assert exc_info.value.total_rows == HEIGHT

    def test_cancel_mid_render(self, rng):
        polls = []

        def cancel():
            polls.append(1)
            # One poll per pixel; stop at the start of the fourth row
            return len(polls) > 3 * WIDTH

        renderer = Renderer(make_camera(), create_two_sphere_scene(), rng=rng, cancel=cancel)
        with pytest.raises(RenderCancelledError) as exc_info:
            renderer.render()
        assert exc_info.value.rows_completed == 3
        assert renderer.rows_completed == 3

    def test_is_runtime_error(self):
        assert issubclass(RenderCancelledError, RuntimeError)


class TestImageConversion:
    """Tests for 8-bit output."""

    def test_uint8_shape(self, renderer):
        renderer.render()
        pixels = renderer.get_image_uint8()
        assert pixels.shape == (HEIGHT, WIDTH, 3)
        assert pixels.dtype == np.uint8

    def test_iter_pixels_row_major(self, renderer):
        renderer.render()
        pixels = list(renderer.iter_pixels())
        assert len(pixels) == WIDTH * HEIGHT
        assert pixels[0] == tuple(int(c) for c in renderer.get_image_uint8()[0, 0])
        assert pixels[WIDTH] == tuple(int(c) for c in renderer.get_image_uint8()[1, 0])
