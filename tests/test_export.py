"""Tests for image export.

Tests cover:
- Writing and reading PNG and PPM files through Pillow
- Input validation
- Saving a finished render
"""

import numpy as np
import pytest

from ray_tracing.camera.pinhole import Camera
from ray_tracing.core.render import Renderer
from ray_tracing.preview.export import load_image, save_image, save_render
from ray_tracing.scene.presets import create_two_sphere_scene


class TestSaveImage:
    """Tests for save_image and load_image."""

    @pytest.mark.parametrize("suffix", [".png", ".ppm"])
    def test_lossless_round_trip(self, tmp_path, rng, suffix):
        pixels = rng.integers(0, 256, size=(5, 7, 3), dtype=np.uint8)
        path = tmp_path / f"image{suffix}"
        save_image(pixels, path)
        assert path.exists()
        assert np.array_equal(load_image(path), pixels)

    def test_rejects_wrong_shape(self, tmp_path):
        with pytest.raises(ValueError):
            save_image(np.zeros((4, 4), dtype=np.uint8), tmp_path / "bad.png")

    def test_rejects_wrong_dtype(self, tmp_path):
        with pytest.raises(ValueError):
            save_image(np.zeros((4, 4, 3), dtype=np.float64), tmp_path / "bad.png")


class TestSaveRender:
    """Tests for save_render."""

    def test_saves_renderer_buffer(self, tmp_path, rng):
        camera = Camera(8, 4, 4.0, 2.0, 1.0, antialiasing=0, max_ray_bounces=2)
        renderer = Renderer(camera, create_two_sphere_scene(), rng=rng)
        renderer.render()
        path = tmp_path / "render.png"
        save_render(renderer, path)
        assert np.array_equal(load_image(path), renderer.get_image_uint8())
