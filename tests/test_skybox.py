"""Tests for the gradient and equirectangular skyboxes."""

import numpy as np
import pytest
from PIL import Image

from rainrtx.skybox import EquirectangularSkybox, GradientSkybox, direction_to_uv

ZENITH = [0.2, 0.4, 0.8]
HORIZON = [1.0, 0.8, 0.6]


def labelled_pixels(height=3, width=5):
    """Pixel (row, col) holds (row / 10, col / 10, 0) so lookups are identifiable."""
    pixels = np.zeros((height, width, 3), dtype=float)
    for row in range(height):
        for col in range(width):
            pixels[row, col] = (row / 10.0, col / 10.0, 0.0)
    return pixels


class TestGradientSkybox:
    def test_straight_up_is_zenith(self):
        np.testing.assert_allclose(GradientSkybox(ZENITH, HORIZON).sample([0, 3, 0]), ZENITH)

    def test_straight_down_is_horizon(self):
        np.testing.assert_allclose(GradientSkybox(ZENITH, HORIZON).sample([0, -1, 0]), HORIZON)

    def test_level_is_midpoint(self):
        color = GradientSkybox(ZENITH, HORIZON).sample([1, 0, 0])
        np.testing.assert_allclose(color, 0.5 * (np.asarray(ZENITH) + np.asarray(HORIZON)))


class TestDirectionToUV:
    def test_up(self):
        u, v = direction_to_uv([0, 1, 0])
        assert v == pytest.approx(0.0)

    def test_down(self):
        u, v = direction_to_uv([0, -2, 0])
        assert v == pytest.approx(1.0)

    def test_negative_x_is_halfway_around(self):
        u, v = direction_to_uv([-1, 0, 0])
        assert u == pytest.approx(0.5)
        assert v == pytest.approx(0.5)

    def test_u_stays_in_unit_interval(self):
        for direction in ([1, 0, 1], [1, 0, -1], [-1, 0, 1], [-1, 0, -1]):
            u, _ = direction_to_uv(direction)
            assert 0.0 <= u < 1.0


class TestEquirectangularSkybox:
    def test_sample_up_reads_top_row(self):
        skybox = EquirectangularSkybox(labelled_pixels())
        np.testing.assert_allclose(skybox.sample([0, 1, 0]), [0.0, 0.0, 0.0])

    def test_sample_down_reads_bottom_row(self):
        skybox = EquirectangularSkybox(labelled_pixels())
        np.testing.assert_allclose(skybox.sample([0, -1, 0]), [0.2, 0.0, 0.0])

    def test_sample_negative_x(self):
        skybox = EquirectangularSkybox(labelled_pixels())
        np.testing.assert_allclose(skybox.sample([-1, 0, 0]), [0.1, 0.2, 0.0])

    def test_sample_returns_copy(self):
        skybox = EquirectangularSkybox(labelled_pixels())
        color = skybox.sample([0, -1, 0])
        color[:] = 5.0
        np.testing.assert_allclose(skybox.sample([0, -1, 0]), [0.2, 0.0, 0.0])

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            EquirectangularSkybox(np.zeros((4, 4)))

    def test_from_file(self, tmp_path):
        pixels = np.zeros((2, 3, 3), dtype=np.uint8)
        pixels[0, :] = (255, 0, 0)
        pixels[1, :] = (0, 0, 255)
        path = tmp_path / "sky.png"
        Image.fromarray(pixels).save(path)

        skybox = EquirectangularSkybox.from_file(str(path))

        assert (skybox.height, skybox.width) == (2, 3)
        np.testing.assert_allclose(skybox.sample([0, 1, 0]), [1.0, 0.0, 0.0])
        np.testing.assert_allclose(skybox.sample([0, -1, 0]), [0.0, 0.0, 1.0])

    def test_from_file_converts_to_rgb(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.new("L", (4, 2), color=51).save(path)
        skybox = EquirectangularSkybox.from_file(str(path))
        np.testing.assert_allclose(skybox.sample([1, 0, 0]), [0.2, 0.2, 0.2])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EquirectangularSkybox.from_file(str(tmp_path / "nope.png"))


class TestShortDirections:
    """Directions of any non-zero length are valid sample inputs."""

    def test_gradient_accepts_tiny_direction(self):
        np.testing.assert_allclose(GradientSkybox(ZENITH, HORIZON).sample([0, 1e-6, 0]), ZENITH)

    def test_uv_of_tiny_direction_matches_unit_direction(self):
        assert direction_to_uv([-1e-7, 0, 0]) == pytest.approx(direction_to_uv([-1, 0, 0]))


class TestNearestPixel:
    """Every texel of the map is reachable."""

    def test_every_column_of_two_wide_map_is_reached(self):
        pixels = np.zeros((1, 2, 3), dtype=float)
        pixels[0, 1] = 1.0
        skybox = EquirectangularSkybox(pixels)

        seen = set()
        for step in range(720):
            angle = 2.0 * np.pi * step / 720
            seen.add(float(skybox.sample([np.cos(angle), 0.0, np.sin(angle)])[0]))

        assert seen == {0.0, 1.0}

    def test_bottom_row_reached_off_vertical(self):
        pixels = np.zeros((2, 1, 3), dtype=float)
        pixels[1, 0] = 1.0
        skybox = EquirectangularSkybox(pixels)
        np.testing.assert_allclose(skybox.sample([0, -1, 1]), [1.0, 1.0, 1.0])
        np.testing.assert_allclose(skybox.sample([0, 1, 1]), [0.0, 0.0, 0.0])

    def test_last_column_reached(self):
        skybox = EquirectangularSkybox(labelled_pixels())
        # phi just short of 2 pi
        color = skybox.sample([1.0, 0.0, 0.01])
        assert color[1] == pytest.approx(0.4)
