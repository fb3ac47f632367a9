import numpy as np
import pytest

from asciiterm.errors import InvalidDimension
from asciiterm.sampling import output_rows, sample
from tests.conftest import solid_grid, vertical_step_grid


def test_output_rows_halves_height():
    assert output_rows(80, 4, 4) == 40
    assert output_rows(4, 4, 2) == 1


def test_output_rows_minimum_one():
    assert output_rows(1, 1000, 1) == 1


def test_output_rows_rounds_half_up():
    # 5 * 1 / 1 / 2 = 2.5
    assert output_rows(5, 1, 1) == 3


def test_output_rows_custom_aspect():
    assert output_rows(10, 10, 10, aspect_ratio=1.0) == 10


@pytest.mark.parametrize("columns, width, height", [(4, 4, 2), (80, 640, 480), (33, 17, 91), (1, 3, 3)])
def test_sample_dimensions(columns, width, height):
    sampled = sample(solid_grid(width, height, (10, 20, 30)), columns)
    assert sampled.columns == columns
    assert sampled.rows == output_rows(columns, width, height)
    assert sampled.rgb.shape == (sampled.rows, columns, 3)
    assert sampled.shape == (sampled.rows, columns)


def test_sample_block_average():
    grid = vertical_step_grid(16, 16)
    sampled = sample(grid, 8)
    assert sampled.shape == (4, 8)
    np.testing.assert_array_equal(sampled.brightness[:, :4], 0)
    np.testing.assert_array_equal(sampled.brightness[:, 4:], 255)


def test_sample_averages_within_a_cell():
    grid = vertical_step_grid(2, 4)
    sampled = sample(grid, 1)
    assert sampled.shape == (1, 1)
    assert 126 <= int(sampled.brightness[0, 0]) <= 129


def test_sample_luminance_weights():
    sampled = sample(solid_grid(2, 2, (0, 255, 0)), 2)
    # 0.587 * 255
    assert abs(int(sampled.brightness[0, 0]) - 150) <= 1


@pytest.mark.parametrize("columns", [0, -3])
def test_sample_rejects_bad_width(columns):
    with pytest.raises(InvalidDimension):
        sample(solid_grid(4, 4, (0, 0, 0)), columns)


def test_sample_rejects_zero_area():
    with pytest.raises(InvalidDimension):
        sample(np.zeros((0, 5, 3), dtype=np.uint8), 4)


def test_sample_is_deterministic():
    rng = np.random.default_rng(7)
    grid = rng.integers(0, 256, size=(37, 53, 3), dtype=np.uint8)
    a = sample(grid, 20)
    b = sample(grid, 20)
    np.testing.assert_array_equal(a.rgb, b.rgb)
    np.testing.assert_array_equal(a.brightness, b.brightness)


def test_sample_leaves_input_untouched():
    grid = solid_grid(8, 8, (1, 2, 3))
    before = grid.copy()
    sample(grid, 3)
    np.testing.assert_array_equal(grid, before)
