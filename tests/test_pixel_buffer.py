"""Tests for RGBA pixel buffer helpers."""

import numpy as np
import pytest

from atlas_packer.utils.pixel_buffer import (
    as_pixel_buffer,
    new_pixel_buffer,
    pad_pixel_buffer,
    pixel_buffer_paste,
)


def solid(width, height, value=255):
    return np.full((height, width, 4), value, dtype=np.uint8)


class TestNewPixelBuffer:
    def test_shape_and_default_color(self):
        buffer = new_pixel_buffer((5, 3))

        assert buffer.shape == (3, 5, 4)
        assert buffer.dtype == np.uint8
        assert not buffer.any()

    def test_fill_color(self):
        buffer = new_pixel_buffer((2, 2), (1, 2, 3, 4))

        assert buffer[1, 1].tolist() == [1, 2, 3, 4]

    @pytest.mark.parametrize("color", [(), (1, 2, 3, 4, 5)])
    def test_invalid_color(self, color):
        with pytest.raises(TypeError):
            new_pixel_buffer((2, 2), color)


class TestAsPixelBuffer:
    def test_rejects_wrong_shape(self):
        with pytest.raises(TypeError):
            as_pixel_buffer(np.zeros((2, 2, 3)))

    def test_converts_dtype(self):
        buffer = as_pixel_buffer(np.full((2, 2, 4), 200, dtype=np.int64))

        assert buffer.dtype == np.uint8
        assert (buffer == 200).all()

    @pytest.mark.parametrize("value", [-1, 256])
    def test_rejects_out_of_range_values(self, value):
        pixels = np.zeros((2, 2, 4), dtype=np.int64)
        pixels[1, 1, 0] = value

        with pytest.raises(ValueError):
            as_pixel_buffer(pixels)


class TestPadPixelBuffer:
    def test_adds_transparent_border(self):
        padded = pad_pixel_buffer(solid(3, 2), 1)

        assert padded.shape == (4, 5, 4)
        assert (padded[1:3, 1:4] == 255).all()
        assert not padded[0].any()
        assert not padded[-1].any()
        assert not padded[:, 0].any()
        assert not padded[:, -1].any()

    def test_zero_padding_returns_same_buffer(self):
        buffer = solid(2, 2)

        assert pad_pixel_buffer(buffer, 0) is buffer

    def test_negative_padding(self):
        with pytest.raises(ValueError):
            pad_pixel_buffer(solid(2, 2), -1)


class TestPixelBufferPaste:
    def test_paste_at_corner(self):
        target = new_pixel_buffer((6, 4))

        pixel_buffer_paste(target, solid(2, 3, 7), (3, 1))

        assert (target[1:4, 3:5] == 7).all()
        assert target.sum() == 2 * 3 * 4 * 7

    def test_paste_into_box(self):
        target = new_pixel_buffer((4, 4))

        pixel_buffer_paste(target, solid(2, 2, 9), (2, 2, 4, 4))

        assert (target[2:, 2:] == 9).all()
        assert not target[:2].any()

    def test_paste_is_clipped(self):
        target = new_pixel_buffer((4, 4))

        pixel_buffer_paste(target, solid(3, 3, 5), (2, -1))

        assert (target[0:2, 2:4] == 5).all()
        assert target.sum() == 2 * 2 * 4 * 5

    def test_paste_completely_outside(self):
        target = new_pixel_buffer((4, 4))

        pixel_buffer_paste(target, solid(2, 2), (10, 10))

        assert not target.any()

    def test_box_must_match_source(self):
        with pytest.raises(TypeError):
            pixel_buffer_paste(new_pixel_buffer((4, 4)), solid(2, 2), (0, 0, 3, 3))

    def test_invalid_corner(self):
        with pytest.raises(TypeError):
            pixel_buffer_paste(new_pixel_buffer((4, 4)), solid(2, 2), (0, 0, 2))
