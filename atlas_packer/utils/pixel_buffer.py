# MIT License

# Copyright (c) 2018 shotariya

# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import logging

import numpy as np

from ..globs import CHANNELS
from .type_hints import CornerOrBox, PixelBuffer, RGBAPixel, Size

# A 'pixel buffer' is a uint8 numpy array, viewed in the 3D shape (height, width, channels), used to store RGBA image
# pixels. Unlike Blender images, (0, 0) is the top left pixel, the same as Pillow.
pixel_dtype = np.uint8

log = logging.getLogger(__name__)


def new_pixel_buffer(size: Size, color: RGBAPixel = (0, 0, 0, 0)) -> PixelBuffer:
    """Create a new pixel buffer filled with a single color.

    The number of channels is determined based on the fill color.
    Default fill color is transparent black.

    :return: a new pixel buffer ndarray
    """
    width, height = size
    channels = len(color)
    if channels > 4 or channels == 0:
        raise TypeError("A color can have between 1 and 4 (inclusive) components, but found {} in {}".format(channels, color))
    return np.full((height, width, channels), fill_value=color, dtype=pixel_dtype)


def as_pixel_buffer(pixels) -> PixelBuffer:
    """View raw pixel data as an RGBA pixel buffer.

    Accepts anything numpy can turn into a (height, width, 4) array, e.g. the result of np.asarray on a Pillow RGBA
    image. Other integer or float dtypes are converted, values outside 0..255 raise ValueError.
    """
    buffer = np.asarray(pixels)
    if buffer.ndim != 3 or buffer.shape[2] != CHANNELS:
        raise TypeError("Expected a (height, width, {}) buffer, but found shape {}".format(CHANNELS, buffer.shape))
    if buffer.dtype != pixel_dtype:
        if buffer.size and (buffer.min() < 0 or buffer.max() > 255):
            raise ValueError("Pixel values must be in 0..255, but found {}..{}".format(buffer.min(), buffer.max()))
        buffer = buffer.astype(pixel_dtype)
    return buffer


def pad_pixel_buffer(buffer: PixelBuffer, padding: int) -> PixelBuffer:
    """Surround a pixel buffer with `padding` transparent pixels on every side."""
    if padding < 0:
        raise ValueError("padding must not be negative, but was {}".format(padding))
    if padding == 0:
        return buffer
    return np.pad(buffer, ((padding, padding), (padding, padding), (0, 0)), mode='constant', constant_values=0)


def pixel_buffer_paste(target_buffer: PixelBuffer, source_buffer: PixelBuffer, corner_or_box: CornerOrBox) -> None:
    """Paste pixels from a source pixel buffer into the target pixel buffer.

    Where the source is to be pasted is specified via a tuple-like set of pixel coordinates specifying either a top left
     corner or a box. A corner is specified as (left, upper) and a box is specified as (left, upper, right, lower).

    If a box is specified, the width and height of the box must match the source_buffer. Parts of the source falling
     outside the target are cut off.
    """
    if not isinstance(source_buffer, np.ndarray) or len(source_buffer.shape) != 3:
        raise TypeError("source buffer could not be parsed for pasting")

    # Parse a corner into a box
    if len(corner_or_box) == 2:
        left, upper = corner_or_box
        right = left + source_buffer.shape[1]
        lower = upper + source_buffer.shape[0]
    elif len(corner_or_box) == 4:
        left, upper, right, lower = corner_or_box
        if (right - left, lower - upper) != (source_buffer.shape[1], source_buffer.shape[0]):
            raise TypeError("box {} does not match the source buffer shape {}".format(corner_or_box, source_buffer.shape))
    else:
        raise TypeError("corner or box must be either a 2-tuple or 4-tuple, but was: {}".format(corner_or_box))

    if target_buffer.shape[-1] < source_buffer.shape[-1]:
        raise TypeError("Pixels in source have more channels than pixels in target, they cannot be pasted")

    buffer_height, buffer_width, _buffer_channels = target_buffer.shape
    fit_left = max(left, 0)
    fit_upper = max(upper, 0)
    fit_right = min(right, buffer_width)
    fit_lower = min(lower, buffer_height)
    if fit_left != left or fit_upper != upper or fit_right != right or fit_lower != lower:
        log.debug("Image to be pasted did not fit into target image, %s -> %s",
                  (left, upper, right, lower), (fit_left, fit_upper, fit_right, fit_lower))
    if fit_right <= fit_left or fit_lower <= fit_upper:
        return

    # The part of the source that lands within the target
    source_left = fit_left - left
    source_upper = fit_upper - upper
    source_right = source_buffer.shape[1] - right + fit_right
    source_lower = source_buffer.shape[0] - lower + fit_lower
    num_source_channels = source_buffer.shape[2]
    target_buffer[fit_upper:fit_lower, fit_left:fit_right, :num_source_channels] = \
        source_buffer[source_upper:source_lower, source_left:source_right]
