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

"""Image handling utilities for the atlas packer.

This module defines how source images are measured and rendered into pixel
buffers, and how finished atlases are written to disk. The builder only
talks to the `ImageSource` interface, so vector formats can be supported by
plugging in another implementation.
"""

import io
from abc import ABC, abstractmethod

import numpy as np
from PIL import Image, ImageFile

from .pixel_buffer import as_pixel_buffer
from .type_hints import PixelBuffer, Size

ImageFile.LOAD_TRUNCATED_IMAGES = True

try:
    resampling = Image.Resampling.LANCZOS
except AttributeError:
    resampling = Image.LANCZOS


class ImageSource(ABC):
    """Measures and renders source image data."""

    @abstractmethod
    def measure(self, data: bytes) -> Size:
        """Get the intrinsic size of an image.

        Args:
            data: The raw image file contents.

        Returns:
            Tuple of (width, height).
        """

    @abstractmethod
    def rasterize(self, data: bytes, width: int, height: int) -> PixelBuffer:
        """Render an image at the given pixel size.

        Args:
            data: The raw image file contents.
            width: Target width in pixels.
            height: Target height in pixels.

        Returns:
            A (height, width, 4) RGBA pixel buffer.
        """


class RasterImageSource(ImageSource):
    """Image source for any raster format Pillow can decode."""

    def measure(self, data: bytes) -> Size:
        with Image.open(io.BytesIO(data)) as img:
            return img.size

    def rasterize(self, data: bytes, width: int, height: int) -> PixelBuffer:
        with Image.open(io.BytesIO(data)) as img:
            img = img.convert('RGBA')
            if img.size != (width, height):
                img = img.resize((width, height), resampling)
            return as_pixel_buffer(np.asarray(img))


def save_pixel_buffer(buffer: PixelBuffer, path: str) -> None:
    """Write an RGBA pixel buffer to an image file, the format follows the extension."""
    Image.fromarray(np.ascontiguousarray(as_pixel_buffer(buffer))).save(path)
