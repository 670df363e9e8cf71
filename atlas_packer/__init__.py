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

"""Texture atlas packer.

Packs sprites, glyphs, icons or tiles into square texture atlases using the
MaxRects bin packing algorithm, and writes each atlas as a PNG with a JSON
manifest. The packing engine in `atlas_packer.utils.packers` can be used on
its own:

    packer = MaxRectsBinPacker(64, 64)
    rect = packer.insert(16, 32, FreeRectChoiceHeuristic.BEST_AREA_FIT)
"""

from .atlas import AtlasConfig, ConfigurationError, build_atlases
from .utils.packers import (
    FreeRectChoiceHeuristic,
    InvalidDimensionError,
    MaxRectsBinPacker,
    PackerKind,
    PackingError,
    PlacedRect,
    RectSize,
    UninitializedBinError,
    create_packer,
)

__version__ = "1.0.0"

__all__ = [
    "AtlasConfig",
    "ConfigurationError",
    "FreeRectChoiceHeuristic",
    "InvalidDimensionError",
    "MaxRectsBinPacker",
    "PackerKind",
    "PackingError",
    "PlacedRect",
    "RectSize",
    "UninitializedBinError",
    "build_atlases",
    "create_packer",
]
