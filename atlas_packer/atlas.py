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

"""Building texture atlases from a directory of images.

Every source image is rendered at an integer scale, surrounded with a
transparent padding border and packed into a square atlas with the MaxRects
packer. The pixels are pasted into one RGBA buffer that is saved as a PNG,
next to a JSON manifest describing where each sprite went:

    {"icon": {"x": 0, "y": 0, "width": 24, "height": 24, "pixelRatio": 2}}

Sprites that do not fit, and sprites the packer could only place rotated,
are carried over to the next atlas until all of them are written.

Typical usage example:
    config = AtlasConfig(source_path="icons", destination_template="out/sprite", scale=2)
    stems = build_atlases(config)
"""

import json
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .globs import (
    ATLAS_IMAGE_SUFFIX,
    ATLAS_MANIFEST_SUFFIX,
    ATLAS_SIZE_MARGIN_PER_SCALE,
    DEFAULT_EXTENSIONS,
    MAX_ATLAS_SIDE,
)
from .utils.images import ImageSource, RasterImageSource, save_pixel_buffer
from .utils.packers import (
    FreeRectChoiceHeuristic,
    MaxRectsBinPacker,
    PackingError,
    RectSize,
)
from .utils.pixel_buffer import new_pixel_buffer, pad_pixel_buffer, pixel_buffer_paste
from .utils.type_hints import Manifest, PixelBuffer

log = logging.getLogger(__name__)


class ConfigurationError(PackingError, ValueError):
    """The atlas configuration cannot be used."""

    pass


@dataclass
class AtlasConfig:
    """All tuneable parameters for one atlas build.

    Attributes:
        source_path: Directory containing the source images.
        destination_template: Output path without extension, e.g. out/sprite.
        scale: Integer scale applied to every image, 2 for @2x atlases.
        padding: Transparent pixels added around every side of each image.
        heuristic: Placement rule of the packer.
        max_side: Upper limit for the atlas side.
        extensions: File extensions of the source images.
    """

    source_path: str
    destination_template: str
    scale: int = 1
    padding: int = 0
    heuristic: FreeRectChoiceHeuristic = FreeRectChoiceHeuristic.CONTACT_POINT_RULE
    max_side: int = MAX_ATLAS_SIDE
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS

    def validate(self) -> None:
        if not os.path.isdir(self.source_path):
            raise ConfigurationError("Source path is not a directory: {}".format(self.source_path))
        if self.scale < 1:
            raise ConfigurationError("Unsupported scale: {}".format(self.scale))
        if self.padding < 0:
            raise ConfigurationError("Unsupported padding: {}".format(self.padding))
        if self.max_side < 1:
            raise ConfigurationError("Unsupported max side: {}".format(self.max_side))


@dataclass
class Sprite:
    """A rendered source image waiting to be packed."""

    name: str
    pixels: PixelBuffer

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]


@dataclass
class PackResult:
    """One packed atlas.

    Attributes:
        pixels: The atlas pixel buffer.
        rotated: Number of sprites the packer placed rotated, which were
            left for the next atlas.
        manifest: Sprite rectangles by sprite name.
    """

    pixels: PixelBuffer
    rotated: int = 0
    manifest: Manifest = field(default_factory=dict)

    @property
    def placed(self) -> int:
        return len(self.manifest)


def manifest_name(file_name: str) -> str:
    """Name of a sprite in the manifest: the file name up to its first dot."""
    return file_name.split(".")[0]


def find_source_files(source_path: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> List[str]:
    suffixes = tuple(ext.lower() for ext in extensions)
    return sorted(
        name for name in os.listdir(source_path)
        if name.lower().endswith(suffixes) and os.path.isfile(os.path.join(source_path, name))
    )


def render_sprites(files: Sequence[str], source_path: str, scale: int, padding: int,
                   image_source: ImageSource) -> Dict[str, Sprite]:
    """Render every source file at `scale`, with `padding` clear pixels around it.

    Raises:
        ConfigurationError: If a file cannot be decoded.
    """
    sprites = {}
    for file_name in files:
        with open(os.path.join(source_path, file_name), 'rb') as f:
            data = f.read()
        try:
            width, height = image_source.measure(data)
            width *= scale
            height *= scale
            pixels = image_source.rasterize(data, width, height)
        except OSError as e:
            raise ConfigurationError("Cannot read source image {}".format(file_name)) from e
        sprites[file_name] = Sprite(file_name, pad_pixel_buffer(pixels, padding))
        log.debug("Rendered %s at %dx%d", file_name, width, height)

    log.info("total images: %d", len(sprites))
    return sprites


def calculate_atlas_size(sprites: Dict[str, Sprite], scale: int, max_side: int = MAX_ATLAS_SIDE) -> int:
    """Predict the side of a square atlas holding the remaining sprites."""
    square = sum(sprite.width * sprite.height for sprite in sprites.values())
    side = int(math.sqrt(square)) + scale * ATLAS_SIZE_MARGIN_PER_SCALE
    return min(side, max_side)


def pack_atlas(sprites: Dict[str, Sprite], side: int, scale: int,
               heuristic: FreeRectChoiceHeuristic = FreeRectChoiceHeuristic.CONTACT_POINT_RULE) -> PackResult:
    """Pack as many sprites as possible into a side x side atlas.

    Sprites that end up in the atlas are removed from `sprites`.
    """
    packer = MaxRectsBinPacker(side, side)
    requests = [RectSize(name, sprite.width, sprite.height) for name, sprite in sprites.items()]
    placed = packer.insert_batch(requests, heuristic)
    log.info("Placed images: %d", len(placed))

    result = PackResult(new_pixel_buffer((side, side)))
    for rect in placed:
        sprite = sprites[rect.name]
        if (sprite.width, sprite.height) != (rect.width, rect.height):
            # The manifest cannot describe rotated sprites
            log.debug("%s was placed rotated, leaving it for the next atlas", rect.name)
            result.rotated += 1
            continue

        pixel_buffer_paste(result.pixels, sprite.pixels, (rect.x, rect.y))
        key = manifest_name(rect.name)
        if key in result.manifest:
            log.warning("%s replaces another sprite named '%s' in the manifest", rect.name, key)
        result.manifest[key] = {
            "x": rect.x,
            "y": rect.y,
            "width": rect.width,
            "height": rect.height,
            "pixelRatio": scale,
        }
        del sprites[rect.name]

    return result


def atlas_file_stem(destination_template: str, scale: int, atlas_number: int) -> str:
    """Output path of an atlas without extension, e.g. out/sprite@2x_1."""
    stem = destination_template
    if scale != 1:
        stem += "@{}x".format(scale)
    if atlas_number != 0:
        stem += "_{}".format(atlas_number)
    return stem


def write_atlas(result: PackResult, stem: str) -> None:
    directory = os.path.dirname(stem)
    if directory:
        os.makedirs(directory, exist_ok=True)

    save_pixel_buffer(result.pixels, stem + ATLAS_IMAGE_SUFFIX)
    with open(stem + ATLAS_MANIFEST_SUFFIX, 'w', encoding='utf-8') as f:
        json.dump(result.manifest, f, indent=2, sort_keys=True)


def build_atlases(config: AtlasConfig, image_source: Optional[ImageSource] = None) -> List[str]:
    """Render, pack and write atlases until every source image is in one.

    Args:
        config: The build parameters.
        image_source: Renders the source files, Pillow raster images by
            default.

    Returns:
        The stems of the written atlases, in order.

    Raises:
        ConfigurationError: If the configuration is invalid, there are no
            source files or a source image cannot be read.
        PackingError: If some sprites can never be placed, e.g. because
            they are larger than the maximum atlas side.
    """
    config.validate()
    if image_source is None:
        image_source = RasterImageSource()

    files = find_source_files(config.source_path, config.extensions)
    log.info("total files: %d", len(files))
    if not files:
        raise ConfigurationError("No {} files found in {}".format(
            "/".join(config.extensions), config.source_path))

    sprites = render_sprites(files, config.source_path, config.scale, config.padding, image_source)

    stems = []
    while sprites:
        side = calculate_atlas_size(sprites, config.scale, config.max_side)
        log.info("atlas size: %d %d", side, side)

        result = pack_atlas(sprites, side, config.scale, config.heuristic)
        if result.placed == 0:
            raise PackingError("Could not place {} in a {}x{} atlas".format(
                ", ".join(sorted(sprites)), side, side))
        log.info("pack result: rotated images: %d, not in atlas: %d", result.rotated, len(sprites))

        stem = atlas_file_stem(config.destination_template, config.scale, len(stems))
        write_atlas(result, stem)
        stems.append(stem)

    log.info("finished, check results at %s*", config.destination_template)
    return stems
