import os

import pytest
from PIL import Image


@pytest.fixture
def make_png():
    """Return a factory writing a solid color RGBA PNG and returning its path."""

    def _make_png(directory, name, size, color=(255, 0, 0, 255)):
        path = os.path.join(str(directory), name)
        Image.new('RGBA', size, color).save(path)
        return path

    return _make_png


@pytest.fixture
def icons_dir(tmp_path, make_png):
    """A directory holding three small icons and a file that is not an image."""
    source = tmp_path / "icons"
    source.mkdir()
    make_png(source, "star.png", (8, 8), (255, 255, 0, 255))
    make_png(source, "arrow.png", (12, 6), (0, 0, 255, 255))
    make_png(source, "dot.small.png", (4, 4), (0, 255, 0, 255))
    (source / "readme.txt").write_text("not an icon")
    return source
