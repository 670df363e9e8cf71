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

"""Global constants and configuration for the atlas packer.

This module holds the limits and naming conventions used throughout the
package, so the builder, the command line and the tests agree on them.
"""

# Atlases are square and never larger than this on either side.
MAX_ATLAS_SIDE = 2048

# Extra pixels per unit of scale added to the estimated atlas side.
ATLAS_SIZE_MARGIN_PER_SCALE = 20

DEFAULT_EXTENSIONS = (".png",)

ATLAS_IMAGE_SUFFIX = ".png"
ATLAS_MANIFEST_SUFFIX = ".json"

# Pixel buffers are RGBA.
CHANNELS = 4

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
