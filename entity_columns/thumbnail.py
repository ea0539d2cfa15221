"""
Thumbnail image lookup and sizing.

The dimensions of thumbnail files are read using Pillow; only the image header
is read, pixel data is never decoded. Both the probe and the file existence
check are passed in as functions so that alternatives (e.g. for testing) may
be substituted:

.. autofunction:: probe_image

.. autofunction:: load_thumbnail

Thumbnails are scaled down to fit the configured maximum dimensions by:

.. autofunction:: constrain_size
"""

import logging

from typing import Callable, NamedTuple, Optional, Tuple, Union

from pathlib import Path

from PIL import Image


logger = logging.getLogger(__name__)


class ImageInfo(NamedTuple):
    width: int
    height: int
    format: Optional[str]
    """The Pillow format name (e.g. "PNG"), if known."""


ImageProbe = Callable[[Path], ImageInfo]
"""Function which reads the intrinsic dimensions of an image file."""

FileExists = Callable[[Path], bool]
"""Function which tests whether a file exists."""


def probe_image(path: Path) -> ImageInfo:
    """
    Read the dimensions and format of an image file.

    Raises :py:exc:`OSError` (including Pillow's
    :py:exc:`~PIL.UnidentifiedImageError`) if the file cannot be read or is not
    a recognised image.
    """
    with Image.open(path) as image:
        width, height = image.size
        return ImageInfo(width, height, image.format)


def load_thumbnail(
    path: Path,
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> Optional[ImageInfo]:
    """
    Get the dimensions of a thumbnail file, or None when the file is missing
    or could not be read. Unreadable files are logged but never raise.
    """
    if not file_exists(path):
        logger.debug("Thumbnail %s does not exist", path)
        return None

    try:
        return image_probe(path)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.warning("Could not read thumbnail %s: %s", path, e)
        return None


def constrain_size(
    width: Union[int, float],
    height: Union[int, float],
    max_width: int = 0,
    max_height: int = 0,
) -> Tuple[Union[int, float], Union[int, float]]:
    """
    Scale the given dimensions down, preserving the aspect ratio, such that
    they fit within ``max_width`` and then within ``max_height``. A maximum of
    zero leaves that dimension unconstrained. Images smaller than the
    constraints are never scaled up.

    Example::

        >>> constrain_size(800, 400, max_width=400)
        (400, 200.0)
    """
    if max_width != 0 and width > max_width:
        height = (height / width) * max_width
        width = max_width

    if max_height != 0 and height > max_height:
        width = (width / height) * max_height
        height = max_height

    return width, height
