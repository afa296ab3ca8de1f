"""Texture loading from the plugin's ``Images`` folder."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PyQt6.QtGui import QImage

_LOGGER = logging.getLogger("AetherBox.Images")

IMAGES_DIR = "Images"
HEADER_IMAGE = "icon.png"
CLOSE_IMAGE = "close.png"


@dataclass
class ImageHandle:
    """Decoded texture plus its size; ``release`` drops the pixel data."""

    name: str
    path: Path
    image: Optional[QImage]
    width: int
    height: int

    @property
    def released(self) -> bool:
        return self.image is None

    def release(self) -> None:
        if self.image is None:
            return
        self.image = None
        _LOGGER.debug("Released image %s", self.name)


class ImageLoader:
    def __init__(self, plugin_dir: Path) -> None:
        self._images_dir = Path(plugin_dir) / IMAGES_DIR

    def load_image(self, name: str) -> Optional[ImageHandle]:
        """Load ``name`` from the images folder; returns None when unavailable."""
        path = self._images_dir / name
        if not path.is_file():
            _LOGGER.error("Image not found: %s", path)
            return None
        image = QImage(str(path))
        if image.isNull() or image.width() <= 0 or image.height() <= 0:
            _LOGGER.error("Image could not be decoded: %s", path)
            return None
        _LOGGER.debug("Loaded image %s (%dx%d)", path, image.width(), image.height())
        return ImageHandle(name=name, path=path, image=image, width=image.width(), height=image.height())
