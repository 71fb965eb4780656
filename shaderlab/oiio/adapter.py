"""
OpenImageIO adapter for robust, version-safe interaction.

Decodes the sample image into a float ImageBuf, moves pixels between
ImageBuf and numpy, and encodes filter output for display.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import OpenImageIO as oiio

from ..errors import ImageDecodeError
from ..utils.logging import get_logger

logger = get_logger("oiio")


class OiioAdapter:
    """Thin wrapper for robust OIIO bindings."""

    @staticmethod
    def load_image(path: Union[str, Path, None]) -> Optional[oiio.ImageBuf]:
        """
        Read an image file into a float ImageBuf.
        Returns None if the file is missing or cannot be decoded.
        """
        try:
            return OiioAdapter._read(path)
        except ImageDecodeError as e:
            logger.info("Sample image unavailable: %s", e)
            return None

    @staticmethod
    def _read(path: Union[str, Path, None]) -> oiio.ImageBuf:
        if path is None or not Path(path).is_file():
            raise ImageDecodeError(f"{path}: no such file")

        buf = oiio.ImageBuf(str(path))
        # Force a full read now so decode errors surface here, not at first use
        if not buf.read(force=True, convert=oiio.FLOAT) or buf.has_error:
            raise ImageDecodeError(f"{path}: {buf.geterror()}")
        return buf

    @staticmethod
    def to_array(buf: oiio.ImageBuf) -> np.ndarray:
        """Pixels of a 2D ImageBuf as a float32 (H, W, C) array."""
        pixels = np.asarray(buf.get_pixels(oiio.FLOAT), dtype=np.float32)
        if pixels.ndim == 4:
            # Volume images: keep the first slice
            pixels = pixels[0]
        elif pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        return pixels

    @staticmethod
    def from_array(array: np.ndarray) -> oiio.ImageBuf:
        """Build a float ImageBuf from an (H, W, C) array."""
        pixels = np.ascontiguousarray(array, dtype=np.float32)
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        height, width, nchannels = pixels.shape
        buf = oiio.ImageBuf(oiio.ImageSpec(width, height, nchannels, oiio.FLOAT))
        buf.set_pixels(buf.roi, pixels)
        return buf

    @staticmethod
    def to_display_array(buf: oiio.ImageBuf) -> np.ndarray:
        """
        Encode an ImageBuf as an RGBA uint8 (H, W, 4) array.

        Grey images are expanded to RGB, a missing alpha is filled opaque
        and values outside [0, 1] are clamped.
        """
        pixels = np.clip(OiioAdapter.to_array(buf), 0.0, 1.0)
        height, width, nchannels = pixels.shape

        if nchannels >= 3:
            rgb = pixels[:, :, :3]
        else:
            rgb = np.repeat(pixels[:, :, :1], 3, axis=2)

        if nchannels == 2:
            alpha = pixels[:, :, 1:2]
        elif nchannels >= 4:
            alpha = pixels[:, :, 3:4]
        else:
            alpha = np.ones((height, width, 1), dtype=np.float32)

        rgba = np.concatenate([rgb, alpha], axis=2)
        return np.ascontiguousarray(np.round(rgba * 255.0).astype(np.uint8))

    @staticmethod
    def get_oiio_version() -> str:
        """Return OIIO version string."""
        version = getattr(oiio, "__version__", None) or getattr(oiio, "VERSION_STRING", None)
        return str(version) if version else "unknown"
