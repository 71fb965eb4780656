"""
Builtin filter definitions.

Each filter bridges a registry entry to OpenImageIO's ImageBufAlgo functions.
The few colour operations ImageBufAlgo has no direct call for are done on
numpy pixel arrays.
"""

import math
from typing import Any, Callable, Dict, Optional

import numpy as np
import OpenImageIO as oiio

from ..errors import FilterExecutionError
from ..oiio import OiioAdapter
from .registry import (
    CATEGORY_BLUR,
    CATEGORY_COLOR_ADJUSTMENT,
    CATEGORY_COLOR_EFFECT,
    CATEGORY_GEOMETRY,
    CATEGORY_SHARPEN,
    CATEGORY_STYLIZE,
    FilterDefinition,
    FilterInput,
)

SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float32)

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)


def _checked(result: Optional[oiio.ImageBuf], filter_name: str) -> oiio.ImageBuf:
    """Raise if an ImageBufAlgo call failed."""
    if result is None:
        raise FilterExecutionError(filter_name, "no result")
    if result.has_error:
        raise FilterExecutionError(filter_name, result.geterror())
    return result


def _kernel_width(radius: float) -> float:
    return 2.0 * radius + 1.0


def _per_channel(image: oiio.ImageBuf, color_value: float, other_value: float) -> tuple:
    """One value per channel: color_value for RGB, other_value beyond."""
    return tuple(color_value if c < 3 else other_value for c in range(image.nchannels))


def _map_rgb(
    image: oiio.ImageBuf,
    func: Callable[[np.ndarray], np.ndarray],
) -> oiio.ImageBuf:
    """Apply func to the RGB part of the image, keeping any other channels."""
    pixels = OiioAdapter.to_array(image)
    nchannels = pixels.shape[2]
    if nchannels >= 3:
        rgb = pixels[:, :, :3]
        rest = pixels[:, :, 3:]
    else:
        rgb = np.repeat(pixels[:, :, :1], 3, axis=2)
        rest = pixels[:, :, 1:]
    out = np.concatenate([func(rgb), rest], axis=2)
    return OiioAdapter.from_array(out)


# ============================================================================
# APPLY FUNCTIONS
# ============================================================================

def _kernel_blur(kernel_name: str, filter_name: str):
    def apply(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
        radius = float(params["radius"])
        if radius <= 0:
            return image
        width = _kernel_width(radius)
        kernel = _checked(oiio.ImageBufAlgo.make_kernel(kernel_name, width, width), filter_name)
        return _checked(oiio.ImageBufAlgo.convolve(image, kernel), filter_name)
    return apply


def _apply_median(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    width = max(int(round(params["width"])), 1)
    return _checked(oiio.ImageBufAlgo.median_filter(image, width, width), "MedianFilter")


def _apply_dilate(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    radius = int(round(params["radius"]))
    if radius <= 0:
        return image
    width = 2 * radius + 1
    return _checked(oiio.ImageBufAlgo.dilate(image, width, width), "MorphologyMaximum")


def _apply_erode(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    radius = int(round(params["radius"]))
    if radius <= 0:
        return image
    width = 2 * radius + 1
    return _checked(oiio.ImageBufAlgo.erode(image, width, width), "MorphologyMinimum")


def _apply_pixellate(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    block = max(int(round(params["scale"])), 1)
    if block == 1:
        return image

    pixels = OiioAdapter.to_array(image)
    height, width, nchannels = pixels.shape
    # Pad to a whole number of blocks, average each block, then expand back
    padded = np.pad(pixels, ((0, -height % block), (0, -width % block), (0, 0)), mode="edge")
    rows, cols = padded.shape[0] // block, padded.shape[1] // block
    means = padded.reshape(rows, block, cols, block, nchannels).mean(axis=(1, 3))
    expanded = np.repeat(np.repeat(means, block, axis=0), block, axis=1)
    return OiioAdapter.from_array(expanded[:height, :width])


def _apply_color_threshold(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    threshold = float(params["threshold"])

    def threshold_rgb(rgb: np.ndarray) -> np.ndarray:
        luma = rgb @ LUMA_WEIGHTS
        mask = (luma >= threshold).astype(np.float32)
        return np.repeat(mask[:, :, np.newaxis], 3, axis=2)

    return _map_rgb(image, threshold_rgb)


def _apply_sepia(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    intensity = float(params["intensity"])
    matrix = (1.0 - intensity) * np.eye(3, dtype=np.float32) + intensity * SEPIA_MATRIX
    return _map_rgb(image, lambda rgb: rgb @ matrix.T)


def _apply_noir(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    def noir(rgb: np.ndarray) -> np.ndarray:
        luma = rgb @ LUMA_WEIGHTS
        # Slight contrast boost around mid grey
        luma = np.clip((luma - 0.5) * 1.2 + 0.5, 0.0, 1.0)
        return np.repeat(luma[:, :, np.newaxis], 3, axis=2)

    return _map_rgb(image, noir)


def _apply_invert(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    # 1 - x on colour channels, alpha untouched
    scaled = _checked(
        oiio.ImageBufAlgo.mul(image, _per_channel(image, -1.0, 1.0)), "ColorInvert"
    )
    return _checked(
        oiio.ImageBufAlgo.add(scaled, _per_channel(image, 1.0, 0.0)), "ColorInvert"
    )


def _apply_gamma(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    power = float(params["power"])
    if power == 1.0:
        return image
    return _checked(
        oiio.ImageBufAlgo.pow(image, _per_channel(image, power, 1.0)), "GammaAdjust"
    )


def _apply_unsharp_mask(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    radius = float(params["radius"])
    if radius <= 0:
        return image
    return _checked(
        oiio.ImageBufAlgo.unsharp_mask(
            image,
            str(params["kernel"]),
            _kernel_width(radius),
            float(params["intensity"]),
            0.0,
        ),
        "UnsharpMask",
    )


def _apply_straighten(image: oiio.ImageBuf, params: Dict[str, Any]) -> oiio.ImageBuf:
    angle = float(params["angle"])
    if angle == 0.0:
        return image
    return _checked(oiio.ImageBufAlgo.rotate(image, angle), "Straighten")


# ============================================================================
# DEFINITIONS
# ============================================================================

BUILTIN_FILTERS = [
    FilterDefinition(
        name="GaussianBlur",
        display_name="Gaussian Blur",
        categories=[CATEGORY_BLUR],
        apply=_kernel_blur("gaussian", "GaussianBlur"),
        inputs=[
            FilterInput("radius", "Radius", 10.0, 0.0, 100.0,
                        "Blur radius in pixels"),
        ],
    ),
    FilterDefinition(
        name="BoxBlur",
        display_name="Box Blur",
        categories=[CATEGORY_BLUR],
        apply=_kernel_blur("box", "BoxBlur"),
        inputs=[
            FilterInput("radius", "Radius", 10.0, 1.0, 100.0),
        ],
    ),
    FilterDefinition(
        name="DiscBlur",
        display_name="Disc Blur",
        categories=[CATEGORY_BLUR],
        apply=_kernel_blur("disk", "DiscBlur"),
        inputs=[
            FilterInput("radius", "Radius", 8.0, 0.0, 100.0),
        ],
    ),
    FilterDefinition(
        name="MedianFilter",
        display_name="Median",
        categories=[CATEGORY_BLUR],
        apply=_apply_median,
        # No upper bound: consumers pick one
        inputs=[
            FilterInput("width", "Width", 3.0, 1.0, None,
                        "Width of the median window"),
        ],
    ),
    FilterDefinition(
        name="MorphologyMaximum",
        display_name="Morphology Maximum",
        categories=[CATEGORY_BLUR],
        apply=_apply_dilate,
        inputs=[
            FilterInput("radius", "Radius", 0.0, 0.0, 50.0),
        ],
    ),
    FilterDefinition(
        name="MorphologyMinimum",
        display_name="Morphology Minimum",
        categories=[CATEGORY_BLUR],
        apply=_apply_erode,
        inputs=[
            FilterInput("radius", "Radius", 0.0, 0.0, 50.0),
        ],
    ),
    FilterDefinition(
        name="Pixellate",
        display_name="Pixellate",
        categories=[CATEGORY_STYLIZE],
        apply=_apply_pixellate,
        inputs=[
            FilterInput("scale", "Scale", 8.0, 1.0, None,
                        "Size of each pixel block"),
        ],
    ),
    FilterDefinition(
        name="ColorThreshold",
        display_name="Color Threshold",
        categories=[CATEGORY_STYLIZE, CATEGORY_COLOR_ADJUSTMENT],
        apply=_apply_color_threshold,
        inputs=[
            FilterInput("threshold", "Threshold", 0.5, 0.0, 1.0),
        ],
    ),
    FilterDefinition(
        name="SepiaTone",
        display_name="Sepia Tone",
        categories=[CATEGORY_COLOR_EFFECT],
        apply=_apply_sepia,
        inputs=[
            FilterInput("intensity", "Intensity", 1.0, 0.0, 1.0),
        ],
    ),
    FilterDefinition(
        name="PhotoEffectNoir",
        display_name="Photo Effect Noir",
        categories=[CATEGORY_COLOR_EFFECT],
        apply=_apply_noir,
    ),
    FilterDefinition(
        name="ColorInvert",
        display_name="Color Invert",
        categories=[CATEGORY_COLOR_EFFECT],
        apply=_apply_invert,
    ),
    FilterDefinition(
        name="GammaAdjust",
        display_name="Gamma Adjust",
        categories=[CATEGORY_COLOR_ADJUSTMENT],
        apply=_apply_gamma,
        inputs=[
            FilterInput("power", "Power", 0.75, 0.25, 4.0),
        ],
    ),
    FilterDefinition(
        name="UnsharpMask",
        display_name="Unsharp Mask",
        categories=[CATEGORY_SHARPEN],
        apply=_apply_unsharp_mask,
        inputs=[
            FilterInput("kernel", "Kernel", "gaussian",
                        description="OIIO filter kernel name"),
            FilterInput("radius", "Radius", 2.5, 0.0, 100.0),
            FilterInput("intensity", "Intensity", 0.5, 0.0, 1.0),
        ],
    ),
    FilterDefinition(
        name="Straighten",
        display_name="Straighten",
        categories=[CATEGORY_GEOMETRY],
        apply=_apply_straighten,
        inputs=[
            FilterInput("angle", "Angle", 0.0, -math.pi, math.pi,
                        "Rotation in radians"),
        ],
    ),
]
