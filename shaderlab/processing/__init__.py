"""
Processing system for ShaderLab.

Provides the filter registry, whose filters do their pixel work through
OpenImageIO's ImageBufAlgo, and the renderer that applies a shader to the
sample image for preview.
"""

from .registry import (
    ATTR_CATEGORIES,
    ATTR_DEFAULT,
    ATTR_DESCRIPTION,
    ATTR_DISPLAY_NAME,
    ATTR_MAX,
    ATTR_MIN,
    CATEGORY_BLUR,
    CATEGORY_COLOR_ADJUSTMENT,
    CATEGORY_COLOR_EFFECT,
    CATEGORY_GEOMETRY,
    CATEGORY_SHARPEN,
    CATEGORY_STYLIZE,
    INPUT_IMAGE_KEY,
    FilterDefinition,
    FilterInput,
    FilterRegistry,
    ImageFilter,
    default_registry,
)

__all__ = [
    # Registry
    "FilterDefinition",
    "FilterInput",
    "FilterRegistry",
    "ImageFilter",
    "default_registry",
    # Attribute keys
    "ATTR_CATEGORIES",
    "ATTR_DEFAULT",
    "ATTR_DESCRIPTION",
    "ATTR_DISPLAY_NAME",
    "ATTR_MAX",
    "ATTR_MIN",
    "INPUT_IMAGE_KEY",
    # Categories
    "CATEGORY_BLUR",
    "CATEGORY_COLOR_ADJUSTMENT",
    "CATEGORY_COLOR_EFFECT",
    "CATEGORY_GEOMETRY",
    "CATEGORY_SHARPEN",
    "CATEGORY_STYLIZE",
]
