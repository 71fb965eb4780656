"""
Catalog loading.

Builds the shader catalog once at startup: the hand-authored seed list
first, then every filter the registry lists under the requested categories.
Registry enumeration order decides the order of discovered entries and is
treated as presentation detail only.
"""

import math
from copy import deepcopy
from numbers import Real
from typing import Iterable, List, Optional

from ..core import Shader, ShaderParameter
from ..processing.registry import (
    ATTR_DEFAULT,
    ATTR_DISPLAY_NAME,
    ATTR_MAX,
    ATTR_MIN,
    CATEGORY_BLUR,
    INPUT_IMAGE_KEY,
    FilterRegistry,
    ImageFilter,
    default_registry,
)
from ..utils.logging import get_logger

logger = get_logger("catalog")

# Span used on either side of the default when the registry gives no bound
DEFAULT_RANGE_SPAN = 10.0

DEFAULT_CATEGORIES = (CATEGORY_BLUR,)

DEFAULT_SHADERS: List[Shader] = [
    Shader(
        id="Pixellate",
        name="Pixellate",
        description="Renders the image as large blocks of colour.",
        parameters=[
            ShaderParameter(name="scale", value=5.0, min_val=1.0, max_val=10.0, label="Scale"),
        ],
    ),
    Shader(
        id="SepiaTone",
        name="SepiaTone",
        description="Maps colours to reddish-brown tones.",
        parameters=[
            ShaderParameter(name="intensity", value=1.0, min_val=0.0, max_val=1.0,
                            label="Intensity"),
        ],
    ),
    Shader(
        id="PhotoEffectNoir",
        name="PhotoEffectNoir",
        description="High-contrast black and white.",
    ),
    Shader(
        id="ColorThreshold",
        name="ColorThreshold",
        description="Turns pixels white above a luminance threshold and black below it.",
        parameters=[
            ShaderParameter(name="threshold", value=0.5, min_val=0.0, max_val=1.0,
                            label="Threshold"),
        ],
    ),
    Shader(
        id="GammaAdjust",
        name="GammaAdjust",
        description="Raises colour values to a power.",
        parameters=[
            ShaderParameter(name="power", value=0.75, min_val=0.25, max_val=4.0, label="Power"),
        ],
    ),
    Shader(
        id="UnsharpMask",
        name="UnsharpMask",
        description="Sharpens edges by subtracting a blurred copy.",
        parameters=[
            ShaderParameter(name="radius", value=2.5, min_val=0.0, max_val=100.0, label="Radius"),
            ShaderParameter(name="intensity", value=0.5, min_val=0.0, max_val=1.0,
                            label="Intensity"),
        ],
    ),
    Shader(
        id="ColorInvert",
        name="ColorInvert",
        description="Inverts the colours of the image.",
    ),
]


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def parameters_from_attributes(image_filter: ImageFilter) -> List[ShaderParameter]:
    """
    Derive slider parameters from a filter's attributes.

    Inputs without a finite numeric default are skipped. A missing or
    non-finite minimum or maximum falls back to DEFAULT_RANGE_SPAN below
    or above the default.
    """
    attributes = image_filter.attributes
    parameters = []

    for key in image_filter.input_keys:
        if key == INPUT_IMAGE_KEY:
            continue

        attr = attributes.get(key)
        if not isinstance(attr, dict):
            continue

        default = attr.get(ATTR_DEFAULT)
        if not _is_number(default):
            logger.debug("%s: skipping input %r without numeric default", image_filter.name, key)
            continue
        default = float(default)

        min_val = attr.get(ATTR_MIN)
        max_val = attr.get(ATTR_MAX)
        min_val = float(min_val) if _is_number(min_val) else default - DEFAULT_RANGE_SPAN
        max_val = float(max_val) if _is_number(max_val) else default + DEFAULT_RANGE_SPAN
        if min_val > max_val:
            logger.debug("%s: skipping input %r with empty range", image_filter.name, key)
            continue

        parameters.append(ShaderParameter(
            name=key,
            value=default,
            min_val=min_val,
            max_val=max_val,
            label=attr.get(ATTR_DISPLAY_NAME) or key,
        ))

    return parameters


def shader_from_filter(image_filter: ImageFilter) -> Shader:
    """Build a catalog entry for a registry filter."""
    display_name = image_filter.attributes.get(ATTR_DISPLAY_NAME)
    return Shader(
        id=image_filter.name,
        name=image_filter.name,
        description=display_name or image_filter.name,
        parameters=parameters_from_attributes(image_filter),
    )


def load_catalog(
    seed: Iterable[Shader] = DEFAULT_SHADERS,
    categories: Iterable[str] = DEFAULT_CATEGORIES,
    registry: Optional[FilterRegistry] = None,
) -> List[Shader]:
    """
    Build the shader catalog.

    Args:
        seed: Hand-authored entries, listed first. They are copied.
        categories: Registry categories to discover filters from
        registry: Filter registry; the builtin registry if omitted

    Returns:
        Ordered list of shaders with unique ids
    """
    if registry is None:
        registry = default_registry()

    shaders: List[Shader] = []
    seen_ids = set()
    for shader in seed:
        if shader.id in seen_ids:
            logger.warning("Duplicate seed shader %s ignored", shader.id)
            continue
        shaders.append(deepcopy(shader))
        seen_ids.add(shader.id)
    seed_count = len(shaders)

    for category in categories:
        for name in registry.filter_names(category):
            if name in seen_ids:
                continue

            image_filter = registry.create_filter(name)
            if image_filter is None:
                logger.debug("Filter %s could not be created, skipping", name)
                continue

            shader = shader_from_filter(image_filter)
            shaders.append(shader)
            seen_ids.add(shader.id)

    logger.info(
        "Loaded %d shaders (%d seed, %d discovered)",
        len(shaders), seed_count, len(shaders) - seed_count,
    )
    return shaders
