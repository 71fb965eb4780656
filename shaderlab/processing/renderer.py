"""
Preview renderer.

Applies a shader to the sample image: decode the sample, configure the
named filter with the shader's current parameter values, execute, and
encode the result for display. Returns None ("unavailable") when the
sample cannot be decoded or the filter fails, and the unmodified sample
when the shader's filter does not exist in the registry.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np

from ..core import Shader
from ..oiio import OiioAdapter
from ..utils.logging import get_logger
from .registry import INPUT_IMAGE_KEY, FilterRegistry, default_registry

logger = get_logger("renderer")


class PreviewRenderer:
    """Renders shader previews of a fixed sample image."""

    def __init__(
        self,
        sample_path: Union[str, Path, None],
        registry: Optional[FilterRegistry] = None,
    ):
        self.sample_path = Path(sample_path) if sample_path else None
        self.registry = registry if registry is not None else default_registry()

    def render(self, shader: Shader) -> Optional[np.ndarray]:
        """
        Render a preview of the sample image with the shader applied.

        Args:
            shader: Catalog entry; its parameters' current values are used

        Returns:
            RGBA uint8 array of shape (H, W, 4), or None if unavailable
        """
        image = OiioAdapter.load_image(self.sample_path)
        if image is None:
            return None

        image_filter = self.registry.create_filter(shader.filter_name)
        if image_filter is None:
            logger.info("Filter %s not found, showing original image", shader.filter_name)
            return OiioAdapter.to_display_array(image)

        image_filter.set_value(image, INPUT_IMAGE_KEY)
        for param in shader.parameters:
            image_filter.set_value(param.value, param.name)

        output = image_filter.output_image
        if output is None:
            return None

        try:
            return OiioAdapter.to_display_array(output)
        except Exception as e:
            logger.warning("Failed to encode output of %s: %s", shader.filter_name, e)
            return None
