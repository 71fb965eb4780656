"""
Shader state management.

Central in-memory store for:
- The shader catalog
- The current selection
- Parameter edits

Created once at startup and passed to the UI; nothing is persisted.
"""

from typing import Dict, List, Optional

from ..core import Shader
from ..utils.logging import get_logger

logger = get_logger("state")


class ShaderState:
    """Central state management for the application."""

    def __init__(self, shaders: Optional[List[Shader]] = None):
        self.shaders: List[Shader] = []
        self._selected_id: Optional[str] = None
        # Values each shader had when it entered the catalog, for reset
        self._initial_values: Dict[str, Dict[str, float]] = {}
        for shader in shaders or []:
            self.add_shader(shader)

    # ========== Catalog ==========

    def add_shader(self, shader: Shader) -> bool:
        """Append a shader. Returns False if its id is already taken."""
        if self.get_shader(shader.id) is not None:
            logger.warning("Shader %s already in catalog", shader.id)
            return False
        self.shaders.append(shader)
        self._initial_values[shader.id] = {p.id: p.value for p in shader.parameters}
        return True

    def get_shader(self, shader_id: Optional[str]) -> Optional[Shader]:
        """Get a shader by ID."""
        for shader in self.shaders:
            if shader.id == shader_id:
                return shader
        return None

    def list_shaders(self) -> List[Shader]:
        """List all shaders in display order."""
        return list(self.shaders)

    # ========== Selection ==========

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def select(self, shader_id: Optional[str]) -> bool:
        """
        Select a shader by ID, or clear the selection with None.

        An unknown ID leaves the selection unchanged. Returns True if the
        selection was set.
        """
        if shader_id is None:
            self._selected_id = None
            return True
        if self.get_shader(shader_id) is None:
            return False
        self._selected_id = shader_id
        return True

    def current_shader(self) -> Optional[Shader]:
        """The selected shader, if any."""
        if self._selected_id is None:
            return None
        return self.get_shader(self._selected_id)

    # ========== Parameters ==========

    def set_parameter(self, shader_id: str, param_id: str, value: float) -> Optional[float]:
        """
        Store a parameter value, clamped to the parameter's range.

        Returns the stored value, or None if the shader or parameter does
        not exist (nothing is changed in that case).
        """
        shader = self.get_shader(shader_id)
        if shader is None:
            return None
        param = shader.get_parameter(param_id)
        if param is None:
            return None
        param.value = param.clamp(value)
        return param.value

    def reset_parameters(self, shader_id: str) -> bool:
        """Restore a shader's initial parameter values. Returns success."""
        shader = self.get_shader(shader_id)
        if shader is None:
            return False
        initial = self._initial_values.get(shader_id, {})
        for param in shader.parameters:
            if param.id in initial:
                param.value = initial[param.id]
        return True
