"""Services module initialization."""
from .catalog import DEFAULT_SHADERS, load_catalog
from .settings import Settings
from .shader_state import ShaderState

__all__ = ["DEFAULT_SHADERS", "load_catalog", "Settings", "ShaderState"]
