"""Core data types."""
from .types import Shader, ShaderParameter

__all__ = ["Shader", "ShaderParameter"]
