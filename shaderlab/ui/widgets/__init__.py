"""UI widgets module."""
from .shader_browser import ShaderBrowser
from .preview_widget import PreviewWidget
from .parameter_editor import ParameterEditor

__all__ = [
    "ShaderBrowser",
    "PreviewWidget",
    "ParameterEditor",
]
