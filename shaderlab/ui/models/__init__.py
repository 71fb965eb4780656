"""UI models module."""
from .qt_models import ShaderListModel

__all__ = ["ShaderListModel"]
