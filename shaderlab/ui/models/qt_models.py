"""
Qt models for ShaderLab UI.

Implements MVC pattern for the shader list.
"""

from PySide6.QtCore import Qt, QAbstractListModel, QModelIndex, QPersistentModelIndex
from typing import Any, List, Optional, Union

from ...core import Shader


class ShaderListModel(QAbstractListModel):
    """Model for the shader list."""

    def __init__(self, shaders: Optional[List[Shader]] = None):
        super().__init__()
        self.shaders: List[Shader] = list(shaders or [])

    def add_shader(self, shader: Shader) -> None:
        """Append a single shader row."""
        self.beginInsertRows(QModelIndex(), len(self.shaders), len(self.shaders))
        self.shaders.append(shader)
        self.endInsertRows()

    def row_for_id(self, shader_id: Optional[str]) -> int:
        """Row of the shader with this id, or -1."""
        for row, shader in enumerate(self.shaders):
            if shader.id == shader_id:
                return row
        return -1

    def refresh_shader(self, shader_id: str) -> None:
        """Notify views that a shader's data (tooltip values) changed."""
        row = self.row_for_id(shader_id)
        if row >= 0:
            idx = self.index(row)
            self.dataChanged.emit(idx, idx, [Qt.ItemDataRole.ToolTipRole])

    def rowCount(self, parent: Union[QModelIndex, QPersistentModelIndex] = QModelIndex()) -> int:
        return len(self.shaders)

    def data(
        self,
        index: Union[QModelIndex, QPersistentModelIndex],
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if not index.isValid():
            return None

        shader = self.shaders[index.row()]

        if role == Qt.ItemDataRole.DisplayRole:
            return shader.name

        if role == Qt.ItemDataRole.ToolTipRole:
            return self._format_shader_tooltip(shader)

        if role == Qt.ItemDataRole.UserRole:
            return shader.id

        return None

    def _format_shader_tooltip(self, shader: Shader) -> str:
        """Format shader information for tooltip display."""
        lines = [f"<b>{shader.name}</b>"]
        if shader.description:
            lines.append(shader.description)

        if shader.parameters:
            lines.append("")
            lines.append("<b>Parameters:</b>")
            for param in shader.parameters:
                lines.append(
                    f"• {param.label}: {param.value:g} ({param.min_val:g} to {param.max_val:g})"
                )

        return "<br>".join(lines)
