"""
Shader browser widget for selecting a shader from the catalog.

Displays available shaders in a flat list in catalog order.
"""

from typing import List, Optional

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QListView,
    QLabel,
    QAbstractItemView,
)
from PySide6.QtCore import Qt, Signal, QItemSelection

from ...core import Shader
from ..models import ShaderListModel


class ShaderBrowser(QWidget):
    """Browser for available shaders."""

    # Emitted with the shader id when the user selects a row
    shader_selected = Signal(str)
    # Emitted when the selection is cleared
    selection_cleared = Signal()

    def __init__(self, shaders: Optional[List[Shader]] = None):
        super().__init__()
        self.model = ShaderListModel(shaders)
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the shader browser UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        layout.addWidget(QLabel("Shaders"))

        self.list_view = QListView()
        self.list_view.setModel(self.model)
        self.list_view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.list_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.list_view.selectionModel().selectionChanged.connect(self._on_selection_changed)
        layout.addWidget(self.list_view, 1)

    def _on_selection_changed(self, selected: QItemSelection, deselected: QItemSelection) -> None:
        """Handle list selection."""
        indexes = selected.indexes()
        if not indexes:
            if not self.list_view.selectionModel().hasSelection():
                self.selection_cleared.emit()
            return

        shader_id = indexes[0].data(Qt.ItemDataRole.UserRole)
        if shader_id is not None:
            self.shader_selected.emit(shader_id)

    def select_shader(self, shader_id: Optional[str]) -> None:
        """Select a row programmatically; None or an unknown id clears it."""
        row = self.model.row_for_id(shader_id)
        if row < 0:
            self.list_view.clearSelection()
            return
        self.list_view.setCurrentIndex(self.model.index(row))

