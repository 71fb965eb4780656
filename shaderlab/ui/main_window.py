"""
Main application window (Qt 6).

Orchestrates the three panels:
- Shaders: the catalog list
- Preview: the sample image with the selected shader applied
- Inspector: name, description and parameter sliders
"""

from PySide6.QtWidgets import QMainWindow, QSplitter
from PySide6.QtCore import Qt

from ..core import Shader
from ..processing.renderer import PreviewRenderer
from ..services import ShaderState
from ..ui.widgets import ShaderBrowser, PreviewWidget, ParameterEditor
from ..ui.widgets.preview_widget import NO_SELECTION_TEXT
from ..utils.logging import get_logger

logger = get_logger("ui")


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, state: ShaderState, renderer: PreviewRenderer):
        super().__init__()
        self.setWindowTitle("ShaderLab")
        self.resize(1100, 650)

        # State
        self.state = state
        self.renderer = renderer

        # Build UI
        self._build_ui()
        self._connect_signals()
        self._sync_from_state()

    def _build_ui(self) -> None:
        """Build the main UI layout."""
        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.shader_browser = ShaderBrowser(self.state.list_shaders())
        self.shader_browser.setMinimumWidth(250)
        splitter.addWidget(self.shader_browser)

        self.preview = PreviewWidget()
        splitter.addWidget(self.preview)

        self.inspector = ParameterEditor()
        self.inspector.setMinimumWidth(250)
        splitter.addWidget(self.inspector)

        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setStretchFactor(2, 0)
        splitter.setSizes([250, 600, 250])

        self.setCentralWidget(splitter)
        self.statusBar().showMessage(f"{len(self.state.shaders)} shaders")

    def _connect_signals(self) -> None:
        """Connect widget signals to state updates."""
        self.shader_browser.shader_selected.connect(self._on_shader_selected)
        self.shader_browser.selection_cleared.connect(self._on_selection_cleared)
        self.inspector.parameter_changed.connect(self._on_parameter_changed)
        self.inspector.reset_requested.connect(self._on_reset_requested)

    # ========== Catalog ==========

    def add_shader(self, shader: Shader) -> bool:
        """Add a shader to the catalog and the list. Returns False on a duplicate id."""
        if not self.state.add_shader(shader):
            return False
        self.shader_browser.model.add_shader(shader)
        self.statusBar().showMessage(f"{len(self.state.shaders)} shaders")
        return True

    # ========== Selection ==========

    def _on_shader_selected(self, shader_id: str) -> None:
        if not self.state.select(shader_id):
            logger.debug("Ignoring selection of unknown shader %s", shader_id)
            return
        self._sync_from_state()

    def _on_selection_cleared(self) -> None:
        self.state.select(None)
        self._sync_from_state()

    def _sync_from_state(self) -> None:
        """Show the selected shader in the inspector and re-render."""
        self.inspector.set_shader(self.state.current_shader())
        self._render_preview()

    # ========== Parameters ==========

    def _on_parameter_changed(self, shader_id: str, param_id: str, value: float) -> None:
        if self.state.set_parameter(shader_id, param_id, value) is None:
            return
        self.shader_browser.model.refresh_shader(shader_id)
        self._render_preview()

    def _on_reset_requested(self, shader_id: str) -> None:
        if not self.state.reset_parameters(shader_id):
            return
        self.inspector.refresh_values()
        self.shader_browser.model.refresh_shader(shader_id)
        self._render_preview()

    # ========== Preview ==========

    def _render_preview(self) -> None:
        """Render the selected shader with its current parameter values."""
        shader = self.state.current_shader()
        if shader is None:
            self.preview.show_placeholder(NO_SELECTION_TEXT)
            return
        self.preview.show_image(self.renderer.render(shader))
