"""
Parameter editor for the selected shader.

Shows the shader's name and description and one slider per parameter.
Sliders work on integer positions, mapped linearly onto each parameter's
range.
"""

from typing import Dict, Optional

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSlider,
    QScrollArea,
    QPushButton,
    QFrame,
)
from PySide6.QtCore import Qt, Signal

from ...core import Shader, ShaderParameter

# Integer slider resolution across a parameter's range
SLIDER_STEPS = 1000


def slider_position(param: ShaderParameter) -> int:
    """Slider position for the parameter's current value."""
    span = param.max_val - param.min_val
    if span <= 0:
        return 0
    return int(round((param.value - param.min_val) / span * SLIDER_STEPS))


def value_for_position(param: ShaderParameter, position: int) -> float:
    """Parameter value for a slider position, inside the parameter's range."""
    span = param.max_val - param.min_val
    position = min(max(position, 0), SLIDER_STEPS)
    return param.clamp(param.min_val + span * position / SLIDER_STEPS)


def format_value(value: float) -> str:
    return f"{value:.3f}"


class ParameterEditor(QWidget):
    """Edit parameters for the selected shader."""

    # shader_id, param_id, value
    parameter_changed = Signal(str, str, float)
    # shader_id
    reset_requested = Signal(str)

    def __init__(self):
        super().__init__()
        self.current_shader: Optional[Shader] = None
        self.sliders: Dict[str, QSlider] = {}
        self.value_labels: Dict[str, QLabel] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the parameter editor UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        self.name_label = QLabel()
        font = self.name_label.font()
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() * 1.4)
        font.setBold(True)
        self.name_label.setFont(font)
        layout.addWidget(self.name_label)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet("color: gray;")
        layout.addWidget(self.description_label)

        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(line)

        self.params_header = QLabel("Parameters")
        header_font = self.params_header.font()
        header_font.setBold(True)
        self.params_header.setFont(header_font)
        layout.addWidget(self.params_header)

        # Scroll area for parameters
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)

        self.params_widget = QWidget()
        self.params_layout = QVBoxLayout(self.params_widget)
        self.params_layout.setContentsMargins(0, 0, 0, 0)

        scroll.setWidget(self.params_widget)
        layout.addWidget(scroll, 1)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self._on_reset_clicked)
        btn_layout.addWidget(self.btn_reset)
        layout.addLayout(btn_layout)

        self.set_shader(None)

    def set_shader(self, shader: Optional[Shader]) -> None:
        """Set the shader to edit parameters for."""
        self.current_shader = shader
        self.sliders.clear()
        self.value_labels.clear()
        self._clear_layout(self.params_layout)

        if shader is None:
            self.name_label.setText("")
            self.description_label.setText("")
            self.params_header.hide()
            self.btn_reset.setEnabled(False)
            return

        self.name_label.setText(shader.name)
        self.description_label.setText(shader.description)
        self.params_header.show()
        self.btn_reset.setEnabled(bool(shader.parameters))

        if not shader.parameters:
            self.params_layout.addWidget(QLabel("(No parameters)"))
            self.params_layout.addStretch()
            return

        for param in shader.parameters:
            row_widget = QWidget()
            row = QHBoxLayout(row_widget)
            row.setContentsMargins(0, 0, 0, 0)
            name = QLabel(param.label)
            name.setFixedWidth(100)
            name.setToolTip(f"{param.name} ({param.min_val:g} to {param.max_val:g})")
            row.addWidget(name, 0)

            slider = QSlider(Qt.Orientation.Horizontal)
            slider.setRange(0, SLIDER_STEPS)
            slider.setValue(slider_position(param))
            slider.valueChanged.connect(
                lambda position, pid=param.id: self._on_slider_moved(pid, position)
            )
            row.addWidget(slider, 1)

            value_label = QLabel(format_value(param.value))
            value_label.setMinimumWidth(50)
            value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            row.addWidget(value_label, 0)

            self.sliders[param.id] = slider
            self.value_labels[param.id] = value_label
            self.params_layout.addWidget(row_widget)

        # Add stretch at the end to push controls to the top
        self.params_layout.addStretch()

    def refresh_values(self) -> None:
        """Move sliders to the current shader's stored values without emitting."""
        if self.current_shader is None:
            return
        for param in self.current_shader.parameters:
            slider = self.sliders.get(param.id)
            if slider is None:
                continue
            slider.blockSignals(True)
            slider.setValue(slider_position(param))
            slider.blockSignals(False)
            self.value_labels[param.id].setText(format_value(param.value))

    def _clear_layout(self, layout) -> None:
        """Remove every row widget and spacer from a layout."""
        while layout.count():
            item = layout.takeAt(0)
            if item is None:
                break

            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()

    def _on_slider_moved(self, param_id: str, position: int) -> None:
        """Handle slider movement."""
        if self.current_shader is None:
            return
        param = self.current_shader.get_parameter(param_id)
        if param is None:
            return
        value = value_for_position(param, position)
        self.value_labels[param_id].setText(format_value(value))
        self.parameter_changed.emit(self.current_shader.id, param_id, value)

    def _on_reset_clicked(self) -> None:
        if self.current_shader is not None:
            self.reset_requested.emit(self.current_shader.id)

    def get_current_shader(self) -> Optional[Shader]:
        """Get the currently edited shader."""
        return self.current_shader
