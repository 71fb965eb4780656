import numpy as np
import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for widget tests", exc_type=ImportError)

from shaderlab.core import Shader, ShaderParameter
from shaderlab.services import ShaderState
from shaderlab.ui.main_window import MainWindow
from shaderlab.ui.widgets.parameter_editor import SLIDER_STEPS
from shaderlab.ui.widgets.preview_widget import NO_SELECTION_TEXT, UNAVAILABLE_TEXT


class RecordingRenderer:
    """Records the parameter values of every render request."""

    def __init__(self, available=True):
        self.available = available
        self.calls = []

    def render(self, shader):
        self.calls.append((shader.id, shader.parameter_values()))
        if not self.available:
            return None
        return np.zeros((4, 6, 4), dtype=np.uint8)


def _state():
    return ShaderState([
        Shader(id="wave", name="Wave", description="Wavy.", parameters=[
            ShaderParameter(name="Amplitude", value=0.5, min_val=0.0, max_val=1.0),
        ]),
        Shader(id="noir", name="Noir", description="Black and white."),
    ])


def test_starts_with_placeholder(qapp):
    renderer = RecordingRenderer()
    window = MainWindow(_state(), renderer)
    assert window.preview.placeholder_text() == NO_SELECTION_TEXT
    assert renderer.calls == []
    assert window.shader_browser.model.rowCount() == 2


def test_selecting_row_updates_state_and_renders(qapp):
    state = _state()
    renderer = RecordingRenderer()
    window = MainWindow(state, renderer)

    window.shader_browser.select_shader("noir")
    assert state.selected_id == "noir"
    assert window.inspector.get_current_shader().id == "noir"
    assert renderer.calls[-1] == ("noir", {})
    assert window.preview.has_image()


def test_slider_edit_renders_with_current_value(qapp):
    state = _state()
    renderer = RecordingRenderer()
    window = MainWindow(state, renderer)
    window.shader_browser.select_shader("wave")

    window.inspector.sliders["Amplitude"].setValue(SLIDER_STEPS)
    assert state.get_shader("wave").get_parameter("Amplitude").value == 1.0
    assert renderer.calls[-1] == ("wave", {"Amplitude": 1.0})


def test_reset_restores_and_rerenders(qapp):
    state = _state()
    renderer = RecordingRenderer()
    window = MainWindow(state, renderer)
    window.shader_browser.select_shader("wave")
    window.inspector.sliders["Amplitude"].setValue(0)

    window.inspector.btn_reset.click()
    assert state.get_shader("wave").get_parameter("Amplitude").value == 0.5
    assert renderer.calls[-1] == ("wave", {"Amplitude": 0.5})
    assert window.inspector.sliders["Amplitude"].value() == SLIDER_STEPS // 2


def test_unavailable_preview_shows_placeholder(qapp):
    window = MainWindow(_state(), RecordingRenderer(available=False))
    window.shader_browser.select_shader("wave")
    assert window.preview.placeholder_text() == UNAVAILABLE_TEXT


def test_clearing_selection(qapp):
    state = _state()
    window = MainWindow(state, RecordingRenderer())
    window.shader_browser.select_shader("wave")
    window.shader_browser.select_shader(None)
    assert state.current_shader() is None
    assert window.preview.placeholder_text() == NO_SELECTION_TEXT
    assert window.inspector.get_current_shader() is None


def test_add_shader_appears_in_list_and_is_selectable(qapp):
    state = _state()
    renderer = RecordingRenderer()
    window = MainWindow(state, renderer)

    blur = Shader(id="blur", name="Blur", parameters=[
        ShaderParameter(name="radius", value=4.0, min_val=0.0, max_val=10.0),
    ])
    assert window.add_shader(blur) is True
    assert window.shader_browser.model.rowCount() == 3
    assert window.shader_browser.model.row_for_id("blur") == 2

    window.shader_browser.select_shader("blur")
    assert state.selected_id == "blur"
    assert renderer.calls[-1] == ("blur", {"radius": 4.0})


def test_add_shader_with_taken_id_is_rejected(qapp):
    state = _state()
    window = MainWindow(state, RecordingRenderer())
    assert window.add_shader(Shader(id="wave", name="Other")) is False
    assert window.shader_browser.model.rowCount() == 2
    assert len(state.shaders) == 2
