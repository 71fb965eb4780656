"""
Preview widget showing the rendered sample image.
"""

from typing import Optional

import numpy as np
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QSizePolicy
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtCore import Qt

NO_SELECTION_TEXT = "Select a shader from the list"
UNAVAILABLE_TEXT = "Image not found"


def qimage_from_array(pixels: np.ndarray) -> QImage:
    """Copy an RGBA uint8 (H, W, 4) array into a QImage."""
    pixels = np.ascontiguousarray(pixels, dtype=np.uint8)
    height, width = pixels.shape[:2]
    image = QImage(pixels.data, width, height, 4 * width, QImage.Format.Format_RGBA8888)
    # QImage does not own the numpy buffer
    return image.copy()


class PreviewWidget(QWidget):
    """Displays the current preview or a placeholder message."""

    def __init__(self):
        super().__init__()
        self._image: Optional[QImage] = None
        self._build_ui()
        self.show_placeholder(NO_SELECTION_TEXT)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        self.caption = QLabel("Output")
        self.caption.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        self.caption.setStyleSheet("color: gray;")
        layout.addWidget(self.caption)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self.image_label.setMinimumSize(200, 200)
        layout.addWidget(self.image_label, 1)

    def show_image(self, pixels: Optional[np.ndarray]) -> None:
        """Show a rendered preview; None shows the unavailable placeholder."""
        if pixels is None:
            self.show_placeholder(UNAVAILABLE_TEXT)
            return
        self._image = qimage_from_array(pixels)
        self.caption.show()
        self._update_pixmap()

    def show_placeholder(self, text: str) -> None:
        self._image = None
        self.caption.setVisible(text != NO_SELECTION_TEXT)
        self.image_label.clear()
        self.image_label.setText(text)

    def placeholder_text(self) -> str:
        """Placeholder message currently shown, empty when showing an image."""
        return "" if self._image is not None else self.image_label.text()

    def has_image(self) -> bool:
        return self._image is not None

    def _update_pixmap(self) -> None:
        if self._image is None:
            return
        pixmap = QPixmap.fromImage(self._image).scaled(
            self.image_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.image_label.setPixmap(pixmap)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_pixmap()
