from pathlib import Path
from typing import Any, Callable, Dict, Optional
import logging

from PyQt5.QtCore import QPoint, QRectF, Qt
from PyQt5.QtGui import QColor, QPainter, QPen
from PyQt5.QtWidgets import (
    QFileDialog,
    QGridLayout,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from PX_Libs.constants import (
    BRIGHTNESS_RANGE,
    CONTRAST_RANGE,
    IMAGE_FILE_FILTER,
    NAMED_FILTERS,
    PHOTO_DOWNLOAD_FILENAME,
    ROTATION_RANGE,
    SATURATION_RANGE,
    SELECTION_RING_COLOR,
)
from PX_Libs.ImageEditingLib.image_models import Point
from PX_Libs.InteractionLib.interaction_controller import ContainerRect, InteractionController
from PX_Libs.RenderLib.download import DownloadConfig, save_download
from PX_Libs.RenderLib.share import share_image
from PX_Libs.UILib.qt_image import pil_to_pixmap

logger = logging.getLogger(__name__)

_SLIDERS = (
    ("brightness", "Brightness", BRIGHTNESS_RANGE),
    ("contrast", "Contrast", CONTRAST_RANGE),
    ("saturation", "Saturation", SATURATION_RANGE),
    ("rotation", "Rotation", ROTATION_RANGE),
)
_SLIDER_TITLES = {field: title for field, title, _ in _SLIDERS}


def client_point(event: Any) -> Point:
    pos = event.globalPos()
    return Point(pos.x(), pos.y())


def container_rect(widget: QWidget) -> ContainerRect:
    """Client-space rectangle of a widget, measured at event time."""
    origin = widget.mapToGlobal(QPoint(0, 0))
    return ContainerRect(origin.x(), origin.y(), widget.width(), widget.height())


class PhotoCanvas(QWidget):
    """Preview surface; forwards mouse events to the controller."""

    def __init__(
        self,
        controller: InteractionController,
        on_release: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_release = on_release
        self._pixmap = None
        self.setMinimumSize(200, 200)
        self.setStyleSheet("border: 1px solid #888;")

    def set_preview(self, image: Any) -> None:
        self._pixmap = None if image is None else pil_to_pixmap(image)
        if self._pixmap is not None:
            self.setFixedSize(self._pixmap.width(), self._pixmap.height())
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        if self._pixmap is None:
            painter.drawText(self.rect(), Qt.AlignCenter, "Upload an image to start editing")
            return

        painter.drawPixmap(0, 0, self._pixmap)
        rect = self.controller.crop_rect
        if rect is not None:
            pen = QPen(QColor(SELECTION_RING_COLOR), 2, Qt.DashLine)
            painter.setPen(pen)
            painter.setBrush(QColor(59, 130, 246, 40))
            painter.drawRect(QRectF(rect.x, rect.y, rect.width, rect.height))

    def mousePressEvent(self, event) -> None:
        self.controller.pointer_down(client_point(event), container_rect(self))
        self.update()

    def mouseMoveEvent(self, event) -> None:
        if self.controller.pointer_move(client_point(event), container_rect(self)) is not None:
            self.update()

    def mouseReleaseEvent(self, event) -> None:
        self.controller.pointer_up(client_point(event), container_rect(self))
        self.update()
        if self.on_release is not None:
            self.on_release()


class PhotoEditorWidget(QWidget):
    def __init__(
        self,
        controller: InteractionController,
        relay: Optional[Callable[[Any], Any]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.editor = controller.photo_editor
        self.relay = relay
        self.sliders: Dict[str, QSlider] = {}
        self.slider_labels: Dict[str, QLabel] = {}
        self.filter_buttons: Dict[str, QPushButton] = {}

        self._build_ui()
        self._connect_signals()
        self.refresh_buttons()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        controls_col = QVBoxLayout()

        self.btn_upload = QPushButton("Upload Image")
        controls_col.addWidget(self.btn_upload)

        for field, _title, (low, high) in _SLIDERS:
            slider = QSlider(Qt.Horizontal)
            slider.setRange(low, high)
            slider.setValue(getattr(self.editor.adjustments, field))
            label = QLabel()
            self.sliders[field] = slider
            self.slider_labels[field] = label
            self._set_slider_label(field, slider.value())
            controls_col.addWidget(label)
            controls_col.addWidget(slider)

        controls_col.addWidget(QLabel("Filters"))
        filters_grid = QGridLayout()
        for index, name in enumerate(NAMED_FILTERS):
            button = QPushButton(name.capitalize())
            button.setCheckable(True)
            self.filter_buttons[name] = button
            filters_grid.addWidget(button, index // 2, index % 2)
        controls_col.addLayout(filters_grid)
        self.btn_reset = QPushButton("Reset Adjustments")
        controls_col.addWidget(self.btn_reset)

        self.btn_start_crop = QPushButton("Start Crop")
        self.btn_apply_crop = QPushButton("Apply Crop")
        self.btn_cancel_crop = QPushButton("Cancel Crop")
        self.btn_share = QPushButton("Share via Email")
        self.btn_download = QPushButton("Download")
        for button in (self.btn_start_crop, self.btn_apply_crop, self.btn_cancel_crop,
                       self.btn_share, self.btn_download):
            controls_col.addWidget(button)
        self.crop_hint_label = QLabel()
        self.crop_hint_label.setWordWrap(True)
        self.crop_hint_label.setStyleSheet("color: #6b7280;")
        controls_col.addWidget(self.crop_hint_label)
        controls_col.addStretch(1)

        self.canvas = PhotoCanvas(self.controller, self.refresh_buttons, self)
        canvas_col = QVBoxLayout()
        canvas_col.addWidget(self.canvas, alignment=Qt.AlignCenter)

        root.addLayout(controls_col, stretch=1)
        root.addLayout(canvas_col, stretch=3)

    def _connect_signals(self) -> None:
        self.btn_upload.clicked.connect(self.upload_image)
        for field, slider in self.sliders.items():
            slider.valueChanged.connect(lambda value, f=field: self.on_slider_changed(f, value))
        for name, button in self.filter_buttons.items():
            button.clicked.connect(lambda _checked, n=name: self.on_filter_clicked(n))
        self.btn_reset.clicked.connect(self.reset_adjustments)
        self.btn_start_crop.clicked.connect(self.start_crop)
        self.btn_apply_crop.clicked.connect(self.apply_crop)
        self.btn_cancel_crop.clicked.connect(self.cancel_crop)
        self.btn_share.clicked.connect(self.share)
        self.btn_download.clicked.connect(self.download)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def upload_image(self) -> None:
        path_str, _ = QFileDialog.getOpenFileName(self, "Select Image", "", IMAGE_FILE_FILTER)
        if not path_str:
            return

        try:
            self.editor.load_image(Path(path_str))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load {path_str}: {e}")
            QMessageBox.warning(self, "Upload Failed", f"Could not load image:\n{e}")
            return

        self.sync_controls()
        self.refresh_preview()

    def on_slider_changed(self, field: str, value: int) -> None:
        stored = self.editor.set_adjustment(field, value)
        self._set_slider_label(field, stored)
        self.refresh_preview()

    def on_filter_clicked(self, name: str) -> None:
        self.editor.apply_named_filter(name)
        self.sync_controls()
        self.refresh_preview()

    def reset_adjustments(self) -> None:
        self.editor.adjustments.reset()
        self.sync_controls()
        self.refresh_preview()

    def start_crop(self) -> None:
        self.controller.begin_crop()
        self.refresh_buttons()
        self.canvas.update()

    def apply_crop(self) -> None:
        if self.editor.apply_crop():
            self.refresh_preview()
        self.refresh_buttons()
        self.canvas.update()

    def cancel_crop(self) -> None:
        self.editor.cancel_crop()
        self.refresh_buttons()
        self.canvas.update()

    def share(self) -> None:
        image = self.editor.export()
        if image is None:
            return
        if self.relay is None:
            QMessageBox.warning(self, "Share Unavailable", "No email relay is configured.")
            return

        recipient, ok = QInputDialog.getText(self, "Share via Email", "Recipient email:")
        if not ok:
            return

        if share_image(self.relay, recipient, image):
            QMessageBox.information(self, "Shared", f"Image sent to {recipient.strip()}")
        else:
            QMessageBox.warning(self, "Share Failed", "The image could not be sent.")

    def download(self) -> None:
        image = self.editor.export()
        if image is None:
            return

        save_path, _ = QFileDialog.getSaveFileName(
            self,
            "Download Image",
            PHOTO_DOWNLOAD_FILENAME,
            "PNG Images (*.png)",
        )
        if not save_path:
            return

        target = Path(save_path)
        config = DownloadConfig(filename=target.name, directory=str(target.parent), overwrite=True)
        try:
            save_download(image, config)
        except (OSError, ValueError) as e:
            QMessageBox.warning(self, "Download Failed", str(e))

    # ------------------------------------------------------------------
    # View refresh
    # ------------------------------------------------------------------

    def _set_slider_label(self, field: str, value: int) -> None:
        unit = "°" if field == "rotation" else "%"
        self.slider_labels[field].setText(f"{_SLIDER_TITLES[field]}: {value}{unit}")

    def sync_controls(self) -> None:
        """Push the adjustment values back into the sliders and filter buttons."""
        adjustments = self.editor.adjustments
        for field, slider in self.sliders.items():
            value = getattr(adjustments, field)
            slider.blockSignals(True)
            slider.setValue(value)
            slider.blockSignals(False)
            self._set_slider_label(field, value)
        for name, button in self.filter_buttons.items():
            button.setChecked(name == adjustments.filter)

    def refresh_preview(self) -> None:
        self.canvas.set_preview(self.editor.render_preview())
        self.refresh_buttons()

    def refresh_buttons(self) -> None:
        has_image = self.editor.has_image
        crop = self.editor.crop
        self.btn_start_crop.setEnabled(has_image and not crop.is_selecting)
        self.btn_apply_crop.setEnabled(crop.is_pending)
        self.btn_cancel_crop.setEnabled(crop.is_selecting or crop.is_pending)
        self.btn_share.setEnabled(has_image)
        self.btn_download.setEnabled(has_image)

        hint = self.editor.crop_hint
        self.crop_hint_label.setText(hint or "")
        self.crop_hint_label.setVisible(hint is not None)
