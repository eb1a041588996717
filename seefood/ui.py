"""Desktop UI

File picker, verdict window and error dialogs built on PyQt5.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from PIL import Image
from PyQt5.QtGui import QImage, QPixmap
from PyQt5.QtWidgets import QApplication, QFileDialog, QLabel, QMessageBox

from .services import Classification, save_annotated

logger = logging.getLogger(__name__)

WINDOW_TITLE = "SeeFood"
FILE_FILTER = "JPEG Images (*.jpg *.jpeg *.png)"


def get_application() -> QApplication:
    """Return the running QApplication, creating it on first use."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


def select_file(initial_dir: Optional[Path] = None) -> str:
    """Prompt the user to pick a JPEG or PNG image.

    Args:
        initial_dir: Folder the picker opens in.

    Returns:
        Absolute path of the selected file, or an empty string if the
        user cancelled.
    """
    get_application()
    filename, _ = QFileDialog.getOpenFileName(
        None,
        "Select an image",
        str(initial_dir) if initial_dir else "",
        FILE_FILTER,
    )

    if not filename:
        logger.info("File selection cancelled")
        return ""
    return str(Path(filename).resolve())


def show_error(message: str, title: str = "Error") -> None:
    """Show a blocking error dialog."""
    get_application()
    QMessageBox.critical(None, title, message)


def to_pixmap(image: Image.Image) -> QPixmap:
    """Convert a Pillow image into a QPixmap."""
    rgb = image.convert("RGB")
    data = rgb.tobytes("raw", "RGB")
    qimage = QImage(data, rgb.width, rgb.height, 3 * rgb.width, QImage.Format_RGB888)
    # fromImage copies the pixels, so ``data`` may be released afterwards
    return QPixmap.fromImage(qimage)


def show_verdict(image: Image.Image, title: str = WINDOW_TITLE) -> int:
    """Show the annotated image and block until the window is closed.

    Returns:
        The Qt event loop's exit code.
    """
    app = get_application()

    window = QLabel()
    window.setWindowTitle(title)
    window.setPixmap(to_pixmap(image))
    window.adjustSize()
    window.show()

    return app.exec_()


def render_verdict(path: str, app, save_path: Optional[Path] = None) -> Classification:
    """Label an image and show it with its verdict banner.

    Detection errors are not handled here; the caller reports them.

    Args:
        path: Image file path or URL.
        app: SeeFood application used to analyze the image.
        save_path: Optional path to also write the annotated image to.

    Returns:
        The classification that was displayed.
    """
    analysis = app.analyze(path)

    if save_path:
        save_annotated(analysis.image, save_path)

    show_verdict(analysis.image)
    return analysis.classification
