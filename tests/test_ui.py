"""Tests for the PyQt5 UI with the toolkit mocked out."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PIL import Image  # noqa: E402

from seefood import ui  # noqa: E402
from seefood.services import Classification, Verdict  # noqa: E402


@pytest.fixture
def qt_app():
    with patch("seefood.ui.get_application") as mock_get:
        yield mock_get.return_value


class TestGetApplication:
    """Tests for get_application."""

    def test_reuses_running_instance(self):
        with patch("seefood.ui.QApplication") as mock_cls:
            assert ui.get_application() is mock_cls.instance.return_value

        mock_cls.assert_not_called()

    def test_creates_instance(self):
        with patch("seefood.ui.QApplication") as mock_cls:
            mock_cls.instance.return_value = None

            assert ui.get_application() is mock_cls.return_value


class TestSelectFile:
    """Tests for select_file."""

    def test_cancel_returns_empty_string(self, qt_app):
        with patch("seefood.ui.QFileDialog.getOpenFileName", return_value=("", "")):
            assert ui.select_file(Path("src/images")) == ""

    def test_returns_absolute_path(self, qt_app, tmp_path):
        image = tmp_path / "dog.jpg"
        image.touch()

        with patch(
            "seefood.ui.QFileDialog.getOpenFileName",
            return_value=(str(image), ui.FILE_FILTER),
        ) as mock_open:
            result = ui.select_file(tmp_path)

        assert result == str(image.resolve())
        parent, caption, directory, file_filter = mock_open.call_args.args
        assert parent is None
        assert directory == str(tmp_path)
        assert file_filter == "JPEG Images (*.jpg *.jpeg *.png)"


class TestShowError:
    """Tests for show_error."""

    def test_shows_modal_error(self, qt_app):
        with patch("seefood.ui.QMessageBox.critical") as mock_critical:
            ui.show_error("No file selected. Exiting.")

        mock_critical.assert_called_once_with(None, "Error", "No file selected. Exiting.")


class TestShowVerdict:
    """Tests for show_verdict and to_pixmap."""

    def test_window_shows_annotated_image(self, qt_app):
        image = Image.new("RGB", (4, 3), color=(0, 128, 0))

        with patch("seefood.ui.QLabel") as mock_label, patch(
            "seefood.ui.QImage"
        ) as mock_qimage, patch("seefood.ui.QPixmap") as mock_pixmap:
            result = ui.show_verdict(image)

        data, width, height, stride, _ = mock_qimage.call_args.args
        assert data == image.tobytes("raw", "RGB")
        assert (width, height, stride) == (4, 3, 12)
        mock_pixmap.fromImage.assert_called_once_with(mock_qimage.return_value)

        window = mock_label.return_value
        window.setWindowTitle.assert_called_once_with("SeeFood")
        window.setPixmap.assert_called_once_with(mock_pixmap.fromImage.return_value)
        window.show.assert_called_once()
        qt_app.exec_.assert_called_once()
        assert result is qt_app.exec_.return_value

    def test_to_pixmap_flattens_alpha(self):
        image = Image.new("RGBA", (2, 2), color=(255, 0, 0, 10))

        with patch("seefood.ui.QImage") as mock_qimage, patch("seefood.ui.QPixmap"):
            ui.to_pixmap(image)

        assert mock_qimage.call_args.args[0] == b"\xff\x00\x00" * 4


class TestRenderVerdict:
    """Tests for render_verdict."""

    @pytest.fixture
    def analysis(self):
        return Mock(
            image=Image.new("RGB", (10, 10)),
            classification=Classification(Verdict.HOT_DOG, 1),
        )

    def test_shows_annotated_image(self, analysis):
        app = Mock()
        app.analyze.return_value = analysis

        with patch("seefood.ui.show_verdict") as mock_show:
            result = ui.render_verdict("dog.png", app)

        assert result.verdict is Verdict.HOT_DOG
        app.analyze.assert_called_once_with("dog.png")
        mock_show.assert_called_once_with(analysis.image)

    def test_saves_when_requested(self, analysis, tmp_path):
        app = Mock()
        app.analyze.return_value = analysis
        output = tmp_path / "out.png"

        with patch("seefood.ui.show_verdict"):
            ui.render_verdict("dog.png", app, output)

        assert output.exists()

    def test_errors_propagate(self):
        app = Mock()
        app.analyze.side_effect = OSError("unreadable")

        with patch("seefood.ui.show_verdict") as mock_show:
            with pytest.raises(OSError):
                ui.render_verdict("dog.png", app)

        mock_show.assert_not_called()
