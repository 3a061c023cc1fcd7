"""Tests for receipt image preparation (mocked OpenCV)."""

import sys
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from milktea.receipt.errors import ImageEncodingError
from milktea.receipt.images import prepare_image


@pytest.fixture
def mock_cv2():
    """Inject a mock cv2 module into sys.modules."""
    mock = MagicMock()
    mock.imencode.return_value = (True, np.frombuffer(b"jpeg", dtype=np.uint8))
    with patch.dict(sys.modules, {"cv2": mock}):
        yield mock


class TestPrepareImage:
    def test_large_image_downsized(self, mock_cv2):
        mock_cv2.imdecode.return_value = np.zeros((1000, 2000, 3), dtype=np.uint8)
        mock_cv2.resize.return_value = np.zeros((384, 768, 3), dtype=np.uint8)

        image = prepare_image(b"raw-bytes")

        assert mock_cv2.resize.call_args[0][1] == (768, 384)
        assert (image.width, image.height) == (768, 384)
        assert image.data == b"jpeg"
        assert image.original == b"raw-bytes"
        assert image.mime_type == "image/jpeg"

    def test_small_image_kept(self, mock_cv2):
        mock_cv2.imdecode.return_value = np.zeros((300, 200, 3), dtype=np.uint8)

        image = prepare_image(b"raw-bytes")

        mock_cv2.resize.assert_not_called()
        assert (image.width, image.height) == (200, 300)

    def test_jpeg_quality(self, mock_cv2):
        mock_cv2.imdecode.return_value = np.zeros((10, 10, 3), dtype=np.uint8)

        prepare_image(b"raw-bytes", jpeg_quality=55)

        args = mock_cv2.imencode.call_args[0]
        assert args[0] == ".jpg"
        assert args[2] == [mock_cv2.IMWRITE_JPEG_QUALITY, 55]

    def test_reads_path(self, mock_cv2, tmp_path):
        mock_cv2.imdecode.return_value = np.zeros((10, 10, 3), dtype=np.uint8)
        path = tmp_path / "receipt.jpg"
        path.write_bytes(b"file-bytes")

        image = prepare_image(path)

        assert image.original == b"file-bytes"

    def test_missing_file(self, mock_cv2, tmp_path):
        with pytest.raises(ImageEncodingError, match="Could not read"):
            prepare_image(tmp_path / "missing.jpg")

    def test_empty_bytes(self, mock_cv2):
        with pytest.raises(ImageEncodingError, match="empty"):
            prepare_image(b"")

    def test_undecodable(self, mock_cv2):
        mock_cv2.imdecode.return_value = None
        with pytest.raises(ImageEncodingError, match="decode"):
            prepare_image(b"not-an-image")

    def test_encode_failure(self, mock_cv2):
        mock_cv2.imdecode.return_value = np.zeros((10, 10, 3), dtype=np.uint8)
        mock_cv2.imencode.return_value = (False, None)
        with pytest.raises(ImageEncodingError, match="JPEG"):
            prepare_image(b"raw-bytes")
