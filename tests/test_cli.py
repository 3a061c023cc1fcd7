"""Tests for the milktea-receipt CLI."""

import io
import json
from unittest.mock import patch

import pytest

from milktea.receipt.cli import main
from milktea.receipt.errors import ImageEncodingError
from milktea.receipt.images import ReceiptImage

_TEXT = "Gong Cha\nPearl Milk Tea L 30% $5.50\nTotal $5.50\n"


@pytest.fixture
def receipt_text(tmp_path):
    path = tmp_path / "receipt.txt"
    path.write_text(_TEXT, encoding="utf-8")
    return path


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1


class TestParseCommand:
    def test_json_output(self, receipt_text, capsys):
        main(["parse", str(receipt_text), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["brandName"] == "Gong Cha"
        assert data["totalPrice"] == "5.50"
        assert data["items"][0]["drinkName"] == "Pearl Milk Tea"
        assert data["items"][0]["size"] == "large"
        assert data["items"][0]["sugarLevel"] == "light"

    def test_text_output(self, receipt_text, capsys):
        main(["parse", str(receipt_text)])

        out = capsys.readouterr().out
        assert "Brand: Gong Cha" in out
        assert "Pearl Milk Tea" in out
        assert "Total: $5.50" in out

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(_TEXT))
        main(["parse", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert len(data["items"]) == 1


class TestScanCommand:
    def test_scan_without_ai(self, receipt_text, tmp_path, capsys):
        image = tmp_path / "receipt.jpg"
        with patch(
            "milktea.receipt.processor.prepare_image",
            return_value=ReceiptImage(data=b"jpeg", original=b"raw"),
        ):
            main(["scan", str(image), "--no-ai", "--text", str(receipt_text), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["usedFallback"] is True
        assert data["matchedBrandName"] == "Gong Cha"
        assert data["items"][0]["price"] == "5.50"

    def test_scan_unreadable_image(self, receipt_text, tmp_path, capsys):
        with patch(
            "milktea.receipt.processor.prepare_image",
            side_effect=ImageEncodingError("Could not decode image data"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["scan", str(tmp_path / "x.jpg"), "--no-ai", "--text", str(receipt_text)])

        assert exc_info.value.code == 1
        assert "Could not decode image data" in capsys.readouterr().err
