"""Tests for CLI argument parsing and command dispatch."""

import argparse
import json
from datetime import datetime

import pikepdf
import pytest

from labelku.cli import _parse_datetime, build_parser, main


@pytest.fixture
def settings(tmp_path):
    return str(tmp_path / "settings.json")


@pytest.fixture
def receipt_file(tmp_path, sample_receipt):
    path = tmp_path / "receipt.json"
    data = sample_receipt.to_dict()
    del data["paperSize"]
    del data["orientation"]
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def form_file(tmp_path):
    path = tmp_path / "form.json"
    path.write_text(
        json.dumps(
            {
                "senderName": "Budi",
                "senderAddress": "Bandung",
                "recipientName": "Siti",
                "recipientAddress": "Jakarta",
                "packageContents": "Buku",
                "weight": "500",
                "courier": "jne",
            }
        ),
        encoding="utf-8",
    )
    return path


class TestParseDatetime:
    def test_iso(self):
        assert _parse_datetime("2026-10-19T14:30") == datetime(2026, 10, 19, 14, 30)

    def test_invalid_raises(self):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid date"):
            _parse_datetime("19/10/2026")


class TestBuildParser:
    def test_render_options(self):
        args = build_parser().parse_args(
            ["render", "r.json", "-o", "out/", "--paper-size", "50x100mm", "--orientation", "landscape"]
        )
        assert args.command == "render"
        assert args.paper_size == "50x100mm"
        assert args.orientation == "landscape"
        assert str(args.output) == "out"

    def test_bad_orientation_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["render", "r.json", "--orientation", "upside"])

    def test_share_requires_target(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["share", "r.json"])

    def test_no_command(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestMain:
    def test_sizes_marks_default(self, settings, capsys):
        assert main(["--config", settings, "sizes"]) == 0
        out = capsys.readouterr().out
        assert "100x150mm  100 x 150 mm (default)" in out
        assert len(out.strip().splitlines()) == 13

    def test_couriers(self, settings, capsys):
        assert main(["--config", settings, "couriers"]) == 0
        assert "J&T Express" in capsys.readouterr().out

    def test_missing_input(self, settings, tmp_path, capsys):
        assert main(["--config", settings, "render", str(tmp_path / "nope.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_json(self, settings, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("[1, 2", encoding="utf-8")
        assert main(["--config", settings, "text", str(bad)]) == 1
        assert "Invalid receipt file" in capsys.readouterr().err

    def test_render_to_directory(self, settings, receipt_file, tmp_path, capsys):
        out_dir = tmp_path / "labels"
        assert main(["--config", settings, "render", str(receipt_file), "-o", str(out_dir)]) == 0

        pdf_path = out_dir / "resi-JNT12345678ABCD.pdf"
        assert pdf_path.exists()
        assert f"Saved: {pdf_path}" in capsys.readouterr().out

    def test_render_uses_paper_option(self, settings, receipt_file, tmp_path):
        target = tmp_path / "label.pdf"
        argv = ["--config", settings, "render", str(receipt_file), "-o", str(target)]
        assert main(argv + ["--paper-size", "50x100mm", "--orientation", "landscape"]) == 0

        with pikepdf.open(target) as pdf:
            x0, y0, x1, y1 = (float(v) for v in pdf.pages[0].mediabox)
        assert x1 - x0 == pytest.approx(283.465, abs=0.01)
        assert y1 - y0 == pytest.approx(141.73, abs=0.01)

    def test_render_uses_configured_paper(self, settings, receipt_file, tmp_path):
        assert main(["--config", settings, "config", "--paper-size", "100x100mm"]) == 0
        target = tmp_path / "label.pdf"
        assert main(["--config", settings, "render", str(receipt_file), "-o", str(target)]) == 0

        with pikepdf.open(target) as pdf:
            x0, y0, x1, y1 = (float(v) for v in pdf.pages[0].mediabox)
        assert y1 - y0 == pytest.approx(283.465, abs=0.01)

    def test_render_warns_on_truncation(self, settings, receipt_file, tmp_path, capsys):
        target = tmp_path / "tiny.pdf"
        argv = ["--config", settings, "render", str(receipt_file), "-o", str(target)]
        assert main(argv + ["--paper-size", "60x20mm"]) == 0
        assert "did not fit" in capsys.readouterr().err

    def test_text(self, settings, receipt_file, capsys):
        assert main(["--config", settings, "text", str(receipt_file), "--date", "2026-01-05T09:00"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("📦 RESI PENGIRIMAN")
        assert out.strip().endswith("📅 Tanggal: 5/1/2026")

    def test_share_prints_link(self, settings, receipt_file, capsys):
        assert main(["--config", settings, "share", str(receipt_file), "--via", "whatsapp"]) == 0
        assert capsys.readouterr().out.startswith("https://wa.me/?text=%F0%9F%93%A6")

    def test_quote(self, settings, form_file, capsys):
        assert main(["--config", settings, "quote", str(form_file)]) == 0
        out = capsys.readouterr().out
        assert "Rp 15.000" in out
        assert "Same Day" in out

    def test_quote_incomplete_form(self, settings, tmp_path, capsys):
        form = tmp_path / "form.json"
        form.write_text(json.dumps({"courier": "jne"}), encoding="utf-8")
        assert main(["--config", settings, "quote", str(form)]) == 1
        assert "required field is empty" in capsys.readouterr().err

    def test_create_writes_receipt(self, settings, form_file, tmp_path, capsys):
        target = tmp_path / "receipt.json"
        argv = ["--config", settings, "create", str(form_file), "-o", str(target)]
        assert main(argv + ["--service", "Express"]) == 0

        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["trackingNumber"].startswith("JNE")
        assert data["shippingCost"] == 25000
        assert data["paperSize"] == "100x150mm"
        assert "Rp 25.000" in capsys.readouterr().err

    def test_create_without_service_fails(self, settings, form_file, capsys):
        assert main(["--config", settings, "create", str(form_file)]) == 1
        assert "service" in capsys.readouterr().err

    def test_info(self, settings, receipt_file, tmp_path, capsys):
        target = tmp_path / "label.pdf"
        main(["--config", settings, "render", str(receipt_file), "-o", str(target)])
        capsys.readouterr()

        assert main(["--config", settings, "info", str(target)]) == 0
        out = capsys.readouterr().out
        assert "Pages:    1" in out
        assert "100 x 150 mm" in out

    def test_info_not_a_pdf(self, settings, receipt_file, capsys):
        assert main(["--config", settings, "info", str(receipt_file)]) == 1

    def test_config_updates_and_shows(self, settings, capsys):
        assert main(["--config", settings, "config", "--orientation", "landscape"]) == 0
        assert "label.orientation = 'landscape'" in capsys.readouterr().out

        with open(settings, encoding="utf-8") as f:
            assert json.load(f)["label"]["orientation"] == "landscape"
