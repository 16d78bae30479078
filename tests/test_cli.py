"""
Tests for the name_colours command line entry point.
"""
import json

import numpy as np
import pytest

import name_colours


def test_names_hex_colours(capsys):
    assert name_colours.main(["#ff6347", "dc143d"]) == 0
    out = capsys.readouterr().out
    assert "FF6347  Tomato" in out
    assert "DC143C  Crimson" in out
    assert "base: Orange (FFA500)" in out


def test_json_output(capsys):
    assert name_colours.main(["--json", "ff6347"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert [r["title"] for r in records] == ["Tomato"]
    assert records[0]["base"]["title"] == "Orange"


def test_invalid_hex_exit_code(capsys):
    assert name_colours.main(["zzzzzz"]) == 2
    assert "[error]" in capsys.readouterr().err


def test_requires_input():
    with pytest.raises(SystemExit) as exc_info:
        name_colours.main([])
    assert exc_info.value.code == 2


def test_image_report(write_png, capsys):
    img = np.zeros((2, 2, 3), dtype=np.uint8)
    img[0, :] = (255, 0, 0)
    img[1, 0] = (90, 90, 90)
    img[1, 1] = (255, 0, 0)
    path = write_png(img, "sample.png")

    assert name_colours.main(["--image", str(path), "--limit", "2"]) == 0
    out = capsys.readouterr().out
    assert "=== sample.png ===" in out
    assert "from F00000: pixels=3" in out
    assert "Greyscale: 25%" in out
    assert "Total pixels: 4" in out


def test_image_json(write_png, capsys):
    img = np.full((2, 2, 3), (0, 0, 255), dtype=np.uint8)
    path = write_png(img)
    assert name_colours.main(["--image", str(path), "--exact", "--json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert [r["hex"] for r in records] == ["0000FF"]


def test_missing_image(tmp_path, capsys):
    assert name_colours.main(["--image", str(tmp_path / "nope.png")]) == 2
    assert "not found" in capsys.readouterr().err


def test_custom_dataset(tmp_path, capsys):
    path = tmp_path / "tables.json"
    path.write_text(
        json.dumps(
            {
                "bases": [{"id": 0, "hex": "00FF00", "title": "Green"}],
                "shades": [{"id": 0, "hex": "00FF00", "base": 0}],
                "colours": [{"hex": "00FF00", "shade": 0, "title": "Only Green"}],
            }
        )
    )
    assert name_colours.main(["--dataset", str(path), "FF0000"]) == 0
    assert "00FF00  Only Green" in capsys.readouterr().out


def test_malformed_dataset(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text(
        json.dumps(
            {
                "bases": [],
                "shades": [{"id": 0, "hex": "00FF00", "base": 5}],
                "colours": [{"hex": "00FF00", "shade": 0, "title": "Green"}],
            }
        )
    )
    assert name_colours.main(["--dataset", str(path), "FF0000"]) == 2
    assert "malformed catalog entry" in capsys.readouterr().err


def test_debug_lines(capsys):
    assert name_colours.main(["--debug", "000000"]) == 0
    out = capsys.readouterr().out
    assert "[debug] [catalog]" in out
    assert "[debug] [run]" in out


def test_dataset_with_list_id(tmp_path, capsys):
    path = tmp_path / "list_id.json"
    path.write_text(
        json.dumps(
            {
                "bases": [{"id": [1], "hex": "00FF00", "title": "Green"}],
                "shades": [],
                "colours": [],
            }
        )
    )
    assert name_colours.main(["--dataset", str(path), "FF0000"]) == 2
    assert "bases[0]" in capsys.readouterr().err


def test_dataset_not_utf8(tmp_path, capsys):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00{")
    assert name_colours.main(["--dataset", str(path), "FF0000"]) == 2
    assert "not UTF-8" in capsys.readouterr().err


def test_empty_dataset_warns(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text("{}")
    assert name_colours.main(["--dataset", str(path), "FF0000"]) == 0
    assert "[warn] FF0000: catalog holds no colours" in capsys.readouterr().out


def test_transparent_image_warns(write_png, capsys):
    rgba = np.zeros((2, 2, 4), dtype=np.uint8)
    path = write_png(rgba, "clear.png")
    assert name_colours.main(["--image", str(path)]) == 0
    out = capsys.readouterr().out
    assert "[warn] clear.png: no visible pixels" in out
    assert "Total pixels: 0" in out
