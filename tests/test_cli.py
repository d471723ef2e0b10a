"""Test command line handling and renderers"""

import json
import runpy
import sys

import cv2 as cv
import numpy
import pytest

from bincurve import cli
from bincurve.config import Config
from bincurve.pixelgrid import parse_bytes
from bincurve.render_image import NullRenderer, PngRenderer, render_image
from bincurve.errors import InvalidDimensions, IoFailure
from bincurve.util import exit_message

@pytest.fixture
def blob(tmp_path):
    fn = tmp_path / "blob.bin"
    fn.write_bytes(bytes(range(256)) * 3)
    return fn

def test_save_writes_hilbertified_bytes(blob, tmp_path):
    out = tmp_path / "out.bin"
    assert cli.run([str(blob), "16", "-o", str(out)]) == 0

    expected = parse_bytes(blob.read_bytes(), 16)
    expected.hilbertify()
    data = out.read_bytes()
    assert len(data) == 16 * 16 * 3
    assert data == expected.to_bytes()

def test_unhilbertify_then_save_is_identity(blob, tmp_path):
    out = tmp_path / "out.bin"
    cli.run([str(blob), "16", "--unhilbertify", "--save", str(out)])
    assert out.read_bytes() == blob.read_bytes()

def test_trim_and_fill(blob, tmp_path):
    out = tmp_path / "out.bin"
    cli.run([str(blob), "0x10", "--trim-start", "0x10", "--trim-end", "0",
             "--fill", "1,2,3", "-o", str(out)])
    grid = parse_bytes(blob.read_bytes(), 16, fill=(1, 2, 3), trim_start=16)
    grid.hilbertify()
    assert out.read_bytes() == grid.to_bytes()

def test_renderer_gets_grid(blob):
    renderer = NullRenderer()
    cli.run([str(blob), "32"], renderer=renderer)
    assert len(renderer.shown) == 1
    grid = renderer.shown[0]
    assert (grid.width, grid.height) == (32, 8)

def test_png_snapshot(blob, tmp_path):
    png = tmp_path / "out.png"
    cli.run([str(blob), "16", "--png", str(png), "--scale", "2"])
    img = cv.imread(str(png), cv.IMREAD_COLOR)
    assert img.shape == (32, 32, 3)
    # BGR on disk, first pixel is bytes 0, 1, 2
    assert img[0, 0].tolist() == [2, 1, 0]
    assert img[1, 1].tolist() == [2, 1, 0]

def test_non_square_save_fails(blob, tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        cli.run([str(blob), "32", "-o", str(tmp_path / "out.bin")])
    assert e.value.code == 1
    assert "square" in capsys.readouterr().err
    assert not (tmp_path / "out.bin").exists()

def test_trim_too_large(blob, capsys):
    with pytest.raises(SystemExit) as e:
        cli.run([str(blob), "16", "--trim-start", "700", "--trim-end", "100"],
                renderer=NullRenderer())
    assert e.value.code == 1
    assert "Trimming" in capsys.readouterr().err

def test_missing_input(tmp_path):
    with pytest.raises(SystemExit) as e:
        cli.run([str(tmp_path / "nope.bin"), "16"], renderer=NullRenderer())
    assert e.value.code == 1

def test_no_arguments():
    with pytest.raises(SystemExit):
        cli.run([])

def test_bad_fill(blob):
    with pytest.raises(SystemExit):
        cli.run([str(blob), "16", "--fill", "1,2"], renderer=NullRenderer())
    with pytest.raises(SystemExit):
        cli.run([str(blob), "16", "--fill", "1,2,300"], renderer=NullRenderer())

def test_config_file(blob, tmp_path):
    cfg = tmp_path / "opts.json"
    cfg.write_text(json.dumps({"width": 16, "fill": [4, 5, 6], "trim_end": 1}))
    renderer = NullRenderer()
    cli.run([str(blob), "--config", str(cfg)], renderer=renderer)
    grid = renderer.shown[0]
    assert grid.width == 16
    assert grid.fill == (4, 5, 6)
    # 767 bytes, last group of 2 takes blue from fill
    assert grid.get(15, 15) == (253, 254, 6)

def test_config_file_unknown_key(blob, tmp_path):
    cfg = tmp_path / "opts.json"
    cfg.write_text(json.dumps({"colour": 1}))
    with pytest.raises(SystemExit):
        cli.run([str(blob), "16", "--config", str(cfg)], renderer=NullRenderer())

def test_config_update():
    config = Config()
    config.update({"scale": 3, "fill": [1, 2, 3]})
    assert config.scale == 3
    assert config.fill == (1, 2, 3)
    with pytest.raises(KeyError):
        config.update({"nope": 1})

def test_parse_color():
    assert cli.parse_color("0x10, 0, 255") == (16, 0, 255)
    with pytest.raises(ValueError):
        cli.parse_color("1,2,3,4")

def test_render_image():
    grid = parse_bytes(bytes([10, 20, 30, 40, 50, 60]), 2)
    rgb = render_image(grid, rgb=True)
    assert rgb.shape == (1, 2, 3)
    assert rgb[0, 1].tolist() == [40, 50, 60]

    bgr = render_image(grid, scale=3)
    assert bgr.shape == (3, 6, 3)
    assert bgr[2, 5].tolist() == [60, 50, 40]
    # Source grid untouched
    assert grid.get(0, 0) == (10, 20, 30)

def test_render_empty():
    grid = parse_bytes(b"", 4)
    with pytest.raises(InvalidDimensions):
        render_image(grid)

def test_png_renderer_failure(tmp_path):
    grid = parse_bytes(bytes(12), 2)
    with pytest.raises(IoFailure):
        PngRenderer(tmp_path / "missing_dir" / "out.png").show(grid)

@pytest.mark.parametrize("values", [
    {"width": 16, "fill": [300, 0, 0]},
    {"width": 16, "fill": [1, 2]},
    {"width": 16, "fill": "1,2,3"},
    {"width": "16"},
    {"width": 16, "trim_start": "4"},
    {"width": 16, "trim_end": -1},
    {"width": 16, "scale": 0},
    {"width": True},
    {"width": 16, "debug": "yes"},
    {"width": 16, "save_path": 5},
])
def test_config_file_bad_values(blob, tmp_path, capsys, values):
    cfg = tmp_path / "opts.json"
    cfg.write_text(json.dumps(values))
    renderer = NullRenderer()
    with pytest.raises(SystemExit) as e:
        cli.run([str(blob), "--config", str(cfg)], renderer=renderer)
    assert e.value.code == 1
    assert "Bad --config" in capsys.readouterr().err
    assert not renderer.shown

def test_config_update_rejects_bad_values():
    config = Config()
    with pytest.raises(ValueError):
        config.update({"fill": [0, 0, 256]})
    with pytest.raises(ValueError):
        config.update({"width": 0})
    with pytest.raises(ValueError):
        config.update({"trim_start": 1.5})
    # Nothing was applied
    assert config.fill == (0, 0, 0)
    assert config.width is None
    assert config.trim_start == 0

@pytest.mark.parametrize("extra", [["--png", "out.png"], ["-o", "out.bin"], []])
def test_scale_zero_rejected(blob, tmp_path, capsys, extra):
    extra = [str(tmp_path / a) if a.startswith("out") else a for a in extra]
    renderer = NullRenderer()
    with pytest.raises(SystemExit) as e:
        cli.run([str(blob), "16", "--scale", "0"] + extra, renderer=renderer)
    assert e.value.code == 1
    assert "scale" in capsys.readouterr().err
    assert not renderer.shown

def test_debug_timing(blob, tmp_path, capsys):
    cli.run([str(blob), "16", "--debug", "--unhilbertify", "-o", str(tmp_path / "out.bin")])
    out = capsys.readouterr().out
    assert "load time" in out
    assert "unhilbertify time" in out
    assert "hilbertify time" in out

def test_no_timing_without_debug(blob, tmp_path, capsys):
    cli.run([str(blob), "16", "-o", str(tmp_path / "out.bin")])
    assert " time " not in capsys.readouterr().out

def test_pixel_total_on_stderr(blob, capsys):
    cli.run([str(blob), "16"], renderer=NullRenderer())
    captured = capsys.readouterr()
    assert "total amount of pixels: 256, total amount of bytes: 768" in captured.err
    assert "total amount" not in captured.out

def test_module_entry_point(blob, tmp_path, monkeypatch):
    out = tmp_path / "out.bin"
    monkeypatch.setattr(sys, "argv", ["bincurve", str(blob), "16", "-o", str(out)])
    with pytest.raises(SystemExit) as e:
        runpy.run_module("bincurve", run_name="__main__")
    assert e.value.code == 0
    assert len(out.read_bytes()) == 16 * 16 * 3

def test_exit_message_dialog_without_app(capsys):
    with pytest.raises(SystemExit) as e:
        exit_message("no window here", prefer_cli=False)
    assert e.value.code == 1
    assert "no window here" in capsys.readouterr().err
