"""Tests del backend Qt (offscreen): parsing de estilos y export PNG/SVG."""
import math

import pytest
from PySide6.QtGui import QImage

from rueda.core.colors import COLOR_PALETTE
from rueda.render.export import export_wheel
from rueda.render.qt_surface import QPainterSurface, image_device, parse_color, parse_font
from rueda.render.wheel import WheelStyle
from rueda.utils.errors import MalformedHierarchyError, RuedaValidationError, SurfaceError


def test_parse_color():
    assert parse_color("#ffd966").name() == "#ffd966"
    assert parse_color("white").name() == "#ffffff"
    with pytest.raises(SurfaceError):
        parse_color("not-a-color")


def test_parse_font(qt_app):
    f = parse_font("bold 12px Arial")
    assert f.pixelSize() == 12
    assert f.bold()
    assert f.family() == "Arial"
    assert parse_font("6.3px sans-serif").pixelSize() == 6
    assert parse_font("10pt serif").pointSizeF() == pytest.approx(10.0)


@pytest.mark.parametrize("spec", ["", "12 Arial", "12em Arial", "px Arial"])
def test_parse_font_rejects(qt_app, spec):
    with pytest.raises(SurfaceError):
        parse_font(spec)


def test_draw_without_resize_raises(qt_app):
    s = QPainterSurface(image_device())
    s.restore()  # sin save(): no-op
    with pytest.raises(SurfaceError):
        s.fill()


def test_resize_rejects_empty(qt_app):
    with pytest.raises(SurfaceError):
        QPainterSurface(image_device()).resize(0, 10)


def _red_disk(s, translate_before):
    s.resize(40, 40)
    s.set_fill_style("red")
    if translate_before:
        s.translate(20.0, 20.0)
    s.begin_path()
    s.arc(10.0, 10.0, 5.0, 0.0, 2.0 * math.pi)
    if not translate_before:
        s.translate(20.0, 20.0)
    s.fill()
    return s.finish()


def test_path_points_use_transform_when_added(qt_app):
    img = _red_disk(QPainterSurface(image_device()), translate_before=False)
    assert img.pixelColor(10, 10).name() == "#ff0000"
    assert img.pixelColor(30, 30).alpha() == 0


def test_path_points_after_translate(qt_app):
    img = _red_disk(QPainterSurface(image_device()), translate_before=True)
    assert img.pixelColor(30, 30).name() == "#ff0000"
    assert img.pixelColor(10, 10).alpha() == 0


def test_export_png_pixels(qt_app, tmp_path):
    out = export_wheel(tmp_path / "out" / "wheel.png", width=400, height=400)
    assert out.is_file()

    img = QImage(str(out))
    assert (img.width(), img.height()) == (400, 400)

    # centro: disco blanco
    assert img.pixelColor(200, 200).name() == "#ffffff"
    # esquina: fondo transparente
    assert img.pixelColor(0, 0).alpha() == 0
    # primera hoja (Happy), cerca del borde exterior y lejos de etiqueta y trazos
    theta = -math.pi / 2 + math.pi / 82
    x, y = 200 + 155 * math.cos(theta), 200 + 155 * math.sin(theta)
    assert img.pixelColor(round(x), round(y)).name() == COLOR_PALETTE[0]


def test_export_png_scale_and_background(qt_app, tmp_path):
    out = export_wheel(tmp_path / "w.png", width=100, height=80, scale=2, background="black")
    img = QImage(str(out))
    assert (img.width(), img.height()) == (200, 160)
    assert img.pixelColor(0, 0).name() == "#000000"
    assert img.pixelColor(0, 0).alpha() == 255


def test_export_svg(qt_app, tmp_path):
    out = export_wheel(tmp_path / "wheel.svg", width=300, height=300)
    txt = out.read_text(encoding="utf-8")
    assert "<svg" in txt
    assert "Happy" in txt


def test_export_rejects_suffix(qt_app, tmp_path):
    with pytest.raises(RuedaValidationError, match="Formato no soportado"):
        export_wheel(tmp_path / "wheel.gif", width=100, height=100)


def test_export_rejects_scale(qt_app, tmp_path):
    with pytest.raises(RuedaValidationError):
        export_wheel(tmp_path / "wheel.png", width=100, height=100, scale=0)


@pytest.mark.parametrize("name", ["bad.png", "bad.svg"])
def test_malformed_tree_writes_nothing(qt_app, tmp_path, make_tree, name):
    bad = make_tree({"A": {"a": []}})
    with pytest.raises(MalformedHierarchyError):
        export_wheel(tmp_path / name, bad, width=100, height=100)
    assert not (tmp_path / name).exists()


@pytest.mark.parametrize("name", ["half.png", "half.svg"])
def test_surface_fault_writes_nothing(qt_app, tmp_path, name):
    out = tmp_path / name
    with pytest.raises(SurfaceError):
        export_wheel(out, width=200, height=200, style=WheelStyle(stroke="not-a-color"))
    assert not out.exists()
    assert list(tmp_path.iterdir()) == []


def test_failed_svg_keeps_previous_file(qt_app, tmp_path):
    out = export_wheel(tmp_path / "wheel.svg", width=120, height=120)
    before = out.read_text(encoding="utf-8")
    with pytest.raises(SurfaceError):
        export_wheel(out, width=200, height=200, style=WheelStyle(text_color="not-a-color"))
    assert out.read_text(encoding="utf-8") == before
    assert not (tmp_path / "wheel.svg.tmp").exists()
