# File: rueda/render/qt_surface.py
# Project: RuedaEmociones (REM)
# Version: 0.4.1
# Status: stable
# Date: 2026-10-16
# Purpose: Surface (estilo canvas 2D) implementada con QPainter sobre QImage o QSvgGenerator.
# Notes:
# - Ángulos canvas (radianes, horario con y hacia abajo) -> grados Qt (antihorario): se niegan.
# - Como canvas, move_to()/arc() fijan los puntos con la transformación vigente al agregarlos.
# - Estilo (relleno/trazo/fuente/alineación) se guarda en una pila propia junto a QPainter.save().
from __future__ import annotations

import logging
import math
import re
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRect, QRectF, QSize, Qt
from PySide6.QtGui import (
    QBrush,
    QColor,
    QFont,
    QFontMetricsF,
    QGuiApplication,
    QImage,
    QPainter,
    QPainterPath,
    QPaintDevice,
    QPen,
    QTransform,
)
from PySide6.QtSvg import QSvgGenerator

from rueda.core.version import APP_NAME
from rueda.utils.errors import SurfaceError

log = logging.getLogger(__name__)

DeviceFactory = Callable[[int, int], QPaintDevice]

_FONT_RE = re.compile(
    r"^\s*(?P<mods>(?:(?:bold|italic|normal)\s+)*)(?P<size>\d+(?:\.\d+)?)(?P<unit>px|pt)\s+(?P<family>.+?)\s*$",
    re.IGNORECASE,
)

_GENERIC_FAMILIES = {
    "sans-serif": QFont.StyleHint.SansSerif,
    "serif": QFont.StyleHint.Serif,
    "monospace": QFont.StyleHint.Monospace,
}

_TEXT_ALIGNS = ("start", "end", "left", "right", "center")
_TEXT_BASELINES = ("alphabetic", "top", "middle", "bottom")


def ensure_qt_app() -> None:
    """Crea una app Qt mínima si no existe (necesaria para fuentes y plugins)."""
    if QGuiApplication.instance() is None:
        QGuiApplication(sys.argv[:1] or ["rueda"])


def parse_color(color: str) -> QColor:
    c = QColor(str(color))
    if not c.isValid():
        raise SurfaceError(f"Color inválido: {color!r}")
    return c


def parse_font(spec: str) -> QFont:
    """'12px sans-serif', 'bold 10.5pt Arial' -> QFont."""
    m = _FONT_RE.match(str(spec))
    if not m:
        raise SurfaceError(f"Fuente inválida: {spec!r} (se espera '<tamaño>px <familia>')")

    family = m.group("family").strip().strip("'\"")
    font = QFont()
    hint = _GENERIC_FAMILIES.get(family.lower())
    if hint is not None:
        font.setStyleHint(hint)
    else:
        font.setFamily(family)

    size = float(m.group("size"))
    if size <= 0:
        raise SurfaceError(f"Tamaño de fuente inválido: {spec!r}")
    if m.group("unit").lower() == "px":
        font.setPixelSize(max(1, round(size)))
    else:
        font.setPointSizeF(size)

    mods = m.group("mods").lower().split()
    font.setBold("bold" in mods)
    font.setItalic("italic" in mods)
    return font


@dataclass(frozen=True)
class _Style:
    fill: QColor
    stroke: QColor
    line_width: float
    font: QFont
    text_align: str = "start"
    text_baseline: str = "alphabetic"


def _default_style() -> _Style:
    return _Style(
        fill=QColor("black"),
        stroke=QColor("black"),
        line_width=1.0,
        font=parse_font("10px sans-serif"),
    )


def image_device(background: Optional[str] = None) -> DeviceFactory:
    """QImage ARGB32 (transparente salvo que se pase `background`)."""
    bg = parse_color(background) if background else QColor(0, 0, 0, 0)

    def make(width: int, height: int) -> QImage:
        img = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        img.fill(bg)
        return img

    return make


def svg_device(path: str | Path, *, title: str = APP_NAME) -> DeviceFactory:
    def make(width: int, height: int) -> QSvgGenerator:
        gen = QSvgGenerator()
        gen.setFileName(str(path))
        gen.setSize(QSize(width, height))
        gen.setViewBox(QRect(0, 0, width, height))
        gen.setTitle(title)
        return gen

    return make


class QPainterSurface:
    """Surface sobre QPainter.

    El dispositivo se crea en resize() (como un canvas que se redimensiona);
    finish() cierra el painter y devuelve el dispositivo listo para guardar.
    """

    def __init__(self, device_factory: DeviceFactory, *, antialias: bool = True) -> None:
        self._factory = device_factory
        self._antialias = antialias
        self._device: Optional[QPaintDevice] = None
        self._painter: Optional[QPainter] = None
        self._path = QPainterPath()
        self._has_point = False
        self._style = _default_style()
        self._stack: list[_Style] = []

    # ----------------------------
    # Lifecycle
    # ----------------------------
    @property
    def device(self) -> Optional[QPaintDevice]:
        return self._device

    def _require_painter(self) -> QPainter:
        p = self._painter
        if p is None or not p.isActive():
            raise SurfaceError("Superficie sin painter activo (falta resize())")
        return p

    def resize(self, width: int, height: int) -> None:
        w, h = int(width), int(height)
        if w <= 0 or h <= 0:
            raise SurfaceError(f"Tamaño de superficie inválido: {w}x{h}")
        self.finish()

        device = self._factory(w, h)
        painter = QPainter()
        if not painter.begin(device):
            raise SurfaceError(f"QPainter no pudo iniciar sobre {type(device).__name__} {w}x{h}")
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, self._antialias)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, self._antialias)

        self._device = device
        self._painter = painter
        self._style = _default_style()
        self._stack.clear()
        self.begin_path()
        log.debug("Superficie %s %sx%s", type(device).__name__, w, h)

    def finish(self) -> Optional[QPaintDevice]:
        if self._painter is not None and self._painter.isActive():
            self._painter.end()
        self._painter = None
        return self._device

    def __enter__(self) -> "QPainterSurface":
        return self

    def __exit__(self, *exc: object) -> None:
        self.finish()

    # ----------------------------
    # State
    # ----------------------------
    def save(self) -> None:
        self._require_painter().save()
        self._stack.append(self._style)

    def restore(self) -> None:
        if not self._stack:
            # canvas: restore() sin save() no hace nada
            log.debug("restore() sin save() ignorado")
            return
        self._require_painter().restore()
        self._style = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        self._require_painter().translate(float(x), float(y))

    def rotate(self, angle: float) -> None:
        # Qt rota en grados, horario en pantalla (igual que canvas).
        self._require_painter().rotate(math.degrees(float(angle)))

    def scale(self, x: float, y: float) -> None:
        self._require_painter().scale(float(x), float(y))

    def set_fill_style(self, color: str) -> None:
        self._style = replace(self._style, fill=parse_color(color))

    def set_stroke_style(self, color: str) -> None:
        self._style = replace(self._style, stroke=parse_color(color))

    def set_line_width(self, width: float) -> None:
        w = float(width)
        if not w > 0:
            raise SurfaceError(f"line_width inválido: {width!r}")
        self._style = replace(self._style, line_width=w)

    def set_font(self, font: str) -> None:
        self._style = replace(self._style, font=parse_font(font))

    def set_text_align(self, align: str) -> None:
        a = str(align).strip().lower()
        if a not in _TEXT_ALIGNS:
            raise SurfaceError(f"text_align inválido: {align!r}")
        self._style = replace(self._style, text_align=a)

    def set_text_baseline(self, baseline: str) -> None:
        b = str(baseline).strip().lower()
        if b not in _TEXT_BASELINES:
            raise SurfaceError(f"text_baseline inválido: {baseline!r}")
        self._style = replace(self._style, text_baseline=b)

    # ----------------------------
    # Paths
    # ----------------------------
    def _to_device(self) -> QTransform:
        p = self._painter
        return p.transform() if p is not None and p.isActive() else QTransform()

    def begin_path(self) -> None:
        self._path = QPainterPath()
        self._path.setFillRule(Qt.FillRule.WindingFill)
        self._has_point = False

    def close_path(self) -> None:
        if self._has_point:
            self._path.closeSubpath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(self._to_device().map(QPointF(float(x), float(y))))
        self._has_point = True

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        r = float(radius)
        if r < 0:
            raise SurfaceError(f"Radio negativo: {radius!r}")
        rect = QRectF(float(x) - r, float(y) - r, 2.0 * r, 2.0 * r)
        start_deg = -math.degrees(float(start_angle))
        sweep_deg = -math.degrees(float(end_angle) - float(start_angle))

        local = QPainterPath()
        local.arcMoveTo(rect, start_deg)
        local.arcTo(rect, start_deg, sweep_deg)
        mapped = self._to_device().map(local)
        if self._has_point:
            # canvas: línea recta desde el punto actual hasta el inicio del arco
            self._path.connectPath(mapped)
        else:
            self._path.addPath(mapped)
            self._has_point = True

    def _local_path(self, painter: QPainter) -> Optional[QPainterPath]:
        """Path en coordenadas de usuario actuales (None si la transformación no es invertible)."""
        inverse, invertible = painter.transform().inverted()
        if not invertible:
            log.debug("Transformación no invertible; se omite el dibujo")
            return None
        return inverse.map(self._path)

    def fill(self) -> None:
        p = self._require_painter()
        path = self._local_path(p)
        if path is not None:
            p.fillPath(path, QBrush(self._style.fill))

    def stroke(self) -> None:
        p = self._require_painter()
        path = self._local_path(p)
        if path is None:
            return
        # El grosor del trazo sí usa la transformación vigente (igual que canvas).
        pen = QPen(self._style.stroke, self._style.line_width)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        p.strokePath(path, pen)

    # ----------------------------
    # Text
    # ----------------------------
    def fill_text(self, text: str, x: float, y: float) -> None:
        p = self._require_painter()
        st = self._style
        fm = QFontMetricsF(st.font)

        width = fm.horizontalAdvance(text)
        if st.text_align == "center":
            dx = width / 2.0
        elif st.text_align in ("right", "end"):
            dx = width
        else:
            dx = 0.0

        if st.text_baseline == "middle":
            dy = (fm.ascent() - fm.descent()) / 2.0
        elif st.text_baseline == "top":
            dy = fm.ascent()
        elif st.text_baseline == "bottom":
            dy = -fm.descent()
        else:
            dy = 0.0

        p.save()
        p.setFont(st.font)
        p.setPen(QPen(st.fill))
        p.drawText(QPointF(float(x) - dx, float(y) + dy), str(text))
        p.restore()
