# File: rueda/render/surface.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-14
# Purpose: Contrato de la superficie de dibujo (estilo canvas 2D) + grabadora para tests.
# Notes:
# - Semántica canvas: radianes, eje y hacia abajo, arc() une con línea desde el punto actual.
# - El core solo habla con este protocolo; Qt vive en rueda.render.qt_surface.
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """Primitivas consumidas por el motor de la rueda."""

    def resize(self, width: int, height: int) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def scale(self, x: float, y: float) -> None: ...

    def set_fill_style(self, color: str) -> None: ...

    def set_stroke_style(self, color: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_font(self, font: str) -> None: ...

    def set_text_align(self, align: str) -> None: ...

    def set_text_baseline(self, baseline: str) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...


@contextmanager
def surface_state(surface: Surface) -> Iterator[Surface]:
    """save() al entrar y restore() garantizado al salir (aunque el dibujo falle)."""
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


Call = tuple[str, tuple[Any, ...]]


class RecordingSurface:
    """Superficie que solo registra llamadas, en orden.

    Sirve para verificar geometría sin Qt y para comparar dos renders
    (mismo input => misma secuencia de llamadas).
    """

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self.width = 0
        self.height = 0
        self._depth = 0

    def _rec(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    @property
    def depth(self) -> int:
        """Cantidad de save() sin su restore()."""
        return self._depth

    def named(self, name: str) -> list[tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = int(width), int(height)
        self._rec("resize", self.width, self.height)

    def save(self) -> None:
        self._depth += 1
        self._rec("save")

    def restore(self) -> None:
        self._depth -= 1
        self._rec("restore")

    def begin_path(self) -> None:
        self._rec("begin_path")

    def close_path(self) -> None:
        self._rec("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._rec("move_to", x, y)

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        self._rec("arc", x, y, radius, start_angle, end_angle)

    def fill(self) -> None:
        self._rec("fill")

    def stroke(self) -> None:
        self._rec("stroke")

    def translate(self, x: float, y: float) -> None:
        self._rec("translate", x, y)

    def rotate(self, angle: float) -> None:
        self._rec("rotate", angle)

    def scale(self, x: float, y: float) -> None:
        self._rec("scale", x, y)

    def set_fill_style(self, color: str) -> None:
        self._rec("set_fill_style", color)

    def set_stroke_style(self, color: str) -> None:
        self._rec("set_stroke_style", color)

    def set_line_width(self, width: float) -> None:
        self._rec("set_line_width", width)

    def set_font(self, font: str) -> None:
        self._rec("set_font", font)

    def set_text_align(self, align: str) -> None:
        self._rec("set_text_align", align)

    def set_text_baseline(self, baseline: str) -> None:
        self._rec("set_text_baseline", baseline)

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._rec("fill_text", text, x, y)
