# File: rueda/render/draw.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-14
# Purpose: Contrato Drawable + algoritmos de dibujo de porción, etiqueta y disco.
# Notes:
# - Campo de estilo en None => NO se toca el estado de la superficie (no es "reset").
# - Todo dibujo va dentro de surface_state(): save/restore garantizado.
# - Espejo de etiquetas: solo si π/2 < θ < 3π/2 (extremos excluidos).
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, TypeVar

from rueda.render.surface import Surface, surface_state
from rueda.utils.errors import RuedaValidationError

if TYPE_CHECKING:
    from rueda.geom.shapes import Arc, Disk, Point

log = logging.getLogger(__name__)

_MIRROR_FROM = 0.5 * math.pi
_MIRROR_TO = 1.5 * math.pi


@dataclass(frozen=True)
class DrawOptions:
    fill_style: Optional[str] = None
    line_width: Optional[float] = None
    stroke_style: Optional[str] = None

    def __post_init__(self) -> None:
        if self.line_width is not None and not self.line_width > 0:
            raise RuedaValidationError(f"line_width debe ser > 0: {self.line_width!r}")


@dataclass(frozen=True)
class DrawTextOptions:
    fill_style: Optional[str] = None
    font: Optional[str] = None
    # Distancia centro -> ancla del texto (independiente del radio dibujado).
    label_radius: float = 0.0


D = TypeVar("D", bound="Drawable")


class Drawable(Protocol):
    """Cualquier forma que sabe dibujarse (y rotularse) sobre una Surface.

    Hoy lo implementan Arc y Disk; los llamadores solo conocen este protocolo.
    """

    def draw(self: D, options: DrawOptions, surface: Surface) -> D: ...

    def draw_text(self: D, text: str, options: DrawTextOptions, surface: Surface) -> D: ...


def label_is_mirrored(angle: float) -> bool:
    """True si la etiqueta cae en la mitad izquierda y hay que girarla 180°."""
    return _MIRROR_FROM < angle < _MIRROR_TO


def label_anchor(arc: "Arc", label_radius: float) -> "Point":
    return arc.center.offset(arc.bisector, label_radius)


def _apply_draw_options(options: DrawOptions, surface: Surface) -> None:
    if options.fill_style is not None:
        log.debug("fill style: %s", options.fill_style)
        surface.set_fill_style(options.fill_style)
    if options.line_width is not None:
        log.debug("line width: %s", options.line_width)
        surface.set_line_width(options.line_width)
    if options.stroke_style is not None:
        log.debug("stroke style: %s", options.stroke_style)
        surface.set_stroke_style(options.stroke_style)


def _apply_text_options(options: DrawTextOptions, surface: Surface) -> None:
    if options.fill_style is not None:
        surface.set_fill_style(options.fill_style)
    if options.font is not None:
        surface.set_font(options.font)


def draw_wedge(arc: "Arc", options: DrawOptions, surface: Surface) -> None:
    """Porción rellena con borde en el arco y en ambos radios."""
    cx, cy = arc.center.x, arc.center.y
    with surface_state(surface):
        surface.begin_path()
        surface.move_to(cx, cy)
        surface.arc(cx, cy, arc.radius, arc.start_angle, arc.end_angle)

        _apply_draw_options(options, surface)

        surface.stroke()
        surface.close_path()
        surface.fill()

        # El cierre implícito no siempre marca bien los dos radios.
        surface.move_to(cx, cy)
        surface.stroke()


def draw_label(arc: "Arc", text: str, options: DrawTextOptions, surface: Surface) -> None:
    """Texto centrado sobre la bisectriz del arco, orientado radialmente."""
    angle = arc.bisector
    anchor = label_anchor(arc, options.label_radius)
    with surface_state(surface):
        surface.translate(anchor.x, anchor.y)
        surface.rotate(angle)
        if label_is_mirrored(angle):
            surface.scale(-1.0, -1.0)

        _apply_text_options(options, surface)

        surface.set_text_align("center")
        surface.set_text_baseline("middle")
        surface.fill_text(text, 0.0, 0.0)


def draw_disk(disk: "Disk", options: DrawOptions, surface: Surface) -> None:
    """Círculo relleno, sin borde."""
    c = disk.center
    with surface_state(surface):
        surface.begin_path()
        surface.arc(c.x, c.y, disk.radius, 0.0, 2.0 * math.pi)
        if options.fill_style is not None:
            surface.set_fill_style(options.fill_style)
        surface.fill()


def draw_centered_text(point: "Point", text: str, options: DrawTextOptions, surface: Surface) -> None:
    with surface_state(surface):
        surface.translate(point.x, point.y)
        _apply_text_options(options, surface)
        surface.set_text_align("center")
        surface.set_text_baseline("middle")
        surface.fill_text(text, 0.0, 0.0)
