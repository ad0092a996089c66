# File: rueda/render/wheel.py
# Project: RuedaEmociones (REM)
# Version: 0.4.1
# Status: stable
# Date: 2026-10-16
# Purpose: Layout de la rueda (3 anillos) + dibujo sobre una Surface.
# Notes:
# - plan_wheel() es puro: devuelve las porciones en orden de dibujo; draw_plan() las pinta.
# - Los "anillos" salen del orden de pintado: las porciones se rellenan desde el centro,
#   así que las de radio menor (dibujadas después) tapan el centro de las mayores.
# - División angular con el total GLOBAL por profundidad (ancho de hoja uniforme).
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from rueda.core.colors import COLOR_PALETTE, NEUTRAL, ColorCycle
from rueda.core.models import Node, validate_wheel_hierarchy
from rueda.core.settings import env_float, env_str
from rueda.core.version import DEFAULT_RADIUS_RATIO
from rueda.geom.shapes import Arc, Circle, Disk, Point
from rueda.render.draw import DrawOptions, DrawTextOptions
from rueda.render.surface import Surface
from rueda.utils.errors import RuedaValidationError

log = logging.getLogger(__name__)


def _px(value: float) -> str:
    # repr = representación más corta que vuelve al mismo float; 10.0 -> "10"
    s = repr(float(value))
    return s[:-2] if s.endswith(".0") else s


@dataclass(frozen=True)
class WheelOptions:
    width: int
    height: int
    radius: float

    def __post_init__(self) -> None:
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise RuedaValidationError(
                f"Tamaño inválido: {self.width}x{self.height} (deben ser > 0)"
            )

    @staticmethod
    def from_size(width: int, height: int, radius_ratio: float = DEFAULT_RADIUS_RATIO) -> "WheelOptions":
        w, h = int(width), int(height)
        return WheelOptions(width=w, height=h, radius=min(w, h) * radius_ratio)

    def center(self) -> Point:
        return Point(self.width / 2.0, self.height / 2.0)

    def as_circle(self) -> Circle:
        return Circle(radius=self.radius, center=self.center())


@dataclass(frozen=True)
class WheelStyle:
    """Proporciones y estilo de la rueda (todas relativas al círculo base)."""

    middle_scale: float = 0.7
    inner_scale: float = 0.38
    center_scale: float = 0.15
    leaf_label_ratio: float = 0.85
    middle_label_ratio: float = 0.78
    inner_label_ratio: float = 0.71

    line_width: float = 2.5
    stroke: str = "white"
    text_color: str = "black"
    center_color: str = NEUTRAL
    font_family: str = "sans-serif"
    # tamaño de fuente = radio base / font_divisor (px)
    font_divisor: float = 38.0

    @classmethod
    def from_env(cls) -> "WheelStyle":
        """Defaults + overrides RUEDA_* (ver rueda.core.settings.apply_project_settings)."""
        d = cls()
        return cls(
            line_width=env_float("RUEDA_LINE_WIDTH", d.line_width, min_value=0.1, max_value=50.0),
            stroke=env_str("RUEDA_STROKE", d.stroke),
            text_color=env_str("RUEDA_TEXT_COLOR", d.text_color),
            center_color=env_str("RUEDA_CENTER_COLOR", d.center_color),
            font_family=env_str("RUEDA_FONT_FAMILY", d.font_family),
            font_divisor=env_float("RUEDA_FONT_DIVISOR", d.font_divisor, min_value=4.0, max_value=400.0),
        )

    def font_spec(self, base_radius: float) -> str:
        """'<radio/divisor>px <familia>' con el float completo (sin redondeo)."""
        return f"{_px(base_radius / self.font_divisor)}px {self.font_family}"

    def wedge_options(self, color: str) -> DrawOptions:
        return DrawOptions(fill_style=color, line_width=self.line_width, stroke_style=self.stroke)

    def text_options(self, base_radius: float, label_radius: float) -> DrawTextOptions:
        return DrawTextOptions(
            fill_style=self.text_color,
            font=self.font_spec(base_radius),
            label_radius=label_radius,
        )


class Ring(str, Enum):
    OUTER = "outer"    # nivel 3 (hojas)
    MIDDLE = "middle"  # nivel 2
    INNER = "inner"    # nivel 1 (categorías)


@dataclass(frozen=True)
class Wedge:
    ring: Ring
    arc: Arc
    color: str
    label: str
    label_radius: float


@dataclass(frozen=True)
class WheelPlan:
    circle: Circle
    wedges: tuple[Wedge, ...]
    center: Disk

    def ring(self, ring: Ring) -> list[Wedge]:
        return [w for w in self.wedges if w.ring is ring]


class _Totals(NamedTuple):
    d2: int
    d3: int


class _Cursor(NamedTuple):
    """Índices globales ya consumidos (nivel 2 y nivel 3)."""

    d2: int = 0
    d3: int = 0


def _plan_subcategory(
    node: Node, color: str, cursor: _Cursor, totals: _Totals, circle: Circle, style: WheelStyle
) -> tuple[list[Wedge], _Cursor]:
    out: list[Wedge] = []
    leaf_label_r = circle.radius * style.leaf_label_ratio
    for i, leaf in enumerate(node.children):
        arc = Arc.from_circle(cursor.d3 + i, totals.d3, circle)
        out.append(Wedge(Ring.OUTER, arc, color, leaf.name, leaf_label_r))

    middle = circle.scale(style.middle_scale)
    arc = Arc.from_circle(cursor.d2, totals.d2, middle)
    out.append(Wedge(Ring.MIDDLE, arc, color, node.name, middle.radius * style.middle_label_ratio))

    return out, _Cursor(d2=cursor.d2 + 1, d3=cursor.d3 + len(node.children))


def _plan_category(
    node: Node, color: str, cursor: _Cursor, totals: _Totals, circle: Circle, style: WheelStyle
) -> tuple[list[Wedge], _Cursor]:
    out: list[Wedge] = []
    first_d3 = cursor.d3
    for sub in node.children:
        sub_wedges, cursor = _plan_subcategory(sub, color, cursor, totals, circle, style)
        out.extend(sub_wedges)

    # Misma extensión angular que sus hojas, pero sobre el círculo interno.
    inner = circle.scale(style.inner_scale)
    arc = Arc.join(
        Arc.from_circle(first_d3, totals.d3, inner),
        Arc.from_circle(cursor.d3 - 1, totals.d3, inner),
    )
    out.append(Wedge(Ring.INNER, arc, color, node.name, inner.radius * style.inner_label_ratio))
    return out, cursor


def plan_wheel(
    root: Node,
    circle: Circle,
    *,
    style: Optional[WheelStyle] = None,
    palette: Sequence[str] = COLOR_PALETTE,
) -> WheelPlan:
    """Calcula todas las porciones de la rueda, en orden de dibujo.

    Raises:
        MalformedHierarchyError: si el árbol no tiene exactamente 3 niveles.
    """
    validate_wheel_hierarchy(root)
    style = style or WheelStyle()
    totals = _Totals(d2=len(root.nodes_at_depth(2)), d3=len(root.nodes_at_depth(3)))
    colors = ColorCycle(palette)

    wedges: list[Wedge] = []
    cursor = _Cursor()
    for category in root.children:
        cat_wedges, cursor = _plan_category(category, colors.next(), cursor, totals, circle, style)
        wedges.extend(cat_wedges)

    return WheelPlan(
        circle=circle,
        wedges=tuple(wedges),
        center=Disk(circle.scale(style.center_scale)),
    )


def draw_plan(plan: WheelPlan, surface: Surface, *, style: Optional[WheelStyle] = None) -> None:
    style = style or WheelStyle()
    base_r = plan.circle.radius
    for w in plan.wedges:
        w.arc.draw(style.wedge_options(w.color), surface)
        w.arc.draw_text(w.label, style.text_options(base_r, w.label_radius), surface)

    plan.center.draw(DrawOptions(fill_style=style.center_color), surface)


def make_wheel(
    options: WheelOptions,
    surface: Surface,
    root: Node,
    *,
    style: Optional[WheelStyle] = None,
    palette: Sequence[str] = COLOR_PALETTE,
) -> WheelPlan:
    """Dimensiona la superficie, calcula el plan y lo dibuja."""
    style = style or WheelStyle()
    plan = plan_wheel(root, options.as_circle(), style=style, palette=palette)
    surface.resize(options.width, options.height)
    draw_plan(plan, surface, style=style)
    log.info(
        "Rueda dibujada: %sx%s r=%.1f, %d porciones (%d hojas)",
        options.width,
        options.height,
        options.radius,
        len(plan.wedges),
        len(plan.ring(Ring.OUTER)),
    )
    return plan


def render_wheel(
    width: int,
    height: int,
    hierarchy: Node,
    surface: Surface,
    *,
    style: Optional[WheelStyle] = None,
    palette: Sequence[str] = COLOR_PALETTE,
) -> WheelPlan:
    """Punto de entrada: círculo base centrado con radio 0.4 * min(width, height).

    Cualquier falla (jerarquía, geometría, superficie) se propaga tal cual.
    """
    options = WheelOptions.from_size(width, height)
    return make_wheel(options, surface, hierarchy, style=style, palette=palette)
