# File: rueda/geom/shapes.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-14
# Purpose: Primitivas geométricas de la rueda (Point, Circle, Arc, Disk).
# Notes:
# - Valores inmutables: toda transformación devuelve una instancia nueva.
# - Ángulos en radianes, convención canvas (eje y hacia abajo): ángulo creciente = horario.
# - Arc es una porción de torta (se rellena desde el centro), no un anillo.
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from rueda.render import draw as _draw
from rueda.utils.errors import GeometryError, GeometryMismatchError

if TYPE_CHECKING:
    from rueda.render.draw import DrawOptions, DrawTextOptions
    from rueda.render.surface import Surface

# 12 en punto: la primera porción arranca arriba.
TOP_ANGLE = -0.5 * math.pi
FULL_TURN = 2.0 * math.pi


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, angle: float, distance: float) -> "Point":
        """Punto a `distance` del actual en la dirección `angle`."""
        return Point(self.x + distance * math.cos(angle), self.y + distance * math.sin(angle))


@dataclass(frozen=True)
class Circle:
    radius: float
    center: Point

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise GeometryError(f"Circle.radius debe ser > 0: {self.radius!r}")

    def scale(self, factor: float) -> "Circle":
        """Mismo centro, radio multiplicado por `factor` (> 0)."""
        if not factor > 0:
            raise GeometryError(f"Factor de escala inválido: {factor!r}")
        return replace(self, radius=self.radius * factor)


@dataclass(frozen=True)
class Arc:
    """Porción (sliver) de un círculo entre dos ángulos."""

    start_angle: float
    end_angle: float
    radius: float
    center: Point

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise GeometryError(f"Arc.radius debe ser > 0: {self.radius!r}")
        if not self.start_angle < self.end_angle:
            raise GeometryError(
                f"Arc inválido: start_angle={self.start_angle!r} >= end_angle={self.end_angle!r}"
            )

    @staticmethod
    def make_sliver(index: int, total: int, radius: float, center: Point) -> "Arc":
        """Porción `index` de `total` divisiones iguales de la vuelta completa.

        La división 0 empieza a las 12 en punto (-π/2) y avanza en sentido horario.
        """
        if total <= 0:
            raise GeometryError(f"total debe ser > 0: {total!r}")
        if not 0 <= index < total:
            raise GeometryError(f"index fuera de rango: {index!r} (total={total})")
        step = math.pi * (2.0 / total)
        return Arc(
            start_angle=step * index + TOP_ANGLE,
            end_angle=step * (index + 1) + TOP_ANGLE,
            radius=radius,
            center=center,
        )

    @staticmethod
    def from_circle(index: int, total: int, circle: Circle) -> "Arc":
        return Arc.make_sliver(index, total, circle.radius, circle.center)

    @staticmethod
    def join(a: "Arc", b: "Arc") -> "Arc":
        """Une dos porciones del mismo círculo en una sola que cubre ambas.

        Raises:
            GeometryMismatchError: si radio o centro no coinciden.
        """
        if a.radius != b.radius or a.center != b.center:
            raise GeometryMismatchError(
                f"No se pueden unir arcos de círculos distintos: "
                f"r={a.radius!r}/{b.radius!r} c={a.center!r}/{b.center!r}"
            )
        return Arc(
            start_angle=min(a.start_angle, b.start_angle),
            end_angle=max(a.end_angle, b.end_angle),
            radius=a.radius,
            center=a.center,
        )

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def bisector(self) -> float:
        """Ángulo medio; define dónde y cómo se orienta la etiqueta."""
        return (self.start_angle + self.end_angle) / 2.0

    def scale(self, factor: float) -> "Arc":
        if not factor > 0:
            raise GeometryError(f"Factor de escala inválido: {factor!r}")
        return replace(self, radius=self.radius * factor)

    def draw(self, options: "DrawOptions", surface: "Surface") -> "Arc":
        _draw.draw_wedge(self, options, surface)
        return self

    def draw_text(self, text: str, options: "DrawTextOptions", surface: "Surface") -> "Arc":
        _draw.draw_label(self, text, options, surface)
        return self


@dataclass(frozen=True)
class Disk:
    """Círculo relleno sin borde (tapa el vértice de las porciones en el centro)."""

    circle: Circle

    @property
    def center(self) -> Point:
        return self.circle.center

    @property
    def radius(self) -> float:
        return self.circle.radius

    def draw(self, options: "DrawOptions", surface: "Surface") -> "Disk":
        _draw.draw_disk(self, options, surface)
        return self

    def draw_text(self, text: str, options: "DrawTextOptions", surface: "Surface") -> "Disk":
        _draw.draw_centered_text(self.center, text, options, surface)
        return self
