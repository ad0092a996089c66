# File: rueda/core/colors.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-13
# Purpose: Paleta de categorías (un color por emoción núcleo, cíclica).
from __future__ import annotations

from typing import Sequence

from rueda.utils.errors import RuedaValidationError

COLOR_PALETTE: tuple[str, ...] = (
    "#ffd966",  # amarillo
    "#8fb8de",  # azul
    "#a8d08d",  # verde
    "#f4a582",  # coral
    "#c3a5d9",  # lila
    "#b7b7b7",  # gris
    "#f6c8de",  # rosa
    "#9fd8cb",  # turquesa
)

NEUTRAL = "white"


class ColorCycle:
    """Entrega colores de la paleta en orden, volviendo al inicio al agotarla."""

    def __init__(self, palette: Sequence[str] = COLOR_PALETTE) -> None:
        if not palette:
            raise RuedaValidationError("La paleta no puede estar vacía")
        self._palette = tuple(palette)
        self._idx = 0

    def next(self) -> str:
        color = self._palette[self._idx % len(self._palette)]
        self._idx += 1
        return color
