# File: rueda/utils/errors.py
# Project: RuedaEmociones (REM)
# Version: 0.2.0
# Status: stable
# Date: 2026-10-12
# Purpose: Errores tipados del proyecto.
# Notes: Todo fallo de render termina en una de estas clases (sin reintentos).
from __future__ import annotations


class RuedaError(Exception):
    """Error base del proyecto."""


class RuedaValidationError(RuedaError):
    """Error de validación (input/archivo/estructura)."""


class RuedaIOError(RuedaError):
    """Error de E/S (lectura/escritura)."""


class RuedaSchemaError(RuedaValidationError):
    """Error de esquema (taxonomía JSON) o incompatibilidad de versión."""


class MalformedHierarchyError(RuedaValidationError):
    """La jerarquía no tiene exactamente tres niveles bajo la raíz."""


class GeometryError(RuedaValidationError):
    """Valores geométricos imposibles (radio <= 0, ángulos invertidos, índices fuera de rango)."""


class GeometryMismatchError(GeometryError):
    """Se intentó unir arcos de círculos distintos (radio o centro diferente)."""


class SurfaceError(RuedaError):
    """Una primitiva de la superficie de dibujo falló (color/fuente inválidos, painter inactivo)."""
