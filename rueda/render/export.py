# File: rueda/render/export.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-16
# Purpose: Export de la rueda a PNG (QImage) o SVG (QSvgGenerator).
# Notes:
# - `scale` sobre-muestrea (ancho/alto * scale) para salidas nítidas en pantallas HiDPI.
# - SVG: escritura atómica (tmp + replace); un render fallido no deja archivo.
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtGui import QImage

from rueda.core.colors import COLOR_PALETTE
from rueda.core.emotions import build_emotion_tree
from rueda.core.models import Node
from rueda.render.qt_surface import QPainterSurface, ensure_qt_app, image_device, svg_device
from rueda.render.wheel import WheelPlan, WheelStyle, render_wheel
from rueda.utils.errors import RuedaIOError, RuedaValidationError

log = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".png", ".svg")


def export_wheel(
    out_path: str | Path,
    root: Optional[Node] = None,
    *,
    width: int,
    height: int,
    scale: int = 1,
    background: Optional[str] = None,
    style: Optional[WheelStyle] = None,
    palette: Sequence[str] = COLOR_PALETTE,
) -> Path:
    """Dibuja la rueda y la guarda en `out_path` (.png o .svg).

    - `root=None` usa la taxonomía de emociones incluida.
    - Errores de jerarquía/geometría/superficie se propagan; fallas de escritura -> RuedaIOError.
    """
    p = Path(out_path)
    suffix = p.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise RuedaValidationError(f"Formato no soportado: {suffix!r} (usar .png o .svg)")
    if int(scale) < 1:
        raise RuedaValidationError(f"scale debe ser >= 1: {scale!r}")

    root = root if root is not None else build_emotion_tree()
    style = style or WheelStyle.from_env()
    w, h = int(width) * int(scale), int(height) * int(scale)

    ensure_qt_app()
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuedaIOError(f"No se pudo crear carpeta de salida: {p.parent}") from e

    if suffix == ".svg":
        # QSvgGenerator escribe al cerrar el painter, aunque el dibujo haya fallado:
        # se renderiza a un .tmp y solo un render completo reemplaza `p`.
        tmp = p.with_suffix(p.suffix + ".tmp")
        try:
            _render(svg_device(tmp), w, h, root, style, palette)
            tmp.replace(p)
        except OSError as e:
            raise RuedaIOError(f"No se pudo guardar SVG: {p}") from e
        finally:
            tmp.unlink(missing_ok=True)
    else:
        img = _render(image_device(background), w, h, root, style, palette)[1]
        if not isinstance(img, QImage) or not img.save(str(p)):
            raise RuedaIOError(f"No se pudo guardar PNG: {p}")

    log.info("Rueda exportada: %s (%sx%s)", p, w, h)
    return p


def _render(factory, w: int, h: int, root: Node, style: WheelStyle, palette: Sequence[str]) -> tuple[WheelPlan, object]:
    with QPainterSurface(factory) as surface:
        plan = render_wheel(w, h, root, surface, style=style, palette=palette)
    return plan, surface.device
