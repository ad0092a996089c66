# File: rueda/app.py
# Project: RuedaEmociones (REM)
# Version: 0.4.1
# Status: stable
# Date: 2026-10-16
# Purpose: Entry-point CLI: dibuja la rueda y la exporta a PNG/SVG.
# Notes: Defaults desde rueda_settings.json / env (RUEDA_*), los flags ganan.
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rueda.core.emotions import build_emotion_tree
from rueda.core.serialization import load_taxonomy, save_taxonomy
from rueda.core.settings import apply_project_settings, env_int
from rueda.core.version import APP_SHORT, APP_VERSION, DEFAULT_SCALE, DEFAULT_SIZE_PX
from rueda.utils.errors import RuedaError
from rueda.utils.log import level_from_env, setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rueda",
        description=f"{APP_SHORT}: Rueda de emociones (3 niveles) -> PNG/SVG.",
    )
    ap.add_argument("--out", default="rueda.png", help="Archivo de salida (.png o .svg)")
    ap.add_argument("--width", type=int, default=None, help="Ancho en px (default: RUEDA_WIDTH o 1200)")
    ap.add_argument("--height", type=int, default=None, help="Alto en px (default: RUEDA_HEIGHT o 1200)")
    ap.add_argument("--scale", type=int, default=None, help="Sobre-muestreo entero (default: RUEDA_SCALE o 1)")
    ap.add_argument("--background", default=None, help="Color de fondo PNG (default: transparente)")
    ap.add_argument("--taxonomy", default=None, help="Taxonomía JSON (default: emociones incluidas)")
    ap.add_argument(
        "--dump-taxonomy",
        default=None,
        metavar="PATH",
        help="Guarda la taxonomía incluida como JSON y termina",
    )
    ap.add_argument("--log-dir", default="logs", help="Carpeta para rueda.log ('' = solo consola)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Logging DEBUG")
    ap.add_argument("--version", action="version", version=f"{APP_SHORT} {APP_VERSION}")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Project-level defaults (repo-local): rueda_settings.json
    applied = apply_project_settings(prefer_env=True)
    level = logging.DEBUG if args.verbose else level_from_env()
    setup_logging(args.log_dir or None, level=level)
    if applied:
        log.debug("Settings de proyecto: %s", applied)

    if args.dump_taxonomy:
        try:
            p = save_taxonomy(build_emotion_tree(), args.dump_taxonomy)
        except RuedaError as e:
            log.error("%s", e)
            return 1
        log.info("Taxonomía guardada en %s", p)
        return 0

    width = args.width if args.width is not None else env_int("RUEDA_WIDTH", DEFAULT_SIZE_PX[0], min_value=16)
    height = args.height if args.height is not None else env_int("RUEDA_HEIGHT", DEFAULT_SIZE_PX[1], min_value=16)
    scale = args.scale if args.scale is not None else env_int("RUEDA_SCALE", DEFAULT_SCALE, min_value=1, max_value=8)
    if width <= 0 or height <= 0 or scale < 1:
        log.error("Tamaño inválido: %sx%s scale=%s", width, height, scale)
        return 2

    # Import perezoso: Qt solo hace falta para dibujar.
    from rueda.render.export import export_wheel

    try:
        root = load_taxonomy(args.taxonomy) if args.taxonomy else build_emotion_tree()
        out = export_wheel(
            Path(args.out).expanduser(),
            root,
            width=width,
            height=height,
            scale=scale,
            background=args.background,
        )
    except RuedaError as e:
        log.error("No se pudo generar la rueda: %s", e)
        return 1

    log.info("%s v%s: rueda lista en %s", APP_SHORT, APP_VERSION, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
