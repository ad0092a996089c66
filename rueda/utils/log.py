# File: rueda/utils/log.py
# Project: RuedaEmociones (REM)
# Version: 0.2.0
# Status: stable
# Date: 2026-10-12
# Purpose: Logging centralizado (con archivo) y helpers.
# Notes: Nivel configurable vía RUEDA_LOG_LEVEL (ver rueda.core.settings).
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False


def level_from_env(default: int = logging.INFO) -> int:
    """Nivel de logging desde RUEDA_LOG_LEVEL (nombre o número)."""
    raw = os.environ.get("RUEDA_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    lvl = logging.getLevelName(raw.upper())
    return lvl if isinstance(lvl, int) else default


def setup_logging(log_dir: str | os.PathLike | None = "logs", level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - No lanza excepción si no puede escribir el archivo; cae a consola.
        - `log_dir=None` deja solo la consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Archivo
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / "rueda.log", encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except OSError as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True
