# File: rueda/core/settings.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-15
# Purpose: Project settings (rueda_settings.json) -> variables de entorno + lectura tipada de env.
# Notes:
# - No depende de Qt.
# - Los consumidores (WheelStyle, CLI, logging) leen env vars; este módulo solo las completa.
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Permite defaults reproducibles por proyecto (no por usuario) sin tocar el código.
# Archivo esperado: rueda_settings.json en la raíz del repo/proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rueda_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rueda_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    return data if isinstance(data, dict) else {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


# clave JSON -> (env var, tipo, min, max)
_NUMERIC_KEYS: tuple[tuple[str, str, type, float, float], ...] = (
    ("wheel.width", "RUEDA_WIDTH", int, 16, 20000),
    ("wheel.height", "RUEDA_HEIGHT", int, 16, 20000),
    ("wheel.scale", "RUEDA_SCALE", int, 1, 8),
    ("style.line_width", "RUEDA_LINE_WIDTH", float, 0.1, 50.0),
    ("style.font_divisor", "RUEDA_FONT_DIVISOR", float, 4.0, 400.0),
)

_STRING_KEYS: tuple[tuple[str, str], ...] = (
    ("style.font_family", "RUEDA_FONT_FAMILY"),
    ("style.stroke", "RUEDA_STROKE"),
    ("style.text_color", "RUEDA_TEXT_COLOR"),
    ("style.center_color", "RUEDA_CENTER_COLOR"),
    ("logging.level", "RUEDA_LOG_LEVEL"),
)


def apply_project_settings(
    start: Path | None = None, *, logger: logging.Logger | None = None, prefer_env: bool = True
) -> Dict[str, Any]:
    """Carga rueda_settings.json (si existe) y aplica overrides vía variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.
    - Valores fuera de rango o de tipo incorrecto se ignoran.

    Devuelve un dict con los valores *aplicados desde JSON* (útil para logging/debug).
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    data = load_project_settings(start, logger=_log)
    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    for path, env, kind, lo, hi in _NUMERIC_KEYS:
        v = _deep_get(data, path)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            continue
        if kind is int and not float(v).is_integer():
            continue
        v = kind(v)
        if lo <= v <= hi:
            applied[path] = v
            _set_env(env, v)

    for path, env in _STRING_KEYS:
        v = _deep_get(data, path)
        if isinstance(v, str) and v.strip():
            applied[path] = v.strip()
            _set_env(env, v.strip())

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


# ------------------------------
# Lectura tipada de env vars
# ------------------------------

def env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.environ.get(name, "").strip()
    try:
        v = int(raw) if raw else int(default)
    except ValueError:
        log.warning("%s inválido (%r); se usa %s", name, raw, default)
        v = int(default)
    if min_value is not None:
        v = max(int(min_value), v)
    if max_value is not None:
        v = min(int(max_value), v)
    return v


def env_float(name: str, default: float, *, min_value: float | None = None, max_value: float | None = None) -> float:
    raw = os.environ.get(name, "").strip()
    try:
        v = float(raw) if raw else float(default)
    except ValueError:
        log.warning("%s inválido (%r); se usa %s", name, raw, default)
        v = float(default)
    if min_value is not None:
        v = max(float(min_value), v)
    if max_value is not None:
        v = min(float(max_value), v)
    return v


def env_str(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip()
    return raw or default
