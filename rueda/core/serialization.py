# File: rueda/core/serialization.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-13
# Purpose: Carga/guardado de taxonomías (JSON legible).
# Notes: Formato {"schema_version": 1, "root": {"name": ..., "children": [...]}}.
from __future__ import annotations

import json
from pathlib import Path

from rueda.core.models import Node
from rueda.core.version import SCHEMA_VERSION
from rueda.utils.errors import RuedaIOError, RuedaSchemaError, RuedaValidationError


def taxonomy_to_dict(root: Node) -> dict:
    return {"schema_version": SCHEMA_VERSION, "root": root.to_dict()}


def taxonomy_from_dict(data: object) -> Node:
    if not isinstance(data, dict):
        raise RuedaSchemaError("Estructura de taxonomía inválida: raíz no es objeto JSON")

    if "schema_version" not in data or "root" not in data:
        raise RuedaSchemaError("Taxonomía inválida: faltan claves requeridas (schema_version, root)")

    try:
        version = int(data["schema_version"])
    except (TypeError, ValueError) as e:
        raise RuedaSchemaError(f"schema_version inválido: {data['schema_version']!r}") from e
    if version != SCHEMA_VERSION:
        raise RuedaSchemaError(
            f"Taxonomía incompatible: schema_version={version} (se espera {SCHEMA_VERSION})"
        )
    return Node.from_dict(data["root"])


def save_taxonomy(root: Node, path: str | Path) -> Path:
    """Guarda la taxonomía en JSON.

    - Escribe de forma atómica (tmp + replace) para evitar archivos corruptos.
    """
    p = Path(path)
    if p.suffix.lower() != ".json":
        p = p.with_suffix(".json")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        txt = json.dumps(taxonomy_to_dict(root), ensure_ascii=False, indent=2)
        tmp = p.with_suffix(p.suffix + ".tmp")
        tmp.write_text(txt + "\n", encoding="utf-8")
        tmp.replace(p)
        return p
    except OSError as e:
        raise RuedaIOError("No se pudo guardar la taxonomía: {}".format(p)) from e


def load_taxonomy(path: str | Path) -> Node:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise RuedaIOError("No se pudo leer la taxonomía: {}".format(p)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RuedaValidationError(
            "Taxonomía inválida (JSON malformado): {} (línea {}, columna {})".format(p, e.lineno, e.colno)
        ) from e

    return taxonomy_from_dict(data)
