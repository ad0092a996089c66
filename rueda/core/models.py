# File: rueda/core/models.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-13
# Purpose: Modelo de la jerarquía (árbol de nodos con nombre) que alimenta la rueda.
# Notes:
# - Árbol inmutable: children es una tupla, el orden es el de izquierda a derecha.
# - La rueda necesita exactamente 3 niveles bajo la raíz (ver validate_wheel_hierarchy).
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from rueda.utils.errors import MalformedHierarchyError, RuedaSchemaError

WHEEL_DEPTH = 3


@dataclass(frozen=True)
class Node:
    name: str
    children: tuple["Node", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def nodes_at_depth(self, depth: int) -> list["Node"]:
        """Todos los nodos a `depth` niveles de este, en orden estable (izq -> der).

        depth=0 devuelve [self].
        """
        if depth < 0:
            raise ValueError(f"depth inválido: {depth!r}")
        level: list[Node] = [self]
        for _ in range(depth):
            level = [c for n in level for c in n.children]
        return level

    def iter_paths(self, prefix: tuple["Node", ...] = ()) -> Iterator[tuple["Node", ...]]:
        """Caminos raíz -> hoja (la raíz incluida)."""
        path = prefix + (self,)
        if self.is_leaf:
            yield path
            return
        for c in self.children:
            yield from c.iter_paths(path)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"name": str(self.name)}
        if self.children:
            d["children"] = [c.to_dict() for c in self.children]
        return d

    @staticmethod
    def from_dict(d: Any, *, where: str = "root") -> "Node":
        if not isinstance(d, dict):
            raise RuedaSchemaError(f"Nodo inválido en {where}: se esperaba objeto")
        name = d.get("name")
        if not isinstance(name, str) or not name.strip():
            raise RuedaSchemaError(f"Nodo inválido en {where}: falta 'name'")
        raw_children = d.get("children", [])
        if not isinstance(raw_children, list):
            raise RuedaSchemaError(f"Nodo {name!r}: children inválido (se espera lista)")
        children = tuple(
            Node.from_dict(c, where=f"{where}/{name}[{i}]") for i, c in enumerate(raw_children)
        )
        return Node(name=name.strip(), children=children)


def validate_wheel_hierarchy(root: Node) -> None:
    """Falla rápido si el árbol no tiene exactamente 3 niveles en cada rama.

    Raises:
        MalformedHierarchyError: raíz sin hijos, o alguna hoja a profundidad != 3.
    """
    if root.is_leaf:
        raise MalformedHierarchyError(f"La raíz {root.name!r} no tiene categorías")
    for path in root.iter_paths():
        depth = len(path) - 1
        if depth != WHEEL_DEPTH:
            names = " / ".join(n.name for n in path[1:])
            raise MalformedHierarchyError(
                f"Rama con profundidad {depth} (se esperan {WHEEL_DEPTH}): {names}"
            )
