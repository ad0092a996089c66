"""Geometry helpers.

This package is intentionally small and dependency-free: plain values
(points, circles, angular slivers) with no knowledge of Qt.
"""

from __future__ import annotations
