"""RuedaEmociones: rueda de emociones (tres niveles) dibujada sobre un lienzo 2D."""

from __future__ import annotations

from rueda.core.version import APP_VERSION as __version__
