"""REM - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core models, render, CLI) and must not have side effects.
"""

APP_NAME = "RuedaEmociones"
APP_SHORT = "REM"

# App semantic version (must match patch notes / docs).
APP_VERSION = "0.4.2"
# Schema version of taxonomy JSON files.
# NOTE: must be int because `rueda.core.serialization` compares it as integer.
SCHEMA_VERSION = 1

# Defaults (in pixels)
# NOTE: keep these stable; changing impacts default exports.
DEFAULT_SIZE_PX = (1200, 1200)
DEFAULT_SCALE = 1
# Radius of the base circle relative to min(width, height).
DEFAULT_RADIUS_RATIO = 0.4
