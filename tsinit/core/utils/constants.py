"""Project-wide constant definitions."""

__all__: list[str] = [
    "TSCONFIG_FILENAME",
    "CURRENT_DIR_NAME",
    "ES_TARGET",
    "DEFAULT_OUT_DIR",
]

# Output
TSCONFIG_FILENAME: str = "tsconfig.json"
CURRENT_DIR_NAME: str = "."  # Project name meaning "generate here"

# Compiler defaults
ES_TARGET: str = "es2022"
DEFAULT_OUT_DIR: str = "dist"
