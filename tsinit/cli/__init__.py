"""Command-line layer for tsconfig-init."""
