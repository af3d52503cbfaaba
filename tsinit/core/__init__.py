"""Core tsconfig model and generation logic."""
