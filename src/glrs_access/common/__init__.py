"""Shared helpers: logging and schema base classes."""
