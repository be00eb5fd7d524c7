"""Kartao - personal kanban boards stored as JSON files."""

__version__ = "0.1.0"
