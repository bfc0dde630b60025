"""Presentation layer — Rich terminal views and JSON/YAML serialisation."""
