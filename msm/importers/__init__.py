"""Importers building state machines from textual descriptions."""

from .yaml_importer import YAMLImporter

__all__ = ["YAMLImporter"]
