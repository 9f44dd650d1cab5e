"""
Exporters rendering state machines as text.

- DOTExporter writes Graphviz digraphs
- YAMLExporter writes documents readable by msm.importers.YAMLImporter
"""

from .base import Exporter
from .dot_exporter import DOTExporter, RankDir
from .yaml_exporter import YAMLExporter

__all__ = ["DOTExporter", "Exporter", "RankDir", "YAMLExporter"]
