# visualization/__init__.py
from visualization.builder import VisualizationBuilder

__all__ = ['VisualizationBuilder']
