"""
Corpus graph construction and poem generation
"""

from .builder import build_affinity_graph
from .generator import GraphPoet

__all__ = [
    'build_affinity_graph',
    'GraphPoet'
]
