"""GraphPoet: word-affinity graph poetry.

A corpus is folded into a weighted directed graph of adjacent words; input
sentences are turned into poems by inserting the best two-hop bridge word
between each pair of neighbouring words.
"""

__version__ = "0.1.0"

from .core.exceptions import GraphPoetError
from .poet.generator import GraphPoet

__all__ = [
    "GraphPoet",
    "GraphPoetError",
]
