from .config import Config
from .exceptions import ConfigurationError, CorpusReadError, GraphPoetError, InvalidArgumentError
from .graph import Edge, EdgeGraph, Graph, VertexGraph, empty_graph

__all__ = [
    "Config",
    "ConfigurationError",
    "CorpusReadError",
    "Edge",
    "EdgeGraph",
    "Graph",
    "GraphPoetError",
    "InvalidArgumentError",
    "VertexGraph",
    "empty_graph",
]
