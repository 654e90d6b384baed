"""
Full Graph Generators
=====================

Deterministic constructors for two families of regular graphs, used as
building blocks and test fixtures for graph-processing code:

1. The full graph: every allowed pair of vertices connected, with
   independent control over directedness and self-loops
2. The full citation graph: vertex i connected to every vertex j < i

Modules
-------
generators
    ``full_graph`` and ``full_citation_graph`` plus their edge sequences
edges
    ``EdgeBuffer``, the scoped integer buffer edges are collected in
builder
    ``build_graph``, turning a flat edge sequence into a NetworkX graph
errors
    Error types
config
    Configuration constants and YAML loading
"""

__version__ = "0.1.0"

from . import config
from .errors import (
    FullGraphError,
    InvalidArgument,
    IndexOutOfRange,
    AllocationFailure,
)
from .edges import EdgeBuffer
from .builder import build_graph
from .generators import (
    full_graph,
    full_edges,
    full_citation_graph,
    full_citation_edges,
)

__all__ = [
    "config",
    "FullGraphError",
    "InvalidArgument",
    "IndexOutOfRange",
    "AllocationFailure",
    "EdgeBuffer",
    "build_graph",
    "full_graph",
    "full_edges",
    "full_citation_graph",
    "full_citation_edges",
    "__version__",
]
