"""
Generators Module
=================

This module provides the deterministic full graph constructors.

Submodules
----------
full
    Full graph, with independent control over directedness and loops
citation
    Full citation graph (vertex i connected to every j < i)
common
    Vertex-count validation, edge counts and row bounds
"""

from .full import full_edges, full_graph
from .citation import full_citation_edges, full_citation_graph
from .common import (
    check_vertex_count,
    full_edge_count,
    citation_edge_count,
)

__all__ = [
    # Full graph
    "full_graph",
    "full_edges",
    # Full citation graph
    "full_citation_graph",
    "full_citation_edges",
    # Helpers
    "check_vertex_count",
    "full_edge_count",
    "citation_edge_count",
]
