"""
Full Citation Graph Generator
=============================

In the full citation graph vertex ``i`` cites every earlier vertex: the
edge ``i -> j`` is present if and only if ``j < i``. The result is acyclic.
Built undirected, the same pairs give the full graph without loops.
"""

import logging

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from ..builder import build_graph
from ..edges import EdgeBuffer
from .common import check_vertex_count, citation_edge_count

logger = logging.getLogger(__name__)


def _fill_citation(buf: EdgeBuffer, n: int) -> None:
    offset = 0
    for i in range(1, n):
        offset = buf.write_row(offset, i, range(i))


def full_citation_edges(n: int) -> NDArray[np.int64]:
    """
    Edge sequence of the full citation graph.

    Examples
    --------
    >>> full_citation_edges(4).reshape(-1, 2).tolist()
    [[1, 0], [2, 0], [2, 1], [3, 0], [3, 1], [3, 2]]
    """
    n = check_vertex_count(n)

    with EdgeBuffer(2 * citation_edge_count(n)) as buf:
        _fill_citation(buf, n)
        return buf.to_array()


def full_citation_graph(n: int, directed: bool = False) -> nx.Graph:
    """
    Generate a full citation graph.

    Parameters
    ----------
    n : int
        Number of vertices
    directed : bool, optional
        Create an ``nx.DiGraph`` with edges ``i -> j`` for ``j < i``
        (default: False, which gives the loop-free full graph)

    Returns
    -------
    nx.Graph
        Graph with ``n`` vertices and ``n*(n-1)/2`` edges

    Raises
    ------
    InvalidArgument
        If ``n`` is negative

    Examples
    --------
    >>> G = full_citation_graph(4, directed=True)
    >>> list(G.edges())
    [(1, 0), (2, 0), (2, 1), (3, 0), (3, 1), (3, 2)]
    >>> nx.is_directed_acyclic_graph(G)
    True
    """
    n = check_vertex_count(n)
    m = citation_edge_count(n)

    logger.info(f"Generating full citation graph: n={n}, directed={directed}, m={m}")

    # Exactly two slots per edge, filled in place by row offset
    with EdgeBuffer(2 * m) as buf:
        _fill_citation(buf, n)
        G = build_graph(
            buf.view(),
            n,
            directed=directed,
            params={"generator": "full_citation", "n": n, "directed": directed},
        )

    logger.info(
        f"Generated full citation graph with {G.number_of_nodes()} nodes, "
        f"{G.number_of_edges()} edges"
    )
    return G
