"""
Full Graph Generator
====================

This module generates the full graph on ``n`` vertices: every edge allowed
by the directedness and loop settings is present.

A full graph here is more general than the complete graph K_n of graph
theory. It can be K_n, a directed version of K_n, or either of those with
a loop on every vertex; in every case K_n is a subgraph of its undirected
version.

Edge order is row-major: by source ``i``, then by target ``j``. For
directed graphs without loops the targets below ``i`` come before those
above it.
"""

import logging

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from ..builder import build_graph
from ..edges import EdgeBuffer
from .common import check_vertex_count, full_edge_count, row_ranges

logger = logging.getLogger(__name__)


def _fill_full(buf: EdgeBuffer, n: int, directed: bool, loops: bool) -> None:
    for i in range(n):
        for targets in row_ranges(i, n, directed, loops):
            buf.append_row(i, targets)


def full_edges(n: int, directed: bool = False, loops: bool = False) -> NDArray[np.int64]:
    """
    Edge sequence of the full graph.

    Parameters
    ----------
    n : int
        Number of vertices
    directed : bool, optional
        Whether ``(i, j)`` and ``(j, i)`` are distinct edges (default: False)
    loops : bool, optional
        Whether to include a loop on every vertex (default: False)

    Returns
    -------
    NDArray[np.int64]
        Flat sequence ``[s0, t0, s1, t1, ...]`` of length ``2 * |E|``

    Raises
    ------
    InvalidArgument
        If ``n`` is negative
    AllocationFailure
        If the edge sequence does not fit the buffer limit

    Examples
    --------
    >>> full_edges(3, directed=True).reshape(-1, 2).tolist()
    [[0, 1], [0, 2], [1, 0], [1, 2], [2, 0], [2, 1]]
    >>> full_edges(3, loops=True).reshape(-1, 2).tolist()
    [[0, 0], [0, 1], [0, 2], [1, 1], [1, 2], [2, 2]]
    """
    n = check_vertex_count(n)
    m = full_edge_count(n, directed, loops)

    with EdgeBuffer(2 * m) as buf:
        _fill_full(buf, n, directed, loops)
        return buf.to_array()


def full_graph(n: int, directed: bool = False, loops: bool = False) -> nx.Graph:
    """
    Generate a full graph.

    Parameters
    ----------
    n : int
        Number of vertices
    directed : bool, optional
        Create an ``nx.DiGraph`` (default: False)
    loops : bool, optional
        Include a loop on every vertex (default: False)

    Returns
    -------
    nx.Graph
        Graph with ``n`` vertices and ``n**2``, ``n*(n-1)``,
        ``n*(n+1)/2`` or ``n*(n-1)/2`` edges depending on the flags.
        Generation parameters are stored in ``G.graph['params']``.

    Raises
    ------
    InvalidArgument
        If ``n`` is negative
    AllocationFailure
        If the edge sequence does not fit the buffer limit

    Examples
    --------
    >>> G = full_graph(5)
    >>> G.number_of_edges()
    10
    >>> full_graph(4, directed=True, loops=True).number_of_edges()
    16

    Notes
    -----
    Time complexity is O(|V| + |E|) = O(|V|^2). The edge buffer is
    reserved once at its exact final size and released before returning,
    also when building the graph fails.
    """
    n = check_vertex_count(n)
    m = full_edge_count(n, directed, loops)

    logger.info(f"Generating full graph: n={n}, directed={directed}, loops={loops}, m={m}")

    with EdgeBuffer(2 * m) as buf:
        _fill_full(buf, n, directed, loops)
        G = build_graph(
            buf.view(),
            n,
            directed=directed,
            params={"generator": "full", "n": n, "directed": directed, "loops": loops},
        )

    logger.info(
        f"Generated full graph with {G.number_of_nodes()} nodes, "
        f"{G.number_of_edges()} edges"
    )
    return G
