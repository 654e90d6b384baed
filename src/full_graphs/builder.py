"""
Graph Builder Module
====================

This module turns a flat edge sequence ``[s0, t0, s1, t1, ...]`` into a
NetworkX graph, checking that every endpoint is a valid vertex index.
"""

import logging
from typing import Any, Dict, Optional, Sequence, Union

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from .errors import IndexOutOfRange, InvalidArgument

logger = logging.getLogger(__name__)


def _as_edge_array(edges: Union[Sequence[int], NDArray[np.int64]]) -> NDArray[np.int64]:
    """Coerce ``edges`` to a flat integer array of even length."""
    array = np.asarray(edges)
    if array.size == 0:
        return np.empty(0, dtype=np.int64)
    if array.ndim != 1:
        raise InvalidArgument(f"Edge sequence must be flat, got shape {array.shape}")
    if not np.issubdtype(array.dtype, np.integer):
        raise InvalidArgument(f"Edge sequence must hold integers, got {array.dtype}")
    if array.size % 2 != 0:
        raise InvalidArgument(
            f"Edge sequence must have even length, got {array.size} values"
        )
    return array


def build_graph(
    edges: Union[Sequence[int], NDArray[np.int64]],
    n: int,
    directed: bool = False,
    params: Optional[Dict[str, Any]] = None,
) -> nx.Graph:
    """
    Build a graph on vertices ``0..n-1`` from a flat edge sequence.

    Parameters
    ----------
    edges : sequence of int
        Flattened edge list, two endpoints per edge
    n : int
        Number of vertices
    directed : bool, optional
        Build an ``nx.DiGraph`` instead of an ``nx.Graph`` (default: False)
    params : Dict[str, Any], optional
        Generation parameters, stored in ``G.graph['params']``

    Returns
    -------
    nx.Graph
        Graph (or DiGraph) with nodes inserted in ascending order and
        edges inserted in sequence order

    Raises
    ------
    InvalidArgument
        If ``n`` is negative or ``edges`` is malformed
    IndexOutOfRange
        If an endpoint lies outside ``[0, n)``

    Examples
    --------
    >>> G = build_graph([0, 1, 1, 2], 3)
    >>> sorted(G.edges())
    [(0, 1), (1, 2)]
    >>> build_graph([1, 0], 2, directed=True).is_directed()
    True
    """
    if n < 0:
        logger.error(f"Invalid number of vertices: {n}")
        raise InvalidArgument(f"Number of vertices must be non-negative, got {n}")

    array = _as_edge_array(edges)

    bad = np.flatnonzero((array < 0) | (array >= n))
    if bad.size > 0:
        position = int(bad[0])
        value = int(array[position])
        logger.error(f"Edge endpoint {value} at position {position} not in [0, {n})")
        raise IndexOutOfRange(
            f"Vertex index {value} at position {position} out of range [0, {n})",
            position=position,
            value=value,
        )

    G = nx.DiGraph() if directed else nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(array.reshape(-1, 2).tolist())

    if params is not None:
        G.graph["params"] = dict(params)

    return G


__all__ = ["build_graph"]
