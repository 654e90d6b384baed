"""
Shared helpers for the full graph generators.

Holds the vertex-count validation both generators apply, the closed-form
edge counts used to size buffers exactly, and the table of inner-loop
bounds that fixes the edge order of the full graph.
"""

import logging
import numbers
from typing import Callable, Dict, Tuple

from ..errors import InvalidArgument

logger = logging.getLogger(__name__)


def check_vertex_count(n: int) -> int:
    """
    Validate a vertex count and return it as a plain ``int``.

    Raises
    ------
    InvalidArgument
        If ``n`` is not an integer or is negative
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        logger.error(f"Number of vertices must be an integer, got {n!r}")
        raise InvalidArgument(f"Number of vertices must be an integer, got {n!r}")
    if n < 0:
        logger.error(f"Invalid number of vertices: {n}")
        raise InvalidArgument(f"Number of vertices must be non-negative, got {n}")
    return int(n)


def full_edge_count(n: int, directed: bool, loops: bool) -> int:
    """
    Number of edges in the full graph on ``n`` vertices.

    >>> [full_edge_count(4, d, l) for d in (True, False) for l in (True, False)]
    [16, 12, 10, 6]
    """
    if directed:
        return n * n if loops else n * (n - 1)
    return n * (n + 1) // 2 if loops else n * (n - 1) // 2


def citation_edge_count(n: int) -> int:
    """Number of edges in the full citation graph on ``n`` vertices."""
    return n * (n - 1) // 2


# Inner index ranges per outer index i, keyed by (directed, loops).
# The directed loop-free row is split around the diagonal, so the
# targets below i come before the targets above it.
RowBounds = Callable[[int, int], Tuple[range, ...]]

ROW_BOUNDS: Dict[Tuple[bool, bool], RowBounds] = {
    (True, True): lambda i, n: (range(0, n),),
    (True, False): lambda i, n: (range(0, i), range(i + 1, n)),
    (False, True): lambda i, n: (range(i, n),),
    (False, False): lambda i, n: (range(i + 1, n),),
}


def row_ranges(i: int, n: int, directed: bool, loops: bool) -> Tuple[range, ...]:
    """
    Inner index ranges visited for outer index ``i``.

    >>> row_ranges(1, 3, directed=True, loops=False)
    (range(0, 1), range(2, 3))
    """
    return ROW_BOUNDS[(bool(directed), bool(loops))](i, n)


__all__ = [
    "check_vertex_count",
    "full_edge_count",
    "citation_edge_count",
    "row_ranges",
    "ROW_BOUNDS",
]
