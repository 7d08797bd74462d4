"""
Bipartite graph data structure and algorithms based on maximum-cardinality matchings.
"""

from collections.abc import Sequence
import numpy as np
from .hopcroft_karp import HopcroftKarp

__all__ = ['BipartiteGraph', 'hopcroft_karp_matching', 'minimum_vertex_cover']


class BipartiteGraph:
    """
    Data structure representing a bipartite graph G = ((U, V), E),
    where 'U' and 'V' are the vertices in the left and right partition, respectively,
    and 'E' the edges.

    Vertices in 'U' and 'V' are assumed to be sequentially indexed: 0, 1, ...
    Duplicate edges are discarded.
    """
    def __init__(self, num_u: int, num_v: int, edges: Sequence[tuple[int, int]]):
        if num_u < 0 or num_v < 0:
            raise ValueError(f'number of vertices must be non-negative, received {num_u} and {num_v}')
        self.num_u = num_u
        self.num_v = num_v
        # construct adjacency maps
        self.adj_u = [[] for _ in range(num_u)]
        self.adj_v = [[] for _ in range(num_v)]
        for (u, v) in edges:
            if not 0 <= u < num_u:
                raise ValueError(f'left vertex index {u} out of range')
            if not 0 <= v < num_v:
                raise ValueError(f'right vertex index {v} out of range')
            if v not in self.adj_u[u]:
                self.adj_u[u].append(v)
            if u not in self.adj_v[v]:
                self.adj_v[v].append(u)

    @classmethod
    def from_biadjacency(cls, a):
        """
        Construct a bipartite graph from its biadjacency matrix 'a',
        with an edge (u, v) for each non-zero entry a[u, v].
        """
        a = np.asarray(a)
        if a.ndim != 2:
            raise ValueError(f'biadjacency matrix must be two-dimensional, received {a.ndim} dimensions')
        edges = [(int(u), int(v)) for (u, v) in zip(*np.nonzero(a))]
        return cls(a.shape[0], a.shape[1], edges)

    @property
    def num_edges(self) -> int:
        """
        Number of edges.
        """
        return sum(len(adj) for adj in self.adj_u)

    def edges(self) -> list[tuple[int, int]]:
        """
        List of all edges (u, v).
        """
        return [(u, v) for u in range(self.num_u) for v in self.adj_u[u]]


def hopcroft_karp_matching(graph: BipartiteGraph) -> list[tuple[int, int]]:
    """
    Find a maximum-cardinality matching of a bipartite graph,
    returned as list of matched edges (u, v).
    """
    hk = HopcroftKarp(graph.num_u, graph.num_v)
    hk.run(graph.adj_u)
    return hk.matched_pairs()


def minimum_vertex_cover(graph: BipartiteGraph):
    """
    Find a minimum vertex cover based on Kőnig's theorem.
    """
    # maximum matching
    hk = HopcroftKarp(graph.num_u, graph.num_v)
    hk.run(graph.adj_u)
    # vertices which are unmatched or connected to an unmatched vertex in 'U' by alternating paths
    u_visited = set()
    v_visited = set()
    for u in range(graph.num_u):
        if hk.matching_l2r[u] is None:
            _explore_alternating_paths(u, graph, hk.matching_l2r, hk.matching_r2l, u_visited, v_visited)
    u_cover = set(range(graph.num_u)) - u_visited
    v_cover = v_visited
    # number of vertices in minimum vertex cover must agree with
    # maximum-cardinality matching according to Kőnig's theorem
    assert len(u_cover) + len(v_cover) == hk.matching_size()
    return sorted(u_cover), sorted(v_cover)


def _explore_alternating_paths(u_start: int, graph: BipartiteGraph,
                               matching_l2r: Sequence, matching_r2l: Sequence,
                               u_visited: set, v_visited: set):
    """
    Explore alternating paths originating from 'u_start' by a depth-first search.
    """
    if u_start in u_visited:
        return
    u_visited.add(u_start)
    stack = [u_start]
    while stack:
        u = stack.pop()
        for v in graph.adj_u[u]:
            # traverse only unmatched edges from 'U' to 'V'
            if matching_l2r[u] == v or v in v_visited:
                continue
            v_visited.add(v)
            # traverse only matched edges from 'V' to 'U'
            u_next = matching_r2l[v]
            if u_next is not None and u_next not in u_visited:
                u_visited.add(u_next)
                stack.append(u_next)
