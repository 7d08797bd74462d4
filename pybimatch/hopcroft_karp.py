"""
Implementation of the Hopcroft-Karp algorithm for maximum-cardinality matchings
in unweighted bipartite graphs, based on
https://en.wikipedia.org/wiki/Hopcroft%E2%80%93Karp_algorithm

The bipartite graph is described by its left-to-right adjacency: entry 'u'
lists the right vertices connected to left vertex 'u'. Vertices in both
partitions are sequentially indexed: 0, 1, ...
"""

import logging
from queue import Queue
from collections.abc import Sequence

__all__ = ['HopcroftKarp', 'maximum_matching']

logger = logging.getLogger(__name__)


class HopcroftKarp:
    """
    Hopcroft-Karp algorithm to find a maximum-cardinality matching,
    storing the temporary data for running the algorithm.

    The number of right vertices 'num_v' is optional. If it is not provided,
    the storage for right vertices is sized according to the largest right vertex
    index encountered in the adjacency passed to 'get_maximum_matching'.

    Repeated invocation continues from the current matching;
    call 'reset' to start from an empty matching.
    """
    def __init__(self, num_u: int, num_v: int = None):
        if num_u < 0:
            raise ValueError(f'number of left vertices must be non-negative, received {num_u}')
        if num_v is not None and num_v < 0:
            raise ValueError(f'number of right vertices must be non-negative, received {num_v}')
        self.num_u = num_u
        self.num_v = num_v
        self.reset()

    def reset(self):
        """
        Reset the matching and the temporary data.
        """
        # 'None' marks an unmatched vertex
        self.matching_l2r = self.num_u * [None]
        self.matching_r2l = (self.num_v or 0) * [None]
        # layer (distance) of left vertices, 'None' if not reached
        self.layer = self.num_u * [None]
        # length of shortest augmenting paths in the current phase
        self.cur_dist = None
        self.num_phases = 0

    def get_maximum_matching(self, graph_l2r: Sequence[Sequence[int]]) -> list:
        """
        Compute a maximum-cardinality matching for the bipartite graph described
        by the adjacency 'graph_l2r', and return the matched right vertex
        (or None) for each left vertex.
        """
        self.run(graph_l2r)
        return list(self.matching_l2r)

    def run(self, graph_l2r: Sequence[Sequence[int]]) -> int:
        """
        Run the Hopcroft-Karp algorithm, returning the number of
        augmenting paths added to the matching.
        """
        self._prepare(graph_l2r)
        num_augment = 0
        while self._connect_unmatched_vertices(graph_l2r):
            self.num_phases += 1
            num_augment_phase = 0
            for u in range(self.num_u):
                if self.matching_l2r[u] is None:
                    if self._add_augmenting_path(graph_l2r, u):
                        num_augment_phase += 1
            logger.debug('phase %d: shortest augmenting path length %d, %d augmentations',
                         self.num_phases, self.cur_dist, num_augment_phase)
            num_augment += num_augment_phase
        logger.debug('matching size %d after %d phases', self.matching_size(), self.num_phases)
        return num_augment

    def matching_size(self) -> int:
        """
        Number of edges in the current matching.
        """
        return sum(1 for v in self.matching_l2r if v is not None)

    def matched_pairs(self) -> list[tuple[int, int]]:
        """
        Matched edges (u, v) of the current matching, ordered by left vertex.
        """
        return [(u, v) for (u, v) in enumerate(self.matching_l2r) if v is not None]

    def _prepare(self, graph_l2r: Sequence[Sequence[int]]):
        """
        Validate the adjacency and size the storage for right vertices accordingly.
        Nothing is modified if the adjacency is invalid.
        """
        if len(graph_l2r) != self.num_u:
            raise ValueError(
                f'adjacency must contain an entry for each of the {self.num_u} left vertices, '
                f'received {len(graph_l2r)} entries')
        max_v = -1
        for (u, adj) in enumerate(graph_l2r):
            for v in adj:
                if v < 0:
                    raise IndexError(f'negative right vertex index {v} adjacent to left vertex {u}')
                if self.num_v is not None and v >= self.num_v:
                    raise IndexError(
                        f'right vertex index {v} adjacent to left vertex {u} '
                        f'out of range for {self.num_v} right vertices')
                max_v = max(max_v, v)
        if max_v >= len(self.matching_r2l):
            # grow storage, retaining existing matches
            self.matching_r2l.extend((max_v + 1 - len(self.matching_r2l)) * [None])

    def _connect_unmatched_vertices(self, graph_l2r: Sequence[Sequence[int]]) -> bool:
        """
        Find the minimal length of paths connecting currently unmatched left vertices
        to currently unmatched right vertices via a breadth-first search,
        and assign a layer to each visited left vertex.
        """
        queue = Queue()
        for u in range(self.num_u):
            if self.matching_l2r[u] is None:
                # 'u' has not been matched yet
                self.layer[u] = 0
                queue.put(u)
            else:
                self.layer[u] = None
        self.cur_dist = None
        while not queue.empty():
            u = queue.get()
            d = self.layer[u]
            if d is None:
                continue
            if self.cur_dist is not None and d >= self.cur_dist:
                # longer than the shortest augmenting paths
                continue
            for v in graph_l2r[u]:
                u2 = self.matching_r2l[v]
                if u2 is None:
                    # first discovery is the shortest in breadth-first order
                    if self.cur_dist is None:
                        self.cur_dist = d + 1
                elif self.layer[u2] is None:
                    self.layer[u2] = d + 1
                    queue.put(u2)
        return self.cur_dist is not None

    def _add_augmenting_path(self, graph_l2r: Sequence[Sequence[int]], u_start: int) -> bool:
        """
        Add an augmenting path starting at 'u_start' to the matching by performing
        a depth-first search along the layers, using an explicit stack.
        """
        # stack entries: [left vertex, position in its adjacency list]
        stack = [[u_start, 0]]
        while stack:
            entry = stack[-1]
            u, i = entry
            adj = graph_l2r[u]
            d_next = self.layer[u] + 1
            descend = False
            while i < len(adj):
                v = adj[i]
                u2 = self.matching_r2l[v]
                if u2 is None:
                    if self.cur_dist == d_next:
                        # flip edges along the path
                        self._update_match(u, v)
                        for (up, ip) in reversed(stack[:-1]):
                            self._update_match(up, graph_l2r[up][ip])
                        return True
                elif self.layer[u2] == d_next:
                    entry[1] = i
                    stack.append([u2, 0])
                    descend = True
                    break
                i += 1
            if not descend:
                # do not visit the same vertex multiple times
                self.layer[u] = None
                stack.pop()
                if stack:
                    stack[-1][1] += 1
        return False

    def _update_match(self, u: int, v: int):
        self.matching_l2r[u] = v
        self.matching_r2l[v] = u


def maximum_matching(graph_l2r: Sequence[Sequence[int]], num_v: int = None) -> list:
    """
    Compute a maximum-cardinality matching of the bipartite graph described
    by the left-to-right adjacency 'graph_l2r'.

    Example:
        >>> maximum_matching([[0, 1], [0]])
        [1, 0]
    """
    return HopcroftKarp(len(graph_l2r), num_v).get_maximum_matching(graph_l2r)
