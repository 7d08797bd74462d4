import unittest
import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import maximum_bipartite_matching
import pybimatch as pbm


class TestHopcroftKarp(unittest.TestCase):

    def test_examples(self):

        cases = [
            ([[0, 1], [0]],
             [1, 0]),
            ([[0, 1], [0, 4], [2, 3], [0, 4], [0, 3]],
             [1, 4, 2, 0, 3]),
            ([[0, 1], [1, 2], [1], [2, 3, 4, 5], [3, 6], [6], [6]],
             [0, 2, 1, 4, 3, 6, None]),
            # last left vertex without any edges
            ([[0, 2], [0, 2], [2, 1], [4], []],
             [0, 2, 1, 4, None]),
            ([[2, 3], [2, 3], [2], [0, 4, 6], [0, 1, 6], [1, 7], [5], [1, 3, 7]],
             [2, 3, None, 0, 6, 7, 5, 1]),
        ]
        for (graph, expected) in cases:
            hopcroft_karp = pbm.HopcroftKarp(len(graph))
            matching = hopcroft_karp.get_maximum_matching(graph)
            self.assertEqual(matching, expected)
            check_mutual_inverse(self, hopcroft_karp)

        # declaring the number of right vertices must not change the result
        hopcroft_karp = pbm.HopcroftKarp(5, 5)
        self.assertEqual(hopcroft_karp.get_maximum_matching([[0, 2], [0, 2], [2, 1], [4], []]),
                         [0, 2, 1, 4, None])

    def test_random(self):

        rng = np.random.default_rng()

        for _ in range(10):
            # generate a random bipartite graph
            num_u = rng.integers(1, 41)
            num_v = rng.integers(1, 41)
            a = (rng.uniform(size=(num_u, num_v)) < 0.1).astype(int)
            graph = [list(np.nonzero(a[u])[0]) for u in range(num_u)]

            # run Hopcroft-Karp algorithm
            hopcroft_karp = pbm.HopcroftKarp(num_u, num_v)
            matching = hopcroft_karp.get_maximum_matching(graph)
            self.assertEqual(len(matching), num_u)

            # check validity of matching
            for (u, v) in enumerate(matching):
                if v is not None:
                    self.assertTrue(a[u, v] != 0)
            check_mutual_inverse(self, hopcroft_karp)

            # compare with reference implementation
            ref = maximum_bipartite_matching(csr_matrix(a), perm_type='column')
            size = sum(1 for v in matching if v is not None)
            self.assertEqual(size, np.count_nonzero(ref != -1))
            self.assertLessEqual(size, min(num_u, num_v))
            self.assertFalse(has_augmenting_path(graph, hopcroft_karp.matching_l2r, hopcroft_karp.matching_r2l))

    def test_complete(self):
        # complete bipartite graph must have a perfect matching
        n = 9
        graph = n * [list(range(n))]
        matching = pbm.maximum_matching(graph)
        self.assertEqual(sorted(matching), list(range(n)))

    def test_empty(self):
        hopcroft_karp = pbm.HopcroftKarp(0)
        self.assertEqual(hopcroft_karp.get_maximum_matching([]), [])
        self.assertEqual(hopcroft_karp.num_phases, 0)
        # left vertices without edges
        self.assertEqual(pbm.maximum_matching([[], [0], []]), [None, 0, None])

    def test_repeated_invocation(self):
        graph = [[0, 1], [1, 2], [1], [2, 3, 4, 5], [3, 6], [6], [6]]
        hopcroft_karp = pbm.HopcroftKarp(len(graph))
        self.assertEqual(hopcroft_karp.run(graph), 6)
        matching = hopcroft_karp.get_maximum_matching(graph)
        num_phases = hopcroft_karp.num_phases
        # continuation from a maximum matching does not augment
        self.assertEqual(hopcroft_karp.run(graph), 0)
        self.assertEqual(hopcroft_karp.num_phases, num_phases)
        self.assertEqual(hopcroft_karp.get_maximum_matching(graph), matching)
        self.assertEqual(hopcroft_karp.matched_pairs(),
                         [(0, 0), (1, 2), (2, 1), (3, 4), (4, 3), (5, 6)])
        # returned matching is a copy
        matching[0] = None
        self.assertEqual(hopcroft_karp.matching_l2r[0], 0)
        # start from scratch
        hopcroft_karp.reset()
        self.assertEqual(hopcroft_karp.matching_size(), 0)
        self.assertEqual(hopcroft_karp.run(graph), 6)

    def test_long_augmenting_path(self):
        # single augmenting path traversing all vertices,
        # deeper than the default recursion limit
        n = 5000
        graph = [[u + 1, u] for u in range(n - 1)] + [[n - 1]]
        hopcroft_karp = pbm.HopcroftKarp(n)
        matching = hopcroft_karp.get_maximum_matching(graph)
        self.assertEqual(matching, list(range(n)))
        self.assertEqual(hopcroft_karp.num_phases, 2)

    def test_invalid_input(self):
        hopcroft_karp = pbm.HopcroftKarp(2)
        with self.assertRaises(ValueError):
            hopcroft_karp.get_maximum_matching([[0]])
        with self.assertRaises(ValueError):
            hopcroft_karp.get_maximum_matching([[0], [1], [0]])
        with self.assertRaises(IndexError):
            hopcroft_karp.get_maximum_matching([[0], [-1]])
        hopcroft_karp = pbm.HopcroftKarp(2, 2)
        with self.assertRaises(IndexError):
            hopcroft_karp.get_maximum_matching([[0], [2]])
        # state must not be modified by rejected calls
        self.assertEqual(hopcroft_karp.matching_l2r, [None, None])
        self.assertEqual(hopcroft_karp.matching_r2l, [None, None])
        with self.assertRaises(ValueError):
            pbm.HopcroftKarp(-1)


def check_mutual_inverse(test: unittest.TestCase, hopcroft_karp: pbm.HopcroftKarp):
    """
    Check that the left-to-right and right-to-left matchings are inverses of each other.
    """
    for (u, v) in enumerate(hopcroft_karp.matching_l2r):
        if v is not None:
            test.assertEqual(hopcroft_karp.matching_r2l[v], u)
    for (v, u) in enumerate(hopcroft_karp.matching_r2l):
        if u is not None:
            test.assertEqual(hopcroft_karp.matching_l2r[u], v)


def has_augmenting_path(graph, matching_l2r, matching_r2l):
    """
    Search for an alternating path from an unmatched left vertex
    to an unmatched right vertex.
    """
    visited = set()
    stack = [u for u in range(len(graph)) if matching_l2r[u] is None]
    while stack:
        u = stack.pop()
        for v in graph[u]:
            if v in visited:
                continue
            visited.add(v)
            if matching_r2l[v] is None:
                return True
            stack.append(matching_r2l[v])
    return False


if __name__ == '__main__':
    unittest.main()
