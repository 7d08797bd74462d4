"""
PyBiMatch
=========

Python implementation of maximum-cardinality matchings in bipartite graphs
based on the Hopcroft-Karp algorithm.

"""

from .hopcroft_karp   import *
from .bipartite_graph import *
