"""
Numerically investigate the number of phases and the runtime of the
Hopcroft-Karp algorithm for random bipartite graphs.

Reference:
    J. E. Hopcroft, R. M. Karp
    An n^{5/2} algorithm for maximum matchings in bipartite graphs
    SIAM J. Comput. 2, 225-231 (1973)
"""

import time
import numpy as np
import pybimatch as pbm
import matplotlib.pyplot as plt


def random_graph(rng: np.random.Generator, n: int, avg_degree: float):
    """
    Generate the adjacency of a random bipartite graph with 'n' vertices per partition.
    """
    p = avg_degree / n
    return [list(np.nonzero(rng.uniform(size=n) < p)[0]) for _ in range(n)]


def main():

    rng = np.random.default_rng(42)

    # average vertex degree
    avg_degree = 3
    nlist = [2**k for k in range(6, 15)]

    num_phases = []
    runtime = []
    for n in nlist:
        graph = random_graph(rng, n, avg_degree)
        hk = pbm.HopcroftKarp(n, n)
        start = time.perf_counter()
        hk.run(graph)
        runtime.append(time.perf_counter() - start)
        num_phases.append(hk.num_phases)
        print('n:', n, 'matching size:', hk.matching_size(), 'phases:', hk.num_phases)

    nlist = np.array(nlist)

    plt.loglog(nlist, num_phases, '.-', label='phases')
    plt.loglog(nlist, np.sqrt(2*nlist), '--', label='sqrt(V)')
    plt.xlabel('n')
    plt.legend()
    plt.title('Hopcroft-Karp phases for random bipartite graphs (avg. degree {:g})'.format(avg_degree))
    plt.savefig('matching_phases.pdf')
    plt.show()

    # edge count ~ avg_degree * n
    plt.loglog(nlist, runtime, '.-', label='runtime')
    plt.loglog(nlist, runtime[-1] * (nlist / nlist[-1])**1.5, '--', label='~ E sqrt(V)')
    plt.xlabel('n')
    plt.ylabel('runtime [s]')
    plt.legend()
    plt.title('Hopcroft-Karp runtime')
    plt.savefig('matching_runtime.pdf')
    plt.show()


if __name__ == '__main__':
    main()
