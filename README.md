# cpkit

A library of classic algorithms and data structures in plain Python: graph
algorithms, string processing, number theory, convolutions and a set of
specialised data structures. The only runtime dependency is
`sortedcontainers`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

### Graphs

- `cpkit.scc`: `strongly_connected_components(adj)` returns the components of a
  directed graph in topological order; `component_numbers(adj)` maps each vertex
  to its component's index.
- `cpkit.two_sat`: `two_sat(n, clauses)` takes clauses of two 1-based signed
  literals (`-x` is the negation of `x`) and returns a string of `+`/`-`, one per
  variable, or `None` when the formula is unsatisfiable.
- `cpkit.connectivity`: `two_edge_components`, `edge_components`,
  `articulation_points`, `biconnected_components` (returns a
  `BiconnectedComponents` with vertex lists, edge-index groups and an
  articulation flag per vertex) and `block_cut_tree` (returns a `BlockCutTree`).
- `cpkit.online_bridge`: `OnlineBridges(n)` keeps the number of bridges in its
  `bridges` attribute as edges are added with `add_edge(a, b)`.
- `cpkit.euler`: `directed_euler_cycle`, `undirected_euler_cycle` and
  `euler_circuit`, which raises `ValueError` when no circuit from vertex 0 exists.
- `cpkit.centroid`: `centroid_decomposition(adj, root=0)` returns a
  `CentroidTree` with the centroid parent and depth of every vertex.
- `cpkit.shortest_path`: `dijkstra`, `bellman_ford` (raises `ValueError` on a
  reachable negative cycle) and `floyd_warshall`; unreachable vertices get
  `math.inf`.
- `cpkit.dynamic_connectivity`: `RollbackDSU` with `find`, `unite` and
  `rollback`; `offline_components(n, num_times, edges)` gives the number of
  components at each time for edges `(u, v, l, r)` present during times `l..r`.
- `cpkit.flow`: `max_flow(n, edges, source, sink)` (Dinic) and `MinCostFlow`,
  whose `solve(source, sink, max_flow=inf)` returns `(flow, cost)`.
- `cpkit.matching`: `hopcroft_karp(n_left, n_right, adj)` returns the matching
  size and each left vertex's partner (or -1); `min_assignment(cost)` solves the
  assignment problem for at most as many rows as columns.

### Strings

- `cpkit.strings`: `prefix_function`, `prefix_occurrences`, `z_function` and
  `manacher` (returns even and odd palindrome radii).
- `cpkit.suffix_array`: `suffix_array(s)` returns `(sa, lcp)`.
- `cpkit.suffix_automaton`: `SuffixAutomaton(text)` with `add`, `build` and
  `count(s, k)`.
- `cpkit.aho_corasick`: `AhoCorasick(patterns)` with `count(text)`,
  `positions(text)` and `ends(text)`.
- `cpkit.hashing`: `DoubleHash` (two-modulus substring hashes), `RangeHash`
  (lowercase strings, optionally with reverse hashes) and `SegmentHash`
  (digit strings with point updates).

### Mathematics

- `cpkit.convolution`: `fft_multiply`, `ntt_multiply` (modulo 998244353),
  `multiply_mod` (any modulus, exact), `poly_pow`, `balanced_tickets`, `fwht`,
  `bitwise_convolution` and `subset_convolution`; `BitwiseOp` selects AND, OR or
  XOR.
- `cpkit.number_theory`: floor/ceil division, modular inverses, `egcd`,
  `linear_sieve`, `phi_table`, `is_probable_prime`, `is_prime`, `pollard_rho`,
  `prime_factorize`, `divisor_count`, `inverse_phi`, gcd and lcm sum tables,
  `coprime_pairs`, `pair_gcd_sum`, `crt`, `crt_system`, `discrete_log` and
  `primitive_root`.
- `cpkit.floor_sum`: `floor_sum(n, m, a, b)`.
- `cpkit.linear_algebra`: `determinant`, `identity`, `mat_mul` and `mat_pow`,
  with an optional modulus.
- `cpkit.interpolation`: `interpolate(y, k, mod)` evaluates the polynomial
  through `(i, y[i])` at `k`.
- `cpkit.geometry`: `cross`, `closest_pair_distance` (squared distance),
  `angular_sort` and `convex_hull`.
- `cpkit.bits`: `next_combination`, `submasks`, `gray_code` and `gray_to_binary`.
- `cpkit.sos_dp`: `subset_sums`, `superset_sums`, `zero_and_pairs`,
  `zero_and_subsequences` and `or_subsequences`.

### Data structures

- `cpkit.fenwick`: `RangeFenwick` with range addition and range sums.
- `cpkit.treap`: `Treap` (ordered multiset with `kth`, `count_less`,
  `sum_less`) and `ImplicitTreap` (sequence with positional `insert`,
  `reverse` and `range_sum`).
- `cpkit.persistent`: `PersistentSegmentTree` (versioned point additions, range
  sums and k-th queries between versions) and `PersistentXorTrie` (versioned
  maximum XOR queries).
- `cpkit.sparse_table_2d`: `SparseTable2D` for rectangle maximum queries.
- `cpkit.ds_tricks`: `MaxSuffixMap` and `MaxPrefixMap`.
- `cpkit.dp_optimization`: `MonotoneCHT` (minimum, slopes added in
  non-increasing order), `DynamicCHT` (maximum, any order), `LiChaoTree`
  (minimum over an integer range), `partition_min_squares` and
  `knuth_merge_cost`.
- `cpkit.xor_basis`: `XorBasis`.

## Examples

```python
from cpkit.strings import prefix_function, z_function
from cpkit.flow import max_flow
from cpkit.number_theory import crt, is_prime

prefix_function("abab")          # [0, 0, 1, 2]
z_function("aaa")                # [3, 2, 1]
max_flow(2, [(0, 1, 5)], 0, 1)   # 5
is_prime(1_000_000_007)          # True
crt(2, 3, 3, 5)                  # 8
```

```python
from cpkit.treap import ImplicitTreap

t = ImplicitTreap([1, 2, 3, 4])
t.reverse(1, 2)
list(t)                          # [1, 3, 2, 4]
t.range_sum(0, 1)                # 4
```

## Scope

cpkit is a library only: it has no command-line tool and reads no input files.
Callers build the graphs, strings and sequences themselves and pass them in.