# cpalgos

Well-known algorithms and data structures from competitive programming, written as a small,
plain Python library. Python 3.10 or later is required; the only runtime dependency is
`sortedcontainers`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpalgos.sqrt_decomposition` | `SqrtSum` (range sums with point assignment), `CharBlockCounter` (count a character in a range of a string, with point replacement) |
| `cpalgos.text_search` | `prefix_function`, `kmp_search`, `lcs_length` |
| `cpalgos.trie` | `Trie`, a multiset of strings with prefix and exact-match counts |
| `cpalgos.ordered_set` | `OrderedSet` with `order_of_key` and `find_by_order` |
| `cpalgos.hashing` | `splitmix64`, `random_int`, `CustomHash` |
| `cpalgos.binary_lifting` | `BinaryLifting` and `ForestLCA` for ancestors, LCA and distances in trees |
| `cpalgos.contribution` | `subarray_sum_total`, `tree_edge_contribution`, `pairwise_xor_sum`, `pairwise_abs_diff_sum` |
| `cpalgos.lazy_segment_tree` | `LazySegmentTree` with range add and range sum |
| `cpalgos.sieve` | `PrimeSieve`, `SmallestPrimeFactorTable` |
| `cpalgos.graphs` | `has_cycle`, `strongly_connected_components`, `topo_sort`, `bridges_and_cut_vertices` (returns `BridgesAndCuts`), `subtree_sizes` |

All ranges given to `query` and `add` methods are inclusive at both ends and 0-based.
Out-of-range indices raise `IndexError`; invalid arguments raise `ValueError`.

### Node numbering

The graph and tree helpers follow fixed conventions:

- 1-based nodes: `BinaryLifting`, `tree_edge_contribution`, `has_cycle`,
  `strongly_connected_components`, `subtree_sizes`.
- 0-based nodes: `ForestLCA`, `topo_sort`, `bridges_and_cut_vertices`.

`BinaryLifting.kth_ancestor` returns `None` when it would step past the root, and
`ForestLCA.lca` returns `None` for nodes in different trees. `topo_sort` leaves out nodes that
lie on or behind a cycle.

## Examples

Finding a pattern in a text:

```python
from cpalgos.text_search import kmp_search, lcs_length

kmp_search("aaba", "aabaacaadaabaaba")   # [0, 9, 12]
lcs_length("abcde", "ace")               # 3
```

Order statistics:

```python
from cpalgos.ordered_set import OrderedSet

s = OrderedSet([10, 20, 30, 40])
s.order_of_key(25)    # 2
s.find_by_order(2)    # 30
```

Counting words by prefix:

```python
from cpalgos.trie import Trie

trie = Trie()
trie.insert("codeforces")
trie.insert("coder")
trie.count_prefix("code")   # 2
trie.count_equal("coder")   # 1
```

Range updates and queries:

```python
from cpalgos.lazy_segment_tree import LazySegmentTree

tree = LazySegmentTree([1, 2, 3, 4, 5])
tree.add(1, 3, 10)
tree.query(0, 4)    # 45
```

Factorising small numbers:

```python
from cpalgos.sieve import SmallestPrimeFactorTable

spf = SmallestPrimeFactorTable(100)
spf.prime_factors(60)     # [2, 2, 3, 5]
spf.unique_primes(60)     # [2, 3, 5]
spf.factorization(60)     # {2: 2, 3: 1, 5: 1}
```

Seeded hashing:

```python
from cpalgos.hashing import CustomHash

h = CustomHash(seed=42)
h(7) == h(7)   # True; the same seed always gives the same hash
```

## What it does not do

This is a library only. It installs no command and reads no queries from standard input;
callers build the structures and call their methods directly.