# algobox

Classic algorithms in plain Python, with no third-party dependencies.

## Modules

Graphs (vertices are numbered from 1, edges are `(u, v)` or `(u, v, weight)` tuples):

- `algobox.adjacency`: `adjacency_lists`, `adjacency_matrix`.
- `algobox.traversal`: `dfs_order`, `bfs_order`, `connected_components`,
  `entry_leave_times`, `topological_order`.
- `algobox.network`: `max_spanning_tree_weight` (raises `ValueError` when the
  graph is empty or not connected).
- `algobox.roads`: `road_graph`, `has_cycle`, `is_optimal` for networks of
  one-way `B`/`R` roads.
- `algobox.shortest`: `dijkstra` (unreachable vertices get `-1`) and
  `all_pairs_distances`.

Dynamic programming and greedy methods:

- `algobox.stocks`: `max_profit`.
- `algobox.gold`: `max_gold_value` (divisible heaps, dearest first).
- `algobox.sequences`: `fibonacci_mod`, `staircase_ways`, both modulo
  1 000 000 007.
- `algobox.partition`: `can_split_equally`.
- `algobox.lawn`: `max_flowers`, `best_path` (moves `U` and `R`).
- `algobox.lcs`: `longest_common_subsequence`, returning the length and the
  1-based matched positions in both sequences.
- `algobox.knapsack`: `max_weight`.
- `algobox.levenshtein`: `levenshtein`.

Strings:

- `algobox.words`: `split_words`, `reverse_words`.
- `algobox.passport`: `is_one_edit_away`.
- `algobox.shift_search`: `shifted_occurrences`.
- `algobox.inserting`: `insert_strings`.
- `algobox.prefix`: `prefix_function`, `replace_all`.
- `algobox.packed`: `unpack`, `common_prefix`, `longest_common_prefix`.
- `algobox.trie`: the `Trie` class and `can_compose_from`.

Utilities:

- `algobox.timing`: `LogDuration(label, stream=None)`, a context manager
  that writes `"<label>: <n> ms"` to the stream (standard error by default)
  when the block ends.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from algobox.levenshtein import levenshtein
from algobox.partition import can_split_equally
from algobox.packed import unpack
from algobox.prefix import prefix_function
from algobox.trie import Trie, can_compose_from

levenshtein("kitten", "sitting")            # 3
can_split_equally([1, 5, 7, 1])             # True
unpack("2[a]2[ab]")                         # "aaabab"
prefix_function("abracadabra")              # [0, 0, 0, 1, 0, 1, 0, 1, 2, 3, 4]
can_compose_from("examiwillpasstheexam",
                 ["will", "pass", "the", "exam", "i"])  # True

trie = Trie(["will", "pass"])
trie.insert("the")
trie.search("pass")        # True
trie.starts_with("wi")     # True
trie.can_compose("willpass")  # True
```

```python
from algobox.traversal import bfs_order, topological_order

bfs_order(4, [(1, 2), (2, 3), (1, 4)], 1)   # [1, 2, 4, 3]
topological_order(3, [(1, 2), (2, 3)])      # [1, 2, 3]
```

## Command line

The `algobox` command reads a task's input from standard input and prints
the answer:

```
algobox COMMAND < input.txt
```

| Command       | Input                                                        | Output                         |
|---------------|--------------------------------------------------------------|--------------------------------|
| `topo`        | `N M`, then `M` directed edges `a b`                         | vertices in topological order  |
| `network`     | `N M`, then `M` edges `u v w`                                | maximum spanning tree weight, or `Oops! I did it again` |
| `roads`       | `N`, then `N - 1` lines of `B`/`R`                           | `YES` or `NO`                  |
| `levenshtein` | two lines                                                    | edit distance                  |
| `partition`   | `n`, then `n` numbers                                        | `True` or `False`              |
| `packed`      | `n`, then `n` packed strings                                 | longest common unpacked prefix |
| `crib`        | a text line, `n`, then `n` words                             | `YES` or `NO`                  |

Malformed input prints `Invalid input` and exits with status 1.

## What is not included

Only the tasks listed above have a command. Everything else in the package
(traversals other than topological order, shortest paths, the lawn,
knapsack, LCS, string insertion, replacement and the rest) is available as
library functions only.