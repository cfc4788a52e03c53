# algocollection

A library of classic algorithms and data structures written in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algocollection.searching` | `binary_search`, `checked_binary_search`, `first_occurrence`, `last_occurrence`, `linear_search`, `first_and_last` |
| `algocollection.arrays` | `max_subarray_sum`, `kadane`, `max_subarray_brute_force`, `PrefixSum`, `PrefixSum2D`, `spiral_order`, `all_pairs`, `subarrays`, `delete_value`, `matrix_add`, `matrix_multiply`, `next_smaller_elements`, `previous_smaller_elements`, `is_strictly_increasing`, `subsets`, `frequencies`, `sorted_frequencies` |
| `algocollection.numbers` | `gcd`, `gcd_brute_force`, `lcm`, `primes_up_to`, `nth_prime`, `fibonacci`, `fibonacci_series`, `factorial`, `power_of_two`, `sum_to`, `digit_sum`, `proper_divisors`, `is_armstrong`, `is_cubic_armstrong`, `count_digits`, `binary_digits`, `reverse_number`, `is_palindrome_number`, `to_roman`, `next_greater_number`, `mod_pow`, `dice_combinations` |
| `algocollection.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bit_range`, `count_bits`, `count_bits_fast`, `is_odd`, `to_lower`, `to_upper`, `is_power_of_two` |
| `algocollection.dynamic` | `knapsack`, `rod_cut`, `rod_cut_memo` |
| `algocollection.graphs` | `WeightedGraph` (Dijkstra shortest paths), `DiGraph` (topological sort), `hamiltonian_cycle`, `adjacency_list`, `adjacency_matrix`, `weighted_adjacency_list` |
| `algocollection.strings` | `precedence`, `infix_to_postfix`, `is_palindrome`, `brute_force_find`, `SuffixTrie` |
| `algocollection.linked_list` | `Node` and a singly linked `LinkedList` with insert, delete and reverse operations |
| `algocollection.vector` | `Vector`, a growable array that doubles its capacity when it is full |
| `algocollection.hashing` | `ChainedHashTable` |
| `algocollection.trees` | `TreeNode` and `postorder` |
| `algocollection.sudoku` | a sudoku `Board` and an interactive editor |

Searches return the index of the match, or -1 when there is none.
`PrefixSum.query` and `PrefixSum2D.query` take 1-based, inclusive bounds.

## Examples

```python
from algocollection.searching import binary_search
from algocollection.graphs import WeightedGraph
from algocollection.strings import infix_to_postfix
from algocollection.numbers import to_roman

binary_search([2, 3, 4, 10, 40], 10)   # 3

graph = WeightedGraph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
graph.shortest_paths(0)                # [0, 4, 5]

infix_to_postfix("a+b*c")              # "abc*+"
to_roman(1994)                         # "MCMXCIV"
```

## Sudoku editor

The package installs a command that loads a board and lets you look at it
and edit it interactively:

```
algocollection-sudoku [BOARD]
```

If no file is given, the command asks where the board is. The board file
holds 81 non-blank characters in reading order (row by row), with `0` for an
empty square. At the `>` prompt:

- `D` shows the board,
- `E` asks for a square such as `B3` and a value from 1 to 9, and fills it in
  if the square is empty,
- `?` shows the list of commands,
- `Q` quits.

## What it does not do

- There are no sorting functions.
- The sudoku editor does not save the board: `Q` leaves without writing
  anything back to the file.
- The `S` command listed in the sudoku instructions is not available; it is
  answered with `ERROR: Invalid command`.