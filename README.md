# algosuite

A library of classic algorithms and data structures written in plain
Python, with no third-party dependencies at run time. The `test` extra
installs pytest for running the test suite.

## What is inside

| Module | Contents |
| --- | --- |
| `algosuite.arrays_hash` | `two_sum`, `first_missing_positive` |
| `algosuite.backtracking` | `letter_combinations`, `generate_parentheses` |
| `algosuite.binary_search` | `find_median_sorted_arrays`, `search_rotated` |
| `algosuite.bit_manip` | `single_number`, `reverse_bits` |
| `algosuite.dp_1d` | `longest_palindrome`, `climb_stairs` |
| `algosuite.dp_2d` | `is_regex_match`, `is_wildcard_match` |
| `algosuite.greedy` | `min_jumps`, `max_subarray` |
| `algosuite.heaps` | `MedianFinder` (`add_num`, `find_median`) |
| `algosuite.intervals` | `merge_intervals`, `insert_interval` |
| `algosuite.linked_list` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `remove_nth_from_end` |
| `algosuite.math_geometry` | `multiply_strings`, `rotate_matrix` |
| `algosuite.sliding_window` | `length_of_longest_substring`, `min_window` |
| `algosuite.stacks` | `is_valid_parentheses`, `largest_rectangle_area` |
| `algosuite.trees` | `TreeNode`, `is_valid_bst`, `is_same_tree` |
| `algosuite.tries` | `Trie` (`insert`, `search`, `starts_with`), `WordDictionary` (`add_word`, `search`) |
| `algosuite.two_pointer` | `max_area`, `three_sum` |
| `algosuite.concurrency` | `OrderedPrinter` (`first`, `second`, `third`) |
| `algosuite.advanced_graphs` | `walls_and_gates`, `find_itinerary`, and the cell markers `EMPTY`, `GATE`, `WALL` |
| `algosuite.graphs` | `ladder_length`, `find_ladders` |
| `algosuite.union_find` | `UnionFind` (`find`, `union`, `components`), `find_circle_num`, `find_redundant_connection` |
| `algosuite.design` | `LRUCache` (`get`, `put`), `Twitter` (`post_tweet`, `get_news_feed`, `follow`, `unfollow`) |

## Examples

```python
from algosuite.arrays_hash import two_sum
from algosuite.design import LRUCache
from algosuite.tries import WordDictionary
from algosuite.advanced_graphs import find_itinerary

two_sum([2, 7, 11, 15], 9)          # [0, 1]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                        # 1
cache.put(3, 3)                     # evicts key 2
cache.get(2)                        # -1

words = WordDictionary()
words.add_word("bad")
words.search(".ad")                 # True

find_itinerary([["JFK", "SFO"], ["SFO", "ATL"]])
# ['JFK', 'SFO', 'ATL']
```

Linked lists can be built from and turned back into Python lists:

```python
from algosuite.linked_list import build_list, list_values, add_two_numbers

list_values(add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4])))
# [7, 0, 8]
```

`walls_and_gates` and `rotate_matrix` change the grid they are given in
place and return `None`.

`Twitter.get_news_feed` returns at most ten tweet ids, newest first, from
the user and everyone they follow. Feeds are cached and rebuilt only when
a relevant tweet, follow or unfollow makes them stale.

`OrderedPrinter` runs the callbacks passed to `first`, `second` and `third`
in that order, whichever threads call them and in whatever order.

## Errors

Functions that cannot produce an answer raise `ValueError`: for example
`two_sum` when no pair adds up to the target, `max_subarray` on an empty
input, `find_median_sorted_arrays` when both inputs are empty,
`MedianFinder.find_median` before any number is added,
`remove_nth_from_end` when `n` is out of range, `multiply_strings` for
anything but non-empty digit strings, `rotate_matrix` for a non-square
matrix, `letter_combinations` for digits without letters, and
`find_redundant_connection` when no edge closes a cycle.
`UnionFind.find` raises `IndexError` for an element outside the sets.

## What it does not do

This is a library only: it has no command-line program, and nothing is
stored beyond the objects you create.