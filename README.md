# dsakit

A small library of classic data structures and algorithm exercises. It is
plain Python and has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `dsakit.backtracking`: `binary_strings(size)` lists every binary string of
  a given length. `n_queens(n)` returns every solution as a list of row
  strings made of `Q` and `.`. `can_place_queen(board, row, col)` checks one
  square against the queens in the rows above it.
- `dsakit.trees`: a binary tree `Node` (`data`, `left`, `right`) and
  functions that work on it. The traversals are `in_order`, `pre_order`,
  `post_order`, `level_order` and `level_order_groups`. The search-tree
  helpers are `insert`, `contains` and `is_bst`. Also `height`,
  `count_nodes`, `leaf_nodes`, `nodes_at_level` (the root is level 1),
  `count_at_depth` (the root is depth 0), `build_level_order` (where `None`
  marks a gap) and `top_view`.
- `dsakit.heaps`: `approx_k_sort`, `top_k_frequent`, `k_closest`,
  `last_stone_weight`, `last_stone_weight_sorted`, `min_rope_cost` and
  `kth_smallest`.
- `dsakit.hashing`: `is_anagram`, `two_sum`, `unique_occurrences`,
  `find_even_numbers`, `reverse_digits`, `count_distinct_integers` and
  `maximum_string_pairs`.
- `dsakit.queues`:
  - `LinkedDeque`, a doubly linked deque.
  - `ArrayQueue(capacity)`, a fixed array whose popped slots are not reused.
  - `LinkedQueue`.
  - `StackQueue`, a queue made of two stacks.
  - Functions that take a `collections.deque`: `rotate_through`,
    `reverse_queue`, `remove_even_positions` and `reverse_first_k`. All but
    `rotate_through` change the deque in place.
  - Functions that take a sequence: `first_negative_in_windows`,
    `count_unfed_students` and `deck_revealed_increasing`.
- `dsakit.stacks`:
  - `MinStack`, which keeps its minimum with a helper stack.
  - `EncodedMinStack`, which keeps only one extra value for the minimum.
  - `LinkedStack`.
  - `ArrayStack(capacity)`.
  - `reverse_stack` and `reverse_string`.

  Iterating over `LinkedStack` or `ArrayStack` yields the items from the top
  down.
- `dsakit.monotonic`:
  - Nearest values: `next_greater`, `previous_greater`, `next_smaller`,
    `previous_smaller`.
  - Nearest indices: `next_smaller_index`, `previous_smaller_index`,
    `previous_greater_index`.
  - Problems built on these: `largest_rectangle`, `max_sliding_window`,
    `can_see_persons_count`, `stock_span`.
- `dsakit.expressions`: works with expressions whose operands are single
  digits.
  - Evaluation: `evaluate_infix` (brackets allowed) and `evaluate_prefix`.
  - Conversion: `infix_to_prefix` and `prefix_to_infix`.
  - Helpers: `priority` and `apply_operator`. Division truncates toward
    zero.
  - `is_balanced` counts each kind of bracket separately.
- `dsakit.strings`: `count_words`, `reverse_words`, `zigzag_rows` and
  `zigzag_convert`.

## Examples

```python
from dsakit.heaps import min_rope_cost
from dsakit.expressions import evaluate_infix, infix_to_prefix
from dsakit.stacks import MinStack

min_rope_cost([6, 5, 3, 2, 8, 10, 9])   # 115

evaluate_infix("1+(3*8)/8-3")            # 1
infix_to_prefix("7+9*4/8-3")             # "-+7/*9483"

stack = MinStack()
for value in (23, 2, 10):
    stack.push(value)
stack.get_min()                          # 2
```

## Errors

- Reading from or popping an empty container raises `IndexError`.
- Pushing onto a full `ArrayQueue` or `ArrayStack` also raises `IndexError`.
- Arguments out of range raise `ValueError`. Examples are a negative
  capacity, `k` less than 1 in `kth_smallest`, `first_negative_in_windows`
  or `max_sliding_window`, and malformed expressions.
- Dividing by zero in an expression raises `ZeroDivisionError`.

## Scope

`dsakit` is a library only. It has no command-line program: import the
functions and classes and call them from your own code.