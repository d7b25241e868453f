# contestkit

This package collects small solutions to programming-contest problems and a
few classic data-structure and algorithm exercises. Each problem is a plain
function. You pass it ordinary Python values and it returns the answer. Where
a problem has no answer, the function returns `None`. Invalid input raises
`ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.arithmetic` covers number puzzles. Among them are `am_deviation`,
  `add_and_divide`, `avto_bus`, `count_permutations`, `cheap_travel`,
  `cirno_bitmask`, `dungeon`, `even_odds`, `k_divisible_sum`,
  `dreamoon_stairs`, `joysticks`, `devu_jokes`, `digit_sum`, `grass_field`,
  `charmed_breaks`, `min_or_sum`, `nit_orz` and `minimums_and_maximums`.
- `contestkit.fibonacci` computes Fibonacci numbers modulo `m` with the Pisano
  period. It provides `fibonacci_mod_small`, `pisano_period`, `fibonacci_huge`
  and `fibonacci_sum_last_digit`.
- `contestkit.strings` covers string problems. Among them are
  `another_sorting`, `balanced_substring`, `casimir`, `creep`, `digit_at`,
  `domino_disaster`, `doors_and_keys`, `forbidden_subsequence`,
  `fox_and_snake`, `lex_string`, `linear_keyboard`, `madoka_number`,
  `photoshoot`, `most_common_keypad_code`, `can_build` and
  `generate_parentheses`.
- `contestkit.palindromes` provides `mike_palindrome`, `palindromic_indices`
  and `longest_palindromic_substring`.
- `contestkit.arrays` covers array problems. Among them are `masked_sum`,
  `array_balancing`, `array_elimination`, `cut_ribbon`, `diamond_miner`,
  `directional_increase`, `dragons`, `flipping_game`, `card_game_winners`,
  `great_sequence`, `mainak`, `make_increasing` and `avengers`.
- `contestkit.constructions` provides constructive and simulated answers:
  `and_matching`, `guess_number`, `knight_tournament`, `meximization` and
  `meximum_array`.
- `contestkit.hex_board` provides `hex_verdict`. It takes a square board of
  `R`, `B` and `.` cells and returns one of `"Red wins"`, `"Blue wins"`,
  `"Nobody wins"` or `"Impossible"`.
- `contestkit.trees` provides `max_ancestor_drop` for a rooted tree that is
  given as a list of parents.
- `contestkit.college` provides the `Student` dataclass, `parse_student` and
  `allocate`. `parse_student` reads a line of the form
  `name,score,first,second,third`. `allocate` assigns students to the seats in
  colleges `C-1`, `C-2`, ..., taking the best score first.
- `contestkit.subsets` provides `subsets`, which lists every subset of a
  sequence.
- `contestkit.timsort` provides `insertion_sort`, `merge` and `tim_sort`. The
  run length of `tim_sort` can be set and defaults to 32.
- `contestkit.linked_list` provides a singly linked `Node` with helpers:
  `from_iterable`, `to_list`, `display`, `delete_last`, `has_cycle`,
  `is_palindrome`, `front_back_split`, `sorted_merge`, `merge_sort`, `middle`
  and `pairwise_swap`.
- `contestkit.circular_queue` provides `CircularQueue`, a bounded FIFO queue.
  It raises `QueueOverflow` when full and `QueueUnderflow` when empty.
- `contestkit.testdata` provides `generate_pairs` and `write_pairs`. They
  produce random pairs of integers, by default 16 pairs drawn from 1..9999.
- `contestkit.animals` provides `Animal` and `Dog`, whose `sound` methods
  return `"Animal"` and `"Dog"`.

## Example

```python
from contestkit.arithmetic import avto_bus
from contestkit.timsort import tim_sort
from contestkit.linked_list import from_iterable, merge_sort, to_list

print(avto_bus(24))                      # (4, 6)
print(tim_sort([-2, 7, 15, -14, 0]))     # [-14, -2, 0, 7, 15]
print(to_list(merge_sort(from_iterable([2, 3, 20, 5, 10, 15]))))
# [2, 3, 5, 10, 15, 20]
```

## Interactive queue

Installing the package also installs a menu-driven queue command:

```
contestkit-queue
```

The command reads whitespace-separated integers from standard input. The
first integer is the capacity of the queue. After that, each integer is a
menu choice:

- 1 enqueues the next integer.
- 2 dequeues.
- 3 displays the queue.
- 4 peeks at the front.
- 5 exits.

Input also stops at end of file or at the first token that is not an integer.

## What it does not do

The problem functions do not read or write contest-style input and output
files. They take Python values and return Python values. The queue command is
the only program in the package that reads standard input.