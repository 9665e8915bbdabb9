# algos

A collection of classic algorithms and data structures, together with a few
small numerical routines: Dirichlet/Pólya estimation helpers, hidden Markov
model parameters, a transfer matrix, and Potts and Game of Life lattices.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides an `algos` command:

```
algos
```

It starts a worker thread. The worker and the main thread each append a value
to a shared, lock-protected list. The command prints the list before and after
the appends and exits with status 0.

## Library use

Array and string problems:

```python
from algos.stocks import max_profit
from algos.max_subarray import max_sub_array
from algos.roman import roman_to_int
from algos.palindrome import is_valid_palindrome

max_profit([7, 1, 5, 3, 6, 4])                         # 5
max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4])         # 6
roman_to_int("MCMXCIV")                                # 1994
is_valid_palindrome("A man, a plan, a canal: Panama")  # True
```

Trees:

```python
from algos.trees import sorted_array_to_bst, max_depth, pre_order_traversal
from algos.binary_tree import BinaryTree

root = sorted_array_to_bst([-10, -3, 0, 5, 9])
max_depth(root)
pre_order_traversal(root)   # [-10, -3, 0, 5, 9]

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
2 in tree   # True
len(tree)   # 2
```

## Modules

Arrays and numbers:

- `stocks`: `naive_max_profit`, `backward_max_profit` and `max_profit` give the
  best profit from one buy and one later sell, and 0 when no trade gains.
- `max_subarray`: `max_sub_array` gives the largest sum of a contiguous run.
- `majority`: `majority_element` returns the first value seen more than half
  the time. Without one, it returns the most frequent value, and -1 for an
  empty input.
- `merge_sorted`: `merge_sorted` and `merge_sorted_optimal` merge a sorted list
  into the padded tail of another, in place.
- `remove_element`: `remove_element` moves every occurrence of a value to the
  back and returns how many other values remain. `get_swap_idx` is the helper
  it uses.
- `remove_duplicates`: `remove_sorted_duplicates` gathers the unique values of
  a sorted list at its front and returns how many there are.
- `plus_one`: `plus_one` and `get_plus_one` add one to a number held as a list
  of decimal digits.
- `int_sqrt`: `get_sqrt` gives the integer square root by binary search.
- `climb_stairs`: `climb_stairs` counts the ways to climb a staircase in steps
  of one or two.
- `collatz`: `collatz_step` gives the next value in a Collatz sequence.
  `collatz_length` gives the length of the sequence, capped just past
  `MAX_LENGTH`.
- `fib`: `fib` gives the n-th Fibonacci number.

Strings:

- `last_word`: `last_word_length` and `last_word_length_naive` give the length
  of the last word of a sentence.
- `common_prefix`: `longest_common_prefix` gives the prefix shared by a list of
  strings.
- `longest_substring`: `longest_substring_length` gives the length of the
  longest substring with no repeated character.
- `needle_haystack`: `find_needle` gives the first index of one string in
  another, or -1 if it is absent.
- `roman`: `roman_to_int` and `roman_to_int_naive` convert Roman numerals.
  `roman_to_int_naive` raises `ValueError` on an unknown symbol.
- `palindrome`: `is_valid_palindrome` checks the alphanumeric characters,
  ignoring case.
- `first_word`: `first_word` returns the text up to its first space.
- `min_mutations`: `min_mutations` gives the fewest single-base changes from
  one gene to another through a bank of valid genes, or -1 if there is no path.

Trees and containers:

- `trees`: the `TreeNode` dataclass, with `average_of_levels`, `max_depth`,
  `has_path_sum`, `is_same_tree`, `sorted_array_to_bst`,
  `pre_order_traversal`, `post_order_traversal`, `in_order_traversal` and
  `format_tree`. `format_tree` renders a tree sideways as text.
- `bst`: `BinarySearchTree`, with `insert`, `search`, `in_order` and
  `min_diff`. `min_diff` returns the smallest gap between two values.
- `binary_tree`: `BinaryTree`, a set of unique ordered values that supports
  `in` and `len()`. `query_binary_tree` fills a tree and times a batch of
  membership queries. It returns a `QueryReport`.
- `counter`: `ValueCounter`, which tallies hashable values with `count` and
  `times_seen`.

Lattices, vectors and statistics:

- `game_of_life`: the `GameOfLife` class, with `update`. Also
  `new_cell_state`, `random_game`, which draws a seeded random lattice (seed
  42 by default), and `game_of_life`, which advances a list-of-rows board in
  place.
- `potts`: `create_lattice` draws a seeded lattice of labels. `clone_sizes`
  counts the cells per label. `lattice_cost` counts unlike nearest neighbours.
- `vectors`: `transpose`, `magnitude` and `normalize`.
- `transfer`: `transfer_matrix(k)` returns a k × k matrix with a tiny
  probability on the diagonal and the rest spread evenly.
- `minka`: `initial_inverse_digamma`, `trigamma`, `inverse_digamma`,
  `sample_beta_binomial`, `likelihood_beta_binomial`, `polya_damped_counts`
  and `max_likelihood_polya_mean`.
- `hmm`: the `HMM` dataclass holds a transition matrix `A`, an emission matrix
  `B` and an initial distribution `PI`. It checks their shapes and
  probabilities and raises `ValueError` on bad input. It also provides
  `n_latent_states` and `n_obs_states`.

Threads and files:

- `concurrency`:
  - `archer` appends to a locked list from two threads.
  - `bounded_channel` sends messages through a queue of limited capacity and
    returns what arrived.
  - `spawn_counts` counts in a worker thread and the main thread at once and
    returns the printed lines.
- `files`:
  - `read_count` reads a file that holds a single 32-bit integer. It raises
    `OSError` or `ValueError` on failure.
  - `read_diary` returns a message with a text file's contents and size, or
    the reason it could not be read.

## What it does not do

- The `hmm` module only holds and validates model parameters. It does not
  sample sequences, compute likelihoods, decode states or fit a model.
- The package has no general-purpose numerical optimisers.