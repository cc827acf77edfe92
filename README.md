# algoset

Small implementations of classic algorithms with no dependencies, grouped by
the data they work on. Every function is a plain function taking built-in
Python values (lists, strings, integers) or `ListNode` chains. Bad input, such
as an empty list where a value is required, raises `ValueError`.

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

### `algoset.linked_list`

`ListNode` is a dataclass with `val` (default `0`) and `next` (default
`None`). Nodes compare and hash by identity. Iterating over a node yields the
values from that node to the end of the list. On a list with a cycle the
iteration never ends.

- `from_values(values)` builds a list and returns its head, or `None` for
  empty input. `to_values(head)` returns the values of an acyclic list.
- `has_cycle(head)` and `detect_cycle(head)` tell whether a list has a cycle.
  `detect_cycle` returns the node where the cycle begins, or `None`.
- `get_intersection_node(head_a, head_b)` returns the first node that both
  lists share, or `None`.
- `remove_nth_from_end(head, n)` unlinks the `n`-th node from the end and
  returns the head. If `n` reaches the length or goes past it, the head is
  removed. An empty list or `n < 1` raises `ValueError`.
- `reverse_list(head)` reverses the list in place and returns the new head.
- `is_palindrome_list(head)` tells whether the values read the same in both
  directions.
- `rotate_right(head, k)` rotates the list `k` places to the right. A `k` that
  is not positive leaves the list unchanged.
- `middle_node(head)` returns the middle node. For an even length it returns
  the second of the two middle nodes. An empty list raises `ValueError`.

### `algoset.strings`

- `remove_adjacent_duplicates(s)` removes pairs of equal adjacent characters
  over and over until none are left.
- `is_palindrome(s)` looks only at the ASCII letters and digits, ignores
  case, and tells whether they form a palindrome.
- `merge_alternately(word1, word2)` interleaves the two words and then
  appends the rest of the longer one.
- `remove_occurrences(s, part)` removes the leftmost occurrence of `part`
  over and over until none is left. An empty `part` raises `ValueError`.
- `length_of_longest_substring(s)` returns the length of the longest
  substring with no repeated character.
- `reverse_string(chars)` reverses a mutable sequence in place.
- `first_unique_char(s)` returns the index of the first character that occurs
  only once, or `-1`.
- `compress(chars)` run-length encodes `chars` in place and returns the new
  length. A run longer than one is written as its character followed by its
  count. Elements after that length are left as they were.
- `check_inclusion(s1, s2)` tells whether some permutation of `s1` is a
  substring of `s2`.

### `algoset.arrays`

- `max_profit(prices)` returns the best profit from one buy followed by one
  later sell, or `0`.
- `single_number(nums)` returns the element that appears once when every
  other element appears twice.
- `two_sum_sorted(numbers, target)` returns the 1-based positions of two
  entries of a sorted list that sum to `target`, as a tuple. If there is no
  such pair it raises `ValueError`.
- `is_sorted_and_rotated(nums)` tells whether `nums` is a non-decreasing
  sequence that has been rotated.
- `rotate(nums, k)` rotates `nums` in place `k` steps to the right.
- `contains_duplicate(nums)` tells whether any value occurs more than once.
- `rearrange_by_sign(nums)` returns a new list with values `>= 0` at even
  positions and values `<= 0` at odd positions, in their original relative
  order. If there are not enough values of either kind it raises
  `ValueError`.
- `majority_elements(nums)` returns the values that occur more than
  `len(nums) // 3` times, in the order in which they cross that threshold.
- `product_except_self(nums)` returns, for each position, the product of all
  the other elements.
- `missing_number(nums)` returns the one value of `0..len(nums)` that is not
  in `nums`.
- `find_duplicate(nums)` returns the first value seen a second time. If there
  is none it raises `ValueError`.
- `find_duplicates(nums)` returns the values that occur exactly twice, in
  order of first appearance.
- `max_subarray(nums)` returns the largest sum of a non-empty run of
  consecutive elements.
- `merge_intervals(intervals)` sorts `[start, end]` intervals and merges those
  that overlap or touch.
- `sort_colors(nums)` sorts 0s, 1s and 2s in place by counting them. Any other
  value is counted, and written back, as 2.
- `merge_sorted(nums1, m, nums2, n)` copies the first `n` values of `nums2`
  into `nums1` from position `m` onwards, then sorts `nums1` in place.

### `algoset.grid`

- `search_sorted_matrix(matrix, target)` searches a matrix whose rows and
  columns are each sorted in ascending order.
- `search_flattened_matrix(matrix, target)` runs a binary search on a matrix
  that is sorted when read row by row.
- `rotate_image(matrix)` rotates a square matrix 90 degrees clockwise in
  place. A matrix that is not square raises `ValueError`.

### `algoset.search`

- `binary_search(nums, target)` returns an index of `target` in a sorted
  sequence, or `-1`.
- `can_eat_in_time(piles, k, h)` tells whether eating `k` bananas an hour
  clears every pile within `h` hours.
- `min_eating_speed(piles, h)` returns the smallest speed that does so. If no
  speed up to the largest pile is enough, it returns one more than the
  largest pile.

### `algoset.numbers`

- `count_primes(n)` returns how many primes are less than `n`.
- `brute_gcd(a, b)` returns the largest divisor of `a` in the range `1..a`
  that also divides `b`, found by trying each one.
- `euclid_gcd(a, b)` returns the greatest common divisor of two non-negative
  integers. It returns `0` if either argument is `0`.
- `find_gcd(nums)` returns the gcd of the smallest and largest values.

## Examples

```python
from algoset.linked_list import from_values, to_values, reverse_list
from algoset.strings import remove_adjacent_duplicates
from algoset.arrays import max_profit, merge_intervals
from algoset.search import binary_search
from algoset.numbers import count_primes

to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]
remove_adjacent_duplicates("abbaca")             # "ca"
max_profit([7, 1, 5, 3, 6, 4])                   # 5
merge_intervals([[1, 3], [2, 6], [8, 10]])       # [[1, 6], [8, 10]]
binary_search([-1, 0, 3, 5, 9, 12], 9)           # 4
count_primes(10)                                 # 4
```

## Scope

This is a library only. It provides no command-line program.