# dailyalgos

A small collection of classic algorithms on sequences, strings and singly
linked lists, written as plain Python functions. It also has a small
demonstration command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sequences and strings

All of these live in `dailyalgos.sequences`:

| Function | What it does |
| --- | --- |
| `length_of_longest_substring(s)` | Length of the longest substring with no repeated character (sliding window). |
| `max_subarray(nums)` | Largest sum of a contiguous, non-empty run (Kadane's algorithm). Raises `ValueError` for an empty sequence. |
| `rotate(nums, k)` | Rotates the list right by `k` places, in place; `k` is taken modulo the length. Raises `ValueError` for an empty list. |
| `is_anagram(s, t)` | Whether `t` is a rearrangement of `s`. |
| `remove_duplicates(nums)` | Compacts a sorted list in place so its leading part holds each value once, and returns how many distinct values there are. Entries past that count are left as they were. |
| `intersect(nums1, nums2)` | Common elements, each as often as it occurs in both, in `nums2` order. |
| `majority_element(nums)` | The Boyer–Moore vote candidate: the majority element when one exists, `0` for an empty sequence. |
| `search_insert(nums, target)` | Index of `target` in a sorted sequence, or where it would be inserted. |

```python
from dailyalgos.sequences import max_subarray, rotate, search_insert

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)
nums                                            # [5, 6, 7, 1, 2, 3, 4]

search_insert([1, 3, 5, 6], 2)                  # 1
```

## Linked lists

`dailyalgos.linked_list` provides `ListNode`, a node with `val` and `next`
attributes that compares by identity, and functions that work on chains
of nodes:

- `from_values(values)` builds a chain and returns its head (`None` for no
  values); `to_values(head)` returns the values of an acyclic chain as a list.
  Iterating a `ListNode` yields the values from that node onwards.
- `list_length(head)` counts the nodes of an acyclic chain.
- `has_cycle(head)` detects a cycle with the tortoise-and-hare method.
- `remove_loop(head)` breaks a cycle in place, returning `True` if it
  removed one and `False` if there was none.
- `intersection_node(head_a, head_b)` returns the first node two acyclic
  chains share, or `None`.
- `reverse_list(head)` reverses a chain in place and returns its new head.
- `merge_two_lists(list1, list2)` splices two sorted chains into one sorted
  chain; on equal values the node from `list2` comes first.
- `middle_node(head)` returns the middle node (the second of two middles).

```python
from dailyalgos.linked_list import from_values, merge_two_lists, reverse_list, to_values

merged = merge_two_lists(from_values([1, 2, 4]), from_values([1, 3, 4]))
to_values(merged)                      # [1, 1, 2, 3, 4, 4]
to_values(reverse_list(from_values([1, 2, 3, 4, 5])))   # [5, 4, 3, 2, 1]
```

## Command line

The `dailyalgos` command has three subcommands, one of which must be given:

```
dailyalgos count [N]
```

prints the numbers `0` to `N-1` on one line (`N` defaults to 12).

```
dailyalgos cycle [VALUES ...] [--loop-to INDEX]
```

builds a linked list from `VALUES` (default `1 2 3 4 5`), links its last
node back to the node at `INDEX` (default 1; a negative index leaves the
list without a loop), and reports whether a cycle is found. `INDEX` must
be less than the number of values.

```
dailyalgos merge [--first VALUES ...] [--second VALUES ...]
```

merges two sorted lists (defaults `1 2 4` and `1 3 4`) and prints the
merged list.

Use `dailyalgos --help` or `dailyalgos <subcommand> --help` for details.