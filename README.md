# algopractice

A small library of classic algorithms and data structures: array and string
puzzles, several sorting algorithms, binary search, a binary search tree, a
letter trie, a singly linked list, and stacks and queues. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algopractice.easy`: `two_sum`, `roman_to_int`, `remove_duplicates`,
  `remove_element`, `reverse_integer`, `is_palindrome`
- `algopractice.arrays`: `find_max_consecutive_ones`, `digit_count`,
  `find_numbers`, `sorted_squares`
- `algopractice.medium`: `max_area`, `rotate`, `min_sub_array_len`,
  `min_sub_array_len2`, `find_kth_largest`, `length_of_longest_substring`,
  `search_range`, `frequency_sort`, `can_jump`, `set_zeroes`,
  `set_zeroes_constant_space`, `search_matrix`
- `algopractice.sorts`: `bubble_sort`, `bucket_sort`, `counting_sort`,
  `insertion_sort`, `merge_sort`, `merge`, `radix_sort`, `selection_sort`
- `algopractice.searching`: `binary_search`, `binary_search_recursive`
- `algopractice.bst`: `TreeNode`, `BinarySearchTree`, `in_order`,
  `pre_order`, `post_order`, `kth_smallest`
- `algopractice.trie`: `Trie`
- `algopractice.linked_list`: `ListNode`, `LinkedList`, `add_two_numbers`,
  `add_two_digit_lists`
- `algopractice.queues`: `ArrayQueue`, `LinkedQueue`, `DequeQueue`,
  `QueueEmptyError`
- `algopractice.stacks`: `ArrayStack`, `LinkedStack`, `DequeStack`,
  `StackEmptyError`

## Examples

```python
from algopractice.easy import two_sum, roman_to_int
from algopractice.medium import search_range
from algopractice.sorts import merge_sort
from algopractice.bst import BinarySearchTree, in_order, kth_smallest
from algopractice.trie import Trie
from algopractice.stacks import LinkedStack

two_sum([2, 7, 11, 15], 9)            # [0, 1]
roman_to_int("MCMXCIV")               # 1994
search_range([5, 7, 7, 8, 8, 10], 8)  # [3, 4]
merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]

tree = BinarySearchTree()
for value in (50, 30, 20, 40, 70, 60, 80):
    tree.insert(value)
40 in tree                            # True
len(tree)                             # 7
list(in_order(tree.root))             # [20, 30, 40, 50, 60, 70, 80]
kth_smallest(tree.root, 3)            # 40

trie = Trie()
trie.insert("Battle")
trie.search("bat")                    # True: search matches prefixes

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.pop()                           # 2
```

## Behaviour worth knowing

- Several functions change their argument in place: `remove_duplicates`,
  `remove_element`, `rotate`, `find_kth_largest` (it sorts the list),
  `set_zeroes`, `set_zeroes_constant_space`, and the sorts `bubble_sort`,
  `insertion_sort` and `selection_sort`, which also return the list.
  `bucket_sort`, `counting_sort`, `radix_sort` and `merge_sort` return a
  new sorted list.
- `reverse_integer` returns 0 when the reversed value leaves the signed
  32-bit range.
- `rotate` raises `ValueError` unless `0 <= k <= len(nums)`;
  `find_kth_largest` and `kth_smallest` raise `IndexError` for an
  out-of-range `k`.
- `length_of_longest_substring` accepts ASCII text only and raises
  `ValueError` otherwise.
- `counting_sort` needs non-negative integers, `radix_sort` values from 0 to
  9999, and `bucket_sort` values whose tenth falls between 0 and
  `len(nums) - 1`; each raises `ValueError` when this does not hold.
- `merge_sort` and `merge` put the item from the second list first when two
  values are equal.
- `in_order`, `pre_order` and `post_order` are generators taking a
  `TreeNode` (or `None`). Values equal to a node are inserted to its right.
- `Trie` holds the letters A to Z, ignoring case; other characters raise
  `ValueError`. `search` tells whether the word is a prefix of a stored
  word, and an empty word gives `False`.
- `ArrayQueue`, `LinkedQueue`, `ArrayStack` and `LinkedStack` hold integers;
  `DequeQueue` and `DequeStack` hold any values. Reading from an empty
  container raises `QueueEmptyError` or `StackEmptyError`, both subclasses
  of `IndexError`.

## What it does not do

This is a library only: it installs no command-line tool and reads or writes
no files.