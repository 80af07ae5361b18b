# algonotes

A small collection of classic algorithms and data structures, written as plain
Python functions and classes. It has no dependencies outside the standard
library.

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
| `algonotes.textsearch` | `build_lps`, `kmp_search`, `longest_common_subsequence` |
| `algonotes.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `heap_sort`, `sort_by_length_desc`, `sort_by_distance` |
| `algonotes.searching` | `Book`, `same_title`, `linear_search`, `contains`, `lower_bound`, `upper_bound`, `count_sorted` |
| `algonotes.combinatorics` | `next_permutation`, `rotate`, `distinct_permutations` |
| `algonotes.trie` | `Trie` |
| `algonotes.change` | `make_change`, `DEFAULT_COINS` |
| `algonotes.graph` | `WeightedGraph` |
| `algonotes.heaps` | `Person`, `youngest`, `drain_max`, `drain_min` |

## Text search

```python
from algonotes.textsearch import build_lps, kmp_search, longest_common_subsequence

build_lps("abab")                          # [0, 0, 1, 2]
kmp_search("abababa", "aba")               # [0, 2, 4]  (overlapping matches)
longest_common_subsequence("abcde", "ace") # 3
```

`kmp_search` raises `ValueError` for an empty pattern.

## Sorting

Every sort returns a new list and leaves its input untouched.

```python
from algonotes.sorting import (
    bubble_sort, insertion_sort, merge_sort, heap_sort,
    sort_by_length_desc, sort_by_distance,
)

bubble_sort([24, 11, 99, 23, 55, 64])           # [11, 23, 24, 55, 64, 99]
bubble_sort([3, 1, 2], reverse=True)            # [3, 2, 1]
bubble_sort(["bb", "a", "ccc"], key=len)        # ["a", "bb", "ccc"]
insertion_sort([3, 1, 2])                       # [1, 2, 3]
merge_sort([5, 4, 3, 2, 1])                     # [1, 2, 3, 4, 5]
heap_sort([12, 11, 13, 5, 6, 7])                # [5, 6, 7, 11, 12, 13]
sort_by_length_desc(["bb", "a", "ccc", "aa"])   # ["ccc", "aa", "bb", "a"]
sort_by_distance([(3, 4), (0, 5), (1, 1)])      # [(1, 1), (0, 5), (3, 4)]
```

`bubble_sort` is stable. `sort_by_distance` orders points by squared distance
from the origin and breaks ties by the x coordinate.

## Searching

```python
from algonotes.searching import (
    Book, same_title, linear_search, contains,
    lower_bound, upper_bound, count_sorted,
)

linear_search([1, 2, 5, 3], 5)        # 2
linear_search([1, 2, 5, 3], 4)        # None

shelf = [Book("C++", 100), Book("Java", 120), Book("Python", 130)]
linear_search(shelf, Book("Java", 999), same_title)   # 1

values = [20, 30, 40, 40, 40, 40, 50, 100, 1100]
contains(values, 40)                  # True
lower_bound(values, 40)               # 2
upper_bound(values, 40)               # 6
count_sorted(values, 40)              # 4
```

`linear_search` takes an optional `matches(item, key)` predicate, equality by
default. The bound functions expect an ascending sequence.

## Permutations and rotation

```python
from algonotes.combinatorics import next_permutation, rotate, distinct_permutations

next_permutation([1, 2, 3])           # [1, 3, 2]
next_permutation([3, 2, 1])           # [1, 2, 3]  (wraps around)
rotate([10, 20, 30, 40, 50], 2)       # [30, 40, 50, 10, 20]
distinct_permutations("aab")          # ["aab", "aba", "baa"]
```

`rotate` raises `ValueError` unless `0 <= k <= len(seq)`.

## Trie

```python
from algonotes.trie import Trie

words = Trie(["a", "apple", "news", "not", "hello"])
words.insert("newt")
"apple" in words     # True
"app" in words       # False: only whole words count
```

## Coin change

```python
from algonotes.change import make_change

make_change(168)                      # [100, 50, 10, 5, 2, 1]
make_change(7, [1, 5])                # [5, 1, 1]
```

The default coins are `DEFAULT_COINS`. The largest coin that fits is always
taken; `ValueError` is raised when a coin is not positive or when the
remainder is smaller than every coin.

## Weighted graph

```python
from algonotes.graph import WeightedGraph

graph = WeightedGraph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 7)
graph.neighbours(1)      # [(0, 4), (2, 7)]
len(graph)               # 3
print(graph.format())
# Linked list 0 -> (1,4),
# Linked list 1 -> (0,4),(2,7),
# Linked list 2 -> (1,7),
```

Edges are undirected. Nodes outside `0 .. size - 1` raise `IndexError`.

## Heaps

```python
from algonotes.heaps import Person, youngest, drain_max, drain_min

youngest([Person("Ana", 30), Person("Ben", 22), Person("Cy", 41)], 2)
# [Person(name='Ben', age=22), Person(name='Ana', age=30)]
drain_max([3, 1, 2])     # [3, 2, 1]
drain_min([3, 1, 2])     # [1, 2, 3]
```

`youngest` takes three people by default and raises `ValueError` when `k` is
negative or larger than the number of people.

## What this package does not do

It is a library only: there is no command-line program. Every function takes
its inputs as arguments and returns its result; nothing reads from standard
input or prints on its own.