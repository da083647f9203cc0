# algokit

A small collection of classic algorithms and data structures in plain Python.
It depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.trees` | `BSTNode` (`insert`, `find`, `traverse_inorder`), `CartesianTreeNode`, `build_cartesian_tree` |
| `algokit.containers` | `DSU`, `Queue`, `Stack` |
| `algokit.dynamic_programming` | `coin_change`, `coin_row`, `fibonacci_iterative`, `fibonacci_recursive`, `kadane`, `bounded_knapsack`, `unbounded_knapsack`, `longest_increasing_subsequence` |
| `algokit.linear_algebra` | `Matrix` with `+`, `-`, unary `-`, `*` (scalar or matrix), `@`, `transpose`, `hadamard`, `trace`, `determinant`, `gaussian_elimination` |
| `algokit.game_theory` | `grundy_numbers` |
| `algokit.geometry` | `picks_theorem` |
| `algokit.number_theory` | `gcd`, `gcd_list` |
| `algokit.miscellaneous` | `subsets`, `gray_code`, `fractional_knapsack` |
| `algokit.sorting` | `bubble_sort`, `bucket_sort`, `counting_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |

## Examples

### Dynamic programming

```python
from algokit.dynamic_programming import (
    coin_change, coin_row, fibonacci_iterative, kadane,
    bounded_knapsack, longest_increasing_subsequence,
)

coin_change([1, 3, 4], 6)                          # [3, 3]
coin_row([5, 1, 2, 10, 6, 2])                      # ([5, 10, 2], 17)
fibonacci_iterative(40)                            # 102334155
kadane([-3, 1, -8, 12, 0, -3, 5, -9, 4])           # 14
bounded_knapsack([2, 1, 3, 2], [12, 10, 20, 15], 5)  # 37
longest_increasing_subsequence([2, 0, 5, 3, 1, 4, 4, 5, 4, 6])  # [2, 3, 4, 5, 6]
```

`coin_change` raises `ValueError` when the amount cannot be made; `coin_row`,
`kadane` and `longest_increasing_subsequence` raise `ValueError` on empty input.

### Matrices

```python
from algokit.linear_algebra import Matrix

a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
b = Matrix.from_rows([[4.0, 5.0], [6.0, 7.0]])
product = a @ b                # same as a * b
product.trace()                # 59.0
product.determinant()          # 4.0
1.5 * a                        # scalar multiple
a[0, 1]                        # 2.0
Matrix.eye(3).transpose() == Matrix.eye(3)  # True
```

Shape mismatches raise `ValueError`; out-of-range indices raise `IndexError`.
`gaussian_elimination` works in place and returns `None`.

### Containers and trees

```python
from algokit.containers import Queue, Stack
from algokit.trees import BSTNode, build_cartesian_tree

q = Queue()
q.enqueue(37)
q.enqueue(42)
q.dequeue()                    # 37 (raises IndexError when empty)
q.peek()                       # 42 (None when empty)

s = Stack()
s.push(37)
s.push(42)
s.pop()                        # 42 (None when empty)
s.peek()                       # 37 (raises IndexError when empty)

tree = BSTNode(5)
for value in [4, 6, 8, 2, -1, 0, 3]:
    tree.insert(value)
tree.traverse_inorder()        # [-1, 0, 2, 3, 4, 5, 6, 8]
tree.find(3)                   # True

build_cartesian_tree([3, 5, 2, 1, 4]).value  # 5
```

### Sorting

The comparison sorts and `bucket_sort` sort a mutable sequence in place and
return `None`; `counting_sort` returns a new list and takes an exclusive upper
bound.

```python
from algokit.sorting import merge_sort, counting_sort

values = [3, -2, 9, 0, 12, -5, 8, 0]
merge_sort(values)             # values == [-5, -2, 0, 0, 3, 8, 9, 12]
counting_sort([3, -2, 9, 0], -5, 15)  # [-2, 0, 3, 9]
```

### Everything else

```python
from algokit.game_theory import grundy_numbers
from algokit.geometry import picks_theorem
from algokit.number_theory import gcd, gcd_list
from algokit.miscellaneous import subsets, gray_code, fractional_knapsack

grundy_numbers(6, [1, 4])      # [0, 1, 0, 1, 2, 0, 1]
picks_theorem(22, 24)          # 33
gcd(-144, 225)                 # 9
gcd_list([200, 500, 6000])     # 100
subsets(["A", "B"])            # [[], ['A'], ['B'], ['A', 'B']]
gray_code(2)                   # ['00', '01', '11', '10']
fractional_knapsack([30.0, 30.0, 40.0, 1.0], [5.0, 80.0, 50.0, 18.0], 50.0)  # 121.75
```

## What it does not do

- `DSU` only sets up each element as its own parent (`parents`, `len()`); it
  has no union or find operations.
- There are no string-matching or convex-hull algorithms.
- The knapsack functions return the best value only, not the chosen items.
- It is a library only; there is no command-line tool.