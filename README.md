# cppstructs

A handful of small, self-contained data structures and a terminal game:

- `cppstructs.bintree`: an unbalanced binary search tree (`BinarySearchTree`,
  `Node`) with the measures `max_height`, `min_height`, `size` and
  `is_balanced`.
- `cppstructs.iterator`: in-order and reverse in-order iteration over tree
  nodes (`InorderIterator`, `begin`, `end`, `rbegin`, `rend`).
- `cppstructs.balance`: an experiment measuring how tall random binary search
  trees grow (`basic_experiment`, `improved_experiment`, `summarize`,
  `HeightStats`).
- `cppstructs.complexnum`: a complex number type (`Complex`, `imaginary`).
- `cppstructs.matrix`: a dense row-major matrix (`Matrix`, `identity`).
- `cppstructs.vec2d` and `cppstructs.tictactoe`: a 2-D vector (`Vec2d`) and a
  tic-tac-toe game on a board of any size (`TicTacToe`, `Placement`, `Piece`,
  `GameState`).

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Binary search tree

```python
from cppstructs.bintree import BinarySearchTree

tree = BinarySearchTree()
tree.insert(10, 2)
tree.insert(20, 3)
tree.insert(9, 1)
tree.insert(7, 6)
tree.insert(8, 8)

tree.find(8)          # 8
len(tree)             # 5
tree.max_height()     # 4
tree.min_height()     # 2
tree.is_balanced()    # False

tree.edit(8, 80)      # change the data stored under a key
tree.remove(9)
9 in tree             # False
tree.find(9)          # raises KeyError
tree.clear()          # empty the tree
```

Inserting an existing key replaces its data. `find`, `edit` and `remove` raise
`KeyError` for a missing key. The tree's root node is `tree.root`; the
module-level functions `max_height`, `min_height`, `size` and `is_balanced`
work on any `Node` (or `None` for an empty tree).

## In-order iteration

```python
from cppstructs.iterator import begin, end, rbegin

[node.data for node in begin(tree.root)]    # ascending key order
[node.data for node in rbegin(tree.root)]   # descending key order

cursor = begin(tree.root)
while cursor != end():
    print(cursor.node().key)
    cursor.advance()
```

`begin(root)` starts at the smallest key and `rbegin(root)` at the largest;
`end()` and `rend()` are the positions past the last node. An
`InorderIterator` is a regular Python iterator over nodes, and also a cursor:
`node()` returns the current node (raising `IndexError` past the end),
`advance()` moves on, `copy()` gives an independent iterator at the same
position and `swap(other)` exchanges positions. Two iterators are equal when
they stand on the same node, or are both past the end.

## Complex numbers

```python
from cppstructs.complexnum import Complex, imaginary

c = Complex(6, 8) / Complex(2, 2)
str(c)                       # "(3.5,0.5)"
c.real, c.imag               # (3.5, 0.5)
abs(Complex(3, 4))           # 5.0
z = -2.5 + imaginary(10.4)   # Complex(-2.5, 10.4)
Complex.parse("(5.0,10.0)")  # also accepts "(5)" and "5"
```

Numbers mix freely with `int` and `float` in arithmetic. Division by zero
raises `ZeroDivisionError`; `<` compares by absolute value.

## Matrices

```python
from cppstructs.matrix import Matrix, identity

m = Matrix.from_list([1, 2, 3, 4])   # 2 x 2, the length must be a perfect square
m[0, 1]                               # 2
print(m)
# [ 1 2
#   3 4 ]

m.insert_row(1)        # a row of zeros before row 1
m.append_column(0)     # a column of zeros after column 0
m.remove_column(0)
identity(3)
Matrix(2, 3)           # 2 x 3 of zeros; Matrix.square(3) is 3 x 3
Matrix.parse("1 2\n3 4")
```

`+`, `-`, `*` and their in-place forms raise `ValueError` for mismatched
dimensions; out-of-range indices and row or column positions raise
`IndexError`. `reset()` empties the matrix, and iterating yields the elements
in row-major order.

## Tic-tac-toe

```python
from cppstructs.tictactoe import GameState, Placement, TicTacToe
from cppstructs.vec2d import Vec2d

game = TicTacToe(Vec2d(3, 3), 3)
game.place_piece(Placement(Vec2d(0, 0), game.next_player))
game.occupied(Vec2d(0, 0))    # "X"
game.game_state()             # GameState.PLAYING
print(game)
```

X always moves first. `place_piece` raises `ValueError` when it is the other
player's turn, the position is off the board or the square is taken.

## Commands

Play tic-tac-toe in the terminal:

```
cppstructs-tictactoe
cppstructs-tictactoe 5 4
```

The board is 3 by 3 with 3 in a row to win unless a board size between 4 and
139 is given; a winning length is taken only if it is greater than 3 and no
more than the board size. Enter each move as an X and a Y position. If input
ends before the game is decided, the command exits with status 1.

Print the height statistics of randomly built binary search trees:

```
cppstructs-balance
cppstructs-balance --count 500 --trials 50 --seed 1
```

The defaults (9000 keys, 800 trials) take a while to run.

Print a sample tree in order, in reverse order and through the iterators:

```
cppstructs-inorder
```

## What it does not do

The trees are not self-balancing, and the tic-tac-toe game is for two human
players at one terminal: there is no computer opponent and no saving of games.