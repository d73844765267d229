"""Binary search trees with iterators, complex numbers, matrices and tic-tac-toe."""

__version__ = "0.1.0"

__all__ = [
    "balance",
    "bintree",
    "complexnum",
    "iterator",
    "matrix",
    "tictactoe",
    "vec2d",
]