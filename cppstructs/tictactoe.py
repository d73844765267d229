"""Tic-tac-toe on boards of any size with a configurable winning run."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Sequence, TextIO

from cppstructs.vec2d import Vec2d

MAX_BOARD_SIZE = 140
EMPTY = "_"

_DIRECTIONS = (Vec2d(0, 1), Vec2d(1, 1), Vec2d(1, 0), Vec2d(1, -1))


class GameState(IntEnum):
    PLAYING = 0
    TIE = 1
    X_WON = 2
    O_WON = 3


@dataclass
class Piece:
    """A marker standing on the board."""

    position: Vec2d
    is_cross: bool
    placed: bool = False

    @property
    def marker(self) -> str:
        return "X" if self.is_cross else "O"

    def place_at(self, position: Vec2d) -> None:
        self.position = position
        self.placed = True


@dataclass(frozen=True)
class Placement:
    """A request to put a cross or a nought at a position."""

    position: Vec2d
    is_cross: bool


class TicTacToe:
    """Game state: the pieces placed so far and whose turn it is."""

    def __init__(self, board_size: Vec2d, in_a_row: int) -> None:
        self.board_size = board_size
        self.in_a_row = in_a_row
        self._pieces: dict[Vec2d, Piece] = {}
        self._cross_next = True

    @property
    def next_player(self) -> bool:
        """True when X moves next, False when O does."""
        return self._cross_next

    @property
    def next_marker(self) -> str:
        return "X" if self._cross_next else "O"

    def occupied(self, position: Vec2d) -> str:
        """Return the marker at ``position``, or ``_`` if empty or off the board."""
        if position.within(self.board_size):
            piece = self._pieces.get(position)
            if piece is not None:
                return piece.marker
        return EMPTY

    def place_piece(self, placement: Placement) -> None:
        """Place a piece; raise ValueError if the move is not allowed."""
        if placement.is_cross != self._cross_next:
            raise ValueError("It is not this player's turn")
        if not placement.position.within(self.board_size):
            raise ValueError("Position is outside the board")
        if placement.position in self._pieces:
            raise ValueError("Position is already occupied")
        self._pieces[placement.position] = Piece(
            placement.position, placement.is_cross, placed=True
        )
        self._cross_next = not self._cross_next

    def _has_run(self, piece: Piece, direction: Vec2d, marker: str) -> bool:
        if piece.marker != marker:
            return False
        run = 0
        for step in range(-self.in_a_row + 1, self.in_a_row):
            if self.occupied(piece.position + direction * step) == marker:
                run += 1
                if run == self.in_a_row:
                    return True
            else:
                run = 0
        return False

    def _wins(self, marker: str) -> bool:
        return any(
            self._has_run(piece, direction, marker)
            for piece in self._pieces.values()
            for direction in _DIRECTIONS
        )

    def game_state(self) -> GameState:
        if self._wins("X"):
            return GameState.X_WON
        if self._wins("O"):
            return GameState.O_WON
        if len(self._pieces) == self.board_size.x * self.board_size.y:
            return GameState.TIE
        return GameState.PLAYING

    def __str__(self) -> str:
        width = len(str(self.board_size.x))
        header = f"{0:>{width + 3}}" + "".join(
            f"{column:>3}" for column in range(1, self.board_size.x)
        )
        lines = ["Current Board:", header]
        for y in range(self.board_size.y):
            cells = "".join(
                f"{self.occupied(Vec2d(x, y))}  " for x in range(self.board_size.x)
            )
            lines.append(f"{y:>{width}}: {cells}")
        return "\n".join(lines) + "\n"


def _atoi(text: Optional[str]) -> int:
    if text is None:
        return 0
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


_OUTCOMES = {
    GameState.TIE: "Nope, it's a tie.",
    GameState.X_WON: "X won!",
    GameState.O_WON: "O won!",
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("board_size", nargs="?", help="side of the square board")
    parser.add_argument("winning_length", nargs="?", help="markers in a row to win")
    args = parser.parse_args(argv)

    board_size = 3
    winning_length = 3
    requested_size = _atoi(args.board_size)
    if 3 < requested_size < MAX_BOARD_SIZE:
        board_size = requested_size
    requested_length = _atoi(args.winning_length)
    if 3 < requested_length <= board_size:
        winning_length = requested_length

    game = TicTacToe(Vec2d(board_size, board_size), winning_length)
    print(f"Get {winning_length} in a row to win!")

    tokens = _tokens(sys.stdin)
    while (state := game.game_state()) is GameState.PLAYING:
        print(game)
        print(f"Enter your next {{X and Y}} position for {game.next_marker}")
        try:
            x_text, y_text = next(tokens), next(tokens)
        except StopIteration:
            print("Input ended before the game was decided.")
            return 1
        try:
            position = Vec2d(int(x_text), int(y_text))
            game.place_piece(Placement(position, game.next_player))
        except ValueError:
            print("\nPosition off the charts, or other oddities. Try again?\n")

    print("Final board!")
    print(game, end="")
    print("\n\nWinner? ", end="")
    print(_OUTCOMES[state] + "\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())