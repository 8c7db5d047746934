"""Five by five bingo between a player and the computer."""

from __future__ import annotations

import enum
import random
from collections.abc import Sequence

SIZE = 5
CELLS = SIZE * SIZE

_LINES: list[tuple[int, ...]] = (
    [tuple(range(row * SIZE, row * SIZE + SIZE)) for row in range(SIZE)]
    + [tuple(range(col, CELLS, SIZE)) for col in range(SIZE)]
    + [tuple(range(0, CELLS, SIZE + 1)), tuple(range(20, 3, -(SIZE - 1)))]
)


class Turn(enum.Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    NONE = "none"


class BingoBoard:
    """The numbers 1 to 25 laid out in a grid, some of them marked."""

    def __init__(self) -> None:
        self.numbers = list(range(1, CELLS + 1))
        self.marked: set[int] = set()

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self.numbers)

    def mark(self, number: int) -> None:
        """Mark the cell that holds the number, if any."""
        self.marked.update(i for i, n in enumerate(self.numbers) if n == number)

    def is_marked(self, number: int) -> bool:
        return any(self.numbers[i] == number for i in self.marked)

    def has_bingo(self) -> bool:
        """True when a full row, column or diagonal is marked."""
        return any(all(i in self.marked for i in line) for line in _LINES)

    def render(self) -> str:
        parts = []
        for i, number in enumerate(self.numbers):
            parts.append(" #" if i in self.marked else f"{number:>2}")
            parts.append("\n" if i % SIZE == SIZE - 1 else "  ")
        return "".join(parts)


class BingoGame:
    """Two shuffled boards sharing every called number."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.player_board = BingoBoard()
        self.computer_board = BingoBoard()
        self.player_board.shuffle(self.rng)
        self.computer_board.shuffle(self.rng)
        self.turn = Turn.PLAYER
        self.playing = True
        self.selected = 0

    def computer_pick(self) -> int:
        """Pick a number from 0 to 24 not yet marked on the player's board."""
        while True:
            number = self.rng.randrange(CELLS)
            if not self.player_board.is_marked(number):
                return number

    def play_number(self, number: int) -> Turn | None:
        """Call a number on both boards and return the winner, if any."""
        self.selected = number
        self.player_board.mark(number)
        self.computer_board.mark(number)
        winner = self.winner()
        if winner is not None:
            self.playing = False
        return winner

    def change_turn(self) -> None:
        if self.turn is Turn.PLAYER:
            self.turn = Turn.COMPUTER
        elif self.turn is Turn.COMPUTER:
            self.turn = Turn.PLAYER
        else:
            self.turn = Turn.NONE

    def winner(self) -> Turn | None:
        """The computer wins ties because its board is checked first."""
        if self.computer_board.has_bingo():
            return Turn.COMPUTER
        if self.player_board.has_bingo():
            return Turn.PLAYER
        return None


def _player_pick(game: BingoGame) -> int:
    while True:
        number = int(input("빙고 번호를 선택해주세요."))
        if not game.player_board.is_marked(number):
            return number


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game on the terminal."""
    game = BingoGame()
    try:
        while game.playing:
            print("[플레이어 빙고판]")
            print(game.player_board.render())
            print("[컴퓨터 빙고판]")
            print(game.computer_board.render(), end="")

            if game.turn is Turn.PLAYER:
                number = _player_pick(game)
            else:
                number = game.computer_pick()

            print(f"선택 번호는 {number} 입니다!")
            winner = game.play_number(number)
            if winner is Turn.COMPUTER:
                print("컴퓨터가 1BingGo를 완성하여 승리했습니다!!!")
            elif winner is Turn.PLAYER:
                print("플레이어가 1BingGo를 완성하여 승리했습니다!!!")
            game.change_turn()
            if game.playing:
                print("\033[2J\033[H", end="")
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())