"""A character canvas for drawing points, lines, squares and circles."""

from __future__ import annotations

import enum
from collections.abc import Sequence

ROWS = 25
COLUMNS = 50
BLANK = " "


class DrawType(enum.IntEnum):
    POINT = 0
    LINE = 1
    SQUARE = 2
    CIRCLE = 3


class LineType(enum.IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class Board:
    """A 25 by 50 grid in which each logical cell is two characters wide."""

    def __init__(self) -> None:
        self.cells = [[BLANK] * COLUMNS for _ in range(ROWS)]

    def _put(self, row: int, column: int, mark: str) -> None:
        if not (0 <= row < ROWS and 0 <= column < COLUMNS):
            raise IndexError(f"position ({row}, {column}) is outside the board")
        self.cells[row][column] = mark

    def _put_cell(self, x: int, y: int, mark: str) -> None:
        self._put(y, x * 2, mark)
        self._put(y, x * 2 + 1, mark)

    def clear(self) -> None:
        """Blank every position."""
        for row in self.cells:
            row[:] = [BLANK] * COLUMNS

    def render(self) -> str:
        """Return the board as text, one line per row."""
        return "".join("".join(row) + "\n" for row in self.cells)

    def draw_point(self, x: int, y: int) -> None:
        self._put_cell(x, y, "p")

    def draw_horizontal_line(self, y: int) -> None:
        for x in range(COLUMNS // 2):
            self._put_cell(x, y, "l")

    def draw_vertical_line(self, x: int) -> None:
        for y in range(ROWS):
            self._put_cell(x, y, "l")

    def draw_square(self, x1: int, y1: int, x2: int, y2: int) -> None:
        for x in range(x1, x2 + 1):
            self._put_cell(x, y1, "s")
            self._put_cell(x, y2, "s")
        for y in range(y1, y2 + 1):
            self._put_cell(x1, y, "s")
            self._put_cell(x2, y, "s")

    def draw_circle(self, x: int, y: int, radius: int) -> None:
        """Draw a diamond outline centred on (x, y), marking the left half of each cell."""
        left, right = x - radius, x + radius
        upper = lower = y
        for _ in range(radius + 1):
            for row in (upper, lower):
                self._put(row, left * 2, "c")
                self._put(row, right * 2, "c")
            left += 1
            right -= 1
            upper -= 1
            lower += 1


def _ask(prompt: str) -> int:
    return int(input(prompt))


def _draw_from_prompts(board: Board, draw_type: int) -> None:
    if draw_type == DrawType.POINT:
        x = _ask("그릴 x 좌표를 입력해주세요.")
        y = _ask("그릴 y 좌표를 입력해주세요.")
        board.draw_point(x, y)
    elif draw_type == DrawType.LINE:
        line_type = _ask("라인 타입을 입력해주세요. (0: 가로, 1: 세로)")
        if line_type == LineType.HORIZONTAL:
            board.draw_horizontal_line(_ask("그릴 y 좌표를 입력해주세요."))
        elif line_type == LineType.VERTICAL:
            board.draw_vertical_line(_ask("그릴 x 좌표를 입력해주세요."))
    elif draw_type == DrawType.SQUARE:
        x1 = _ask("그릴 x 좌표를 입력해주세요.")
        y1 = _ask("그릴 y 좌표를 입력해주세요.")
        x2 = _ask("그릴 x 좌표를 입력해주세요.")
        y2 = _ask("그릴 y 좌표를 입력해주세요.")
        board.draw_square(x1, y1, x2, y2)
    elif draw_type == DrawType.CIRCLE:
        x = _ask("그릴 x 좌표를 입력해주세요.")
        y = _ask("그릴 y 좌표를 입력해주세요.")
        radius = _ask("반지름을 입력해주세요. (x, y 보다 작은 값 입력)")
        board.draw_circle(x, y, radius)


def main(argv: Sequence[str] | None = None) -> int:
    """Draw shapes on the terminal until input ends."""
    board = Board()
    try:
        while True:
            print("\033[2J\033[H", end="")
            print(board.render(), end="")
            board.clear()
            draw_type = _ask("그릴 유형을 선택해주세요. (0: 점, 1: 라인, 2: 네모, 3: 원)")
            try:
                _draw_from_prompts(board, draw_type)
            except IndexError as error:
                print(error)
            input("Press Enter to continue...")
    except (EOFError, KeyboardInterrupt):
        return 0


if __name__ == "__main__":
    raise SystemExit(main())