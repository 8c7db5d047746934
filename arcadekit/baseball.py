"""Number baseball: guess four distinct digits from ball and strike hints."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

DIGITS = 4
PROMPT = "숫자를 입력해주세요."
OUT_MESSAGE = "결과는 OUT! 입니다"
WIN_MESSAGE = "정답입니다!!"


def create_answer(rng: random.Random) -> list[int]:
    """Draw four digits until all of them differ."""
    while True:
        answer = [rng.randrange(10) for _ in range(DIGITS)]
        if len(set(answer)) == DIGITS:
            return answer


def split_guess(number: int) -> list[int]:
    """Split a number into thousands, hundreds, tens and units.

    Negative numbers keep their sign on every part, as truncating
    integer division does.
    """
    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    parts = [
        magnitude // 1000,
        (magnitude % 1000) // 100,
        (magnitude % 100) // 10,
        magnitude % 10,
    ]
    return [sign * part for part in parts]


def count_balls(answer: Sequence[int], guess: Sequence[int]) -> int:
    """Count digits of the answer that appear in the guess at another place."""
    return sum(
        1
        for i, wanted in enumerate(answer)
        for j, given in enumerate(guess)
        if i != j and wanted == given
    )


def count_strikes(answer: Sequence[int], guess: Sequence[int]) -> int:
    """Count digits that are in the right place."""
    return sum(1 for wanted, given in zip(answer, guess) if wanted == given)


def format_result(balls: int, strikes: int) -> str:
    """Describe the outcome of one guess."""
    if balls == 0 and strikes == 0:
        return OUT_MESSAGE
    if strikes == DIGITS:
        return WIN_MESSAGE
    return f"결과는 {balls}B{strikes}S 입니다."


def play(
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], object] = print,
    rng: random.Random | None = None,
) -> int:
    """Run one game and return the number of guesses it took."""
    rng = rng or random.Random()
    answer = create_answer(rng)
    output_fn("".join(str(digit) for digit in answer))

    attempts = 0
    while True:
        output_fn(PROMPT)
        guess = split_guess(int(input_fn()))
        attempts += 1
        strikes = count_strikes(answer, guess)
        output_fn(format_result(count_balls(answer, guess), strikes))
        output_fn("")
        if strikes == DIGITS:
            return attempts


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game on the terminal."""
    try:
        play(input, print, random.Random())
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())