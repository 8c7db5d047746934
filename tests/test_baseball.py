import random

import pytest

from arcadekit.baseball import (
    count_balls,
    count_strikes,
    create_answer,
    format_result,
    play,
    split_guess,
)


@pytest.mark.parametrize("seed", range(50))
def test_create_answer_has_four_distinct_digits(seed):
    answer = create_answer(random.Random(seed))
    assert len(answer) == 4
    assert len(set(answer)) == 4
    assert all(0 <= digit <= 9 for digit in answer)


def test_split_guess_full_number():
    assert split_guess(1234) == [1, 2, 3, 4]


def test_split_guess_pads_small_numbers_with_zeros():
    assert split_guess(7) == [0, 0, 0, 7]


def test_split_guess_keeps_sign_on_negative_parts():
    assert split_guess(-1234) == [-1, -2, -3, -4]


def test_exact_guess_is_all_strikes():
    answer = [1, 2, 3, 4]
    assert count_strikes(answer, answer) == 4
    assert count_balls(answer, answer) == 0


def test_reversed_guess_is_all_balls():
    answer = [1, 2, 3, 4]
    guess = [4, 3, 2, 1]
    assert count_strikes(answer, guess) == 0
    assert count_balls(answer, guess) == 4


def test_mixed_guess():
    answer = [1, 2, 3, 4]
    guess = [1, 2, 4, 3]
    assert count_strikes(answer, guess) == 2
    assert count_balls(answer, guess) == 2


@pytest.mark.parametrize("seed", range(20))
def test_balls_and_strikes_never_exceed_digit_count(seed):
    rng = random.Random(seed)
    answer = create_answer(rng)
    guess = create_answer(rng)
    assert count_balls(answer, guess) + count_strikes(answer, guess) <= 4


def test_format_out():
    assert format_result(0, 0) == "결과는 OUT! 입니다"


def test_format_win():
    assert format_result(0, 4) == "정답입니다!!"


def test_format_partial():
    assert format_result(1, 2) == "결과는 1B2S 입니다."


def test_play_ends_on_correct_guess():
    answer = create_answer(random.Random(5))
    answer_text = "".join(str(d) for d in answer)
    inputs = iter(["0", answer_text])
    outputs = []
    attempts = play(lambda: next(inputs), outputs.append, random.Random(5))
    assert attempts == 2
    assert outputs[0] == answer_text
    assert outputs.count("숫자를 입력해주세요.") == 2
    assert "정답입니다!!" in outputs


def test_play_rejects_non_numeric_input():
    inputs = iter(["abc"])
    with pytest.raises(ValueError):
        play(lambda: next(inputs), lambda text: None, random.Random(1))