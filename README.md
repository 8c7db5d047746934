# arcadekit

Three small console games, plus a minimal toolkit for 2D actors,
components, box collisions, frame timing and key state. Prompts and
messages in the games are in Korean.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Console games

### Number baseball

    arcadekit-baseball

The computer picks four distinct digits and prints them at the start.
Enter a number; it is split into thousands, hundreds, tens and units.
Each digit in the right place is a strike (`S`); each time a digit of the
answer appears in the guess at another place counts as a ball (`B`).
No hits at all prints `OUT`. Four strikes wins and ends the game.
Input that is not a whole number stops the game with a `ValueError`.

### Drawing board

    arcadekit-draw

A 25 × 50 character board in which each cell is two characters wide.
Choose what to draw (0: point, 1: line, 2: square, 3: circle) and give the
coordinates; lines are 0 for horizontal and 1 for vertical. The screen is
cleared, the board shown, and then the board is blanked, so each drawing
appears on the next round on an empty board. The "circle" is a diamond
outline that marks only the left half of each cell. A shape that runs off
the board prints an error instead. Press Enter to continue; end input
(Ctrl-D) or Ctrl-C to quit.

### Bingo

    arcadekit-bingo

You and the computer each get a shuffled 5 × 5 board of the numbers 1–25.
Turns alternate, starting with you; a called number is marked on both
boards. You are asked again if you pick a number already marked on your
board. The computer picks from 0 to 24 among numbers not yet marked on
your board. The first complete row, column or diagonal wins; when both
boards complete a line on the same call, the computer wins.

## Library use

The game logic works without the terminal:

    from arcadekit.baseball import count_balls, count_strikes, format_result

    answer = [1, 2, 3, 4]
    guess = [1, 3, 2, 9]
    print(format_result(count_balls(answer, guess), count_strikes(answer, guess)))
    # 결과는 2B1S 입니다.

    from arcadekit.bingo import BingoBoard

    board = BingoBoard()
    for n in (1, 2, 3, 4, 5):
        board.mark(n)
    print(board.has_bingo())  # True: the unshuffled board's first row

`baseball.play(input_fn, output_fn, rng)` runs a whole game with the given
input and output functions and returns the number of guesses.
`drawboard.Board` draws into `cells` and returns text from `render()`.
`bingo.BingoGame` holds both boards, the turn and `play_number()`, which
returns the winning `Turn` or `None`.

## 2D toolkit

- `arcadekit.geometry`: the immutable `Vector2` (arithmetic, `length`,
  `normalized`, `dot`, `reflect`, `signed_angle`, and the `zero`, `up`,
  `down`, `left`, `right` directions, with y growing downwards), `Rect`,
  `make_rect`, `CenterRect`, `pt_in_rect`, `rect_in_rect`, `random_int`,
  `random_float`, `deg_to_rad` and `rad_to_deg`.
- `arcadekit.actors`: `Actor`, `Component`, `Collider`, `BoxCollider` and
  `CollisionManager`. A collider registers with its manager when its actor
  is initialised and leaves it on release. `CollisionManager.update()`
  compares every pair of colliders on active actors and calls
  `on_component_begin_overlap` / `on_component_end_overlap` on both actors
  when an overlap starts or stops. Only box-to-box checks are made; any
  other pair never collides. Colliders use the module-level
  `collision_manager` unless given one.
- `arcadekit.timing`: `TimeManager`, giving `delta_time` between updates
  and `fps` refreshed once a second; the clock can be injected.
- `arcadekit.keys`: `KeyManager` with `get_key` (held) and `get_key_down`
  (true once per press). State comes from `press` / `release` or from a
  callable given at construction.
- `arcadekit.entities`: `SpriteActor`, `Player` (W/A/S/D movement, space
  fires a `Bullet` toward `mouse_pos` and hands it to a `spawn` callback),
  `Monster` (chases a target within 200 units and its tracking angle,
  otherwise walks back to where it spawned), `Bullet` (switches off itself
  and any `Monster` it hits) and `ItemBox` (a `Player` that touches it
  switches it off).

Example:

    from arcadekit.actors import Actor, BoxCollider, CollisionManager
    from arcadekit.geometry import CenterRect

    manager = CollisionManager()
    a = Actor("a", CenterRect(0, 0, 10, 10))
    b = Actor("b", CenterRect(5, 0, 10, 10))
    for actor in (a, b):
        actor.add_component(BoxCollider(CenterRect(0, 0, 10, 10), manager))
        actor.init()
    manager.update()
    print(a.touching == {b})  # True

## What it does not do

The toolkit has no window, drawing or sound: sprites are only file paths
stored on the actor, and nothing loads or shows images. There is no scene
system and no game loop tying the toolkit together; mouse position and key
presses must be fed in by the caller.