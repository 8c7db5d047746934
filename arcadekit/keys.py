"""Keyboard state: whether a key is held and whether it was just pressed."""

from __future__ import annotations

from collections.abc import Callable

KEYMAX = 256
VK_SPACE = 0x20

Key = int | str


def _key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"key must be a single character, got {key!r}")
        code = ord(key)
    else:
        code = key
    if not 0 <= code < KEYMAX:
        raise ValueError(f"key code {code} is outside 0..{KEYMAX - 1}")
    return code


class KeyManager:
    """Answers key queries from a state source.

    By default the state is the set of keys passed to ``press`` and not yet
    to ``release``; a callable taking a key code may be given instead.
    """

    def __init__(self, state: Callable[[int], bool] | None = None) -> None:
        self._pressed: set[int] = set()
        self._state = state if state is not None else self._pressed.__contains__
        self._key_down: set[int] = set()

    def press(self, key: Key) -> None:
        self._pressed.add(_key_code(key))

    def release(self, key: Key) -> None:
        self._pressed.discard(_key_code(key))

    def init(self) -> None:
        """Forget which keys were seen going down."""
        self._key_down.clear()

    def get_key_down(self, key: Key) -> bool:
        """True only on the first query after the key went down."""
        code = _key_code(key)
        if self._state(code):
            if code not in self._key_down:
                self._key_down.add(code)
                return True
        else:
            self._key_down.discard(code)
        return False

    def get_key(self, key: Key) -> bool:
        """True while the key is held."""
        return bool(self._state(_key_code(key)))


key_manager = KeyManager()