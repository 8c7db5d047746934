import pytest

from arcadekit.keys import KEYMAX, VK_SPACE, KeyManager


def test_get_key_follows_press_and_release():
    keys = KeyManager()
    assert keys.get_key("W") is False
    keys.press("W")
    assert keys.get_key("W") is True
    keys.release("W")
    assert keys.get_key("W") is False


def test_character_and_code_name_the_same_key():
    keys = KeyManager()
    keys.press("A")
    assert keys.get_key(ord("A")) is True
    keys.press(VK_SPACE)
    assert keys.get_key(" ") is True


def test_get_key_down_fires_once_per_press():
    keys = KeyManager()
    keys.press(VK_SPACE)
    assert keys.get_key_down(VK_SPACE) is True
    assert keys.get_key_down(VK_SPACE) is False
    keys.release(VK_SPACE)
    assert keys.get_key_down(VK_SPACE) is False
    keys.press(VK_SPACE)
    assert keys.get_key_down(VK_SPACE) is True


def test_init_forgets_keys_already_seen():
    keys = KeyManager()
    keys.press("D")
    assert keys.get_key_down("D") is True
    keys.init()
    assert keys.get_key_down("D") is True


def test_custom_state_source():
    held = {ord("S")}
    keys = KeyManager(state=lambda code: code in held)
    assert keys.get_key("S") is True
    assert keys.get_key("W") is False
    assert keys.get_key_down("S") is True
    held.clear()
    assert keys.get_key("S") is False


@pytest.mark.parametrize("key", [KEYMAX, -1, "WA", ""])
def test_invalid_keys_are_rejected(key):
    keys = KeyManager()
    with pytest.raises(ValueError):
        keys.get_key(key)