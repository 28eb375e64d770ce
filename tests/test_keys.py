import pytest

from checkers.keys import (
    STORED_GAME_KEY_PREFIX,
    SYSTEM_INFO_KEY,
    key_prefix,
    stored_game_key,
)


def test_key_prefix_stored_game():
    assert key_prefix(STORED_GAME_KEY_PREFIX) == b"StoredGame/value/"


def test_key_prefix_system_info():
    assert key_prefix(SYSTEM_INFO_KEY) == b"SystemInfo-value-"


@pytest.mark.parametrize("index", ["0", "1", "1024", "jeu"])
def test_stored_game_key_shape(index):
    key = stored_game_key(index)
    assert key.startswith(index.encode())
    assert key.endswith(b"/")
    assert len(key) == len(index.encode()) + 1


def test_stored_game_keys_distinct():
    keys = {stored_game_key(str(i)) for i in range(20)}
    assert len(keys) == 20


def test_stored_game_key_utf8():
    assert stored_game_key("é").decode("utf-8")[:-1] == "é"