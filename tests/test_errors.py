import pytest

from checkers.errors import (
    CheckersError,
    CreatorNotPlayerError,
    GameFinishedError,
    GameNotFoundError,
    GameNotParseableError,
    InvalidAddressError,
    InvalidBlackError,
    InvalidGameIndexError,
    InvalidPositionIndexError,
    InvalidRedError,
    MoveAbsentError,
    NotPlayerTurnError,
    WrongMoveError,
)

ALICE = "cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d3"


def test_game_not_found_message():
    assert str(GameNotFoundError("2")) == "2: game by id not found"


def test_creator_not_player_message():
    assert str(CreatorNotPlayerError(ALICE)) == ALICE + ": message creator is not a player"


def test_not_player_turn_message():
    assert str(NotPlayerTurnError("{red}")) == "{red}: player tried to play out of turn"


def test_wrong_move_message():
    err = WrongMoveError("Already piece at destination position: {0 1}")
    assert str(err) == "Already piece at destination position: {0 1}: wrong move"


def test_not_parseable_puts_message_first():
    err = GameNotParseableError("invalid board string: not a board")
    assert str(err) == "game cannot be parsed: invalid board string: not a board"


def test_invalid_red_message():
    err = InvalidRedError("notanaddress: decoding bech32 failed: invalid separator index -1")
    assert str(err) == (
        "red address is invalid: notanaddress: decoding bech32 failed: invalid separator index -1"
    )


def test_without_detail_only_message():
    assert str(GameFinishedError()) == "game is already finished"


@pytest.mark.parametrize(
    "cls, code",
    [
        (InvalidBlackError, 1100),
        (InvalidRedError, 1101),
        (GameNotParseableError, 1102),
        (InvalidGameIndexError, 1103),
        (InvalidPositionIndexError, 1104),
        (MoveAbsentError, 1105),
        (GameNotFoundError, 1106),
        (CreatorNotPlayerError, 1107),
        (NotPlayerTurnError, 1108),
        (WrongMoveError, 1109),
        (GameFinishedError, 1110),
    ],
)
def test_codes(cls, code):
    assert cls.code == code
    assert cls.codespace == "checkers"


def test_invalid_address_is_catchable_as_base():
    err = InvalidAddressError("invalid creator address (x)")
    assert issubclass(InvalidAddressError, CheckersError)
    assert err.detail == "invalid creator address (x)"
    assert "invalid creator address (x)" in str(err)