import pytest

from checkers.address import acc_address_from_bech32
from checkers.errors import GameNotParseableError, InvalidBlackError, InvalidRedError
from checkers.rules import BLACK_PLAYER, NO_PLAYER, PIECE_STRINGS, new_game
from checkers.stored_game import (
    GenesisState,
    Params,
    StoredGame,
    SystemInfo,
    default_genesis,
    default_params,
)

ALICE = "cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d3"
BOB = "cosmos1xyxs3skf3f4jfqeuv89yyaqvjc6lffavxqhc8g"


def stored_game_1() -> StoredGame:
    return StoredGame(
        black=ALICE,
        red=BOB,
        index="1",
        board=str(new_game()),
        turn="b",
        winner=PIECE_STRINGS[NO_PLAYER],
    )


def test_can_get_address_black():
    assert stored_game_1().black_address() == acc_address_from_bech32(ALICE)


def test_get_address_wrong_black():
    game = stored_game_1()
    game.black = "cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d4"
    expected = (
        "black address is invalid: cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d4: "
        "decoding bech32 failed: invalid checksum (expected 3xn9d3 got 3xn9d4)"
    )
    with pytest.raises(InvalidBlackError) as excinfo:
        game.black_address()
    assert str(excinfo.value) == expected
    with pytest.raises(InvalidBlackError) as excinfo:
        game.validate()
    assert str(excinfo.value) == expected


def test_can_get_address_red():
    assert stored_game_1().red_address() == acc_address_from_bech32(BOB)


def test_get_address_wrong_red():
    game = stored_game_1()
    game.red = "cosmos1xyxs3skf3f4jfqeuv89yyaqvjc6lffavxqhc8h"
    expected = (
        "red address is invalid: cosmos1xyxs3skf3f4jfqeuv89yyaqvjc6lffavxqhc8h: "
        "decoding bech32 failed: invalid checksum (expected xqhc8g got xqhc8h)"
    )
    with pytest.raises(InvalidRedError) as excinfo:
        game.red_address()
    assert str(excinfo.value) == expected
    with pytest.raises(InvalidRedError) as excinfo:
        game.validate()
    assert str(excinfo.value) == expected


def test_parse_game_correct():
    game = stored_game_1().parse_game()
    assert game.pieces == new_game().pieces
    assert game.turn == BLACK_PLAYER


def test_parse_game_can_if_changed_ok():
    stored = stored_game_1()
    stored.board = stored.board.replace("b", "r", 1)
    game = stored.parse_game()
    assert game.pieces != new_game().pieces
    assert str(game) == stored.board


def test_parse_game_wrong_piece_color():
    stored = stored_game_1()
    stored.board = stored.board.replace("b", "w", 1)
    expected = "game cannot be parsed: invalid board, invalid piece at 1, 0"
    with pytest.raises(GameNotParseableError) as excinfo:
        stored.parse_game()
    assert str(excinfo.value) == expected
    with pytest.raises(GameNotParseableError) as excinfo:
        stored.validate()
    assert str(excinfo.value) == expected


def test_parse_game_wrong_turn_color():
    stored = stored_game_1()
    stored.turn = "w"
    with pytest.raises(GameNotParseableError) as excinfo:
        stored.parse_game()
    assert str(excinfo.value) == "game cannot be parsed: Turn: w"
    with pytest.raises(GameNotParseableError) as excinfo:
        stored.validate()
    assert str(excinfo.value) == "game cannot be parsed: Turn: w"


def test_get_player_address_black_correct():
    assert str(stored_game_1().player_address("b")) == ALICE


def test_get_player_address_black_incorrect():
    stored = stored_game_1()
    stored.black = "notanaddress"
    with pytest.raises(InvalidBlackError) as excinfo:
        stored.player_address("b")
    assert str(excinfo.value) == (
        "black address is invalid: notanaddress: "
        "decoding bech32 failed: invalid separator index -1"
    )


def test_get_player_address_red_correct():
    assert str(stored_game_1().player_address("r")) == BOB


def test_get_player_address_red_incorrect():
    stored = stored_game_1()
    stored.red = "notanaddress"
    with pytest.raises(InvalidRedError) as excinfo:
        stored.player_address("r")
    assert str(excinfo.value) == (
        "red address is invalid: notanaddress: "
        "decoding bech32 failed: invalid separator index -1"
    )


def test_empty_red_address():
    stored = stored_game_1()
    stored.red = ""
    with pytest.raises(InvalidRedError) as excinfo:
        stored.validate()
    assert str(excinfo.value) == "red address is invalid: : empty address string is not allowed"


@pytest.mark.parametrize("color", ["w", "*"])
def test_get_player_address_not_found(color):
    assert stored_game_1().player_address(color) is None


def test_get_winner_black_correct():
    stored = stored_game_1()
    stored.winner = "b"
    assert str(stored.winner_address()) == ALICE


def test_get_winner_red_correct():
    stored = stored_game_1()
    stored.winner = "r"
    assert str(stored.winner_address()) == BOB


def test_get_winner_not_yet():
    assert stored_game_1().winner_address() is None


def test_game_validate_ok():
    stored = stored_game_1()
    assert stored.validate() is None
    assert stored.parse_game().turn == BLACK_PLAYER


def test_genesis_default_is_valid():
    genesis = default_genesis()
    assert genesis.validate() is None
    assert genesis.system_info.next_id == 1


def test_genesis_valid_state():
    genesis = GenesisState(
        system_info=SystemInfo(next_id=100),
        stored_game_list=[StoredGame(index="0"), StoredGame(index="1")],
    )
    assert genesis.validate() is None
    assert len(genesis.stored_game_list) == 2


def test_genesis_duplicated_stored_game():
    genesis = GenesisState(stored_game_list=[StoredGame(index="0"), StoredGame(index="0")])
    with pytest.raises(ValueError, match="duplicated index for storedGame"):
        genesis.validate()


def test_default_genesis_expected_initial_next_id():
    assert default_genesis() == GenesisState(
        stored_game_list=[], system_info=SystemInfo(next_id=1)
    )


def test_params_default_and_string():
    params = default_params()
    assert params == Params()
    assert params.validate() is None
    assert str(params) == "{}\n"