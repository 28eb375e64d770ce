"""Stored games, system information, parameters and genesis state."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkers.address import AccAddress, Bech32Error, acc_address_from_bech32
from checkers.errors import GameNotParseableError, InvalidBlackError, InvalidRedError
from checkers.keys import stored_game_key
from checkers.rules import (
    BLACK_PLAYER,
    PIECE_STRINGS,
    RED_PLAYER,
    STRING_PIECES,
    BoardParseError,
    Game,
    parse,
)

DEFAULT_INDEX = 1


@dataclass
class StoredGame:
    """A game as kept in the store: board string, turn, players and winner."""

    index: str = ""
    board: str = ""
    turn: str = ""
    black: str = ""
    red: str = ""
    winner: str = ""

    def black_address(self) -> AccAddress:
        """Return the black player's address, raising InvalidBlackError if malformed."""
        try:
            return acc_address_from_bech32(self.black)
        except Bech32Error as err:
            raise InvalidBlackError(f"{self.black}: {err}") from err

    def red_address(self) -> AccAddress:
        """Return the red player's address, raising InvalidRedError if malformed."""
        try:
            return acc_address_from_bech32(self.red)
        except Bech32Error as err:
            raise InvalidRedError(f"{self.red}: {err}") from err

    def parse_game(self) -> Game:
        """Rebuild the rules game from the board string and the turn."""
        try:
            game = parse(self.board)
        except BoardParseError as err:
            raise GameNotParseableError(str(err)) from err
        piece = STRING_PIECES.get(self.turn)
        if piece is None:
            raise GameNotParseableError(f"Turn: {self.turn}")
        game.turn = piece.player
        return game

    def player_address(self, color: str) -> AccAddress | None:
        """Return the address playing the colour "b" or "r", or None for any other."""
        black = self.black_address()
        red = self.red_address()
        return {
            PIECE_STRINGS[BLACK_PLAYER]: black,
            PIECE_STRINGS[RED_PLAYER]: red,
        }.get(color)

    def winner_address(self) -> AccAddress | None:
        """Return the winner's address, or None while there is no winner."""
        return self.player_address(self.winner)

    def validate(self) -> None:
        """Raise if either address or the game itself is malformed."""
        self.black_address()
        self.red_address()
        self.parse_game()


@dataclass
class SystemInfo:
    """Module-wide counters."""

    next_id: int = 0


@dataclass
class Params:
    """Module parameters; there are none yet."""

    def validate(self) -> None:
        """Parameters are always valid."""
        return None

    def __str__(self) -> str:
        return "{}\n"


def default_params() -> Params:
    """Return the default parameters."""
    return Params()


@dataclass
class GenesisState:
    """The state the module starts from."""

    params: Params = field(default_factory=Params)
    stored_game_list: list[StoredGame] = field(default_factory=list)
    system_info: SystemInfo = field(default_factory=SystemInfo)

    def validate(self) -> None:
        """Raise ValueError if two stored games share an index."""
        seen: set[bytes] = set()
        for game in self.stored_game_list:
            key = stored_game_key(game.index)
            if key in seen:
                raise ValueError("duplicated index for storedGame")
            seen.add(key)
        self.params.validate()


def default_genesis() -> GenesisState:
    """Return the default genesis state: no games, next id 1."""
    return GenesisState(
        params=default_params(),
        stored_game_list=[],
        system_info=SystemInfo(next_id=DEFAULT_INDEX),
    )