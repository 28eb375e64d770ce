"""Transaction messages of the checkers module and their responses."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from checkers.address import AccAddress, Bech32Error, acc_address_from_bech32
from checkers.errors import (
    InvalidAddressError,
    InvalidGameIndexError,
    InvalidPositionIndexError,
    MoveAbsentError,
)
from checkers.keys import ROUTER_KEY
from checkers.rules import BOARD_DIM
from checkers.stored_game import DEFAULT_INDEX

TYPE_MSG_CREATE_GAME = "create_game"
TYPE_MSG_CREATE_POST = "create_post"
TYPE_MSG_PLAY_MOVE = "play_move"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT_SYNTAX = re.compile(r"[+-]?[0-9]+")


def _sorted_json(fields: dict) -> bytes:
    text = json.dumps(fields, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    text = text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return text.encode("utf-8")


def _check_address(address: str, role: str) -> None:
    try:
        acc_address_from_bech32(address)
    except Bech32Error as err:
        raise InvalidAddressError(f"invalid {role} address ({err})") from err


def _parse_int64(s: str) -> int:
    if not _INT_SYNTAX.fullmatch(s):
        raise ValueError(f'strconv.ParseInt: parsing "{s}": invalid syntax')
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{s}": value out of range')
    return value


@dataclass
class MsgCreateGame:
    """Request to start a game between two players."""

    creator: str = ""
    black: str = ""
    red: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    def msg_type(self) -> str:
        return TYPE_MSG_CREATE_GAME

    def get_signers(self) -> list[AccAddress]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sorted_json({"creator": self.creator, "black": self.black, "red": self.red})

    def validate_basic(self) -> None:
        """Raise InvalidAddressError if any of the three addresses is malformed."""
        _check_address(self.creator, "creator")
        _check_address(self.black, "black")
        _check_address(self.red, "red")


@dataclass
class MsgCreateGameResponse:
    game_index: str = ""


@dataclass
class MsgCreatePost:
    """Request to create a post."""

    creator: str = ""
    title: str = ""
    body: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    def msg_type(self) -> str:
        return TYPE_MSG_CREATE_POST

    def get_signers(self) -> list[AccAddress]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sorted_json({"creator": self.creator, "title": self.title, "body": self.body})

    def validate_basic(self) -> None:
        """Raise InvalidAddressError if the creator address is malformed."""
        _check_address(self.creator, "creator")


@dataclass
class MsgCreatePostResponse:
    pass


@dataclass
class MsgPlayMove:
    """Request to move a piece in a game."""

    creator: str = ""
    game_index: str = ""
    from_x: int = 0
    from_y: int = 0
    to_x: int = 0
    to_y: int = 0

    def route(self) -> str:
        return ROUTER_KEY

    def msg_type(self) -> str:
        return TYPE_MSG_PLAY_MOVE

    def get_signers(self) -> list[AccAddress]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sorted_json(
            {
                "creator": self.creator,
                "gameIndex": self.game_index,
                "fromX": str(self.from_x),
                "fromY": str(self.from_y),
                "toX": str(self.to_x),
                "toY": str(self.to_y),
            }
        )

    def validate_basic(self) -> None:
        """Check the creator, the game index and that the move stays on the board."""
        _check_address(self.creator, "creator")
        try:
            game_index = _parse_int64(self.game_index)
        except ValueError as err:
            raise InvalidGameIndexError(f"not parseable ({err})") from err
        # Negative indices wrap to large unsigned values and so are not "too low".
        if 0 <= game_index < DEFAULT_INDEX:
            raise InvalidGameIndexError(f"number too low ({game_index})")
        for name, value in (
            ("fromX", self.from_x),
            ("toX", self.to_x),
            ("fromY", self.from_y),
            ("toY", self.to_y),
        ):
            if value < 0 or value >= BOARD_DIM:
                raise InvalidPositionIndexError(f"{name} out of range ({value})")
        if self.from_x == self.to_x and self.from_y == self.to_y:
            raise MoveAbsentError(f"x ({self.from_x}) and y ({self.from_y})")


@dataclass
class MsgPlayMoveResponse:
    captured_x: int = 0
    captured_y: int = 0
    winner: str = ""


LEGACY_AMINO_NAMES = {
    MsgCreateGame: "checkers/CreateGame",
    MsgPlayMove: "checkers/PlayMove",
}