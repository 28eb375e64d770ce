"""Errors raised by the checkers module."""

from __future__ import annotations


class CheckersError(Exception):
    """Base error with a registered code and an optional detail."""

    codespace = "checkers"
    code = 1
    message = "internal error"
    detail_first = True

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if not self.detail:
            return self.message
        if self.detail_first:
            return f"{self.detail}: {self.message}"
        return f"{self.message}: {self.detail}"


class InvalidAddressError(CheckersError):
    codespace = "sdk"
    code = 7
    message = "invalid address"


class InvalidBlackError(CheckersError):
    code = 1100
    message = "black address is invalid"
    detail_first = False


class InvalidRedError(CheckersError):
    code = 1101
    message = "red address is invalid"
    detail_first = False


class GameNotParseableError(CheckersError):
    code = 1102
    message = "game cannot be parsed"
    detail_first = False


class InvalidGameIndexError(CheckersError):
    code = 1103
    message = "game index is invalid"


class InvalidPositionIndexError(CheckersError):
    code = 1104
    message = "position index is invalid"


class MoveAbsentError(CheckersError):
    code = 1105
    message = "there is no move"


class GameNotFoundError(CheckersError):
    code = 1106
    message = "game by id not found"


class CreatorNotPlayerError(CheckersError):
    code = 1107
    message = "message creator is not a player"


class NotPlayerTurnError(CheckersError):
    code = 1108
    message = "player tried to play out of turn"


class WrongMoveError(CheckersError):
    code = 1109
    message = "wrong move"


class GameFinishedError(CheckersError):
    code = 1110
    message = "game is already finished"