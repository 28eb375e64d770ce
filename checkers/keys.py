"""Store keys, routes and event names of the checkers module."""

from __future__ import annotations

MODULE_NAME = "checkers"
STORE_KEY = MODULE_NAME
ROUTER_KEY = MODULE_NAME
QUERIER_ROUTE = MODULE_NAME
MEM_STORE_KEY = "mem_checkers"

SYSTEM_INFO_KEY = "SystemInfo-value-"
STORED_GAME_KEY_PREFIX = "StoredGame/value/"

GAME_CREATED_EVENT_TYPE = "new-game-created"
GAME_CREATED_EVENT_CREATOR = "creator"
GAME_CREATED_EVENT_GAME_INDEX = "game-index"
GAME_CREATED_EVENT_BLACK = "black"
GAME_CREATED_EVENT_RED = "red"

MOVE_PLAYED_EVENT_TYPE = "move-played"
MOVE_PLAYED_EVENT_CREATOR = "creator"
MOVE_PLAYED_EVENT_GAME_INDEX = "game-index"
MOVE_PLAYED_EVENT_CAPTURED_X = "captured-x"
MOVE_PLAYED_EVENT_CAPTURED_Y = "captured-y"
MOVE_PLAYED_EVENT_WINNER = "winner"
MOVE_PLAYED_EVENT_BOARD = "board"


def key_prefix(p: str) -> bytes:
    """Return the store prefix for a key family."""
    return p.encode("utf-8")


def stored_game_key(index: str) -> bytes:
    """Return the store key of a stored game from its index."""
    return index.encode("utf-8") + b"/"