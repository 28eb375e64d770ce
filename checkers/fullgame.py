"""A complete recorded game and helpers to replay it."""

from __future__ import annotations

from dataclasses import dataclass

from checkers.keeper import Context
from checkers.messages import MsgPlayMove, MsgPlayMoveResponse
from checkers.msg_server import MsgServer

ALICE = "cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d3"
BOB = "cosmos1xyxs3skf3f4jfqeuv89yyaqvjc6lffavxqhc8g"
CAROL = "cosmos1e0w5t53nrq7p66fye6c8p0ynyhf6y24l4yuxd7"


@dataclass(frozen=True)
class GameMove:
    """One move of a recorded game; player is "b" or "r"."""

    player: str
    from_x: int
    from_y: int
    to_x: int
    to_y: int


GAME1_MOVES: list[GameMove] = [
    GameMove("b", 1, 2, 2, 3),
    GameMove("r", 0, 5, 1, 4),
    GameMove("b", 2, 3, 0, 5),
    GameMove("r", 4, 5, 3, 4),
    GameMove("b", 3, 2, 2, 3),
    GameMove("r", 3, 4, 1, 2),
    GameMove("b", 0, 1, 2, 3),
    GameMove("r", 2, 5, 3, 4),
    GameMove("b", 2, 3, 4, 5),
    GameMove("r", 5, 6, 3, 4),
    GameMove("b", 5, 2, 4, 3),
    GameMove("r", 3, 4, 5, 2),
    GameMove("b", 6, 1, 4, 3),
    GameMove("r", 6, 5, 5, 4),
    GameMove("b", 4, 3, 6, 5),
    GameMove("r", 7, 6, 5, 4),
    GameMove("b", 7, 2, 6, 3),
    GameMove("r", 5, 4, 7, 2),
    GameMove("b", 4, 1, 3, 2),
    GameMove("r", 3, 6, 4, 5),
    GameMove("b", 5, 0, 4, 1),
    GameMove("r", 2, 7, 3, 6),
    GameMove("b", 0, 5, 2, 7),
    GameMove("r", 4, 5, 3, 4),
    GameMove("b", 2, 7, 4, 5),
    # A second capture by the same king
    GameMove("b", 4, 5, 2, 3),
    GameMove("r", 6, 7, 5, 6),
    GameMove("b", 2, 3, 3, 4),
    GameMove("r", 0, 7, 1, 6),
    GameMove("b", 3, 2, 4, 3),
    GameMove("r", 7, 2, 6, 1),
    GameMove("b", 7, 0, 5, 2),
    GameMove("r", 1, 6, 2, 5),
    GameMove("b", 3, 4, 1, 6),
    GameMove("r", 4, 7, 3, 6),
    GameMove("b", 4, 3, 3, 4),
    GameMove("r", 5, 6, 4, 5),
    GameMove("b", 3, 4, 5, 6),
    GameMove("r", 3, 6, 2, 5),
    GameMove("b", 1, 6, 3, 4),
]


def get_player(color: str, black: str, red: str) -> str:
    """Return the black address for "b" and the red address for anything else."""
    return black if color == "b" else red


def play_all_moves(
    server: MsgServer,
    ctx: Context,
    game_index: str,
    black: str,
    red: str,
    moves: list[GameMove],
) -> list[MsgPlayMoveResponse]:
    """Play the moves in order and return the responses; any failure raises."""
    return [
        server.play_move(
            ctx,
            MsgPlayMove(
                creator=get_player(move.player, black, red),
                game_index=game_index,
                from_x=move.from_x,
                from_y=move.from_y,
                to_x=move.to_x,
                to_y=move.to_y,
            ),
        )
        for move in moves
    ]