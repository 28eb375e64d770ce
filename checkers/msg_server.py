"""Transaction handlers of the checkers module."""

from __future__ import annotations

from checkers.errors import (
    CreatorNotPlayerError,
    GameFinishedError,
    GameNotParseableError,
    GameNotFoundError,
    NotPlayerTurnError,
    WrongMoveError,
)
from checkers.keeper import Context, Event, Keeper
from checkers.keys import (
    GAME_CREATED_EVENT_BLACK,
    GAME_CREATED_EVENT_CREATOR,
    GAME_CREATED_EVENT_GAME_INDEX,
    GAME_CREATED_EVENT_RED,
    GAME_CREATED_EVENT_TYPE,
    MOVE_PLAYED_EVENT_BOARD,
    MOVE_PLAYED_EVENT_CAPTURED_X,
    MOVE_PLAYED_EVENT_CAPTURED_Y,
    MOVE_PLAYED_EVENT_CREATOR,
    MOVE_PLAYED_EVENT_GAME_INDEX,
    MOVE_PLAYED_EVENT_TYPE,
    MOVE_PLAYED_EVENT_WINNER,
)
from checkers.messages import (
    MsgCreateGame,
    MsgCreateGameResponse,
    MsgCreatePost,
    MsgCreatePostResponse,
    MsgPlayMove,
    MsgPlayMoveResponse,
)
from checkers.rules import (
    BLACK_PLAYER,
    NO_PLAYER,
    PIECE_STRINGS,
    RED_PLAYER,
    STRING_PIECES,
    MoveError,
    Player,
    Pos,
    new_game,
)
from checkers.stored_game import StoredGame


class MsgServer:
    """Handles the module's transaction messages against a keeper."""

    def __init__(self, keeper: Keeper):
        self.keeper = keeper

    def create_game(self, ctx: Context, msg: MsgCreateGame) -> MsgCreateGameResponse:
        """Store a new game in the starting position and return its index."""
        system_info = self.keeper.get_system_info(ctx)
        if system_info is None:
            raise RuntimeError("SystemInfo not found")
        new_index = str(system_info.next_id)

        game = new_game()
        stored_game = StoredGame(
            index=new_index,
            board=str(game),
            turn=PIECE_STRINGS[game.turn],
            black=msg.black,
            red=msg.red,
            winner=PIECE_STRINGS[NO_PLAYER],
        )
        stored_game.validate()

        self.keeper.set_stored_game(ctx, stored_game)
        system_info.next_id += 1
        self.keeper.set_system_info(ctx, system_info)

        ctx.emit_event(
            Event(
                GAME_CREATED_EVENT_TYPE,
                [
                    (GAME_CREATED_EVENT_CREATOR, msg.creator),
                    (GAME_CREATED_EVENT_GAME_INDEX, new_index),
                    (GAME_CREATED_EVENT_BLACK, msg.black),
                    (GAME_CREATED_EVENT_RED, msg.red),
                ],
            )
        )
        return MsgCreateGameResponse(game_index=new_index)

    def create_post(self, ctx: Context, msg: MsgCreatePost) -> MsgCreatePostResponse:
        """Accept a post; nothing is stored."""
        return MsgCreatePostResponse()

    def play_move(self, ctx: Context, msg: MsgPlayMove) -> MsgPlayMoveResponse:
        """Play a move in a stored game on behalf of the message creator."""
        stored_game = self.keeper.get_stored_game(ctx, msg.game_index)
        if stored_game is None:
            raise GameNotFoundError(msg.game_index)

        if stored_game.winner != PIECE_STRINGS[NO_PLAYER]:
            raise GameFinishedError()

        is_black = stored_game.black == msg.creator
        is_red = stored_game.red == msg.creator
        if not is_black and not is_red:
            raise CreatorNotPlayerError(msg.creator)
        if is_black and is_red:
            piece = STRING_PIECES.get(stored_game.turn)
            player = piece.player if piece is not None else Player("")
        elif is_black:
            player = BLACK_PLAYER
        else:
            player = RED_PLAYER

        try:
            game = stored_game.parse_game()
        except GameNotParseableError as err:
            raise RuntimeError(str(err)) from err

        if not game.turn_is(player):
            raise NotPlayerTurnError(str(player))

        try:
            captured = game.move(Pos(msg.from_x, msg.from_y), Pos(msg.to_x, msg.to_y))
        except MoveError as err:
            raise WrongMoveError(str(err)) from err

        winner = PIECE_STRINGS[game.winner()]
        last_board = str(game)
        stored_game.winner = winner
        stored_game.board = last_board if winner == PIECE_STRINGS[NO_PLAYER] else ""
        stored_game.turn = PIECE_STRINGS[game.turn]
        self.keeper.set_stored_game(ctx, stored_game)

        ctx.emit_event(
            Event(
                MOVE_PLAYED_EVENT_TYPE,
                [
                    (MOVE_PLAYED_EVENT_CREATOR, msg.creator),
                    (MOVE_PLAYED_EVENT_GAME_INDEX, msg.game_index),
                    (MOVE_PLAYED_EVENT_CAPTURED_X, str(captured.x)),
                    (MOVE_PLAYED_EVENT_CAPTURED_Y, str(captured.y)),
                    (MOVE_PLAYED_EVENT_WINNER, winner),
                    (MOVE_PLAYED_EVENT_BOARD, last_board),
                ],
            )
        )
        return MsgPlayMoveResponse(
            captured_x=captured.x,
            captured_y=captured.y,
            winner=winner,
        )