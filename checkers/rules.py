"""Checkers board, pieces and the rules for moving them."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_DIM = 8
RED = "red"
BLACK = "black"
ROW_SEP = "|"


@dataclass(frozen=True)
class Player:
    """A side in the game, identified by its colour."""

    color: str

    def __str__(self) -> str:
        return "{" + self.color + "}"


@dataclass(frozen=True)
class Piece:
    """A piece on the board, owned by a player and possibly crowned."""

    player: Player
    king: bool = False


@dataclass(frozen=True)
class Pos:
    """A square on the board."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{{{self.x} {self.y}}}"


class MoveError(ValueError):
    """Raised when a move breaks the rules."""


class BoardParseError(ValueError):
    """Raised when a board string cannot be read."""


BLACK_PLAYER = Player(BLACK)
RED_PLAYER = Player(RED)
NO_PLAYER = Player("NO_PLAYER")

NO_PIECE = Piece(NO_PLAYER, False)
NO_POS = Pos(-1, -1)

PIECE_STRINGS: dict[Player, str] = {
    RED_PLAYER: "r",
    BLACK_PLAYER: "b",
    NO_PLAYER: "*",
}

STRING_PIECES: dict[str, Piece] = {
    "r": Piece(RED_PLAYER, False),
    "b": Piece(BLACK_PLAYER, False),
    "R": Piece(RED_PLAYER, True),
    "B": Piece(BLACK_PLAYER, True),
    "*": NO_PIECE,
}

PLAYERS: dict[str, Player] = {RED: RED_PLAYER, BLACK: BLACK_PLAYER}

OPPONENTS: dict[Player, Player] = {
    BLACK_PLAYER: RED_PLAYER,
    RED_PLAYER: BLACK_PLAYER,
}


def capture(src: Pos, dst: Pos) -> Pos:
    """Return the square jumped over when moving from src to dst."""
    return Pos(int((src.x + dst.x) / 2), int((src.y + dst.y) / 2))


def _build_tables():
    usable = frozenset(
        Pos(x, y) for y in range(BOARD_DIM) for x in range((y + 1) % 2, BOARD_DIM, 2)
    )
    moves: dict[Player, dict[Pos, frozenset[Pos]]] = {p: {} for p in PLAYERS.values()}
    jumps: dict[Player, dict[Pos, dict[Pos, Pos]]] = {p: {} for p in PLAYERS.values()}
    king_moves: dict[Pos, frozenset[Pos]] = {}
    king_jumps: dict[Pos, dict[Pos, Pos]] = {}

    for pos in usable:
        all_moves: set[Pos] = set()
        all_jumps: dict[Pos, Pos] = {}
        for player, forward in ((BLACK_PLAYER, 1), (RED_PLAYER, -1)):
            player_moves: set[Pos] = set()
            player_jumps: dict[Pos, Pos] = {}
            for side in (1, -1):
                step = Pos(pos.x + side, pos.y + forward)
                if step in usable:
                    player_moves.add(step)
                landing = Pos(pos.x + 2 * side, pos.y + 2 * forward)
                if landing in usable:
                    player_jumps[landing] = capture(pos, landing)
            moves[player][pos] = frozenset(player_moves)
            jumps[player][pos] = player_jumps
            all_moves |= player_moves
            all_jumps.update(player_jumps)
        king_moves[pos] = frozenset(all_moves)
        king_jumps[pos] = all_jumps

    return usable, moves, jumps, king_moves, king_jumps


USABLE, MOVES, JUMPS, KING_MOVES, KING_JUMPS = _build_tables()


class Game:
    """A checkers position: the pieces on the board and whose turn it is."""

    def __init__(self, pieces=None, turn: Player = BLACK_PLAYER):
        self.pieces: dict[Pos, Piece] = dict(pieces or {})
        self.turn = turn

    def __repr__(self) -> str:
        return f"Game({str(self)!r}, turn={self.turn.color!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.pieces == other.pieces and self.turn == other.turn

    def piece_at(self, pos: Pos) -> bool:
        return pos in self.pieces

    def turn_is(self, player: Player) -> bool:
        return self.turn == player

    def winner(self) -> Player:
        """Return the player who still has pieces when the other has none."""
        black_count = sum(1 for p in self.pieces.values() if p.player == BLACK_PLAYER)
        red_count = sum(1 for p in self.pieces.values() if p.player == RED_PLAYER)
        if black_count > 0 and red_count <= 0:
            return BLACK_PLAYER
        if red_count > 0 and black_count <= 0:
            return RED_PLAYER
        return NO_PLAYER

    def _steps(self, src: Pos, piece: Piece) -> frozenset[Pos]:
        if piece.king:
            return KING_MOVES.get(src, frozenset())
        return MOVES.get(piece.player, {}).get(src, frozenset())

    def _jumps(self, src: Pos, piece: Piece) -> dict[Pos, Pos]:
        if piece.king:
            return KING_JUMPS.get(src, {})
        return JUMPS.get(piece.player, {}).get(src, {})

    def valid_move(self, src: Pos, dst: Pos) -> bool:
        """Whether src to dst is a legal step or jump, honouring forced jumps."""
        if not self.piece_at(src) or self.piece_at(dst):
            return False
        piece = self.pieces[src]
        if dst in self._steps(src, piece):
            return not self._player_has_jump(piece.player)
        return self.valid_jump(src, dst)

    def valid_jump(self, src: Pos, dst: Pos) -> bool:
        """Whether src to dst jumps over an opposing piece."""
        if not self.piece_at(src) or self.piece_at(dst):
            return False
        piece = self.pieces[src]
        cap = self._jumps(src, piece).get(dst)
        if cap is None:
            return False
        jumped = self.pieces.get(cap)
        return jumped is not None and jumped.player == OPPONENTS.get(piece.player)

    def _king_piece(self, dst: Pos) -> None:
        piece = self.pieces.get(dst)
        if piece is None:
            return
        if (dst.y == 0 and piece.player == RED_PLAYER) or (
            dst.y == BOARD_DIM - 1 and piece.player == BLACK_PLAYER
        ):
            self.pieces[dst] = Piece(piece.player, True)

    def _update_turn(self, dst: Pos, jumped: bool) -> None:
        opponent = OPPONENTS[self.turn]
        if (not jumped or not self._jump_possible_from(dst)) and self._player_has_move(opponent):
            self.turn = opponent

    def _jump_possible_from(self, src: Pos) -> bool:
        piece = self.pieces.get(src)
        if piece is None:
            return False
        return any(self.valid_jump(src, dst) for dst in self._jumps(src, piece))

    def _move_possible_from(self, src: Pos) -> bool:
        piece = self.pieces.get(src)
        if piece is None:
            return False
        return any(self.valid_move(src, dst) for dst in self._steps(src, piece))

    def _player_has_move(self, player: Player) -> bool:
        return any(
            piece.player == player
            and (self._move_possible_from(loc) or self._jump_possible_from(loc))
            for loc, piece in list(self.pieces.items())
        )

    def _player_has_jump(self, player: Player) -> bool:
        return any(
            piece.player == player and self._jump_possible_from(loc)
            for loc, piece in list(self.pieces.items())
        )

    def move(self, src: Pos, dst: Pos) -> Pos:
        """Play a move and return the captured square, or NO_POS."""
        if not self.piece_at(src):
            raise MoveError(f"No piece at source position: {src}")
        if self.piece_at(dst):
            raise MoveError(f"Already piece at destination position: {dst}")
        mover = self.pieces[src].player
        if not self.turn_is(mover):
            raise MoveError(f"Not {mover}'s turn")
        if not self.valid_move(src, dst):
            raise MoveError(f"Invalid move: {src} to {dst}")

        captured = NO_POS
        is_jump = self.valid_jump(src, dst)
        self.pieces[dst] = self.pieces.pop(src)
        if is_jump:
            captured = capture(src, dst)
            self.pieces.pop(captured, None)
        self._update_turn(dst, captured != NO_POS)
        self._king_piece(dst)
        return captured

    def __str__(self) -> str:
        rows = []
        for y in range(BOARD_DIM):
            cells = []
            for x in range(BOARD_DIM):
                piece = self.pieces.get(Pos(x, y))
                if piece is None:
                    cells.append(PIECE_STRINGS[NO_PLAYER])
                else:
                    val = PIECE_STRINGS[piece.player]
                    cells.append(val.upper() if piece.king else val)
            rows.append("".join(cells))
        return ROW_SEP.join(rows)


def new_game() -> Game:
    """Return a game in the starting position, black to move."""
    pieces = {}
    for pos in USABLE:
        if 0 <= pos.y < 3:
            pieces[pos] = Piece(BLACK_PLAYER, False)
        if BOARD_DIM - 3 <= pos.y < BOARD_DIM:
            pieces[pos] = Piece(RED_PLAYER, False)
    return Game(pieces, BLACK_PLAYER)


def parse_piece(s: str) -> Piece | None:
    """Return the piece a single character stands for, or None."""
    return STRING_PIECES.get(s)


def parse(s: str) -> Game:
    """Read a board string; the turn is set to black."""
    if len(s.encode("utf-8")) != BOARD_DIM * BOARD_DIM + (BOARD_DIM - 1):
        raise BoardParseError(f"invalid board string: {s}")
    pieces = {}
    for y, row in enumerate(s.split(ROW_SEP)):
        for x, c in enumerate(row):
            if x >= BOARD_DIM or y >= BOARD_DIM:
                raise BoardParseError(f"invalid board, piece out of bounds: {x}, {y}")
            piece = parse_piece(c)
            if piece is None:
                raise BoardParseError(f"invalid board, invalid piece at {x}, {y}")
            if piece != NO_PIECE:
                pieces[Pos(x, y)] = piece
    return Game(pieces, BLACK_PLAYER)