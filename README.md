# checkers

A checkers (draughts) engine together with a state layer for keeping many
games side by side: stored games keyed by index, a counter for the next game
id, validated messages for creating games and playing moves, queries over the
stored state, and events recording every game created and every move played.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The board

`checkers.rules` holds the game itself. The board is 8×8 and only the dark
squares are used. Black moves first and starts on rows 0–2; red starts on rows
5–7. Captures are forced. After a capture the same player keeps the turn while
the capturing piece can capture again. A piece that reaches the far row becomes
a king and may then move and capture in both directions.

```python
from checkers.rules import new_game, parse, Pos

game = new_game()
print(game)
# *b*b*b*b|b*b*b*b*|*b*b*b*b|********|********|r*r*r*r*|*r*r*r*r|r*r*r*r*

captured = game.move(Pos(1, 2), Pos(2, 3))   # Pos(-1, -1) when nothing was taken
board = parse(str(game))                     # back from the board string
```

The board string has eight rows of eight characters, separated by `|`. In it,
`b`/`r` are men, `B`/`R` are kings and `*` is an empty square. `parse` always
sets the turn to black. The stored game keeps the turn separately.

`Game.move` raises `MoveError` for an illegal move, and `parse` raises
`BoardParseError` for a malformed board string. `Game.winner()` returns the
player who still has pieces once the other player has none; until then it
returns `NO_PLAYER`.

## Addresses

Players are identified by bech32 account addresses with the `cosmos` prefix.
`checkers.address.acc_address_from_bech32` checks an address and decodes it to
an `AccAddress`. It raises `Bech32Error` on a bad checksum, a bad separator, a
wrong prefix or an empty string. `bech32_encode` and `bech32_decode` work on
raw bech32 strings.

## Stored games and the server

`checkers.keeper.Keeper` reads and writes state in an in-memory `KVStore`,
reached through a `Context`. The context also collects the emitted `Event`s.
`checkers.msg_server.MsgServer` handles the messages from `checkers.messages`.

The server needs the next-game counter to be present before it can create a
game:

```python
from checkers.keeper import Context, Keeper
from checkers.messages import MsgCreateGame, MsgPlayMove
from checkers.msg_server import MsgServer
from checkers.stored_game import default_genesis
from checkers.fullgame import ALICE, BOB, CAROL

keeper = Keeper()
ctx = Context()
keeper.set_system_info(ctx, default_genesis().system_info)   # next id 1
server = MsgServer(keeper)

created = server.create_game(ctx, MsgCreateGame(creator=ALICE, black=BOB, red=CAROL))
created.game_index                       # "1"

reply = server.play_move(
    ctx, MsgPlayMove(creator=BOB, game_index="1", from_x=1, from_y=2, to_x=2, to_y=3)
)
reply.captured_x, reply.captured_y, reply.winner   # (-1, -1, "*")

keeper.get_stored_game(ctx, "1").turn    # "r"
[e.type for e in ctx.events]             # ["new-game-created", "move-played"]
```

`create_game` stores the game in the starting position and emits a
`new-game-created` event. It raises `InvalidBlackError` or `InvalidRedError`
when a player's address is malformed. If the counter is missing, it raises
`RuntimeError`.

`play_move` checks the request in this order: that the game exists
(`GameNotFoundError`), that it is not already won (`GameFinishedError`), that
the creator is one of its players (`CreatorNotPlayerError`), that it is that
player's turn (`NotPlayerTurnError`), and that the move is legal
(`WrongMoveError`, which carries the rule that was broken). When the same
address plays both colours, it plays whichever colour is to move. A move that
wins the game sets the stored winner and clears the stored board. Every move
emits a `move-played` event with the captured square, the winner and the
resulting board.

`create_post` accepts an `MsgCreatePost` and stores nothing.

Each message also has `validate_basic()`, which checks its contents without
touching the store. This method raises `InvalidAddressError`,
`InvalidGameIndexError`, `InvalidPositionIndexError` or `MoveAbsentError`. All
of these errors derive from `checkers.errors.CheckersError`.

### Queries

The query methods of `Keeper` are `stored_game`, `stored_game_all`,
`system_info` and `params`. Each raises `QueryError` with a `QueryCode`:
`INVALID_ARGUMENT` when the request is `None`, and `NOT_FOUND` when the item is
missing. `stored_game_all` pages through the games with a `PageRequest`, either
by offset or by key. With no limit it returns up to 100 games and counts the
total.

### Genesis and parameters

`checkers.stored_game` has `StoredGame`, `SystemInfo`, `Params` and
`GenesisState`. `default_genesis()` gives an empty game list with the next id
set to 1. `GenesisState.validate()` rejects two games with the same index. The
module has no parameters yet.

### A recorded game

`checkers.fullgame.GAME1_MOVES` is a complete recorded game that ends in a
black win. `play_all_moves` replays a list of moves through a server and
returns the responses.

## What it does not do

- The store lives in memory only and is not written to disk.
- There is no command-line tool and no network server. Messages and queries
  are plain method calls.
- The package has no function that loads or exports a whole genesis state.
  Set the next-game counter yourself, as shown above, before creating games.