"""State access and queries of the checkers module."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Iterator

from checkers.keys import (
    MEM_STORE_KEY,
    MODULE_NAME,
    STORE_KEY,
    STORED_GAME_KEY_PREFIX,
    SYSTEM_INFO_KEY,
    key_prefix,
    stored_game_key,
)
from checkers.stored_game import Params, StoredGame, SystemInfo, default_params

DEFAULT_PAGE_LIMIT = 100
_PARAMS_KEY = b"params"


class KVStore:
    """An in-memory byte key-value store iterated in key order."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        if not key:
            raise ValueError("key is nil")
        if value is None:
            raise ValueError("value is nil")
        self._data[bytes(key)] = bytes(value)

    def delete(self, key: bytes) -> None:
        self._data.pop(bytes(key), None)

    def iterate(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Yield (key, value) pairs whose key starts with prefix, in key order."""
        for key in sorted(k for k in self._data if k.startswith(prefix)):
            yield key, self._data[key]


@dataclass
class Event:
    """A typed event with ordered key/value attributes."""

    type: str
    attributes: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class Context:
    """Execution context: the stores, the emitted events and a logger."""

    stores: dict[str, KVStore] = field(default_factory=dict)
    events: list[Event] = field(default_factory=list)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(MODULE_NAME))

    def emit_event(self, event: Event) -> None:
        self.events.append(event)


class QueryCode(Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    NOT_FOUND = "NotFound"
    INTERNAL = "Internal"


class QueryError(Exception):
    """A query failure carrying a status code and a description."""

    def __init__(self, code: QueryCode, message: str):
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"rpc error: code = {self.code.value} desc = {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))


@dataclass
class PageRequest:
    key: bytes = b""
    offset: int = 0
    limit: int = 0
    count_total: bool = False


@dataclass
class PageResponse:
    next_key: bytes = b""
    total: int = 0


@dataclass
class QueryParamsRequest:
    pass


@dataclass
class QueryParamsResponse:
    params: Params = field(default_factory=Params)


@dataclass
class QueryGetStoredGameRequest:
    index: str = ""


@dataclass
class QueryGetStoredGameResponse:
    stored_game: StoredGame = field(default_factory=StoredGame)


@dataclass
class QueryAllStoredGameRequest:
    pagination: PageRequest | None = None


@dataclass
class QueryAllStoredGameResponse:
    stored_game: list[StoredGame] = field(default_factory=list)
    pagination: PageResponse = field(default_factory=PageResponse)


@dataclass
class QueryGetSystemInfoRequest:
    pass


@dataclass
class QueryGetSystemInfoResponse:
    system_info: SystemInfo = field(default_factory=SystemInfo)


def _encode(value) -> bytes:
    return json.dumps(asdict(value), sort_keys=True).encode("utf-8")


def _paginate(
    entries: list[tuple[bytes, bytes]], page: PageRequest | None
) -> tuple[list[tuple[bytes, bytes]], PageResponse]:
    page = page or PageRequest()
    offset, limit, count_total = page.offset, page.limit, page.count_total
    if offset > 0 and page.key:
        raise ValueError("invalid request, either offset or key is expected, got both")
    if limit == 0:
        limit = DEFAULT_PAGE_LIMIT
        count_total = True

    if page.key:
        start = next((i for i, (k, _) in enumerate(entries) if k >= page.key), len(entries))
        chosen = entries[start:start + limit]
        rest = entries[start + limit:]
        next_key = rest[0][0] if rest else b""
        return chosen, PageResponse(next_key=next_key)

    chosen = entries[offset:offset + limit]
    rest = entries[offset + limit:]
    next_key = rest[0][0] if rest else b""
    total = len(entries) if count_total else 0
    return chosen, PageResponse(next_key=next_key, total=total)


@dataclass
class Keeper:
    """Reads and writes the module's state and answers its queries."""

    store_key: str = STORE_KEY
    mem_key: str = MEM_STORE_KEY

    def _store(self, ctx: Context) -> KVStore:
        return ctx.stores.setdefault(self.store_key, KVStore())

    def logger(self, ctx: Context) -> logging.LoggerAdapter:
        return logging.LoggerAdapter(ctx.logger, {"module": f"x/{MODULE_NAME}"})

    # Stored games

    def _game_key(self, index: str) -> bytes:
        return key_prefix(STORED_GAME_KEY_PREFIX) + stored_game_key(index)

    def set_stored_game(self, ctx: Context, stored_game: StoredGame) -> None:
        self._store(ctx).set(self._game_key(stored_game.index), _encode(stored_game))

    def get_stored_game(self, ctx: Context, index: str) -> StoredGame | None:
        raw = self._store(ctx).get(self._game_key(index))
        if raw is None:
            return None
        return StoredGame(**json.loads(raw))

    def remove_stored_game(self, ctx: Context, index: str) -> None:
        self._store(ctx).delete(self._game_key(index))

    def get_all_stored_game(self, ctx: Context) -> list[StoredGame]:
        prefix = key_prefix(STORED_GAME_KEY_PREFIX)
        return [StoredGame(**json.loads(raw)) for _, raw in self._store(ctx).iterate(prefix)]

    # System info

    def _system_info_key(self) -> bytes:
        return key_prefix(SYSTEM_INFO_KEY) + b"\x00"

    def set_system_info(self, ctx: Context, system_info: SystemInfo) -> None:
        self._store(ctx).set(self._system_info_key(), _encode(system_info))

    def get_system_info(self, ctx: Context) -> SystemInfo | None:
        raw = self._store(ctx).get(self._system_info_key())
        if raw is None:
            return None
        return SystemInfo(**json.loads(raw))

    def remove_system_info(self, ctx: Context) -> None:
        self._store(ctx).delete(self._system_info_key())

    # Params

    def get_params(self, ctx: Context) -> Params:
        return default_params()

    def set_params(self, ctx: Context, params: Params) -> None:
        self._store(ctx).set(_PARAMS_KEY, _encode(params))

    # Queries

    def params(self, ctx: Context, request: QueryParamsRequest | None) -> QueryParamsResponse:
        if request is None:
            raise QueryError(QueryCode.INVALID_ARGUMENT, "invalid request")
        return QueryParamsResponse(params=self.get_params(ctx))

    def stored_game_all(
        self, ctx: Context, request: QueryAllStoredGameRequest | None
    ) -> QueryAllStoredGameResponse:
        if request is None:
            raise QueryError(QueryCode.INVALID_ARGUMENT, "invalid request")
        prefix = key_prefix(STORED_GAME_KEY_PREFIX)
        entries = [(k[len(prefix):], v) for k, v in self._store(ctx).iterate(prefix)]
        try:
            chosen, page = _paginate(entries, request.pagination)
            games = [StoredGame(**json.loads(raw)) for _, raw in chosen]
        except (ValueError, TypeError) as err:
            raise QueryError(QueryCode.INTERNAL, str(err)) from err
        return QueryAllStoredGameResponse(stored_game=games, pagination=page)

    def stored_game(
        self, ctx: Context, request: QueryGetStoredGameRequest | None
    ) -> QueryGetStoredGameResponse:
        if request is None:
            raise QueryError(QueryCode.INVALID_ARGUMENT, "invalid request")
        game = self.get_stored_game(ctx, request.index)
        if game is None:
            raise QueryError(QueryCode.NOT_FOUND, "not found")
        return QueryGetStoredGameResponse(stored_game=game)

    def system_info(
        self, ctx: Context, request: QueryGetSystemInfoRequest | None
    ) -> QueryGetSystemInfoResponse:
        if request is None:
            raise QueryError(QueryCode.INVALID_ARGUMENT, "invalid request")
        info = self.get_system_info(ctx)
        if info is None:
            raise QueryError(QueryCode.NOT_FOUND, "not found")
        return QueryGetSystemInfoResponse(system_info=info)