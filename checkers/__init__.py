"""Checkers rules, bech32 addresses, stored game state, messages, queries and a move server."""

__version__ = "0.1.0"