"""Bech32 account addresses."""

from __future__ import annotations

from dataclasses import dataclass

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_PREFIX = "cosmos"
MAX_BECH32_LENGTH = 1023
MAX_ADDRESS_LENGTH = 255

_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class Bech32Error(ValueError):
    """Raised when a bech32 string or address is malformed."""


def _polymod(values) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATORS):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _checksum(hrp: str, data: list[int]) -> list[int]:
    pm = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(pm >> 5 * (5 - i)) & 31 for i in range(6)]


def _convert_bits(data, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out = []
    maxv = (1 << to_bits) - 1
    mask = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value >> from_bits:
            raise Bech32Error("invalid data range")
        acc = ((acc << from_bits) | value) & mask
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or (acc << (to_bits - bits)) & maxv:
        raise Bech32Error("invalid incomplete group")
    return out


def _decode_raw(bech: str) -> tuple[str, list[int]]:
    length = len(bech.encode("utf-8"))
    if length < 8 or length > MAX_BECH32_LENGTH:
        raise Bech32Error(f"invalid bech32 string length {length}")
    for ch in bech:
        if not 33 <= ord(ch) <= 126:
            raise Bech32Error(f"invalid character in string: '{ch}'")
    lower = bech.lower()
    if bech != lower and bech != bech.upper():
        raise Bech32Error("string not all lowercase or all uppercase")
    bech = lower
    one = bech.rfind("1")
    if one < 1 or one + 7 > len(bech):
        raise Bech32Error(f"invalid separator index {one}")
    hrp = bech[:one]
    decoded = []
    for ch in bech[one + 1:]:
        idx = CHARSET.find(ch)
        if idx < 0:
            raise Bech32Error(f"invalid character not part of charset: {ord(ch)}")
        decoded.append(idx)
    if _polymod(_hrp_expand(hrp) + decoded) != 1:
        expected = "".join(CHARSET[d] for d in _checksum(hrp, decoded[:-6]))
        raise Bech32Error(f"invalid checksum (expected {expected} got {bech[-6:]})")
    return hrp, decoded[:-6]


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode bytes as a bech32 string with the given human-readable part."""
    hrp = hrp.lower()
    five = _convert_bits(data, 8, 5, True)
    return hrp + "1" + "".join(CHARSET[d] for d in five + _checksum(hrp, five))


def bech32_decode(s: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and bytes."""
    try:
        hrp, five = _decode_raw(s)
        return hrp, bytes(_convert_bits(five, 5, 8, False))
    except Bech32Error as err:
        raise Bech32Error(f"decoding bech32 failed: {err}") from err


@dataclass(frozen=True)
class AccAddress:
    """An account address held as raw bytes."""

    data: bytes = b""

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        if not self.data:
            return ""
        return bech32_encode(BECH32_PREFIX, self.data)


def acc_address_from_bech32(address: str) -> AccAddress:
    """Parse and verify a bech32 account address."""
    if not address.strip():
        raise Bech32Error("empty address string is not allowed")
    hrp, data = bech32_decode(address)
    if hrp != BECH32_PREFIX:
        raise Bech32Error(f"invalid Bech32 prefix; expected {BECH32_PREFIX}, got {hrp}")
    if not data:
        raise Bech32Error("addresses cannot be empty: unknown address")
    if len(data) > MAX_ADDRESS_LENGTH:
        raise Bech32Error(
            f"address max length is {MAX_ADDRESS_LENGTH}, got {len(data)}: unknown address"
        )
    return AccAddress(data)