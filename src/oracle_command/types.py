# Area: Inputs
"""
oracle_command.types - Dispute game input values
================================================

Defines the fixed-size Hash value and the LocalGameInputs dataclass
that identify one dispute instance. Both are immutable; the command
builder only reads them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import GameInputError

HASH_LENGTH = 32

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Hash:
    """A 32-byte hash rendered as 0x-prefixed lowercase hex."""

    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray)):
            raise ValueError(f"Hash data must be bytes, got {type(self.data).__name__}")
        if len(self.data) != HASH_LENGTH:
            raise ValueError(f"Hash must be {HASH_LENGTH} bytes, got {len(self.data)}")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_hex(cls, text: str) -> "Hash":
        digits = text[2:] if text[:2] in ("0x", "0X") else text
        if len(digits) != HASH_LENGTH * 2 or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"Hash must be {HASH_LENGTH * 2} hex digits: {text!r}")
        return cls(bytes.fromhex(digits))

    @classmethod
    def from_prefix(cls, prefix: bytes) -> "Hash":
        """Leading bytes from ``prefix``, remaining bytes zero."""
        if len(prefix) > HASH_LENGTH:
            raise ValueError(f"Prefix longer than {HASH_LENGTH} bytes")
        return cls(bytes(prefix) + bytes(HASH_LENGTH - len(prefix)))

    def hex(self) -> str:
        return "0x" + self.data.hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class LocalGameInputs:
    """
    Inputs identifying the dispute being verified.

    Attributes:
        l1_head: L1 block hash the oracle reads L1 data up to
        l2_head: Agreed L2 block hash the trace starts from
        l2_output_root: Agreed output root at l2_head
        l2_claim: Disputed output root
        l2_block_number: L2 block the claim is made at
    """

    l1_head: Hash
    l2_head: Hash
    l2_output_root: Hash
    l2_claim: Hash
    l2_block_number: int

    def __post_init__(self):
        for name in ("l1_head", "l2_head", "l2_output_root", "l2_claim"):
            value = getattr(self, name)
            if not isinstance(value, Hash):
                raise GameInputError(name, value, "expected a Hash")
        number = self.l2_block_number
        if isinstance(number, bool) or not isinstance(number, int):
            raise GameInputError("l2_block_number", number, "expected an int")
        if number < 0:
            raise GameInputError("l2_block_number", number, "must be non-negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocalGameInputs":
        """Parse hex strings and a decimal block number, e.g. from JSON."""
        hashes = {}
        for name in ("l1_head", "l2_head", "l2_output_root", "l2_claim"):
            if name not in data:
                raise GameInputError(name, None, "missing")
            try:
                hashes[name] = Hash.from_hex(str(data[name]))
            except ValueError as e:
                raise GameInputError(name, data[name], str(e)) from e

        raw_number = data.get("l2_block_number")
        if isinstance(raw_number, str) and raw_number.isascii() and raw_number.isdigit():
            raw_number = int(raw_number)
        elif raw_number is None:
            raise GameInputError("l2_block_number", None, "missing")
        return cls(l2_block_number=raw_number, **hashes)
