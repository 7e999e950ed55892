# Area: Builder
"""
oracle_command.args - Ordered command-line argument list
========================================================

Flags are kept as tagged entries rather than a flat token list so a
presence-only flag can never be paired with a value. The flat form is
only produced at the very end, by ``ArgumentList.tokens()``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple, Union

LIST_SEPARATOR = ","

# Boolean flags the oracle server accepts without a value
PRESENCE_FLAGS = frozenset({"--l2.custom"})


@dataclass(frozen=True)
class ValuedFlag:
    """A flag followed by exactly one value token."""

    name: str
    value: str

    def tokens(self) -> List[str]:
        return [self.name, self.value]


@dataclass(frozen=True)
class BareFlag:
    """A presence-only flag, rendered as a single token."""

    name: str

    def tokens(self) -> List[str]:
        return [self.name]


Flag = Union[ValuedFlag, BareFlag]


class ArgumentList:
    """
    Builds the argument vector in emission order.

    Each ``add*`` method returns ``self`` so calls can be chained.
    """

    def __init__(self):
        self._flags: List[Flag] = []

    def add(self, name: str, value: str) -> "ArgumentList":
        self._flags.append(ValuedFlag(name, value))
        return self

    def add_joined(self, name: str, values: Sequence[str]) -> "ArgumentList":
        """Add ``name`` with comma-joined values; skipped when values is empty."""
        if values:
            self._flags.append(ValuedFlag(name, LIST_SEPARATOR.join(values)))
        return self

    def add_bare(self, name: str) -> "ArgumentList":
        self._flags.append(BareFlag(name))
        return self

    def flags(self) -> Tuple[Flag, ...]:
        return tuple(self._flags)

    def tokens(self) -> List[str]:
        result: List[str] = []
        for flag in self._flags:
            result.extend(flag.tokens())
        return result

    def as_dict(self) -> Dict[str, Union[str, bool]]:
        """Map flag name to value; bare flags map to True."""
        return flags_to_dict(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self):
        return iter(self._flags)


def flags_to_dict(flags: Iterable[Flag]) -> Dict[str, Union[str, bool]]:
    result: Dict[str, Union[str, bool]] = {}
    for flag in flags:
        if isinstance(flag, BareFlag):
            result[flag.name] = True
        else:
            result[flag.name] = flag.value
    return result


def parse_tokens(tokens: Sequence[str]) -> List[Flag]:
    """
    Recover tagged flags from a flat token list.

    Only known presence-only flags are bare. Every other flag takes the
    next token as its value, whatever that token looks like.

    Raises:
        ValueError: If a value token appears where a flag name is expected,
            or a valued flag has no value
    """
    flags: List[Flag] = []
    i = 0
    while i < len(tokens):
        name = tokens[i]
        if not name.startswith("--"):
            raise ValueError(f"Expected a flag at position {i}, got {name!r}")
        if name in PRESENCE_FLAGS:
            flags.append(BareFlag(name))
            i += 1
        elif i + 1 >= len(tokens):
            raise ValueError(f"Flag {name!r} at position {i} has no value")
        else:
            flags.append(ValuedFlag(name, tokens[i + 1]))
            i += 2
    return flags
