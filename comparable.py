from __future__ import annotations
from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


@runtime_checkable
class Comparable(Protocol):
    """Capabilities a value needs to take part in the rational sort:
    float conversion, string form, equality and ordering."""

    def to_float(self) -> float: ...

    def to_string(self) -> str: ...

    def equal(self, other: Any) -> bool: ...

    def less_than(self, other: Any) -> bool: ...


@runtime_checkable
class RationalLike(Comparable, Protocol):
    def numerator(self) -> int: ...

    def denominator(self) -> int: ...

    def split(self) -> Tuple[int, int]: ...
