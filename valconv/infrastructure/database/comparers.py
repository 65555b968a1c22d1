"""
Value Comparers.

A value comparer supplies equality, hashing and snapshotting for a column
value whose identity says nothing about its content, e.g. a list that is
mutated in place. The snapshot change tracker uses it to decide whether a
value differs from the one last loaded or written.

Usage:
    comparer = ValueComparer.for_sequence()
    baseline = comparer.snapshot(current)
    ...
    if not comparer.equals(baseline, current):
        ...  # re-encode and write
"""

from functools import reduce
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar('T')


def _identity(value):
    return value


def sequence_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Same length and element-wise equal in the same order."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def sequence_hash(values: Sequence[Any]) -> int:
    """Order-sensitive combination of element hashes."""
    return reduce(lambda acc, item: hash((acc, hash(item))), values, 0)


class ValueComparer(Generic[T]):
    """
    Pluggable equality/hash/snapshot strategy for one value type.

    ``None`` is handled here so the supplied functions only ever see
    real values: two ``None`` values are equal, ``None`` hashes to 0 and
    snapshots to ``None``.
    """

    def __init__(
        self,
        equals: Callable[[T, T], bool],
        hash_code: Callable[[T], int],
        snapshot: Callable[[T], T],
    ):
        self._equals = equals
        self._hash_code = hash_code
        self._snapshot = snapshot

    def equals(self, a: Optional[T], b: Optional[T]) -> bool:
        if a is None or b is None:
            return a is b
        return bool(self._equals(a, b))

    def hash_code(self, value: Optional[T]) -> int:
        if value is None:
            return 0
        return self._hash_code(value)

    def snapshot(self, value: Optional[T]) -> Optional[T]:
        """Independent copy to serve as the baseline for the next comparison."""
        if value is None:
            return None
        return self._snapshot(value)

    @classmethod
    def default(cls) -> "ValueComparer[Any]":
        """Comparer for immutable values: ``==``, ``hash`` and no copy."""
        return cls(equals=lambda a, b: a == b, hash_code=hash, snapshot=_identity)

    @classmethod
    def for_sequence(cls, factory: Callable[[Any], Any] = list) -> "ValueComparer[Any]":
        """
        Comparer for a mutable ordered sequence.

        Args:
            factory: Builds the snapshot copy from the current sequence

        Returns:
            ValueComparer comparing element by element in order
        """
        return cls(equals=sequence_equal, hash_code=sequence_hash, snapshot=factory)

    def __repr__(self) -> str:
        return f"ValueComparer(equals={self._equals!r})"


INT_LIST_COMPARER: ValueComparer = ValueComparer.for_sequence(list)


__all__ = [
    "ValueComparer",
    "INT_LIST_COMPARER",
    "sequence_equal",
    "sequence_hash",
]
