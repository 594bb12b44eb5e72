"""Nested-field addressing of records by delimited path strings."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Hashable, Tuple

from ._exceptions import PathError


@dataclass(frozen=True)
class RecordPath:
    """Path to a leaf inside nested mappings and sequences.

    Mapping levels are indexed by key; a segment that is not a key but
    parses as an integer falls back to the integer key. Sequence levels are
    indexed by integer position, negative positions counting from the end.

    Parameters
    ----------
    keys : tuple of str
        Path segments, outermost first.

    Examples
    --------
    >>> path = RecordPath.parse("x.1")
    >>> record = {"x": [9, 0]}
    >>> path.get(record)
    0
    >>> path.set(record, 2.0)
    >>> record
    {'x': [9, 2.0]}
    """

    keys: Tuple[str, ...]

    @classmethod
    def parse(cls, path: str, sep: str = ".") -> RecordPath:
        """Split ``path`` on ``sep``.

        Raises
        ------
        PathError
            If the path is empty or contains an empty segment.
        """
        if not path:
            raise PathError("path must be a non-empty string")
        if not sep:
            raise PathError("path separator must be a non-empty string")
        keys = tuple(path.split(sep))
        if any(key == "" for key in keys):
            raise PathError(
                f"path {path!r} contains an empty segment for separator {sep!r}"
            )
        return cls(keys)

    def locate(self, record: Any) -> Tuple[Any, Hashable]:
        """Return the container holding the leaf and the leaf's key.

        Raises
        ------
        PathError
            If a segment does not resolve or the leaf's container is not
            mutable.
        """
        node = record
        for key in self.keys[:-1]:
            node = node[self._resolve(node, key)]
        key = self._resolve(node, self.keys[-1])
        if not isinstance(node, (MutableMapping, MutableSequence)):
            raise PathError(
                f"cannot write to {type(node).__name__} at path "
                f"{'/'.join(self.keys)!r}"
            )
        return node, key

    def get(self, record: Any) -> Any:
        node, key = self.locate(record)
        return node[key]

    def set(self, record: Any, value: Any) -> None:
        node, key = self.locate(record)
        node[key] = value

    def _resolve(self, node: Any, key: str) -> Hashable:
        if isinstance(node, Mapping):
            if key in node:
                return key
            try:
                index = int(key)
            except ValueError:
                index = None
            if index is not None and index in node:
                return index
            raise PathError(f"key {key!r} not found in record")
        if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            try:
                index = int(key)
            except ValueError:
                raise PathError(
                    f"sequence index must be an integer, got {key!r}"
                ) from None
            if not -len(node) <= index < len(node):
                raise PathError(
                    f"index {index} out of range for sequence of length {len(node)}"
                )
            return index
        raise PathError(
            f"cannot resolve key {key!r} in {type(node).__name__} value"
        )
