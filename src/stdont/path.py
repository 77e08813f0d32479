"""
Chainable path joining.

``with_`` is ``Path(path) / segment`` spelled as a function, and
``PathBuf`` is a mutable path buffer whose ``with_`` pushes a segment and
hands the same buffer back so calls can be chained. Both follow
``pathlib`` join rules: a separator is inserted as needed and an absolute
segment replaces everything before it.

Examples:
    >>> from pathlib import Path
    >>> PathBuf("a").with_("b").with_("c") == Path("a").joinpath("b").joinpath("c")
    True
    >>> with_("a", "b") == Path("a", "b")
    True

Tags:
    path, pathlib, chaining, stdont
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

StrPath = Union[str, "os.PathLike[str]"]


def with_(path: StrPath, segment: StrPath) -> Path:
    """Join ``segment`` onto ``path`` and return the result for chaining."""
    return Path(path) / segment


class PathBuf:
    """
    Owned, mutable filesystem path.

    ``pathlib.Path`` is immutable, so every join allocates a new object and
    the caller has to rebind. ``PathBuf`` keeps one buffer and mutates it
    in place.

    Examples:
        >>> buf = PathBuf("var")
        >>> buf.push("log")
        >>> str(buf) == os.path.join("var", "log")
        True
    """

    __slots__ = ("_path",)

    def __init__(self, *segments: StrPath):
        self._path = Path(*segments)

    def push(self, segment: StrPath) -> None:
        """Append ``segment`` in place."""
        self._path = self._path / segment

    def with_(self, segment: StrPath) -> PathBuf:
        """Append ``segment`` and return this same buffer."""
        self.push(segment)
        return self

    def as_path(self) -> Path:
        return self._path

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"PathBuf({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathBuf):
            return self._path == other._path
        if isinstance(other, (str, os.PathLike)):
            return self._path == Path(other)
        return NotImplemented

    __hash__ = None  # mutable


__all__ = ["with_", "PathBuf"]
